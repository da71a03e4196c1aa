"""Render element trees as indented text."""

import io

from uitree.models.element import ElementNode


def render_tree(root: ElementNode, *, indent: str = " ") -> str:
    """Render a node and its descendants, one description per line.

    Each line is indented by ``indent`` repeated (depth - root depth) times.
    """
    out = io.StringIO()
    for node in root.walk():
        out.write(f"{indent * (node.depth - root.depth)}{node.describe()}\n")
    return out.getvalue()
