"""List ready-to-paste accessors for every element in a debug description."""

from loguru import logger

from uitree.core.address.compiler import to_accessor_path
from uitree.core.tree.builder import build_tree_from_description
from uitree.models.element import ElementNode


def tree_accessors(root: ElementNode, root_var_name: str) -> list[str]:
    """Return accessor expressions for the addressable nodes of a parsed tree, in pre-order."""
    accessors = [
        path for node in root.walk() if (path := to_accessor_path(node, root_var_name)) is not None
    ]
    logger.debug("Generated {} accessors", len(accessors))
    return accessors


def accessor_dump(root_var_name: str, full_debug_text: str) -> list[str]:
    """Return accessor expressions for all addressable elements, in pre-order.

    Elements without an accessor of their own (the root, the main window,
    unlabelled Other containers) are left out. A description that cannot be
    parsed gives an empty list.

    Args:
        root_var_name: Expression naming the application in test code, e.g. "app".
        full_debug_text: The complete debug description of the application.

    Returns:
        One accessor expression per addressable element.
    """
    root = build_tree_from_description(full_debug_text)
    if root is None:
        return []
    return tree_accessors(root, root_var_name)
