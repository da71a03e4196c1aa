"""Rebuild the element tree from the indented lines of a debug description.

Each line carries its own depth. Lines arrive in pre-order, so a line is
either the first child of the previous line or belongs somewhere higher up
the chain of open ancestors. Placing a node is attempted against the current
parent first; when the depth does not fit, the attempt yields a ``Backtrack``
and is retried one level higher until it fits or the chain runs out.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from uitree.config import SECTION_LABEL
from uitree.core.parser.line_parser import parse_line, parse_line_strict
from uitree.core.parser.section import extract_section
from uitree.exceptions import ParseError, TreeStructureError
from uitree.models.element import ElementNode


@dataclass(frozen=True)
class Attached:
    """The node was attached as a child of the level it was offered to."""

    node: ElementNode


@dataclass(frozen=True)
class Backtrack:
    """The node's depth does not fit the level it was offered to."""

    node: ElementNode


AttachResult = Attached | Backtrack


def _try_attach(parent: ElementNode, node: ElementNode) -> AttachResult:
    if node.depth - parent.depth != 1:
        return Backtrack(node)
    parent.attach(node)
    return Attached(node)


def _retry_one_level_up(open_ancestors: list[ElementNode], node: ElementNode) -> AttachResult:
    """Close the innermost open ancestor and offer ``node`` to the next one out."""
    rejected_by = open_ancestors.pop()
    if node.depth - rejected_by.depth > 1:
        raise TreeStructureError(node, "Node is nested more than one level below its parent")
    if not open_ancestors:
        raise TreeStructureError(node, "Backtracked past the root")
    return _try_attach(open_ancestors[-1], node)


def build_tree(lines: Sequence[str]) -> ElementNode:
    """Build an element tree from element lines.

    The first line is the root. Every later line must land exactly one level
    below one of the currently open ancestors.

    Args:
        lines: Element lines in the order they appear in the dump.

    Returns:
        The root node with all descendants attached.

    Raises:
        LineParseError: A line is not an element line.
        TreeStructureError: A node's depth fits under no open ancestor.
        ParseError: There are no lines at all.
    """
    nodes = (parse_line_strict(line, number) for number, line in enumerate(lines, start=1))
    root = next(nodes, None)
    if root is None:
        msg = "No element lines to build a tree from"
        raise ParseError(msg)

    # Chain from the root down to the most recently attached node.
    open_ancestors = [root]
    count = 1
    for node in nodes:
        result = _try_attach(open_ancestors[-1], node)
        while isinstance(result, Backtrack):
            result = _retry_one_level_up(open_ancestors, result.node)
        open_ancestors.append(result.node)
        count += 1

    logger.debug("Built element tree with {} nodes", count)
    return root


def build_tree_from_description(full_text: str) -> ElementNode | None:
    """Build the element tree from a complete debug description.

    Every line of the element subtree is checked on its own before the tree
    is assembled. Any failure is logged and reported as None.
    """
    section = extract_section(full_text, SECTION_LABEL)
    if section is None:
        logger.warning("No {!r} section in debug description", SECTION_LABEL)
        return None

    lines = section.split("\n")
    for number, line in enumerate(lines, start=1):
        if parse_line(line) is None:
            logger.warning("Cannot parse line {} of {!r}: {!r}", number, SECTION_LABEL, line)
            return None

    try:
        return build_tree(lines)
    except ParseError as e:
        logger.warning("Cannot build element tree: {}", e)
        return None
