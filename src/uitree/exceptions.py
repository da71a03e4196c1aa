"""Exception hierarchy for uitree."""

from uitree.models.element import ElementNode


class UITreeError(Exception):
    """Base exception for the package."""


class ParseError(UITreeError):
    """Raised when a debug description cannot be turned into a tree."""


class LineParseError(ParseError):
    """A single line does not have the shape of an element line."""

    def __init__(self, line: str, line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Cannot parse {where}: {line!r}")


class TreeStructureError(ParseError):
    """A node's depth does not fit anywhere in the tree built so far."""

    def __init__(self, node: ElementNode, reason: str) -> None:
        self.node = node
        super().__init__(f"{reason}: {node.source!r} (depth {node.depth})")


class UnresolvableAddressError(UITreeError):
    """A node has no accessor expression of its own."""

    def __init__(self, node: ElementNode, reason: str) -> None:
        self.node = node
        super().__init__(f"{reason}: {node.describe()}")
