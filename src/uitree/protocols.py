"""Protocols for the live element lookup that accessors are resolved against."""

from typing import Protocol, runtime_checkable

from uitree.models.element import ElementType


@runtime_checkable
class QueryProtocol(Protocol):
    """A set of same-type children under one parent element."""

    def __getitem__(self, index: str) -> "ElementProtocol":
        """Return the child whose identifier or label matches ``index``."""
        ...

    def element_at_index(self, index: int) -> "ElementProtocol":
        """Return the child at a 0-based position."""
        ...


@runtime_checkable
class ElementProtocol(Protocol):
    """A live element in the application under test."""

    def children_matching_type(self, element_type: ElementType) -> QueryProtocol:
        """Return a query over direct children of the given type."""
        ...
