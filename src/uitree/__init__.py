"""Rebuild UI element trees from debug descriptions and derive accessors."""

from uitree.core.address.compiler import compile_accessor_path, resolve_element, to_accessor_path
from uitree.core.address.dump import accessor_dump
from uitree.core.parser.line_parser import parse_line
from uitree.core.tree.builder import build_tree, build_tree_from_description
from uitree.models.element import ElementNode, ElementType, Frame

__all__ = [
    "ElementNode",
    "ElementType",
    "Frame",
    "accessor_dump",
    "build_tree",
    "build_tree_from_description",
    "compile_accessor_path",
    "parse_line",
    "resolve_element",
    "to_accessor_path",
]
