"""Shared test fixtures."""

import pytest

from tests.unit.samples import SAMPLE_DESCRIPTION
from uitree.core.tree.builder import build_tree_from_description
from uitree.models.element import ElementNode


@pytest.fixture
def sample_tree() -> ElementNode:
    """Return the parsed tree of SAMPLE_DESCRIPTION."""
    root = build_tree_from_description(SAMPLE_DESCRIPTION)
    assert root is not None
    return root


@pytest.fixture
def nodes_by_handle(sample_tree: ElementNode) -> dict[int, ElementNode]:
    return {node.handle: node for node in sample_tree.walk()}
