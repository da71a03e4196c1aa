"""Tests for compiling nodes into accessor expressions."""

import pytest

from tests.unit.fakes import TreeElement
from tests.unit.samples import describe
from uitree.core.address.compiler import (
    AccessorStep,
    compile_accessor_path,
    compile_steps,
    resolve_element,
    to_accessor_path,
)
from uitree.core.parser.line_parser import parse_line
from uitree.core.tree.builder import build_tree_from_description
from uitree.exceptions import UnresolvableAddressError
from uitree.models.element import ElementNode, ElementType

BUTTON_ROW = [
    " →Application 0x1: {{0.0, 0.0}, {375.0, 667.0}}",
    "    Window 0x2: {{0.0, 0.0}, {375.0, 667.0}}, identifier: 'Root'",
    "      Button 0x3: {{0.0, 0.0}, {10.0, 10.0}}",
    "      StaticText 0x4: {{0.0, 0.0}, {10.0, 10.0}}",
    "      Button 0x5: {{0.0, 0.0}, {10.0, 10.0}}, identifier: 'Submit'",
    "      Button 0x6: {{0.0, 0.0}, {10.0, 10.0}}",
]


def _tree(*lines: str) -> dict[int, ElementNode]:
    root = build_tree_from_description(describe(*lines))
    assert root is not None
    return {n.handle: n for n in root.walk()}


def _detached_table(nodes_by_handle: dict[int, ElementNode]) -> ElementNode:
    """A Table that points at the Other container but is not among its children."""
    table = parse_line("        Table 0x7ff0: {{0.0, 64.0}, {375.0, 603.0}}")
    assert table is not None
    table.parent = nodes_by_handle[0x7F9C]
    return table


def test_identifier_beats_position() -> None:
    nodes = _tree(*BUTTON_ROW)
    assert to_accessor_path(nodes[5], "app") == 'app.windows["Root"].buttons["Submit"]'


def test_position_among_same_type_siblings() -> None:
    nodes = _tree(*BUTTON_ROW)
    assert to_accessor_path(nodes[3], "app") == 'app.windows["Root"].buttons.elementAtIndex(0)'
    assert to_accessor_path(nodes[6], "app") == 'app.windows["Root"].buttons.elementAtIndex(2)'


def test_label_used_when_no_identifier() -> None:
    nodes = _tree(
        " →Application 0x1: {{0.0, 0.0}, {1.0, 1.0}}",
        "    Button 0x2: {{0.0, 0.0}, {1.0, 1.0}}, label: 'Cancel'",
    )
    assert to_accessor_path(nodes[2], "self.app") == 'self.app.buttons["Cancel"]'


def test_main_window_is_elided(sample_tree: ElementNode) -> None:
    for node in sample_tree.walk():
        path = to_accessor_path(node, "app")
        if path is not None:
            assert ".windows" not in path


def test_main_window_itself_has_no_accessor(nodes_by_handle: dict[int, ElementNode]) -> None:
    window = nodes_by_handle[0x7F9B]
    assert window.is_main_window
    assert to_accessor_path(window, "app") is None


def test_root_has_no_accessor(sample_tree: ElementNode) -> None:
    assert to_accessor_path(sample_tree, "app") is None


def test_unlabelled_other_is_unresolvable_as_terminal(
    nodes_by_handle: dict[int, ElementNode],
) -> None:
    other = nodes_by_handle[0x7F9C]
    assert to_accessor_path(other, "app") is None
    with pytest.raises(UnresolvableAddressError) as excinfo:
        compile_accessor_path(other, "app")
    assert excinfo.value.node is other


def test_unlabelled_other_is_transparent_as_ancestor(
    nodes_by_handle: dict[int, ElementNode],
) -> None:
    nav_bar = nodes_by_handle[0x7F9D]
    assert nav_bar.parent is not None
    assert nav_bar.parent.element_type is ElementType.OTHER
    assert to_accessor_path(nav_bar, "app") == 'app.navigationBars["Settings"]'


def test_labelled_other_is_a_segment() -> None:
    nodes = _tree(
        " →Application 0x1: {{0.0, 0.0}, {1.0, 1.0}}",
        "    Other 0x2: {{0.0, 0.0}, {1.0, 1.0}}, identifier: 'card'",
        "      Button 0x3: {{0.0, 0.0}, {1.0, 1.0}}, label: 'Like'",
    )
    assert to_accessor_path(nodes[2], "app") == 'app.otherElements["card"]'
    assert to_accessor_path(nodes[3], "app") == 'app.otherElements["card"].buttons["Like"]'


def test_missing_position_uses_sentinel(nodes_by_handle: dict[int, ElementNode]) -> None:
    table = _detached_table(nodes_by_handle)
    assert table.numeric_index is None
    assert to_accessor_path(table, "app") == "app.tables.elementAtIndex(-1)"


def test_geometry_and_traits_do_not_matter() -> None:
    a = _tree(
        " →Application 0x1: {{0.0, 0.0}, {1.0, 1.0}}",
        "    Switch 0x2: traits: 1, {{0.0, 0.0}, {1.0, 1.0}}, label: 'Wi-Fi'",
    )
    b = _tree(
        " →Application 0x1: {{0.0, 0.0}, {1.0, 1.0}}",
        "    Switch 0x2: traits: 99, {{-5.0, 300.0}, {40.0, 20.0}}, label: 'Wi-Fi'",
    )
    assert to_accessor_path(a[2], "app") == to_accessor_path(b[2], "app") == (
        'app.switches["Wi-Fi"]'
    )


def test_quotes_in_index_are_escaped() -> None:
    nodes = _tree(
        " →Application 0x1: {{0.0, 0.0}, {1.0, 1.0}}",
        '    StaticText 0x2: {{0.0, 0.0}, {1.0, 1.0}}, label: \'Say "hi" \\ bye\'',
    )
    assert to_accessor_path(nodes[2], "app") == 'app.staticTexts["Say \\"hi\\" \\\\ bye"]'


def test_non_application_root_is_treated_as_root() -> None:
    nodes = _tree(
        " →Window 0x1: {{0.0, 0.0}, {1.0, 1.0}}",
        "    Button 0x2: {{0.0, 0.0}, {1.0, 1.0}}, label: 'OK'",
    )
    assert to_accessor_path(nodes[2], "app") == 'app.buttons["OK"]'
    assert to_accessor_path(nodes[1], "app") is None


def test_compile_steps(nodes_by_handle: dict[int, ElementNode]) -> None:
    text = nodes_by_handle[0x7FA1]
    assert compile_steps(text) == (
        AccessorStep(ElementType.TABLE, 0),
        AccessorStep(ElementType.CELL, 0),
        AccessorStep(ElementType.STATIC_TEXT, "Wi-Fi"),
    )


def test_resolve_element_finds_every_addressable_node(sample_tree: ElementNode) -> None:
    for node in sample_tree.walk():
        if to_accessor_path(node, "app") is None:
            continue
        resolved = resolve_element(node, TreeElement(sample_tree))
        assert isinstance(resolved, TreeElement)
        assert resolved.node is node


def test_resolve_element_under_main_window(
    sample_tree: ElementNode, nodes_by_handle: dict[int, ElementNode]
) -> None:
    submit = nodes_by_handle[0x7FA3]
    assert to_accessor_path(submit, "app") == 'app.buttons["Submit"]'
    resolved = resolve_element(submit, TreeElement(sample_tree))
    assert isinstance(resolved, TreeElement)
    assert resolved.node is submit


def test_resolve_element_looks_up_every_ancestor(
    sample_tree: ElementNode, nodes_by_handle: dict[int, ElementNode]
) -> None:
    app = TreeElement(sample_tree)
    resolve_element(nodes_by_handle[0x7FA2], app)
    assert app.calls == [
        "children_matching_type(Window)",
        "element_at_index(0)",
        "children_matching_type(Other)",
        "element_at_index(0)",
        "children_matching_type(Table)",
        "element_at_index(0)",
        "children_matching_type(Cell)",
        "['bluetooth']",
    ]


def test_resolve_element_rejects_unresolvable(
    sample_tree: ElementNode, nodes_by_handle: dict[int, ElementNode]
) -> None:
    for handle in (0x7F9A, 0x7F9B, 0x7F9C):
        with pytest.raises(UnresolvableAddressError):
            resolve_element(nodes_by_handle[handle], TreeElement(sample_tree))


def test_resolve_element_rejects_unknown_position(
    sample_tree: ElementNode, nodes_by_handle: dict[int, ElementNode]
) -> None:
    table = _detached_table(nodes_by_handle)
    with pytest.raises(UnresolvableAddressError) as excinfo:
        resolve_element(table, TreeElement(sample_tree))
    assert excinfo.value.node is table
