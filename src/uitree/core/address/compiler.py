"""Compile element nodes into accessor expressions.

An accessor starts at the application and descends through the element's
ancestors. Each ancestor either contributes a lookup step or is skipped:

- the main window is implicit and never written out;
- an unclassified (Other) element without identifier or label is transparent;
- everything else is looked up by identifier/label when it has one, and by
  position among same-type siblings otherwise.

Only element type, index and main-window status are used; geometry and
traits are ignored.
"""

from dataclasses import dataclass

from loguru import logger

from uitree.config import MISSING_INDEX_SENTINEL
from uitree.exceptions import UnresolvableAddressError
from uitree.models.element import ElementNode, ElementType
from uitree.protocols import ElementProtocol


@dataclass(frozen=True)
class AccessorStep:
    """One lookup: children of ``element_type``, then ``key``.

    A str key is an identifier/label lookup, an int key a position.
    """

    element_type: ElementType
    key: str | int


def _chain(node: ElementNode) -> list[ElementNode]:
    """Elements from just below the root down to ``node``.

    The walk stops at an Application element, or at an element without a
    parent. Neither is part of the chain.
    """
    chain: list[ElementNode] = []
    current = node
    while current.element_type is not ElementType.APPLICATION:
        if current.parent is None:
            logger.warning("Tree root is not an application: {}", current.describe())
            break
        chain.append(current)
        current = current.parent
    chain.reverse()
    return chain


def _is_transparent(elem: ElementNode) -> bool:
    return elem.is_main_window or (elem.element_type is ElementType.OTHER and elem.index is None)


def _step(elem: ElementNode) -> AccessorStep:
    if elem.index is not None:
        return AccessorStep(elem.element_type, elem.index)
    numeric = elem.numeric_index
    return AccessorStep(
        elem.element_type, numeric if numeric is not None else MISSING_INDEX_SENTINEL
    )


def _addressable_chain(node: ElementNode) -> list[ElementNode]:
    """Return the chain for ``node``, rejecting nodes with no accessor of their own."""
    chain = _chain(node)
    if not chain:
        raise UnresolvableAddressError(node, "Root element has no accessor of its own")
    if node.is_main_window:
        raise UnresolvableAddressError(node, "Main window is implicit in accessors")
    if _is_transparent(node):
        raise UnresolvableAddressError(node, "Unclassified element without identifier or label")
    return chain


def compile_steps(node: ElementNode) -> tuple[AccessorStep, ...]:
    """Return the lookup steps that lead from the application to ``node``.

    Raises:
        UnresolvableAddressError: ``node`` is the root, the main window, or an
            Other element without identifier or label.
    """
    chain = _addressable_chain(node)
    return tuple(_step(elem) for elem in chain if not _is_transparent(elem))


def _quote(index: str) -> str:
    escaped = index.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_steps(steps: tuple[AccessorStep, ...], root_expression: str) -> str:
    expr = root_expression
    for step in steps:
        expr += f".{step.element_type.accessor}"
        if isinstance(step.key, str):
            expr += f"[{_quote(step.key)}]"
        else:
            expr += f".elementAtIndex({step.key})"
    return expr


def compile_accessor_path(node: ElementNode, root_expression: str) -> str:
    """Return the accessor expression for ``node``, or raise UnresolvableAddressError."""
    return render_steps(compile_steps(node), root_expression)


def to_accessor_path(node: ElementNode, root_expression: str) -> str | None:
    """Return the accessor expression for ``node``, or None if it has none.

    An ``elementAtIndex(-1)`` step in the result means the element could not
    be found among its siblings and the accessor needs manual review.
    """
    try:
        return compile_accessor_path(node, root_expression)
    except UnresolvableAddressError:
        return None


def resolve_element(node: ElementNode, app: ElementProtocol) -> ElementProtocol:
    """Locate the live counterpart of ``node`` starting from ``app``.

    Every element between the application and ``node`` is looked up, the
    main window and unlabelled Other containers included, since each lookup
    sees direct children only.

    Raises:
        UnresolvableAddressError: ``node`` has no accessor, or its position
            among siblings is unknown.
    """
    current = app
    for elem in _addressable_chain(node):
        query = current.children_matching_type(elem.element_type)
        if elem.index is not None:
            current = query[elem.index]
            continue
        position = elem.numeric_index
        if position is None:
            raise UnresolvableAddressError(elem, "Position among siblings is unknown")
        current = query.element_at_index(position)
    return current
