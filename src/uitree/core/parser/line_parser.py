"""Parse single lines of a debug description into ElementNodes."""

import re

from uitree.config import EXTRA_FIELDS, MAIN_WINDOW_MARKER
from uitree.exceptions import LineParseError
from uitree.models.element import ElementNode, ElementType, Frame

_NUMBER = r"(-?[\d.]+)"
_PAIR = rf"\{{{_NUMBER}, {_NUMBER}\}}"

# indent marker, type name, hex handle, special segment, {{x, y}, {w, h}}, extras
_LINE_RE = re.compile(rf"([ →]*)(\S+) 0x([0-9a-f]+): (.*)?\{{{_PAIR}, {_PAIR}\}}(, )?(.*)?")
_TRAITS_RE = re.compile(r"traits: (\d+)")
_EXTRA_RES: dict[str, re.Pattern[str]] = {
    name: re.compile(rf"\b{name}: '([^']*)'($|,)") for name, _attr in EXTRA_FIELDS
}


def _extra(extras: str, name: str) -> str | None:
    m = _EXTRA_RES[name].search(extras)
    return m.group(1) if m else None


def parse_line(line: str) -> ElementNode | None:
    """Parse one element line of a debug description.

    Returns None when the line does not have the expected shape, when a
    geometry number is not a valid float, or when the indentation gives a
    negative depth.
    """
    m = _LINE_RE.search(line)
    if m is None:
        return None

    try:
        x, y, width, height = (float(m.group(i)) for i in range(5, 9))
    except ValueError:
        return None

    depth = len(m.group(1)) // 2 - 1
    if depth < 0:
        return None

    special = m.group(4) or ""
    extras = m.group(10) or ""
    traits = _TRAITS_RE.search(special)

    node = ElementNode(
        source=line,
        depth=depth,
        element_type=ElementType.from_name(m.group(2)),
        handle=int(m.group(3), 16),
        frame=Frame(x=x, y=y, width=width, height=height),
        traits=int(traits.group(1)) if traits else None,
        is_main_window=MAIN_WINDOW_MARKER in special,
    )
    for name, attr in EXTRA_FIELDS:
        setattr(node, attr, _extra(extras, name))
    return node


def parse_line_strict(line: str, line_number: int | None = None) -> ElementNode:
    """Like parse_line, but raise LineParseError instead of returning None."""
    node = parse_line(line)
    if node is None:
        raise LineParseError(line, line_number)
    return node
