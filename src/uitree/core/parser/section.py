"""Split a full debug description into its labeled sections."""

import re

from uitree.config import SECTION_LABEL

# A label line ("Element subtree:") followed by a block whose first line starts
# with " →" and whose remaining lines start with a space.
_SECTION_RE = re.compile(r"\n([^:\n]+):\n( →.+(?:\n .*)*)")


def extract_sections(full_text: str) -> dict[str, str]:
    """Return a mapping of section label -> section body.

    A later section with the same label replaces an earlier one.
    """
    text = full_text.replace("\r\n", "\n")
    # Labels are recognised only after a newline, so allow one on the first line.
    if not text.startswith("\n"):
        text = "\n" + text
    return {m.group(1).strip(): m.group(2) for m in _SECTION_RE.finditer(text)}


def extract_section(full_text: str, label: str = SECTION_LABEL) -> str | None:
    """Return the body of the section named ``label``, or None if absent."""
    return extract_sections(full_text).get(label)
