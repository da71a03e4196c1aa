"""Configuration constants for uitree."""

# Label of the debug-description section that holds the element hierarchy.
SECTION_LABEL: str = "Element subtree"

# Marker text on a window line that designates the main window.
MAIN_WINDOW_MARKER: str = "Main Window"

# Variable name used for the application in generated accessors.
DEFAULT_ROOT_EXPRESSION: str = "app"

# Positional index emitted when a node cannot be found among its siblings.
# Accessors containing it need manual review.
MISSING_INDEX_SENTINEL: int = -1

# Quoted fields mined from the trailing part of an element line,
# as (debug-description name, ElementNode attribute).
EXTRA_FIELDS: tuple[tuple[str, str], ...] = (
    ("label", "label"),
    ("identifier", "identifier"),
    ("value", "value"),
    ("placeholderValue", "placeholder_value"),
)
