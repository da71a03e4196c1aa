"""Domain models for parsed UI element trees."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger


class ElementType(Enum):
    """Automation element categories.

    The value is the type name as printed in a debug description.
    """

    ANY = "Any"
    OTHER = "Other"
    APPLICATION = "Application"
    GROUP = "Group"
    WINDOW = "Window"
    SHEET = "Sheet"
    DRAWER = "Drawer"
    ALERT = "Alert"
    DIALOG = "Dialog"
    BUTTON = "Button"
    RADIO_BUTTON = "RadioButton"
    RADIO_GROUP = "RadioGroup"
    CHECK_BOX = "CheckBox"
    DISCLOSURE_TRIANGLE = "DisclosureTriangle"
    POP_UP_BUTTON = "PopUpButton"
    COMBO_BOX = "ComboBox"
    MENU_BUTTON = "MenuButton"
    TOOLBAR_BUTTON = "ToolbarButton"
    POPOVER = "Popover"
    KEYBOARD = "Keyboard"
    KEY = "Key"
    NAVIGATION_BAR = "NavigationBar"
    TAB_BAR = "TabBar"
    TAB_GROUP = "TabGroup"
    TOOLBAR = "Toolbar"
    STATUS_BAR = "StatusBar"
    TABLE = "Table"
    TABLE_ROW = "TableRow"
    TABLE_COLUMN = "TableColumn"
    OUTLINE = "Outline"
    OUTLINE_ROW = "OutlineRow"
    BROWSER = "Browser"
    COLLECTION_VIEW = "CollectionView"
    SLIDER = "Slider"
    PAGE_INDICATOR = "PageIndicator"
    PROGRESS_INDICATOR = "ProgressIndicator"
    ACTIVITY_INDICATOR = "ActivityIndicator"
    SEGMENTED_CONTROL = "SegmentedControl"
    PICKER = "Picker"
    PICKER_WHEEL = "PickerWheel"
    SWITCH = "Switch"
    TOGGLE = "Toggle"
    LINK = "Link"
    IMAGE = "Image"
    ICON = "Icon"
    SEARCH_FIELD = "SearchField"
    SCROLL_VIEW = "ScrollView"
    SCROLL_BAR = "ScrollBar"
    STATIC_TEXT = "StaticText"
    TEXT_FIELD = "TextField"
    SECURE_TEXT_FIELD = "SecureTextField"
    DATE_PICKER = "DatePicker"
    TEXT_VIEW = "TextView"
    MENU = "Menu"
    MENU_ITEM = "MenuItem"
    MENU_BAR = "MenuBar"
    MENU_BAR_ITEM = "MenuBarItem"
    MAP = "Map"
    WEB_VIEW = "WebView"
    INCREMENT_ARROW = "IncrementArrow"
    DECREMENT_ARROW = "DecrementArrow"
    TIMELINE = "Timeline"
    RATING_INDICATOR = "RatingIndicator"
    VALUE_INDICATOR = "ValueIndicator"
    SPLIT_GROUP = "SplitGroup"
    SPLITTER = "Splitter"
    RELEVANCE_INDICATOR = "RelevanceIndicator"
    COLOR_WELL = "ColorWell"
    HELP_TAG = "HelpTag"
    MATTE = "Matte"
    DOCK_ITEM = "DockItem"
    RULER = "Ruler"
    RULER_MARKER = "RulerMarker"
    GRID = "Grid"
    LEVEL_INDICATOR = "LevelIndicator"
    CELL = "Cell"
    LAYOUT_AREA = "LayoutArea"
    LAYOUT_ITEM = "LayoutItem"
    HANDLE = "Handle"
    STEPPER = "Stepper"
    TAB = "Tab"

    @classmethod
    def from_name(cls, name: str) -> "ElementType":
        """Map a debug-description type name to an ElementType (unknown names become OTHER)."""
        try:
            return cls(name)
        except ValueError:
            logger.debug("Unknown element type name {!r}, treating as Other", name)
            return cls.OTHER

    @property
    def accessor(self) -> str:
        """Name of the query property that returns children of this type."""
        special = _IRREGULAR_ACCESSORS.get(self)
        if special is not None:
            return special
        name = self.value
        plural = name + "es" if name.endswith(("x", "ch", "sh")) else name + "s"
        return plural[0].lower() + plural[1:]


_IRREGULAR_ACCESSORS: dict[ElementType, str] = {
    ElementType.ANY: "descendants",
    ElementType.OTHER: "otherElements",
}


@dataclass(frozen=True)
class Frame:
    """On-screen geometry of an element."""

    x: float
    y: float
    width: float
    height: float


@dataclass(eq=False)
class ElementNode:
    """A single element parsed from one line of a debug description.

    Equality and hashing use ``handle`` only. Handles are debug memory
    addresses, so two nodes compare equal only meaningfully within one
    parsed tree.

    ``parent`` and ``children`` are set by the tree builder. Once a tree is
    built, callers must treat it as read-only: sibling positions and accessors
    are derived from ``children`` on every call.
    """

    source: str
    depth: int
    element_type: ElementType
    handle: int
    frame: Frame
    traits: int | None = None
    is_main_window: bool = False
    label: str | None = None
    identifier: str | None = None
    value: str | None = None
    placeholder_value: str | None = None
    parent: "ElementNode | None" = field(default=None, repr=False)
    children: list["ElementNode"] = field(default_factory=list, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementNode):
            return NotImplemented
        return self.handle == other.handle

    def __hash__(self) -> int:
        return hash(self.handle)

    @property
    def index(self) -> str | None:
        """Stable lookup key: identifier, else label."""
        return self.identifier if self.identifier is not None else self.label

    @property
    def numeric_index(self) -> int | None:
        """Position among same-type siblings, or None if not found under the parent."""
        if self.parent is None:
            return 0
        siblings = self.parent.children_matching_type(self.element_type)
        return next((i for i, sibling in enumerate(siblings) if sibling == self), None)

    def attach(self, child: "ElementNode") -> None:
        child.parent = self
        self.children.append(child)

    def children_matching_type(self, element_type: ElementType) -> list["ElementNode"]:
        return [c for c in self.children if c.element_type is element_type]

    def children_matching_type_by_index(self, element_type: ElementType) -> dict[str, "ElementNode"]:
        """Map index -> child for same-type children that have an index.

        Later siblings win when two children share an index.
        """
        return {
            c.index: c
            for c in self.children
            if c.element_type is element_type and c.index is not None
        }

    def ancestors(self) -> Iterator["ElementNode"]:
        """Yield the parent, grandparent, ... up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def walk(self) -> Iterator["ElementNode"]:
        """Pre-order traversal: self first, then each child subtree in order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def describe(self) -> str:
        return (
            f"{self.element_type.value} - label: {self.label!r} "
            f"identifier: {self.identifier!r} value: {self.value!r}"
        )
