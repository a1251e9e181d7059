"""Element type codes and their human-readable names."""

from __future__ import annotations

import re
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Union

__all__ = ["ELEMENT_TYPE_NAMES", "TYPE_PREFIX", "ElementType", "resolve", "type_token"]

TYPE_PREFIX = "XCUIElementType"

ELEMENT_TYPE_NAMES: Mapping[int, str] = MappingProxyType({
    0: "Any", 1: "Other", 2: "Application", 3: "Group", 4: "Window", 5: "Sheet", 6: "Drawer", 7: "Alert",
    8: "Dialog", 9: "Button", 10: "RadioButton", 11: "RadioGroup", 12: "CheckBox", 13: "DisclosureTriangle",
    14: "PopUpButton", 15: "ComboBox", 16: "MenuButton", 17: "ToolbarButton", 18: "Popover", 19: "Keyboard",
    20: "Key", 21: "NavigationBar", 22: "TabBar", 23: "TabGroup", 24: "Toolbar", 25: "StatusBar", 26: "Table",
    27: "TableRow", 28: "TableColumn", 29: "Outline", 30: "OutlineRow", 31: "Browser", 32: "CollectionView",
    33: "Slider", 34: "PageIndicator", 35: "ProgressIndicator", 36: "ActivityIndicator", 37: "SegmentedControl",
    38: "Picker", 39: "PickerWheel", 40: "Switch", 41: "Toggle", 42: "Link", 43: "Image", 44: "Icon",
    45: "SearchField", 46: "ScrollView", 47: "ScrollBar", 48: "StaticText", 49: "TextField", 50: "SecureTextField",
    51: "DatePicker", 52: "TextView", 53: "Menu", 54: "MenuItem", 55: "MenuBar", 56: "MenuBarItem", 57: "Map",
    58: "WebView", 59: "IncrementArrow", 60: "DecrementArrow", 61: "Timeline", 62: "RatingIndicator",
    63: "ValueIndicator", 64: "SplitGroup", 65: "Splitter", 66: "RelevanceIndicator", 67: "ColorWell",
    68: "HelpTag", 69: "Matte", 70: "DockItem", 71: "Ruler", 72: "RulerMarker", 73: "Grid", 74: "LevelIndicator",
    75: "Cell", 76: "LayoutArea", 77: "LayoutItem", 78: "Handle", 79: "Stepper", 80: "Tab", 81: "TouchBar",
    82: "StatusItem",
})

_NUMERIC = re.compile(r"\d+", re.ASCII)


class ElementType(IntEnum):
    """Element kinds reported by the automation host."""

    ANY = 0
    OTHER = 1
    APPLICATION = 2
    GROUP = 3
    WINDOW = 4
    SHEET = 5
    DRAWER = 6
    ALERT = 7
    DIALOG = 8
    BUTTON = 9
    RADIO_BUTTON = 10
    RADIO_GROUP = 11
    CHECK_BOX = 12
    DISCLOSURE_TRIANGLE = 13
    POP_UP_BUTTON = 14
    COMBO_BOX = 15
    MENU_BUTTON = 16
    TOOLBAR_BUTTON = 17
    POPOVER = 18
    KEYBOARD = 19
    KEY = 20
    NAVIGATION_BAR = 21
    TAB_BAR = 22
    TAB_GROUP = 23
    TOOLBAR = 24
    STATUS_BAR = 25
    TABLE = 26
    TABLE_ROW = 27
    TABLE_COLUMN = 28
    OUTLINE = 29
    OUTLINE_ROW = 30
    BROWSER = 31
    COLLECTION_VIEW = 32
    SLIDER = 33
    PAGE_INDICATOR = 34
    PROGRESS_INDICATOR = 35
    ACTIVITY_INDICATOR = 36
    SEGMENTED_CONTROL = 37
    PICKER = 38
    PICKER_WHEEL = 39
    SWITCH = 40
    TOGGLE = 41
    LINK = 42
    IMAGE = 43
    ICON = 44
    SEARCH_FIELD = 45
    SCROLL_VIEW = 46
    SCROLL_BAR = 47
    STATIC_TEXT = 48
    TEXT_FIELD = 49
    SECURE_TEXT_FIELD = 50
    DATE_PICKER = 51
    TEXT_VIEW = 52
    MENU = 53
    MENU_ITEM = 54
    MENU_BAR = 55
    MENU_BAR_ITEM = 56
    MAP = 57
    WEB_VIEW = 58
    INCREMENT_ARROW = 59
    DECREMENT_ARROW = 60
    TIMELINE = 61
    RATING_INDICATOR = 62
    VALUE_INDICATOR = 63
    SPLIT_GROUP = 64
    SPLITTER = 65
    RELEVANCE_INDICATOR = 66
    COLOR_WELL = 67
    HELP_TAG = 68
    MATTE = 69
    DOCK_ITEM = 70
    RULER = 71
    RULER_MARKER = 72
    GRID = 73
    LEVEL_INDICATOR = 74
    CELL = 75
    LAYOUT_AREA = 76
    LAYOUT_ITEM = 77
    HANDLE = 78
    STEPPER = 79
    TAB = 80
    TOUCH_BAR = 81
    STATUS_ITEM = 82

    @property
    def display_name(self) -> str:
        return ELEMENT_TYPE_NAMES[self.value]


def resolve(code: Union[int, str]) -> str:
    """
    Map an element type code or dump token to a readable name.

    Integers are looked up directly. Strings may carry the ``XCUIElementType``
    prefix; when what remains is a known numeric code its name is returned.
    Anything else comes back unchanged, so unknown codes degrade to the raw
    token instead of failing.
    """
    if isinstance(code, int):
        return ELEMENT_TYPE_NAMES.get(int(code), str(int(code)))

    token = str(code)
    stripped = token.replace(TYPE_PREFIX, "")
    if _NUMERIC.fullmatch(stripped):
        name = ELEMENT_TYPE_NAMES.get(int(stripped))
        if name is not None:
            return name
    return token


def type_token(element_type: Union[int, str]) -> str:
    """Return the string a dump row would carry for ``element_type``."""
    if isinstance(element_type, int):
        return resolve(element_type)
    return element_type
