"""
Widget kinds understood by the element factory.
"""

from enum import Enum
from typing import Union


class WidgetKind(str, Enum):
    """Closed set of host widget kinds."""
    CHECKBOX = "checkbox"
    SLIDER = "slider"
    COMBOBOX = "combobox"
    MULTISELECT = "multiselect"
    LISTBOX = "listbox"
    BUTTON = "button"
    COLOR_PICKER = "color_picker"
    LABEL = "label"
    TEXTBOX = "textbox"
    HOTKEY = "hotkey"


def to_kind(kind: Union[str, WidgetKind]) -> WidgetKind:
    """
    Coerce a kind name to a WidgetKind.

    Raises:
        ValueError: If the name is not a known widget kind
    """
    if isinstance(kind, WidgetKind):
        return kind
    return WidgetKind(kind)
