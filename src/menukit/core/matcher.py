"""
Value containment per widget kind.

"Does this element currently hold value V" means something different for
each kind of widget; everything not listed here never contains anything.
"""

from typing import Any

from ..models.kinds import WidgetKind


def contains(element: Any, value: Any) -> bool:
    """
    Check whether an element currently holds ``value``.

    - listbox: the selected option (row ``get()`` of the static option list)
      equals ``value``
    - combobox: ``get() == value``
    - multiselect: ``value`` is one of the selected options
    - other kinds: always False
    """
    kind = element.kind()

    if kind == WidgetKind.LISTBOX:
        options = element.list()
        index = element.get()
        if options is None or not isinstance(index, int):
            return False
        if not 0 <= index < len(options):
            return False
        return options[index] == value
    elif kind == WidgetKind.COMBOBOX:
        return element.get() == value
    elif kind == WidgetKind.MULTISELECT:
        selected = element.get() or []
        return value in selected
    return False
