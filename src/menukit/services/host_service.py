"""
InMemoryHost - Headless widget host.

Stores widget state in plain Python objects. Useful for scripting menus
without a display and as the base of MockHost in tests.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..models.kinds import WidgetKind

Handle = int


@dataclass
class HostWidget:
    """State of a single in-memory widget."""
    kind: str
    args: Tuple[Any, ...]
    name: str
    value: Any = None
    options: List[Any] = field(default_factory=list)
    visible: bool = True
    enabled: bool = True
    callback: Optional[Callable[[Handle], Any]] = None

    @property
    def tab(self) -> Any:
        return self.args[0]

    @property
    def container(self) -> Any:
        return self.args[1]


def _extract_options(kind: WidgetKind, extra: Tuple[Any, ...]) -> List[Any]:
    """Option list from the kind-specific constructor args."""
    if kind not in (WidgetKind.COMBOBOX, WidgetKind.LISTBOX, WidgetKind.MULTISELECT):
        return []
    if len(extra) == 1 and isinstance(extra[0], (list, tuple)):
        return list(extra[0])
    return list(extra)


def _initial_value(kind: WidgetKind, name: str, extra: Tuple[Any, ...]) -> Any:
    """Initial value for a freshly constructed widget."""
    if kind == WidgetKind.CHECKBOX:
        return bool(extra[0]) if extra else False
    if kind == WidgetKind.SLIDER:
        if len(extra) >= 3:
            return extra[2]
        return extra[0] if extra else 0
    if kind in (WidgetKind.COMBOBOX, WidgetKind.LISTBOX):
        return 0
    if kind == WidgetKind.MULTISELECT:
        return []
    if kind == WidgetKind.COLOR_PICKER:
        rgba = list(extra[:4]) + [255] * (4 - len(extra[:4]))
        return tuple(rgba)
    if kind == WidgetKind.LABEL:
        return name
    if kind in (WidgetKind.TEXTBOX, WidgetKind.HOTKEY):
        return str(extra[0]) if extra else ""
    return None


class InMemoryHost:
    """
    Widget host keeping all state in memory.

    Handles are positive integers. Setting a value that differs from the
    current one dispatches the widget's change callback, like a real
    toolkit emitting its change signal.
    """

    def __init__(self):
        self._widgets: Dict[Handle, HostWidget] = {}
        self._ids = itertools.count(1)

    def construct(self, kind: str, *args: Any) -> Handle:
        widget_kind = WidgetKind(kind)
        if len(args) < 3:
            raise TypeError(
                f"{widget_kind.value} requires (tab, container, label), got {len(args)} argument(s)"
            )

        name = str(args[2])
        extra = tuple(args[3:])
        widget = HostWidget(
            kind=widget_kind.value,
            args=tuple(args),
            name=name,
            value=_initial_value(widget_kind, name, extra),
            options=_extract_options(widget_kind, extra),
        )
        if widget_kind == WidgetKind.BUTTON:
            widget.callback = extra[0] if extra and callable(extra[0]) else None

        handle = next(self._ids)
        self._widgets[handle] = widget
        return handle

    def _widget(self, handle: Handle) -> HostWidget:
        try:
            return self._widgets[handle]
        except KeyError:
            raise KeyError(f"Unknown widget handle: {handle!r}")

    def get_value(self, handle: Handle) -> Any:
        widget = self._widget(handle)
        if isinstance(widget.value, list):
            return list(widget.value)
        return widget.value

    def set_value(self, handle: Handle, *values: Any) -> None:
        widget = self._widget(handle)
        if widget.kind == WidgetKind.BUTTON.value:
            return

        if len(values) == 1:
            value = values[0]
        else:
            value = tuple(values)
        if widget.kind == WidgetKind.MULTISELECT.value:
            value = [o for o in widget.options if o in _as_list(value)]

        if value != widget.value:
            widget.value = value
            self._dispatch(handle)

    def refresh(self, handle: Handle, *values: Any) -> None:
        widget = self._widget(handle)
        kind = WidgetKind(widget.kind)
        if kind in (WidgetKind.COMBOBOX, WidgetKind.LISTBOX, WidgetKind.MULTISELECT):
            widget.options = _extract_options(kind, tuple(values))
            if kind == WidgetKind.MULTISELECT:
                widget.value = [o for o in widget.value if o in widget.options]
            elif widget.value >= len(widget.options):
                widget.value = 0
        elif kind == WidgetKind.LABEL and values:
            widget.name = str(values[0])
            widget.value = widget.name
        elif values:
            self.set_value(handle, *values)

    def set_visible(self, handle: Handle, visible: bool) -> None:
        self._widget(handle).visible = bool(visible)

    def set_enabled(self, handle: Handle, enabled: bool) -> None:
        self._widget(handle).enabled = bool(enabled)

    def set_change_callback(self, handle: Handle, callback: Callable[[Handle], Any]) -> None:
        self._widget(handle).callback = callback

    def get_name(self, handle: Handle) -> str:
        return self._widget(handle).name

    def get_kind(self, handle: Handle) -> str:
        return self._widget(handle).kind

    def resolve_reference(self, *path: Any) -> List[Handle]:
        key = tuple(path[:3])
        matches = []
        for handle, widget in self._widgets.items():
            location = (widget.tab, widget.container, widget.name)
            if location[:len(key)] == key:
                matches.append(handle)
        return matches

    def is_visible(self, handle: Handle) -> bool:
        """Get the host-side visibility flag."""
        return self._widget(handle).visible

    def is_enabled(self, handle: Handle) -> bool:
        """Get the host-side enabled flag."""
        return self._widget(handle).enabled

    def options(self, handle: Handle) -> List[Any]:
        """Get the current option list of a list-type widget."""
        return list(self._widget(handle).options)

    def click(self, handle: Handle) -> None:
        """Press a button."""
        self._dispatch(handle)

    def _dispatch(self, handle: Handle) -> None:
        callback = self._widgets[handle].callback
        if callback is not None:
            callback(handle)


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


class MockHost(InMemoryHost):
    """
    Mock host for testing.

    Records every construction call and lets tests drive values and
    callbacks directly.
    """

    def __init__(self):
        super().__init__()
        self.constructed: List[Tuple[str, Tuple[Any, ...]]] = []
        self._mock_references: Dict[Tuple[Any, ...], List[Handle]] = {}

    def construct(self, kind: str, *args: Any) -> Handle:
        self.constructed.append((kind, tuple(args)))
        return super().construct(kind, *args)

    def set_mock_value(self, handle: Handle, value: Any) -> None:
        """Set a value without dispatching the change callback."""
        self._widget(handle).value = value

    def set_mock_reference(self, path: Tuple[Any, ...], handles: List[Handle]) -> None:
        """Override what resolve_reference returns for a path."""
        self._mock_references[tuple(path)] = list(handles)

    def resolve_reference(self, *path: Any) -> List[Handle]:
        if tuple(path) in self._mock_references:
            return list(self._mock_references[tuple(path)])
        return super().resolve_reference(*path)

    def get_callback(self, handle: Handle) -> Optional[Callable[[Handle], Any]]:
        """Get the registered change callback (for assertions)."""
        return self._widget(handle).callback

    def fire(self, handle: Handle, value: Any = None) -> None:
        """
        Simulate a user edit: optionally store a value, then dispatch the
        change callback. Callback failures propagate to the caller.
        """
        if value is not None:
            self._widget(handle).value = value
        self._dispatch(handle)

    def reset(self) -> None:
        """Forget all widgets and recorded calls."""
        self._widgets.clear()
        self.constructed.clear()
        self._mock_references.clear()
