"""
QtHost - Widget host backed by PyQt5.

Tabs become pages of a QTabWidget, containers become QGroupBoxes laid out
with a QFormLayout, and each widget kind maps to a Qt control.
Handles are positive integers owned by this host.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor, QKeySequence
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QColorDialog,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QKeySequenceEdit,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QSlider,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from ..logging import logger
from ..models.kinds import WidgetKind

Handle = int

LIST_KINDS = (WidgetKind.COMBOBOX, WidgetKind.LISTBOX, WidgetKind.MULTISELECT)


@dataclass
class QtWidgetEntry:
    """Bookkeeping for one constructed Qt control."""
    kind: WidgetKind
    tab: Any
    container: Any
    name: str
    widget: QWidget
    label: Optional[QLabel] = None
    options: List[str] = field(default_factory=list)
    callback: Optional[Callable[[Handle], Any]] = None
    color: Optional[QColor] = None


class QtHost:
    """
    Host implementation over real Qt widgets.

    Callback failures are caught at the signal boundary and logged, so a
    failing callback only aborts its own invocation.
    """

    def __init__(self, root: Optional[QTabWidget] = None):
        """
        Initialize the host.

        Args:
            root: Tab widget to populate (a new one is created if omitted)
        """
        self._root = root if root is not None else QTabWidget()
        self._pages: Dict[str, QWidget] = {}
        self._containers: Dict[Tuple[str, str], QFormLayout] = {}
        self._entries: Dict[Handle, QtWidgetEntry] = {}
        self._ids = itertools.count(1)

    @property
    def root(self) -> QTabWidget:
        """The top-level tab widget."""
        return self._root

    def widget(self, handle: Handle) -> QWidget:
        """Get the Qt control behind a handle."""
        return self._entry(handle).widget

    # =========================================================================
    # Layout
    # =========================================================================

    def _form(self, tab: Any, container: Any) -> QFormLayout:
        """Get (or create) the form layout for a tab/container pair."""
        key = (str(tab), str(container))
        if key in self._containers:
            return self._containers[key]

        page = self._pages.get(key[0])
        if page is None:
            page = QWidget()
            QVBoxLayout(page)
            self._root.addTab(page, key[0])
            self._pages[key[0]] = page

        box = QGroupBox(key[1])
        form = QFormLayout(box)
        page.layout().addWidget(box)
        self._containers[key] = form
        return form

    # =========================================================================
    # Construction
    # =========================================================================

    def construct(self, kind: str, *args: Any) -> Handle:
        widget_kind = WidgetKind(kind)
        if len(args) < 3:
            raise TypeError(
                f"{widget_kind.value} requires (tab, container, label), got {len(args)} argument(s)"
            )

        tab, container, name = args[0], args[1], str(args[2])
        extra = tuple(args[3:])
        handle = next(self._ids)

        builders = {
            WidgetKind.CHECKBOX: self._create_checkbox,
            WidgetKind.SLIDER: self._create_slider,
            WidgetKind.COMBOBOX: self._create_combobox,
            WidgetKind.LISTBOX: self._create_listbox,
            WidgetKind.MULTISELECT: self._create_multiselect,
            WidgetKind.BUTTON: self._create_button,
            WidgetKind.COLOR_PICKER: self._create_color_picker,
            WidgetKind.LABEL: self._create_label,
            WidgetKind.TEXTBOX: self._create_textbox,
            WidgetKind.HOTKEY: self._create_hotkey,
        }
        entry = QtWidgetEntry(
            kind=widget_kind,
            tab=tab,
            container=container,
            name=name,
            widget=QWidget(),
        )
        builders[widget_kind](handle, entry, extra)

        form = self._form(tab, container)
        if entry.label is not None:
            form.addRow(entry.label, entry.widget)
        else:
            form.addRow(entry.widget)

        self._entries[handle] = entry
        logger.debug(f"QtHost constructed {widget_kind.value} '{name}' as #{handle}")
        return handle

    def _connect(self, signal, handle: Handle) -> None:
        signal.connect(lambda *_: self._dispatch(handle))

    def _create_checkbox(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        widget = QCheckBox(entry.name)
        if extra:
            widget.setChecked(bool(extra[0]))
        self._connect(widget.toggled, handle)
        entry.widget = widget

    def _create_slider(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        widget = QSlider(Qt.Horizontal)
        minimum = int(extra[0]) if len(extra) > 0 else 0
        maximum = int(extra[1]) if len(extra) > 1 else 100
        widget.setRange(minimum, maximum)
        widget.setValue(int(extra[2]) if len(extra) > 2 else minimum)
        self._connect(widget.valueChanged, handle)
        entry.widget = widget
        entry.label = QLabel(entry.name)

    def _create_combobox(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        widget = QComboBox()
        entry.options = _option_list(extra)
        widget.addItems(entry.options)
        self._connect(widget.currentIndexChanged, handle)
        entry.widget = widget
        entry.label = QLabel(entry.name)

    def _create_listbox(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        widget = QListWidget()
        entry.options = _option_list(extra)
        widget.addItems(entry.options)
        if entry.options:
            widget.setCurrentRow(0)
        self._connect(widget.currentRowChanged, handle)
        entry.widget = widget
        entry.label = QLabel(entry.name)

    def _create_multiselect(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        widget = QListWidget()
        widget.setSelectionMode(QAbstractItemView.MultiSelection)
        entry.options = _option_list(extra)
        widget.addItems(entry.options)
        self._connect(widget.itemSelectionChanged, handle)
        entry.widget = widget
        entry.label = QLabel(entry.name)

    def _create_button(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        widget = QPushButton(entry.name)
        if extra and callable(extra[0]):
            entry.callback = extra[0]
        self._connect(widget.clicked, handle)
        entry.widget = widget

    def _create_color_picker(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        rgba = [int(c) for c in extra[:4]] + [255] * (4 - len(extra[:4]))
        widget = QPushButton()
        entry.widget = widget
        entry.label = QLabel(entry.name)
        self._apply_color(entry, QColor(*rgba))
        widget.clicked.connect(lambda *_: self._pick_color(handle))

    def _create_label(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        entry.widget = QLabel(entry.name)

    def _create_textbox(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        widget = QLineEdit(str(extra[0]) if extra else "")
        self._connect(widget.textChanged, handle)
        entry.widget = widget
        entry.label = QLabel(entry.name)

    def _create_hotkey(self, handle: Handle, entry: QtWidgetEntry, extra: tuple):
        widget = QKeySequenceEdit(QKeySequence(str(extra[0]) if extra else ""))
        self._connect(widget.keySequenceChanged, handle)
        entry.widget = widget
        entry.label = QLabel(entry.name)

    def _apply_color(self, entry: QtWidgetEntry, color: QColor) -> None:
        entry.color = color
        entry.widget.setStyleSheet(
            f"background-color: rgba({color.red()}, {color.green()}, "
            f"{color.blue()}, {color.alpha()});"
        )

    def _pick_color(self, handle: Handle) -> None:
        entry = self._entry(handle)
        color = QColorDialog.getColor(
            entry.color,
            entry.widget,
            entry.name,
            QColorDialog.ShowAlphaChannel,
        )
        if color.isValid() and color != entry.color:
            self._apply_color(entry, color)
            self._dispatch(handle)

    # =========================================================================
    # Host API
    # =========================================================================

    def _entry(self, handle: Handle) -> QtWidgetEntry:
        try:
            return self._entries[handle]
        except KeyError:
            raise KeyError(f"Unknown widget handle: {handle!r}")

    def get_value(self, handle: Handle) -> Any:
        entry = self._entry(handle)
        widget = entry.widget
        kind = entry.kind

        if kind == WidgetKind.CHECKBOX:
            return widget.isChecked()
        elif kind == WidgetKind.SLIDER:
            return widget.value()
        elif kind == WidgetKind.COMBOBOX:
            return widget.currentIndex()
        elif kind == WidgetKind.LISTBOX:
            return widget.currentRow()
        elif kind == WidgetKind.MULTISELECT:
            return [
                widget.item(row).text()
                for row in range(widget.count())
                if widget.item(row).isSelected()
            ]
        elif kind == WidgetKind.COLOR_PICKER:
            return tuple(entry.color.getRgb())
        elif kind in (WidgetKind.LABEL, WidgetKind.TEXTBOX):
            return widget.text()
        elif kind == WidgetKind.HOTKEY:
            return widget.keySequence().toString()
        return None

    def set_value(self, handle: Handle, *values: Any) -> None:
        entry = self._entry(handle)
        widget = entry.widget
        kind = entry.kind
        value = values[0] if len(values) == 1 else tuple(values)

        if kind == WidgetKind.CHECKBOX:
            widget.setChecked(bool(value))
        elif kind == WidgetKind.SLIDER:
            widget.setValue(int(value))
        elif kind == WidgetKind.COMBOBOX:
            widget.setCurrentIndex(int(value))
        elif kind == WidgetKind.LISTBOX:
            widget.setCurrentRow(int(value))
        elif kind == WidgetKind.MULTISELECT:
            selected = set(value) if isinstance(value, (list, tuple, set)) else {value}
            if selected == set(self.get_value(handle)):
                return
            widget.blockSignals(True)
            for row in range(widget.count()):
                item = widget.item(row)
                item.setSelected(item.text() in selected)
            widget.blockSignals(False)
            self._dispatch(handle)
        elif kind == WidgetKind.COLOR_PICKER:
            color = QColor(*[int(c) for c in value])
            if color != entry.color:
                self._apply_color(entry, color)
                self._dispatch(handle)
        elif kind in (WidgetKind.LABEL, WidgetKind.TEXTBOX):
            widget.setText(str(value))
        elif kind == WidgetKind.HOTKEY:
            widget.setKeySequence(QKeySequence(str(value)))

    def refresh(self, handle: Handle, *values: Any) -> None:
        entry = self._entry(handle)
        if entry.kind in LIST_KINDS:
            entry.options = _option_list(values)
            widget = entry.widget
            widget.blockSignals(True)
            widget.clear()
            widget.addItems(entry.options)
            if entry.kind == WidgetKind.LISTBOX and entry.options:
                widget.setCurrentRow(0)
            widget.blockSignals(False)
        elif entry.kind == WidgetKind.LABEL and values:
            entry.name = str(values[0])
            entry.widget.setText(entry.name)
        elif values:
            self.set_value(handle, *values)

    def set_visible(self, handle: Handle, visible: bool) -> None:
        entry = self._entry(handle)
        entry.widget.setVisible(bool(visible))
        if entry.label is not None:
            entry.label.setVisible(bool(visible))

    def set_enabled(self, handle: Handle, enabled: bool) -> None:
        entry = self._entry(handle)
        entry.widget.setEnabled(bool(enabled))
        if entry.label is not None:
            entry.label.setEnabled(bool(enabled))

    def set_change_callback(self, handle: Handle, callback: Callable[[Handle], Any]) -> None:
        self._entry(handle).callback = callback

    def get_name(self, handle: Handle) -> str:
        return self._entry(handle).name

    def get_kind(self, handle: Handle) -> str:
        return self._entry(handle).kind.value

    def resolve_reference(self, *path: Any) -> List[Handle]:
        key = tuple(str(p) for p in path[:3])
        matches = []
        for handle, entry in self._entries.items():
            location = (str(entry.tab), str(entry.container), entry.name)
            if location[:len(key)] == key:
                matches.append(handle)
        return matches

    def _dispatch(self, handle: Handle) -> None:
        entry = self._entries.get(handle)
        if entry is None or entry.callback is None:
            return
        try:
            entry.callback(handle)
        except Exception as e:
            logger.error(f"Callback for '{entry.name}' raised: {e}", exc_info=True)


def _option_list(extra: tuple) -> List[str]:
    """Option labels from either a single sequence or varargs."""
    if len(extra) == 1 and isinstance(extra[0], (list, tuple)):
        return [str(o) for o in extra[0]]
    return [str(o) for o in extra]
