"""
Group - curried (tab, container) pair.

``menu.group("LUA", "A").checkbox("Enabled")`` is the same call as
``menu.checkbox("LUA", "A", "Enabled")``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from ..models.errors import ErrorKind
from ..models.kinds import WidgetKind


class KindMethods(ABC):
    """
    One creation method per widget kind, each forwarding to create().

    Subclasses (Menu, Group) implement create(kind, *args).
    """

    @abstractmethod
    def create(self, kind, *args: Any):
        """Create an element of ``kind`` from the given arguments."""

    def checkbox(self, *args: Any):
        return self.create(WidgetKind.CHECKBOX, *args)

    def slider(self, *args: Any):
        return self.create(WidgetKind.SLIDER, *args)

    def combobox(self, *args: Any):
        return self.create(WidgetKind.COMBOBOX, *args)

    def multiselect(self, *args: Any):
        return self.create(WidgetKind.MULTISELECT, *args)

    def listbox(self, *args: Any):
        return self.create(WidgetKind.LISTBOX, *args)

    def button(self, *args: Any):
        return self.create(WidgetKind.BUTTON, *args)

    def color_picker(self, *args: Any):
        return self.create(WidgetKind.COLOR_PICKER, *args)

    def label(self, *args: Any):
        return self.create(WidgetKind.LABEL, *args)

    def textbox(self, *args: Any):
        return self.create(WidgetKind.TEXTBOX, *args)

    def hotkey(self, *args: Any):
        return self.create(WidgetKind.HOTKEY, *args)


@dataclass(frozen=True, repr=False)
class Group(KindMethods):
    """Immutable (tab, container) pair bound to an element factory."""
    tab: Any
    container: Any
    factory: Any = field(compare=False)

    def create(self, kind, *args: Any):
        """Create an element in this group's tab and container."""
        if any(isinstance(arg, Group) for arg in args):
            return self.factory.context.reporter.report(
                ErrorKind.RESOLUTION,
                f"Invalid usage: groups cannot be nested ({self!r}.{_kind_name(kind)}(...) received a group)",
            )
        return self.factory.create(kind, self.tab, self.container, *args)

    def __repr__(self) -> str:
        return "menu::group"


def _kind_name(kind: Any) -> Optional[str]:
    return kind.value if isinstance(kind, WidgetKind) else str(kind)
