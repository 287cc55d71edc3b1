"""
Host interface (Protocol) consumed by the menu layer.

The host owns widget construction, value storage and rendering. The menu
layer only ever talks to it through this contract, which keeps elements
testable against an in-memory host.
"""

from typing import Protocol, Any, Callable, List

Handle = Any


class IHostAPI(Protocol):
    """Interface for a widget engine."""

    def construct(self, kind: str, *args: Any) -> Handle:
        """
        Construct a widget of the given kind.

        Args:
            kind: Widget kind name (see WidgetKind)
            *args: (tab, container, label, *kind_args)

        Returns:
            Opaque handle for the new widget
        """
        ...

    def get_value(self, handle: Handle) -> Any:
        """Get the current value of a widget."""
        ...

    def set_value(self, handle: Handle, *values: Any) -> None:
        """Set the value of a widget."""
        ...

    def refresh(self, handle: Handle, *values: Any) -> None:
        """Refresh a widget's content (e.g. repopulate its options)."""
        ...

    def set_visible(self, handle: Handle, visible: bool) -> None:
        """Show or hide a widget."""
        ...

    def set_enabled(self, handle: Handle, enabled: bool) -> None:
        """Enable or disable a widget."""
        ...

    def set_change_callback(self, handle: Handle, callback: Callable[[Handle], Any]) -> None:
        """
        Register the value-change callback of a widget.

        The host calls ``callback(handle)`` whenever the value changes.
        A later registration replaces the earlier one.
        """
        ...

    def get_name(self, handle: Handle) -> str:
        """Get the display label of a widget."""
        ...

    def get_kind(self, handle: Handle) -> str:
        """Get the kind name of a widget."""
        ...

    def resolve_reference(self, *path: Any) -> List[Handle]:
        """
        Locate existing widgets by path (tab, container, label).

        Returns:
            List of matching handles (empty when the path does not resolve)
        """
        ...
