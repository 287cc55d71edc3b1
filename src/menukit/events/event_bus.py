"""
EventBus - Central event dispatcher for menu activity.

Elements, the factory and the error reporter publish typed events here so
that tooling (log panels, tests, inspectors) can observe the menu without
holding references into it.
"""

from dataclasses import dataclass
from typing import Optional, List, Any

from PyQt5.QtCore import QObject, pyqtSignal

from ..models.errors import ErrorKind


# ============================================================================
# Event Data Classes
# ============================================================================


@dataclass
class MenuEvent:
    """Base class for menu events."""
    pass


@dataclass
class ElementCreatedEvent(MenuEvent):
    """Emitted when the factory wraps a new host widget."""
    element: Any


@dataclass
class VisibilityChangedEvent(MenuEvent):
    """Emitted when an element's visibility is pushed to the host."""
    element: Any
    visible: bool


@dataclass
class AliasRegisteredEvent(MenuEvent):
    """Emitted when an alias is registered."""
    word: str
    replacement: str


@dataclass
class MenuErrorEvent(MenuEvent):
    """Emitted when a non-fatal error is reported."""
    kind: ErrorKind
    message: str
    exception: Optional[BaseException] = None
    recoverable: bool = True


# ============================================================================
# Event Bus Implementation
# ============================================================================


class EventBus(QObject):
    """
    Central event dispatcher using Qt signals.

    Usage:
        bus = EventBus.instance()

        # Subscribe
        bus.error.connect(my_handler)

        # Emit
        bus.emit(MenuErrorEvent(kind=ErrorKind.USAGE, message="..."))
    """

    element_created = pyqtSignal(object)     # ElementCreatedEvent
    visibility_changed = pyqtSignal(object)  # VisibilityChangedEvent
    alias_registered = pyqtSignal(object)    # AliasRegisteredEvent
    error = pyqtSignal(object)               # MenuErrorEvent

    # Singleton instance
    _instance: Optional["EventBus"] = None

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._event_log: List[MenuEvent] = []
        self._log_events = False

    @classmethod
    def instance(cls) -> "EventBus":
        """Get the singleton EventBus instance."""
        if cls._instance is None:
            cls._instance = EventBus()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None

    def enable_logging(self, enable: bool = True) -> None:
        """Enable/disable event logging for debugging."""
        self._log_events = enable

    def get_event_log(self) -> List[MenuEvent]:
        """Get logged events (for debugging/testing)."""
        return list(self._event_log)

    def clear_event_log(self) -> None:
        """Clear the event log."""
        self._event_log.clear()

    def emit(self, event: MenuEvent) -> None:
        """
        Emit an event to the appropriate signal.

        Args:
            event: Event instance to emit
        """
        if self._log_events:
            self._event_log.append(event)

        if isinstance(event, ElementCreatedEvent):
            self.element_created.emit(event)
        elif isinstance(event, VisibilityChangedEvent):
            self.visibility_changed.emit(event)
        elif isinstance(event, AliasRegisteredEvent):
            self.alias_registered.emit(event)
        elif isinstance(event, MenuErrorEvent):
            self.error.emit(event)

    def emit_error(
        self,
        kind: ErrorKind,
        message: str,
        exception: Optional[BaseException] = None,
    ) -> None:
        """Emit an error event."""
        self.emit(MenuErrorEvent(kind=kind, message=message, exception=exception))
