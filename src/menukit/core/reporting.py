"""
Error reporting for recoverable menu failures.

Nothing in the menu layer raises on misuse: failures are logged, published
on the event bus and the operation returns None.
"""

from collections import deque
from typing import Deque, List, Optional

from ..events.event_bus import EventBus, MenuErrorEvent
from ..logging import log_reported_error
from ..models.errors import ErrorKind

# Number of reported errors kept for inspection
HISTORY_SIZE = 100


class ErrorReporter:
    """Logs reported errors and forwards them to an EventBus."""

    def __init__(self, events: Optional[EventBus] = None):
        self._events = events
        self._history: Deque[MenuErrorEvent] = deque(maxlen=HISTORY_SIZE)

    def report(
        self,
        kind: ErrorKind,
        message: str,
        exception: Optional[BaseException] = None,
    ) -> None:
        """
        Report a non-fatal error.

        Args:
            kind: Taxonomy category of the failure
            message: Human-readable description
            exception: Underlying exception, if any

        Returns:
            None, so callers can ``return reporter.report(...)``
        """
        event = MenuErrorEvent(kind=kind, message=message, exception=exception)
        self._history.append(event)

        log_reported_error(message)
        if self._events is not None:
            self._events.emit(event)
        return None

    @property
    def errors(self) -> List[MenuErrorEvent]:
        """Most recent reported errors, oldest first."""
        return list(self._history)

    def clear(self) -> None:
        """Forget reported errors."""
        self._history.clear()


# Used where no context is reachable (e.g. an operation called without a receiver)
default_reporter = ErrorReporter()
