"""
SafeCallback - dispatch wrapper for user callbacks.
"""

from typing import Any, Callable

from ..models.config import format_template
from ..models.errors import ErrorKind


class SafeCallback:
    """
    Callable registered with the host in place of a user callback.

    Invokes ``callback(element, original)``. When the context's
    ``safe_callbacks`` switch is on at dispatch time, a failure is reported
    with the configured message template instead of reaching the host.
    """

    def __init__(self, element: Any, callback: Callable[[Any, Any], Any], context: Any):
        self._element = element
        self._callback = callback
        self._context = context

    @property
    def callback(self) -> Callable[[Any, Any], Any]:
        """The wrapped user callback."""
        return self._callback

    def __call__(self, original: Any) -> Any:
        config = self._context.config
        if not config.safe_callbacks:
            return self._callback(self._element, original)

        try:
            return self._callback(self._element, original)
        except Exception as e:
            message = format_template(config.callback_error_template, e)
            return self._context.reporter.report(ErrorKind.CALLBACK, message, exception=e)
