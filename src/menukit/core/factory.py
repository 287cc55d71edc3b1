"""
ElementFactory - one generic creation path for every widget kind.

Arguments are preprocessed before they reach the host constructor:
1. ``{{word}}`` alias markers in string arguments are substituted
2. a Group argument is expanded in place into its tab and container
3. buttons without a callback get a no-op one (the host requires it)
"""

from typing import Any, List, Optional, Tuple, Union

from ..events.event_bus import ElementCreatedEvent
from ..logging import logger
from ..models.errors import ErrorKind
from ..models.kinds import WidgetKind, to_kind
from .element import Element
from .group import Group

# Position of the callback in a button's (tab, container, label, callback) args
BUTTON_CALLBACK_INDEX = 3


def _noop_callback(*_args: Any) -> None:
    return None


class ElementFactory:
    """Creates Elements through the host of a MenuContext."""

    def __init__(self, context: Any):
        self._context = context

    @property
    def context(self) -> Any:
        return self._context

    def create(self, kind: Union[str, WidgetKind], *args: Any) -> Optional[Element]:
        """
        Construct a widget and wrap it in an Element.

        Args:
            kind: Widget kind (unknown names raise ValueError)
            *args: (tab, container, label, ...) or (group, label, ...)

        Returns:
            The new Element, or None if the arguments were rejected
        """
        widget_kind = to_kind(kind)
        prepared = self.prepare_args(widget_kind, args)
        if prepared is None:
            return None

        handle = self._context.host.construct(widget_kind.value, *prepared)
        element = Element(self._context, handle, widget_kind, prepared)

        logger.debug(f"Created {element!r} with args {prepared!r}")
        self._context.events.emit(ElementCreatedEvent(element=element))
        return element

    def prepare_args(self, kind: WidgetKind, args: Tuple[Any, ...]) -> Optional[Tuple[Any, ...]]:
        """
        Run argument preprocessing without constructing anything.

        Returns:
            The arguments the host constructor would receive, or None if
            they were rejected (reported)
        """
        substituted = [self._substitute(arg) for arg in args]

        expanded = self._expand_groups(kind, substituted)
        if expanded is None:
            return None

        if kind == WidgetKind.BUTTON:
            self._inject_button_callback(expanded)

        return tuple(expanded)

    def _substitute(self, arg: Any) -> Any:
        """Apply alias substitution to a string or to the strings of an option list."""
        aliases = self._context.aliases
        if isinstance(arg, str):
            return aliases.resolve(arg)
        if isinstance(arg, list):
            return [aliases.resolve(item) for item in arg]
        if isinstance(arg, tuple):
            return tuple(aliases.resolve(item) for item in arg)
        return arg

    def _expand_groups(self, kind: WidgetKind, args: List[Any]) -> Optional[List[Any]]:
        """Replace a Group argument with its (tab, container) pair."""
        groups = [arg for arg in args if isinstance(arg, Group)]
        if not groups:
            return args
        if len(groups) > 1:
            return self._context.reporter.report(
                ErrorKind.RESOLUTION,
                f"Invalid usage: menu.{kind.value}(...) received {len(groups)} groups, only one is allowed",
            )

        expanded: List[Any] = []
        for arg in args:
            if isinstance(arg, Group):
                expanded.extend((arg.tab, arg.container))
            else:
                expanded.append(arg)
        return expanded

    @staticmethod
    def _inject_button_callback(args: List[Any]) -> None:
        if len(args) <= BUTTON_CALLBACK_INDEX:
            args.append(_noop_callback)
        elif args[BUTTON_CALLBACK_INDEX] is None:
            args[BUTTON_CALLBACK_INDEX] = _noop_callback
