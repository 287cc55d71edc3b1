"""
Element - uniform handle around one host widget.

Every widget kind exposes the same operation set regardless of the
underlying control. Elements have a fixed shape: state is held in slots
and only changed through the operations below.
"""

import functools
from typing import Any, Callable, Optional, Sequence, Tuple

from ..events.event_bus import VisibilityChangedEvent
from ..logging import logger
from ..models.errors import ErrorKind
from ..models.kinds import WidgetKind
from .callbacks import SafeCallback
from .dependency import DependencyGraph, Edge
from .matcher import contains as _contains
from .reporting import default_reporter

ORIGIN_ELEMENT = "element"
ORIGIN_REFERENCE = "reference"


def requires_receiver(usage: str):
    """
    Guard an Element operation against a missing receiver.

    ``Element.get(None)`` reports a usage error and returns None instead of
    failing inside the host boundary.

    The error goes to the menu of an Element passed among the arguments
    (``Element.depend(None, enabled)``). With no Element to reach a menu
    through, it goes to ``reporting.default_reporter``, which logs it but
    is attached to no EventBus.
    """
    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            if not isinstance(self, Element):
                return _reporter_for(args).report(
                    ErrorKind.USAGE,
                    f"Invalid usage, please use: [element]:{usage}",
                )
            return method(self, *args, **kwargs)
        return wrapper
    return decorator


def _reporter_for(args: Sequence[Any]) -> Any:
    for arg in args:
        if isinstance(arg, Element):
            return arg._context.reporter
    return default_reporter


def _match_value(value: Any) -> Any:
    return None if value is False else value


class Element:
    """
    Structured handle for one host widget.

    Attributes are read-only; the widget's value, visibility and
    dependencies change through the methods only.
    """

    __slots__ = (
        "_context",
        "_handle",
        "_kind",
        "_args",
        "_origin",
        "_graph",
        "_visible",
        "_callback",
    )

    def __init__(
        self,
        context: Any,
        handle: Any,
        kind: WidgetKind,
        args: Optional[Sequence[Any]] = None,
        origin: str = ORIGIN_ELEMENT,
    ):
        """
        Wrap a host handle.

        Args:
            context: MenuContext shared with the factory
            handle: Opaque handle returned by the host
            kind: Widget kind (fixed for the element's lifetime)
            args: Preprocessed construction args, None for found references
            origin: "element" when created by the factory, "reference" when found
        """
        self._context = context
        self._handle = handle
        self._kind = kind
        self._args = tuple(args) if args is not None else None
        self._origin = origin
        self._graph = DependencyGraph()
        self._visible = True
        self._callback: Optional[SafeCallback] = None

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def visible(self) -> bool:
        """Visibility last pushed to the host."""
        return self._visible

    @property
    def dependencies(self) -> Tuple[Edge, ...]:
        """Snapshot of (dependency, match value) edges, in insertion order."""
        return self._graph.edges()

    @property
    def args(self) -> Optional[Tuple[Any, ...]]:
        """Construction args as passed to the host."""
        return self._args

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def callback(self) -> Optional[Callable[[Any, Any], Any]]:
        """Currently registered user callback."""
        return self._callback.callback if self._callback is not None else None

    @property
    def _host(self):
        return self._context.host

    # =========================================================================
    # Operations
    # =========================================================================

    @requires_receiver("get()")
    def get(self) -> Any:
        """Get the current value from the host."""
        return self._host.get_value(self._handle)

    @requires_receiver("set(...)")
    def set(self, *values: Any) -> Tuple[Any, ...]:
        """Push values to the host."""
        self._host.set_value(self._handle, *values)
        logger.debug(f"{self!r}: set {values!r}")
        return (self,) + values

    @requires_receiver("reference()")
    def reference(self) -> Any:
        """Get the raw host handle."""
        return self._handle

    @requires_receiver("set_visible(boolean)")
    def set_visible(self, visible: bool) -> Tuple[Any, bool]:
        """Show or hide the element."""
        self._host.set_visible(self._handle, visible)
        self._visible = bool(visible)
        self._context.events.emit(VisibilityChangedEvent(element=self, visible=self._visible))
        return self, visible

    @requires_receiver("set_enabled(boolean)")
    def set_enabled(self, enabled: bool) -> Tuple[Any, bool]:
        """Enable or disable the element. Does not affect visibility."""
        self._host.set_enabled(self._handle, enabled)
        return self, enabled

    @requires_receiver("set_callback(function(element, original))")
    def set_callback(self, callback: Callable[[Any, Any], Any]):
        """
        Register the value-change callback.

        The host invokes ``callback(element, original)`` where ``original``
        is the raw host handle. Replaces any earlier callback.
        """
        if not callable(callback):
            return self._context.reporter.report(
                ErrorKind.USAGE,
                f"Invalid usage, please use: [{self._origin}]:set_callback(function(element, original))",
            )
        self._callback = SafeCallback(self, callback, self._context)
        self._host.set_change_callback(self._handle, self._callback)
        return self, callback

    @requires_receiver("name()")
    def name(self) -> str:
        """Host-reported display label."""
        return self._host.get_name(self._handle)

    @requires_receiver("kind()")
    def kind(self) -> WidgetKind:
        return self._kind

    @requires_receiver("list()")
    def list(self) -> Optional[Sequence[Any]]:
        """
        Option list given at construction (4th constructor argument).

        Returns None when the element was not built with a sequence there.
        """
        if self._args is None or len(self._args) < 4:
            return None
        options = self._args[3]
        if isinstance(options, (list, tuple)):
            return options
        return None

    @requires_receiver("depend(element, ?value)")
    def depend(self, dependency: "Element", value: Optional[Any] = None):
        """
        Make this element's visibility depend on another element.

        Adds the (dependency, value) edge if new, recomputes visibility
        from all edges and pushes it to the host.
        A match value of None or False means "no match value": the edge
        then holds while the dependency's value is truthy.

        Returns:
            (self, dependency, dependency value, value) when ``value`` is
            given, else (self, dependency, dependency value)
        """
        if not isinstance(dependency, Element):
            return self._context.reporter.report(
                ErrorKind.USAGE,
                "Invalid usage, please use: [element]:depend(element, ?value)",
            )

        value = _match_value(value)

        if self._graph.add(dependency, value):
            logger.debug(f"{self!r}: depends on {dependency!r} (value={value!r})")
        self._refresh_visibility()

        current = dependency.get()
        if value is not None:
            return self, dependency, current, value
        return self, dependency, current

    @requires_receiver("multi_depend(...)")
    def multi_depend(self, *pairs: Any):
        """
        Apply depend() for each pair, in order.

        Each pair is an Element, or an ``(element,)`` / ``(element, value)``
        tuple.

        Returns:
            The full dependency list after all pairs are applied
        """
        for pair in pairs:
            if isinstance(pair, Element):
                self.depend(pair)
            elif isinstance(pair, (tuple, list)) and 1 <= len(pair) <= 2:
                self.depend(*pair)
            else:
                self._context.reporter.report(
                    ErrorKind.USAGE,
                    f"Invalid usage, please use: [{self._origin}]:multi_depend(element, {{element, value}}, ...)",
                )
        return list(self._graph.edges())

    @requires_receiver("remove_dependency(element, ?value)")
    def remove_dependency(self, dependency: "Element", value: Optional[Any] = None) -> bool:
        """
        Drop a (dependency, value) edge and recompute visibility.

        Returns:
            True if the edge existed
        """
        removed = self._graph.remove(dependency, _match_value(value))
        if removed:
            self._refresh_visibility()
        return removed

    @requires_receiver("update(...)")
    def update(self, *values: Any) -> Tuple[Any, ...]:
        """Refresh the host widget (e.g. repopulate a list's options)."""
        self._host.refresh(self._handle, *values)
        return (self,) + values

    @requires_receiver("contains(value)")
    def contains(self, value: Any) -> bool:
        """Check whether the element currently holds ``value``."""
        return _contains(self, value)

    def _refresh_visibility(self) -> None:
        visible = self._graph.evaluate()
        logger.debug(f"{self!r}: visibility recomputed over {len(self._graph)} edge(s) -> {visible}")
        self.set_visible(visible)

    def __repr__(self) -> str:
        options = self.list()
        kind = self._kind.value
        name = self.name()
        if options is not None:
            return f"{self._origin}::{kind}[{len(options)}]({name})"
        return f"{self._origin}::{kind}({name})"
