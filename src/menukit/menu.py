"""
Menu - public entry point of menukit.

Usage:
    menu = Menu(QtHost())
    enabled = menu.checkbox("LUA", "A", "Enabled")
    mode = menu.combobox("LUA", "A", "Mode", ["Off", "Legit", "Rage"])
    mode.depend(enabled)

    aim = menu.group("LUA", "B")
    fov = aim.slider("FOV", 0, 180, 90)
    fov.multi_depend(enabled, (mode, 2))
"""

from typing import Any, List, Optional, Union

from .core.context import MenuContext
from .core.element import Element, ORIGIN_REFERENCE
from .core.factory import ElementFactory
from .core.group import Group, KindMethods
from .core.matcher import contains as _contains
from .events.event_bus import EventBus
from .logging import logger, set_debug_enabled
from .models.config import MenuConfig, is_valid_template, ERROR_PLACEHOLDER
from .models.errors import ErrorKind
from .models.kinds import WidgetKind, to_kind
from .services.interfaces import IHostAPI


class Menu(KindMethods):
    """
    Declarative facade over a widget host.

    Provides one creation method per widget kind plus ``create(kind, ...)``,
    aliases, groups, lookup of existing widgets and the configuration
    switches (debug logging, safe callbacks, callback error template).
    """

    def __init__(
        self,
        host: IHostAPI,
        config: Optional[MenuConfig] = None,
        events: Optional[EventBus] = None,
    ):
        """
        Initialize the menu.

        Args:
            host: Widget host implementing IHostAPI
            config: Initial switches (defaults if not provided)
            events: Event bus to publish on (a private one if not provided)
        """
        self._context = MenuContext(
            host=host,
            config=config or MenuConfig(),
            events=events or EventBus(),
        )
        self._factory = ElementFactory(self._context)
        if self._context.config.debug:
            set_debug_enabled(True)

    @property
    def context(self) -> MenuContext:
        return self._context

    @property
    def host(self) -> IHostAPI:
        return self._context.host

    @property
    def config(self) -> MenuConfig:
        return self._context.config

    @property
    def events(self) -> EventBus:
        return self._context.events

    @property
    def errors(self):
        """Recently reported errors (MenuErrorEvent), oldest first."""
        return self._context.reporter.errors

    # =========================================================================
    # Creation
    # =========================================================================

    def create(self, kind: Union[str, WidgetKind], *args: Any) -> Optional[Element]:
        """
        Create an element of any kind.

        Args:
            kind: Widget kind name or WidgetKind
            *args: (tab, container, label, ...) or (group, label, ...)
        """
        return self._factory.create(kind, *args)

    def group(self, tab: Any, container: Any) -> Optional[Group]:
        """Curry a (tab, container) pair for subsequent creation calls."""
        if isinstance(tab, Group) or isinstance(container, Group):
            return self._context.reporter.report(
                ErrorKind.RESOLUTION,
                "Invalid usage: menu.group(tab, container) does not accept a group",
            )
        return Group(tab, container, self._factory)

    def alias(self, word: str, replacement: Any):
        """
        Register a ``{{word}}`` alias for string arguments.

        Returns:
            (word, replacement), or None if rejected
        """
        return self._context.aliases.register(word, replacement)

    # =========================================================================
    # Lookup
    # =========================================================================

    def find(self, *path: Any, child: Optional[int] = None) -> Optional[Element]:
        """
        Wrap an existing host widget.

        Args:
            *path: Host path, e.g. (tab, container, label)
            child: Index among the resolved handles (defaults to the first)

        Returns:
            Element with origin "reference", or None if nothing resolves
        """
        handles = self._context.host.resolve_reference(*path)
        if not handles:
            return self._context.reporter.report(
                ErrorKind.RESOLUTION,
                f"[menu.find] Nothing found at {list(path)!r}",
            )

        index = 0 if child is None else child
        if not 0 <= index < len(handles):
            return self._context.reporter.report(
                ErrorKind.RESOLUTION,
                f"[menu.find] You are trying to access an invalid child (too big): "
                f"{index} of {len(handles)}",
            )

        return self._wrap_reference(handles[index])

    def find_all(self, *path: Any) -> List[Element]:
        """Wrap every host widget resolved by ``path``."""
        handles = self._context.host.resolve_reference(*path)
        if not handles:
            self._context.reporter.report(
                ErrorKind.RESOLUTION,
                f"[menu.find_all] Nothing found at {list(path)!r}",
            )
            return []
        return [self._wrap_reference(handle) for handle in handles]

    def _wrap_reference(self, handle: Any) -> Element:
        kind = to_kind(self._context.host.get_kind(handle))
        element = Element(self._context, handle, kind, None, origin=ORIGIN_REFERENCE)
        logger.debug(f"Found {element!r}")
        return element

    # =========================================================================
    # Containment
    # =========================================================================

    def contains(self, element: Element, value: Any) -> Optional[bool]:
        """Free-function form of Element.contains."""
        if not isinstance(element, Element):
            return self._context.reporter.report(
                ErrorKind.USAGE,
                "Invalid usage, please use: menu.contains(element, value)",
            )
        return _contains(element, value)

    # =========================================================================
    # Configuration
    # =========================================================================

    def set_debug(self, enabled: bool) -> None:
        """Toggle debug logging."""
        self._context.config.debug = bool(enabled)
        set_debug_enabled(bool(enabled))

    def set_safe_callbacks(self, enabled: bool) -> None:
        """Toggle catching and reporting of callback failures."""
        self._context.config.safe_callbacks = bool(enabled)

    def set_callback_error_template(self, template: str) -> Optional[str]:
        """
        Set the message used for failed callbacks in safe mode.

        The template must contain exactly one ``{error}`` placeholder.

        Returns:
            The template, or None if rejected
        """
        if not is_valid_template(template):
            return self._context.reporter.report(
                ErrorKind.USAGE,
                f"Callback error template must contain exactly one {ERROR_PLACEHOLDER} placeholder",
            )
        self._context.config.callback_error_template = template
        return template

    def __repr__(self) -> str:
        return "menu"
