"""
menukit

A declarative layer over an imperative widget host. Controls are created
through one uniform factory and come back as Elements exposing the same
operation set for every widget kind:
- get/set/update of values
- visibility and enabled state
- value-change callbacks (optionally failure-safe)
- visibility computed from other elements' values (depend)
- per-kind value containment
"""

from .menu import Menu
from .core import (
    AliasRegistry,
    DependencyGraph,
    Element,
    ElementFactory,
    ErrorReporter,
    Group,
    MenuContext,
    SafeCallback,
    contains,
    resolve_aliases,
)
from .events import (
    EventBus,
    MenuEvent,
    ElementCreatedEvent,
    VisibilityChangedEvent,
    AliasRegisteredEvent,
    MenuErrorEvent,
)
from .models import ErrorKind, MenuConfig, WidgetKind
from .services import IHostAPI, InMemoryHost, MockHost
from .definitions import (
    MenuDefinitionParser,
    MenuDefinitionError,
    MenuBuilder,
    BuiltMenu,
    load_menu,
    build_menu,
)
from .logging import (
    logger,
    configure_logging,
    set_debug_enabled,
    is_debug_enabled,
    log_reported_error,
)

__all__ = [
    # Entry point
    "Menu",
    # Core
    "AliasRegistry",
    "DependencyGraph",
    "Element",
    "ElementFactory",
    "ErrorReporter",
    "Group",
    "MenuContext",
    "SafeCallback",
    "contains",
    "resolve_aliases",
    # Events
    "EventBus",
    "MenuEvent",
    "ElementCreatedEvent",
    "VisibilityChangedEvent",
    "AliasRegisteredEvent",
    "MenuErrorEvent",
    # Models
    "ErrorKind",
    "MenuConfig",
    "WidgetKind",
    # Hosts
    "IHostAPI",
    "InMemoryHost",
    "MockHost",
    # Definitions
    "MenuDefinitionParser",
    "MenuDefinitionError",
    "MenuBuilder",
    "BuiltMenu",
    "load_menu",
    "build_menu",
    # Logging
    "logger",
    "configure_logging",
    "set_debug_enabled",
    "is_debug_enabled",
    "log_reported_error",
]
