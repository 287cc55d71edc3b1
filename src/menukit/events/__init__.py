"""
Event system for observing menu activity.
"""

from .event_bus import (
    EventBus,
    MenuEvent,
    ElementCreatedEvent,
    VisibilityChangedEvent,
    AliasRegisteredEvent,
    MenuErrorEvent,
)

__all__ = [
    "EventBus",
    "MenuEvent",
    "ElementCreatedEvent",
    "VisibilityChangedEvent",
    "AliasRegisteredEvent",
    "MenuErrorEvent",
]
