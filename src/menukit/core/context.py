"""
MenuContext - state shared by the factory, groups and elements.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..events.event_bus import EventBus
from ..models.config import MenuConfig
from ..services.interfaces import IHostAPI
from .aliases import AliasRegistry
from .reporting import ErrorReporter


@dataclass
class MenuContext:
    """
    Explicit context threaded through the menu layer.

    One context is created per Menu; nothing here is module-global.
    """
    host: IHostAPI
    config: MenuConfig = field(default_factory=MenuConfig)
    events: EventBus = field(default_factory=EventBus)
    reporter: Optional[ErrorReporter] = None
    aliases: Optional[AliasRegistry] = None

    def __post_init__(self):
        if self.reporter is None:
            self.reporter = ErrorReporter(self.events)
        if self.aliases is None:
            self.aliases = AliasRegistry(self.reporter, self.events)
