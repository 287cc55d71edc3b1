"""
Menu Definition Schema

Dataclass models describing a declarative menu loaded from YAML.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ..models.kinds import WidgetKind

CURRENT_SCHEMA_VERSION = 1
SUPPORTED_SCHEMA_VERSIONS = [1]


@dataclass
class DependencyRule:
    """Visibility rule: show when `element` holds `value` (or is truthy)."""
    element: str  # ID of the element to check
    value: Optional[Any] = None


@dataclass
class ElementDefinition:
    """Definition of a single menu element."""
    id: str
    kind: WidgetKind
    label: str
    args: List[Any] = field(default_factory=list)  # Kind-specific constructor args
    value: Optional[Any] = None  # Initial value pushed after construction
    enabled: bool = True
    depend: List[DependencyRule] = field(default_factory=list)


@dataclass
class GroupDefinition:
    """A tab/container pair and the elements placed in it."""
    tab: str
    container: str
    elements: List[ElementDefinition] = field(default_factory=list)


@dataclass
class MenuSettings:
    """
    Switches set by a definition file.

    Only keys present in the file are set; None means "leave the menu's
    current value alone".
    """
    debug: Optional[bool] = None
    safe_callbacks: Optional[bool] = None
    callback_error_template: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Only the switches the file sets."""
        data = {
            "debug": self.debug,
            "safe_callbacks": self.safe_callbacks,
            "callback_error_template": self.callback_error_template,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class MenuDefinition:
    """Root of a menu definition file."""
    schema_version: int = CURRENT_SCHEMA_VERSION
    settings: Optional[MenuSettings] = None
    aliases: Dict[str, str] = field(default_factory=dict)
    groups: List[GroupDefinition] = field(default_factory=list)

    def iter_elements(self) -> Iterator[ElementDefinition]:
        """Iterate element definitions in file order."""
        for group in self.groups:
            yield from group.elements

    def get_element(self, element_id: str) -> Optional[ElementDefinition]:
        for element in self.iter_elements():
            if element.id == element_id:
                return element
        return None
