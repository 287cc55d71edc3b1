"""
Declarative YAML menu definitions.
"""

from .schema import (
    MenuDefinition,
    MenuSettings,
    GroupDefinition,
    ElementDefinition,
    DependencyRule,
    CURRENT_SCHEMA_VERSION,
    SUPPORTED_SCHEMA_VERSIONS,
)
from .parser import MenuDefinitionParser, MenuDefinitionError
from .builder import MenuBuilder, BuiltMenu, load_menu, build_menu

__all__ = [
    "MenuDefinition",
    "MenuSettings",
    "GroupDefinition",
    "ElementDefinition",
    "DependencyRule",
    "CURRENT_SCHEMA_VERSION",
    "SUPPORTED_SCHEMA_VERSIONS",
    "MenuDefinitionParser",
    "MenuDefinitionError",
    "MenuBuilder",
    "BuiltMenu",
    "load_menu",
    "build_menu",
]
