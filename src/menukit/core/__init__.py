"""
Core - elements, dependencies and the factory that builds them.
"""

from .aliases import AliasRegistry, resolve_aliases, ALIAS_PATTERN
from .callbacks import SafeCallback
from .context import MenuContext
from .dependency import DependencyGraph
from .element import Element, ORIGIN_ELEMENT, ORIGIN_REFERENCE
from .factory import ElementFactory
from .group import Group, KindMethods
from .matcher import contains
from .reporting import ErrorReporter

__all__ = [
    "AliasRegistry",
    "resolve_aliases",
    "ALIAS_PATTERN",
    "SafeCallback",
    "MenuContext",
    "DependencyGraph",
    "Element",
    "ORIGIN_ELEMENT",
    "ORIGIN_REFERENCE",
    "ElementFactory",
    "Group",
    "KindMethods",
    "contains",
    "ErrorReporter",
]
