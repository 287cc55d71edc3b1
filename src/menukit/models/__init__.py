"""
Models - Pure Python dataclasses and enums.

No Qt dependencies in this package.
"""

from .kinds import WidgetKind, to_kind
from .errors import ErrorKind
from .config import (
    MenuConfig,
    DEFAULT_CALLBACK_ERROR_TEMPLATE,
    ERROR_PLACEHOLDER,
    format_template,
    is_valid_template,
)

__all__ = [
    "WidgetKind",
    "to_kind",
    "ErrorKind",
    "MenuConfig",
    "DEFAULT_CALLBACK_ERROR_TEMPLATE",
    "ERROR_PLACEHOLDER",
    "format_template",
    "is_valid_template",
]
