"""
Configuration model for the menu layer.
"""

from dataclasses import dataclass
from typing import Any, Dict

# Placeholder substituted with the failure description
ERROR_PLACEHOLDER = "{error}"

DEFAULT_CALLBACK_ERROR_TEMPLATE = "callback failed: " + ERROR_PLACEHOLDER


def is_valid_template(template: str) -> bool:
    """Check that a callback error template has exactly one placeholder."""
    return isinstance(template, str) and template.count(ERROR_PLACEHOLDER) == 1


def format_template(template: str, error: Any) -> str:
    """Substitute the failure description into the template."""
    return template.replace(ERROR_PLACEHOLDER, str(error), 1)


@dataclass
class MenuConfig:
    """
    Process-level switches of a menu context.

    debug: emit debug traces through the menukit logger
    safe_callbacks: catch and report callback failures instead of
        letting them reach the host dispatcher
    callback_error_template: message used when a callback fails in safe mode
    """
    debug: bool = False
    safe_callbacks: bool = False
    callback_error_template: str = DEFAULT_CALLBACK_ERROR_TEMPLATE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "debug": self.debug,
            "safe_callbacks": self.safe_callbacks,
            "callback_error_template": self.callback_error_template,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MenuConfig":
        template = data.get("callback_error_template", DEFAULT_CALLBACK_ERROR_TEMPLATE)
        if not is_valid_template(template):
            template = DEFAULT_CALLBACK_ERROR_TEMPLATE
        return cls(
            debug=bool(data.get("debug", False)),
            safe_callbacks=bool(data.get("safe_callbacks", False)),
            callback_error_template=template,
        )
