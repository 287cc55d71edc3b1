"""
Menu Definition Parser

Loads YAML menu definitions and converts them to schema objects.
"""

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from ..models.config import is_valid_template, ERROR_PLACEHOLDER
from ..models.kinds import WidgetKind
from .schema import (
    CURRENT_SCHEMA_VERSION,
    SUPPORTED_SCHEMA_VERSIONS,
    DependencyRule,
    ElementDefinition,
    GroupDefinition,
    MenuDefinition,
    MenuSettings,
)


SETTING_KEYS = ("debug", "safe_callbacks", "callback_error_template")


class MenuDefinitionError(Exception):
    """Exception raised when parsing a menu definition fails."""

    def __init__(self, message: str, path: str = None):
        self.path = path
        location = f" in {path}" if path else ""
        super().__init__(f"{message}{location}")


class MenuDefinitionParser:
    """
    Parser for YAML menu definition files.

    Converts YAML into a validated MenuDefinition.
    """

    @classmethod
    def load(cls, path: Union[str, Path]) -> MenuDefinition:
        """
        Load and parse a YAML menu definition file.

        Raises:
            MenuDefinitionError: If parsing or validation fails
        """
        path = Path(path)
        if not path.exists():
            raise MenuDefinitionError(f"File not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MenuDefinitionError(f"Invalid YAML syntax: {e}", str(path))

        if data is None:
            raise MenuDefinitionError("Empty YAML file", str(path))

        return cls.parse(data, str(path))

    @classmethod
    def loads(cls, yaml_str: str, source: str = "<string>") -> MenuDefinition:
        """Parse a YAML string."""
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise MenuDefinitionError(f"Invalid YAML syntax: {e}", source)

        if data is None:
            raise MenuDefinitionError("Empty YAML content", source)

        return cls.parse(data, source)

    @classmethod
    def parse(cls, data: Dict[str, Any], source: str = "<dict>") -> MenuDefinition:
        """Parse a dictionary into a MenuDefinition."""
        parser = cls(source)
        return parser._parse_root(data)

    def __init__(self, source: str = "<unknown>"):
        self.source = source

    def _error(self, message: str) -> MenuDefinitionError:
        """Create a parse error with source context."""
        return MenuDefinitionError(message, self.source)

    def _require(self, data: dict, key: str, context: str = "") -> Any:
        """Require a key to be present in a dictionary."""
        if key not in data:
            ctx = f" in {context}" if context else ""
            raise self._error(f"Missing required field '{key}'{ctx}")
        return data[key]

    def _parse_root(self, data: dict) -> MenuDefinition:
        if not isinstance(data, dict):
            raise self._error("Menu definition must be a mapping")

        schema_version = data.get("schema_version", CURRENT_SCHEMA_VERSION)
        if schema_version not in SUPPORTED_SCHEMA_VERSIONS:
            raise self._error(
                f"Unsupported schema version '{schema_version}'. "
                f"Supported versions: {SUPPORTED_SCHEMA_VERSIONS}"
            )

        settings = None
        if "settings" in data:
            settings = self._parse_settings(data["settings"])

        aliases = self._parse_aliases(data.get("aliases", {}))

        groups = [
            self._parse_group(group_data)
            for group_data in self._require(data, "groups", "root")
        ]

        definition = MenuDefinition(
            schema_version=schema_version,
            settings=settings,
            aliases=aliases,
            groups=groups,
        )
        self._validate_references(definition)
        return definition

    def _parse_settings(self, data: dict) -> MenuSettings:
        if not isinstance(data, dict):
            raise self._error("'settings' must be a mapping")

        unknown = sorted(str(key) for key in data if key not in SETTING_KEYS)
        if unknown:
            raise self._error(f"Unknown settings {unknown}. Valid settings: {list(SETTING_KEYS)}")

        settings = MenuSettings()
        for key in ("debug", "safe_callbacks"):
            if key in data:
                if not isinstance(data[key], bool):
                    raise self._error(f"Setting '{key}' must be true or false")
                setattr(settings, key, data[key])

        if "callback_error_template" in data:
            template = data["callback_error_template"]
            if not is_valid_template(template):
                raise self._error(
                    f"callback_error_template must contain exactly one {ERROR_PLACEHOLDER} placeholder"
                )
            settings.callback_error_template = template
        return settings

    def _parse_aliases(self, data: Any) -> Dict[str, str]:
        if not isinstance(data, dict):
            raise self._error("'aliases' must be a mapping of word to replacement")
        return {str(word): str(replacement) for word, replacement in data.items()}

    def _parse_group(self, data: dict) -> GroupDefinition:
        tab = self._require(data, "tab", "group")
        container = self._require(data, "container", "group")
        elements = [
            self._parse_element(element_data, f"{tab}/{container}")
            for element_data in data.get("elements", [])
        ]
        return GroupDefinition(tab=str(tab), container=str(container), elements=elements)

    def _parse_element(self, data: dict, context: str) -> ElementDefinition:
        element_id = str(self._require(data, "id", f"element of {context}"))
        kind_str = self._require(data, "kind", f"element '{element_id}'")
        try:
            kind = WidgetKind(kind_str)
        except ValueError:
            raise self._error(
                f"Invalid kind '{kind_str}' for element '{element_id}'. "
                f"Valid kinds: {[k.value for k in WidgetKind]}"
            )

        args = data.get("args", [])
        if not isinstance(args, list):
            args = [args]

        return ElementDefinition(
            id=element_id,
            kind=kind,
            label=str(data.get("label", element_id)),
            args=args,
            value=data.get("value"),
            enabled=bool(data.get("enabled", True)),
            depend=self._parse_depend(data.get("depend", []), element_id),
        )

    def _parse_depend(self, data: Any, element_id: str) -> List[DependencyRule]:
        """
        Parse dependency rules.

        Accepts ``id``, ``[id]``, ``[id, value]`` or ``{element: id, value: v}``
        for each rule.
        """
        if not isinstance(data, list):
            data = [data]

        rules = []
        for entry in data:
            if isinstance(entry, str):
                rules.append(DependencyRule(element=entry))
            elif isinstance(entry, list) and 1 <= len(entry) <= 2:
                rules.append(DependencyRule(
                    element=str(entry[0]),
                    value=entry[1] if len(entry) == 2 else None,
                ))
            elif isinstance(entry, dict):
                rules.append(DependencyRule(
                    element=str(self._require(entry, "element", f"depend of '{element_id}'")),
                    value=entry.get("value"),
                ))
            else:
                raise self._error(f"Invalid dependency {entry!r} for element '{element_id}'")
        return rules

    def _validate_references(self, definition: MenuDefinition) -> None:
        """Check element IDs are unique and every dependency names one."""
        seen = set()
        for element in definition.iter_elements():
            if element.id in seen:
                raise self._error(f"Duplicate element id '{element.id}'")
            seen.add(element.id)

        for element in definition.iter_elements():
            for rule in element.depend:
                if rule.element not in seen:
                    raise self._error(
                        f"Element '{element.id}' depends on undefined element '{rule.element}'"
                    )
                if rule.element == element.id:
                    raise self._error(f"Element '{element.id}' cannot depend on itself")
