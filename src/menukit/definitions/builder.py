"""
Menu Builder

Turns a MenuDefinition into live Elements through a Menu.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Iterator, Union

from ..core.element import Element
from ..logging import logger
from .parser import MenuDefinitionParser
from .schema import MenuDefinition


class BuiltMenu(Mapping):
    """
    Elements of a built definition, keyed by element id.

    Visibility of dependent elements is computed once at build time;
    call refresh() after values change to recompute it.
    """

    def __init__(self, elements: Dict[str, Element], definition: MenuDefinition):
        self._elements = elements
        self._definition = definition

    @property
    def definition(self) -> MenuDefinition:
        return self._definition

    def refresh(self) -> None:
        """Recompute visibility of every element that has dependencies."""
        for element in self._elements.values():
            if element.dependencies:
                element.multi_depend(*element.dependencies)

    def __getitem__(self, element_id: str) -> Element:
        return self._elements[element_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)


class MenuBuilder:
    """Builds menus from definitions."""

    def __init__(self, menu: Any):
        self._menu = menu

    def build(self, definition: MenuDefinition) -> BuiltMenu:
        """
        Apply settings and aliases, create elements, then wire dependencies.

        Elements the factory rejects are reported and skipped; dependencies
        on them are skipped too.
        """
        self._apply_settings(definition)

        for word, replacement in definition.aliases.items():
            self._menu.alias(word, replacement)

        elements: Dict[str, Element] = {}
        for group_def in definition.groups:
            group = self._menu.group(group_def.tab, group_def.container)
            for element_def in group_def.elements:
                element = group.create(element_def.kind, element_def.label, *element_def.args)
                if element is None:
                    logger.warning(f"Element '{element_def.id}' was not created")
                    continue
                if element_def.value is not None:
                    element.set(element_def.value)
                if not element_def.enabled:
                    element.set_enabled(False)
                elements[element_def.id] = element

        for element_def in definition.iter_elements():
            if not element_def.depend or element_def.id not in elements:
                continue
            pairs = [
                (elements[rule.element], rule.value)
                for rule in element_def.depend
                if rule.element in elements
            ]
            elements[element_def.id].multi_depend(*pairs)

        logger.debug(f"Built menu with {len(elements)} element(s)")
        return BuiltMenu(elements, definition)

    def _apply_settings(self, definition: MenuDefinition) -> None:
        settings = definition.settings
        if settings is None:
            return
        # Switches the file leaves out keep the menu's current values
        if settings.debug is not None:
            self._menu.set_debug(settings.debug)
        if settings.safe_callbacks is not None:
            self._menu.set_safe_callbacks(settings.safe_callbacks)
        if settings.callback_error_template is not None:
            self._menu.set_callback_error_template(settings.callback_error_template)


def load_menu(menu: Any, path: Union[str, Path]) -> BuiltMenu:
    """
    Convenience function to load and build a YAML menu definition.

    Raises:
        MenuDefinitionError: If the file cannot be parsed
    """
    return MenuBuilder(menu).build(MenuDefinitionParser.load(path))


def build_menu(menu: Any, yaml_str: str) -> BuiltMenu:
    """Convenience function to build a menu from a YAML string."""
    return MenuBuilder(menu).build(MenuDefinitionParser.loads(yaml_str))
