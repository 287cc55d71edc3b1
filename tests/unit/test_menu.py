"""
Unit tests for the Menu facade.
"""

import pytest

from menukit import Menu, MockHost
from menukit.core.element import ORIGIN_REFERENCE
from menukit.logging import is_debug_enabled, set_debug_enabled
from menukit.models.config import MenuConfig
from menukit.models.errors import ErrorKind
from menukit.models.kinds import WidgetKind


@pytest.fixture
def populated(menu):
    """Menu with two widgets in LUA/A and one in LUA/B."""
    menu.checkbox("LUA", "A", "Enabled")
    menu.combobox("LUA", "A", "Mode", ["Off", "Legit", "Rage"])
    menu.listbox("LUA", "B", "Configs", ["a", "b"])
    return menu


class TestFind:
    """Tests for wrapping existing host widgets."""

    def test_find_by_full_path(self, populated):
        element = populated.find("LUA", "A", "Mode")

        assert element.origin == ORIGIN_REFERENCE
        assert element.kind() == WidgetKind.COMBOBOX
        assert element.name() == "Mode"
        assert element.args is None
        assert element.list() is None

    def test_found_reference_repr(self, populated):
        assert repr(populated.find("LUA", "A", "Enabled")) == "reference::checkbox(Enabled)"

    def test_find_shares_host_state(self, populated):
        created = populated.checkbox("LUA", "C", "Silent")
        found = populated.find("LUA", "C", "Silent")

        created.set(True)

        assert found.reference() == created.reference()
        assert found.get() is True

    def test_find_child_index(self, populated):
        first = populated.find("LUA", "A")
        second = populated.find("LUA", "A", child=1)

        assert first.name() == "Enabled"
        assert second.name() == "Mode"

    def test_child_too_big(self, populated):
        assert populated.find("LUA", "A", child=2) is None

        error = populated.errors[-1]
        assert error.kind == ErrorKind.RESOLUTION
        assert "invalid child (too big)" in error.message

    def test_nothing_found(self, populated):
        assert populated.find("MISC", "Nope") is None
        assert populated.errors[-1].kind == ErrorKind.RESOLUTION
        assert "Nothing found" in populated.errors[-1].message

    def test_find_all(self, populated):
        names = [element.name() for element in populated.find_all("LUA")]
        assert names == ["Enabled", "Mode", "Configs"]

    def test_find_all_nothing(self, populated):
        assert populated.find_all("MISC") == []
        assert populated.errors[-1].kind == ErrorKind.RESOLUTION

    def test_mock_reference_override(self, menu, mock_host):
        builtin = menu.checkbox("HIDDEN", "X", "Bunny hop")
        mock_host.set_mock_reference(("MISC", "Movement", "Bunny hop"), [builtin.reference()])

        found = menu.find("MISC", "Movement", "Bunny hop")
        assert found.reference() == builtin.reference()

    def test_found_element_can_depend(self, populated):
        enabled = populated.find("LUA", "A", "Enabled")
        configs = populated.find("LUA", "B", "Configs")

        configs.depend(enabled)
        assert configs.visible is False


class TestContains:
    """Tests for the free-function contains."""

    def test_contains(self, populated):
        mode = populated.find("LUA", "A", "Mode")
        assert populated.contains(mode, 0) is True
        assert populated.contains(mode, 1) is False

    def test_contains_without_element(self, menu):
        assert menu.contains(None, 1) is None
        assert menu.errors[-1].kind == ErrorKind.USAGE


class TestAlias:
    """Tests for alias registration through the menu."""

    def test_alias_returns_pair(self, menu):
        assert menu.alias("feature", "Aimbot") == ("feature", "Aimbot")

    def test_duplicate_alias_rejected(self, menu):
        menu.alias("feature", "Aimbot")

        assert menu.alias("feature", "Triggerbot") is None
        assert menu.errors[-1].kind == ErrorKind.REGISTRATION
        assert menu.checkbox("LUA", "A", "{{feature}}").name() == "Aimbot"


class TestSwitches:
    """Tests for the configuration switches."""

    def test_defaults(self, menu):
        assert menu.config == MenuConfig()
        assert repr(menu) == "menu"

    def test_set_debug(self, menu):
        try:
            menu.set_debug(True)
            assert menu.config.debug is True
            assert is_debug_enabled()
        finally:
            set_debug_enabled(False)

    def test_debug_from_config(self):
        try:
            menu = Menu(MockHost(), config=MenuConfig(debug=True))
            assert menu.config.debug is True
            assert is_debug_enabled()
        finally:
            set_debug_enabled(False)

    def test_set_safe_callbacks(self, menu):
        menu.set_safe_callbacks(True)
        assert menu.config.safe_callbacks is True

    def test_menus_do_not_share_state(self):
        first = Menu(MockHost())
        second = Menu(MockHost())

        first.alias("feature", "Aimbot")
        first.set_safe_callbacks(True)

        assert "feature" not in second.context.aliases
        assert second.config.safe_callbacks is False
