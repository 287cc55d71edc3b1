"""
Integration tests for the Qt widget host.

Drives real PyQt5 controls through the menu layer.
"""

from unittest.mock import patch

import pytest

from PyQt5.QtWidgets import QApplication, QCheckBox, QComboBox, QListWidget, QSlider


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication instance for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def host(qapp):
    from menukit.services.qt_host import QtHost
    return QtHost()


@pytest.fixture
def qt_menu(host):
    from menukit import Menu
    return Menu(host)


class TestConstruction:
    """Tests for mapping kinds to Qt controls."""

    def test_controls_created(self, host):
        checkbox = host.construct("checkbox", "LUA", "A", "Enabled")
        slider = host.construct("slider", "LUA", "A", "FOV", 0, 180, 90)
        combo = host.construct("combobox", "LUA", "A", "Mode", ["Off", "On"])
        listbox = host.construct("listbox", "LUA", "B", "Configs", ["a", "b"])

        assert isinstance(host.widget(checkbox), QCheckBox)
        assert isinstance(host.widget(slider), QSlider)
        assert isinstance(host.widget(combo), QComboBox)
        assert isinstance(host.widget(listbox), QListWidget)

    def test_tabs_and_containers(self, host):
        host.construct("checkbox", "LUA", "A", "One")
        host.construct("checkbox", "LUA", "B", "Two")
        host.construct("checkbox", "MISC", "A", "Three")

        assert host.root.count() == 2
        assert host.root.tabText(0) == "LUA"
        assert host.root.tabText(1) == "MISC"

    def test_too_few_args(self, host):
        with pytest.raises(TypeError):
            host.construct("checkbox", "LUA", "A")

    def test_unknown_kind(self, host):
        with pytest.raises(ValueError):
            host.construct("spinner", "LUA", "A", "Nope")


class TestValues:
    """Tests for get/set per kind."""

    @pytest.mark.parametrize("kind,args,initial,value", [
        ("checkbox", (), False, True),
        ("slider", (0, 180, 90), 90, 45),
        ("combobox", (["Off", "Legit", "Rage"],), 0, 2),
        ("listbox", (["a", "b", "c"],), 0, 1),
        ("multiselect", (["Head", "Chest", "Legs"],), [], ["Head", "Legs"]),
        ("color_picker", (255, 0, 0), (255, 0, 0, 255), (0, 255, 0, 128)),
        ("textbox", ("hello",), "hello", "world"),
        ("label", (), "Caption", "Changed"),
        ("hotkey", ("Ctrl+A",), "Ctrl+A", "Ctrl+B"),
    ])
    def test_get_and_set(self, host, kind, args, initial, value):
        handle = host.construct(kind, "LUA", "A", "Caption", *args)

        assert host.get_value(handle) == initial
        host.set_value(handle, value)
        assert host.get_value(handle) == value

    def test_color_set_from_components(self, host):
        handle = host.construct("color_picker", "LUA", "A", "Color")
        host.set_value(handle, 10, 20, 30, 40)
        assert host.get_value(handle) == (10, 20, 30, 40)

    def test_refresh_list(self, host):
        handle = host.construct("listbox", "LUA", "A", "Configs", ["a", "b"])
        host.refresh(handle, ["x", "y", "z"])

        assert host.widget(handle).count() == 3
        assert host.get_value(handle) == 0

    def test_refresh_label(self, host):
        handle = host.construct("label", "LUA", "A", "Header")
        host.refresh(handle, "Footer")

        assert host.get_name(handle) == "Footer"
        assert host.get_value(handle) == "Footer"


class TestCallbacks:
    """Tests for signal-driven change callbacks."""

    def test_change_signal_dispatches(self, host):
        handle = host.construct("checkbox", "LUA", "A", "Enabled")
        calls = []
        host.set_change_callback(handle, calls.append)

        host.widget(handle).setChecked(True)
        assert calls == [handle]

    def test_multiselect_dispatches_once(self, host):
        handle = host.construct("multiselect", "LUA", "A", "Targets", ["Head", "Chest"])
        calls = []
        host.set_change_callback(handle, calls.append)

        host.set_value(handle, ["Head", "Chest"])
        host.set_value(handle, ["Head", "Chest"])
        assert calls == [handle]

    def test_button_click(self, host):
        clicks = []
        handle = host.construct("button", "LUA", "A", "Go", clicks.append)

        host.widget(handle).click()
        assert clicks == [handle]

    def test_failing_callback_logged(self, host):
        from menukit.services import qt_host

        handle = host.construct("checkbox", "LUA", "A", "Enabled")

        def failing(original):
            raise RuntimeError("boom")

        host.set_change_callback(handle, failing)
        with patch.object(qt_host.logger, "error") as log_error:
            host.widget(handle).setChecked(True)

        log_error.assert_called_once()
        assert "boom" in log_error.call_args[0][0]


class TestVisibility:
    """Tests for visibility and enabled state."""

    def test_set_visible_hides_row(self, host):
        handle = host.construct("slider", "LUA", "A", "FOV", 0, 180)
        host.set_visible(handle, False)

        entry = host._entry(handle)
        assert entry.widget.isHidden()
        assert entry.label.isHidden()

    def test_set_enabled(self, host):
        handle = host.construct("slider", "LUA", "A", "FOV", 0, 180)
        host.set_enabled(handle, False)
        assert not host.widget(handle).isEnabled()


class TestResolveReference:
    """Tests for path lookup."""

    def test_prefix_match(self, host):
        first = host.construct("checkbox", "LUA", "A", "One")
        second = host.construct("checkbox", "LUA", "A", "Two")
        host.construct("checkbox", "LUA", "B", "Three")

        assert host.resolve_reference("LUA", "A") == [first, second]
        assert host.resolve_reference("LUA", "A", "Two") == [second]
        assert host.resolve_reference("MISC") == []


class TestMenuOverQt:
    """End-to-end tests of the menu layer over Qt controls."""

    def test_depend_hides_widget(self, qt_menu, host):
        enabled = qt_menu.checkbox("LUA", "A", "Enabled")
        mode = qt_menu.combobox("LUA", "A", "Mode", ["Off", "Legit", "Rage"])

        mode.depend(enabled)
        assert host.widget(mode.reference()).isHidden()

        enabled.set(True)
        mode.depend(enabled)
        assert not host.widget(mode.reference()).isHidden()

    def test_callback_rewires_visibility(self, qt_menu, host):
        enabled = qt_menu.checkbox("LUA", "A", "Enabled")
        fov = qt_menu.group("LUA", "B").slider("FOV", 0, 180, 90)
        fov.depend(enabled)
        enabled.set_callback(lambda element, original: fov.depend(element))

        host.widget(enabled.reference()).setChecked(True)
        assert fov.visible is True
        assert not host.widget(fov.reference()).isHidden()

    def test_find_wraps_qt_widget(self, qt_menu):
        qt_menu.listbox("LUA", "A", "Configs", ["a", "b", "c"])

        found = qt_menu.find("LUA", "A", "Configs")
        found.set(1)

        assert found.origin == "reference"
        assert found.get() == 1

    def test_safe_callback_reports(self, qt_menu, host):
        qt_menu.set_safe_callbacks(True)
        enabled = qt_menu.checkbox("LUA", "A", "Enabled")

        def failing(element, original):
            raise RuntimeError("boom")

        enabled.set_callback(failing)
        host.widget(enabled.reference()).setChecked(True)

        assert qt_menu.errors[-1].message == "callback failed: boom"
