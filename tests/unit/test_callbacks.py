"""
Unit tests for safe callback dispatch.
"""

import pytest

from menukit.models.config import DEFAULT_CALLBACK_ERROR_TEMPLATE
from menukit.models.errors import ErrorKind


def failing(element, original):
    raise RuntimeError("boom")


@pytest.fixture
def checkbox(menu):
    return menu.checkbox("LUA", "A", "Enabled")


class TestSafeCallbacks:
    """Tests for SafeCallback under both modes."""

    def test_failure_propagates_when_unsafe(self, menu, checkbox, mock_host):
        checkbox.set_callback(failing)

        with pytest.raises(RuntimeError, match="boom"):
            mock_host.fire(checkbox.reference())
        assert menu.errors == []

    def test_failure_reported_when_safe(self, menu, checkbox, mock_host):
        menu.set_safe_callbacks(True)
        checkbox.set_callback(failing)

        mock_host.fire(checkbox.reference())

        error = menu.errors[-1]
        assert error.kind == ErrorKind.CALLBACK
        assert error.message == "callback failed: boom"
        assert isinstance(error.exception, RuntimeError)

    def test_custom_template(self, menu, checkbox, mock_host):
        menu.set_safe_callbacks(True)
        assert menu.set_callback_error_template("[Enabled] -> {error}") == "[Enabled] -> {error}"
        checkbox.set_callback(failing)

        mock_host.fire(checkbox.reference())

        assert menu.errors[-1].message == "[Enabled] -> boom"

    def test_template_without_placeholder_rejected(self, menu):
        assert menu.set_callback_error_template("no placeholder") is None
        assert menu.config.callback_error_template == DEFAULT_CALLBACK_ERROR_TEMPLATE
        assert menu.errors[-1].kind == ErrorKind.USAGE

    def test_mode_read_at_dispatch_time(self, menu, checkbox, mock_host):
        checkbox.set_callback(failing)
        menu.set_safe_callbacks(True)

        mock_host.fire(checkbox.reference())

        assert menu.errors[-1].kind == ErrorKind.CALLBACK

    def test_result_passes_through(self, menu, checkbox):
        wrapper_calls = []
        checkbox.set_callback(lambda element, original: wrapper_calls.append(original) or "ok")
        menu.set_safe_callbacks(True)

        checkbox.set(True)

        assert wrapper_calls == [checkbox.reference()]
        assert menu.errors == []

    def test_callback_may_call_depend(self, menu, checkbox):
        fov = menu.slider("LUA", "A", "FOV", 0, 180)
        checkbox.set_callback(lambda element, original: fov.depend(element))

        checkbox.set(True)
        assert fov.visible is True
        checkbox.set(False)
        assert fov.visible is False
