"""
Unit tests for configuration and kind models.
"""

import pytest

from menukit.models.config import (
    DEFAULT_CALLBACK_ERROR_TEMPLATE,
    MenuConfig,
    format_template,
    is_valid_template,
)
from menukit.models.kinds import WidgetKind, to_kind


class TestMenuConfig:
    """Tests for MenuConfig model."""

    def test_defaults(self):
        config = MenuConfig()

        assert config.debug is False
        assert config.safe_callbacks is False
        assert config.callback_error_template == DEFAULT_CALLBACK_ERROR_TEMPLATE

    def test_to_dict(self):
        config = MenuConfig(debug=True, safe_callbacks=True, callback_error_template="x {error}")
        data = config.to_dict()

        assert data == {
            "debug": True,
            "safe_callbacks": True,
            "callback_error_template": "x {error}",
        }

    def test_from_dict(self):
        config = MenuConfig.from_dict({"safe_callbacks": True})

        assert config.safe_callbacks is True
        assert config.debug is False
        assert config.callback_error_template == DEFAULT_CALLBACK_ERROR_TEMPLATE

    def test_from_dict_invalid_template_falls_back(self):
        config = MenuConfig.from_dict({"callback_error_template": "{error} and {error}"})
        assert config.callback_error_template == DEFAULT_CALLBACK_ERROR_TEMPLATE


class TestTemplates:
    """Tests for callback error templates."""

    @pytest.mark.parametrize("template,valid", [
        ("callback failed: {error}", True),
        ("{error}", True),
        ("no placeholder", False),
        ("{error} {error}", False),
        (None, False),
    ])
    def test_is_valid_template(self, template, valid):
        assert is_valid_template(template) is valid

    def test_format_template(self):
        assert format_template("[x] {error}!", ValueError("bad")) == "[x] bad!"


class TestWidgetKind:
    """Tests for WidgetKind coercion."""

    def test_string_and_enum_are_equal(self):
        assert WidgetKind.COLOR_PICKER == "color_picker"
        assert to_kind("color_picker") is WidgetKind.COLOR_PICKER

    def test_enum_passes_through(self):
        assert to_kind(WidgetKind.HOTKEY) is WidgetKind.HOTKEY

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            to_kind("spinner")
