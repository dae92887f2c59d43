"""
Tests for environment driven codec configuration.
"""
import pytest

from PrintAPI.exceptions import ConfigurationError
from PrintAPI.utils.config import (
    INCLUDE_NULLS_ENV,
    JSON_INDENT_ENV,
    CodecConfig,
    get_codec_config,
    load_codec_config,
    reset_codec_config,
)


class TestLoadCodecConfig:

    def test_defaults(self):
        config = load_codec_config()
        assert config == CodecConfig()
        assert config.json_indent is None
        assert config.include_nulls is False

    def test_indent(self, monkeypatch):
        monkeypatch.setenv(JSON_INDENT_ENV, "2")
        assert load_codec_config().json_indent == 2

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_include_nulls_true(self, monkeypatch, value):
        monkeypatch.setenv(INCLUDE_NULLS_ENV, value)
        assert load_codec_config().include_nulls is True

    @pytest.mark.parametrize("value", ["0", "false", "No", ""])
    def test_include_nulls_false(self, monkeypatch, value):
        monkeypatch.setenv(INCLUDE_NULLS_ENV, value)
        assert load_codec_config().include_nulls is False

    @pytest.mark.parametrize("value", ["two", "1.5", "-1"])
    def test_bad_indent_rejected(self, monkeypatch, value):
        monkeypatch.setenv(JSON_INDENT_ENV, value)
        with pytest.raises(ConfigurationError) as exc_info:
            load_codec_config()
        assert exc_info.value.config_field == JSON_INDENT_ENV
        assert exc_info.value.config_value == value

    def test_bad_boolean_rejected(self, monkeypatch):
        monkeypatch.setenv(INCLUDE_NULLS_ENV, "maybe")
        with pytest.raises(ConfigurationError) as exc_info:
            load_codec_config()
        assert exc_info.value.to_dict()["error_code"] == "CONFIGURATION_ERROR"


class TestCachedCodecConfig:

    def test_cached_until_reset(self, monkeypatch):
        first = get_codec_config()
        monkeypatch.setenv(JSON_INDENT_ENV, "3")
        assert get_codec_config() is first

        reset_codec_config()
        assert get_codec_config().json_indent == 3
