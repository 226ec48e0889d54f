"""Tests for SimpleHttp configuration."""

import pytest

from simplehttp import DEFAULT_BEARER_PREFIX, JSON_CONTENT_TYPE, JsonOptions, SimpleHttpConfig


def test_config_defaults():
    """Test default configuration values."""
    config = SimpleHttpConfig()
    assert config.base_url == ""
    assert config.timeout == 5.0
    assert config.verify_ssl is True
    assert config.headers == {}


def test_config_custom_values():
    """Test configuration with custom values."""
    config = SimpleHttpConfig(
        base_url="https://api.example.com",
        timeout=10.0,
        verify_ssl=False,
        headers={"User-Agent": "svc/1.0"},
    )
    assert config.base_url == "https://api.example.com"
    assert config.timeout == 10.0
    assert config.verify_ssl is False
    assert config.headers == {"User-Agent": "svc/1.0"}


def test_config_trailing_slash_removed():
    """Test that trailing slash is removed from base_url."""
    config = SimpleHttpConfig(base_url="https://api.example.com/")
    assert config.base_url == "https://api.example.com"


def test_config_invalid_timeout():
    """Test that invalid timeout raises ValueError."""
    with pytest.raises(ValueError, match="timeout must be greater than 0"):
        SimpleHttpConfig(timeout=0)


def test_json_options_defaults():
    """Test default JSON options produce compact output."""
    options = JsonOptions()
    assert options.indent is None
    assert options.sort_keys is False
    assert options.ensure_ascii is False
    assert options.by_alias is True
    assert options.exclude_none is False
    assert options.strict is False
    assert options.separators == (",", ":")


def test_json_options_indented_separators():
    """Test indented output keeps a space after colons."""
    assert JsonOptions(indent=2).separators == (",", ": ")


def test_json_options_invalid_indent():
    """Test that a negative indent raises ValueError."""
    with pytest.raises(ValueError, match="indent must be non-negative"):
        JsonOptions(indent=-1)


def test_constants():
    """Test wire constants."""
    assert DEFAULT_BEARER_PREFIX == "Bearer"
    assert JSON_CONTENT_TYPE == "application/json; charset=utf-8"
