"""Tests for HueConfig."""

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from hue_transport.config import LOG_FORMAT, HueConfig, configure_logging


class TestHueConfig:
    """Test configuration validation and loading."""

    def test_defaults(self):
        cfg = HueConfig()

        assert cfg.bridge_host == "127.0.0.1"
        assert cfg.username is None
        assert cfg.log_level == "INFO"

    @pytest.mark.parametrize("host", ["192.168.1.64", "::1", "philips-hue.local", "bridge:8080"])
    def test_valid_hosts(self, host):
        assert HueConfig(bridge_host=host).bridge_host == host

    @pytest.mark.parametrize("host", ["", "http://192.168.1.64", "bridge/api", "bad host"])
    def test_invalid_hosts(self, host):
        with pytest.raises(ValidationError):
            HueConfig(bridge_host=host)

    def test_short_username(self):
        with pytest.raises(ValidationError):
            HueConfig(username="short")

    def test_log_level_normalized(self):
        assert HueConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            HueConfig(log_level="LOUD")

    def test_timeout_bounds(self):
        with pytest.raises(ValidationError):
            HueConfig(timeout_connect=0.1)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HUE_BRIDGE_HOST", "10.0.0.2")
        monkeypatch.setenv("HUE_USERNAME", "abcdefghijklmnop")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("HUE_TIMEOUT_READ", "30")

        cfg = HueConfig.from_env()

        assert cfg.bridge_host == "10.0.0.2"
        assert cfg.username == "abcdefghijklmnop"
        assert cfg.log_level == "WARNING"
        assert cfg.timeout_read == 30.0

    def test_from_env_legacy_ip(self, monkeypatch):
        monkeypatch.delenv("HUE_BRIDGE_HOST", raising=False)
        monkeypatch.setenv("HUE_BRIDGE_IP", "10.0.0.3")

        assert HueConfig.from_env().bridge_host == "10.0.0.3"

    def test_api_path(self):
        cfg = HueConfig(username="abcdefghijklmnop")

        assert cfg.api_path("lights") == "abcdefghijklmnop/lights"
        assert cfg.api_path("/groups/1") == "abcdefghijklmnop/groups/1"
        assert cfg.api_path("") == "abcdefghijklmnop"

    def test_api_path_without_username(self):
        assert HueConfig().api_path("config") == "config"


def test_configure_logging():
    with patch("hue_transport.config.logging.basicConfig") as basic_config:
        configure_logging("debug")

    basic_config.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT)
