"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from config.app_config import load_config
from exceptions import ConfigurationError


def test_defaults(tmp_path):
    config = load_config({"DATA_DIR": str(tmp_path)})

    assert config.application_name == "crownApp"
    assert config.enable_translation is True
    assert config.database_url == f"sqlite:///{tmp_path / 'deliveries.db'}"
    assert config.log_dir == Path(tmp_path) / "logs"
    assert config.server_port == 8080
    assert config.cors_origins == ["*"]


def test_overrides():
    config = load_config({
        "APP_NAME": "shopApp",
        "ALERT_TRANSLATION": "false",
        "DATABASE_URL": "postgresql://db/deliveries",
        "LOG_LEVEL": "debug",
        "SERVER_PORT": "9000",
        "CORS_ORIGINS": "http://a.test, http://b.test",
    })

    assert config.application_name == "shopApp"
    assert config.enable_translation is False
    assert config.database_url == "postgresql://db/deliveries"
    assert config.log_level == "DEBUG"
    assert config.server_port == 9000
    assert config.cors_origins == ["http://a.test", "http://b.test"]


def test_endpoint_config_carries_entity_name():
    endpoint_config = load_config({"APP_NAME": "shopApp"}).endpoint_config("delivery")

    assert endpoint_config.application_name == "shopApp"
    assert endpoint_config.entity_name == "delivery"


@pytest.mark.parametrize("env", [{"SERVER_PORT": "http"}, {"SERVER_PORT": "70000"}, {"APP_NAME": "  "}])
def test_invalid_values(env):
    with pytest.raises(ConfigurationError):
        load_config(env)
