"""Tests for server configuration."""

import pytest

from solana_api.config import (
    ServerConfig,
    bool_validator,
    environment_validator,
    get_env_var,
    get_server_config,
    log_level_validator,
    port_validator,
)


@pytest.fixture(autouse=True)
def fresh_config():
    get_server_config.cache_clear()
    yield
    get_server_config.cache_clear()


def test_defaults(monkeypatch):
    for key in ("HOST", "PORT", "DEBUG", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    config = get_server_config()

    assert config.host == "0.0.0.0"
    assert config.port == 3000
    assert config.debug is False
    assert config.bind_address == "0.0.0.0:3000"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ENVIRONMENT", "Production")

    config = get_server_config()

    assert config.bind_address == "127.0.0.1:8080"
    assert config.log_level == "DEBUG"
    assert config.environment == "production"


def test_invalid_port_env(monkeypatch):
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(ValueError, match="PORT"):
        get_server_config()


def test_get_env_var_without_validator(monkeypatch):
    monkeypatch.setenv("SOLANA_API_SETTING", "value")
    monkeypatch.delenv("SOLANA_API_MISSING", raising=False)

    assert get_env_var("SOLANA_API_SETTING") == "value"
    assert get_env_var("SOLANA_API_MISSING", "fallback") == "fallback"


@pytest.mark.parametrize("key, value", [("LOG_LEVEL", "verbose"), ("ENVIRONMENT", "qa"), ("PORT", "http")])
def test_invalid_env_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValueError, match=key):
        get_server_config()


@pytest.mark.parametrize("value, expected", [("true", True), ("1", True), ("Yes", True), ("off", False), ("", False)])
def test_bool_validator(value, expected):
    assert bool_validator(value) is expected


def test_port_validator_rejects_zero():
    with pytest.raises(ValueError):
        port_validator("0")


def test_server_config_validates():
    with pytest.raises(ValueError, match="environment"):
        ServerConfig(environment="qa")


def test_choice_validators_normalize_case():
    assert log_level_validator(" warning ") == "WARNING"
    assert environment_validator("Staging") == "staging"
