"""Tests for deployment settings."""

import pytest
from pydantic import ValidationError

from storebridge.config import BridgeSettings


def test_defaults():
    settings = BridgeSettings()

    assert settings.namespace == "bridge"
    assert settings.prop_name == "bridge_key"
    assert settings.default_key == "default"
    assert settings.error_mode == "strict"
    assert settings.read_cache_enabled()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STOREBRIDGE_NAMESPACE", "ui")
    monkeypatch.setenv("STOREBRIDGE_ERROR_MODE", "lenient")
    monkeypatch.setenv("STOREBRIDGE_SERVER_RENDERING", "true")

    settings = BridgeSettings()

    assert settings.namespace == "ui"
    assert settings.error_mode == "lenient"
    assert not settings.read_cache_enabled()


def test_cache_can_be_disabled():
    assert not BridgeSettings(cache_reads=False).read_cache_enabled()


@pytest.mark.parametrize("field", ["namespace", "prop_name", "default_key"])
def test_empty_names_rejected(field):
    with pytest.raises(ValidationError):
        BridgeSettings(**{field: ""})


def test_unknown_error_mode_rejected():
    with pytest.raises(ValidationError):
        BridgeSettings(error_mode="forgiving")
