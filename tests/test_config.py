import importlib
import warnings

import pytest
from pydantic import ValidationError

import server.config
from server.config import ServerSettings, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings.port == 3000
    assert settings.log_level == "INFO"
    assert settings.shuffle_seed is None


def test_environment_overrides():
    settings = load_settings({"PORT": "8080", "LOG_LEVEL": "debug", "SHUFFLE_SEED": "12"})
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.shuffle_seed == 12


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        ServerSettings(log_level="chatty")
    with pytest.raises(ValidationError):
        load_settings({"PORT": "70000"})


def test_settings_model_uses_current_validators():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(server.config)
    assert not [w for w in caught if "deprecated" in str(w.message).lower()]
