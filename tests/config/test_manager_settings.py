"""Unit tests for ManagerSettings.

Tests cover:
- Defaults
- Loading settings from environment variables, with and without prefix
- Validation
"""

import os
from unittest.mock import patch

import pytest

from configmanager import ManagerSettings


@pytest.mark.unit
def test_defaults():
    settings = ManagerSettings()

    assert settings.shutdown_timeout == 5.0
    assert settings.max_workers is None
    assert settings.thread_name_prefix == "ConfigManager-Worker"
    assert settings.validate() == {}


@pytest.mark.unit
def test_to_dict():
    assert ManagerSettings(max_workers=4).to_dict() == {
        "shutdown_timeout": 5.0,
        "max_workers": 4,
        "thread_name_prefix": "ConfigManager-Worker",
    }


def test_load_from_env():
    """Test loading settings from environment variables."""
    env_vars = {
        "CONFIGMANAGER_SHUTDOWN_TIMEOUT": "2.5",
        "CONFIGMANAGER_MAX_WORKERS": "8",
        "CONFIGMANAGER_THREAD_NAME_PREFIX": "Worker",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        settings = ManagerSettings.from_env()

    assert settings.shutdown_timeout == 2.5
    assert settings.max_workers == 8
    assert settings.thread_name_prefix == "Worker"


def test_load_from_env_with_prefix():
    """Test loading with environment variable prefix."""
    env_vars = {
        "FOO_SHUTDOWN_TIMEOUT": "1",
        "FOO_MAX_WORKERS": "",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        settings = ManagerSettings(max_workers=3)
        settings.load_from_env(prefix="FOO_")

    assert settings.shutdown_timeout == 1.0
    assert settings.max_workers is None


def test_load_from_env_rejects_bad_numbers():
    with patch.dict(os.environ, {"CONFIGMANAGER_MAX_WORKERS": "many"}, clear=False):
        with pytest.raises(ValueError):
            ManagerSettings.from_env()


@pytest.mark.unit
def test_validate_settings():
    """Test settings validation."""
    settings = ManagerSettings()

    # Invalid settings
    settings.shutdown_timeout = -1
    settings.max_workers = 0
    settings.thread_name_prefix = ""

    errors = settings.validate()

    assert set(errors) == {"shutdown_timeout", "max_workers", "thread_name_prefix"}
