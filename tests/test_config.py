"""
Tests for Settings validation.
"""

import logging

import pytest

from validation_api.config import Settings


def test_defaults_are_valid():
    Settings.validate()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setattr(Settings, "LOG_LEVEL", "CHATTY")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings.validate()


def test_invalid_port(monkeypatch):
    monkeypatch.setattr(Settings, "PORT", "eighty")

    with pytest.raises(ValueError, match="PORT"):
        Settings.validate()


def test_log_level_value(monkeypatch):
    monkeypatch.setattr(Settings, "LOG_LEVEL", "debug")

    assert Settings().log_level_value == logging.DEBUG


def test_environment_helpers(monkeypatch):
    monkeypatch.setattr(Settings, "ENVIRONMENT", "Production")

    assert Settings.is_production()
    assert not Settings.is_development()
