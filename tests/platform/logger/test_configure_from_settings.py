"""Tests for wiring settings into the logger."""

from __future__ import annotations

import logging

import pytest
from pytest_mock import MockerFixture

from pathext.platform.logging import configure_from_settings, setup_logger


def test_configure_from_settings_uses_config_values(
    mocker: MockerFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    import pathext.config.settings as settings

    monkeypatch.setattr(settings, "CONSOLE_LEVEL", logging.DEBUG)
    monkeypatch.setattr(settings, "LOG_FILE", None)
    mock_setup = mocker.patch("pathext.platform.logging.config.setup_logger")

    _ = configure_from_settings()

    mock_setup.assert_called_once()
    assert mock_setup.call_args.kwargs["console_level"] == logging.DEBUG


def test_configure_from_settings_applies_levels(monkeypatch: pytest.MonkeyPatch) -> None:
    import pathext.config.settings as settings
    import pathext.platform.logging.config as logging_config

    monkeypatch.setattr(settings, "CONSOLE_LEVEL", logging.ERROR)
    monkeypatch.setattr(settings, "LOG_FILE", None)
    monkeypatch.setattr(logging_config, "DEFAULT_LOG_FILE", None)
    try:
        logger = configure_from_settings()
        assert logger.handlers[0].level == logging.ERROR
    finally:
        _ = setup_logger(log_file=None)
