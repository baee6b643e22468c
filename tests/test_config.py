import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import logging

import pytest
from pydantic import ValidationError

from app.config import Settings, get_settings, reset_settings_cache
from app.infrastructure.log_config import configure_logging


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("INQUIRY_API_BASE_URL", "https://backend.example.com/api")
    monkeypatch.setenv("INQUIRY_API_TIMEOUT", "2.5")
    monkeypatch.setenv("SHARE_BASE_URL", "https://forms.example.com")

    settings = get_settings()

    assert settings.inquiry_api_base_url == "https://backend.example.com/api"
    assert settings.inquiry_api_timeout == 2.5
    assert settings.share_base_url == "https://forms.example.com"
    assert get_settings() is settings


def test_urls_must_use_http(monkeypatch):
    monkeypatch.setenv("SHARE_BASE_URL", "forms.example.com")

    with pytest.raises(ValidationError):
        Settings()


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(inquiry_api_timeout=0)


def test_configure_logging_installs_a_single_handler():
    root = logging.getLogger()
    previous_level = root.level
    try:
        configure_logging("debug")
        configure_logging("WARNING")

        handlers = [handler for handler in root.handlers if handler.get_name() == "inquiry-templates"]
        assert len(handlers) == 1
        assert root.level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            if handler.get_name() == "inquiry-templates":
                root.removeHandler(handler)
        root.setLevel(previous_level)


def test_configure_logging_rejects_unknown_levels():
    with pytest.raises(ValueError):
        configure_logging("LOUD")
