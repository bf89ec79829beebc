import pytest
from pydantic import ValidationError

from app.config.settings import AppSettings, get_app_settings


def test_settings_loaded_from_environment():
    assert get_app_settings().api_secret_key == "123456"


def test_settings_are_cached():
    assert get_app_settings() is get_app_settings()


def test_settings_are_read_only():
    settings = AppSettings(api_secret_key="abc")

    with pytest.raises(ValidationError):
        settings.api_secret_key = "changed"
