from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from app.config.environment import API_SECRET_KEY


class AppSettings(BaseModel):
    """Process-wide settings handed to request handlers. Read-only once built."""
    model_config = ConfigDict(frozen=True)

    api_secret_key: str


@lru_cache
def get_app_settings() -> AppSettings:
    return AppSettings(api_secret_key=API_SECRET_KEY)
