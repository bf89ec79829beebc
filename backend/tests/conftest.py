import os
from datetime import date

import pytest

# must be set before the app config is imported
os.environ.setdefault("API_SECRET_KEY", "123456")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOGS_DIR", "logs")

from app.domain.models import Movie


@pytest.fixture(scope="session", autouse=True)
def anyio_backend():
    return "asyncio"


@pytest.fixture
def inception():
    """The movie used across the catalog tests."""
    return Movie(
        id=1,
        title="Inception",
        description="Sci-Fi Thriller",
        release_date=date(2010, 7, 16)
    )


@pytest.fixture
def interstellar():
    return Movie(
        id=2,
        title="Interstellar",
        description="Space epic",
        release_date=date(2014, 11, 7)
    )
