from app.config.environment import *

VERSION = "0.1.0"
API_TITLE = "Movie Catalog API"
API_DESCRIPTION = "API for listing, fetching and creating movies"


def validate_config():
    if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"LOG_LEVEL must be a valid logging level, got {LOG_LEVEL}")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL must be set")


validate_config()
