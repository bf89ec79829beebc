import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.config.environment import LOG_LEVEL, LOGS_DIR

INFO_LOG_NAME = "info.log"
ERROR_LOG_NAME = "error.log"

MAX_BYTES = 5 * 1024 * 1024


BACKUP_COUNT = 1

def setup_logging():
    logs_dir = Path(LOGS_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    info_handler = RotatingFileHandler(
        logs_dir / INFO_LOG_NAME,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT
    )
    info_handler.setLevel(logging.INFO)
    info_handler.setFormatter(formatter)

    error_handler = RotatingFileHandler(
        logs_dir / ERROR_LOG_NAME,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(LOG_LEVEL)

    root_logger.addHandler(info_handler)
    root_logger.addHandler(error_handler)
    root_logger.addHandler(console_handler)

    logging.info("Logging system initialized")
