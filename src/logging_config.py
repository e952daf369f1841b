"""
Logging configuration for the transaction service.

Writes rotating logs to <LOG_DIR>/transaction_service.log and mirrors
warnings and errors to the console.
"""

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler

import config

SERVICE_LOGGER = "transaction_service"
LOG_FILE_NAME = "transaction_service.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def _setup_file_logger(name: str, log_file: Path, level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Avoid duplicate handlers if setup_logging is called multiple times
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


def setup_logging(log_dir: Path = None, log_level: str = None) -> logging.Logger:
    """
    Configure the root logger and the service logger.

    Args:
        log_dir: Directory for the rotating log file (defaults to LOG_DIR)
        log_level: Level name such as "DEBUG" (defaults to LOG_LEVEL)

    Returns:
        The configured service logger
    """
    log_dir = Path(log_dir or config.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, (log_level or config.LOG_LEVEL).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    service_logger = _setup_file_logger(SERVICE_LOGGER, log_dir / LOG_FILE_NAME, level)

    # Engine logs are only useful when explicitly asked for
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if config.DATABASE_ECHO else logging.WARNING
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    service_logger.info("Logging configured. Log files in: %s", log_dir)
    return service_logger


def get_logger(name: str) -> logging.Logger:
    """
    Convenience wrapper to get a named logger.
    """
    return logging.getLogger(name)
