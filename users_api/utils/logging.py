# users_api/utils/logging.py
import logging

from users_api.utils.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Konfiguracja root loggera. Kolejne wywolania nie dokladaja handlerow."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
