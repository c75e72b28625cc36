import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

APP_LOGGER_NAME = "yoga_directory"


def setup_logging() -> logging.Logger:
    logging.basicConfig(level=getattr(logging, _DEFAULT_LEVEL, logging.INFO), format=LOG_FORMAT)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(getattr(logging, _DEFAULT_LEVEL, logging.INFO))
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger(APP_LOGGER_NAME)
    return base.getChild(name) if name else base


logger = setup_logging()
