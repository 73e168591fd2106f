from geojson_builder.core.constants import PACKAGE_LOGGER_NAME
from geojson_builder.core.settings import Settings
import logging
import sys


LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


class PackageHandler(logging.StreamHandler):
    """Stdout handler installed by `setup_logging`, recognised by its class."""

    def __init__(self):
        super().__init__(sys.stdout)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stdout handler to the package logger. Calling it again only updates the level."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if level is None:
        level = Settings.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(isinstance(handler, PackageHandler) for handler in logger.handlers):
        logger.addHandler(PackageHandler())

    return logger


def teardown_logging() -> None:
    """Detach the handlers installed by `setup_logging` and reset the package logger level."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in [h for h in logger.handlers if isinstance(h, PackageHandler)]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
