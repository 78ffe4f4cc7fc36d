"""Root logging setup for hosts embedding the engine."""

import logging

from config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once; DEBUG wins over LOG_LEVEL."""
    resolved = level or ("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)
    logging.basicConfig(level=resolved.upper(), format=LOG_FORMAT)
