import logging

from leitner.config import settings


def configure_logging(level: str | None = None) -> None:
    """Set the level of the package logger from LEITNER_LOG_LEVEL unless given."""
    logging.getLogger(__name__).setLevel((level or settings.log_level).upper())
