"""Logging setup for the calorie_coach logger tree."""

import logging

LOG_FORMAT = "%(levelname)s: %(name)s [user=%(user_id)s]: %(message)s"


class UserContextFilter(logging.Filter):
    """Default the ``user_id`` field passed through ``extra``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "user_id"):
            record.user_id = "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler; later calls only adjust the level."""
    logger = logging.getLogger("calorie_coach")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.addFilter(UserContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
