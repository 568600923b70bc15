import logging
import os

LOG_LEVEL_ENV = "SHRINKGEN_LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    """
    Return the named logger, attaching a pipe-formatted stream handler once.

    Generator modules log at WARNING unless told otherwise, since draws and
    filter retries are only interesting while debugging. ``shrinkgen.cli``
    starts at INFO so sampling progress is visible. ``SHRINKGEN_LOG_LEVEL``
    overrides both; an unknown level name keeps the module default.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    logger.addHandler(handler)

    default_level = logging.INFO if name.endswith(".cli") else logging.WARNING
    level_name = os.getenv(LOG_LEVEL_ENV, logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), None)
    logger.setLevel(level if isinstance(level, int) else default_level)
    return logger
