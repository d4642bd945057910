"""Logging configuration helpers."""

import logging

LOGGER_NAME = "materials_catalog"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure the catalog logger with a single stream handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
