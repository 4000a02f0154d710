from __future__ import annotations

import logging
import os

ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__package__)
if not logger.handlers:
    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s] [%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    level = os.getenv("VERDICT_LOG_LEVEL", "WARNING").upper()
    logger.setLevel(level if level in ALLOWED_LOG_LEVELS else logging.WARNING)
    logger.propagate = False
