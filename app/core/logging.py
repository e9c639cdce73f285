"""
Structured logging configuration.

Every module logs through ``get_logger(__name__)``, so records carry the
module path (``app.api.routes``, ``app.domain.gallery_service``,
``app.infrastructure.notion.client``) in a pipe-separated line on stdout.
The httpx transport loggers are held at WARNING: one gallery request can
issue many Notion calls and each would otherwise log a line.
"""

import logging
import sys
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"

QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application-wide logging; ``level`` overrides LOG_LEVEL."""
    name = (level or settings.log_level).upper()
    log_level = getattr(logging, name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
