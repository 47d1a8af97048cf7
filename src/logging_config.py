"""Logging configuration for the ledger service"""

import logging
import sys
from src.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging():
    """Attach stdout (and optional file) handlers to the root logger once"""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # App reloads and test imports call this repeatedly
    if getattr(root_logger, "_ledger_configured", False):
        return

    root_logger.addHandler(_handler(logging.StreamHandler(sys.stdout), log_level))
    if settings.LOG_FILE:
        root_logger.addHandler(_handler(logging.FileHandler(settings.LOG_FILE), log_level))
    root_logger._ledger_configured = True

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)
    # SQL echo is controlled by DEBUG on the engine, not by LOG_LEVEL
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
