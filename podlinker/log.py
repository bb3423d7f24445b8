"""Logging configuration for podlinker"""
from __future__ import annotations
import logging

from . import config

_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """Set up logging for the API server and the Streamlit app"""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = log_file or config.LOG_FILE
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format=_FORMAT,
        handlers=handlers,
    )

    # requests logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logging.getLogger("podlinker")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
