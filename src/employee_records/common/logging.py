"""Centralized logger configuration.

Usage:
    from employee_records.common.logging import get_logger
    logger = get_logger(__name__)
"""
from __future__ import annotations

import logging
import os

DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
