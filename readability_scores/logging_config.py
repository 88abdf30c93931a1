"""
Logging setup for applications embedding the readability scorer.
"""

import logging
import sys
from typing import Optional

from .settings import settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure root logging with the library's default format.

    Args:
        level: Log level name, defaults to ``settings.log_level``
        fmt: Log record format, defaults to ``settings.log_format``
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=fmt or settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )
