"""Core utilities: logging, exceptions, dependencies."""

from finsight.core.exceptions import FinSightError
from finsight.core.logging import get_logger, setup_logging

__all__ = [
    "FinSightError",
    "get_logger",
    "setup_logging",
]
