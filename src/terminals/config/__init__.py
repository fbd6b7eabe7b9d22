"""Configuration, paths and logging setup."""

from .logging_config import ApplicationLogger, setup_logging
from .settings import TerminalSettings

__all__ = [
    "ApplicationLogger",
    "TerminalSettings",
    "setup_logging",
]
