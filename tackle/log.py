from __future__ import annotations
import logging
from .types import *

PACKAGE_LOGGER = 'tackle'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """the package logger, or a child of it"""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}" if name else PACKAGE_LOGGER)


class _DummyLogger:
    """accepts every call of the Logger protocol and does nothing"""

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None: pass

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: pass

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: pass

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: pass

    def __repr__(self) -> str:
        return "DummyLogger()"


def create_dummy_logger() -> Logger:
    """a logger that ignores everything, for callers that require one"""
    return _DummyLogger()
