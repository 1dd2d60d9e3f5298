"""
Registry of named loggers.

One Logger per component name, created on first request and kept for the
life of the registry. Components either ask for a logger by name or let
the registry derive the name from their class (or a logger_name override).
"""

import logging
import sys
import threading
from typing import Any, Dict, List, Optional, TextIO

from tintlog.config import load_config
from tintlog.formatter import LineFormatter


class Logger(logging.Logger):
    """
    Component logger with the conventional severity methods.

    debug/info/error come from logging.Logger, fatal is its alias of
    critical, and warn is kept as a plain alias of warning.
    """

    warn = logging.Logger.warning


class SinkHandler(logging.StreamHandler):
    """
    Writes each formatted line to the stream in a single write call.

    Write failures propagate to the caller instead of being reported and
    dropped the way logging.Handler.handleError does.
    """

    terminator = ''

    def handleError(self, record: logging.LogRecord) -> None:
        raise


def logger_name_of(component: Any) -> str:
    """
    Resolve the logger name for a component.

    Classes resolve to their own name. For instances a logger_name attribute
    (or method) wins, otherwise the class name is used.
    """
    if isinstance(component, type):
        return component.__qualname__

    override = getattr(component, 'logger_name', None)
    if callable(override):
        override = override()
    if override:
        return str(override)
    return type(component).__qualname__


class LoggerRegistry:
    """Thread-safe get-or-create mapping from component name to Logger"""

    def __init__(self, stream: Optional[TextIO] = None, level: int = logging.DEBUG):
        self.stream = stream if stream is not None else sys.stderr
        self.level = level
        self.formatter = LineFormatter()
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.Lock()

    def logger_for(self, name: str) -> Logger:
        """
        Get the logger for a component name, creating it on first use.

        Args:
            name: Component name, also used as the progname in log lines

        Returns:
            The same Logger instance for every call with the same name
        """
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = self._create_logger(name)
                self._loggers[name] = logger
            return logger

    def logger_for_self(self, component: Any) -> Logger:
        """Get the logger for a component instance"""
        return self.logger_for(logger_name_of(component))

    def logger_for_type(self, cls: type) -> Logger:
        """Get the logger shared by every instance of a class"""
        return self.logger_for(logger_name_of(cls))

    def names(self) -> List[str]:
        with self._lock:
            return list(self._loggers)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __bool__(self) -> bool:
        return True

    def _create_logger(self, name: str) -> Logger:
        logger = Logger(name, self.level)
        logger.propagate = False

        handler = SinkHandler(self.stream)
        handler.setFormatter(self.formatter)
        logger.addHandler(handler)

        return logger


_default_registry: Optional[LoggerRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> LoggerRegistry:
    """
    Return the process-wide registry, building it from the environment.

    Meant for scripts. Services should construct a LoggerRegistry and pass
    it to the components that log.
    """
    global _default_registry

    with _default_lock:
        if _default_registry is None:
            config = load_config()
            _default_registry = LoggerRegistry(stream=config.open_stream(), level=config.level)
        return _default_registry
