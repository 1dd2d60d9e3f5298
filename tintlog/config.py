"""
Environment-driven configuration for the default registry.

Reads:
    TINTLOG_LEVEL   minimum level (DEBUG, INFO, WARN, ERROR, FATAL or a number)
    TINTLOG_STREAM  output stream, stderr (default) or stdout
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from tintlog.exceptions import ConfigError

LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARN': logging.WARNING,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'FATAL': logging.CRITICAL,
    'CRITICAL': logging.CRITICAL,
}

STREAMS = ('stderr', 'stdout')


@dataclass
class LogConfig:
    level: int = logging.DEBUG
    stream: str = 'stderr'

    def open_stream(self) -> TextIO:
        """Return the process stream named by this config"""
        return sys.stdout if self.stream == 'stdout' else sys.stderr


def parse_level(value: str) -> int:
    """
    Parse a level name or number.

    Raises:
        ConfigError: If the value is neither a known name nor an integer
    """
    value = value.strip()
    if value.upper() in LEVELS:
        return LEVELS[value.upper()]
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"Invalid log level: {value}. Must be one of {list(LEVELS)} or an integer")


def load_config(environ: Optional[Mapping[str, str]] = None) -> LogConfig:
    """Build a LogConfig from environment variables"""
    if environ is None:
        environ = os.environ

    config = LogConfig()

    level = environ.get('TINTLOG_LEVEL')
    if level:
        config.level = parse_level(level)

    stream = environ.get('TINTLOG_STREAM')
    if stream:
        stream = stream.strip().lower()
        if stream not in STREAMS:
            raise ConfigError(f"Invalid stream: {stream}. Must be one of {list(STREAMS)}")
        config.stream = stream

    return config
