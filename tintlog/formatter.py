"""
Line formatter: renders one log record as one colorized line.
"""

import logging
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Union

from tintlog.colors import DEFAULT_COLOR, color_for, colorize
from tintlog.errors import error_message, stack_frames

# Severity labels, lowest to highest
SEVERITIES = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'FATAL')

SEVERITY_COLORS: Mapping[str, str] = MappingProxyType({
    'DEBUG': 'light_blue',
    'INFO': 'cyan',
    'WARN': 'purple',
    'ERROR': 'light_red',
    'FATAL': 'light_red',
})

# stdlib level numbers -> severity labels
LEVEL_SEVERITIES: Mapping[int, str] = MappingProxyType({
    logging.DEBUG: 'DEBUG',
    logging.INFO: 'INFO',
    logging.WARNING: 'WARN',
    logging.ERROR: 'ERROR',
    logging.CRITICAL: 'FATAL',
})

TIME_FORMAT = '%H:%M:%S'


def severity_color(severity: str) -> str:
    """Return the fixed color for a severity, or the default color"""
    return SEVERITY_COLORS.get(severity, DEFAULT_COLOR)


def format_line(
    severity: str,
    timestamp: Union[datetime, float],
    progname: str,
    message: str
) -> str:
    """
    Render a log line.

    Output format:
        HH:MM:SS [SEVERITY] [PROGNAME]: MESSAGE

    Severity and progname are wrapped in ANSI color codes. The message is
    written as-is, so embedded newlines are not escaped.

    Args:
        severity: Severity label (DEBUG, INFO, WARN, ERROR, FATAL)
        timestamp: datetime, or POSIX seconds rendered in local time
        progname: Component name
        message: Log message

    Returns:
        The rendered line, ending with a single newline
    """
    if not isinstance(timestamp, datetime):
        timestamp = datetime.fromtimestamp(timestamp)

    colored_severity = colorize(severity, severity_color(severity))
    colored_progname = colorize(progname, color_for(progname))

    return f"{timestamp.strftime(TIME_FORMAT)} [{colored_severity}] [{colored_progname}]: {message}\n"


class LineFormatter(logging.Formatter):
    """
    Formats stdlib log records with format_line.

    Records carrying exception info (logger.exception, exc_info=True) get one
    extra line for the error message and one per traceback frame, at the
    record's severity, the same layout log_error produces.
    """

    def format(self, record: logging.LogRecord) -> str:
        severity = LEVEL_SEVERITIES.get(record.levelno, record.levelname)
        messages = [record.getMessage()]

        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]
            messages.append(f"Error: {error_message(error)}")
            messages.extend(stack_frames(error))

        return ''.join(format_line(severity, record.created, record.name, m) for m in messages)
