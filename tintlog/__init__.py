"""
tintlog: colorized per-component logging

Every component gets its own named logger. Lines carry the time, a colored
severity and the component name in a color derived from a CRC-32 of the
name, so the same component has the same color on every run.
"""

from tintlog.colors import PROGNAME_PALETTE, color_for, colorize
from tintlog.errors import log_error
from tintlog.exceptions import ConfigError, PaletteError, TintlogError
from tintlog.formatter import LineFormatter, format_line
from tintlog.registry import Logger, LoggerRegistry, default_registry, logger_name_of

__all__ = [
    'PROGNAME_PALETTE', 'color_for', 'colorize',
    'log_error',
    'ConfigError', 'PaletteError', 'TintlogError',
    'LineFormatter', 'format_line',
    'Logger', 'LoggerRegistry', 'default_registry', 'logger_name_of',
]
__version__ = '1.0.0'
