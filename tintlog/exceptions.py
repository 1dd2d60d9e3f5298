"""
Error types raised by tintlog.
"""


class TintlogError(Exception):
    """Base class for tintlog errors"""
    pass


class PaletteError(TintlogError):
    """Color palette is empty or a color name is unknown"""
    pass


class ConfigError(TintlogError):
    """Configuration validation error"""
    pass
