"""
Deterministic color selection for component names.

Every component name maps to one color from a palette of bright, legible
foreground colors. The mapping is a CRC-32 of the name modulo the palette
size, so two processes always agree on a name's color without sharing state.
"""

import zlib
from typing import Iterable, Tuple

from colorlog.escape_codes import escape_codes

from tintlog.exceptions import PaletteError

DEFAULT_COLOR = 'default'

# Full set of terminal foreground colors, in palette order
FOREGROUND_COLORS: Tuple[str, ...] = (
    'black', 'light_black',
    'red', 'light_red',
    'green', 'light_green',
    'yellow', 'light_yellow',
    'blue', 'light_blue',
    'purple', 'light_purple',
    'cyan', 'light_cyan',
    'white', 'light_white',
    DEFAULT_COLOR,
)


def filter_palette(colors: Iterable[str]) -> Tuple[str, ...]:
    """Drop black shades, the default sentinel and every non-light color."""
    return tuple(
        color for color in colors
        if 'black' not in color
        and color != DEFAULT_COLOR
        and color.startswith('light_')
    )


def build_palette(colors: Iterable[str] = FOREGROUND_COLORS) -> Tuple[str, ...]:
    """
    Build the palette used for component names.

    Raises:
        PaletteError: If a color name has no escape code, or filtering
            leaves no colors
    """
    colors = tuple(colors)
    for color in colors:
        escape_for(color)

    palette = filter_palette(colors)
    if not palette:
        raise PaletteError("No colors left for component names after filtering")
    return palette


def escape_for(color: str) -> str:
    """
    Return the ANSI escape sequence that starts a color.

    The default sentinel resets attributes instead of picking a color.
    """
    if color == DEFAULT_COLOR:
        return escape_codes['reset']
    try:
        return escape_codes[color]
    except KeyError:
        raise PaletteError(f"Unknown color: {color}")


PROGNAME_PALETTE: Tuple[str, ...] = build_palette()


def color_for(name: str) -> str:
    """Return the palette color assigned to a component name"""
    index = zlib.crc32(name.encode('utf-8', 'surrogatepass')) % len(PROGNAME_PALETTE)
    return PROGNAME_PALETTE[index]


def colorize(text: str, color: str) -> str:
    """Wrap text in the escape codes for a color"""
    return f"{escape_for(color)}{text}{escape_codes['reset']}"
