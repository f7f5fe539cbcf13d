"""Select Graphic Rendition state and parameter handling."""

from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Colour:
    """An RGB colour."""

    red: int
    green: int
    blue: int


COLOUR_BLACK = Colour(0, 0, 0)
COLOUR_RED = Colour(205, 0, 0)
COLOUR_GREEN = Colour(0, 205, 0)
COLOUR_YELLOW = Colour(205, 205, 0)
COLOUR_BLUE = Colour(0, 0, 238)
COLOUR_MAGENTA = Colour(205, 0, 205)
COLOUR_CYAN = Colour(0, 205, 205)
COLOUR_WHITE = Colour(229, 229, 229)

COLOUR_BLACK_BRIGHT = Colour(127, 127, 127)
COLOUR_RED_BRIGHT = Colour(255, 0, 0)
COLOUR_GREEN_BRIGHT = Colour(0, 255, 0)
COLOUR_YELLOW_BRIGHT = Colour(255, 255, 0)
COLOUR_BLUE_BRIGHT = Colour(92, 92, 255)
COLOUR_MAGENTA_BRIGHT = Colour(255, 0, 255)
COLOUR_CYAN_BRIGHT = Colour(0, 255, 255)
COLOUR_WHITE_BRIGHT = Colour(255, 255, 255)

BASIC_COLOURS = (
    COLOUR_BLACK, COLOUR_RED, COLOUR_GREEN, COLOUR_YELLOW,
    COLOUR_BLUE, COLOUR_MAGENTA, COLOUR_CYAN, COLOUR_WHITE,
)
BRIGHT_COLOURS = (
    COLOUR_BLACK_BRIGHT, COLOUR_RED_BRIGHT, COLOUR_GREEN_BRIGHT,
    COLOUR_YELLOW_BRIGHT, COLOUR_BLUE_BRIGHT, COLOUR_MAGENTA_BRIGHT,
    COLOUR_CYAN_BRIGHT, COLOUR_WHITE_BRIGHT,
)

DEFAULT_FG = COLOUR_WHITE
DEFAULT_BG = COLOUR_BLACK

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _build_palette() -> List[Colour]:
    palette = list(BASIC_COLOURS + BRIGHT_COLOURS)
    palette.extend(
        Colour(_CUBE_LEVELS[r], _CUBE_LEVELS[g], _CUBE_LEVELS[b])
        for r in range(6) for g in range(6) for b in range(6)
    )
    palette.extend(Colour(8 + 10 * i, 8 + 10 * i, 8 + 10 * i) for i in range(24))
    return palette


_PALETTE_256 = tuple(_build_palette())


def palette_256(index: int) -> Optional[Colour]:
    """Return an xterm 256-colour palette entry, or ``None`` if out of range."""
    if 0 <= index < len(_PALETTE_256):
        return _PALETTE_256[index]
    return None


class SgrFlag(enum.IntFlag):
    """Text attributes."""

    BOLD = 1
    FAINT = 2
    ITALIC = 4
    UNDERLINE = 8
    SLOW_BLINK = 16
    INVERT = 32
    HIGHLIGHT_SEARCH_RESULT = 64


@dataclass
class Sgr:
    """Current rendition: attribute flags plus foreground and background."""

    flags: SgrFlag = SgrFlag(0)
    fg: Colour = DEFAULT_FG
    bg: Colour = DEFAULT_BG

    def reset(self) -> None:
        """Return to the default rendition."""
        self.flags = SgrFlag(0)
        self.fg = DEFAULT_FG
        self.bg = DEFAULT_BG

    def copy(self) -> "Sgr":
        """Return an independent copy."""
        return dataclasses.replace(self)


def enhanced_colour(stack: Sequence[int]) -> Optional[Colour]:
    """Decode a 38/48 colour from the whole parameter stack.

    ``stack[1]`` selects 256-colour (5) or 24-bit (2) mode.
    """
    if len(stack) < 2:
        log.info("SGR error: too few parameters: %s", list(stack))
        return None
    mode = stack[1]
    if mode == 5:
        colour = palette_256(stack[2]) if len(stack) > 2 else None
        if colour is None:
            log.warning("SGR error: 256 value does not exist: %s", list(stack))
        return colour
    if mode == 2:
        if len(stack) != 5:
            log.warning("SGR error: too few parameters (24bit): %s", list(stack))
            return None
        return Colour(stack[2] & 0xFF, stack[3] & 0xFF, stack[4] & 0xFF)
    log.warning("SGR error: unexpected value: %s", list(stack))
    return None


_SET_FLAGS = {
    1: SgrFlag.BOLD,
    2: SgrFlag.FAINT,
    3: SgrFlag.ITALIC,
    4: SgrFlag.UNDERLINE,
    5: SgrFlag.SLOW_BLINK,
    6: SgrFlag.SLOW_BLINK,
    7: SgrFlag.INVERT,
}
_UNSET_FLAGS = {
    22: SgrFlag.BOLD,
    23: SgrFlag.ITALIC,
    24: SgrFlag.UNDERLINE,
    25: SgrFlag.SLOW_BLINK,
    27: SgrFlag.INVERT,
}


def apply_sgr(sgr: Sgr, stack: Sequence[int]) -> None:
    """Apply a CSI ... m parameter list to ``sgr`` in place.

    A parameter of -1 stands for an empty parameter and resets like 0.
    """
    for param in stack:
        if param in (-1, 0):
            sgr.reset()
        elif param in _SET_FLAGS:
            sgr.flags |= _SET_FLAGS[param]
        elif param in _UNSET_FLAGS:
            sgr.flags &= ~_UNSET_FLAGS[param]
        elif 30 <= param <= 37:
            sgr.fg = BASIC_COLOURS[param - 30]
        elif param == 38:
            colour = enhanced_colour(stack)
            if colour is not None:
                sgr.fg = colour
            return
        elif param == 39:
            sgr.fg = DEFAULT_FG
        elif 40 <= param <= 47:
            sgr.bg = BASIC_COLOURS[param - 40]
        elif param == 48:
            colour = enhanced_colour(stack)
            if colour is not None:
                sgr.bg = colour
            return
        elif param == 49:
            sgr.bg = DEFAULT_BG
        elif 90 <= param <= 97:
            sgr.fg = BRIGHT_COLOURS[param - 90]
        elif 100 <= param <= 107:
            sgr.bg = BRIGHT_COLOURS[param - 100]
        else:
            log.warning("Unknown SGR code: %d", stack[0] if stack else param)