"""Key codes, ASCII control codes and keyboard modifiers."""

from __future__ import annotations

import enum
from typing import Optional


class Ascii(enum.IntEnum):
    """ASCII control characters."""

    CTRL_A = 1
    CTRL_B = 2
    CTRL_C = 3
    EOF = 4
    CTRL_E = 5
    CTRL_F = 6
    CTRL_G = 7
    ISO_BACKSPACE = 8
    TAB = 9
    CTRL_J = 10
    CTRL_K = 11
    CTRL_L = 12
    CTRL_M = 13
    CTRL_N = 14
    CTRL_O = 15
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_R = 18
    CTRL_S = 19
    CTRL_T = 20
    CTRL_U = 21
    CTRL_V = 22
    CTRL_W = 23
    CTRL_X = 24
    CTRL_Y = 25
    CTRL_Z = 26
    ESCAPE = 27
    CTRL_SLASH = 28
    CTRL_CLOSE_SQUARE = 29
    CTRL_HAT = 30
    CTRL_UNDERSCORE = 31
    BACKSPACE = 127


class KeyCode(enum.IntEnum):
    """Non-character keys. Values 0 to 255 are reserved for plain bytes."""

    UP = 1000
    DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    INSERT = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    DELETE = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()

    KEYPAD_SPACE = enum.auto()
    KEYPAD_TAB = enum.auto()
    KEYPAD_ENTER = enum.auto()
    KEYPAD_MULTIPLY = enum.auto()
    KEYPAD_ADD = enum.auto()
    KEYPAD_COMMA = enum.auto()
    KEYPAD_MINUS = enum.auto()
    KEYPAD_PERIOD = enum.auto()
    KEYPAD_DIVIDE = enum.auto()
    KEYPAD_0 = enum.auto()
    KEYPAD_1 = enum.auto()
    KEYPAD_2 = enum.auto()
    KEYPAD_3 = enum.auto()
    KEYPAD_4 = enum.auto()
    KEYPAD_5 = enum.auto()
    KEYPAD_6 = enum.auto()
    KEYPAD_7 = enum.auto()
    KEYPAD_8 = enum.auto()
    KEYPAD_9 = enum.auto()
    KEYPAD_EQUAL = enum.auto()

    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()
    F13 = enum.auto()
    F14 = enum.auto()
    F15 = enum.auto()
    F16 = enum.auto()
    F17 = enum.auto()
    F18 = enum.auto()
    F19 = enum.auto()
    F20 = enum.auto()


class KeyboardMode(enum.Enum):
    """Which family of escape sequences function keys produce."""

    NORMAL = enum.auto()
    APPLICATION = enum.auto()
    VT52 = enum.auto()
    VT220 = enum.auto()
    TMUX_CLIENT = enum.auto()


class Modifier(enum.IntFlag):
    """Keyboard modifier flags."""

    SHIFT = 1
    ALT = 2
    CTRL = 4
    META = 8

    def has(self, flag: "Modifier") -> bool:
        """True if any bit of ``flag`` is set."""
        return bool(self & flag)


_ALL_MODIFIERS = Modifier.SHIFT | Modifier.ALT | Modifier.CTRL | Modifier.META


def modifier_ansi_code(mod: Modifier) -> bytes:
    """Return the ``;N`` parameter xterm uses for a modifier combination.

    Shift is 2, Alt 3, Ctrl 5, Meta 9, and combinations add their bits.
    """
    value = int(mod)
    if value < 1 or value & ~int(_ALL_MODIFIERS):
        raise ValueError(f"invalid modifier: {value}")
    return b";" + str(value + 1).encode("ascii")


def modifier_tmux_code(mod: Modifier) -> bytes:
    """Return the tmux key-name prefix for a modifier combination.

    The leading NUL byte marks the result as a key name rather than raw bytes.
    Alt has no prefix here.
    """
    mod = Modifier(mod)
    parts = [b"\x00"]
    if mod.has(Modifier.CTRL):
        parts.append(b"C-")
    if mod.has(Modifier.SHIFT):
        parts.append(b"S-")
    if mod.has(Modifier.META):
        parts.append(b"M-")
    return b"".join(parts)


def special_case_sequence(
    mode: KeyboardMode, key: int, modifier: Modifier
) -> Optional[bytes]:
    """Return a hard-coded sequence for a key press, or ``None``."""
    if mode is KeyboardMode.TMUX_CLIENT:
        return None
    key = int(key)
    modifier = int(modifier)
    if key < 256 and modifier == 0:
        return bytes([key])
    if ord("`") < key < ord("z") and modifier == Modifier.CTRL:
        return bytes([key - 0x60])
    return None