"""Translate key presses into the byte sequences a terminal sends."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .keycodes import (
    KeyboardMode,
    KeyCode,
    Modifier,
    modifier_ansi_code,
    modifier_tmux_code,
    special_case_sequence,
)

log = logging.getLogger(__name__)

ESC = b"\x1b"
SS2 = ESC + b"N"
SS3 = ESC + b"O"
CSI = ESC + b"["


def _ss3(text: str) -> bytes:
    return SS3 + text.encode("ascii")


def _csi(text: str) -> bytes:
    return CSI + text.encode("ascii")


def _vt52(text: str) -> bytes:
    return ESC + text.encode("ascii")


def _tmux(name: str) -> bytes:
    return b"\x00" + name.encode("ascii") + b" "


_RETRY: Mapping[KeyboardMode, Tuple[KeyboardMode, ...]] = MappingProxyType({
    KeyboardMode.NORMAL: (KeyboardMode.NORMAL, KeyboardMode.VT220),
    KeyboardMode.APPLICATION: (
        KeyboardMode.APPLICATION, KeyboardMode.NORMAL, KeyboardMode.VT220,
    ),
    KeyboardMode.VT52: (KeyboardMode.VT52, KeyboardMode.NORMAL),
    KeyboardMode.VT220: (KeyboardMode.VT220, KeyboardMode.NORMAL),
    KeyboardMode.TMUX_CLIENT: (KeyboardMode.TMUX_CLIENT,),
})

_KEYPAD_KEYS = (
    KeyCode.KEYPAD_SPACE, KeyCode.KEYPAD_TAB, KeyCode.KEYPAD_ENTER,
    KeyCode.KEYPAD_MULTIPLY, KeyCode.KEYPAD_ADD, KeyCode.KEYPAD_COMMA,
    KeyCode.KEYPAD_MINUS, KeyCode.KEYPAD_PERIOD, KeyCode.KEYPAD_DIVIDE,
    KeyCode.KEYPAD_0, KeyCode.KEYPAD_1, KeyCode.KEYPAD_2, KeyCode.KEYPAD_3,
    KeyCode.KEYPAD_4, KeyCode.KEYPAD_5, KeyCode.KEYPAD_6, KeyCode.KEYPAD_7,
    KeyCode.KEYPAD_8, KeyCode.KEYPAD_9, KeyCode.KEYPAD_EQUAL,
)
_KEYPAD_FINALS = " \tMjklmnopqrstuvwxyX"
_KEYPAD_VT220_FINALS = " IMjklmnopqrstuvwxyX"
_KEYPAD_TMUX_NAMES = (
    "Space", "Tab", "KPEnter", "KP*", "KP+", "KP,", "KP-", "KP.", "KP/",
    "KP0", "KP1", "KP2", "KP3", "KP4", "KP5", "KP6", "KP7", "KP8", "KP9", "KP=",
)

_NORMAL: Dict[int, bytes] = {
    KeyCode.UP: _csi("A"),
    KeyCode.DOWN: _csi("B"),
    KeyCode.RIGHT: _csi("C"),
    KeyCode.LEFT: _csi("D"),
    KeyCode.HOME: _csi("H"),
    KeyCode.END: _csi("E"),
    KeyCode.KEYPAD_SPACE: b" ",
    KeyCode.KEYPAD_TAB: b"\t",
    KeyCode.KEYPAD_ENTER: b"\r",
    KeyCode.F1: _ss3("P"),
    KeyCode.F2: _ss3("Q"),
    KeyCode.F3: _ss3("R"),
    KeyCode.F4: _ss3("S"),
    KeyCode.F5: _csi("15~"),
    KeyCode.F6: _csi("17~"),
    KeyCode.F7: _csi("18~"),
    KeyCode.F8: _csi("19~"),
    KeyCode.F9: _csi("20~"),
    KeyCode.F10: _csi("21~"),
    KeyCode.F11: _csi("23~"),
    KeyCode.F12: _csi("24~"),
}

_APPLICATION: Dict[int, bytes] = {
    KeyCode.UP: _ss3("A"),
    KeyCode.DOWN: _ss3("B"),
    KeyCode.RIGHT: _ss3("C"),
    KeyCode.LEFT: _ss3("D"),
    KeyCode.HOME: _ss3("H"),
    KeyCode.END: _ss3("E"),
}

_VT220: Dict[int, bytes] = {
    KeyCode.HOME: _csi("1~"),
    KeyCode.INSERT: _csi("2~"),
    KeyCode.DELETE: _csi("3~"),
    KeyCode.END: _csi("4~"),
    KeyCode.PAGE_UP: _csi("5~"),
    KeyCode.PAGE_DOWN: _csi("6~"),
    **{key: _ss3(final) for key, final in zip(_KEYPAD_KEYS, _KEYPAD_VT220_FINALS)},
    KeyCode.F13: _csi("25~"),
    KeyCode.F14: _csi("26~"),
    KeyCode.F15: _csi("28~"),
    KeyCode.F16: _csi("29~"),
    KeyCode.F17: _csi("31~"),
    KeyCode.F18: _csi("32~"),
    KeyCode.F19: _csi("33~"),
    KeyCode.F20: _csi("34~"),
}

_VT52: Dict[int, bytes] = {
    KeyCode.UP: _vt52("A"),
    KeyCode.DOWN: _vt52("B"),
    KeyCode.RIGHT: _vt52("C"),
    KeyCode.LEFT: _vt52("D"),
    **{key: _vt52("?" + final) for key, final in zip(_KEYPAD_KEYS, _KEYPAD_FINALS)},
}

_TMUX_CONTROL_NAMES = {
    0: "\\000", 8: "BSpace", 9: "Tab", 10: "Enter", 13: "Enter",
    27: "Escape", 28: "\\034", 29: "\\035", 30: "\\036", 31: "\\034",
    32: "Space", ord('"'): "'\"'", ord("'"): "\"'\"", 127: "Delete",
}

_TMUX: Dict[int, bytes] = {
    **{code: _tmux(f"C-{chr(ord('a') + code - 1)}") for code in range(1, 27)},
    **{code: _tmux(name) for code, name in _TMUX_CONTROL_NAMES.items()},
    KeyCode.UP: _tmux("Up"),
    KeyCode.DOWN: _tmux("Down"),
    KeyCode.RIGHT: _tmux("Right"),
    KeyCode.LEFT: _tmux("Left"),
    KeyCode.HOME: _tmux("Home"),
    KeyCode.END: _tmux("End"),
    KeyCode.INSERT: _tmux("Insert"),
    KeyCode.DELETE: _tmux("Delete"),
    KeyCode.PAGE_UP: _tmux("PageUp"),
    KeyCode.PAGE_DOWN: _tmux("PageDown"),
    **{key: _tmux(name) for key, name in zip(_KEYPAD_KEYS, _KEYPAD_TMUX_NAMES)},
    **{getattr(KeyCode, f"F{i}"): _tmux(f"F{i}") for i in range(1, 13)},
}

_TABLES: Mapping[KeyboardMode, Mapping[int, bytes]] = MappingProxyType({
    KeyboardMode.NORMAL: MappingProxyType(_NORMAL),
    KeyboardMode.APPLICATION: MappingProxyType(_APPLICATION),
    KeyboardMode.VT220: MappingProxyType(_VT220),
    KeyboardMode.VT52: MappingProxyType(_VT52),
    KeyboardMode.TMUX_CLIENT: MappingProxyType(_TMUX),
})


def octal_escape(data: bytes) -> bytes:
    """Escape every byte as a backslash and three octal digits."""
    return b"".join(f"\\{byte:03o}".encode("ascii") for byte in data)


def lookup_sequence(mode: KeyboardMode, key: int) -> bytes:
    """Look a key up in one mode's table, falling back to the normal table.

    Returns empty bytes when no sequence is known.
    """
    found = _TABLES[mode].get(int(key))
    if found is not None:
        return found
    if mode is not KeyboardMode.NORMAL:
        return lookup_sequence(KeyboardMode.NORMAL, key)
    log.debug("No sequence available for %d in %s", int(key), mode.name)
    return b""


def escape_sequence(
    mode: KeyboardMode, key: int, modifier: Modifier = Modifier(0)
) -> bytes:
    """Return the bytes to send for a key press with modifiers applied."""
    special = special_case_sequence(mode, key, modifier)
    if special:
        return special

    sequence = b""
    for candidate in _RETRY[mode]:
        sequence = lookup_sequence(candidate, key)
        if not sequence:
            if mode is KeyboardMode.TMUX_CLIENT and int(key) < 255:
                sequence = octal_escape(bytes([int(key)]))
            else:
                continue

        if int(modifier) == 0:
            return sequence

        modifier = Modifier(modifier)
        if mode is KeyboardMode.TMUX_CLIENT and not modifier.has(Modifier.ALT):
            return modifier_tmux_code(modifier) + sequence

        return sequence[:-1] + modifier_ansi_code(modifier) + sequence[-1:]

    return sequence