"""C0 and C1 control characters, VT52 mode and string-type sequences."""

from __future__ import annotations

import enum
import logging
from typing import Optional

from .charset import character_set
from .keycodes import KeyboardMode

log = logging.getLogger(__name__)

_ESC = "\x1b"
_BEL = "\x07"
_ST_FINAL = "\\"


class VtMode(enum.IntEnum):
    """Which terminal the escape sequences are interpreted for."""

    VT100 = 0
    VT52 = 1
    TEK4014 = 2


class ControlMixin:
    """Interpretation of single characters and non-CSI escape sequences.

    The class it is mixed into supplies:

    * ``_read()`` returning the next input character,
    * ``renderer`` with ``bell()``, ``set_keyboard_fn_mode(mode)`` and
      ``set_window_title(title)``,
    * ``_notify(level, message)`` with level ``"debug"`` or ``"warn"``,
    * ``_write_to_element(char)`` returning True if an active element took it,
    * ``write_cell``, ``print_tab``, ``add_tab_stop``, ``save_cursor``,
      ``restore_cursor``, ``decaln_alignment_test``, ``reply`` and
      ``parse_csi``,
    * the cursor and scrolling operations of the motion mixin,
    * the state attributes ``_phrase``, ``_active_char_set``,
      ``_char_set_g`` (four designated sets) and ``_vt_mode``.
    """

    _phrase: Optional[list]
    _active_char_set: int
    _vt_mode: VtMode

    def read_char(self, char: str) -> None:
        """Interpret one character received from the program."""
        if char < " ":
            self._phrase = None

        match char:
            case "\x07":
                self.renderer.bell()

            case "\x08" | "\x7f":
                self.move_cursor_backwards(1)

            case "\t":
                if self._write_to_element(char):
                    return
                self.print_tab()

            case "\n":
                if self._write_to_element(char):
                    return
                self.line_feed()

            case "\x0b" | "\x0c":
                self.line_feed()

            case "\r":
                self.carriage_return()

            case "\x0e":
                self._active_char_set = 1

            case "\x0f":
                self._active_char_set = 0

            case "\x1b":
                if self._vt_mode == VtMode.VT52:
                    self._parse_vt52()
                else:
                    self._parse_c1()

            case _:
                if char < " ":
                    log.warning(
                        "Unexpected ASCII control character (ignored): %d", ord(char)
                    )
                    return
                charset = self._char_set_g[self._active_char_set]
                if charset is not None:
                    char = charset.get(char, char)
                self.write_cell(char, None)

    # ESC sequences

    def _parse_c1(self) -> None:
        char = self._read()
        match char:
            case "[":
                self.parse_csi()
            case "]":
                self._parse_osc()
            case "P":
                self._parse_dcs()
            case "^":
                self._parse_pm()
            case "_":
                self._handle_apc(self._read_string())

            case "#":
                final = self._read()
                if final == "8":
                    self.decaln_alignment_test()
                else:
                    log.info("Unhandled DEC escape sequence: ESC #%s", final)

            case " ":
                log.debug("Ignored 'ESC %s' sequence", self._read())
            case "%":
                log.debug(
                    "Ignored 'ESC %%%s' sequence, UTF-8 is always used", self._read()
                )

            case "(":
                self._char_set_g[0] = character_set(self._read())
            case ")" | "-":
                self._char_set_g[1] = character_set(self._read())
            case "*" | ".":
                self._char_set_g[2] = character_set(self._read())
            case "+" | "/":
                self._char_set_g[3] = character_set(self._read())

            case "=":
                self.renderer.set_keyboard_fn_mode(KeyboardMode.APPLICATION)
            case ">":
                self.renderer.set_keyboard_fn_mode(KeyboardMode.NORMAL)

            case "k":
                self._tmux_rename_window()

            case "l":
                self._notify(
                    "warn",
                    "Unsupported C0 code: Memory Lock (per HP terminals). "
                    "Locks memory above the cursor",
                )
            case "m":
                self._notify(
                    "warn", "Unsupported C0 code: Memory Unlock (per HP terminals)"
                )

            case "n" | "}":
                self._active_char_set = 2
            case "o" | "|":
                self._active_char_set = 3
            case "~":
                self._active_char_set = 1

            case "7":
                self.save_cursor()
            case "8":
                self.restore_cursor()

            case "D":
                self.line_feed()
            case "E":
                self.carriage_return()
                self.line_feed()

            case "F" | "G":
                self._notify(
                    "warn",
                    "Unsupported C0 code: Select Area (Cursor to lower left corner "
                    "of screen - if enabled by the 'hpLowerleftBugCompat' resource",
                )

            case "H":
                self.add_tab_stop()

            case "M":
                self.reverse_line_feed()

            case "N":
                self._single_shift(2)
            case "O":
                self._single_shift(3)

            case "c" | "@" | "A" | "B" | "C" | "I" | "J" | "K" | "L" | "Q" | "R" \
                    | "S" | "T" | "U" | "V" | "W" | "X" | "Y" | "Z":
                log.info("Unhandled C1 code: %s", char)

            case "\\":
                log.debug("unexpected string terminator")

            case _:
                self._notify("debug", f"Unexpected rune after escape: {ord(char)}")

    def _single_shift(self, charset: int) -> None:
        saved = self._active_char_set
        self._active_char_set = charset
        self.read_char(self._read())
        self._active_char_set = saved

    # VT52

    def _parse_vt52(self) -> None:
        char = self._read()
        match char:
            case "<":
                self._vt_mode = VtMode.VT100
            case "=" | ">" | "F" | "G":
                log.info("VT52 code not implemented: %s", char)
            case "A":
                self.move_cursor_upwards(1)
            case "B":
                self.move_cursor_downwards(1)
            case "C":
                self.move_cursor_forwards(1)
            case "D":
                self.move_cursor_backwards(1)
            case "H":
                self.move_cursor_to_pos(1, 1)
            case "I":
                self.reverse_line_feed()
            case "J":
                self.erase_display_after()
            case "K":
                self.erase_line_after()
            case "Y":
                row = ord(self._read())
                col = ord(self._read())
                self.move_cursor_to_pos(col - 32, row - 32)
            case "Z":
                self.reply(b"\x1b/Z")
            case _:
                log.warning("VT52 code not recognized: %s", char)

    # string sequences

    def _read_string(self, bell_terminates: bool = True) -> str:
        """Read up to ST (or BEL when allowed), excluding the terminator."""
        text = []
        while True:
            char = self._read()
            if char == _ESC:
                following = self._read()
                if following == _ST_FINAL:
                    return "".join(text)
                text.append(char)
                text.append(following)
                continue
            if bell_terminates and char == _BEL:
                return "".join(text)
            text.append(char)

    def _parse_osc(self) -> None:
        text = self._read_string()
        stack = text.split(";")
        code = stack[0]
        if code in ("0", "2"):
            if len(stack) > 1:
                self.renderer.set_window_title(stack[1])
            else:
                log.warning("OSC %s without a title: %s", code, text)
        elif code == "1337":
            pass
        else:
            log.warning("Unknown OSC code %s: %s", code, text)

    def _parse_dcs(self) -> None:
        log.warning("Unhandled DCS code %s", self._read_string())

    def _parse_pm(self) -> None:
        log.debug("Ignored PM code %s", self._read_string(bell_terminates=False))

    def _handle_apc(self, text: str) -> None:
        """Handle an application program command; unsupported by default."""
        self._notify("debug", f"Unknown mxAPC code: {text}")

    def _tmux_rename_window(self) -> None:
        title = []
        while True:
            char = self._read()
            if char == _ESC:
                if self._read() == _ST_FINAL:
                    break
                continue
            title.append(char)
        self.renderer.set_window_title("".join(title))