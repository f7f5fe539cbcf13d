"""Control Sequence Introducer (CSI) parsing and dispatch."""

from __future__ import annotations

import logging
from typing import List

from .controls import VtMode
from .keycodes import KeyboardMode
from .sgr import apply_sgr

log = logging.getLogger(__name__)

_ESC = "\x1b"
_CSI = b"\x1b["
_DEVICE_ATTRIBUTES = _CSI + b"?65;1;6;15;17;22;28;29c"


def multiply_n(n: int, char: str) -> int:
    """Append a decimal digit to a CSI parameter.

    A negative value (an empty parameter so far) counts as zero.
    """
    if n < 0:
        n = 0
    return n * 10 + (ord(char) - ord("0"))


def is_csi_terminator(char: str) -> bool:
    """True for the final characters that end a CSI sequence."""
    return "\x40" <= char <= "\x7e"


class CsiMixin:
    """Parsing of ``ESC [`` sequences.

    The class it is mixed into supplies, besides the motion mixin's cursor,
    scroll and erase operations:

    * ``_read()`` returning the next input character and ``read_char(char)``
      for control characters embedded in a sequence,
    * ``renderer`` with ``set_keyboard_fn_mode(mode)`` and
      ``resize_window(width, height)``,
    * ``pty`` with ``write(data)`` for status replies,
    * ``_notify(level, message)``, ``reply(data)``, ``reset(width, height)``,
    * ``repeat_preceding``, ``save_cursor``, ``restore_cursor``,
      ``show_cursor``, ``use_alternative_buffer``, ``use_normal_buffer``,
      ``push_window_title``, ``pop_window_title``, ``clear_tab_stop`` and
      ``reset_tab_stops``,
    * the state ``sgr``, ``config``, ``_insert_mode``, ``_no_auto_line_wrap``,
      ``_origin_mode`` and ``_vt_mode``.
    """

    def parse_csi(self) -> None:
        """Read and act on one CSI sequence (the ``ESC [`` already consumed)."""
        stack: List[int] = [0]
        cache: List[str] = []
        unknown = False

        while True:
            char = self._read()
            cache.append(char)

            if "0" <= char <= "9":
                stack[-1] = multiply_n(stack[-1], char)
                continue

            if char < " " and char != _ESC:
                self.read_char(char)
                continue

            if is_csi_terminator(char):
                log.debug("CSI %s", "".join(cache))

            n = stack[-1]

            match char:
                case "@":
                    self.insert_characters(n)
                case "a" | "C":
                    self.move_cursor_forwards(n)
                case "A":
                    self.move_cursor_upwards(n)
                case "b":
                    self.repeat_preceding(n)
                case "B":
                    self.move_cursor_downwards(n)
                case "c":
                    self.reply(_DEVICE_ATTRIBUTES)
                case "d":
                    self.move_cursor_to_row(n)
                case "D":
                    self.move_cursor_backwards(n)
                case "e":
                    if n < 0:
                        self._notify("debug", f"VPR is negative value: {n}")
                    self.move_cursor_downwards(n)
                case "E":
                    self.move_cursor_downwards(n)
                    self._cur_pos.x = 0
                case "f" | "H":
                    self._cursor_position(char, stack, cache)
                case "F":
                    self.move_cursor_upwards(n)
                    self._cur_pos.x = 0
                case "g":
                    if n in (-1, 0):
                        self.clear_tab_stop()
                    elif n in (1, 2):
                        pass  # ignored by vt100 and xterm
                    elif n == 3:
                        self.reset_tab_stops()
                    else:
                        log.warning("Unhandled parameter for g: %s (%s)",
                                    stack, "".join(cache))
                case "G" | "`":
                    self.move_cursor_to_column(n)
                case "h":
                    if stack[0] == 4:
                        self._insert_mode = True
                    else:
                        log.warning("Unknown Set Mode (SM) sequence: %s",
                                    "".join(cache))
                case "J":
                    self._erase_in_display(n)
                case "K":
                    self._erase_in_line(n)
                case "l":
                    if stack[0] == 4:
                        self._insert_mode = False
                    else:
                        log.warning("Unknown Reset Mode (RM) sequence: %d", n)
                case "L":
                    self.insert_lines(n)
                case "m":
                    apply_sgr(self.sgr, stack)
                case "M":
                    self.delete_lines(n)
                case "n":
                    if n == 6:
                        pos = self._cursor()
                        self._csi_callback(f"{pos.y + 1};{pos.x + 1}R")
                    else:
                        log.warning("Unknown Device Status Report (DSR) sequence: %d", n)
                case "P":
                    self.delete_characters(n)
                case "q":
                    pass  # Load LEDs (DECLL) is ignored
                case "r":
                    if len(stack) == 1:
                        self.unset_scrolling_region()
                    elif len(stack) == 2:
                        self.set_scrolling_region(stack)
                    else:
                        log.warning("Unexpected number of parameters in CSI r (%s): %s",
                                    "".join(cache), stack)
                case "s":
                    self.save_cursor()
                case "S":
                    self.scroll_up(n)
                case "t":
                    self._window_manipulation(stack, cache)
                case "T" | "^":
                    self.scroll_down(n)
                case "u":
                    self.restore_cursor()
                case "X":
                    self.erase_characters(n)
                case "?":
                    self._lookup_private_csi(self._parse_csi_extended())
                    return
                case ">":
                    code = self._parse_csi_extended()
                    log.info("Secondary CSI code ignored: '%s%s'", "".join(cache), code)
                    return
                case "=":
                    self._lookup_tertiary_csi(self._parse_csi_extended())
                    return
                case ":" | ";":
                    stack.append(-1)
                case _:
                    unknown = True
                    if not is_csi_terminator(char):
                        code = self._parse_csi_extended()
                        log.warning("Unknown extended CSI code %s: %s",
                                    char, "".join(cache) + code)
                        return

            if is_csi_terminator(char):
                if unknown:
                    log.warning("Unknown CSI code %s: %s", char, "".join(cache))
                return

    def _parse_csi_extended(self) -> str:
        """Read up to and including the next CSI terminator."""
        code = []
        while True:
            char = self._read()
            code.append(char)
            if is_csi_terminator(char):
                return "".join(code)

    def _cursor_position(self, char: str, stack: List[int], cache: List[str]) -> None:
        if len(stack) == 1:
            self.move_cursor_to_pos(stack[-1], 1)
            return
        self.move_cursor_to_pos(stack[0], stack[1])
        if len(stack) > 2:
            log.warning("more parameters than expected for %s: %s (%s)",
                        char, stack, "".join(cache))

    def _erase_in_display(self, n: int) -> None:
        if n in (-1, 0):
            self.erase_display_after()
        elif n == 1:
            self.erase_display_before()
        elif n == 2:
            self.erase_display()
        elif n == 3:
            self.erase_display()
            self.erase_scrollback()
        else:
            log.warning("Unknown Erase in Display (ED) sequence: %d", n)

    def _erase_in_line(self, n: int) -> None:
        if n in (-1, 0):
            self.erase_line_after()
        elif n == 1:
            self.erase_line_before()
        elif n == 2:
            self.erase_line()
        else:
            log.warning("Unknown Erase in Line (EL) sequence: %d", n)

    def _window_manipulation(self, stack: List[int], cache: List[str]) -> None:
        p2 = stack[1] if len(stack) > 1 else 0
        if stack[0] == 22 and p2 in (0, 2):
            self.push_window_title()
        elif stack[0] == 23 and p2 in (0, 2):
            self.pop_window_title()
        else:
            log.warning("Unknown Window manipulation (XTWINOPS) sequence: %s (%s)",
                        stack, "".join(cache))

    def _csi_callback(self, message: str) -> None:
        """Send ``CSI message`` straight back to the program."""
        try:
            self.pty.write(_CSI + message.encode("utf-8"))
        except OSError as err:
            self._notify("error", f"cannot write callback message '{message}': {err}")

    def _set_size(self, width: int, height: int) -> None:
        if not self.config.tmux.enabled:
            self.reset(width, height)
            self.renderer.resize_window(width, height)

    def _lookup_private_csi(self, code: str) -> None:
        param, final = code[:-1], code[-1]
        log.debug("private CSI %s", param)

        if final == "h":
            match param:
                case "1":
                    self.renderer.set_keyboard_fn_mode(KeyboardMode.APPLICATION)
                case "3":
                    self._set_size(132, 24)
                case "4":
                    self.set_smooth_scroll()
                case "6":
                    self._origin_mode = True
                case "7":
                    self._no_auto_line_wrap = False
                case "12" | "25":
                    self.show_cursor(True)
                case "47" | "1047":
                    self.use_alternative_buffer()
                case "1048":
                    self.save_cursor()
                case "1049":
                    self.save_cursor()
                    self.use_alternative_buffer()
                case "2004":
                    log.info("Set bracketed paste mode is not supported")
                case _:
                    log.info("Private CSI parameter not implemented in %s: %s",
                             final, code)

        elif final == "K":
            match param:
                case "" | "0":
                    self.erase_line_after()
                case "1":
                    self.erase_line_before()
                case "2":
                    self.erase_line()
                case _:
                    log.warning("Unknown Erase in Line (EL) sequence: %s", param)

        elif final == "l":
            match param:
                case "1":
                    self.renderer.set_keyboard_fn_mode(KeyboardMode.APPLICATION)
                case "2":
                    self._vt_mode = VtMode.VT52
                case "3":
                    self._set_size(80, 24)
                case "4":
                    self.set_jump_scroll()
                case "6":
                    self._origin_mode = False
                case "7":
                    self._no_auto_line_wrap = True
                case "12" | "25":
                    self.show_cursor(False)
                case "47" | "1047":
                    self.use_normal_buffer()
                case "1048":
                    self.restore_cursor()
                case "1049":
                    self.use_normal_buffer()
                    self.restore_cursor()
                case "2004":
                    log.info("Reset bracketed paste mode is not supported")
                case _:
                    log.info("Private CSI parameter not implemented in %s: %s",
                             final, code)

        else:
            log.info("Private CSI code not implemented: %s (%s)", final, code)

    def _lookup_tertiary_csi(self, code: str) -> None:
        param, final = code[:-1], code[-1]
        if final == "B" and param == "1":
            log.debug("BEGIN 1")
        elif final == "E" and param == "1":
            log.debug("END 1")
        elif final in ("B", "E"):
            log.info("Tertiary CSI parameter not implemented in %s: %s", final, code)
        else:
            log.info("Tertiary CSI code not implemented: %s (%s)", final, code)