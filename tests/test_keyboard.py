import pytest

from mxterm.keyboard import (
    CSI,
    SS3,
    escape_sequence,
    lookup_sequence,
    octal_escape,
)
from mxterm.keycodes import KeyboardMode, KeyCode, Modifier


def test_f5_with_shift():
    assert escape_sequence(KeyboardMode.NORMAL, KeyCode.F5, Modifier.SHIFT) == CSI + b"15;2~"


def test_normal_arrow():
    assert escape_sequence(KeyboardMode.NORMAL, KeyCode.UP, Modifier(0)) == b"\x1b[A"


def test_application_arrow():
    assert escape_sequence(KeyboardMode.APPLICATION, KeyCode.UP, Modifier(0)) == b"\x1bOA"


def test_application_falls_back_to_normal():
    assert escape_sequence(KeyboardMode.APPLICATION, KeyCode.F1, Modifier(0)) == SS3 + b"P"


def test_vt52_arrow_and_keypad():
    assert escape_sequence(KeyboardMode.VT52, KeyCode.LEFT, Modifier(0)) == b"\x1bD"
    assert escape_sequence(KeyboardMode.VT52, KeyCode.KEYPAD_5, Modifier(0)) == b"\x1b?u"


def test_normal_mode_retries_vt220_for_f13():
    assert escape_sequence(KeyboardMode.NORMAL, KeyCode.F13, Modifier(0)) == CSI + b"25~"


def test_plain_character_and_ctrl_letter():
    assert escape_sequence(KeyboardMode.NORMAL, ord("a"), Modifier(0)) == b"a"
    assert escape_sequence(KeyboardMode.NORMAL, ord("c"), Modifier.CTRL) == b"\x03"


def test_alt_modifier_inserted_before_final():
    assert escape_sequence(KeyboardMode.NORMAL, KeyCode.UP, Modifier.ALT) == b"\x1b[;3A"


def test_tmux_named_keys():
    assert escape_sequence(KeyboardMode.TMUX_CLIENT, KeyCode.UP, Modifier(0)) == b"\x00Up "
    assert escape_sequence(KeyboardMode.TMUX_CLIENT, 3, Modifier(0)) == b"\x00C-c "


def test_tmux_ctrl_prefix():
    result = escape_sequence(KeyboardMode.TMUX_CLIENT, KeyCode.UP, Modifier.CTRL)
    assert result == b"\x00C-" + b"\x00Up "


def test_tmux_unknown_character_is_octal():
    result = escape_sequence(KeyboardMode.TMUX_CLIENT, ord("a"), Modifier(0))
    assert result == octal_escape(b"a")


def test_tmux_unsupported_function_key():
    assert escape_sequence(KeyboardMode.TMUX_CLIENT, KeyCode.F20, Modifier(0)) == b""


def test_lookup_unknown_returns_empty():
    assert lookup_sequence(KeyboardMode.NORMAL, KeyCode.F20) == b""


@pytest.mark.parametrize("data", [b"a", b"\x00\x7f", b"hello"])
def test_octal_escape_round_trip(data):
    escaped = octal_escape(data)
    parts = escaped.split(b"\\")[1:]
    assert bytes(int(p, 8) for p in parts) == data
    assert len(escaped) == 4 * len(data)