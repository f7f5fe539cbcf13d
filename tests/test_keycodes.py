import pytest

from mxterm.keycodes import (
    Ascii,
    KeyCode,
    KeyboardMode,
    Modifier,
    modifier_ansi_code,
    modifier_tmux_code,
    special_case_sequence,
)


def test_ascii_values_pass_through_as_bytes():
    plain = Modifier(0)
    assert special_case_sequence(KeyboardMode.NORMAL, Ascii.ESCAPE, plain) == b"\x1b"
    assert special_case_sequence(KeyboardMode.NORMAL, Ascii.BACKSPACE, plain) == b"\x7f"
    assert special_case_sequence(KeyboardMode.NORMAL, Ascii.CTRL_G, plain) == b"\x07"
    assert special_case_sequence(KeyboardMode.NORMAL, Ascii.TAB, plain) == b"\t"


def test_keycodes_start_above_byte_range():
    assert KeyCode(1000) is KeyCode.UP
    for key in KeyCode:
        assert special_case_sequence(KeyboardMode.NORMAL, key, Modifier(0)) is None


def test_keycodes_are_consecutive():
    first = int(KeyCode.UP)
    assert [KeyCode(first + i) for i in range(len(KeyCode))] == list(KeyCode)


def test_modifier_has():
    mod = Modifier(5)
    assert mod == Modifier.SHIFT | Modifier.CTRL
    assert mod.has(Modifier.SHIFT)
    assert mod.has(Modifier.CTRL)
    assert not mod.has(Modifier.ALT)
    assert not mod.has(Modifier.META)


@pytest.mark.parametrize(
    "mod,expected",
    [
        (Modifier.SHIFT, b";2"),
        (Modifier.ALT, b";3"),
        (Modifier.SHIFT | Modifier.ALT, b";4"),
        (Modifier.CTRL, b";5"),
        (Modifier.META, b";9"),
        (Modifier.META | Modifier.SHIFT, b";10"),
        (Modifier.META | Modifier.CTRL | Modifier.ALT | Modifier.SHIFT, b";16"),
    ],
)
def test_modifier_ansi_code(mod, expected):
    assert modifier_ansi_code(mod) == expected


def test_modifier_ansi_code_invalid():
    with pytest.raises(ValueError):
        modifier_ansi_code(Modifier(0))


def test_modifier_tmux_code():
    assert modifier_tmux_code(Modifier.CTRL | Modifier.SHIFT) == b"\x00C-S-"
    assert modifier_tmux_code(Modifier.META) == b"\x00M-"
    assert modifier_tmux_code(Modifier.ALT) == b"\x00"


def test_special_case_tmux_is_none():
    assert special_case_sequence(KeyboardMode.TMUX_CLIENT, ord("a"), Modifier(0)) is None


def test_special_case_plain_byte():
    assert special_case_sequence(KeyboardMode.NORMAL, ord("a"), Modifier(0)) == b"a"


def test_special_case_ctrl_letter():
    result = special_case_sequence(KeyboardMode.NORMAL, ord("c"), Modifier.CTRL)
    assert result == bytes([Ascii.CTRL_C])


def test_special_case_none_for_function_key():
    assert special_case_sequence(KeyboardMode.NORMAL, KeyCode.UP, Modifier(0)) is None
    assert special_case_sequence(KeyboardMode.NORMAL, ord("c"), Modifier.ALT) is None