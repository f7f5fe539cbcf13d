import pytest

from mxterm.charset import (
    DEC_SPECIAL_CHAR,
    DUTCH,
    FRENCH,
    GERMAN,
    ITALIAN,
    SPANISH,
    character_set,
)

SET_FINALS = ["0", "A", "C", "H", "K", "Q", "R", "Y", "Z", "4"]


def test_dec_special_line_drawing():
    dec = character_set("0")
    assert dec is DEC_SPECIAL_CHAR
    assert dec["q"] == "─"
    assert dec["x"] == "│"


def test_united_kingdom_pound():
    assert character_set("A")["#"] == "£"


def test_usascii_is_none():
    assert character_set("B") is None


def test_unknown_final_is_none():
    assert character_set("!") is None


@pytest.mark.parametrize(
    "a,b",
    [("C", "5"), ("H", "7"), ("Q", "9"), ("R", "f")],
)
def test_aliases_share_set(a, b):
    assert character_set(a) is character_set(b)


@pytest.mark.parametrize(
    "final,expected",
    [("K", GERMAN), ("Y", ITALIAN), ("Z", SPANISH), ("4", DUTCH), ("R", FRENCH)],
)
def test_final_selects_set(final, expected):
    assert character_set(final) is expected


@pytest.mark.parametrize("final", SET_FINALS)
def test_keys_are_printable_ascii(final):
    charset = character_set(final)
    assert len(charset) > 0
    for key, value in charset.items():
        assert len(key) == 1
        assert 0x20 < ord(key) < 0x7F
        assert len(value) == 1


def test_sets_are_read_only():
    dec = character_set("0")
    with pytest.raises(TypeError):
        dec["q"] = "-"
    assert dec["q"] == "─"