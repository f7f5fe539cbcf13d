import pytest

from mxterm import sgr as sgrmod
from mxterm.sgr import Colour, Sgr, SgrFlag, apply_sgr, enhanced_colour, palette_256


def test_bold_then_reset():
    s = Sgr()
    apply_sgr(s, [1])
    assert s.flags & SgrFlag.BOLD
    apply_sgr(s, [0])
    assert s == Sgr()


def test_empty_parameter_resets():
    s = Sgr(flags=SgrFlag.ITALIC, fg=sgrmod.COLOUR_RED)
    apply_sgr(s, [-1])
    assert s == Sgr()


def test_set_and_unset_flags():
    s = Sgr()
    apply_sgr(s, [1, 3, 4, 5, 7])
    assert s.flags == SgrFlag.BOLD | SgrFlag.ITALIC | SgrFlag.UNDERLINE | SgrFlag.SLOW_BLINK | SgrFlag.INVERT
    apply_sgr(s, [22, 23, 24, 25, 27])
    assert s.flags == SgrFlag(0)


@pytest.mark.parametrize("offset", range(8))
def test_basic_colours(offset):
    s = Sgr()
    apply_sgr(s, [30 + offset, 40 + offset])
    assert s.fg == sgrmod.BASIC_COLOURS[offset]
    assert s.bg == sgrmod.BASIC_COLOURS[offset]
    apply_sgr(s, [90 + offset, 100 + offset])
    assert s.fg == sgrmod.BRIGHT_COLOURS[offset]
    assert s.bg == sgrmod.BRIGHT_COLOURS[offset]


def test_default_colours_restore():
    s = Sgr()
    apply_sgr(s, [31, 42])
    apply_sgr(s, [39, 49])
    assert (s.fg, s.bg) == (Sgr().fg, Sgr().bg)


def test_256_colour():
    s = Sgr()
    apply_sgr(s, [38, 5, 196])
    assert s.fg == palette_256(196)
    apply_sgr(s, [48, 5, 21])
    assert s.bg == palette_256(21)


def test_24bit_colour():
    s = Sgr()
    apply_sgr(s, [38, 2, 10, 20, 30])
    assert s.fg == Colour(10, 20, 30)


def test_24bit_too_few_parameters_leaves_colour():
    s = Sgr()
    apply_sgr(s, [38, 2, 10, 20])
    assert s.fg == Sgr().fg


def test_256_out_of_range_leaves_colour():
    s = Sgr()
    apply_sgr(s, [48, 5, 999])
    assert s.bg == Sgr().bg


def test_enhanced_colour_only_reads_leading_position():
    s = Sgr()
    apply_sgr(s, [1, 38, 5, 9])
    assert s.flags & SgrFlag.BOLD
    assert s.fg == Sgr().fg


def test_enhanced_colour_errors():
    assert enhanced_colour([38]) is None
    assert enhanced_colour([38, 7, 1]) is None
    assert enhanced_colour([38, 5]) is None


def test_palette_bounds_and_basic_entries():
    assert all(palette_256(i) is not None for i in range(256))
    assert palette_256(256) is None
    assert palette_256(-1) is None
    assert [palette_256(i) for i in range(8)] == list(sgrmod.BASIC_COLOURS)
    assert [palette_256(i) for i in range(8, 16)] == list(sgrmod.BRIGHT_COLOURS)


def test_copy_is_independent():
    s = Sgr()
    c = s.copy()
    apply_sgr(c, [1, 31])
    assert s == Sgr()
    assert c.flags & SgrFlag.BOLD
    assert c.fg == sgrmod.COLOUR_RED