import pytest

from mxterm.cells import (
    XY,
    Cell,
    Row,
    get_element_xy,
    make_cells,
    make_row,
    make_screen,
    set_element_xy,
)


@pytest.mark.parametrize(
    "x, y",
    [
        (0, 0),
        (1, 1),
        (3, 7),
        (7, 3),
        (200, 0),
        (0, 200),
        (200, 200),
        (10000, 13),
        (13, 10000),
        (10000, 10000),
        (32767, 1),
        (1, 32767),
        (32767, 32767),
    ],
)
def test_element_xy_round_trip(x, y):
    packed = set_element_xy(XY(x, y))
    assert get_element_xy(packed) == XY(x, y)


def test_element_xy_layout_puts_x_in_high_bits():
    assert get_element_xy(0x00030007) == XY(3, 7)
    assert set_element_xy(XY(3, 7)) == 0x00030007


@pytest.mark.parametrize("xy", [XY(32768, 0), XY(0, 32768)])
def test_element_xy_ceiling(xy):
    with pytest.raises(ValueError):
        set_element_xy(xy)


def test_make_cells_are_empty_and_independent():
    cells = make_cells(4)
    assert len(cells) == 4
    assert all(cell.char == "" and cell.sgr is None for cell in cells)
    cells[0].char = "a"
    assert [cell.char for cell in cells] == ["a", "", "", ""]


def test_make_row_width():
    row = make_row(7)
    assert isinstance(row, Row)
    assert len(row.cells) == 7
    assert row.phrase == []


def test_make_screen_dimensions_and_independence():
    screen = make_screen(10, 5)
    assert len(screen) == 5
    assert [len(row.cells) for row in screen] == [10] * 5
    screen[0].cells[0].char = "x"
    assert screen[1].cells[0].char == ""
    assert len({id(row) for row in screen}) == 5


def test_cell_identity_not_value_equality():
    assert Cell() is not Cell()
    first, second = Cell(), Cell()
    assert (first == second) is False
    assert first == first