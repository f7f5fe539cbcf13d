"""Grid primitives: coordinates, cells, rows and screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .sgr import Sgr

_ELEMENT_XY_CEILING = 0x7FFF
_ELEMENT_XY_LOW_MASK = 0xFFFF


@dataclass
class XY:
    """A mutable pair of grid coordinates."""

    x: int = 0
    y: int = 0


@dataclass(eq=False)
class Cell:
    """One character position on the grid.

    An empty ``char`` means the cell has never been written. Cells that belong
    to an embedded element carry that element and, in ``element_xy``, the
    packed position of the cell within it.
    """

    char: str = ""
    sgr: Optional[Sgr] = None
    element: Optional[Any] = None
    element_xy: int = 0
    phrase: Optional[List[str]] = None


@dataclass(eq=False)
class Row:
    """A line of cells plus the text phrase written along it."""

    cells: List[Cell] = field(default_factory=list)
    phrase: List[str] = field(default_factory=list)


def make_cells(width: int) -> List[Cell]:
    """Return ``width`` fresh, independent empty cells."""
    return [Cell() for _ in range(max(width, 0))]


def make_row(width: int) -> Row:
    """Return an empty row ``width`` cells wide."""
    return Row(cells=make_cells(width), phrase=[])


def make_screen(width: int, height: int) -> List[Row]:
    """Return ``height`` empty rows, each ``width`` cells wide."""
    return [make_row(width) for _ in range(max(height, 0))]


def set_element_xy(xy: XY) -> int:
    """Pack an element-relative position into one integer.

    Both ordinates must fit in 15 bits.
    """
    if xy.x > _ELEMENT_XY_CEILING or xy.y > _ELEMENT_XY_CEILING:
        raise ValueError(
            f"element position {xy.x},{xy.y} exceeds {_ELEMENT_XY_CEILING}"
        )
    return (xy.x << 16) | xy.y


def get_element_xy(value: int) -> XY:
    """Unpack a position packed by :func:`set_element_xy`."""
    return XY(x=value >> 16, y=value & _ELEMENT_XY_LOW_MASK)