"""Cursor movement, scrolling and erasing on the terminal grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from .cells import XY, Row, make_cells, make_row
from .config import Config


@dataclass
class ScrollRegion:
    """Zero-based, inclusive top and bottom rows of the scrolling region."""

    top: int
    bottom: int


class MotionMixin:
    """Cursor, scrolling and erase operations for a terminal.

    The class it is mixed into provides the state below and three hooks:
    ``_append_scroll_buf()`` moves the top row into scrollback,
    ``_phrase_set_to_row_pos()`` follows the cursor row for phrase tracking,
    and ``_lf_redraw()`` is told about every line feed.

    ``screen`` is the active buffer and is only ever mutated in place.
    """

    size: XY
    screen: List[Row]
    config: Config
    _cur_pos: XY
    _scroll_region: Optional[ScrollRegion]
    _origin_mode: bool
    _scroll_buf: List[Row]
    _scroll_offset: int
    _scroll_msg: Any
    _ss_frequency: int

    # basic TTY operations

    def _cursor(self) -> XY:
        """Return the cursor position clamped to the grid."""
        y = self._cur_pos.y
        if y < 0:
            y = 0
        elif y > self.size.y:
            y = self.size.y - 1

        x = self._cur_pos.x
        if x < 0:
            x = 0
        elif x >= self.size.x:
            x = self.size.x - 1

        return XY(x, y)

    def carriage_return(self) -> None:
        """Move the cursor to the first column."""
        self._cur_pos.x = 0

    def line_feed(self) -> None:
        """Move down a line, scrolling the region when at its bottom."""
        if self._move_down(1, include_origin=False) != 0:
            self._append_scroll_buf()
            self.scroll_up(1)
            self._move_down(1, include_origin=False)
        self._phrase_set_to_row_pos()
        self._lf_redraw()

    def reverse_line_feed(self) -> None:
        """Move up a line, scrolling the region down when at its top."""
        if self._move_up(1, include_origin=False) != 0:
            self.scroll_down(1)
            self._move_up(1, include_origin=False)
        self._phrase_set_to_row_pos()

    def set_jump_scroll(self) -> None:
        """Redraw only every few line feeds; a negative count means a screenful."""
        count = self.config.terminal.jump_scroll_line_count
        if count < 0:
            count = self.size.y
        self._ss_frequency = count

    def set_smooth_scroll(self) -> None:
        """Redraw on every write."""
        self._ss_frequency = 0

    # cursor movement; these do not alter grid contents

    def move_cursor_backwards(self, n: int) -> int:
        """Move left ``n`` cells (0 means 1); return cells lost at the edge."""
        n = max(n, 1)
        overflow = 0
        self._cur_pos.x = self._cursor().x - n
        if self._cur_pos.x < 0:
            overflow = -self._cur_pos.x
            self._cur_pos.x = 0
        return overflow

    def move_cursor_forwards(self, n: int) -> int:
        """Move right ``n`` cells (0 means 1); return cells lost at the edge."""
        n = max(n, 1)
        overflow = 0
        self._cur_pos.x = self._cursor().x + n
        if self._cur_pos.x >= self.size.x:
            overflow = self._cur_pos.x - (self.size.x - 1)
            self._cur_pos.x = self.size.x - 1
        return overflow

    def _move_up(self, n: int, include_origin: bool) -> int:
        n = max(n, 1)
        overflow = 0
        top, _ = self.scrolling_region(include_origin)
        self._cur_pos.y = self._cursor().y - n
        if self._cur_pos.y < top:
            overflow = self._cur_pos.y - top
            self._cur_pos.y = top
        self._phrase_set_to_row_pos()
        return overflow

    def _move_down(self, n: int, include_origin: bool) -> int:
        n = max(n, 1)
        overflow = 0
        self._cur_pos.y = self._cursor().y + n
        _, bottom = self.scrolling_region(include_origin)
        if self._cur_pos.y > bottom:
            overflow = self._cur_pos.y - bottom
            self._cur_pos.y = bottom
        self._phrase_set_to_row_pos()
        return overflow

    def move_cursor_upwards(self, n: int) -> int:
        """Move up ``n`` rows (0 means 1).

        Returns a negative count of rows lost past the top, or 0.
        """
        return self._move_up(n, include_origin=True)

    def move_cursor_downwards(self, n: int) -> int:
        """Move down ``n`` rows (0 means 1); return rows lost past the bottom."""
        return self._move_down(n, include_origin=True)

    def move_cursor_to_column(self, col: int) -> None:
        """Move to a one-based column, clamped to the grid."""
        if col < 1:
            self._cur_pos.x = 0
        elif col > self.size.x:
            self._cur_pos.x = self.size.x - 1
        else:
            self._cur_pos.x = col - 1

    def move_cursor_to_row(self, row: int) -> None:
        """Move to a one-based row, relative to the region in origin mode."""
        top, bottom = self.scrolling_region(include_origin=True)
        row += top
        if row < top:
            self._cur_pos.y = top
        elif row > bottom:
            self._cur_pos.y = bottom
        else:
            self._cur_pos.y = row - 1
        self._phrase_set_to_row_pos()

    def move_cursor_to_pos(self, row: int, col: int) -> None:
        """Move to a one-based row and column."""
        self.move_cursor_to_row(row)
        self.move_cursor_to_column(col)

    # scrolling

    def set_scrolling_region(self, region: Sequence[int]) -> None:
        """Set the region from one-based ``[top, bottom]`` rows."""
        top, bottom = region[0], region[1]

        if top < 0:
            top = 0
        elif top > self.size.y:
            top = self.size.y - 1

        if bottom < top:
            bottom = top
        elif bottom > self.size.y:
            bottom = self.size.y

        self._scroll_region = ScrollRegion(top=top - 1, bottom=bottom - 1)

        pos = self._cursor()
        if pos.y <= top:
            self._cur_pos.y = self._scroll_region.top
        if pos.y >= bottom:
            self._cur_pos.y = self._scroll_region.bottom

    def unset_scrolling_region(self) -> None:
        """Scroll the whole screen again."""
        self._scroll_region = None

    def scrolling_region(self, include_origin: bool) -> Tuple[int, int]:
        """Return the zero-based (top, bottom) rows that scroll.

        With ``include_origin`` the region only applies in origin mode.
        """
        if self._scroll_region is None or (include_origin and not self._origin_mode):
            return 0, self.size.y - 1
        return self._scroll_region.top, self._scroll_region.bottom

    def scroll_up(self, n: int) -> None:
        """Scroll the region up ``n`` lines (0 means 1)."""
        top, bottom = self.scrolling_region(include_origin=False)
        self._scroll_up(top, bottom, max(n, 1))

    def _scroll_up(self, top: int, bottom: int, shift: int) -> None:
        for i in range(top, bottom + 1):
            if i + shift <= bottom:
                self.screen[i] = self.screen[i + shift]
            else:
                self.screen[i] = make_row(self.size.x)

    def scroll_down(self, n: int) -> None:
        """Scroll the region down ``n`` lines (0 means 1)."""
        top, bottom = self.scrolling_region(include_origin=False)
        self._scroll_down(top, bottom, max(n, 1))

    def _scroll_down(self, top: int, bottom: int, shift: int) -> None:
        height = bottom - top + 1
        shift = min(shift, height)
        kept = self.screen[top:bottom + 1 - shift]
        blank = [make_row(self.size.x) for _ in range(shift)]
        self.screen[top:bottom + 1] = blank + kept

    # insert

    def insert_characters(self, n: int) -> None:
        """Insert ``n`` blank cells (0 means 1) at the cursor, pushing right."""
        n = max(n, 1)
        pos = self._cursor()
        row = self.screen[pos.y]
        cells = row.cells[:pos.x] + make_cells(n) + row.cells[pos.x:]
        row.cells = cells[:self.size.x]

    def insert_lines(self, n: int) -> None:
        """Insert ``n`` blank lines (0 means 1) at the cursor row."""
        _, bottom = self.scrolling_region(include_origin=False)
        top = min(self._cursor().y, bottom)
        self._scroll_down(top, bottom, max(n, 1))

    # erase display

    def erase_display_after(self) -> None:
        """Erase from the cursor to the end of the region."""
        _, bottom = self.scrolling_region(include_origin=False)
        y = self._cursor().y
        if y > bottom:
            return
        for row in range(y + 1, bottom + 1):
            self.screen[row] = make_row(self.size.x)
        self.erase_line_after()

    def erase_display_before(self) -> None:
        """Erase from the top of the region up to and including the cursor."""
        top, _ = self.scrolling_region(include_origin=False)
        for row in range(self._cursor().y - 1, top - 1, -1):
            self.screen[row] = make_row(self.size.x)
        self.erase_line_before()

    def erase_display(self) -> None:
        """Erase every row of the region."""
        top, bottom = self.scrolling_region(include_origin=False)
        for row in range(top, bottom + 1):
            self.screen[row] = make_row(self.size.x)

    def erase_scrollback(self) -> None:
        """Forget all scrollback history."""
        self._scroll_offset = 0
        self._scroll_msg = None
        self._scroll_buf = []

    # erase line

    def _blank_cells(self, y: int, start: int, count: int) -> None:
        cells = self.screen[y].cells
        count = min(count, len(cells) - start)
        if count > 0:
            cells[start:start + count] = make_cells(count)

    def erase_line_after(self) -> None:
        """Erase from the cursor to the end of the line."""
        pos = self._cursor()
        self._blank_cells(pos.y, pos.x, self.size.x - pos.x)

    def erase_line_before(self) -> None:
        """Erase from the start of the line up to and including the cursor."""
        pos = self._cursor()
        self._blank_cells(pos.y, 0, pos.x + 1)

    def erase_line(self) -> None:
        """Erase the cursor's line."""
        self.screen[self._cursor().y] = make_row(self.size.x)

    def erase_characters(self, n: int) -> None:
        """Blank ``n`` cells (0 means 1) from the cursor without shifting."""
        pos = self._cursor()
        self._blank_cells(pos.y, pos.x, max(n, 1))

    # delete

    def delete_characters(self, n: int) -> None:
        """Delete ``n`` cells (0 means 1) at the cursor, pulling the rest left."""
        n = max(n, 1)
        pos = self._cursor()
        if n + pos.x > self.size.x:
            n = self.size.x - pos.x
        if n < 1:
            return
        cells = self.screen[pos.y].cells
        cells[pos.x:self.size.x] = cells[pos.x + n:self.size.x] + make_cells(n)

    def delete_lines(self, n: int) -> None:
        """Delete ``n`` lines (0 means 1) at the cursor, pulling the rest up."""
        _, bottom = self.scrolling_region(include_origin=False)
        self._scroll_up(self._cursor().y, bottom, max(n, 1))