
"""Board: fixed grid of cells, collide, merge, sweep"""
from typing import List, Optional

from tetris_config import COLS, ROWS
from tetris_piece import Piece

Cell = Optional[str]  # None or a color
Grid = List[List[Cell]]

class Board:
    def __init__(self, rows: int = ROWS, columns: int = COLS):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"board must be at least 1x1, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self.grid: Grid = [[None] * columns for _ in range(rows)]

    def is_valid_position(self, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
        for bx, by in piece.cells(dx, dy):
            if bx < 0 or bx >= self.columns or by >= self.rows: return False
            # rows above the top are spawn space, only walls apply there
            if by >= 0 and self.grid[by][bx] is not None: return False
        return True

    def merge(self, piece: Piece):
        for bx, by in piece.cells():
            if 0 <= by < self.rows and 0 <= bx < self.columns:
                self.grid[by][bx] = piece.color

    def clear_full_rows(self) -> int:
        kept = [row for row in self.grid if any(c is None for c in row)]
        cleared = self.rows - len(kept)
        if cleared:
            # slice assignment keeps the grid object that renderers hold
            self.grid[:] = [[None] * self.columns for _ in range(cleared)] + kept
        return cleared

    def reset(self):
        for row in self.grid:
            for x in range(self.columns):
                row[x] = None

    def cells(self):
        """Yield (col, row, color) of every occupied cell."""
        for y, row in enumerate(self.grid):
            for x, c in enumerate(row):
                if c is not None:
                    yield x, y, c

    def is_empty(self) -> bool:
        return all(c is None for row in self.grid for c in row)
