
"""Piece catalog and the falling piece model"""
from dataclasses import dataclass
from typing import List, Tuple

from tetris_config import COLS

Shape = List[List[int]]

SHAPES: List[Shape] = [
    [[1,1,1,1]],
    [[1,0,0],[1,1,1]],
    [[0,0,1],[1,1,1]],
    [[1,1],[1,1]],
    [[0,1,1],[1,1,0]],
    [[1,1,0],[0,1,1]],
    [[0,1,0],[1,1,1]],
]

COLORS: List[str] = [
    "#FF0000",
    "#00FF00",
    "#0000FF",
    "#FFFF00",
    "#FF00FF",
    "#00FFFF",
    "#FFA500",
]

def rotate_cw(m: Shape) -> Shape:
    return [list(r) for r in zip(*m[::-1])]

def spawn_x(width: int, columns: int) -> int:
    """Centered column, pulled left so a piece of `width` still fits."""
    return max(0, min(columns // 2, columns - width))

@dataclass
class Piece:
    shape: Shape
    color: str
    x: int
    y: int

    @staticmethod
    def create(shape: Shape, color: str, columns: int = COLS) -> "Piece":
        if not shape or not shape[0]:
            raise ValueError("piece shape must have at least one cell")
        s = [r[:] for r in shape]
        return Piece(s, color, spawn_x(len(s[0]), columns), 0)

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def move(self, dx: int, dy: int):
        self.x += dx
        self.y += dy

    def rotate(self):
        self.shape = rotate_cw(self.shape)

    def cells(self, dx: int = 0, dy: int = 0):
        """Absolute (col, row) of every filled cell, shifted by (dx, dy)."""
        for y, row in enumerate(self.shape):
            for x, v in enumerate(row):
                if v:
                    yield self.x + x + dx, self.y + y + dy
