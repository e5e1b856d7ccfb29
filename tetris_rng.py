
"""Piece randomizer: shape and color are drawn independently"""
import random
from typing import Optional, Tuple

from tetris_piece import SHAPES, COLORS, Shape

class PieceRandomizer:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            # OS-seeded module rng; keep the value so a game can be replayed
            seed = random.getrandbits(32)
        self.seed = seed
        self.rng = random.Random(seed)

    def next_shape(self) -> Shape:
        return SHAPES[self.rng.randrange(len(SHAPES))]

    def next_color(self) -> str:
        return COLORS[self.rng.randrange(len(COLORS))]

    def next_piece(self) -> Tuple[Shape, str]:
        # two separate draws, so a shape may carry another shape's color
        return self.next_shape(), self.next_color()
