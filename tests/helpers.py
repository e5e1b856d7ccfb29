from tetris_game import GameController
from tetris_rng import PieceRandomizer
from tetris_piece import SHAPES, COLORS


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class FixedRandomizer(PieceRandomizer):
    """Hands out the given (shape, color) pairs in order, repeating the last."""
    def __init__(self, pieces):
        super().__init__(seed=0)
        self.pieces = list(pieces)

    def next_piece(self):
        if len(self.pieces) > 1:
            return self.pieces.pop(0)
        return self.pieces[0]


I_PIECE = (SHAPES[0], COLORS[0])
O_PIECE = (SHAPES[3], COLORS[3])


def make_controller(pieces=(I_PIECE,), rows=6, columns=20, **kw):
    clock = FakeClock()
    c = GameController(rows=rows, columns=columns, randomizer=FixedRandomizer(pieces),
                       clock=clock, **kw)
    return c, clock
