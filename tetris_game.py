
"""
Game controller: session state, drop timer, lock / clear / spawn, game over.

The controller owns a `GameSession` and advances it from two kinds of
input, both delivered on the one pygame thread:

  • `tick()`: the periodic drop step. It returns a `TickResult` that
    tells the renderer what changed, so the simulation can be driven and
    tested without a display.
  • discrete commands: start, pause/resume, reset, rotate, move, and the
    fast-drop flag.

State machine:

    Paused  --start/resume-->  Running
    Running --pause-->         Paused
    Running --blocked spawn--> GameOver
    any     --reset-->         Running
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import pygame

from tetris_config import CONFIG, COLS, ROWS
from tetris_board import Board
from tetris_piece import Piece
from tetris_rng import PieceRandomizer

log = logging.getLogger(__name__)


class GameState(enum.Enum):
    PAUSED = "paused"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameSession:
    """Everything one game mutates. Handed to the renderer by reference."""
    board: Board
    piece: Optional[Piece] = None
    score: int = 0
    lines: int = 0
    drop_interval: float = CONFIG["BASE_DROP_MS"]
    state: GameState = GameState.PAUSED
    fast_drop: bool = False
    last_drop_ms: int = 0

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER


@dataclass
class TickResult:
    """What one tick changed. All False/0 means nothing was due yet."""
    dropped: bool = False       # the drop interval elapsed
    moved: bool = False         # the piece fell one row
    locked: bool = False        # the piece merged into the board
    rows_cleared: int = 0
    spawned: bool = False
    game_over: bool = False
    reschedule: bool = False    # another tick was requested


class GameController:
    def __init__(self,
                 rows: int = ROWS,
                 columns: int = COLS,
                 randomizer: Optional[PieceRandomizer] = None,
                 clock: Callable[[], int] = pygame.time.get_ticks,
                 base_drop_ms: float = CONFIG["BASE_DROP_MS"],
                 speedup: float = CONFIG["SPEEDUP"],
                 score_per_line: int = CONFIG["SCORE_PER_LINE"],
                 fast_drop_ms: float = CONFIG["FAST_DROP_MS"]):
        self.rng = randomizer or PieceRandomizer(CONFIG["SEED"])
        self.clock = clock
        self.base_drop_ms = base_drop_ms
        self.speedup = speedup
        self.score_per_line = score_per_line
        self.fast_drop_ms = fast_drop_ms
        self.session = GameSession(Board(rows, columns), drop_interval=base_drop_ms)
        self.tick_pending = False

    @property
    def board(self) -> Board:
        return self.session.board

    @property
    def piece(self) -> Optional[Piece]:
        return self.session.piece

    @property
    def state(self) -> GameState:
        return self.session.state

    # ---------- spawning ----------
    def _new_piece(self) -> Piece:
        shape, color = self.rng.next_piece()
        return Piece.create(shape, color, self.board.columns)

    def _spawn(self) -> bool:
        """Install a fresh piece; False (and GameOver) if it has nowhere to go."""
        s = self.session
        s.piece = self._new_piece()
        if not s.board.is_valid_position(s.piece):
            s.state = GameState.GAME_OVER
            self.tick_pending = False
            log.info("game over: score=%d lines=%d", s.score, s.lines)
            return False
        return True

    # ---------- timing ----------
    def effective_interval(self) -> float:
        s = self.session
        if s.fast_drop:
            return min(s.drop_interval, self.fast_drop_ms)
        return s.drop_interval

    def tick(self) -> TickResult:
        res = TickResult()
        if not self.tick_pending:
            return res
        s = self.session
        if s.state is not GameState.RUNNING:
            self.tick_pending = False
            return res

        now = self.clock()
        if now - s.last_drop_ms >= self.effective_interval():
            res.dropped = True
            if s.board.is_valid_position(s.piece, 0, 1):
                s.piece.move(0, 1)
                res.moved = True
            else:
                self._lock(res)
            s.last_drop_ms = now

        self.tick_pending = s.state is GameState.RUNNING
        res.reschedule = self.tick_pending
        return res

    def _lock(self, res: TickResult):
        s = self.session
        s.board.merge(s.piece)
        res.locked = True
        c = s.board.clear_full_rows()
        res.rows_cleared = c
        if c:
            s.score += c * self.score_per_line
            s.lines += c
            s.drop_interval *= self.speedup
            log.info("cleared %d row(s): score=%d lines=%d interval=%.1fms",
                     c, s.score, s.lines, s.drop_interval)
        else:
            log.debug("piece locked at %s", s.piece.position)
        res.spawned = True
        res.game_over = not self._spawn()

    # ---------- commands ----------
    def reset(self):
        s = self.session
        s.score = 0
        s.lines = 0
        s.drop_interval = self.base_drop_ms
        s.fast_drop = False
        s.board.reset()
        s.state = GameState.RUNNING
        s.last_drop_ms = self.clock()
        log.info("new game")
        if self._spawn():
            self.tick_pending = True

    def start(self):
        if self.state is GameState.GAME_OVER:
            self.reset()
        elif self.state is GameState.PAUSED:
            self.resume()
        else:
            self.pause()

    def resume(self):
        if self.state is not GameState.PAUSED: return
        if self.session.piece is None:
            self.reset(); return
        self.session.state = GameState.RUNNING
        self.tick_pending = True
        log.info("resumed")

    def pause(self):
        if self.state is not GameState.RUNNING: return
        self.session.state = GameState.PAUSED
        log.info("paused")

    def toggle_pause(self):
        if self.state is GameState.RUNNING: self.pause()
        elif self.state is GameState.PAUSED: self.resume()

    def rotate(self):
        # no board check: a rotation may poke through a wall or into blocks
        s = self.session
        if s.game_over or s.piece is None: return
        s.piece.rotate()

    def _shift(self, dx: int):
        s = self.session
        if s.game_over or s.piece is None: return
        if s.board.is_valid_position(s.piece, dx, 0):
            s.piece.move(dx, 0)

    def move_left(self): self._shift(-1)

    def move_right(self): self._shift(1)

    def fast_drop_on(self): self.session.fast_drop = True

    def fast_drop_off(self): self.session.fast_drop = False
