
"""
Rendering helpers for the Tetris project.

Optimizations:
- Pre-render one cell Surface per color and blit it.
- Pre-render the static background (board frame + panel) once.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when a tick
  reports a lock (the board never changes otherwise).
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional

from tetris_layout import Dims, BUTTONS
from tetris_board import Board
from tetris_piece import Piece, COLORS
from tetris_game import GameSession, TickResult

BG = (10,13,34)
GRID = (40,50,90)
TEXT = (200,210,240)

@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for col in COLORS:
            self._cell(col)
        self.hud = HudCache()
        self.button_labels: Dict[str, pygame.Surface] = {}
        # Board surface cache (only locked blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)

    # ---------- Static background ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        pygame.draw.rect(self.bg, (0,0,0), d.board_rect)
        pygame.draw.rect(self.bg, GRID, d.board_rect.inflate(2, 2), 1)
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.panel_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    def _cell(self, color: str) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            s = pygame.Surface((self.dims.cell, self.dims.cell))
            s.fill(pygame.Color(color))
            self.cell_surf[color] = s
        return s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: Board):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for x, y, color in board.cells():
            self.board_surface.blit(self._cell(color), (x*c, y*c))

    def apply(self, session: GameSession, result: TickResult):
        """Refresh caches for whatever the last tick changed."""
        if result.locked:
            self.rebuild_board_surface(session.board)

    # ---------- Frame ----------
    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        surf = self._cell(piece.color)
        for bx, by in piece.cells():
            # rotation is unchecked, so parts of a piece may sit outside the board
            if by < 0 or by >= self.dims.board_h // self.dims.cell: continue
            if bx < 0 or bx >= self.dims.board_w // self.dims.cell: continue
            screen.blit(surf, self.dims.cell_rect(bx, by).topleft)

    def draw_frame(self, screen: pygame.Surface, session: GameSession):
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if session.piece is not None:
            self.draw_piece(screen, session.piece)
        self.draw_panel_hud(screen, session)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, session: GameSession):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if session.score != self.hud.score:
            self.hud.score = session.score
            self.hud.score_s = f.render(f"Score: {session.score}", True, TEXT)
        if session.lines != self.hud.lines:
            self.hud.lines = session.lines
            self.hud.lines_s = f.render(f"Lines: {session.lines}", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 68))
        for name in BUTTONS:
            self.draw_button(screen, name, self.button_text(name, session))

    @staticmethod
    def button_text(name: str, session: GameSession) -> str:
        if name == "pause":
            return "Play" if session.paused else "Pause"
        return {"start": "Start/Stop", "reset": "Reset", "rotate": "Rotate",
                "left": "Left", "right": "Right", "down": "Down"}[name]

    def draw_button(self, screen: pygame.Surface, name: str, text: str):
        rect = self.dims.buttons[name]
        pygame.draw.rect(screen, (40,48,92), rect, border_radius=4)
        pygame.draw.rect(screen, (70,80,130), rect, 1, border_radius=4)
        label = self.button_labels.get(text)
        if label is None:
            label = self.font.render(text, True, TEXT)
            self.button_labels[text] = label
        screen.blit(label, label.get_rect(center=rect.center))
