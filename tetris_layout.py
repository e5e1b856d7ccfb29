# tetris_layout.py
from dataclasses import dataclass, field
from typing import Dict

import pygame

from tetris_config import CONFIG, COLS, ROWS

# on-screen buttons, top to bottom
BUTTONS = ["start", "pause", "reset", "rotate", "left", "right", "down"]

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    panel_h: int
    buttons: Dict[str, pygame.Rect] = field(default_factory=dict)

    @property
    def board_rect(self) -> pygame.Rect:
        return pygame.Rect(self.board_x, self.board_y, self.board_w, self.board_h)

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        return pygame.Rect(self.board_x + bx*self.cell, self.board_y + by*self.cell,
                           self.cell, self.cell)

def compute_dims(cols: int = COLS, rows: int = ROWS) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 160

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # buttons sit below the score/lines block
    btn_h, gap = 32, 8
    buttons = {}
    y = panel_y + 110
    for name in BUTTONS:
        buttons[name] = pygame.Rect(panel_x + 12, y, panel_w - 24, btn_h)
        y += btn_h + gap
    panel_h = max(board_h, y - gap - panel_y + 12)
    total_h = margin + panel_h + margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y, panel_h=panel_h,
        buttons=buttons,
    )
