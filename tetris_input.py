
"""Keyboard and on-screen button dispatch to controller commands"""
from typing import Optional

import pygame

from tetris_game import GameController
from tetris_layout import Dims

KEYMAP = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_UP: "rotate",
    pygame.K_DOWN: "fast_drop_on",
    pygame.K_SPACE: "toggle_pause",
    pygame.K_RETURN: "start",
    pygame.K_r: "reset",
}

KEYUP_MAP = {
    pygame.K_DOWN: "fast_drop_off",
}

BUTTON_COMMANDS = {
    "start": "start",
    "pause": "toggle_pause",
    "reset": "reset",
    "rotate": "rotate",
    "left": "move_left",
    "right": "move_right",
    "down": "fast_drop_on",
}

def button_at(dims: Dims, pos) -> Optional[str]:
    for name, rect in dims.buttons.items():
        if rect.collidepoint(pos): return name
    return None

def command_for(event: pygame.event.Event, dims: Dims) -> Optional[str]:
    """Map one pygame event to a controller command name, or None."""
    if event.type == pygame.KEYDOWN:
        return KEYMAP.get(event.key)
    if event.type == pygame.KEYUP:
        return KEYUP_MAP.get(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        name = button_at(dims, event.pos)
        return BUTTON_COMMANDS.get(name) if name else None
    if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        # the down button is held; any release ends the fast drop
        return "fast_drop_off"
    return None

def dispatch(controller: GameController, event: pygame.event.Event, dims: Dims) -> Optional[str]:
    cmd = command_for(event, dims)
    if cmd:
        getattr(controller, cmd)()
    return cmd
