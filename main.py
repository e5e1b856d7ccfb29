
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import GameController
from tetris_input import dispatch
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP,
                              pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP])

    controller = GameController()
    dims = compute_dims(controller.board.columns, controller.board.rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    overlay = Overlay()
    clock = pygame.time.Clock()

    # the game comes up running, as if reset had been pressed
    controller.reset()
    log.info("board %dx%d, seed %s", controller.board.columns, controller.board.rows, controller.rng.seed)
    render.rebuild_board_surface(controller.board)

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                pygame.quit(); sys.exit()
            cmd = dispatch(controller, e, dims)
            if cmd in ("reset", "start"):
                # reset clears the board outside of a tick
                render.rebuild_board_surface(controller.board)

        result = controller.tick()
        render.apply(controller.session, result)

        overlay.sync(controller.state)
        render.draw_frame(screen, controller.session)
        overlay.draw(screen, big_font, dims.board_rect)
        pygame.display.flip()


if __name__ == '__main__':
    main()
