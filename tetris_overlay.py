
import pygame

from tetris_game import GameState

class Overlay:
    """Banner over the board: game over (until reset) and paused."""
    def __init__(self):
        self.active=False
        self.message=""

    def show(self,message):
        self.active=True; self.message=message

    def dismiss(self): self.active=False

    def sync(self,state):
        if state is GameState.GAME_OVER: self.show("GAME OVER")
        elif state is GameState.PAUSED: self.show("PAUSED")
        else: self.dismiss()

    def draw(self,screen,font,board_rect):
        if not self.active: return
        s=pygame.Surface((board_rect.w,90),pygame.SRCALPHA); s.fill((20,25,40,230))
        top=board_rect.centery-45
        screen.blit(s,(board_rect.x,top))
        txt=font.render(self.message,True,(255,220,220))
        screen.blit(txt,txt.get_rect(center=(board_rect.centerx,top+45)))
