"""Start screen: checkerboard, title, START/EXIT buttons"""
from typing import Optional
import pygame
from connect4_input import Action

CHECKER = 20
GRAY1, GRAY2 = (100,100,100), (70,70,70)
TITLE_Y, START_Y, EXIT_Y = 150, 350, 470

class StartScreen:
    def __init__(self, dims, font, big_font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        cx = dims.total_w // 2
        self.start_rect = pygame.Rect(0, 0, 300, 70); self.start_rect.center = (cx, START_Y)
        self.exit_rect = pygame.Rect(0, 0, 140, 55); self.exit_rect.center = (cx, EXIT_Y)

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        for y in range(0, d.total_h, CHECKER):
            for x in range(0, d.total_w, CHECKER):
                col = GRAY1 if (x//CHECKER + y//CHECKER) % 2 == 0 else GRAY2
                pygame.draw.rect(self.bg, col, (x, y, CHECKER, CHECKER))

    def action_at(self, pos) -> Optional[Action]:
        if self.start_rect.collidepoint(pos): return Action.START
        if self.exit_rect.collidepoint(pos): return Action.QUIT
        return None

    def draw(self, screen):
        screen.blit(self.bg, (0,0))
        title = self.big_font.render("CONNECT 4", True, (255,220,0))
        screen.blit(title, title.get_rect(center=(self.dims.total_w//2, TITLE_Y)))
        for rect, label, fill in ((self.start_rect, "START GAME", (40,90,200)),
                                  (self.exit_rect, "EXIT", (200,50,50))):
            pygame.draw.rect(screen, fill, rect, border_radius=10)
            pygame.draw.rect(screen, (255,255,255), rect, 3, border_radius=10)
            t = self.font.render(label, True, (255,255,255))
            screen.blit(t, t.get_rect(center=rect.center))
