"""Winner / draw popup with fade-in"""
import math
from typing import Optional
import pygame
from connect4_config import CONFIG, sanitize_dt
from connect4_types import Outcome, OutcomeKind, Player

POPUP_W, POPUP_H = 500, 250

# border, text fill
THEMES = {
    Player.RED: ((255,0,100), (255,100,100)),
    Player.YELLOW: ((255,220,0), (255,255,100)),
    None: ((100,200,255), (150,220,255)),
}

class Popup:
    def __init__(self):
        self.close()

    def open(self, outcome: Outcome):
        self.active = True
        self.outcome = outcome
        self.alpha = 0.0
        if outcome.kind is OutcomeKind.WON:
            self.message = f"{outcome.winner.label} WINS!"
        else:
            self.message = "It's a DRAW!"
        self.restart_rect = None

    def close(self):
        self.active = False
        self.outcome: Optional[Outcome] = None
        self.alpha = 0.0
        self.message = ""
        self.restart_rect: Optional[pygame.Rect] = None

    def update(self, dt):
        if not self.active: return
        dt = sanitize_dt(dt)
        if self.alpha < 255.0:
            self.alpha = min(255.0, self.alpha + CONFIG["POPUP_FADE_SPEED"] * dt)

    def is_restart_click(self, pos) -> bool:
        if not self.active or self.restart_rect is None: return False
        return self.restart_rect.collidepoint(pos)

    def draw(self, screen, font, big_font, dims):
        if not self.active: return
        a = int(self.alpha)
        winner = self.outcome.winner if self.outcome else None
        border, fill = THEMES[winner]

        shade = pygame.Surface((dims.total_w, dims.total_h), pygame.SRCALPHA)
        shade.fill((0,0,0,int(a*0.85)))
        screen.blit(shade,(0,0))

        x = (dims.total_w - POPUP_W) // 2
        y = (dims.total_h - POPUP_H) // 2 - 20
        box = pygame.Surface((POPUP_W, POPUP_H), pygame.SRCALPHA)
        box.fill((20,20,40,a))
        pygame.draw.rect(box, border+(a,), box.get_rect(), 8)
        pygame.draw.rect(box, (255,255,255,int(a*0.6)), box.get_rect().inflate(-20,-20), 3)
        screen.blit(box,(x,y))

        title = big_font.render("GAME OVER", True, (255,255,255))
        title.set_alpha(a)
        screen.blit(title, title.get_rect(center=(x+POPUP_W//2, y+70)))

        sep = pygame.Surface((POPUP_W-100, 4), pygame.SRCALPHA)
        sep.fill(border+(a,))
        screen.blit(sep,(x+50, y+130))

        cy = y + POPUP_H//2 + 20
        shadow = font.render(self.message, True, (0,0,0))
        shadow.set_alpha(int(a*0.7))
        screen.blit(shadow, shadow.get_rect(center=(x+POPUP_W//2+3, cy+3)))
        msg = font.render(self.message, True, fill)
        msg.set_alpha(a)
        screen.blit(msg, msg.get_rect(center=(x+POPUP_W//2, cy)))

        # pulsing restart prompt, clickable
        pulse = a * (0.7 + 0.3*math.sin(self.alpha/40.0))
        btn = font.render(">> PRESS R TO RESTART <<", True, (0,255,150))
        btn.set_alpha(int(pulse))
        self.restart_rect = btn.get_rect(center=(x+POPUP_W//2, y+POPUP_H-50))
        screen.blit(btn, self.restart_rect)
