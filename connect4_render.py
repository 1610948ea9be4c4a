"""
Rendering helpers for the Connect Four board.

- Pre-render the static background (window fill + status bar) once.
- Pre-render one piece sprite per player and one for an empty slot.
- Cache a BOARD SURFACE with all *committed* pieces; rebuild it only when a
  piece lands or the game resets.
- Cache status-bar text surfaces; re-render only when the text changes.
"""
from __future__ import annotations
import math
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from connect4_layout import Dims
from connect4_types import Player, COLS, ROWS

COLORS: Dict[Player, Tuple[int,int,int]] = {
    Player.RED: (230,30,30),
    Player.YELLOW: (250,220,0),
}
BOARD_BLUE = (0,0,150)
SLOT = (20,20,20)
SLOT_RIM = (0,0,100)
STATUS_BG = (50,50,50)

EXIT_W, EXIT_H, EXIT_MARGIN = 60, 35, 10

@dataclass
class StatusCache:
    text: str = ""
    seconds: int = -1
    status_s: Optional[pygame.Surface] = None
    seconds_s: Optional[pygame.Surface] = None
    exit_s: Optional[pygame.Surface] = None

def timer_color(remaining: float) -> Tuple[int,int,int,int]:
    if remaining > 5.0: return (0,200,0,180)
    if remaining > 3.0: return (255,200,0,180)
    return (255,0,0,180)

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_pieces()
        self.status = StatusCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h))
        self.exit_rect = pygame.Rect(20, dims.board_h + 8, EXIT_W, EXIT_H)

    # ---------- Static background ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(STATUS_BG)
        pygame.draw.rect(self.bg, BOARD_BLUE, (0, 0, d.board_w, d.board_h))

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0, 0))

    # ---------- Piece sprites ----------
    def _make_pieces(self):
        c, r = self.dims.cell, self.dims.piece_r
        self.piece_surf: Dict[Player, pygame.Surface] = {}
        for p, col in COLORS.items():
            s = pygame.Surface((c, c), pygame.SRCALPHA)
            pygame.draw.circle(s, col, (c//2, c//2), r)
            self.piece_surf[p] = s
        self.slot_surf = pygame.Surface((c, c), pygame.SRCALPHA)
        pygame.draw.circle(self.slot_surf, SLOT, (c//2, c//2), r)
        pygame.draw.circle(self.slot_surf, SLOT_RIM, (c//2, c//2), r, 2)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid):
        """Rebuilds the committed-pieces surface from board contents."""
        self.board_surface.fill(BOARD_BLUE)
        c = self.dims.cell
        for y in range(ROWS):
            for x in range(COLS):
                p = grid[y][x]
                self.board_surface.blit(self.piece_surf[p] if p else self.slot_surf, (x*c, y*c))

    def blit_board_surface(self, screen: pygame.Surface):
        screen.blit(self.board_surface, (0, 0))

    def draw_falling(self, screen: pygame.Surface, piece):
        if piece is None: return
        c = self.dims.cell
        screen.blit(self.piece_surf[piece.player], (piece.column*c, int(piece.y) - c//2))

    # ---------- Status bar ----------
    def draw_status(self, screen: pygame.Surface, text: str, remaining: Optional[float]):
        d = self.dims
        f = self.font
        screen.blit(self.bg, (0, d.board_h), pygame.Rect(0, d.board_h, d.total_w, d.status_h))

        if text != self.status.text:
            self.status.text = text
            self.status.status_s = f.render(text, True, (240,240,240))
        screen.blit(self.status.status_s, self.status.status_s.get_rect(center=(d.total_w//2, d.board_h + d.status_h//2)))

        # Exit to menu
        if self.status.exit_s is None:
            self.status.exit_s = f.render("X", True, (255,255,255))
        pygame.draw.rect(screen, (200,50,50), self.exit_rect)
        pygame.draw.rect(screen, (255,100,100), self.exit_rect, 2)
        screen.blit(self.status.exit_s, self.status.exit_s.get_rect(center=self.exit_rect.center))

        if remaining is None: return
        cx, cy = d.total_w - 55, d.board_h + d.status_h//2
        circle = pygame.Surface((54, 54), pygame.SRCALPHA)
        pygame.draw.circle(circle, timer_color(remaining), (27, 27), 25)
        pygame.draw.circle(circle, (255,255,255), (27, 27), 25, 2)
        screen.blit(circle, (cx-27, cy-27))
        secs = math.ceil(remaining)
        if secs != self.status.seconds:
            self.status.seconds = secs
            self.status.seconds_s = f.render(str(secs), True, (255,255,255))
        screen.blit(self.status.seconds_s, self.status.seconds_s.get_rect(center=(cx, cy)))

    def is_exit_click(self, pos) -> bool:
        return self.exit_rect.inflate(EXIT_MARGIN*2, EXIT_MARGIN*2).collidepoint(pos)
