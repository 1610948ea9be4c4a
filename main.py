import logging
import sys
import pygame
from connect4_config import CONFIG
from connect4_game import Game, Phase
from connect4_input import Action, column_at, key_action, on_board
from connect4_layout import compute_dims
from connect4_log import setup_logging
from connect4_popup import Popup
from connect4_render import RenderAssets
from connect4_start import StartScreen

log = logging.getLogger("connect4.main")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def apply_action(game: Game, action):
    if action is Action.START:
        game.start_game()
    elif action is Action.RESTART:
        game.restart()
    elif action is Action.MENU:
        game.return_to_menu()
    elif action is Action.QUIT:
        pygame.quit(); sys.exit()


def handle_click(game: Game, pos, start, render, popup, dims):
    if game.phase is Phase.MENU:
        apply_action(game, start.action_at(pos))
        return
    if render.is_exit_click(pos):
        game.return_to_menu()
    elif game.is_game_over() and popup.is_restart_click(pos):
        game.restart()
    elif on_board(pos, dims):
        col = column_at(pos[0], dims.cell)
        if col is not None:
            game.select_column(col)


def main():
    setup_logging(CONFIG["LOG_LEVEL"])
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Connect Four")
    font = pygame.font.SysFont(None, 34)
    big_font = pygame.font.SysFont(None, 72)

    render = RenderAssets(dims, font)
    start = StartScreen(dims, font, big_font)
    popup = Popup()
    game = Game(on_game_over=popup.open, on_reset=popup.close)
    clock = pygame.time.Clock()

    drawn_moves = None
    log.info("Window %dx%d, cell %d", dims.total_w, dims.total_h, dims.cell)

    while True:
        dt = clock.tick(CONFIG["FPS"]) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                handle_click(game, e.pos, start, render, popup, dims)
            if e.type == pygame.KEYDOWN and game.phase is not Phase.MENU:
                apply_action(game, key_action(e.key))

        game.tick(dt)
        popup.update(dt)

        if game.phase is Phase.MENU:
            start.draw(screen)
            drawn_moves = None
            pygame.display.flip()
            continue

        # Committed pieces only change when a drop lands or the game resets
        if game.moves != drawn_moves:
            render.rebuild_board_surface(game.board.grid)
            drawn_moves = game.moves

        render.redraw_static(screen)
        render.blit_board_surface(screen)
        render.draw_falling(screen, game.falling_piece())
        remaining = game.time_remaining() if game.phase is Phase.AWAITING_INPUT else None
        render.draw_status(screen, game.status_text(), remaining)
        popup.draw(screen, font, big_font, dims)

        pygame.display.flip()


if __name__ == '__main__':
    main()
