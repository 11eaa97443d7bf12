
import argparse
import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_engine import Game
from tetris_clock import Interval, Delay
from tetris_input import Command, GAME_COMMANDS, translate, enable_key_repeat
from tetris_overlay import InfoPanel
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_sound import Speaker, STARTUP, LEVEL_UP, GAME_OVER

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Falling-block puzzle game")
    ap.add_argument("--seed", type=int, help="seed for the piece bag")
    ap.add_argument("--cell-size", type=int, help="cell size in pixels")
    ap.add_argument("--no-sound", action="store_true", help="disable jingles")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return ap.parse_args(argv)


def apply_args(args):
    if args.seed is not None: CONFIG["BAG_SEED"] = args.seed
    if args.cell_size: CONFIG["CELL_SIZE"] = args.cell_size
    if args.no_sound: CONFIG["SOUND"] = False
    if args.log_level: CONFIG["LOG_LEVEL"] = args.log_level.upper()


def run():
    """Play until the window is closed or Esc is pressed."""
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    enable_key_repeat()

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    speaker = Speaker(CONFIG["SOUND"])
    info = InfoPanel()

    game = Game()
    gravity = Interval()
    clear = Delay()
    paused = False
    pause_until = 0          # level-up jingle holds the game
    render.rebuild_board_surface(game.board, game.cleared_rows)

    # Title screen while the start-up jingle plays
    screen.blit(render.bg, (0, 0))
    render.draw_title(screen)
    pygame.display.flip()
    pygame.time.wait(speaker.play(STARTUP))
    gravity.restart(pygame.time.get_ticks())

    while True:
        clock.tick(60)
        now = pygame.time.get_ticks()
        board_changed = False

        for e in pygame.event.get():
            cmd = translate(e)
            if cmd is None:
                continue
            if cmd == Command.QUIT:
                pygame.quit(); return
            if cmd == Command.RESTART:
                log.info("restart")
                speaker.stop()
                game.reset(); paused = False; pause_until = 0
                gravity.restart(now); clear = Delay()
                board_changed = True
            elif cmd == Command.PAUSE:
                if not game.game_over: paused = not paused
            elif cmd in (Command.HELP, Command.STATS, Command.DEBUG):
                info.toggle(cmd.value)
            elif cmd in GAME_COMMANDS and not paused and now >= pause_until:
                if getattr(game, cmd.value)() and cmd == Command.HARD_DROP:
                    board_changed = True

        held = paused or now < pause_until
        if not held and not game.game_over and gravity.ready(now, game.speed):
            game.tick()
            board_changed = True

        if game.clear_pending and clear.ready(now, CONFIG["CLEAR_DELAY_MS"]):
            game.compact_if_due()
            board_changed = True

        if board_changed:
            render.rebuild_board_surface(game.board, game.cleared_rows)

        if game.take_level_up():
            pause_until = now + speaker.play(LEVEL_UP)
        if game.take_game_over():
            speaker.play(GAME_OVER)

        render.draw(screen, game, paused)
        info.draw(screen, render, game, {"gravity timer": gravity.last, "clear timer": clear.start, "fps": round(clock.get_fps())})
        pygame.display.flip()


def main(argv=None):
    apply_args(parse_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        run()
    except KeyboardInterrupt:
        pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(main())
