"""Keyboard -> command translation"""
from enum import Enum
from typing import Optional
import pygame
from tetris_config import CONFIG


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    PAUSE = "pause"
    RESTART = "restart"
    QUIT = "quit"
    HELP = "help"
    STATS = "stats"
    DEBUG = "debug"


KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.ROTATE,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_RETURN: Command.HARD_DROP,
    pygame.K_KP_ENTER: Command.HARD_DROP,
    pygame.K_p: Command.PAUSE,
    pygame.K_r: Command.RESTART,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_h: Command.HELP,
    pygame.K_s: Command.STATS,
    pygame.K_d: Command.DEBUG,
}

# Commands named after an engine method; the rest belong to the control loop
GAME_COMMANDS = {
    Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.ROTATE,
    Command.SOFT_DROP, Command.HARD_DROP,
}


def enable_key_repeat():
    """Held keys repeat after DAS_MS, every ARR_MS."""
    pygame.key.set_repeat(CONFIG["DAS_MS"], max(1, CONFIG["ARR_MS"]))


def translate(event) -> Optional[Command]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type != pygame.KEYDOWN:
        return None
    return KEYMAP.get(event.key)
