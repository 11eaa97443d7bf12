import unittest

import pygame

from tetris_engine import Game
from tetris_input import Command, GAME_COMMANDS, KEYMAP, translate


class TranslateTests(unittest.TestCase):
    def key(self, k, kind=pygame.KEYDOWN):
        return pygame.event.Event(kind, key=k)

    def test_arrow_keys(self):
        self.assertEqual(translate(self.key(pygame.K_LEFT)), Command.MOVE_LEFT)
        self.assertEqual(translate(self.key(pygame.K_RIGHT)), Command.MOVE_RIGHT)
        self.assertEqual(translate(self.key(pygame.K_DOWN)), Command.SOFT_DROP)
        self.assertEqual(translate(self.key(pygame.K_UP)), Command.ROTATE)

    def test_enter_hard_drops_and_space_rotates(self):
        self.assertEqual(translate(self.key(pygame.K_RETURN)), Command.HARD_DROP)
        self.assertEqual(translate(self.key(pygame.K_SPACE)), Command.ROTATE)

    def test_key_up_and_unknown_keys_ignored(self):
        self.assertIsNone(translate(self.key(pygame.K_LEFT, pygame.KEYUP)))
        self.assertIsNone(translate(self.key(pygame.K_F12)))

    def test_window_close_quits(self):
        self.assertEqual(translate(pygame.event.Event(pygame.QUIT)), Command.QUIT)

    def test_every_command_bound(self):
        self.assertEqual(set(KEYMAP.values()), set(Command))

    def test_game_commands_are_engine_methods(self):
        g = Game(seed=0)
        for cmd in GAME_COMMANDS:
            self.assertTrue(callable(getattr(g, cmd.value)), cmd)


if __name__ == "__main__":
    unittest.main()
