import unittest

from tetris_engine import Game
from tetris_overlay import InfoPanel, HELP_LINES


class InfoPanelTests(unittest.TestCase):
    def test_help_is_default(self):
        self.assertEqual(InfoPanel().mode, "help")

    def test_modes_are_exclusive(self):
        p = InfoPanel()
        p.toggle("stats")
        self.assertEqual(p.mode, "stats")
        p.toggle("debug")
        self.assertEqual(p.mode, "debug")
        p.toggle("debug")
        self.assertEqual(p.mode, "help")

    def test_help_toggle_keeps_help(self):
        p = InfoPanel()
        p.toggle("help")
        self.assertEqual(p.mode, "help")

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            InfoPanel().toggle("scores")

    def test_lines(self):
        g = Game(seed=1)
        p = InfoPanel()
        self.assertEqual(len(p.lines(g)), len(HELP_LINES))
        p.toggle("debug")
        text = "\n".join(p.lines(g, {"fps": 60}))
        self.assertIn("bag: " + " ".join(g.bag.items), text)
        self.assertIn("speed: 1000", text)
        self.assertIn("fps: 60", text)
        p.toggle("stats")
        self.assertEqual(p.lines(g), [])


if __name__ == "__main__":
    unittest.main()
