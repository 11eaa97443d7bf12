import unittest

import numpy as np

from tetris_sound import (
    Speaker, square_wave, tune_length, VOLUME, LEVEL_UP, GAME_OVER, STARTUP,
)


class SquareWaveTests(unittest.TestCase):
    def test_shape(self):
        self.assertEqual(square_wave([(440, 100)], 8000).shape, (800,))
        self.assertEqual(square_wave([(440, 100)], 8000, channels=2).shape, (800, 2))
        self.assertEqual(square_wave(LEVEL_UP, 8000).dtype, np.int16)

    def test_levels_and_period(self):
        s = square_wave([(1000, 2)], 8000)
        self.assertEqual(s[:8].tolist(), [VOLUME] * 4 + [-VOLUME] * 4)

    def test_frequency_clamped(self):
        np.testing.assert_array_equal(square_wave([(5, 10)], 8000), square_wave([(20, 10)], 8000))

    def test_tune_lengths(self):
        self.assertEqual(tune_length(LEVEL_UP), 480)
        self.assertEqual(tune_length(GAME_OVER), 2800)
        self.assertEqual(tune_length(STARTUP), 25 * 35)


class SpeakerTests(unittest.TestCase):
    def test_muted_speaker_is_silent(self):
        s = Speaker(enabled=False)
        self.assertFalse(s.enabled)
        self.assertEqual(s.play(LEVEL_UP), 0)
        s.stop()


if __name__ == "__main__":
    unittest.main()
