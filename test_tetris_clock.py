import unittest

from tetris_clock import Interval, Delay


class IntervalTests(unittest.TestCase):
    def test_fires_once_per_period(self):
        t = Interval()
        t.restart(0)
        fired = [now for now in range(0, 3001, 10) if t.ready(now, 1000)]
        self.assertEqual(fired, [1000, 2000, 3000])

    def test_period_change_applies_next_poll(self):
        t = Interval()
        t.restart(0)
        self.assertFalse(t.ready(400, 1000))
        self.assertTrue(t.ready(505, 505))


class DelayTests(unittest.TestCase):
    def test_first_poll_arms(self):
        d = Delay()
        self.assertFalse(d.ready(1000, 100))
        self.assertFalse(d.ready(1099, 100))
        self.assertTrue(d.ready(1100, 100))
        self.assertIsNone(d.start)

    def test_rearms_after_firing(self):
        d = Delay()
        d.ready(0, 100)
        d.ready(100, 100)
        self.assertFalse(d.ready(5000, 100))
        self.assertTrue(d.ready(5100, 100))


if __name__ == "__main__":
    unittest.main()
