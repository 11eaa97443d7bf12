"""Square-wave jingles for start-up, level-up and game over"""
import logging
from typing import List, Tuple
import numpy as np
import pygame

log = logging.getLogger(__name__)

Tune = List[Tuple[int, int]]   # (frequency Hz, duration ms)

STARTUP: Tune = [(hz, 35) for hz in (
    523, 392, 523, 659, 784, 1047, 784, 415, 523, 622, 831, 622, 831,
    1046, 1244, 1661, 1244, 466, 587, 698, 932, 1195, 1397, 1865, 1397)]
LEVEL_UP: Tune = [(400, 120), (500, 120), (600, 120), (800, 120)]
GAME_OVER: Tune = [
    (147, 400), (130, 200), (123, 200), (110, 200), (440, 200), (440, 200),
    (82, 200), (98, 200), (392, 200), (392, 200), (123, 200), (110, 200), (440, 200),
]

VOLUME = 6000


def tune_length(tune: Tune) -> int:
    return sum(ms for _, ms in tune)


def square_wave(tune: Tune, rate: int, channels: int = 1) -> np.ndarray:
    """int16 samples for the whole tune, frequencies clamped to 20..20000 Hz.
    Mono gives shape (n,), more channels give (n, channels)."""
    parts = []
    for hz, ms in tune:
        hz = min(max(hz, 20), 20000)
        period = rate / hz
        n = np.arange(rate * ms // 1000)
        parts.append(np.where((n % period) < period / 2, VOLUME, -VOLUME))
    wave = (np.concatenate(parts) if parts else np.zeros(0)).astype(np.int16)
    if channels > 1:
        wave = np.column_stack([wave] * channels)
    return wave


class Speaker:
    def __init__(self, enabled: bool = True):
        self.enabled = False
        self.rate = 22050
        self.channels = 1
        if not enabled:
            return
        try:
            pygame.mixer.init(frequency=self.rate, size=-16, channels=1)
        except pygame.error as e:
            log.warning("sound disabled: %s", e)
            return
        init = pygame.mixer.get_init()
        if init is None or init[1] != -16:
            log.warning("sound disabled: unsupported mixer format %s", init)
            return
        self.rate, _, self.channels = init
        self.enabled = True

    def play(self, tune: Tune) -> int:
        """Start playing the tune; return its length in ms (0 if muted)."""
        if not self.enabled:
            return 0
        sound = pygame.sndarray.make_sound(square_wave(tune, self.rate, self.channels))
        sound.play()
        return tune_length(tune)

    def stop(self):
        if self.enabled:
            pygame.mixer.stop()
