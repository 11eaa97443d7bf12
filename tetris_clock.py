"""Gravity and clear-delay timers, fed by a millisecond counter from the caller"""
from typing import Optional


class Interval:
    """Fires once every `ms` milliseconds when polled every frame."""
    def __init__(self):
        self.last = 0

    def ready(self, now: int, ms: int) -> bool:
        if now - self.last >= ms:
            self.last = now
            return True
        return False

    def restart(self, now: int):
        self.last = now


class Delay:
    """Fires `ms` after the first poll, then re-arms on the next poll."""
    def __init__(self):
        self.start: Optional[int] = None

    def ready(self, now: int, ms: int) -> bool:
        if self.start is None:
            self.start = now
            return False
        if now - self.start >= ms:
            self.start = None
            return True
        return False
