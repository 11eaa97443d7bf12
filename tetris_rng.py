"""7-bag randomizer module"""
import random
from typing import List, MutableSequence, Optional

from tetris_piece import PIECES


def shuffle(seq: MutableSequence, rng: random.Random) -> None:
    """Fisher-Yates, in place."""
    rng.shuffle(seq)


class Bag:
    """Shuffled bag of the seven kinds; `cursor` names the preview piece."""
    FIRST_FORBIDDEN = ("S", "Z")

    def __init__(self, seed: Optional[int] = None, avoid_sz_first: bool = True):
        self.rng = random.Random(seed)
        self.items: List[str] = list(PIECES)
        self.cursor = 0
        shuffle(self.items, self.rng)
        if avoid_sz_first:
            while self.items[0] in self.FIRST_FORBIDDEN:
                shuffle(self.items, self.rng)

    @property
    def preview(self) -> str:
        return self.items[self.cursor]

    def next_piece(self) -> str:
        """Take the preview kind and advance, re-shuffling when the bag runs out."""
        kind = self.items[self.cursor]
        self.cursor += 1
        if self.cursor == len(self.items):
            self.cursor = 0
            shuffle(self.items, self.rng)
        return kind
