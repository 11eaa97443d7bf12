"""
Game state engine: active piece, gravity/lock, row clearing, scoring, levels.

All commands return True when they changed the game and False when they were
rejected (blocked by the well, or the game is over). Nothing here knows about
time: the caller decides when to `tick()` and when to `compact_if_due()`.
"""
import logging
from typing import Dict, List, Optional

from tetris_config import (
    CONFIG, INITIAL_SPEED, ROWS_PER_LEVEL, SCORE_FACTORS,
    SOFT_DROP_SCORE, HARD_DROP_SCORE_FACTOR,
)
from tetris_piece import Piece, PIECES
from tetris_board import Board, new_board, collide, lock, full_rows, compact, ghost_y
from tetris_rng import Bag

log = logging.getLogger(__name__)


def gravity_interval(level: int) -> int:
    """Milliseconds between gravity ticks at this level."""
    if level <= 1:
        return INITIAL_SPEED
    return 10 + 990 // level


class Game:
    def __init__(self, seed: Optional[int] = None, avoid_sz_first: Optional[bool] = None):
        self.seed = CONFIG["BAG_SEED"] if seed is None else seed
        self.avoid_sz_first = CONFIG["AVOID_SZ_FIRST"] if avoid_sz_first is None else avoid_sz_first
        self.reset()

    def reset(self) -> None:
        """Start a new game: empty well, fresh bag, level 1."""
        self.board: Board = new_board()
        self.bag = Bag(self.seed, self.avoid_sz_first)
        self.score = 0
        self.level = 1
        self.level_rows = 0
        self.speed = INITIAL_SPEED
        self.cleared_rows: List[int] = []
        self.stats: Dict[str, int] = {t: 0 for t in PIECES}
        self.game_over = False
        self._level_up = False
        self._game_over_signal = False
        self.current = self._spawn()
        self.ghost = ghost_y(self.board, self.current)
        log.debug("new game, first piece %s", self.current.kind)

    # ---------- queries ----------
    @property
    def preview(self) -> str:
        return self.bag.preview

    @property
    def clear_pending(self) -> bool:
        return bool(self.cleared_rows)

    def take_level_up(self) -> bool:
        """Return the level-up signal once, then clear it."""
        fired, self._level_up = self._level_up, False
        return fired

    def take_game_over(self) -> bool:
        """Return the game-over signal once, then clear it."""
        fired, self._game_over_signal = self._game_over_signal, False
        return fired

    # ---------- piece state machine ----------
    def _spawn(self) -> Piece:
        kind = self.bag.next_piece()
        self.stats[kind] += 1
        return Piece.spawn(kind)

    def move(self, dx: int, dy: int) -> bool:
        if self.game_over:
            return False
        p = self.current
        if collide(self.board, p.kind, p.rotation, p.x + dx, p.y + dy):
            return False
        p.x += dx
        p.y += dy
        self.ghost = ghost_y(self.board, p)
        return True

    def move_left(self) -> bool:
        return self.move(-1, 0)

    def move_right(self) -> bool:
        return self.move(1, 0)

    def rotate(self) -> bool:
        """Rotate clockwise in place; no wall kicks."""
        if self.game_over:
            return False
        p = self.current
        r = (p.rotation + 1) % 4
        if collide(self.board, p.kind, r, p.x, p.y):
            return False
        p.rotation = r
        self.ghost = ghost_y(self.board, p)
        return True

    def soft_drop(self) -> bool:
        if not self.move(0, 1):
            return False
        self.score += SOFT_DROP_SCORE
        return True

    def hard_drop(self) -> bool:
        """Teleport to the ghost, score 2 per row descended, then force a tick."""
        if self.game_over:
            return False
        self.score += HARD_DROP_SCORE_FACTOR * (self.ghost - self.current.y)
        self.current.y = self.ghost
        self.tick()
        return True

    # ---------- update / clear ----------
    def tick(self) -> bool:
        """One gravity step: fall, or lock and spawn; then detect full rows."""
        if self.game_over:
            return False
        if self.move(0, 1):
            return True
        if self.current.y == 0:
            self.game_over = True
            self._game_over_signal = True
            log.info("game over: score %d, level %d", self.score, self.level)
            return True
        lock(self.board, self.current)
        log.debug("locked %s at (%d, %d)", self.current.kind, self.current.x, self.current.y)
        self.current = self._spawn()
        rows = full_rows(self.board)
        # rows still waiting for compaction were scored when first found
        self._score_rows(len([r for r in rows if r not in self.cleared_rows]))
        self.cleared_rows = rows
        self.ghost = ghost_y(self.board, self.current)
        return True

    def _score_rows(self, rows: int) -> None:
        if not rows:
            return
        self.score += SCORE_FACTORS[rows] * self.level
        self.level_rows += rows
        if self.level_rows >= ROWS_PER_LEVEL:
            self.level += 1
            self.level_rows -= ROWS_PER_LEVEL
            self.speed = gravity_interval(self.level)
            self._level_up = True
            log.info("level %d, gravity every %d ms", self.level, self.speed)

    def compact_if_due(self) -> bool:
        """Remove the rows marked full by the last detection."""
        if self.game_over:
            return False
        if not self.cleared_rows:
            return False
        compact(self.board, self.cleared_rows)
        self.cleared_rows = []
        self.ghost = ghost_y(self.board, self.current)
        return True
