"""Well helpers: collide, lock, row detection, compaction, ghost"""
import logging
from typing import List

from tetris_config import WELL_WIDTH, WELL_HEIGHT, MAX_CLEARED_ROWS
from tetris_piece import Piece, occupied_cells

log = logging.getLogger(__name__)

# WELL_HEIGHT rows of WELL_WIDTH color values, row 0 at the top
Board = List[List[int]]


def new_board() -> Board:
    return [[0] * WELL_WIDTH for _ in range(WELL_HEIGHT)]


def collide(board: Board, kind: str, rotation: int, x: int, y: int) -> bool:
    """Return True if the piece at this pose leaves the well or overlaps a block."""
    for dx, dy, _ in occupied_cells(kind, rotation):
        bx, by = x + dx, y + dy
        if bx < 0 or bx >= WELL_WIDTH or by < 0 or by >= WELL_HEIGHT:
            return True
        if board[by][bx]:
            return True
    return False


def lock(board: Board, piece: Piece) -> None:
    """Write the piece's colors into the board (no collision check)."""
    for x, y, v in piece.cells():
        board[y][x] = v


def full_rows(board: Board) -> List[int]:
    """Indices of full rows, top-down, at most MAX_CLEARED_ROWS of them."""
    rows = [y for y in range(WELL_HEIGHT) if all(board[y])]
    if len(rows) > MAX_CLEARED_ROWS:
        log.warning("%d full rows found, recording only %d", len(rows), MAX_CLEARED_ROWS)
        rows = rows[:MAX_CLEARED_ROWS]
    return rows


def compact(board: Board, rows: List[int]) -> None:
    """Remove the given rows (top-down order), shifting everything above down."""
    for r in rows:
        del board[r]
        board.insert(0, [0] * WELL_WIDTH)


def ghost_y(board: Board, piece: Piece) -> int:
    """Return the lowest y the piece can fall to from where it is."""
    y = piece.y
    while not collide(board, piece.kind, piece.rotation, piece.x, y + 1):
        y += 1
    return y
