"""Piece catalog: the seven tetriminos in all four rotations, plus the pose model"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from tetris_config import WELL_WIDTH

PIECES = ["I", "J", "L", "O", "S", "T", "Z"]

Shape = Tuple[Tuple[int, ...], ...]

# Each kind has 4 rotations, each a 4x4 grid of color values (0 = empty).
TETRIS: Dict[str, Tuple[Shape, Shape, Shape, Shape]] = {
    "I": (
        ((0,0,0,0),(4,4,4,4),(0,0,0,0),(0,0,0,0)),
        ((0,4,0,0),(0,4,0,0),(0,4,0,0),(0,4,0,0)),
        ((0,0,0,0),(4,4,4,4),(0,0,0,0),(0,0,0,0)),
        ((0,4,0,0),(0,4,0,0),(0,4,0,0),(0,4,0,0)),
    ),
    "J": (
        ((7,0,0,0),(7,7,7,0),(0,0,0,0),(0,0,0,0)),
        ((0,7,7,0),(0,7,0,0),(0,7,0,0),(0,0,0,0)),
        ((0,0,0,0),(7,7,7,0),(0,0,7,0),(0,0,0,0)),
        ((0,7,0,0),(0,7,0,0),(7,7,0,0),(0,0,0,0)),
    ),
    "L": (
        ((0,0,5,0),(5,5,5,0),(0,0,0,0),(0,0,0,0)),
        ((0,5,0,0),(0,5,0,0),(0,5,5,0),(0,0,0,0)),
        ((0,0,0,0),(5,5,5,0),(5,0,0,0),(0,0,0,0)),
        ((5,5,0,0),(0,5,0,0),(0,5,0,0),(0,0,0,0)),
    ),
    "O": (
        ((0,0,0,0),(0,1,1,0),(0,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,1,0),(0,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,1,0),(0,1,1,0),(0,0,0,0)),
        ((0,0,0,0),(0,1,1,0),(0,1,1,0),(0,0,0,0)),
    ),
    "S": (
        ((0,0,0,0),(0,2,2,0),(2,2,0,0),(0,0,0,0)),
        ((0,2,0,0),(0,2,2,0),(0,0,2,0),(0,0,0,0)),
        ((0,0,0,0),(0,2,2,0),(2,2,0,0),(0,0,0,0)),
        ((0,2,0,0),(0,2,2,0),(0,0,2,0),(0,0,0,0)),
    ),
    "T": (
        ((0,6,0,0),(6,6,6,0),(0,0,0,0),(0,0,0,0)),
        ((0,6,0,0),(0,6,6,0),(0,6,0,0),(0,0,0,0)),
        ((0,0,0,0),(6,6,6,0),(0,6,0,0),(0,0,0,0)),
        ((0,6,0,0),(6,6,0,0),(0,6,0,0),(0,0,0,0)),
    ),
    "Z": (
        ((0,0,0,0),(3,3,0,0),(0,3,3,0),(0,0,0,0)),
        ((0,0,3,0),(0,3,3,0),(0,3,0,0),(0,0,0,0)),
        ((0,0,0,0),(3,3,0,0),(0,3,3,0),(0,0,0,0)),
        ((0,0,3,0),(0,3,3,0),(0,3,0,0),(0,0,0,0)),
    ),
}

SPAWN_X = WELL_WIDTH // 2 - 2


def occupied_cells(kind: str, rotation: int) -> List[Tuple[int, int, int]]:
    """Return (dx, dy, color) for every filled cell of the 4x4 box."""
    return [(dx, dy, v)
            for dy, row in enumerate(TETRIS[kind][rotation])
            for dx, v in enumerate(row) if v]


def color_of(kind: str) -> int:
    return occupied_cells(kind, 0)[0][2]


@dataclass
class Piece:
    kind: str
    rotation: int  # 0..3, clockwise steps from spawn
    x: int
    y: int

    @staticmethod
    def spawn(kind: str) -> "Piece":
        return Piece(kind, 0, SPAWN_X, 0)

    def cells(self) -> List[Tuple[int, int, int]]:
        """Occupied cells in well coordinates as (x, y, color)."""
        return [(self.x + dx, self.y + dy, v) for dx, dy, v in occupied_cells(self.kind, self.rotation)]
