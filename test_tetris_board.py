import unittest

from tetris_config import WELL_WIDTH, WELL_HEIGHT
from tetris_piece import PIECES, TETRIS, Piece
from tetris_board import new_board, collide, lock, full_rows, compact, ghost_y


def sample_board():
    b = new_board()
    b[21] = [1] * 9 + [0]
    b[20][0] = b[20][5] = 3
    b[12][4] = 7
    return b


class CollideTests(unittest.TestCase):
    def test_matches_brute_force(self):
        board = sample_board()
        for t in PIECES:
            for r in range(4):
                for x in range(-4, WELL_WIDTH + 1):
                    for y in range(-4, WELL_HEIGHT + 1):
                        expected = False
                        for dy, row in enumerate(TETRIS[t][r]):
                            for dx, v in enumerate(row):
                                if not v:
                                    continue
                                bx, by = x + dx, y + dy
                                if not (0 <= bx < WELL_WIDTH and 0 <= by < WELL_HEIGHT) or board[by][bx]:
                                    expected = True
                        self.assertEqual(collide(board, t, r, x, y), expected, (t, r, x, y))

    def test_empty_cells_of_box_may_hang_outside(self):
        # O occupies columns 1..2 of its box, so x=-1 is still legal
        self.assertFalse(collide(new_board(), "O", 0, -1, 0))
        self.assertTrue(collide(new_board(), "O", 0, -2, 0))


class WellTests(unittest.TestCase):
    def test_lock_writes_colors(self):
        b = new_board()
        lock(b, Piece("T", 0, 0, 0))
        self.assertEqual(b[0][:3], [0, 6, 0])
        self.assertEqual(b[1][:3], [6, 6, 6])

    def test_full_rows_top_down(self):
        b = new_board()
        b[10] = [2] * WELL_WIDTH
        b[21] = [5] * WELL_WIDTH
        b[15] = [5] * (WELL_WIDTH - 1) + [0]
        self.assertEqual(full_rows(b), [10, 21])

    def test_full_rows_clamps_to_four(self):
        b = new_board()
        for y in range(16, 22):
            b[y] = [1] * WELL_WIDTH
        with self.assertLogs("tetris_board", level="WARNING"):
            self.assertEqual(full_rows(b), [16, 17, 18, 19])

    def test_compact_removes_rows_and_shifts_down(self):
        b = new_board()
        for y in range(WELL_HEIGHT):
            b[y][0] = y + 1
        b[19] = [9] * WELL_WIDTH
        b[21] = [9] * WELL_WIDTH
        before = [row[:] for row in b]
        compact(b, [19, 21])
        expected = [[0] * WELL_WIDTH, [0] * WELL_WIDTH] + [r for i, r in enumerate(before) if i not in (19, 21)]
        self.assertEqual(b, expected)
        self.assertEqual(len(b), WELL_HEIGHT)

    def test_ghost_lands_on_stack(self):
        b = new_board()
        b[12][4] = 1
        p = Piece("O", 0, 3, 0)
        g = ghost_y(b, p)
        self.assertEqual(g, 9)
        self.assertFalse(collide(b, "O", 0, 3, g))
        self.assertTrue(collide(b, "O", 0, 3, g + 1))

    def test_ghost_on_empty_well_reaches_floor(self):
        for t in PIECES:
            for r in range(4):
                p = Piece(t, r, 3, 0)
                g = ghost_y(new_board(), p)
                self.assertGreaterEqual(g, p.y)
                self.assertEqual(max(y for _, y, _ in Piece(t, r, 3, g).cells()), WELL_HEIGHT - 1)


if __name__ == "__main__":
    unittest.main()
