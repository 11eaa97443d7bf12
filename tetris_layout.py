# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG, WELL_WIDTH, WELL_HEIGHT, HIDDEN_ROWS

VISIBLE_ROWS = WELL_HEIGHT - HIDDEN_ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    info_w: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    info_x: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    info_w = 240
    panel_w = 200

    board_w = WELL_WIDTH * cell
    board_h = VISIBLE_ROWS * cell

    total_w = margin + info_w + margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    info_x = margin
    board_x = info_x + info_w + margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        cell=cell, margin=margin, info_w=info_w, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        info_x=info_x, board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )
