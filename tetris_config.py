
# Fixed rules of the game
WELL_WIDTH, WELL_HEIGHT = 10, 22
HIDDEN_ROWS = 2                # spawn/buffer rows at the top, not drawn
INITIAL_SPEED = 1000           # gravity interval (ms) at level 1
ROWS_PER_LEVEL = 10
SCORE_FACTORS = {1: 100, 2: 300, 3: 500, 4: 800}   # multiplied by level
SOFT_DROP_SCORE = 1
HARD_DROP_SCORE_FACTOR = 2
MAX_CLEARED_ROWS = 4

CONFIG = {
    "CELL_SIZE": 24,
    "DAS_MS": 170,
    "ARR_MS": 50,
    "CLEAR_DELAY_MS": 100,
    "AVOID_SZ_FIRST": True,
    "BAG_SEED": None,
    "SOUND": True,
    "LOG_LEVEL": "WARNING",
}
