
CONFIG = {
    "CELL_SIZE": 20,
    "CANVAS_W": 400,
    "CANVAS_H": 600,
    "BASE_DROP_MS": 500,
    "SPEEDUP": 0.95,
    "SCORE_PER_LINE": 10,
    "FAST_DROP_MS": 50,
    "SEED": None,
    "FPS": 60,
}

COLS = CONFIG["CANVAS_W"] // CONFIG["CELL_SIZE"]
ROWS = CONFIG["CANVAS_H"] // CONFIG["CELL_SIZE"]
