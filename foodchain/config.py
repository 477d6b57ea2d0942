# config.py
from pathlib import Path

from foodchain.roles import Role, Era

# ─── game setup ──────────────────────────────────────────────────────
DEFAULT_GRID_SIZE = 20
DEFAULT_MAX_ROUNDS = 30
DEFAULT_ERA = "Present"
MIN_GRID_SIZE = 10          # menu limits, the engine itself takes any size
MIN_ROUNDS = 10

# ─── files ───────────────────────────────────────────────────────────
DATA_DIR = Path(__file__).parent / "data"
SAVE_FILE = "savegame.txt"
LOG_FILE = "game_log.txt"
WIN_SOUND_PATH = "sounds/win.wav"
LOSE_SOUND_PATH = "sounds/lose.wav"

# ─── turn phases ─────────────────────────────────────────────────────
AWAITING_PLAYER_INPUT = "awaiting_player_input"
RESOLVING = "resolving"
ROUND_COMPLETE = "round_complete"
GAME_OVER = "game_over"

# ─── scoring ─────────────────────────────────────────────────────────
# attacker role -> (attacker gain, victim loss)
SCORES = {
    Role.PREY:     (3, 0),      # food only, food has no score
    Role.PREDATOR: (3, 1),
    Role.APEX:     (1, 1),
}

# ─── AI params ───────────────────────────────────────────────────────
AI_MISSING_DISTANCE = 100
AI_THREAT_WEIGHT = 3
AI_FOOD_ON_CELL_BONUS = 50


# ─── ability tables ──────────────────────────────────────────────────
def _lines(lengths):
    shapes = set()
    for k in lengths:
        shapes |= {(0, k), (k, 0), (k, k)}
    return frozenset(shapes)


def _square(radius):
    return frozenset((dx, dy) for dx in range(radius + 1) for dy in range(radius + 1))


# unordered absolute deltas (dx, dy) a special move may cover
ABILITY_SHAPES = {
    (Era.PAST, Role.APEX):        frozenset({(0, 2), (2, 0)}),
    (Era.PAST, Role.PREDATOR):    frozenset({(0, 2), (2, 0)}),
    (Era.PAST, Role.PREY):        frozenset({(1, 1), (2, 1), (1, 2)}),
    (Era.PRESENT, Role.APEX):     _lines(range(1, 4)),
    (Era.PRESENT, Role.PREDATOR): _square(2),
    (Era.PRESENT, Role.PREY):     _lines([2]),
    (Era.FUTURE, Role.APEX):      _square(3),
    (Era.FUTURE, Role.PREDATOR):  _lines([2]),
    (Era.FUTURE, Role.PREY):      _lines([3]),
}

# search window for AI and target highlighting, not used for validation
ABILITY_RANGE = {
    (Era.PAST, Role.APEX):        2,
    (Era.PAST, Role.PREDATOR):    2,
    (Era.PAST, Role.PREY):        2,
    (Era.PRESENT, Role.APEX):     3,
    (Era.PRESENT, Role.PREDATOR): 2,
    (Era.PRESENT, Role.PREY):     2,
    (Era.FUTURE, Role.APEX):      3,
    (Era.FUTURE, Role.PREDATOR):  2,
    (Era.FUTURE, Role.PREY):      3,
}

# 0 means the ability is always available
MAX_COOLDOWN = {
    (Era.PAST, Role.APEX):        2,
    (Era.PAST, Role.PREDATOR):    2,
    (Era.PAST, Role.PREY):        2,
    (Era.PRESENT, Role.APEX):     3,
    (Era.PRESENT, Role.PREDATOR): 0,
    (Era.PRESENT, Role.PREY):     3,
    (Era.FUTURE, Role.APEX):      3,
    (Era.FUTURE, Role.PREDATOR):  2,
    (Era.FUTURE, Role.PREY):      2,
}

ABILITY_NAMES = {
    Role.APEX: "Sprint",
    Role.PREDATOR: "Dash",
    Role.PREY: "Hop",
}

# ─── rendering ───────────────────────────────────────────────────────
CELL_SIZE = 36
MARGIN = 2
INFO_HEIGHT = 90
SIDE_PANEL_WIDTH = 420
