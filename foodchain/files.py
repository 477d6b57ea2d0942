"""Name lists and the text save format.

Save file layout::

    MODE:Present
    GRID_SIZE:20
    ROUND:4
    MAX_ROUNDS:30
    ENTITY:Apex,Lion,3,7,2,1
    ENTITY:FOOD,Grass,5,5
"""
import logging
import os
import random
from collections import namedtuple
from pathlib import Path

from foodchain.config import (
    DATA_DIR,
    SAVE_FILE,
    DEFAULT_ERA,
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_ROUNDS,
    GAME_OVER,
)
from foodchain.errors import GameFileError

logger = logging.getLogger(__name__)

GameState = namedtuple("GameState", ["era", "grid_size", "round", "max_rounds", "entities"])


# ───────────────────────── food chain names ──────────────────────
def load_food_chain_names(era, rng=None, data_dir=DATA_DIR):
    """Pick one (apex, predator, prey, food) name set for the era."""
    path = Path(data_dir) / f"{era.lower()}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Name file not found: {path}")

    with open(path, "r", encoding="utf-8") as fp:
        chains = [line.strip() for line in fp if line.strip().startswith("Food Chain")]
    if not chains:
        raise GameFileError(f"No 'Food Chain' lines found in: {path}")

    selected = (rng or random).choice(chains)
    if ":" not in selected:
        raise GameFileError(f"Invalid format (missing ':'): {selected}")

    parts = [p.strip() for p in selected.split(":", 1)[1].split(",")]
    if len(parts) != 4 or not all(parts):
        raise GameFileError(f"Expected 4 names (Apex,Predator,Prey,Food), found: {selected}")
    return tuple(parts)


# ───────────────────────── save / load ───────────────────────────
def save_game(engine, path=SAVE_FILE):
    state = engine.state()
    for record in state.entities:
        if "," in record[1]:
            raise GameFileError(f"Cannot save a name containing a comma: {record[1]!r}")
    lines = [
        f"MODE:{state.era}",
        f"GRID_SIZE:{state.grid_size}",
        f"ROUND:{state.round}",
        f"MAX_ROUNDS:{state.max_rounds}",
    ]
    lines += ["ENTITY:" + ",".join(str(v) for v in record) for record in state.entities]

    with open(path, "w", encoding="utf-8") as fp:
        fp.write("\n".join(lines) + "\n")
    logger.info("Game saved to %s", path)
    return path


def read_state(path=SAVE_FILE):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Save file not found: {path}")

    header = {"MODE": DEFAULT_ERA, "GRID_SIZE": DEFAULT_GRID_SIZE,
              "ROUND": 0, "MAX_ROUNDS": DEFAULT_MAX_ROUNDS}
    records = []
    with open(path, "r", encoding="utf-8") as fp:
        for line in fp:
            line = line.strip()
            if line.startswith("ENTITY:"):
                records.append(line[len("ENTITY:"):])
                continue
            key, sep, value = line.partition(":")
            if not sep or key not in header:
                continue
            try:
                header[key] = value.strip() if key == "MODE" else int(value)
            except ValueError as e:
                raise GameFileError(f"Bad header line in {path}: {line}") from e

    entities = []
    for data in records:
        parts = data.split(",")
        try:
            if parts[0] == "FOOD":
                entities.append(("FOOD", parts[1], int(parts[2]), int(parts[3])))
            else:
                entities.append((parts[0], parts[1], int(parts[2]), int(parts[3]),
                                 int(parts[4]), int(parts[5])))
        except (IndexError, ValueError):
            logger.warning("Skipping bad entity line: %s", data)

    return GameState(era=header["MODE"], grid_size=header["GRID_SIZE"],
                     round=header["ROUND"], max_rounds=header["MAX_ROUNDS"],
                     entities=entities)


def load_game(path=SAVE_FILE, rng=None, game_logger=None, outcome=None):
    """Rebuild an engine from a save file without starting a new game."""
    from foodchain.agent_base import Food
    from foodchain.animal import Animal
    from foodchain.engine import GameEngine

    state = read_state(path)
    try:
        engine = GameEngine(state.grid_size, state.max_rounds, state.era,
                            rng=rng, logger=game_logger, outcome=outcome, initialize=False)
    except ValueError as e:
        raise GameFileError(f"Bad game settings in {path}: {e}") from e
    engine.current_round = state.round

    for record in state.entities:
        kind, name, x, y = record[:4]
        if not engine.grid.is_valid_position(x, y):
            logger.warning("Skipping bad entity record: %s", record)
            continue
        if not engine.grid.is_empty(x, y):
            logger.warning("Skipping entity record on a taken cell: %s", record)
            continue
        if kind == "FOOD":
            engine.grid.place(Food(name), x, y)
            continue
        try:
            animal = Animal(name, kind, state.era, cooldown=record[5])
        except (ValueError, KeyError):
            logger.warning("Skipping bad entity record: %s", record)
            continue
        if any(a.role is animal.role for a in engine.animals):
            logger.warning("Skipping duplicate %s record: %s", kind, record)
            continue
        animal.score = record[4]
        engine.grid.place(animal, x, y)
        engine.add_loaded_animal(animal)

    principals = (engine.player, engine.apex, engine.prey)
    if any(a is None or a.position is None for a in principals):
        raise GameFileError(f"Save file {path} is missing an Apex, Predator or Prey")
    if engine.current_round >= engine.max_rounds:
        engine.game_over = True
        engine.phase = GAME_OVER
    return engine


def is_save_file_available(path=SAVE_FILE):
    return os.path.exists(path) and os.path.getsize(path) > 0
