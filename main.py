# main.py
import logging
import time

import pygame

import renderer
from sound import SoundManager
from foodchain.config import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_ROUNDS,
    DEFAULT_ERA,
    MIN_GRID_SIZE,
    MIN_ROUNDS,
    SAVE_FILE,
    LOG_FILE,
)
from foodchain.engine import GameEngine
from foodchain.errors import InvalidMoveError
from foodchain.files import save_game, load_game, is_save_file_available
from foodchain.game_logger import GameLogger
from foodchain.roles import Era

# ═══════════ utilities funcs ════════════════════════════════════════════════
def ask(txt, default="y"):
    tag = "[Y/n]" if default.lower()=="y" else "[y/N]"
    ans = input(f"{txt} {tag} ").strip().lower()
    return (ans=="" and default=="y") or ans.startswith("y")

def ask_int(txt, default, minimum):
    while True:
        raw = input(f"{txt} [default: {default}] ").strip()
        try:
            value = int(raw) if raw else default
        except ValueError:
            print(" Please enter a numeric value.")
            continue
        if value < minimum:
            print(f" Must be at least {minimum}.")
            continue
        return value

def ask_era():
    eras = [e.value for e in Era]
    while True:
        raw = input(f"Era {'/'.join(eras)} [default: {DEFAULT_ERA}] ").strip().capitalize()
        if not raw:
            return DEFAULT_ERA
        if raw in eras:
            return raw
        print(f" Unknown era {raw!r}.")


# ═════════ play loop ════════════════════════════
def save(engine):
    try:
        save_game(engine, SAVE_FILE)
    except OSError as e:
        print(f"Could not save the game: {e}")
        return False
    return True


def play(engine, game_logger):
    renderer.init(engine.grid.size)
    renderer.draw(engine)

    while True:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE):
                pygame.quit()
                if not engine.is_game_over() and ask("Save before leaving?"):
                    if save(engine):
                        print("Saved. See you soon!")
                game_logger.close()
                return

            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_s and not engine.is_game_over():
                if save(engine):
                    print("Game saved successfully.")

            if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1 and not engine.is_game_over():
                cell = renderer.cell_at_pixel(*ev.pos, engine.grid.size)
                if cell is None or not engine.is_valid_target(*cell):
                    continue
                try:
                    engine.process_player_move(*cell)
                except InvalidMoveError as e:
                    print(f"Warning: {e.reason}")
                if engine.is_game_over():
                    print(f"Game Over! Winner: {engine.winner()}")

        renderer.draw(engine)
        time.sleep(0.01)


# ═════════════════ menu ════════════════════════════════════════════════
if __name__=="__main__":
    logging.basicConfig(level=logging.WARNING, format="%(name)s: %(message)s")

    print("=== FOOD CHAIN GAME ===")
    print(" 1 new game\n 2 resume saved game\n 3 exit")
    choice = input("Enter 1-3 [1] ").strip() or "1"

    game_logger = GameLogger(LOG_FILE)
    engine = None
    if choice == "1":
        size = ask_int("Grid size", DEFAULT_GRID_SIZE, MIN_GRID_SIZE)
        rounds = ask_int("Round number", DEFAULT_MAX_ROUNDS, MIN_ROUNDS)
        era = ask_era()
        try:
            engine = GameEngine(size, rounds, era, logger=game_logger, outcome=SoundManager())
        except OSError as e:
            print(f"Game cannot be started: {e}")
    elif choice == "2":
        if not is_save_file_available(SAVE_FILE):
            print("No saved game.")
        else:
            try:
                engine = load_game(SAVE_FILE, game_logger=game_logger, outcome=SoundManager())
                print("Game Loaded!")
            except OSError as e:
                print(f"Could not load {SAVE_FILE}: {e}")

    if engine is not None:
        play(engine, game_logger)
    else:
        game_logger.close()
