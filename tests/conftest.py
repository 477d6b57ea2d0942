"""Pytest configuration and fixtures for the food chain tests."""

import random

import pytest

from foodchain.agent_base import Food
from foodchain.animal import Animal
from foodchain.engine import GameEngine


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)

    def close(self):
        pass


class RecordingOutcome:
    def __init__(self):
        self.calls = []

    def on_win(self):
        self.calls.append("win")

    def on_lose(self):
        self.calls.append("lose")


class FixedRandom:
    """Stand-in RNG: random() always returns `value`, picks are first-in-line."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[0]

    def randrange(self, n):
        return 0


def fake_names(era, rng=None):
    return ("Lion", "Cheetah", "Gazelle", "Grass")


def stay(animal, grid, rng):
    return animal.position


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def recording_outcome():
    return RecordingOutcome()


@pytest.fixture
def still_ai(monkeypatch):
    """Freeze both AI animals in place so only the player moves."""
    monkeypatch.setattr("foodchain.engine.prey_ai", stay)
    monkeypatch.setattr("foodchain.engine.apex_ai", stay)


@pytest.fixture
def build_engine(seeded_rng, recording_logger, recording_outcome):
    """Engine with a hand-placed board instead of a random start.

    Positions left as None keep that entity off the board.
    """
    def _build(era="Present", size=10, rounds=10, player=(5, 5), apex=(9, 9),
               prey=(0, 9), food=(9, 0), player_cooldown=0, apex_cooldown=None,
               prey_cooldown=None):
        engine = GameEngine(size, rounds, era, rng=seeded_rng, logger=recording_logger,
                            names_loader=fake_names, outcome=recording_outcome,
                            initialize=False)
        setup = (
            ("Apex", "Lion", apex, apex_cooldown),
            ("Predator", "Cheetah", player, player_cooldown),
            ("Prey", "Gazelle", prey, prey_cooldown),
        )
        for role, name, pos, cooldown in setup:
            animal = Animal(name, role, era, cooldown=cooldown)
            engine.add_loaded_animal(animal)
            if pos is not None:
                engine.grid.place(animal, *pos)
        if food is not None:
            engine.grid.place(Food("Grass"), *food)
        return engine

    return _build
