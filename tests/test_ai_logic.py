from conftest import FixedRandom

from foodchain.agent_base import Food
from foodchain.ai_logic import valid_moves, prey_ai, apex_ai, ability_food_blocked
from foodchain.animal import Animal
from foodchain.grid import Grid
from foodchain.roles import MoveType


def board(size, *placements):
    grid = Grid(size)
    for entity, pos in placements:
        grid.place(entity, *pos)
    return grid


def test_valid_moves_is_adjacent_only_while_cooling_down():
    prey = Animal("Rabbit", "Prey", "Present", cooldown=2)
    grid = board(10, (prey, (5, 5)))
    moves = valid_moves(prey, grid)
    assert len(moves) == 8
    assert all(max(abs(x - 5), abs(y - 5)) == 1 for x, y in moves)


def test_valid_moves_skip_cells_the_mover_cannot_eat():
    prey = Animal("Rabbit", "Prey", "Present", cooldown=2)
    fox = Animal("Fox", "Predator", "Present")
    grass = Food("Grass")
    grid = board(10, (prey, (5, 5)), (fox, (6, 5)), (grass, (4, 4)))
    moves = valid_moves(prey, grid)
    assert (6, 5) not in moves
    assert (4, 4) in moves
    assert (5, 5) not in moves


def test_valid_moves_include_ability_cells_when_ready():
    prey = Animal("Rabbit", "Prey", "Present", cooldown=0)
    grid = board(10, (prey, (5, 5)))
    moves = valid_moves(prey, grid)
    assert (7, 7) in moves and (5, 3) in moves
    assert (7, 6) not in moves


def test_future_prey_cannot_hop_onto_food():
    prey = Animal("Nano", "Prey", "Future", cooldown=0)
    far_food, near_food = Food("Node"), Food("Node")
    grid = board(10, (prey, (5, 5)), (far_food, (8, 5)), (near_food, (6, 6)))
    moves = valid_moves(prey, grid)
    assert (8, 5) not in moves
    assert (6, 6) in moves
    assert ability_food_blocked(prey, MoveType.ABILITY, far_food)
    assert not ability_food_blocked(prey, MoveType.WALK, near_food)


def test_prey_goes_for_adjacent_food():
    prey = Animal("Rabbit", "Prey", "Present", cooldown=3)
    grid = board(10, (prey, (5, 5)), (Food("Grass"), (6, 5)),
                 (Animal("Fox", "Predator", "Present"), (0, 0)),
                 (Animal("Lion", "Apex", "Present"), (0, 1)))
    assert prey_ai(prey, grid, FixedRandom(0.9)) == (6, 5)


def test_prey_runs_from_threat_and_breaks_ties_by_coin_flip():
    prey = Animal("Rabbit", "Prey", "Present", cooldown=3)
    grid = board(10, (prey, (5, 5)), (Animal("Fox", "Predator", "Present"), (3, 5)))

    # the three cells at x=6 tie; scan order is (6,4), (6,5), (6,6)
    assert prey_ai(prey, grid, FixedRandom(0.9)) == (6, 4)
    assert prey_ai(prey, grid, FixedRandom(0.0)) == (6, 6)


def test_boxed_in_prey_stays():
    prey = Animal("Rabbit", "Prey", "Past", cooldown=2)
    grid = board(2, (prey, (0, 0)),
                 (Animal("Lion", "Apex", "Past"), (1, 0)),
                 (Animal("Fox", "Predator", "Past"), (0, 1)),
                 (Animal("Wolf", "Predator", "Past"), (1, 1)))
    assert valid_moves(prey, grid) == []
    assert prey_ai(prey, grid, FixedRandom(0.5)) == (0, 0)


def test_apex_closes_in_on_nearest_animal():
    apex = Animal("Lion", "Apex", "Present", cooldown=3)
    prey = Animal("Gazelle", "Prey", "Present")
    grid = board(12, (apex, (5, 5)), (prey, (9, 5)),
                 (Animal("Cheetah", "Predator", "Present"), (0, 0)))
    move = apex_ai(apex, grid, FixedRandom(0.9))
    assert move[0] == 6
    assert max(abs(move[0] - 9), abs(move[1] - 5)) == 3


def test_apex_sprints_onto_prey_in_reach():
    apex = Animal("Lion", "Apex", "Present", cooldown=0)
    prey = Animal("Gazelle", "Prey", "Present")
    grid = board(10, (apex, (2, 2)), (prey, (5, 5)))
    assert apex_ai(apex, grid, FixedRandom(0.9)) == (5, 5)


def test_apex_keeps_the_first_of_equally_near_targets():
    apex = Animal("Lion", "Apex", "Present", cooldown=3)
    prey = Animal("Gazelle", "Prey", "Present")
    predator = Animal("Cheetah", "Predator", "Present")
    grid = board(12, (apex, (5, 5)), (prey, (5, 8)), (predator, (8, 5)))
    # both sit three cells away, the prey comes first in scan order
    assert apex_ai(apex, grid, FixedRandom(0.9)) == (4, 6)


def test_apex_without_targets_wanders_to_a_legal_cell():
    apex = Animal("Lion", "Apex", "Past", cooldown=2)
    grid = board(5, (apex, (0, 0)), (Food("Grass"), (1, 1)))
    move = apex_ai(apex, grid, FixedRandom(0.5))
    assert move in valid_moves(apex, grid)
    assert move != (1, 1)


def test_ai_does_not_touch_the_board():
    apex = Animal("Lion", "Apex", "Future", cooldown=0)
    prey = Animal("Nano", "Prey", "Future", cooldown=0)
    grass = Food("Node")
    grid = board(8, (apex, (1, 1)), (prey, (4, 4)), (grass, (6, 6)))
    before = [(e, e.position) for e in grid.entities()]

    prey_ai(prey, grid, FixedRandom(0.3))
    apex_ai(apex, grid, FixedRandom(0.3))

    assert [(e, e.position) for e in grid.entities()] == before
    assert apex.cooldown == 0 and prey.cooldown == 0
