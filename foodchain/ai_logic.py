from foodchain.agent_base import Food
from foodchain.animal import Animal
from foodchain.config import AI_MISSING_DISTANCE, AI_THREAT_WEIGHT, AI_FOOD_ON_CELL_BONUS
from foodchain.roles import Role, Era, MoveType
from foodchain.utils import chebyshev


# ───────────────────────── helpers ────────────────────────────────────
def ability_food_blocked(animal, move_type, target_entity):
    """Future-era prey may walk onto food but never hop onto it."""
    return (move_type is MoveType.ABILITY
            and animal.era is Era.FUTURE
            and animal.role is Role.PREY
            and isinstance(target_entity, Food))


def valid_moves(animal, grid):
    """Every cell the animal may legally move into this turn, scan order."""
    if not animal.alive or animal.position is None:
        return []

    cx, cy = animal.position
    reach = animal.ability_range if animal.ability_available() else 1

    moves = []
    for x in range(cx - reach, cx + reach + 1):
        for y in range(cy - reach, cy + reach + 1):
            if not grid.is_valid_position(x, y):
                continue
            move_type = animal.classify_move((x, y))
            if move_type not in (MoveType.WALK, MoveType.ABILITY):
                continue

            occupant = grid.entity_at(x, y)
            if occupant is None:
                moves.append((x, y))
            elif ability_food_blocked(animal, move_type, occupant):
                continue
            elif animal.can_eat(occupant):
                moves.append((x, y))
    return moves


def _coin_flip(rng):
    return rng.random() < 0.5


# ───────────────────── scripted-prey policy ───────────────────────────
def prey_ai(prey, grid, rng):
    # stay put when boxed in
    best_move = prey.position
    best_score = None

    others = [e for e in grid.entities() if e is not prey]
    threats = [e.position for e in others
               if isinstance(e, Animal) and e.alive
               and e.role in (Role.PREDATOR, Role.APEX)]
    foods = [e.position for e in others if isinstance(e, Food)]

    for move in valid_moves(prey, grid):
        d_threat = min((chebyshev(move, t) for t in threats), default=AI_MISSING_DISTANCE)
        d_food = min((chebyshev(move, f) for f in foods), default=AI_MISSING_DISTANCE)

        score = AI_THREAT_WEIGHT * d_threat - d_food
        if isinstance(grid.entity_at(*move), Food):
            score += AI_FOOD_ON_CELL_BONUS

        if best_score is None or score > best_score:
            best_score, best_move = score, move
        elif score == best_score and _coin_flip(rng):
            best_move = move

    return best_move


# ───────────────────── scripted-apex policy ───────────────────────────
def apex_ai(apex, grid, rng):
    target, best_dist = None, None
    for e in grid.entities():
        if e is apex or not isinstance(e, Animal) or not e.alive:
            continue
        if e.role not in (Role.PREDATOR, Role.PREY):
            continue
        d = chebyshev(apex.position, e.position)
        if best_dist is None or d < best_dist:
            target, best_dist = e, d

    moves = valid_moves(apex, grid)
    if target is None:
        # nothing to hunt, wander
        return rng.choice(moves) if moves else apex.position

    best_move, best_dist = apex.position, None
    for move in moves:
        d = chebyshev(move, target.position)
        if best_dist is None or d < best_dist:
            best_move, best_dist = move, d
        elif d == best_dist and _coin_flip(rng):
            best_move = move

    return best_move
