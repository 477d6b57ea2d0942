import random

from foodchain.agent_base import Food
from foodchain.ai_logic import prey_ai, apex_ai, ability_food_blocked
from foodchain.animal import Animal
from foodchain.config import (
    SCORES,
    AWAITING_PLAYER_INPUT,
    RESOLVING,
    ROUND_COMPLETE,
    GAME_OVER,
)
from foodchain.errors import InvalidMoveError
from foodchain.files import load_food_chain_names, GameState
from foodchain.game_logger import GameLogger
from foodchain.grid import Grid
from foodchain.roles import Role, Era, MoveType
from foodchain.utils import is_adjacent, random_empty_position


class GameEngine:
    """Runs a game: Prey (AI) -> Predator (player) -> Apex (AI) -> end of round.

    The engine is the only writer of shared state. A new game starts
    mid-round with the prey's first move already made.
    """

    def __init__(self, grid_size, max_rounds, era, rng=None, logger=None,
                 names_loader=load_food_chain_names, outcome=None, initialize=True):
        self.rng = rng if rng is not None else random.Random()
        self.logger = logger if logger is not None else GameLogger()
        self.names_loader = names_loader
        self.outcome = outcome

        self.grid = Grid(grid_size)
        self.current_round = 0
        self.max_rounds = max_rounds
        self.era = Era(era)
        self.game_over = False
        self.phase = AWAITING_PLAYER_INPUT
        self.action_log = ""

        self.animals = []
        self.player = None
        self.apex = None
        self.prey = None

        if initialize:
            self.initialize_game()

    # ───────────────────────── setup ──────────────────────────────
    def initialize_game(self):
        apex_name, predator_name, prey_name, food_name = self.names_loader(self.era.value, self.rng)

        self.apex = Animal(apex_name, Role.APEX, self.era)
        self.player = Animal(predator_name, Role.PREDATOR, self.era)
        self.prey = Animal(prey_name, Role.PREY, self.era)
        self.animals = [self.apex, self.player, self.prey]

        for entity in (self.apex, self.player, self.prey, Food(food_name)):
            self._spawn_randomly(entity)

        self.action_log = ""
        self._log(f"GAME_START era={self.era.value} totalRounds={self.max_rounds} "
                  f"playerRole={self.player.role.value}")
        self._log("SPAWN " + "- ".join(
            f"{a.name}({a.role.value}) (x={a.x},y={a.y})"
            for a in (self.player, self.apex, self.prey)))
        self._begin_round()

    def clear_all_entities(self):
        self.grid.clear()
        self.animals = []
        self.player = None
        self.apex = None
        self.prey = None

    def add_loaded_animal(self, animal):
        self.animals.append(animal)
        if animal.role is Role.PREDATOR:
            self.player = animal
        elif animal.role is Role.APEX:
            self.apex = animal
        elif animal.role is Role.PREY:
            self.prey = animal

    # ───────────────────────── player turn ────────────────────────
    def process_player_move(self, target_x, target_y):
        """Resolve a full round from the player's target cell.

        Raises InvalidMoveError, leaving the game untouched, when the
        target is not allowed.
        """
        if self.game_over:
            raise InvalidMoveError("The game is over!")
        if self.player is None or not self.player.alive:
            raise InvalidMoveError("There is no player on the board!")
        if not self.grid.is_valid_position(target_x, target_y):
            raise InvalidMoveError("You cannot go beyond the map boundaries!")

        target = (target_x, target_y)
        move_type = self.player.classify_move(target)
        if move_type is MoveType.INVALID:
            raise InvalidMoveError("Invalid Move! (Out of range or Ability on cooldown)")

        if self._needs_apex_nearby(self.player, move_type) and not is_adjacent(self.player, self.apex):
            raise InvalidMoveError("This ability can only be used when near the Apex!")

        if ability_food_blocked(self.player, move_type, self.grid.entity_at(*target)):
            raise InvalidMoveError("Food cannot be consumed while this special ability is active!")

        self.phase = RESOLVING
        self.action_log = ""
        from_pos = self.player.position

        if move_type is MoveType.STAY:
            self._log(f"{self.player.name} stayed same location.")
        elif self._needs_apex_nearby(self.player, move_type):
            # dash targets are pre-checked, no cooldown to spend
            if self._move_actor(self.player, target):
                self._log(f"{self.player.name} used {self.player.ability_name}")
        else:
            moved = self._move_actor(self.player, target)
            if moved and move_type is MoveType.ABILITY:
                self.player.trigger_cooldown()
                self._log(f"{self.player.name} used special ability ({self.player.ability_name})!")
        self._log(self._move_record("PLAYER", self.player, from_pos))

        self._perform_ai_move(self.apex, apex_ai)
        self.end_round()

    def _needs_apex_nearby(self, animal, move_type):
        return (move_type is MoveType.ABILITY
                and animal.era is Era.PRESENT
                and animal.role is Role.PREDATOR)

    # ───────────────────────── AI turns ───────────────────────────
    def _perform_ai_move(self, actor, policy):
        if actor is None or not actor.alive:
            return

        from_pos = actor.position
        target = policy(actor, self.grid, self.rng)
        move_type = actor.classify_move(target)

        if move_type is MoveType.INVALID:
            self._log(f"{actor.name} skipped an illegal move to {target}")
            return
        if ability_food_blocked(actor, move_type, self.grid.entity_at(*target)):
            return

        moved = False
        if move_type is not MoveType.STAY:
            moved = self._move_actor(actor, target)
        self._log(self._move_record("AI", actor, from_pos))
        if moved and move_type is MoveType.ABILITY:
            actor.trigger_cooldown()
            self._log(f"{actor.name} used {actor.ability_name}")

    # ───────────────────────── movement & eating ──────────────────
    def _move_actor(self, actor, target):
        """Move, eating the occupant if allowed. Returns False on a blocked no-op."""
        occupant = self.grid.entity_at(*target)
        if occupant is not None and occupant is not actor:
            if not actor.can_eat(occupant):
                return False
            # the vacated cell is free for the victim's respawn
            self.grid.remove(occupant)
            self.grid.move(actor, *target)
            self.handle_eating(actor, occupant)
            return True
        self.grid.move(actor, *target)
        return True

    def handle_eating(self, attacker, victim):
        """Score a meal and respawn the victim elsewhere.

        Raises ValueError before touching anything when the meal is not
        allowed or no cell is left for the respawn.
        """
        if not attacker.can_eat(victim):
            raise ValueError(f"{attacker.name} cannot eat {victim.name}")
        if not isinstance(victim, (Food, Animal)):
            raise TypeError(f"unknown entity type: {type(victim).__name__}")

        eaten_at = victim.position
        exclude = () if eaten_at is None else (eaten_at,)
        if not any(pos not in exclude for pos in self.grid.empty_positions()):
            raise ValueError(f"no empty cell left to respawn {victim.name}")

        if isinstance(victim, Food):
            gain, _ = SCORES[Role.PREY]
            attacker.add_score(gain)
            self._log(f"SCORE_GAIN {attacker.name}({attacker.role.value}) gain {gain} points reason:EAT_FOOD")
        else:
            gain, loss = SCORES[attacker.role]
            reason = "APEX_EATS_ANIMAL" if attacker.role is Role.APEX else "PREDATOR_EATS_PREY"
            attacker.add_score(gain)
            self._log(f"SCORE_GAIN {attacker.name}({attacker.role.value}) gain {gain} points reason:{reason}")
            victim.add_score(-loss)
            self._log(f"SCORE_LOSS {victim.name}({victim.role.value}) loss {loss} point reason:BE_EATEN")

        self.grid.remove(victim)
        if isinstance(victim, Animal):
            victim.die()
            self._spawn_randomly(victim, exclude=exclude)
        else:
            self._spawn_randomly(Food(victim.name), exclude=exclude)
        self._log(f"{victim.name} respawns")

    def _spawn_randomly(self, entity, exclude=()):
        x, y = random_empty_position(self.grid, self.rng, exclude)
        self.grid.place(entity, x, y)
        if isinstance(entity, Animal):
            entity.respawn()

    # ───────────────────────── round bookkeeping ──────────────────
    def end_round(self):
        self.phase = ROUND_COMPLETE
        self._log(f"ROUND_END r={self.current_round}/{self.max_rounds} era={self.era.value} "
                  f"scores: player={self.player.score} apex={self.apex.score} prey={self.prey.score}")

        for animal in (self.player, self.apex, self.prey):
            if animal.alive:
                animal.tick()

        self.current_round += 1
        self._check_game_over()
        if not self.game_over:
            self._begin_round()

    def _begin_round(self):
        self._log(f"ROUND_BEGIN r={self.current_round}/{self.max_rounds} era={self.era.value} "
                  f"playerRole={self.player.role.value}")
        self._perform_ai_move(self.prey, prey_ai)
        self.phase = AWAITING_PLAYER_INPUT

    def _check_game_over(self):
        if self.current_round < self.max_rounds:
            return
        self.game_over = True
        self.phase = GAME_OVER
        winner = self.winner()
        self._log(f"GAME_OVER era={self.era.value} totalRounds={self.max_rounds} winner={winner}")

        if self.outcome is None:
            return
        if self.player_won():
            self.outcome.on_win()
        else:
            self.outcome.on_lose()

    def is_game_over(self):
        return self.game_over

    def winner(self):
        if not self.player.alive:
            return f"{self.apex.name} (Player Eliminated)"

        scores = [(a.score, a.name) for a in (self.player, self.apex, self.prey)]
        top = max(s for s, _ in scores)
        leaders = [name for s, name in scores if s == top]
        return leaders[0] if len(leaders) == 1 else "Draw"

    def player_won(self):
        """Player alive and holding the top score, alone or tied."""
        if not self.player.alive:
            return False
        return self.player.score >= max(self.apex.score, self.prey.score)

    # ───────────────────────── highlighting queries ───────────────
    def normal_move_targets(self):
        if not self._player_can_act():
            return []

        cx, cy = self.player.position
        targets = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                tx, ty = cx + dx, cy + dy
                if not self.grid.is_valid_position(tx, ty):
                    continue
                if self.player.classify_move((tx, ty)) is not MoveType.WALK:
                    continue
                if self._cell_movable_for(self.player, (tx, ty), MoveType.WALK):
                    targets.append((tx, ty))
        return targets

    def special_move_targets(self):
        if not self._player_can_act() or not self.player.ability_available():
            return []
        if self._needs_apex_nearby(self.player, MoveType.ABILITY) and not is_adjacent(self.player, self.apex):
            return []

        cx, cy = self.player.position
        reach = max(2, self.player.ability_range)
        targets = []
        for x in range(cx - reach, cx + reach + 1):
            for y in range(cy - reach, cy + reach + 1):
                if not self.grid.is_valid_position(x, y):
                    continue
                if self.player.classify_move((x, y)) is not MoveType.ABILITY:
                    continue
                if self._cell_movable_for(self.player, (x, y), MoveType.ABILITY):
                    targets.append((x, y))
        return targets

    def is_valid_target(self, x, y):
        if not self._player_can_act() or not self.grid.is_valid_position(x, y):
            return False
        if (x, y) == self.player.position:
            return True
        return (x, y) in self.normal_move_targets() or (x, y) in self.special_move_targets()

    def _player_can_act(self):
        return not self.game_over and self.player is not None and self.player.alive

    def _cell_movable_for(self, actor, target, move_type):
        occupant = self.grid.entity_at(*target)
        if occupant is None:
            return True
        if ability_food_blocked(actor, move_type, occupant):
            return False
        return actor.can_eat(occupant)

    # ───────────────────────── snapshots & logging ────────────────
    def state(self):
        records = []
        for e in self.grid.entities():
            if isinstance(e, Animal):
                records.append((e.role.value, e.name, e.x, e.y, e.score, e.cooldown))
            elif isinstance(e, Food):
                records.append(("FOOD", e.name, e.x, e.y))
            else:
                raise TypeError(f"unknown entity type: {type(e).__name__}")
        return GameState(era=self.era.value, grid_size=self.grid.size,
                         round=self.current_round, max_rounds=self.max_rounds,
                         entities=records)

    def _move_record(self, who, actor, from_pos):
        (fx, fy), (tx, ty) = from_pos, actor.position
        return (f"MOVE {who} actor={actor.name}({actor.role.value}) "
                f"from=({fx},{fy}) to=({tx},{ty})")

    def _log(self, msg):
        self.action_log += f"[{self.current_round}] {msg}\n"
        self.logger.log(msg)
