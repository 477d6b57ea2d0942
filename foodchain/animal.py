from foodchain.agent_base import Entity, Food
from foodchain.config import ABILITY_SHAPES, ABILITY_RANGE, MAX_COOLDOWN, ABILITY_NAMES
from foodchain.roles import Role, Era, MoveType


class Animal(Entity):
    """An active agent (Apex, Predator or Prey) and its movement rules."""

    def __init__(self, name, role, era, cooldown=None):
        super().__init__(name, name[0] if name else "?")
        self.role = Role(role)
        self.era = Era(era)
        self.alive = True
        self.score = 0

        # resolved once; a missing (era, role) pair fails here, not mid-game
        key = (self.era, self.role)
        self.ability_shapes = ABILITY_SHAPES[key]
        self.ability_range = ABILITY_RANGE[key]
        self.max_cooldown = MAX_COOLDOWN[key]
        self.ability_name = ABILITY_NAMES[self.role]

        self.cooldown = self.max_cooldown
        if cooldown is not None:
            self.set_cooldown(cooldown)

    @property
    def always_ready(self):
        return self.era is Era.PRESENT and self.role is Role.PREDATOR

    # -----------------------------------------------------------
    # movement rules
    # -----------------------------------------------------------
    def classify_move(self, target):
        if not self.alive or self.position is None:
            return MoveType.INVALID

        tx, ty = target
        if (tx, ty) == self.position:
            return MoveType.STAY

        dx = abs(tx - self.x)
        dy = abs(ty - self.y)
        if max(dx, dy) == 1:
            return MoveType.WALK

        if not self.ability_available():
            return MoveType.INVALID
        if (dx, dy) in self.ability_shapes:
            return MoveType.ABILITY
        return MoveType.INVALID

    def can_eat(self, target):
        if isinstance(target, Food):
            return self.role is Role.PREY
        if isinstance(target, Animal):
            if self.role is Role.APEX:
                return target.role is not Role.APEX
            if self.role is Role.PREDATOR:
                return target.role is Role.PREY
            return False
        raise TypeError(f"unknown entity type: {type(target).__name__}")

    # -----------------------------------------------------------
    # cooldown
    # -----------------------------------------------------------
    def ability_available(self):
        if self.always_ready:
            return True
        return self.cooldown == 0

    def trigger_cooldown(self):
        if self.max_cooldown <= 0:
            return
        self.cooldown = self.max_cooldown

    def tick(self):
        if self.cooldown > 0:
            self.cooldown -= 1

    def set_cooldown(self, value):
        self.cooldown = max(0, min(int(value), self.max_cooldown))

    # -----------------------------------------------------------
    # life & score
    # -----------------------------------------------------------
    def die(self):
        self.alive = False

    def respawn(self):
        self.alive = True

    def add_score(self, points):
        self.score += points
