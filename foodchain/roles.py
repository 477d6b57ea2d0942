from enum import Enum


class Role(Enum):
    APEX = "Apex"
    PREDATOR = "Predator"
    PREY = "Prey"


class Era(Enum):
    PAST = "Past"
    PRESENT = "Present"
    FUTURE = "Future"


class MoveType(Enum):
    """What kind of move a target cell would be for an animal."""
    INVALID = 0
    WALK = 1
    ABILITY = 2
    STAY = 3
