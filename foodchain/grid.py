# grid.py
from collections import namedtuple

import numpy as np

EMPTY = -1


class Cell(namedtuple("Cell", ["x", "y", "entity"])):
    __slots__ = ()

    @property
    def is_empty(self):
        return self.entity is None


class Grid:
    """Square occupancy map, the single owner of "what is where".

    Cells hold entity ids; the entities live once in `self._arena`.
    Entities get their `position` written only from here.
    """

    def __init__(self, size):
        if size < 1:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size = size
        self._cells = np.full((size, size), EMPTY, dtype=np.int64)
        self._arena = {}
        self._ids = {}
        self._next_id = 0

    # ───────────────────────── mutators ─────────────────────────
    def place(self, entity, x, y):
        if not self.is_valid_position(x, y):
            return
        self._detach(entity)
        occupant = self.entity_at(x, y)
        if occupant is not None:
            self._detach(occupant)

        eid = self._next_id
        self._next_id += 1
        self._arena[eid] = entity
        self._ids[id(entity)] = eid
        self._cells[x, y] = eid
        entity.position = (x, y)

    def move(self, entity, new_x, new_y):
        if not self.is_valid_position(new_x, new_y):
            return
        eid = self._ids.get(id(entity))
        if eid is None:
            self.place(entity, new_x, new_y)
            return
        occupant = self.entity_at(new_x, new_y)
        if occupant is not None and occupant is not entity:
            self._detach(occupant)

        x, y = entity.position
        self._cells[x, y] = EMPTY
        self._cells[new_x, new_y] = eid
        entity.position = (new_x, new_y)

    def remove(self, entity):
        self._detach(entity)

    def clear(self):
        for entity in list(self._arena.values()):
            entity.position = None
        self._cells.fill(EMPTY)
        self._arena.clear()
        self._ids.clear()

    def _detach(self, entity):
        eid = self._ids.pop(id(entity), None)
        if eid is None:
            return
        del self._arena[eid]
        x, y = entity.position
        self._cells[x, y] = EMPTY
        entity.position = None

    # ───────────────────────── queries ──────────────────────────
    def is_valid_position(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def entity_at(self, x, y):
        if not self.is_valid_position(x, y):
            return None
        eid = int(self._cells[x, y])
        return None if eid == EMPTY else self._arena[eid]

    def cell(self, x, y):
        if not self.is_valid_position(x, y):
            return None
        return Cell(x, y, self.entity_at(x, y))

    def is_empty(self, x, y):
        return self.is_valid_position(x, y) and self._cells[x, y] == EMPTY

    def contains(self, entity):
        return id(entity) in self._ids

    def entities(self):
        """All placed entities, x-major scan order."""
        return [self._arena[int(self._cells[x, y])]
                for x, y in np.argwhere(self._cells != EMPTY)]

    def empty_positions(self):
        return [(int(x), int(y)) for x, y in np.argwhere(self._cells == EMPTY)]

    def occupancy(self):
        """Boolean copy of the occupied cells."""
        return self._cells != EMPTY
