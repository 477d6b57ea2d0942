def chebyshev(a, b):
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def is_adjacent(e1, e2):
    if e1 is None or e2 is None or e1.position is None or e2.position is None:
        return False
    return chebyshev(e1.position, e2.position) == 1


def random_empty_position(grid, rng, exclude=()):
    """Pick a random empty cell, skipping `exclude`. Raises if there is none."""
    free = {p for p in grid.empty_positions() if p not in exclude}
    if not free:
        raise ValueError("no empty cell left on the grid")
    while True:
        pos = (rng.randrange(grid.size), rng.randrange(grid.size))
        if pos in free:
            return pos
