class Entity:
    """Anything that can sit on a grid cell.

    `position` is written by the Grid only; it is None while off the board.
    """

    def __init__(self, name, symbol):
        self.name = name
        self.symbol = symbol
        self.position = None

    @property
    def x(self):
        return self.position[0]

    @property
    def y(self):
        return self.position[1]

    def __str__(self):
        return f"{self.__class__.__name__}({self.name}) at {self.position}"


class Food(Entity):
    def __init__(self, name):
        super().__init__(name, "F")
