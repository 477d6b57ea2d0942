class InvalidMoveError(Exception):
    """Raised when the player asks for a move the rules do not allow.

    The engine state is untouched when this is raised.
    """

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


class GameFileError(OSError):
    """A name list or save file exists but cannot be used."""
