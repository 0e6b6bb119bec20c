"""Exceptions for rule violations on the board.

All of them subclass ValueError so callers that already treat a bad move as
a ValueError (the referee, the game loop) keep working unchanged.
"""


class GameError(ValueError):
    """Base class for board contract violations."""


class IllegalMoveError(GameError):
    pass


class IllegalBlockError(GameError):
    pass


class IllegalUndoError(GameError):
    pass
