"""Square contents for the Ataxx board: two piece colors, empty, and blocked."""

from enum import Enum


class PieceColor(Enum):
    RED = "r"
    BLUE = "b"
    EMPTY = "-"
    BLOCKED = "X"

    @property
    def symbol(self):
        return self.value

    def is_piece(self):
        return self in (PieceColor.RED, PieceColor.BLUE)

    def opposite(self):
        """Return the other player's color. Only defined for RED and BLUE."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        raise ValueError(f"{self.name} has no opposite")

    def __str__(self):
        return self.name.capitalize()


RED = PieceColor.RED
BLUE = PieceColor.BLUE
EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED
