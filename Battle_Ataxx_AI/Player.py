"""Player interface for human or AI controllers."""

from .utils import timer


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board, deadline=None):
        """Return the next move in notation ("a7-b6" or "-") within the time limit."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, read_line=input):
        super().__init__(color)
        self.read_line = read_line

    def next_move(self, board, deadline=None):
        """Text-input player; raises TimeoutError if the answer arrives after the deadline."""
        if timer.expired(deadline):
            raise TimeoutError("Move exceeded allotted time")
        raw = self.read_line(f"{self.color} move (e.g. 'a7-b6', '-' to pass): ").strip()
        if timer.expired(deadline):
            raise TimeoutError("Move exceeded allotted time")
        if not raw:
            raise ValueError("Empty move")
        return raw


def make_player(kind, color, depth=None, reporter=None):
    """Build a player from its configured kind: "ai" or "human"."""
    if kind == "human":
        return HumanPlayer(color)
    if kind == "ai":
        from .AIPlayer import AIPlayer

        if depth is None:
            return AIPlayer(color, reporter=reporter)
        return AIPlayer(color, depth=depth, reporter=reporter)
    raise ValueError(f"Unsupported player kind: {kind}")
