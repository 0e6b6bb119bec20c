"""Automated player backed by the minimax search."""

from .Player import Player
from .ai import search_minimax


class AIPlayer(Player):
    def __init__(self, color, depth=search_minimax.MAX_DEPTH, reporter=None):
        super().__init__(color)
        self.depth = depth
        self.reporter = reporter
        self.stats = []

    def next_move(self, board, deadline=None):
        # The search has no clock of its own; the referee enforces `deadline`.
        return search_minimax.choose_move(
            board,
            self.color,
            depth=self.depth,
            reporter=self.reporter,
            stats=self.stats,
        )
