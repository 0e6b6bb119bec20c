"""Move search for the automated player."""

from . import heuristic, move_selector, search_minimax

__all__ = ["heuristic", "move_selector", "search_minimax"]
