"""Battle_Ataxx_AI package exports."""

from .Board import Board
from .Move import Move
from .Ataxxgame import Ataxxgame
from .Player import Player, HumanPlayer, make_player
from .AIPlayer import AIPlayer
from .engine.pieces import PieceColor
from .engine.errors import GameError, IllegalMoveError, IllegalBlockError, IllegalUndoError

# Subpackages for rule support, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Move",
    "Ataxxgame",
    "Player",
    "HumanPlayer",
    "make_player",
    "AIPlayer",
    "PieceColor",
    "GameError",
    "IllegalMoveError",
    "IllegalBlockError",
    "IllegalUndoError",
    "ai",
    "engine",
    "utils",
]
