"""Move validation, time control, and disqualification handling."""

from ..Move import Move
from ..utils import timer


def check_move(move_text, board, color, deadline=None):
    """
    Validate a submitted move against time, turn order, notation and legality.
    Raises ValueError/TimeoutError on invalid moves; returns the parsed Move.
    """
    if timer.expired(deadline):
        raise TimeoutError("Move exceeded allotted time")

    if board.whose_move is not color:
        raise ValueError(f"Not {color}'s turn")

    move = Move.parse(move_text)
    if not board.legal_move(move):
        if move.is_pass:
            raise ValueError("Pass is only allowed when no move is available")
        raise ValueError(f"Illegal move: {move}")

    return move
