"""Static evaluation: material difference, or a signed win value on finished boards."""

from ..engine.pieces import RED, BLUE, EMPTY


def material(board):
    """Red pieces minus blue pieces."""
    return board.num_pieces(RED) - board.num_pieces(BLUE)


def static_score(board, winning_value):
    """
    Score `board` from red's point of view.
    board: Board instance
    winning_value: magnitude returned when the game is over (0 for a tie)
    """
    winner = board.winner
    if winner is RED:
        return winning_value
    if winner is BLUE:
        return -winning_value
    if winner is EMPTY:
        return 0
    return material(board)
