"""Candidate move generation in fixed scan order (the search's tie-break order)."""

from ..Move import Move, COLUMNS, ROWS


def _window(labels, label):
    i = labels.index(label)
    return labels[max(0, i - 2): i + 3]


def generate_moves(board, color):
    """
    Return every legal move for `color` on `board`.

    Origins are scanned rows outer, columns inner; for each origin the
    destinations follow the same row-major order. If `color` has no move
    the only candidate is a pass (when legal), so the list is empty only
    when it is not `color`'s turn.
    """
    moves = []
    if board.whose_move is not color:
        return moves
    for r0 in ROWS:
        for c0 in COLUMNS:
            if board.get(c0, r0) is not color:
                continue
            for r1 in _window(ROWS, r0):
                for c1 in _window(COLUMNS, c0):
                    mv = Move.move(c0, r0, c1, r1)
                    if mv is not None and board.legal_move(mv):
                        moves.append(mv)
    if not moves and board.legal_move(Move.pass_move()):
        moves.append(Move.pass_move())
    return moves
