"""Ataxx board state: legality, moves with captures, undo, blocks, and end-of-game.

The 7x7 playable area sits inside an 11x11 grid whose two outer rings are
permanently blocked, so any square within two rows/columns of a playable
square can be read without a bounds check.
"""

from .Move import Move, SIDE, EXTENDED_SIDE, COLUMNS, ROWS, index as _index, on_board
from .engine.errors import IllegalBlockError, IllegalMoveError, IllegalUndoError
from .engine.pieces import PieceColor, RED, BLUE, EMPTY, BLOCKED

JUMP_LIMIT = 25
NUM_OPEN_START = 45
CORNERS = (("a", "1"), ("a", "7"), ("g", "1"), ("g", "7"))

# Offsets (dc, dr) of the eight squares surrounding a square.
NEIGHBORS_8 = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)
REACH_2 = tuple(
    (dc, dr) for dr in range(-2, 3) for dc in range(-2, 3) if (dc, dr) != (0, 0)
)

PLAYABLE = tuple(_index(c, r) for r in ROWS for c in COLUMNS)


def _nop(board):
    pass


class _UndoFrame:
    """Changes made by one move or pass, popped as a unit by undo."""

    __slots__ = ("move", "prior_jumps", "changes")

    def __init__(self, move, prior_jumps):
        self.move = move
        self.prior_jumps = prior_jumps
        # (linear index, color before the change), in the order applied
        self.changes = []


class Board:
    def __init__(self, notifier=None):
        self._notifier = notifier or _nop
        self.clear()

    @staticmethod
    def index(col, row):
        return _index(col, row)

    @staticmethod
    def neighbor(sq, dc, dr):
        """Index of the square `dc` columns and `dr` rows away from `sq`."""
        return sq + dc + dr * EXTENDED_SIDE

    def clear(self):
        """Reset to the starting layout: no blocks, red to move."""
        self.cells = [BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        for sq in PLAYABLE:
            self.cells[sq] = EMPTY
        self.whose_move = RED
        self.num_jumps = 0
        self.winner = None
        self._pieces = {RED: 0, BLUE: 0}
        self._history = []
        self._undo = []
        for (c, r), color in zip(CORNERS, (BLUE, RED, RED, BLUE)):
            self.cells[_index(c, r)] = color
            self._pieces[color] += 1
        self._announce()

    def clone(self):
        """Copy contents, counts, mover and winner; history and undo start empty."""
        new_board = Board.__new__(Board)
        new_board.cells = self.cells[:]
        new_board.whose_move = self.whose_move
        new_board.num_jumps = self.num_jumps
        new_board.winner = self.winner
        new_board._pieces = dict(self._pieces)
        new_board._history = []
        new_board._undo = []
        new_board._notifier = _nop
        return new_board

    @classmethod
    def from_text(cls, text, whose_move=RED):
        """Build a position from the render() format (legend lines allowed).

        Rows are listed from 7 down to 1, one symbol per column.
        """
        by_symbol = {color.symbol: color for color in PieceColor}
        rows = []
        for line in text.splitlines():
            tokens = line.split()
            if not tokens:
                continue
            if tokens[0] in ROWS and len(tokens) == SIDE + 1:
                tokens = tokens[1:]
            if tokens == list(COLUMNS):
                continue
            if len(tokens) != SIDE or any(t not in by_symbol for t in tokens):
                raise ValueError(f"Bad board row: {line!r}")
            rows.append(tokens)
        if len(rows) != SIDE:
            raise ValueError(f"Expected {SIDE} rows, got {len(rows)}")

        board = cls()
        board.whose_move = whose_move
        board._pieces = {RED: 0, BLUE: 0}
        for r, tokens in zip(reversed(ROWS), rows):
            for c, token in zip(COLUMNS, tokens):
                color = by_symbol[token]
                board.cells[_index(c, r)] = color
                if color.is_piece():
                    board._pieces[color] += 1
        board._announce()
        return board

    def set_notifier(self, notify):
        self._notifier = notify or _nop
        self._announce()

    def _announce(self):
        self._notifier(self)

    # Queries

    def get(self, col, row):
        return self.cells[_index(col, row)]

    def get_index(self, sq):
        return self.cells[sq]

    def num_pieces(self, color):
        return self._pieces[color]

    @property
    def red_pieces(self):
        return self._pieces[RED]

    @property
    def blue_pieces(self):
        return self._pieces[BLUE]

    def total_open(self):
        return sum(1 for sq in PLAYABLE if self.cells[sq] is EMPTY)

    def num_moves(self):
        """Moves and passes made since the last clear()."""
        return len(self._history)

    @property
    def all_moves(self):
        return self._history[:]

    # Legality

    def legal_move(self, move):
        if isinstance(move, str):
            try:
                move = Move.parse(move)
            except ValueError:
                return False
        if move is None:
            return False
        if move.is_pass:
            return not self.can_move(self.whose_move)
        return (
            self.cells[move.from_index] is self.whose_move
            and self.cells[move.to_index] is EMPTY
        )

    def can_move(self, color):
        """True iff `color` has a move, ignoring whose turn it is."""
        cells = self.cells
        for sq in PLAYABLE:
            if cells[sq] is not color:
                continue
            for dc, dr in REACH_2:
                if cells[sq + dc + dr * EXTENDED_SIDE] is EMPTY:
                    return True
        return False

    # Mutation

    def make_move(self, move):
        """Apply `move` (a Move or its notation). Raise IllegalMoveError if illegal."""
        if isinstance(move, str):
            try:
                move = Move.parse(move)
            except ValueError as exc:
                raise IllegalMoveError(str(exc)) from exc
        if not self.legal_move(move):
            raise IllegalMoveError(f"Illegal move: {move}")
        if move.is_pass:
            self.pass_turn()
            return

        me = self.whose_move
        opp = me.opposite()
        frame = _UndoFrame(move, self.num_jumps)
        self._undo.append(frame)

        if move.is_jump:
            self._set(frame, move.from_index, EMPTY)
            self.num_jumps += 1
        else:
            self.num_jumps = 0

        dest = move.to_index
        self._set(frame, dest, me)
        for dc, dr in NEIGHBORS_8:
            sq = self.neighbor(dest, dc, dr)
            if self.cells[sq] is opp:
                self._set(frame, sq, me)

        self.whose_move = opp
        self._history.append(move)
        self._check_game_over()
        self._announce()

    def pass_turn(self):
        """Pass; only legal when the side to move has no move."""
        if self.can_move(self.whose_move):
            raise IllegalMoveError(f"{self.whose_move} has a move and may not pass")
        self._undo.append(_UndoFrame(Move.pass_move(), self.num_jumps))
        self._history.append(Move.pass_move())
        self.whose_move = self.whose_move.opposite()
        self._announce()

    def _set(self, frame, sq, color):
        """Recorded change of one square, keeping piece counts in step."""
        prior = self.cells[sq]
        frame.changes.append((sq, prior))
        self._replace(sq, color)

    def _replace(self, sq, color):
        prior = self.cells[sq]
        if prior.is_piece():
            self._pieces[prior] -= 1
        if color.is_piece():
            self._pieces[color] += 1
        self.cells[sq] = color

    def _check_game_over(self):
        red, blue = self._pieces[RED], self._pieces[BLUE]
        if self.num_jumps >= JUMP_LIMIT or (not self.can_move(RED) and not self.can_move(BLUE)):
            if red > blue:
                self.winner = RED
            elif blue > red:
                self.winner = BLUE
            else:
                self.winner = EMPTY
        elif red == 0:
            self.winner = BLUE
        elif blue == 0:
            self.winner = RED

    def undo(self):
        """Take back the last move or pass."""
        if not self._undo:
            raise IllegalUndoError("Cannot undo: no move has been made")
        frame = self._undo.pop()
        for sq, prior in reversed(frame.changes):
            self._replace(sq, prior)
        self.num_jumps = frame.prior_jumps
        self._history.pop()
        self.whose_move = self.whose_move.opposite()
        self.winner = None
        self._announce()

    # Blocks

    def legal_block(self, col, row=None):
        if row is None:
            col, row = col[0], col[1:]
        if self._history:
            return False
        if not on_board(col, row):
            return False
        if (col, row) in CORNERS:
            return False
        return self.get(col, row) is EMPTY

    def set_block(self, col, row=None):
        """Block `col`+`row` and its reflections across the middle row and column."""
        if row is None:
            col, row = col[0], col[1:]
        if not self.legal_block(col, row):
            raise IllegalBlockError(f"Illegal block placement: {col}{row}")
        dc = abs(COLUMNS.index(col) - COLUMNS.index("d"))
        dr = abs(ROWS.index(row) - ROWS.index("4"))
        for c in {COLUMNS[3 - dc], COLUMNS[3 + dc]}:
            for r in {ROWS[3 - dr], ROWS[3 + dr]}:
                if self.get(c, r) is EMPTY:
                    self.cells[_index(c, r)] = BLOCKED
        if not self.can_move(RED) and not self.can_move(BLUE):
            self.winner = EMPTY
        self._announce()

    # Rendering / identity

    def render(self, legend=False):
        """Text grid, row 7 at the top. With `legend`, label rows and columns."""
        lines = []
        for r in reversed(ROWS):
            prefix = r if legend else ""
            lines.append(prefix + " " + "".join(" " + self.get(c, r).symbol for c in COLUMNS))
        if legend:
            lines.append("   " + " ".join(COLUMNS))
        return "\n".join(lines) + "\n"

    def __str__(self):
        return self.render(legend=False)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self):
        return hash(tuple(self.cells))

