"""Move values: a pass, or an origin -> destination pair on the 7x7 board."""

from dataclasses import dataclass

SIDE = 7
BORDER = 2
EXTENDED_SIDE = SIDE + 2 * BORDER

COLUMNS = "abcdefg"
ROWS = "1234567"

PASS_TEXT = "-"


def index(col, row):
    """Linear index of square `col`+`row` in the bordered grid.

    Columns and rows may lie up to two positions outside a-g / 1-7; those
    squares belong to the border.
    """
    return (ord(row) - ord("1") + BORDER) * EXTENDED_SIDE + (ord(col) - ord("a") + BORDER)


def on_board(col, row):
    return len(col) == 1 and len(row) == 1 and col in COLUMNS and row in ROWS


@dataclass(frozen=True)
class Move:
    col0: str = None
    row0: str = None
    col1: str = None
    row1: str = None

    @classmethod
    def pass_move(cls):
        return _PASS

    @classmethod
    def move(cls, col0, row0, col1, row1):
        """Return the move col0 row0 -> col1 row1, or None if it cannot be a move.

        Both squares must be playable and the destination must be one or two
        rows/columns away from the origin.
        """
        if not (on_board(col0, row0) and on_board(col1, row1)):
            return None
        distance = max(abs(ord(col1) - ord(col0)), abs(ord(row1) - ord(row0)))
        if distance not in (1, 2):
            return None
        return cls(col0, row0, col1, row1)

    @classmethod
    def parse(cls, text):
        """Parse "-", "c0r0-c1r1" or "c0r0c1r1". Raise ValueError on bad input."""
        raw = text.strip().lower()
        if raw == PASS_TEXT:
            return _PASS
        if len(raw) == 5 and raw[2] == "-":
            raw = raw[:2] + raw[3:]
        if len(raw) != 4:
            raise ValueError(f"Invalid move format: {text!r}; expected 'a1-b2' or '-'")
        mv = cls.move(raw[0], raw[1], raw[2], raw[3])
        if mv is None:
            raise ValueError(f"Not a possible move: {text!r}")
        return mv

    @property
    def is_pass(self):
        return self.col0 is None

    @property
    def distance(self):
        if self.is_pass:
            return 0
        return max(abs(ord(self.col1) - ord(self.col0)), abs(ord(self.row1) - ord(self.row0)))

    @property
    def is_extend(self):
        return self.distance == 1

    @property
    def is_jump(self):
        return self.distance == 2

    @property
    def from_index(self):
        return None if self.is_pass else index(self.col0, self.row0)

    @property
    def to_index(self):
        return None if self.is_pass else index(self.col1, self.row1)

    def __str__(self):
        if self.is_pass:
            return PASS_TEXT
        return f"{self.col0}{self.row0}-{self.col1}{self.row1}"


_PASS = Move()
