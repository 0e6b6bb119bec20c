"""Block placement: four-way symmetry, placement rules, and blocked-out ties."""

import pytest

from Battle_Ataxx_AI.Board import Board, NUM_OPEN_START
from Battle_Ataxx_AI.engine.errors import IllegalBlockError
from Battle_Ataxx_AI.engine.pieces import BLOCKED, EMPTY


def test_block_is_mirrored_four_ways():
    b = Board()
    b.set_block("c3")
    for square in ("c3", "e3", "c5", "e5"):
        assert b.get(square[0], square[1]) is BLOCKED
    assert b.total_open() == NUM_OPEN_START - 4


def test_block_on_center_lines():
    b = Board()
    b.set_block("d4")
    assert b.total_open() == NUM_OPEN_START - 1
    b.set_block("b4")
    assert b.get("f", "4") is BLOCKED
    assert b.total_open() == NUM_OPEN_START - 3
    b.set_block("d2")
    assert b.get("d", "6") is BLOCKED
    assert b.total_open() == NUM_OPEN_START - 5


@pytest.mark.parametrize("square", ["a1", "g7", "h1", "a0"])
def test_block_off_board_or_corner_rejected(square):
    b = Board()
    assert not b.legal_block(square)
    with pytest.raises(IllegalBlockError):
        b.set_block(square)


def test_block_twice_rejected():
    b = Board()
    b.set_block("b2")
    with pytest.raises(IllegalBlockError):
        b.set_block("f6")


def test_block_after_first_move_rejected():
    b = Board()
    b.make_move("a7-b6")
    assert not b.legal_block("c3")
    with pytest.raises(IllegalBlockError):
        b.set_block("c", "3")
    b.undo()
    assert b.legal_block("c", "3")


def test_blocking_every_move_is_a_tie():
    b = Board()
    squares = ["b1", "c1", "a2", "b2", "c2", "a3", "b3"]
    for sq in squares:
        b.set_block(sq)
        assert b.winner is None
    b.set_block("c3")
    assert b.winner is EMPTY
    assert b.total_open() == NUM_OPEN_START - 32


def test_blocks_notify_observer():
    seen = []
    b = Board(notifier=seen.append)
    assert len(seen) == 1
    b.set_block("c3")
    assert len(seen) == 2
    assert seen[-1] is b
