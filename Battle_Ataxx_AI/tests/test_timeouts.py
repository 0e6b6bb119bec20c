"""Tests for per-move timeouts and referee enforcement."""

import time

import pytest

from Battle_Ataxx_AI.Board import Board
from Battle_Ataxx_AI.Move import Move
from Battle_Ataxx_AI.engine import referee
from Battle_Ataxx_AI.engine.pieces import RED, BLUE
from Battle_Ataxx_AI.utils import timer


def test_timeout_rejected():
    b = Board()
    deadline = time.time() - 0.1
    with pytest.raises(TimeoutError):
        referee.check_move("a7-b6", b, RED, deadline)


def test_valid_move_passes():
    b = Board()
    deadline = time.time() + 1
    assert referee.check_move("a7-b6", b, RED, deadline) == Move.parse("a7-b6")
    assert b.num_moves() == 0


@pytest.mark.parametrize("text", ["a7-a4", "g7-f7", "-", "garbage"])
def test_bad_moves_rejected(text):
    with pytest.raises(ValueError):
        referee.check_move(text, Board(), RED, time.time() + 1)


def test_wrong_side_rejected():
    with pytest.raises(ValueError):
        referee.check_move("a1-a2", Board(), BLUE, time.time() + 1)


def test_no_deadline_never_expires():
    assert timer.deadline_after(None) is None
    assert not timer.expired(None)
    assert timer.expired(time.time() - 1)
    assert timer.time_remaining(timer.deadline_after(10)) > 9
