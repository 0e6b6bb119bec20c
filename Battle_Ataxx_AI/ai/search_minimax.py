"""Fixed-depth minimax with alpha-beta pruning over disposable board copies."""

import logging
import time

from . import heuristic
from . import move_selector
from ..Move import Move
from ..engine.pieces import RED, BLUE

LOGGER = logging.getLogger(__name__)

MAX_DEPTH = 4
INF = 10 ** 9
WINNING_VALUE = INF - 20  # plus remaining depth, so sooner wins score higher


def sense_of(color):
    """+1 when `color` maximizes red's score, -1 when it minimizes it."""
    return 1 if color is RED else -1


def color_of(sense):
    return RED if sense == 1 else BLUE


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, color, depth=MAX_DEPTH, stats=None):
        self.color = color
        self.depth = depth
        self.stats_list = stats

        # Internal state
        self.found_move = None
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board):
        """
        Return the best move for self.color on a copy of `board`.
        The caller's board is never touched.
        """
        self.start_time = time.time()
        self.node_counter = 0
        work = board.clone()
        score = self.search(work, self.depth, sense_of(self.color))
        move = self.found_move
        if move is None:
            move = self._fallback_move(board)
        LOGGER.debug("%s picked %s (score %d, %d nodes)", self.color, move, score, self.node_counter)

        if self.stats_list is not None:
            self._record_stats()
        return move

    def search(self, board, depth, sense, alpha=-INF, beta=INF):
        """
        Value of `board` searched `depth` plies, recording the best root move
        in self.found_move. `sense` is 1 when red is to move, -1 for blue.
        At depth 0, or on a finished board, only the static score is returned
        and no move is recorded.
        """
        self.found_move = None
        return self._minimax(board, depth, True, sense, alpha, beta)

    def _minimax(self, board, depth, save_move, sense, alpha, beta):
        self.node_counter += 1

        # WINNING_VALUE + depth favors wins found nearer the root.
        if depth == 0 or board.winner is not None:
            return heuristic.static_score(board, WINNING_VALUE + depth)

        best_score = -INF if sense == 1 else INF
        for move in move_selector.generate_moves(board, color_of(sense)):
            after = board.clone()
            after.make_move(move)
            response = self._minimax(after, depth - 1, False, -sense, alpha, beta)

            if sense == 1 and response > best_score:
                best_score = response
                alpha = max(alpha, best_score)
            elif sense == -1 and response < best_score:
                best_score = response
                beta = min(beta, best_score)
            else:
                continue

            if save_move:
                self.found_move = move
            if alpha >= beta:
                return best_score

        return best_score

    def _fallback_move(self, board):
        moves = move_selector.generate_moves(board, self.color)
        if not moves:
            raise ValueError(f"No legal moves available for {self.color}")
        return moves[0]

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": self.color,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, color, depth=MAX_DEPTH, reporter=None, stats=None):
    """
    Pick a move for `color`, which must be the side to move on `board`.

    Returns the move in notation ("a7-b6", or "-" for a pass). If `reporter`
    is given it is called as reporter(move, color) before returning.
    """
    if board.whose_move is not color:
        raise ValueError(f"It is not {color}'s turn")

    if not board.can_move(color):
        move = Move.pass_move()
    else:
        searcher = MinimaxSearcher(color=color, depth=depth, stats=stats)
        move = searcher.choose_move(board)

    if reporter is not None:
        reporter(move, color)
    return str(move)
