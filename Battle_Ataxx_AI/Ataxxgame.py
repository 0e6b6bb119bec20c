"""Game loop and turn management for Ataxx."""

from .Board import Board
from .engine import referee
from .engine.pieces import RED, BLUE, EMPTY
from .utils import timer


class Ataxxgame:
    def __init__(self, move_timeout, red_player, blue_player, blocks=(), logger=print, renderer=None):
        self.board = Board(notifier=renderer)
        self.move_timeout = move_timeout
        self.players = {RED: red_player, BLUE: blue_player}
        self.logger = logger
        self.move_index = 0
        for square in blocks:
            self.board.set_block(square)

    def play(self):
        """Run a single game. Returns RED, BLUE, or EMPTY (draw)."""
        board = self.board
        game_result = board.winner
        while game_result is None:
            color = board.whose_move
            player = self.players[color]
            deadline = timer.deadline_after(self.move_timeout)

            try:
                reply = player.next_move(board, deadline=deadline)
                move = referee.check_move(reply, board, color, deadline=deadline)
                board.make_move(move)
            except (TimeoutError, ValueError) as exc:
                self.logger(f"Disqualification: {color} - {exc}")
                game_result = color.opposite()  # opponent wins
                break

            self.logger(f"Move {self.move_index + 1}: {color} {move}")
            self.move_index += 1
            game_result = board.winner

        if game_result is EMPTY:
            self.logger("Result: Draw")
        else:
            self.logger(f"Winner: {game_result}")
        return game_result
