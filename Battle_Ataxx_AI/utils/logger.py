"""Lightweight logging utilities for matches and debugging."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def move_reporter(logger=log_event):
    """Build a reporter(move, color) callback that announces AI moves through `logger`."""

    def report(move, color):
        if move.is_pass:
            logger(f"{color} passes.")
        else:
            logger(f"{color} moves {move}.")

    return report
