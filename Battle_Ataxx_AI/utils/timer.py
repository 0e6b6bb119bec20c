"""Helpers for enforcing per-move time limits. A deadline of None means no limit."""

import time


def deadline_after(seconds):
    if seconds is None or seconds <= 0:
        return None
    return time.time() + seconds


def time_remaining(deadline):
    if deadline is None:
        return float("inf")
    return deadline - time.time()


def expired(deadline):
    return time_remaining(deadline) < 0
