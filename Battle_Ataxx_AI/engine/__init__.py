"""Board rules support: piece colors, rule errors, and the referee."""

from . import errors, pieces, referee

__all__ = ["errors", "pieces", "referee"]
