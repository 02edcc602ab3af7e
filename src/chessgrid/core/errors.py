"""Core exceptions."""

from __future__ import annotations


class OutOfBounds(ValueError):
    """A row or column index fell outside the 8x8 grid.

    Carries no payload: callers that need to know which coordinate failed
    must keep track of it themselves.
    """

    def __init__(self) -> None:
        super().__init__("invalid move")


InvalidMove = OutOfBounds
