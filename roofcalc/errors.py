"""Errors raised by the roof engine."""

from __future__ import annotations


class ValidationError(ValueError):
    """
    An input failed a precondition of the solver.

    `field` names what was wrong: "walls", "span", "wallLength",
    "pitchRise", "pitchRun" or "wallHeight".
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, message={self.message!r})"
