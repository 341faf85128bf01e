"""Exception types raised by the simulator core."""

from __future__ import annotations


class MruvError(Exception):
    """Base class for simulator errors."""


class InvalidParameters(MruvError, ValueError):
    """Raised when a parameter set cannot start a run.

    A run needs eight finite numbers (`s0`, `v0` and three acceleration /
    duration pairs) and every duration must be strictly positive.
    """

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields
