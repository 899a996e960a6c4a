"""Exceptions raised by the timer store and surfaced by the CLI."""
from __future__ import annotations

__all__ = [
    "TimerError",
    "TimerNotFoundError",
    "TimerExistsError",
    "InvalidTimerNameError",
    "TimerStorageError",
    "TimerCorruptError",
]


class TimerError(RuntimeError):
    """Base class for every error reported to the user."""


class TimerNotFoundError(TimerError):
    """Raised when operating on a timer that has no stored record."""

    def __init__(self, name: str) -> None:
        super().__init__(f"timer '{name}' not found")
        self.name = name


class TimerExistsError(TimerError):
    """Raised by ``new`` when the name is taken and overwrite is disabled."""

    def __init__(self, name: str) -> None:
        super().__init__(f"timer '{name}' already exists (use --force to restart it)")
        self.name = name


class InvalidTimerNameError(TimerError, ValueError):
    """Raised when a name cannot be used as a record file name."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"invalid timer name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class TimerStorageError(TimerError):
    """Raised when the underlying file could not be read, written or deleted."""


class TimerCorruptError(TimerStorageError):
    """Raised when a stored record exists but its timestamp is unusable."""
