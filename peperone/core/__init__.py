"""Timer persistence and elapsed time formatting."""

from .errors import (
    InvalidTimerNameError,
    TimerCorruptError,
    TimerError,
    TimerExistsError,
    TimerNotFoundError,
    TimerStorageError,
)
from .formatting import format_elapsed
from .store import DEFAULT_NAME, Timer, TimerStore, validate_name

__all__ = [
    "DEFAULT_NAME",
    "InvalidTimerNameError",
    "Timer",
    "TimerCorruptError",
    "TimerError",
    "TimerExistsError",
    "TimerNotFoundError",
    "TimerStorageError",
    "TimerStore",
    "format_elapsed",
    "validate_name",
]
