"""Live polling of a single timer, used by ``peperone tail``."""
from __future__ import annotations

import enum
import logging
import math
import threading
from typing import Callable, Optional

from peperone.core.errors import TimerNotFoundError
from peperone.core.formatting import format_elapsed
from peperone.core.store import TimerStore

__all__ = ["WatchOutcome", "watch", "clamp_interval", "DEFAULT_INTERVAL", "MIN_INTERVAL", "MAX_INTERVAL"]

log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0
MIN_INTERVAL = 0.05
# Keeps Event.wait timeouts inside the platform time_t range.
MAX_INTERVAL = 24 * 60 * 60.0


def clamp_interval(interval: float) -> float:
    """Bound a polling interval to [MIN_INTERVAL, MAX_INTERVAL]; NaN means the default."""

    value = float(interval)
    if math.isnan(value):
        return DEFAULT_INTERVAL
    return min(MAX_INTERVAL, max(MIN_INTERVAL, value))


class WatchOutcome(enum.Enum):
    CANCELLED = "cancelled"
    REMOVED = "removed"


def watch(
    store: TimerStore,
    name: str,
    *,
    interval: float = DEFAULT_INTERVAL,
    cancel: Optional[threading.Event] = None,
    emit: Callable[[str], None] = print,
) -> WatchOutcome:
    """Print the elapsed time of ``name`` once per ``interval`` seconds.

    The first read is done before entering the loop, so a timer that never
    existed raises :class:`TimerNotFoundError`. Later reads that miss the
    record mean another process removed it and end the loop with
    ``WatchOutcome.REMOVED``. Setting ``cancel`` ends it with
    ``WatchOutcome.CANCELLED``.
    """

    interval = clamp_interval(interval)
    if cancel is None:
        cancel = threading.Event()

    timer = store.read(name)
    log.debug("Watching timer %s every %.2fs", name, interval)
    while True:
        emit(format_elapsed(timer.elapsed(store.now())))
        if cancel.wait(interval):
            log.debug("Watch of %s cancelled", name)
            return WatchOutcome.CANCELLED
        try:
            timer = store.read(name)
        except TimerNotFoundError:
            log.info("Timer %s disappeared while being watched", name)
            return WatchOutcome.REMOVED
