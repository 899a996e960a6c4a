from .watch import DEFAULT_INTERVAL, WatchOutcome, watch

__all__ = ["DEFAULT_INTERVAL", "WatchOutcome", "watch"]
