"""Elapsed time rendering."""
from __future__ import annotations

__all__ = ["format_elapsed"]


def format_elapsed(seconds: int) -> str:
    """Render ``seconds`` as ``MM:SS``, or ``HH:MM:SS`` from one hour on.

    Fractions are truncated. Negative durations are rejected instead of being
    rendered with a sign.
    """

    total = int(seconds)
    if total < 0:
        raise ValueError(f"elapsed time must be >= 0, got {seconds!r}")
    minutes, secs = divmod(total, 60)
    if minutes < 60:
        return f"{minutes:02d}:{secs:02d}"
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
