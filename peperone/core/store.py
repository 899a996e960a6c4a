"""File backed timer persistence.

Every timer lives in its own ``<name>.json`` file inside the store directory.
The payload holds nothing but the creation timestamp, so any process reading
the directory sees the state left by the last write.
"""
from __future__ import annotations

import json
import logging
import math
import os
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .errors import (
    InvalidTimerNameError,
    TimerCorruptError,
    TimerExistsError,
    TimerNotFoundError,
    TimerStorageError,
)

__all__ = ["Timer", "TimerStore", "validate_name", "DEFAULT_NAME"]

log = logging.getLogger(__name__)

DEFAULT_NAME = "main"
MAX_NAME_LENGTH = 64
RECORD_SUFFIX = ".json"

_NAME_RE = re.compile(r"[A-Za-z0-9_.-]+")


def validate_name(name: str) -> str:
    """Return ``name`` unchanged if it is usable as a record file name."""

    if not isinstance(name, str) or not name:
        raise InvalidTimerNameError(str(name), "name must not be empty")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidTimerNameError(name, f"longer than {MAX_NAME_LENGTH} characters")
    if name.startswith("."):
        raise InvalidTimerNameError(name, "must not start with '.'")
    if not _NAME_RE.fullmatch(name):
        raise InvalidTimerNameError(name, "only letters, digits, '_', '-' and '.' are allowed")
    return name


@dataclass(frozen=True)
class Timer:
    """A named record holding a single creation timestamp."""

    name: str
    created_at: float

    def elapsed(self, now: Optional[float] = None) -> int:
        """Whole seconds since creation, clamped to zero on clock skew."""

        if now is None:
            now = time.time()
        delta = now - self.created_at
        if delta < 0:
            log.warning(
                "Timer %s starts %.3fs in the future; reporting 00:00", self.name, -delta
            )
            return 0
        return int(delta)


class TimerStore:
    """Maps timer names to creation timestamps, one file per timer."""

    def __init__(
        self,
        directory: str | os.PathLike[str],
        *,
        overwrite: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._directory = Path(directory)
        self._overwrite = bool(overwrite)
        self._clock = clock

    @property
    def directory(self) -> Path:
        return self._directory

    def now(self) -> float:
        return self._clock()

    # ------------------------------------------------------------------
    def create(self, name: str, *, overwrite: Optional[bool] = None) -> Timer:
        """Start a timer called ``name`` at the current time."""

        validate_name(name)
        allow_overwrite = self._overwrite if overwrite is None else bool(overwrite)
        path = self._path(name)
        if path.exists():
            if not allow_overwrite:
                raise TimerExistsError(name)
            log.info("Restarting existing timer %s", name)

        timer = Timer(name=name, created_at=float(self._clock()))
        self._atomic_write(path, {"name": timer.name, "created_at": timer.created_at})
        log.info("Created timer %s at %.6f", name, timer.created_at)
        return timer

    def read(self, name: str) -> Timer:
        """Load the record for ``name`` from disk."""

        validate_name(name)
        path = self._path(name)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise TimerNotFoundError(name) from exc
        except OSError as exc:
            raise TimerStorageError(f"could not read timer '{name}': {exc}") from exc
        return Timer(name=name, created_at=self._parse_timestamp(name, raw))

    def list(self) -> List[str]:
        """Names of every stored timer, sorted."""

        try:
            entries = list(self._directory.iterdir())
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise TimerStorageError(f"could not list {self._directory}: {exc}") from exc
        names: List[str] = []
        for entry in entries:
            if entry.suffix != RECORD_SUFFIX or not entry.is_file():
                continue
            try:
                names.append(validate_name(entry.stem))
            except InvalidTimerNameError:
                log.debug("Skipping %s: not a usable timer name", entry)
        return sorted(names)

    def remove(self, name: str) -> None:
        """Delete the record for ``name`` permanently."""

        validate_name(name)
        path = self._path(name)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise TimerNotFoundError(name) from exc
        except OSError as exc:
            raise TimerStorageError(f"could not remove timer '{name}': {exc}") from exc
        log.info("Removed timer %s", name)

    # ------------------------------------------------------------------
    def _path(self, name: str) -> Path:
        return self._directory / f"{name}{RECORD_SUFFIX}"

    def _atomic_write(self, path: Path, payload: dict) -> None:
        tmp_path = path.with_suffix(".tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as handle:
                json.dump(payload, handle)
                handle.write("\n")
                handle.flush()
                os.fsync(handle.fileno())
            tmp_path.replace(path)
        except OSError as exc:
            try:
                tmp_path.unlink()
            except OSError:
                log.debug("Could not clean up %s", tmp_path, exc_info=True)
            raise TimerStorageError(f"could not write {path}: {exc}") from exc

    @staticmethod
    def _parse_timestamp(name: str, raw: str) -> float:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise TimerCorruptError(f"timer '{name}' is corrupted: {exc}") from exc
        value = payload.get("created_at") if isinstance(payload, dict) else None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TimerCorruptError(f"timer '{name}' is corrupted: missing timestamp")
        if not math.isfinite(value):
            raise TimerCorruptError(f"timer '{name}' is corrupted: timestamp {value!r}")
        return float(value)
