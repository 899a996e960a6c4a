"""Settings for the peperone command line tool."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from peperone.runtime.watch import DEFAULT_INTERVAL, MAX_INTERVAL, clamp_interval

log = logging.getLogger(__name__)

ENV_DIR = "PEPERONE_DIR"
CONFIG_NAME = "config.yaml"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def default_base_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """``$PEPERONE_DIR`` if set, otherwise ``~/.config/peperone``."""

    env = os.environ if env is None else env
    override = env.get(ENV_DIR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "peperone"


@dataclass
class Settings:
    """Resolved settings. Paths are derived from ``base_dir``."""

    base_dir: Path = field(default_factory=default_base_dir)
    tail_interval: float = DEFAULT_INTERVAL
    overwrite: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.base_dir = Path(self.base_dir).expanduser()
        try:
            interval = float(self.tail_interval)
        except (TypeError, ValueError):
            interval = math.nan
        if not math.isfinite(interval):
            log.warning("Invalid tail_interval %r; using %.1f", self.tail_interval, DEFAULT_INTERVAL)
            interval = DEFAULT_INTERVAL
        elif interval > MAX_INTERVAL:
            log.warning("tail_interval %r too large; using %.0f", self.tail_interval, MAX_INTERVAL)
        self.tail_interval = clamp_interval(interval)
        if isinstance(self.overwrite, str):
            self.overwrite = self.overwrite.strip().lower() in {"1", "true", "yes", "on"}
        else:
            self.overwrite = bool(self.overwrite)
        level = str(self.log_level or "INFO").upper()
        if level not in _LOG_LEVELS:
            log.warning("Unknown log_level %r; using INFO", self.log_level)
            level = "INFO"
        self.log_level = level

    @property
    def timers_dir(self) -> Path:
        return self.base_dir / "timers"

    @property
    def log_dir(self) -> Path:
        return self.base_dir / "logs"

    @property
    def config_path(self) -> Path:
        return self.base_dir / CONFIG_NAME

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["base_dir"] = str(self.base_dir)
        return payload

    # ------------------------------------------------------------------
    @classmethod
    def load(
        cls,
        base_dir: Optional[str | os.PathLike[str]] = None,
        *,
        env: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Resolve the base directory and merge ``config.yaml`` if present."""

        root = Path(base_dir).expanduser() if base_dir else default_base_dir(env)
        payload = _load_yaml(root / CONFIG_NAME)
        known = {f.name for f in fields(cls)} - {"base_dir"}
        ignored = sorted(set(payload) - known)
        if ignored:
            log.warning("Ignoring unknown settings in %s: %s", root / CONFIG_NAME, ", ".join(ignored))
        filtered = {k: v for k, v in payload.items() if k in known}
        return cls(base_dir=root, **filtered)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except FileNotFoundError:
        return {}
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Settings file %s unreadable (%s); using defaults", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("Settings file %s must contain a mapping; using defaults", path)
        return {}
    return {str(k): v for k, v in data.items()}


__all__ = ["Settings", "default_base_dir", "ENV_DIR", "CONFIG_NAME"]
