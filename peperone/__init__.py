"""Top level package for the peperone stopwatch."""

from importlib import metadata as _metadata

try:  # pragma: no cover - metadata only available when installed
    __version__ = _metadata.version("peperone")
except _metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
    __version__ = "0.0.0"

__all__ = ["__version__"]
