"""HTTP service for TSC Baseline."""

from .. import __version__

__all__ = ["__version__"]
