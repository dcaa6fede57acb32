"""TSC Baseline.

Save a baseline of TypeScript compiler errors and report only the errors that
are new relative to it, so strict type checking can be adopted incrementally.
"""

__version__ = "2.0.0"

__all__ = ["__version__"]
