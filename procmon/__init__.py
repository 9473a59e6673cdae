"""A top-like process monitor reading process details from /proc."""

__version__ = "0.1.0"
__all__ = ["monitor", "status", "terminal"]