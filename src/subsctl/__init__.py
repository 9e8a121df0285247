"""subsctl — subscription lifecycle management."""

__version__ = "0.1.0"
