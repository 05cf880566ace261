"""Result models returned by the public API."""

from heapspf.model.path import Path

__all__ = ["Path"]
