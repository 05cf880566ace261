"""Data structures used by the graph algorithms."""

from heapspf.structures.indexed_heap import IndexedHeap

__all__ = ["IndexedHeap"]
