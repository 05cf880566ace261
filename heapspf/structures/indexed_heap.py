"""Binary heap with a value-to-position index.

`IndexedHeap` is an array-backed binary heap (children of ``i`` live at
``2i + 1`` and ``2i + 2``) ordered by a caller-supplied predicate. Alongside
the array it keeps a dict mapping each stored value to its current position.
The index turns removal and decrease-key of an arbitrary element from an O(n)
scan into an O(1) lookup followed by an O(log n) sift.

Elements are identified by value, so stored values must be hashable and
unique within one heap. Operations that would break this raise ``ValueError``
before any state is modified.

Example:
    >>> heap = IndexedHeap.min_heap([5, 3, 8])
    >>> heap.peek()
    3
    >>> heap.replace(8, 1)
    True
    >>> heap.pop(), heap.pop()
    (1, 3)
"""

from __future__ import annotations

import operator
from typing import (
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

T = TypeVar("T", bound=Hashable)

#: ``compare(a, b)`` is True iff ``a`` belongs nearer the root than ``b``.
Compare = Callable[[T, T], bool]


class IndexedHeap(Generic[T]):
    """Priority queue supporting O(log n) update and removal by value.

    Invariants held after every public call:
      - Heap order: ``compare(child, parent)`` is False for every child.
      - Index consistency: ``indices[nodes[i]] == i`` for every valid ``i``,
        and the index holds no other keys.

    Args:
        compare: Ordering predicate; ``operator.lt`` gives a min-heap,
            ``operator.gt`` a max-heap.
        items: Optional initial elements, heapified in O(n).

    Raises:
        ValueError: If ``items`` contains duplicate values.
    """

    def __init__(self, compare: Compare, items: Iterable[T] = ()) -> None:
        self._compare = compare
        self._nodes: List[T] = []
        self._indices: Dict[T, int] = {}
        self.configure(items)

    @classmethod
    def min_heap(cls, items: Iterable[T] = ()) -> "IndexedHeap[T]":
        """Create a heap whose root is the smallest element."""
        return cls(operator.lt, items)

    @classmethod
    def max_heap(cls, items: Iterable[T] = ()) -> "IndexedHeap[T]":
        """Create a heap whose root is the largest element."""
        return cls(operator.gt, items)

    def configure(self, items: Iterable[T]) -> None:
        """Replace the contents with ``items``, heapified bottom-up.

        Sifts down from the last parent to the root, which is O(n) overall.

        Args:
            items: Elements in any order.

        Raises:
            ValueError: If ``items`` contains duplicate values. The heap keeps
                its previous contents in that case.
        """
        nodes = list(items)
        indices: Dict[T, int] = {}
        for index, value in enumerate(nodes):
            if value in indices:
                raise ValueError(f"Duplicate heap value {value!r}.")
            indices[value] = index

        self._nodes = nodes
        self._indices = indices
        for index in range(len(nodes) // 2 - 1, -1, -1):
            self._sift_down(index, len(nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __contains__(self, value: object) -> bool:
        return value in self._indices

    def __iter__(self) -> Iterator[T]:
        """Iterate over elements in array (not priority) order."""
        return iter(list(self._nodes))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._nodes!r})"

    def index_of(self, value: T) -> Optional[int]:
        """Return the array position of ``value``, or None if absent."""
        return self._indices.get(value)

    def peek(self) -> Optional[T]:
        """Return the root element without removing it, or None if empty."""
        return self._nodes[0] if self._nodes else None

    def insert(self, value: T) -> None:
        """Add ``value`` and sift it toward the root. O(log n).

        Raises:
            ValueError: If ``value`` is already in the heap.
        """
        if value in self._indices:
            raise ValueError(f"Value {value!r} is already in the heap.")
        self._nodes.append(value)
        self._indices[value] = len(self._nodes) - 1
        self._sift_up(len(self._nodes) - 1)

    def pop(self) -> Optional[T]:
        """Remove and return the root element, or None if empty. O(log n)."""
        nodes = self._nodes
        if not nodes:
            return None
        if len(nodes) == 1:
            return self.remove_last()

        root = nodes[0]
        last = nodes.pop()
        del self._indices[root]
        nodes[0] = last
        self._indices[last] = 0
        self._sift_down(0, len(nodes))
        return root

    def remove(self, value: T) -> Optional[T]:
        """Remove ``value`` wherever it sits in the heap. O(log n).

        The last element takes the vacated slot and may violate the heap
        order in either direction, so it is sifted down and then up.

        Returns:
            The removed value, or None if it was not in the heap.
        """
        index = self._indices.get(value)
        if index is None:
            return None

        last = len(self._nodes) - 1
        if index != last:
            self._swap(index, last)
            self._sift_down(index, last)
            self._sift_up(index)
        return self.remove_last()

    def replace(self, old: T, new: T) -> bool:
        """Replace ``old`` by ``new`` in place (decrease-key). O(log n).

        Only improving updates are supported: ``new`` must belong strictly
        nearer the root than ``old``.

        Args:
            old: Value currently in the heap.
            new: Value to put in its place.

        Returns:
            True if ``old`` was replaced, False if it was not in the heap.

        Raises:
            ValueError: If ``compare(new, old)`` is False, or if ``new`` is
                already stored as a different element.
        """
        index = self._indices.get(old)
        if index is None:
            return False
        if not self._compare(new, old):
            raise ValueError(
                f"Replacement {new!r} does not move ahead of {old!r} in heap order."
            )
        other = self._indices.get(new)
        if other is not None and other != index:
            raise ValueError(f"Value {new!r} is already in the heap.")

        del self._indices[old]
        self._nodes[index] = new
        self._indices[new] = index
        self._sift_up(index)
        return True

    def remove_last(self) -> Optional[T]:
        """Remove and return the element in the last array slot. O(1)."""
        if not self._nodes:
            return None
        value = self._nodes.pop()
        del self._indices[value]
        return value

    def clear(self) -> None:
        """Remove all elements."""
        self._nodes.clear()
        self._indices.clear()

    def is_valid(self) -> bool:
        """Check heap order and index consistency. O(n)."""
        nodes = self._nodes
        if len(self._indices) != len(nodes):
            return False
        for index, value in enumerate(nodes):
            if self._indices.get(value) != index:
                return False
            if index > 0 and self._compare(value, nodes[(index - 1) // 2]):
                return False
        return True

    #
    # Internal helpers
    #
    def _sift_up(self, index: int) -> None:
        nodes = self._nodes
        indices = self._indices
        child = nodes[index]
        while index > 0:
            parent = (index - 1) // 2
            if not self._compare(child, nodes[parent]):
                break
            nodes[index] = nodes[parent]
            indices[nodes[index]] = index
            index = parent
        nodes[index] = child
        indices[child] = index

    def _sift_down(self, index: int, end: int) -> None:
        """Sift ``nodes[index]`` down, ignoring slots at ``end`` and beyond."""
        nodes = self._nodes
        compare = self._compare
        while True:
            left = 2 * index + 1
            right = left + 1
            first = index
            if left < end and compare(nodes[left], nodes[first]):
                first = left
            if right < end and compare(nodes[right], nodes[first]):
                first = right
            if first == index:
                return
            self._swap(index, first)
            index = first

    def _swap(self, i: int, j: int) -> None:
        nodes = self._nodes
        nodes[i], nodes[j] = nodes[j], nodes[i]
        self._indices[nodes[i]] = i
        self._indices[nodes[j]] = j
