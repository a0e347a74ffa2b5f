"""Growable arrays with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StepVector:
    """Array whose capacity grows by a fixed step of five slots when full."""

    GROWTH = 5

    def __init__(self, size: int = 0, fill: Any = None) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._buffer: list[Any] = [fill] * size
        self._size = size

    @property
    def capacity(self) -> int:
        """Number of slots allocated."""
        return len(self._buffer)

    def append(self, value: Any) -> None:
        """Add value at the end, growing capacity by the step when full."""
        if self._size >= self.capacity:
            self.reserve(self.capacity + self.GROWTH)
        self._buffer[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last element."""
        if self._size == 0:
            raise IndexError("pop from empty vector")
        self._size -= 1
        return self._buffer[self._size]

    def reserve(self, capacity: int) -> None:
        """Reallocate to exactly capacity slots; elements beyond it are dropped."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        kept = min(capacity, self._size)
        self._buffer = self._buffer[:kept] + [None] * (capacity - kept)
        self._size = kept

    def resize(self, size: int) -> None:
        """Set both capacity and length to size; new slots hold None."""
        self.reserve(size)
        self._size = size

    def clear(self) -> None:
        """Drop all elements and all capacity."""
        self._buffer = []
        self._size = 0

    def front(self) -> Any:
        """First element."""
        return self[0]

    def back(self) -> Any:
        """Last element."""
        return self[-1]

    def _position(self, index: int) -> int:
        position = index + self._size if index < 0 else index
        if not 0 <= position < self._size:
            raise IndexError("vector index out of range")
        return position

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Any:
        return self._buffer[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._buffer[self._position(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._buffer[: self._size])

    def __repr__(self) -> str:
        return f"StepVector({list(self)!r}, capacity={self.capacity})"


class DoublingArray:
    """Array whose capacity doubles whenever it fills up."""

    def __init__(self, capacity: int = 1, fill: Any = 0) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._buffer: list[Any] = [fill] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots allocated."""
        return len(self._buffer)

    def append(self, value: Any) -> None:
        """Add value at the end, doubling capacity when full."""
        if self._size == self.capacity:
            self._buffer = self._buffer[: self._size] + [None] * self.capacity
        self._buffer[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last element."""
        if self._size == 0:
            raise IndexError("pop from empty array")
        self._size -= 1
        return self._buffer[self._size]

    def get(self, index: int) -> Any:
        """Element at a non-negative index below the length."""
        if not 0 <= index < self._size:
            raise IndexError("array index out of range")
        return self._buffer[index]

    def front(self) -> Any:
        """First element."""
        return self.get(0)

    def back(self) -> Any:
        """Last element."""
        return self.get(self._size - 1)

    def copy(self) -> DoublingArray:
        """Independent copy with the same elements and capacity."""
        clone = type(self)(self.capacity)
        clone._buffer = list(self._buffer)
        clone._size = self._size
        return clone

    def sort(self) -> None:
        """Sort the stored elements in place."""
        self._buffer[: self._size] = sorted(self._buffer[: self._size])

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._buffer[: self._size])

    def __repr__(self) -> str:
        return f"DoublingArray({list(self)!r}, capacity={self.capacity})"