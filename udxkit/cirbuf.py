"""A sequence-indexed circular buffer that grows on slot collisions."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class CircularBuffer:
    """Holds objects with a ``seq`` attribute, indexed by ``seq & mask``.

    When two different sequence numbers map to the same slot the buffer
    doubles in size until they no longer collide.
    """

    def __init__(self, initial_size: int) -> None:
        if initial_size <= 0 or initial_size & (initial_size - 1):
            raise ValueError(f"initial size must be a power of two, got {initial_size}")
        self._size = initial_size
        self._values: list[Optional[Any]] = [None] * initial_size

    @property
    def size(self) -> int:
        """Number of slots."""
        return self._size

    @property
    def mask(self) -> int:
        """Mask applied to a sequence number to find its slot."""
        return self._size - 1

    def set(self, value: Any) -> None:
        """Store *value* under its ``seq``, growing the buffer on a collision."""
        seq = value.seq
        slot = seq & self.mask
        current = self._values[slot]

        if current is None or current.seq == seq:
            self._values[slot] = value
            return

        size = self._size
        while (current.seq & (size - 1)) == (seq & (size - 1)):
            size *= 2

        old_values = self._values
        self._size = size
        self._values = [None] * size
        self._values[seq & self.mask] = value
        for existing in old_values:
            if existing is not None:
                self._values[existing.seq & self.mask] = existing

    def get(self, seq: int) -> Optional[Any]:
        """Return the value stored under *seq*, or None."""
        value = self._values[seq & self.mask]
        if value is None or value.seq != seq:
            return None
        return value

    def remove(self, seq: int) -> Optional[Any]:
        """Remove and return the value stored under *seq*, or None."""
        slot = seq & self.mask
        value = self._values[slot]
        if value is None or value.seq != seq:
            return None
        self._values[slot] = None
        return value

    def clear(self) -> None:
        """Drop every stored value, keeping the current size."""
        self._values = [None] * self._size

    def __len__(self) -> int:
        return sum(1 for value in self._values if value is not None)

    def __iter__(self) -> Iterator[Any]:
        return (value for value in self._values if value is not None)