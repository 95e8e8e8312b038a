"""Small stateful containers: a booking calendar and a bounded deque."""

from __future__ import annotations

from collections import deque


class Calendar:
    """Accepts half-open ``[start, end)`` bookings that do not overlap."""

    def __init__(self) -> None:
        self._bookings: list[tuple[int, int]] = []

    def book(self, start: int, end: int) -> bool:
        """Record the booking and return True, or return False if it overlaps."""
        if any(start < taken_end and end > taken_start
               for taken_start, taken_end in self._bookings):
            return False
        self._bookings.append((start, end))
        return True


class CircularDeque:
    """A double-ended queue holding at most ``k`` values."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = k
        self._items: deque[int] = deque()

    def insert_front(self, value: int) -> bool:
        """Put ``value`` at the front; False if the deque is full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Put ``value`` at the back; False if the deque is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Drop the front value; False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Drop the back value; False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.pop()
        return True

    def front(self) -> int:
        """The front value; IndexError if the deque is empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[0]

    def rear(self) -> int:
        """The back value; IndexError if the deque is empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)