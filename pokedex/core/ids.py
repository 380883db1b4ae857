from __future__ import annotations

class IdAllocator:
    """Hands out increasing integer ids; each owner keeps its own sequence."""

    def __init__(self, start: int = 1):
        self._next = start

    def allocate(self) -> int:
        value = self._next
        self._next += 1
        return value

    def reserve(self, value: int):
        """Make sure a later `allocate` never returns `value` or anything below it."""
        if value >= self._next:
            self._next = value + 1

    @property
    def peek(self) -> int:
        return self._next
