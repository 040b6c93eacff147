from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO stack backed by a list; push, pop and peek all work on the list tail."""

    __slots__ = ("items",)

    def __init__(self, items: Optional[Iterable[T]] = None):
        self.items: list[T] = list(items) if items is not None else []

    def push(self, item: T) -> None:
        self.items.append(item)

    def pop(self) -> Optional[T]:
        if not self.items:
            return None
        return self.items.pop()

    def peek(self) -> Optional[T]:
        """Return the most recently pushed item without removing it."""
        if not self.items:
            return None
        return self.items[-1]

    def drain(self) -> Iterator[T]:
        """Pop every item, most recent first."""
        while self.items:
            yield self.items.pop()

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self):
        return f"Stack({self.items!r})"
