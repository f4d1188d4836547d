from __future__ import annotations
from collections import deque
from typing import Any, Deque, List


class FifoFrontier:
    """Queue of discovered-but-unexpanded entries for breadth-first search."""

    def __init__(self) -> None:
        self._q: Deque[Any] = deque()

    def push(self, item: Any) -> None:
        self._q.append(item)

    def pop(self) -> Any:
        return self._q.popleft()

    def __len__(self) -> int:
        return len(self._q)


class LifoFrontier:
    """Stack of entries for depth-first search; the last pushed is popped first."""

    def __init__(self) -> None:
        self._s: List[Any] = []

    def push(self, item: Any) -> None:
        self._s.append(item)

    def pop(self) -> Any:
        return self._s.pop()

    def __len__(self) -> int:
        return len(self._s)
