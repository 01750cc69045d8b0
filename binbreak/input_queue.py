from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from .models import InputEvent


class InputQueue:
    def __init__(self) -> None:
        self._q: Deque[InputEvent] = deque()

    def push(self, event: InputEvent) -> None:
        self._q.append(event)

    def pop(self) -> Optional[InputEvent]:
        return self._q.popleft() if self._q else None

    def __len__(self) -> int:
        return len(self._q)


__all__ = ["InputQueue"]
