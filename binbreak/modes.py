from __future__ import annotations

from typing import List, Optional

from .highscores import ScoreStore
from .models import BITS_TABLE, MENU_BITS, BitMode, MenuItem
from .view import MenuRow


class ModeRegistry:
    """Menu rows in display order, the highlighted row and its signedness."""

    def __init__(self, items: Optional[List[MenuItem]] = None, *, initial_index: int = 0) -> None:
        self.items = items if items is not None else [
            MenuItem(BITS_TABLE[bits].label, bits) for bits in MENU_BITS
        ]
        self.idx = initial_index if 0 <= initial_index < len(self.items) else 0

    def current(self) -> MenuItem:
        return self.items[self.idx]

    def selected_mode(self) -> BitMode:
        return self.current().mode

    def next_index(self, delta: int) -> Optional[int]:
        target = self.idx + (1 if delta > 0 else -1)
        if 0 <= target < len(self.items):
            return target
        return None

    def select_next(self) -> None:
        to_idx = self.next_index(+1)
        if to_idx is not None:
            self.idx = to_idx

    def select_previous(self) -> None:
        to_idx = self.next_index(-1)
        if to_idx is not None:
            self.idx = to_idx

    def toggle_signed(self) -> None:
        item = self.current()
        item.signed = not item.signed

    def rows(self, store: ScoreStore) -> tuple[MenuRow, ...]:
        return tuple(MenuRow(i.label, i.signed, store.load(i.mode)) for i in self.items)


__all__ = ["ModeRegistry"]
