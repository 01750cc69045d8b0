from __future__ import annotations

from .enums import Action
from .models import InputEvent


def _is_char(ev: InputEvent, chars: str) -> bool:
    return ev.action is Action.CHAR and bool(ev.char) and ev.char in chars


def is_up(ev: InputEvent) -> bool:
    return ev.action is Action.UP or _is_char(ev, "k")


def is_down(ev: InputEvent) -> bool:
    return ev.action is Action.DOWN or _is_char(ev, "j")


def is_left(ev: InputEvent) -> bool:
    return ev.action is Action.LEFT or _is_char(ev, "h")


def is_right(ev: InputEvent) -> bool:
    return ev.action is Action.RIGHT or _is_char(ev, "l")


def is_select(ev: InputEvent) -> bool:
    return ev.action is Action.CONFIRM


def is_exit(ev: InputEvent) -> bool:
    return ev.action is Action.CANCEL or _is_char(ev, "qQ")


def is_quit(ev: InputEvent) -> bool:
    """Ctrl+C or a closed window: leave the program from any scene."""
    return ev.action is Action.QUIT


__all__ = ["is_up", "is_down", "is_left", "is_right", "is_select", "is_exit", "is_quit"]
