"""curses front end: the default way to play in a terminal."""
from __future__ import annotations

import curses
from typing import Optional, Union

from .constants import (
    COLOR_BAD,
    COLOR_BITS,
    COLOR_DIM,
    COLOR_GOOD,
    COLOR_HUD,
    COLOR_TITLE,
    COLOR_WARN,
    MENU_PALETTE,
    MIN_TERM_HEIGHT,
    MIN_TERM_WIDTH,
    TIMER_BAR_CRIT_TIME,
    TIMER_BAR_WARN_TIME,
)
from .enums import Action
from .errors import FrontendError
from .models import InputEvent, Phase, Scene
from .view import View

TITLE = "B I N B R E A K"

KEY_ACTIONS = {
    curses.KEY_UP: Action.UP,
    curses.KEY_DOWN: Action.DOWN,
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
    curses.KEY_ENTER: Action.CONFIRM,
    curses.KEY_BACKSPACE: Action.BACKSPACE,
    curses.KEY_DC: Action.BACKSPACE,
}

CHAR_ACTIONS = {
    "\n": Action.CONFIRM,
    "\r": Action.CONFIRM,
    "\x1b": Action.CANCEL,
    "\x7f": Action.BACKSPACE,
    "\b": Action.BACKSPACE,
    "\x03": Action.QUIT,
}


def translate_key(key: Union[int, str]) -> Optional[InputEvent]:
    if isinstance(key, int):
        action = KEY_ACTIONS.get(key)
        return InputEvent(action) if action is not None else None
    action = CHAR_ACTIONS.get(key)
    if action is not None:
        return InputEvent(action)
    if len(key) == 1 and key.isprintable():
        return InputEvent(Action.CHAR, key)
    return None


def safe_addstr(win, y: int, x: int, text: str, attr: int = 0) -> None:
    """Write text, clipped to the window; out-of-bounds writes are dropped."""
    try:
        max_y, max_x = win.getmaxyx()
        if 0 <= y < max_y and 0 <= x < max_x:
            available = max_x - x - 1
            if available > 0:
                win.addstr(y, x, text[:available], attr)
    except curses.error:
        pass


def centered(win, y: int, text: str, attr: int = 0) -> None:
    _, max_x = win.getmaxyx()
    safe_addstr(win, y, max(0, (max_x - len(text)) // 2), text, attr)


class TerminalFrontend:
    def __init__(self, stdscr) -> None:
        self.scr = stdscr
        max_y, max_x = stdscr.getmaxyx()
        if max_y < MIN_TERM_HEIGHT or max_x < MIN_TERM_WIDTH:
            raise FrontendError(
                f"terminal too small: need {MIN_TERM_WIDTH}x{MIN_TERM_HEIGHT}, got {max_x}x{max_y}"
            )
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)
        self._init_colors()

    def _init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            bg = -1
        except curses.error:
            bg = curses.COLOR_BLACK
        curses.init_pair(COLOR_TITLE, curses.COLOR_CYAN, bg)
        curses.init_pair(COLOR_BITS, curses.COLOR_WHITE, bg)
        curses.init_pair(COLOR_HUD, curses.COLOR_BLUE, bg)
        curses.init_pair(COLOR_GOOD, curses.COLOR_GREEN, bg)
        curses.init_pair(COLOR_BAD, curses.COLOR_RED, bg)
        curses.init_pair(COLOR_WARN, curses.COLOR_YELLOW, bg)
        curses.init_pair(COLOR_DIM, curses.COLOR_WHITE, bg)

    # ---- Input ----

    def poll(self, timeout: float) -> Optional[InputEvent]:
        self.scr.timeout(max(1, int(timeout * 1000)))
        try:
            key = self.scr.get_wch()
        except KeyboardInterrupt:
            return InputEvent(Action.QUIT)
        except curses.error:
            return None
        if key == curses.KEY_RESIZE:
            self.scr.clear()
            return None
        return translate_key(key)

    # ---- Rendering ----

    def render(self, view: View) -> None:
        self.scr.erase()
        if view.scene is Scene.MENU:
            self._draw_menu(view)
        elif view.scene is Scene.PLAYING:
            self._draw_game(view)
        self.scr.refresh()

    def _draw_menu(self, view: View) -> None:
        max_y, _ = self.scr.getmaxyx()
        top = max(1, (max_y - len(view.menu) - 8) // 2)
        centered(self.scr, top, TITLE, curses.color_pair(COLOR_TITLE) | curses.A_BOLD)
        centered(self.scr, top + 1, "type the decimal value of the bits", curses.color_pair(COLOR_DIM) | curses.A_DIM)

        width = max((len(r.label) for r in view.menu), default=0)
        for i, row in enumerate(view.menu):
            marker = "»" if i == view.menu_selected else " "
            sign = "signed  " if row.signed else "unsigned"
            line = f"{marker} {row.label.upper():<{width}}  {sign}  best {row.best:>6}"
            attr = curses.color_pair(MENU_PALETTE[i % len(MENU_PALETTE)]) | curses.A_BOLD
            if i == view.menu_selected:
                attr |= curses.A_REVERSE
            centered(self.scr, top + 3 + i, line, attr)

        hint = "enter: play  up/down: mode  left/right: signed  q: quit"
        centered(self.scr, top + 4 + len(view.menu), hint, curses.color_pair(COLOR_DIM) | curses.A_DIM)
        if view.store_warning:
            centered(self.scr, top + 5 + len(view.menu), view.store_warning, curses.color_pair(COLOR_WARN))

    def _draw_game(self, view: View) -> None:
        max_y, max_x = self.scr.getmaxyx()
        hud = curses.color_pair(COLOR_HUD) | curses.A_BOLD
        safe_addstr(self.scr, 0, 1, view.mode_label.upper(), hud)
        right = f"score {view.score}  best {view.high_score}"
        safe_addstr(self.scr, 0, max(1, max_x - len(right) - 2), right, hud)
        lives = "♥" * view.lives + "·" * max(0, view.max_lives - view.lives)
        safe_addstr(self.scr, 1, 1, f"lives {lives}", curses.color_pair(COLOR_BAD))
        streak = f"streak {view.streak}"
        safe_addstr(self.scr, 1, max(1, max_x - len(streak) - 2), streak, hud)

        mid = max_y // 2 - 2
        pattern = view.grouped_pattern + (f"  {view.suffix}" if view.suffix else "")
        color = COLOR_BITS
        if view.phase is Phase.ROUND_WON:
            color = COLOR_GOOD
        elif view.phase in (Phase.ROUND_LOST, Phase.GAME_OVER):
            color = COLOR_BAD
        centered(self.scr, mid, pattern, curses.color_pair(color) | curses.A_BOLD)

        entry_attr = curses.color_pair(COLOR_BAD if view.input_rejected else COLOR_WARN) | curses.A_BOLD
        centered(self.scr, mid + 2, f"> {view.entry}_", entry_attr)

        message = view.feedback_line
        if message:
            ok = view.feedback == "correct"
            centered(self.scr, mid + 4, message, curses.color_pair(COLOR_GOOD if ok else COLOR_BAD))

        if view.phase is Phase.GAME_OVER:
            over = view.game_over_line
            centered(self.scr, mid + 6, over, curses.color_pair(COLOR_WARN) | curses.A_BOLD)
            centered(self.scr, mid + 7, "enter: again  esc: menu", curses.color_pair(COLOR_DIM) | curses.A_DIM)
        else:
            self._draw_timer(view, max_y - 2, max_x)

        if view.store_warning:
            safe_addstr(self.scr, max_y - 1, 1, view.store_warning, curses.color_pair(COLOR_WARN))

    def _draw_timer(self, view: View, y: int, max_x: int) -> None:
        ratio = view.ratio
        if ratio <= TIMER_BAR_CRIT_TIME:
            color = COLOR_BAD
        elif ratio <= TIMER_BAR_WARN_TIME:
            color = COLOR_WARN
        else:
            color = COLOR_GOOD
        label = f" {view.time_remaining:4.1f}s "
        bar_w = max(10, int(max_x * 0.66) - len(label))
        fill = int(round(bar_w * ratio))
        x = max(1, (max_x - bar_w - len(label)) // 2)
        safe_addstr(self.scr, y, x, "█" * fill, curses.color_pair(color))
        safe_addstr(self.scr, y, x + fill, "░" * (bar_w - fill), curses.color_pair(COLOR_DIM) | curses.A_DIM)
        safe_addstr(self.scr, y, x + bar_w, label, curses.color_pair(color) | curses.A_BOLD)


__all__ = ["KEY_ACTIONS", "CHAR_ACTIONS", "translate_key", "safe_addstr", "TerminalFrontend"]
