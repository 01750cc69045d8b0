from __future__ import annotations

import os
from typing import Optional, Tuple

import pygame

from .constants import *  # noqa: F401,F403
from .enums import Action
from .errors import FrontendError
from .input_queue import InputQueue
from .models import InputEvent, Phase, Scene
from .view import View

KEY_ACTIONS = {
    pygame.K_UP: Action.UP,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_RETURN: Action.CONFIRM,
    pygame.K_KP_ENTER: Action.CONFIRM,
    pygame.K_ESCAPE: Action.CANCEL,
    pygame.K_BACKSPACE: Action.BACKSPACE,
}


def translate_event(event: pygame.event.Event) -> Optional[InputEvent]:
    if event.type == pygame.QUIT:
        return InputEvent(Action.QUIT)
    if event.type != pygame.KEYDOWN:
        return None
    if event.key == pygame.K_c and event.mod & pygame.KMOD_CTRL:
        return InputEvent(Action.QUIT)
    action = KEY_ACTIONS.get(event.key)
    if action is not None:
        return InputEvent(action)
    ch = getattr(event, "unicode", "")
    if ch and ch.isprintable():
        return InputEvent(Action.CHAR, ch)
    return None


class TimeBar:
    def __init__(self, win: "WindowFrontend") -> None:
        self.w = win

    def draw(self, ratio: float, label: Optional[str] = None) -> None:
        win = self.w
        ratio = max(0.0, min(1.0, ratio))
        if ratio <= TIMER_BAR_CRIT_TIME:
            fill_color = TIMER_BAR_CRIT_COLOR
        elif ratio <= TIMER_BAR_WARN_TIME:
            fill_color = TIMER_BAR_WARN_COLOR
        else:
            fill_color = TIMER_BAR_FILL

        sw, sh = win.screen.get_size()
        bar_w = int(sw * TIMER_BAR_WIDTH_FACTOR)
        bar_h = int(TIMER_BAR_HEIGHT)
        bar_x = (sw - bar_w) // 2
        bar_y = sh - int(sh * TIMER_BOTTOM_MARGIN_FACTOR) - bar_h

        pygame.draw.rect(win.screen, TIMER_BAR_BG, (bar_x, bar_y, bar_w, bar_h), border_radius=TIMER_BAR_BORDER_RADIUS)
        fill_w = int(bar_w * ratio)
        if fill_w > 0:
            pygame.draw.rect(win.screen, fill_color, (bar_x, bar_y, fill_w, bar_h), border_radius=TIMER_BAR_BORDER_RADIUS)
        pygame.draw.rect(
            win.screen,
            TIMER_BAR_BORDER,
            (bar_x, bar_y, bar_w, bar_h),
            width=TIMER_BAR_BORDER_W,
            border_radius=TIMER_BAR_BORDER_RADIUS,
        )

        if label:
            surf = win.hud_font.render(label, True, INK)
            win.screen.blit(surf, (bar_x + (bar_w - surf.get_width()) // 2, bar_y - surf.get_height() - 8))


class WindowFrontend:
    """pygame window: draws the view and turns key presses into InputEvents."""

    def __init__(self, size: Tuple[int, int] = WINDOWED_DEFAULT_SIZE) -> None:
        os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "0,0")
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        except pygame.error as exc:
            raise FrontendError(f"cannot open a window: {exc}") from exc
        pygame.display.set_caption("binbreak")
        pygame.key.set_repeat(300, 40)
        self.iq = InputQueue()
        self.bits_font = pygame.font.Font(None, BITS_FONT_SIZE)
        self.hud_font = pygame.font.Font(None, HUD_FONT_SIZE)
        self.menu_font = pygame.font.Font(None, MENU_FONT_SIZE)
        self.timebar = TimeBar(self)

    def close(self) -> None:
        pygame.quit()

    def __enter__(self) -> "WindowFrontend":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ---- Input ----

    def _drain(self) -> None:
        for event in pygame.event.get():
            ev = translate_event(event)
            if ev is not None:
                self.iq.push(ev)

    def poll(self, timeout: float) -> Optional[InputEvent]:
        self._drain()
        if not len(self.iq):
            event = pygame.event.wait(max(1, int(timeout * 1000)))
            ev = translate_event(event) if event.type != pygame.NOEVENT else None
            if ev is not None:
                self.iq.push(ev)
        return self.iq.pop()

    # ---- Rendering ----

    def draw_text(self, text: str, font: pygame.font.Font, color, *, center: Tuple[int, int]) -> pygame.Rect:
        shadow = font.render(text, True, (0, 0, 0))
        surf = font.render(text, True, color)
        rect = surf.get_rect(center=center)
        self.screen.blit(shadow, rect.move(2, 2))
        self.screen.blit(surf, rect)
        return rect

    def render(self, view: View) -> None:
        self.screen.fill(BG)
        if view.scene is Scene.MENU:
            self._draw_menu(view)
        elif view.scene is Scene.PLAYING:
            self._draw_game(view)
        pygame.display.flip()

    def _draw_menu(self, view: View) -> None:
        sw, sh = self.screen.get_size()
        self.draw_text("BINBREAK", self.bits_font, ACCENT, center=(sw // 2, int(sh * 0.18)))
        line_h = self.menu_font.get_linesize() + 6
        top = int(sh * 0.34)
        for i, row in enumerate(view.menu):
            selected = i == view.menu_selected
            marker = ">" if selected else " "
            sign = "signed" if row.signed else "unsigned"
            text = f"{marker} {row.label.upper():<26} {sign:<9} best {row.best}"
            color = ACCENT if selected else INK
            self.draw_text(text, self.menu_font, color, center=(sw // 2, top + i * line_h))
        hint = "ENTER start   UP/DOWN mode   LEFT/RIGHT signed   ESC quit"
        self.draw_text(hint, self.hud_font, DIM, center=(sw // 2, sh - 40))
        if view.store_warning:
            self.draw_text(view.store_warning, self.hud_font, BAD, center=(sw // 2, sh - 70))

    def _draw_game(self, view: View) -> None:
        sw, sh = self.screen.get_size()
        hud = f"{view.mode_label}   score {view.score}   streak {view.streak}   best {view.high_score}"
        self.draw_text(hud, self.hud_font, INK, center=(sw // 2, 30))
        hearts = "o " * view.lives + "x " * max(0, view.max_lives - view.lives)
        self.draw_text(hearts.strip(), self.hud_font, BAD, center=(sw // 2, 60))

        pattern = view.grouped_pattern + (f"  {view.suffix}" if view.suffix else "")
        pat_color = INK
        if view.phase is Phase.ROUND_WON:
            pat_color = GOOD
        elif view.phase in (Phase.ROUND_LOST, Phase.GAME_OVER):
            pat_color = BAD
        self.draw_text(pattern, self.bits_font, pat_color, center=(sw // 2, int(sh * 0.38)))

        entry_color = BAD if view.input_rejected else ACCENT
        self.draw_text(f"> {view.entry}_", self.menu_font, entry_color, center=(sw // 2, int(sh * 0.56)))

        message = view.feedback_line
        if message:
            color = GOOD if view.feedback == "correct" else BAD
            self.draw_text(message, self.menu_font, color, center=(sw // 2, int(sh * 0.66)))

        if view.phase is Phase.GAME_OVER:
            over = view.game_over_line
            self.draw_text(over, self.menu_font, ACCENT, center=(sw // 2, int(sh * 0.76)))
            self.draw_text("ENTER play again   ESC menu", self.hud_font, DIM, center=(sw // 2, int(sh * 0.84)))
        else:
            self.timebar.draw(view.ratio, label=f"{view.time_remaining:0.1f}s")

        if view.store_warning:
            self.draw_text(view.store_warning, self.hud_font, BAD, center=(sw // 2, 90))


__all__ = ["KEY_ACTIONS", "translate_event", "TimeBar", "WindowFrontend"]
