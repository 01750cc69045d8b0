from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from . import keybinds
from .challenge import ChallengeGenerator
from .constants import DEFAULT_MENU_INDEX, FPS, IDLE_POLL_SEC
from .engine import RoundEngine
from .highscores import ScoreStore
from .models import InputEvent, Phase, Scene
from .modes import ModeRegistry
from .view import View

log = logging.getLogger(__name__)


class Frontend(Protocol):
    def poll(self, timeout: float) -> Optional[InputEvent]: ...

    def render(self, view: View) -> None: ...


class App:
    """Menu and play scenes plus the cooperative tick loop that drives them."""

    def __init__(
        self,
        *,
        store: ScoreStore,
        settings: Optional[Dict[str, Any]] = None,
        generator: Optional[ChallengeGenerator] = None,
        on_mode_selected: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.settings = settings or {}
        self.store = store
        self.generator = generator or ChallengeGenerator()
        self.on_mode_selected = on_mode_selected
        self.scene = Scene.MENU
        self.menu = ModeRegistry(initial_index=int(self.settings.get("last_selected", DEFAULT_MENU_INDEX)))
        self.engine: Optional[RoundEngine] = None
        self.tick_sec = 1.0 / max(1, int(self.settings.get("fps", FPS)))

    # ---- Scenes ----

    def start_game(self) -> None:
        mode = self.menu.selected_mode()
        if self.on_mode_selected:
            self.on_mode_selected(self.menu.idx)
        self.engine = RoundEngine(mode, store=self.store, settings=self.settings, generator=self.generator)
        self.engine.start()
        self.scene = Scene.PLAYING

    def leave_game(self) -> None:
        if self.engine is not None:
            self.engine.quit()
        self.engine = None
        self.scene = Scene.MENU

    def exit(self) -> None:
        if self.engine is not None:
            self.engine.quit()
            self.engine = None
        self.scene = Scene.EXIT

    # ---- Input ----

    def handle_event(self, ev: InputEvent) -> None:
        if keybinds.is_quit(ev):
            self.exit()
            return

        if self.scene is Scene.MENU:
            if keybinds.is_up(ev):
                self.menu.select_previous()
            elif keybinds.is_down(ev):
                self.menu.select_next()
            elif keybinds.is_left(ev) or keybinds.is_right(ev):
                self.menu.toggle_signed()
            elif keybinds.is_select(ev):
                self.start_game()
            elif keybinds.is_exit(ev):
                self.exit()

        elif self.scene is Scene.PLAYING and self.engine is not None:
            if keybinds.is_exit(ev):
                self.leave_game()
                return
            self.engine.handle(ev)

    # ---- Clock ----

    def update(self, elapsed: float) -> None:
        if self.scene is Scene.PLAYING and self.engine is not None:
            self.engine.advance(elapsed)

    def poll_timeout(self) -> float:
        if self.engine is not None and self.engine.phase in (
            Phase.CHALLENGE_ACTIVE,
            Phase.ROUND_WON,
            Phase.ROUND_LOST,
        ):
            return self.tick_sec
        return IDLE_POLL_SEC

    def view(self) -> View:
        if self.scene is Scene.PLAYING and self.engine is not None:
            return self.engine.view()
        return View(
            scene=self.scene,
            menu=self.menu.rows(self.store),
            menu_selected=self.menu.idx,
            store_warning=getattr(self.store, "warning", None),
        )

    def _round_marker(self) -> Tuple[Optional[RoundEngine], int]:
        if self.engine is None:
            return None, 0
        return self.engine, self.engine.round_serial

    def run(self, frontend: Frontend, clock: Callable[[], float] = time.monotonic) -> None:
        last = clock()
        frontend.render(self.view())
        while self.scene is not Scene.EXIT:
            ev = frontend.poll(self.poll_timeout())
            now = clock()
            elapsed, last = now - last, now
            before = self._round_marker()
            if ev is not None:
                self.handle_event(ev)
            # a round seeded by this event begins counting on the next tick
            if self._round_marker() == before:
                self.update(elapsed)
            if self.scene is Scene.EXIT:
                break
            frontend.render(self.view())
        log.info("leaving main loop")


__all__ = ["Frontend", "App"]
