from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .app import App
from .config import load_config, persist_last_selected
from .errors import BinbreakError
from .highscores import HighScoreStore, MemoryScoreStore
from .settings import make_runtime_settings

log = logging.getLogger("binbreak")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="binbreak",
        description="Read the bits, type the number before the timer runs out.",
    )
    parser.add_argument("--window", action="store_true", help="play in a pygame window instead of the terminal")
    parser.add_argument("--config", help="path to config.json")
    parser.add_argument("--scores", help="path to the high-score file")
    parser.add_argument("--no-save", action="store_true", help="keep high scores in memory only")
    parser.add_argument("--fps", type=int, help="ticks per second while a round runs")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("BINBREAK_LOG_LEVEL", "WARNING"),
        help="DEBUG, INFO, WARNING or ERROR (default: WARNING)",
    )
    parser.add_argument("--log-file", help="log file (default: binbreak.log beside the config)")
    return parser.parse_args(argv)


def configure_logging(level: str, path: str) -> None:
    # the terminal belongs to curses, so records go to a file
    handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, str(level).upper(), logging.WARNING))


def run(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    configure_logging(args.log_level, args.log_file or os.path.join(os.path.dirname(cfg["config_path"]), "binbreak.log"))
    settings = make_runtime_settings(cfg)
    if args.fps:
        settings["fps"] = max(5, min(240, int(args.fps)))

    store = MemoryScoreStore() if args.no_save else HighScoreStore(args.scores or settings["highscores_path"])
    app = App(
        store=store,
        settings=settings,
        on_mode_selected=lambda idx: persist_last_selected(idx, args.config),
    )

    use_window = args.window or settings["frontend"] == "window"
    log.info("starting (%s front end)", "window" if use_window else "terminal")
    if use_window:
        from .window import WindowFrontend

        with WindowFrontend(settings["windowed_size"]) as frontend:
            app.run(frontend)
    else:
        import curses

        from .terminal import TerminalFrontend

        os.environ.setdefault("ESCDELAY", "25")
        try:
            curses.wrapper(lambda stdscr: app.run(TerminalFrontend(stdscr)))
        except curses.error as exc:
            raise BinbreakError(f"terminal unavailable: {exc}") from exc
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except BinbreakError as exc:
        log.error("fatal: %s", exc)
        print(f"binbreak: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        log.exception("fatal I/O error")
        print(f"binbreak: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
