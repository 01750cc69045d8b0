"""Command line entry point with the curses layer stubbed out."""

import curses
import logging

import pytest

from binbreak import main as main_mod


@pytest.fixture(autouse=True)
def keep_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for h in [h for h in root.handlers if isinstance(h, logging.FileHandler)]:
        root.removeHandler(h)
        h.close()
    root.setLevel(level)


def test_parse_args_defaults(monkeypatch):
    monkeypatch.delenv("BINBREAK_LOG_LEVEL", raising=False)
    args = main_mod.parse_args([])
    assert not args.window and not args.no_save
    assert args.log_level == "WARNING"
    assert args.config is None


def test_runs_the_terminal_front_end(tmp_path, monkeypatch):
    seen = []
    monkeypatch.setattr(curses, "wrapper", lambda fn: seen.append(fn))
    code = main_mod.main(["--config", str(tmp_path / "config.json"), "--scores", str(tmp_path / "hs.json")])
    assert code == 0
    assert len(seen) == 1
    assert (tmp_path / "config.json").exists()


def test_missing_terminal_is_reported(tmp_path, monkeypatch, capsys):
    def broken(fn):
        raise curses.error("setupterm: could not find terminal")

    monkeypatch.setattr(curses, "wrapper", broken)
    code = main_mod.main(["--config", str(tmp_path / "config.json"), "--no-save"])
    assert code == 1
    assert "terminal unavailable" in capsys.readouterr().err


def test_ctrl_c_outside_the_loop_exits_130(tmp_path, monkeypatch):
    def interrupted(fn):
        raise KeyboardInterrupt

    monkeypatch.setattr(curses, "wrapper", interrupted)
    assert main_mod.main(["--config", str(tmp_path / "config.json"), "--no-save"]) == 130


def test_log_file_goes_beside_the_config(tmp_path, monkeypatch):
    monkeypatch.setattr(curses, "wrapper", lambda fn: None)
    main_mod.main(["--config", str(tmp_path / "config.json"), "--no-save", "--log-level", "info"])
    logging.getLogger("binbreak").info("hello")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello" in (tmp_path / "binbreak.log").read_text(encoding="utf-8")
