import argparse

import pytest

from classwork.cli import apply_overrides, build_parser, main, positive_float
from classwork.config import AppConfig


def test_positive_float():
    assert positive_float("0.5") == 0.5
    with pytest.raises(argparse.ArgumentTypeError):
        positive_float("0")
    with pytest.raises(argparse.ArgumentTypeError):
        positive_float("abc")


def test_overrides_from_flags():
    args = build_parser().parse_args(["--no-seed", "--tick", "2", "--log-level", "DEBUG", "--no-mouse"])
    cfg = apply_overrides(AppConfig(), args)
    assert cfg.seed is False
    assert cfg.tick_seconds == 2.0
    assert cfg.log_level == "DEBUG"
    assert cfg.mouse is False


def test_no_flags_keep_config():
    args = build_parser().parse_args([])
    cfg = apply_overrides(AppConfig(tick_seconds=3.0), args)
    assert cfg == AppConfig(tick_seconds=3.0)


def test_bad_config_exits_nonzero(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("tick_seconds = -1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(path)])
    assert exc.value.code != 0


class FakeTTY:
    def isatty(self):
        return True


def test_terminal_error_while_running_exits_nonzero(tmp_path, monkeypatch):
    import curses
    import sys

    from classwork import cli, tui

    def broken_ui(state, tick_seconds=1.0, mouse=True):
        raise curses.error("addnstr() returned ERR")

    monkeypatch.setattr(cli, "configure_logging", lambda *a, **k: None)
    monkeypatch.setattr(tui, "start_curses", broken_ui)
    monkeypatch.setattr(sys, "stdin", FakeTTY())
    monkeypatch.setattr(sys, "stdout", FakeTTY())
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path / "missing.toml")])
    assert exc.value.code == "classwork: terminal UI error: addnstr() returned ERR"
