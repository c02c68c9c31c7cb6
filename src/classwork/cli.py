"""classwork command-line entry point."""

import argparse
import curses
import logging
import os
import sys
from datetime import timedelta
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from . import __version__
from .app import initial_state
from .config import LOG_LEVELS, AppConfig, ConfigError, load_config
from .models import DEFAULT_CONFIG, LOG_FILE
from .store import ItemStore, seeded_store

LOGGER = logging.getLogger(__name__)


def positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return value


def configure_logging(level: str = "INFO", log_file: str = LOG_FILE) -> None:
    """Log to a rotating file; the terminal belongs to curses."""
    os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[handler],
    )
    logging.info("classwork v%s starting", __version__)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.no_seed:
        config.seed = False
    if args.tick is not None:
        config.tick_seconds = args.tick
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.no_mouse:
        config.mouse = False
    return config


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="classwork",
        description="Terminal organizer for English-class assignments, reading, notes and study timers.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG,
        help=f"Path to config file (default: {DEFAULT_CONFIG})",
    )
    p.add_argument("--no-seed", action="store_true", help="Start with empty lists")
    p.add_argument("--no-mouse", action="store_true", help="Ignore mouse clicks on the tab bar")
    p.add_argument("--tick", type=positive_float, help="Seconds between timer ticks")
    p.add_argument("--log-level", choices=LOG_LEVELS, help="Log level for the log file")
    p.add_argument("--log-file", default=LOG_FILE, help=f"Log file (default: {LOG_FILE})")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point. Launches the TUI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except ConfigError as exc:
        sys.exit(f"classwork: {exc}")

    try:
        configure_logging(config.log_level, args.log_file)
    except OSError as exc:
        sys.exit(f"classwork: cannot open log file {args.log_file}: {exc}")

    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        LOGGER.error("Not attached to a terminal")
        sys.exit("classwork: needs an interactive terminal")

    store = seeded_store() if config.seed else ItemStore()
    state = initial_state(store, tick_unit=timedelta(seconds=config.tick_seconds))

    from .tui import start_curses

    try:
        start_curses(state, tick_seconds=config.tick_seconds, mouse=config.mouse)
    except curses.error as exc:
        LOGGER.exception("Terminal UI failed")
        sys.exit(f"classwork: terminal UI error: {exc}")
    except KeyboardInterrupt:
        LOGGER.info("Interrupted")
    LOGGER.info("classwork exiting")


if __name__ == "__main__":
    main()
