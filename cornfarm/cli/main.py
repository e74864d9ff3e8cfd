#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""CLI entrypoint: corn [command] [arg1] [arg2]."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Iterable, Optional

from rich.console import Console
from rich.logging import RichHandler

from cornfarm.channels import Channel, ConsoleChannel, Severity
from cornfarm.commands import get_commands
from cornfarm.config import resolve_config
from cornfarm.engine import CornGame
from cornfarm.errors import CornError
from cornfarm.state.store import StateStore
from cornfarm.version import project_version


def _epilog() -> str:
    rows = [f"  {c['usage']:<42} {c['desc']}" for c in get_commands()]
    return "commands:\n" + "\n".join(rows)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="corn",
        description="Idle corn farming, one command at a time.",
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("command", nargs="?", help="Command to run (default: show)")
    p.add_argument("args", nargs="*", help="Command arguments")
    p.add_argument("--save-dir", default=None, help="Directory holding save.txt (default: ~/corn)")
    p.add_argument("--config", default=None, help="Path to settings.ini")
    p.add_argument("--json", action="store_true", help="show: print the state as JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {project_version()}")
    return p


def main(argv: Optional[Iterable[str]] = None, channel: Optional[Channel] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    _setup_logging(args.verbose)

    cfg = resolve_config(save_dir=args.save_dir, config_path=args.config)
    channel = channel or ConsoleChannel()
    game = CornGame(StateStore(cfg.save_path), channel)

    command = [args.command] + list(args.args) if args.command else []

    if args.json and (not command or command[0] == "show"):
        try:
            state = game.peek()
        except CornError as exc:
            channel.emit(str(exc), Severity.ERROR)
            return 1
        channel.emit(json.dumps(state.snapshot(), indent=2))
        return 0

    return 0 if game.run_command(command) else 1


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
