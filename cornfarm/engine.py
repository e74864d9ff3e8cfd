# -*- coding: utf-8 -*-
"""CornGame (core)

This module is UI-agnostic.

Responsibilities
- Load the player state (applying passive growth), run one command against
  it, save it back.
- Report every outcome through the injected Channel.

Design notes
- One call to `run_command()` is one transaction: state is written only after
  the command succeeded, never after a failure.
- `reset` skips the load entirely; a corrupt save can always be reset.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from cornfarm.channels import Channel, NullChannel, Severity
from cornfarm.commands import DEFAULT_COMMAND, RESET_COMMAND, Handler, get_handler
from cornfarm.errors import CornError
from cornfarm.state.models import PlayerState
from cornfarm.state.store import StateStore

logger = logging.getLogger(__name__)

RESET_PROMPT = "Are you sure you would like to reset all game data? [y/n]: "


class CornGame:
    """Main entry used by the CLI and tests.

    Parameters
    - store: the StateStore owning the save file.
    - channel: where messages go and confirmations come from.
    """

    def __init__(self, store: StateStore, channel: Optional[Channel] = None) -> None:
        self.store = store
        self.channel = channel or NullChannel()

    def run_command(self, args: Sequence[str]) -> bool:
        argv: List[str] = [str(a) for a in args]
        if not argv:
            return self._dispatch(DEFAULT_COMMAND, [DEFAULT_COMMAND])

        name = argv[0]
        if name == RESET_COMMAND:
            return self.reset()

        return self._dispatch(name, argv)

    def reset(self) -> bool:
        self.channel.emit(RESET_PROMPT, Severity.LOG, end="")
        answer = self.channel.request()
        if answer != "y":
            logger.debug("reset declined (%r)", answer)
            return False
        try:
            self.store.reset()
        except CornError as exc:
            self._report(exc)
            return False
        logger.info("game data reset at %s", self.store.path)
        return True

    def peek(self) -> PlayerState:
        """Load the state as it would be right now, without saving it."""
        return self.store.load()

    def _dispatch(self, name: str, argv: List[str]) -> bool:
        handler: Optional[Handler] = get_handler(name)
        if handler is None:
            self.channel.emit(f'"{name}" not recognized as a valid argument', Severity.WARNING)
            return False

        logger.debug("dispatch %s %s", name, argv[1:])
        try:
            state = self.store.load()
            if not handler(state, argv, self.channel):
                logger.debug("%s failed, save skipped", name)
                return False
            self.store.save(state)
        except CornError as exc:
            self._report(exc)
            return False
        return True

    def _report(self, exc: CornError) -> None:
        logger.debug("run aborted: %s", exc)
        self.channel.emit(str(exc), Severity.ERROR)
