# -*- coding: utf-8 -*-
"""Save file codec and the load/save store.

File layout (plain text, one integer per line):

    <unix timestamp>
    <money>
    <corn>
    <energy>
    <seeds>
    <field>
    <ready>
"""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path
from typing import Callable, List

from cornfarm.errors import CorruptSaveError, StoreIOError
from cornfarm.sim.growth import apply_elapsed
from cornfarm.state.models import PlayerState

logger = logging.getLogger(__name__)

FIELD_ORDER = ("last_run", "money", "corn", "energy", "seeds", "field", "ready")

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")


def encode(state: PlayerState) -> str:
    values = [
        state.last_run,
        state.money,
        state.corn.amount,
        state.energy,
        state.seeds.amount,
        state.field,
        state.ready,
    ]
    return "".join(f"{int(v)}\n" for v in values)


def _parse_line(raw: str, *, path: Path, lineno: int, signed: bool) -> int:
    # plain ASCII digits only: no "+", "_" or other scripts' digits
    text = raw.strip()
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(text):
        raise CorruptSaveError(path, lineno)
    return int(text)


def decode(text: str, path: Path) -> PlayerState:
    lines: List[str] = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if len(lines) < len(FIELD_ORDER):
        raise CorruptSaveError(path, len(lines) + 1)

    values = [
        _parse_line(lines[idx], path=path, lineno=idx + 1, signed=(name == "last_run"))
        for idx, name in enumerate(FIELD_ORDER)
    ]
    last_run, money, corn, energy, seeds, field, ready = values

    state = PlayerState(money=money, energy=energy, field=field, ready=ready, last_run=last_run)
    state.corn.amount = corn
    state.seeds.amount = seeds
    return state


class StateStore:
    """Owns the save file.

    `clock` returns the current unix time; tests pass a fixed one.
    """

    def __init__(self, path: Path, clock: Callable[[], float] = time.time) -> None:
        self.path = Path(path)
        self.clock = clock

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> PlayerState:
        if not self.exists():
            return self._create()

        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise CorruptSaveError(self.path) from None
        except OSError:
            raise StoreIOError(f'Failed to read file: "{self.path}"', self.path) from None

        state = decode(text, self.path)
        elapsed = apply_elapsed(state, self.clock())
        logger.debug(
            "loaded %s (elapsed=%ss energy=%s ready=%s/%s)",
            self.path,
            elapsed,
            state.energy,
            state.ready,
            state.field,
        )
        return state

    def save(self, state: PlayerState) -> None:
        state.last_run = int(self.clock())
        # write beside the save, then swap it in; the old file survives a failed write
        tmp_file = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_file, "w", encoding="utf-8") as f:
                f.write(encode(state))
            tmp_file.replace(self.path)
        except OSError:
            if tmp_file.is_file():
                tmp_file.unlink()
            raise StoreIOError(f'Failed to write file: "{self.path}"', self.path) from None
        logger.debug("saved %s at %s", self.path, state.last_run)

    def reset(self) -> PlayerState:
        """Overwrite the save with a fresh default state."""
        self._ensure_dir()
        state = PlayerState.default(self.clock())
        self.save(state)
        return state

    def _ensure_dir(self) -> None:
        folder = self.path.parent
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError:
            raise StoreIOError(f'Failed to create directory: "{folder}"', folder) from None

    def _create(self) -> PlayerState:
        logger.info("no save at %s, creating a new one", self.path)
        return self.reset()
