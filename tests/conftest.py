# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path

import pytest

from cornfarm.channels import MemoryChannel
from cornfarm.engine import CornGame
from cornfarm.state.models import PlayerState
from cornfarm.state.store import StateStore, encode

T0 = 1_700_000_000


class FixedClock:
    def __init__(self, now: int = T0) -> None:
        self.now = now

    def __call__(self) -> float:
        return float(self.now)

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("CORN_SAVE_DIR", raising=False)
    monkeypatch.delenv("CORN_CONFIG", raising=False)
    return home


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def save_path(tmp_path) -> Path:
    return tmp_path / "corn" / "save.txt"


@pytest.fixture
def store(save_path, clock) -> StateStore:
    return StateStore(save_path, clock=clock)


@pytest.fixture
def channel() -> MemoryChannel:
    return MemoryChannel()


@pytest.fixture
def game(store, channel) -> CornGame:
    return CornGame(store, channel)


@pytest.fixture
def write_save(save_path, clock):
    """Write a save stamped at the clock's current time."""

    def _write(**fields) -> PlayerState:
        corn = fields.pop("corn", 0)
        seeds = fields.pop("seeds", 0)
        fields.setdefault("last_run", clock.now)
        state = PlayerState(**fields)
        state.corn.amount = corn
        state.seeds.amount = seeds
        save_path.parent.mkdir(parents=True, exist_ok=True)
        save_path.write_text(encode(state), encoding="utf-8")
        return state

    return _write


def read_save(path: Path):
    return [int(line) for line in path.read_text(encoding="utf-8").splitlines()]
