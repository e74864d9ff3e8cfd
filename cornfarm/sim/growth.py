# -*- coding: utf-8 -*-
"""Passive growth between runs (energy regeneration + ripening corn)."""

from __future__ import annotations

from math import isqrt
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from cornfarm.state.models import PlayerState

ENERGY_MAX = 100
ENERGY_REGEN_SECONDS = 5
GROWTH_SECONDS = 10
PLANT_ENERGY_COST = 5
HARVEST_ENERGY_COST = 2


def elapsed_seconds(last_run: int, now: float) -> int:
    # a save stamped in the future counts as no time passed
    return max(0, int(now) - int(last_run))


def regenerate_energy(energy: int, elapsed: int) -> int:
    return min(ENERGY_MAX, energy + elapsed // ENERGY_REGEN_SECONDS)


def grow_ready(ready: int, field: int, elapsed: int) -> int:
    """Ripen corn: each second adds isqrt(field)/GROWTH_SECONDS units, capped at field."""
    return min(field, ready + isqrt(field) * elapsed // GROWTH_SECONDS)


def apply_elapsed(state: PlayerState, now: float) -> int:
    elapsed = elapsed_seconds(state.last_run, now)
    state.energy = regenerate_energy(state.energy, elapsed)
    state.ready = grow_ready(state.ready, state.field, elapsed)
    return elapsed
