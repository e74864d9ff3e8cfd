# -*- coding: utf-8 -*-
"""Simulation helpers (time-driven)."""

from cornfarm.sim.growth import apply_elapsed  # noqa: F401
