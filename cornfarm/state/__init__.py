# -*- coding: utf-8 -*-
"""Persistent player state."""

from cornfarm.state.models import PlayerState, ShopItem  # noqa: F401
from cornfarm.state.store import StateStore  # noqa: F401
