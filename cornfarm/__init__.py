# -*- coding: utf-8 -*-
"""Corn farm: an idle farming game played one command at a time."""

from cornfarm.channels import Channel, ConsoleChannel, MemoryChannel, NullChannel, Severity  # noqa: F401
from cornfarm.engine import CornGame  # noqa: F401
from cornfarm.state import PlayerState, ShopItem, StateStore  # noqa: F401
