# -*- coding: utf-8 -*-
"""Read-only commands: show, shop."""

from __future__ import annotations

from typing import List

from cornfarm.channels import Channel, Severity
from cornfarm.state.models import ENERGY_MAX, PlayerState


def render_status(state: PlayerState) -> str:
    lines = [
        "         - INFO -",
        f"        Money: ${state.money}",
        f"         Corn: {state.corn.amount}",
        f"        Seeds: {state.seeds.amount}",
        "         --------",
        f"        Field: {state.ready}/{state.field}",
        f"       Energy: {state.energy}/{ENERGY_MAX}",
    ]
    return "\n".join(lines)


def render_shop(state: PlayerState) -> str:
    lines = [
        "         - SHOP -",
        f"       Seeds: ${state.seeds.cost}",
        f"     RedBull: ${state.energy_drink.cost}",
    ]
    return "\n".join(lines)


def cmd_show(state: PlayerState, args: List[str], channel: Channel) -> bool:
    channel.emit(render_status(state), Severity.LOG)
    return True


def cmd_shop(state: PlayerState, args: List[str], channel: Channel) -> bool:
    channel.emit(render_shop(state), Severity.LOG)
    return True
