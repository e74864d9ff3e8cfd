# -*- coding: utf-8 -*-
"""Command registry: name -> handler, with usage lines for --help."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from cornfarm.channels import Channel
from cornfarm.commands.actions import cmd_harvest, cmd_plant, cmd_purchase, cmd_sell
from cornfarm.commands.info import cmd_shop, cmd_show
from cornfarm.state.models import PlayerState

Handler = Callable[[PlayerState, List[str], Channel], bool]

DEFAULT_COMMAND = "show"
RESET_COMMAND = "reset"

COMMANDS: List[Dict] = [
    {
        "name": "show",
        "handler": cmd_show,
        "desc": "Show money, crops, field and energy",
        "usage": "corn [show]",
    },
    {
        "name": "shop",
        "handler": cmd_shop,
        "desc": "List shop prices",
        "usage": "corn shop",
    },
    {
        "name": "plant",
        "handler": cmd_plant,
        "desc": "Plant seeds (5 energy each)",
        "usage": "corn plant [n]",
    },
    {
        "name": "harvest",
        "handler": cmd_harvest,
        "desc": "Harvest ready corn (2 energy each)",
        "usage": "corn harvest [n]",
    },
    {
        "name": "purchase",
        "handler": cmd_purchase,
        "desc": "Buy corn, seeds or RedBull",
        "usage": "corn purchase <corn|seeds|RedBull> [n]",
    },
    {
        "name": "sell",
        "handler": cmd_sell,
        "desc": "Sell corn",
        "usage": "corn sell [n]",
    },
    {
        "name": RESET_COMMAND,
        "handler": None,
        "desc": "Wipe all game data (asks first)",
        "usage": "corn reset",
    },
]


def get_commands() -> List[Dict]:
    return COMMANDS


def get_handler(name: str) -> Optional[Handler]:
    for cmd in COMMANDS:
        if cmd.get("name") == name:
            return cmd.get("handler")
    return None
