# -*- coding: utf-8 -*-
"""State-changing commands: sell, plant, harvest, purchase.

Each handler validates everything first and only then mutates the state, so a
failed command leaves the loaded state exactly as it was.
"""

from __future__ import annotations

from typing import List

from cornfarm.channels import Channel, Severity
from cornfarm.commands.parsing import parse_quantity
from cornfarm.sim.growth import HARVEST_ENERGY_COST, PLANT_ENERGY_COST
from cornfarm.state.models import PlayerState


def cmd_sell(state: PlayerState, args: List[str], channel: Channel) -> bool:
    qty = parse_quantity(args, 1, "sell")
    if not qty.ok:
        channel.emit(str(qty.error), Severity.ERROR)
        return False

    count = qty.value
    if count > state.corn.amount:
        channel.emit("You do not have enough corn to sell!", Severity.WARNING)
        return False

    earned = count * state.corn.sell_price
    state.corn.amount -= count
    state.money += earned
    channel.emit(f"Successfully sold {count} corn for ${earned}", Severity.LOG)
    return True


def cmd_plant(state: PlayerState, args: List[str], channel: Channel) -> bool:
    qty = parse_quantity(args, 1, "plant")
    if not qty.ok:
        channel.emit(str(qty.error), Severity.ERROR)
        return False

    count = qty.value
    energy_cost = count * PLANT_ENERGY_COST
    if state.seeds.amount < count:
        channel.emit("Not enough seeds!", Severity.WARNING)
        return False
    if state.energy < energy_cost:
        channel.emit("Not enough energy!", Severity.WARNING)
        return False

    state.energy -= energy_cost
    state.seeds.amount -= count
    state.field += count
    channel.emit(f"Successfully planted {count} corn.\nThis cost {energy_cost} energy.", Severity.LOG)
    return True


def cmd_harvest(state: PlayerState, args: List[str], channel: Channel) -> bool:
    qty = parse_quantity(args, 1, "harvest")
    if not qty.ok:
        channel.emit(str(qty.error), Severity.ERROR)
        return False

    count = qty.value
    energy_cost = count * HARVEST_ENERGY_COST
    if state.ready < count:
        channel.emit("Not enough corn is ready for harvest!", Severity.WARNING)
        return False
    if state.energy < energy_cost:
        channel.emit("Not enough energy!", Severity.WARNING)
        return False

    state.energy -= energy_cost
    state.ready -= count
    state.corn.amount += count
    channel.emit(f"Successfully harvested {count} corn.\nThis cost {energy_cost} energy.", Severity.LOG)
    return True


def cmd_purchase(state: PlayerState, args: List[str], channel: Channel) -> bool:
    if len(args) < 2:
        channel.emit('Insufficient arguments to perform command "purchase"', Severity.WARNING)
        return False

    name = args[1]
    item = state.shop_item(name)
    if item is None:
        channel.emit(f'No item available for purchase called "{name}"', Severity.WARNING)
        return False

    qty = parse_quantity(args, 2, "purchase")
    if not qty.ok:
        channel.emit(str(qty.error), Severity.ERROR)
        return False

    count = qty.value
    cost = item.cost * count
    if cost > state.money:
        channel.emit("Insufficient funds!", Severity.WARNING)
        return False

    state.money -= cost
    item.amount += count
    channel.emit(f"Successfully purchased {count} {name} for ${cost}", Severity.LOG)
    return True
