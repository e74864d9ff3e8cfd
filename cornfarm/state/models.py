# -*- coding: utf-8 -*-
"""Player state records."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as _field
from typing import Any, Dict, Optional

from cornfarm.sim.growth import ENERGY_MAX


@dataclass
class ShopItem:
    amount: int
    cost: int
    sell_price: int


def _corn() -> ShopItem:
    return ShopItem(amount=0, cost=2, sell_price=1)


def _seeds() -> ShopItem:
    return ShopItem(amount=0, cost=10, sell_price=7)


def _energy_drink() -> ShopItem:
    return ShopItem(amount=0, cost=20, sell_price=14)


@dataclass
class PlayerState:
    """Everything one run of the game reads, mutates and writes back.

    `field` counts every slot ever planted; `ready` is how many of them can be
    harvested right now and never exceeds `field`.
    """

    money: int = 0
    energy: int = ENERGY_MAX
    field: int = 0
    ready: int = 0
    last_run: int = 0
    corn: ShopItem = _field(default_factory=_corn)
    seeds: ShopItem = _field(default_factory=_seeds)
    energy_drink: ShopItem = _field(default_factory=_energy_drink)

    @classmethod
    def default(cls, now: float) -> "PlayerState":
        return cls(last_run=int(now))

    def shop_item(self, name: str) -> Optional[ShopItem]:
        return {
            "corn": self.corn,
            "seeds": self.seeds,
            "RedBull": self.energy_drink,
        }.get(name)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "last_run": self.last_run,
            "money": self.money,
            "corn": self.corn.amount,
            "energy": self.energy,
            "seeds": self.seeds.amount,
            "field": self.field,
            "ready": self.ready,
            "energy_drink": self.energy_drink.amount,
        }
