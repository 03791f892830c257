"""Bartenders and the items they look after."""

from __future__ import annotations

from dataclasses import dataclass, field

from velvetbar.consumable import Consumable


@dataclass
class Bartender:
    """A named bartender managing a list of consumables."""

    name: str
    consumables: list[Consumable] = field(default_factory=list)

    def add_consumable(self, consumable: Consumable) -> None:
        """Put another item under this bartender's care."""
        self.consumables.append(consumable)