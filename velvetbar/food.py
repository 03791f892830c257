"""Food: consumables taken by the bite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from velvetbar.consumable import Consumable, _read_bool, _read_int, _read_str

BITE_MESSAGE = "You take a bite of your food. tasty"
FINISH_MESSAGE = "You stuff your mouth with the food. In a rush?"


@dataclass
class Food(Consumable):
    """A plate of food with a number of bites left."""

    is_drink: bool = field(default=False, init=False)
    bites: int = 0
    is_hot: bool = False
    full_bites: int | None = None

    def __post_init__(self) -> None:
        if self.full_bites is None:
            self.full_bites = self.bites

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "fullBitesAmount": self.full_bites,
            "bitesAmount": self.bites,
            "isHot": self.is_hot,
        }

    def update_from_json(self, data: Mapping[str, Any]) -> None:
        self.id = _read_str(data, "id")
        self.name = _read_str(data, "name")
        self.price = _read_int(data, "price")
        self.full_bites = _read_int(data, "fullBitesAmount")
        self.bites = _read_int(data, "bitesAmount")
        self.is_hot = _read_bool(data, "isHot")

    def is_special(self) -> bool:
        return self.is_hot

    def _require_left(self) -> None:
        if self.bites == 0:
            raise ValueError(f"There's no {self.name} left!")

    def bite(self) -> str:
        """Take one bite; return what happened. Raises ValueError when none is left."""
        self._require_left()
        self.bites -= 1
        return BITE_MESSAGE

    def finish(self) -> str:
        """Eat everything left; return what happened. Raises ValueError when none is left."""
        self._require_left()
        self.bites = 0
        return FINISH_MESSAGE

    def reorder(self) -> str:
        """Order a fresh plate; return what happened. Raises ValueError when untouched."""
        if self.bites == self.full_bites:
            raise ValueError(f"You already have fresh {self.name} !")
        self.bites = self.full_bites
        return f"The bartender brings you another plate of {self.name}"