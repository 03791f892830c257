"""Drinks: consumables taken by the sip."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Mapping

from velvetbar.consumable import Consumable, _read_bool, _read_int, _read_str

# Rolled once per process, so a session's flavour text stays the same.
_SIP_ROLL = random.randint(1, 4)
_CHUG_ROLL = random.randint(1, 1000)

SIP_MESSAGE = "You take a sip of your drink."
SIP_REFRESHING_MESSAGE = "You take a sip of your drink. It tastes refreshing."
CHUG_MESSAGE = "You fully chug your drink! You feel sick."
CHUG_REGRET_MESSAGE = (
    "You fully chug you drink! You think about what you're doing with your life. "
    "You feel sick."
)
REFILL_MESSAGE = "The bartender refills your drink."
EMPTY_ERROR = "Your drink is already empty!"
FULL_ERROR = "Your drink is already full!"


@dataclass
class Drink(Consumable):
    """A drink with a number of sips left and an alcohol content."""

    is_drink: bool = field(default=True, init=False)
    sips: int = 0
    is_alc: bool = False
    alc_percentage: int = 0
    full_sips: int | None = None

    def __post_init__(self) -> None:
        if self.full_sips is None:
            self.full_sips = self.sips

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "fullSipsAmount": self.full_sips,
            "sipsAmount": self.sips,
            "isAlc": self.is_alc,
            "alcPercentage": self.alc_percentage,
        }

    def update_from_json(self, data: Mapping[str, Any]) -> None:
        self.id = _read_str(data, "id")
        self.name = _read_str(data, "name")
        self.price = _read_int(data, "price")
        self.full_sips = _read_int(data, "fullSipsAmount")
        self.sips = _read_int(data, "sipsAmount")
        self.alc_percentage = _read_int(data, "alcPercentage")
        self.is_alc = _read_bool(data, "isAlc")

    def is_special(self) -> bool:
        return self.is_alc

    def sip(self) -> str:
        """Take one sip; return what happened. Raises ValueError when empty."""
        if self.sips == 0:
            raise ValueError(EMPTY_ERROR)
        self.sips -= 1
        return SIP_REFRESHING_MESSAGE if _SIP_ROLL == 1 else SIP_MESSAGE

    def chug(self) -> str:
        """Empty the drink; return what happened. Raises ValueError when empty."""
        if self.sips == 0:
            raise ValueError(EMPTY_ERROR)
        self.sips = 0
        return CHUG_REGRET_MESSAGE if _CHUG_ROLL == 1 else CHUG_MESSAGE

    def refill(self) -> str:
        """Fill the drink back up; return what happened. Raises ValueError when full."""
        if self.sips == self.full_sips:
            raise ValueError(FULL_ERROR)
        self.sips = self.full_sips
        return REFILL_MESSAGE