"""Base type shared by everything the bar serves."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, TypeVar

_C = TypeVar("_C", bound="Consumable")


def _read_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _read_int(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field {key!r} must be a number, got {type(value).__name__}")
    return int(value)


def _read_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"field {key!r} must be a boolean, got {type(value).__name__}")
    return value


@dataclass
class Consumable(ABC):
    """An item on the menu: an identifier, a name, a price and its kind."""

    id: str = ""
    name: str = ""
    price: int = 0
    is_drink: bool = False

    @classmethod
    def from_json(cls: type[_C], data: Mapping[str, Any]) -> _C:
        """Build an item from a decoded JSON object."""
        item = cls()
        item.update_from_json(data)
        return item

    def to_json(self) -> dict[str, Any]:
        """Return the item as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "isDrink": self.is_drink,
        }

    def update_from_json(self, data: Mapping[str, Any]) -> None:
        """Overwrite the item's fields from a decoded JSON object."""
        self.id = _read_str(data, "id")
        self.name = _read_str(data, "name")
        self.price = _read_int(data, "price")
        self.is_drink = _read_bool(data, "isDrink")

    @abstractmethod
    def is_special(self) -> bool:
        """Whether the item is special (alcoholic drink, hot food)."""