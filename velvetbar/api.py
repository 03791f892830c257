"""Request handling for the menu: create, read, update, delete, search, sort, filter."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from typing import Generic, Mapping, TypeVar

from velvetbar.consumable import Consumable
from velvetbar.drink import Drink
from velvetbar.persistence import _dump_list, _dumps, _ordered

_C = TypeVar("_C", bound=Consumable)

INVALID_JSON = "Invalid JSON"
NOT_FOUND_READ = "Consumable Not Found"
NOT_FOUND = "consumable Not Found"
SORT_KEYS = frozenset({"price", "alcPercentage", "alcoholPercentage"})


@dataclass
class Response:
    """A status code, a body and any extra headers."""

    status: int = 200
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


def _is_true(value: str) -> bool:
    return value in ("TRUE", "true")


def _sort_key(item: Consumable) -> int:
    # Drinks are always ordered by strength, everything else by price.
    if isinstance(item, Drink):
        return item.alc_percentage
    return item.price


def search_consumables(search: str, consumables: Mapping[str, Consumable]) -> Response:
    """List the items whose name contains the search text."""
    found = (item for item in _ordered(consumables) if search in item.name)
    return Response(body=_dump_list(found))


def sort_consumables(sort: str, consumables: Mapping[str, Consumable]) -> Response:
    """List the items, sorted when the sort key is one that is recognised."""
    items = _ordered(consumables)
    if sort in SORT_KEYS:
        items.sort(key=_sort_key)
    return Response(body=_dump_list(items))


def filter_consumables(
    is_drink: bool, is_special: bool, consumables: Mapping[str, Consumable]
) -> Response:
    """List the items of the given kind whose special flag matches."""
    found = (
        item
        for item in _ordered(consumables)
        if item.is_drink == is_drink and item.is_special() == is_special
    )
    return Response(body=_dump_list(found))


@dataclass
class ConsumableAPI(Generic[_C]):
    """The request handlers for one kind of consumable and its collection."""

    kind: type[_C]
    consumables: dict[str, _C] = field(default_factory=dict)

    def create(self, body: str | bytes) -> Response:
        """Add an item built from a JSON body."""
        try:
            data = json.loads(body)
        except ValueError:
            return Response(400, INVALID_JSON)
        item = self.kind.from_json(data)
        self.consumables[item.id] = item
        return Response(201, _dumps(item.to_json()))

    def read(self, consumable_id: str) -> Response:
        """Return one item."""
        item = self.consumables.get(consumable_id)
        if item is None:
            return Response(404, NOT_FOUND_READ)
        return Response(body=_dumps(item.to_json()))

    def read_all(self, params: Mapping[str, str] | None = None) -> Response:
        """List items, honouring search, sort, isAlc and isHot parameters."""
        params = params or {}
        search = params.get("search")
        if search is not None:
            return search_consumables(search, self.consumables)
        sort = params.get("sort")
        if sort is not None:
            return sort_consumables(sort, self.consumables)
        is_alc = params.get("isAlc")
        if is_alc is not None:
            return filter_consumables(True, _is_true(is_alc), self.consumables)
        is_hot = params.get("isHot")
        if is_hot is not None:
            return filter_consumables(False, _is_true(is_hot), self.consumables)
        return Response(body=_dump_list(_ordered(self.consumables)))

    def update(self, body: str | bytes, consumable_id: str) -> Response:
        """Overwrite an item's fields from a JSON body."""
        current = self.consumables.get(consumable_id)
        if current is None:
            return Response(404, NOT_FOUND)
        try:
            data = json.loads(body)
        except ValueError:
            return Response(400, INVALID_JSON)
        item = copy.copy(current)
        item.update_from_json(data)
        self.consumables[consumable_id] = item
        return Response(
            200,
            _dumps(item.to_json()),
            {"Content-Type": "application/json"},
        )

    def delete(self, consumable_id: str) -> Response:
        """Remove an item."""
        if consumable_id not in self.consumables:
            return Response(404, NOT_FOUND)
        del self.consumables[consumable_id]
        return Response(204)