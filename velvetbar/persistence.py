"""Saving and loading collections of consumables as JSON files."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, TypeVar

from velvetbar.consumable import Consumable

_C = TypeVar("_C", bound=Consumable)


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def _ordered(items: Mapping[str, _C]) -> list[_C]:
    """Items in the order of their keys."""
    return [item for _, item in sorted(items.items(), key=lambda pair: pair[0])]


def _dump_list(items: Iterable[Consumable]) -> str:
    return _dumps([item.to_json() for item in items])


def save_to_file(items: Mapping[str, Consumable], filename: str) -> bool:
    """Write the items, ordered by key, as a JSON array.

    Returns False when the file cannot be opened for writing.
    """
    text = _dump_list(_ordered(items))
    try:
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError:
        return False
    return True


def load_from_file(kind: type[_C], filename: str) -> dict[str, _C]:
    """Read a JSON array of items of the given kind, keyed by their ids.

    A file that cannot be opened yields an empty collection.
    """
    try:
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return {}

    decoded = json.loads(text)
    if decoded is None:
        return {}

    loaded: dict[str, _C] = {}
    for entry in decoded:
        item = kind.from_json(entry)
        loaded[item.id] = item
    return dict(sorted(loaded.items(), key=lambda pair: pair[0]))