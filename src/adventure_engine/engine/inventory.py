"""
inventory.py

PURPOSE: Portable items and the player's inventory.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Items are keyed by their canonical noun token, the same token the parser
puts into Command.noun, so "take the brass key" finds the item registered
under "key" without any further lookup.
"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Item:
    """
    Something the player can pick up and carry.

    Attributes:
        noun: Canonical noun token ("key")
        name: Display name ("brass key")
        description: Text shown when the player looks at it
        pick_up_message: Reply when the player takes it
    """

    noun: str
    name: str
    description: str = ""
    pick_up_message: str = "Taken."

    def __post_init__(self) -> None:
        if not self.noun or not self.noun.strip():
            raise ValueError("An item needs a noun.")
        if not self.name or not self.name.strip():
            raise ValueError("An item needs a name.")


class Inventory:
    """What the player is carrying, in pick-up order."""

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}

    def add(self, item: Item) -> None:
        self._items[item.noun] = item

    def remove(self, noun: str) -> Item | None:
        """Remove and return an item, or None if it isn't held."""
        return self._items.pop(noun, None)

    def get(self, noun: str) -> Item | None:
        return self._items.get(noun)

    def exists(self, noun: str) -> bool:
        return noun in self._items

    def nouns(self) -> list[str]:
        return list(self._items)

    def names(self) -> list[str]:
        return [item.name for item in self._items.values()]

    def __contains__(self, noun: object) -> bool:
        return noun in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items.values()))
