"""Player inventory container."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Set


@dataclass(slots=True)
class Inventory:
    """Unordered set of held item ids.

    Adding a held item and removing a missing one are both no-ops.
    """

    items: Set[str] = field(default_factory=set)

    @classmethod
    def of(cls, item_ids: Iterable[str]) -> "Inventory":
        return cls(items=set(item_ids))

    def add(self, item_id: str) -> bool:
        """Add an item, returning True if it was not already held."""
        if item_id in self.items:
            return False
        self.items.add(item_id)
        return True

    def remove(self, item_id: str) -> bool:
        """Remove an item, returning True if it was held."""
        if item_id not in self.items:
            return False
        self.items.discard(item_id)
        return True

    def sorted_items(self) -> List[str]:
        return sorted(self.items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.items

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
