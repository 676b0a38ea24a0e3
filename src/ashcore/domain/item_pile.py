"""Per-cell clusters of dropped items with independent per-entry aging."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ashcore.domain.defs import ItemDef


@dataclass(slots=True)
class PileEntry:
    """One stack in a pile, stamped with the turn it hit the ground."""

    item: ItemDef
    amount: int
    drop_turn: int


@dataclass(slots=True)
class ItemPile:
    """Ground stacks on a single cell; consumed oldest entry first."""

    entries: List[PileEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not any(entry.amount > 0 for entry in self.entries)

    @property
    def representative_item(self) -> ItemDef | None:
        oldest = self._oldest_index(None)
        return None if oldest is None else self.entries[oldest].item

    def count(self, item: ItemDef) -> int:
        return sum(entry.amount for entry in self.entries if entry.item.id == item.id)

    def add(self, item: ItemDef, amount: int, drop_turn: int) -> None:
        """Merge into matching stacks of the same drop turn, then open new entries."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        if amount == 0:
            return
        remaining = amount
        limit = item.stack_limit
        if item.stackable:
            for entry in self.entries:
                if entry.item.id != item.id or entry.drop_turn != drop_turn:
                    continue
                space = limit - entry.amount
                if space <= 0:
                    continue
                moved = min(space, remaining)
                entry.amount += moved
                remaining -= moved
                if remaining == 0:
                    return
        while remaining > 0:
            moved = min(limit, remaining)
            self.entries.append(PileEntry(item=item, amount=moved, drop_turn=drop_turn))
            remaining -= moved

    def take_one(self, item: ItemDef | None = None) -> ItemDef | None:
        """Remove one unit from the oldest matching entry and return its item."""
        index = self._oldest_index(item)
        if index is None:
            return None
        entry = self.entries[index]
        entry.amount -= 1
        if entry.amount <= 0:
            del self.entries[index]
        return entry.item

    def remove_expired_entries(self, current_turn: int, ttl_turns: int) -> int:
        """Drop entries aged ``ttl_turns`` or more; a non-positive TTL never expires anything."""
        if ttl_turns <= 0 or current_turn < 0:
            return 0
        before = len(self.entries)
        self.entries = [
            entry
            for entry in self.entries
            if entry.amount > 0 and current_turn - entry.drop_turn < ttl_turns
        ]
        return before - len(self.entries)

    def _oldest_index(self, item: ItemDef | None) -> int | None:
        best: int | None = None
        for index, entry in enumerate(self.entries):
            if entry.amount <= 0:
                continue
            if item is not None and entry.item.id != item.id:
                continue
            if best is None or entry.drop_turn < self.entries[best].drop_turn:
                best = index
        return best
