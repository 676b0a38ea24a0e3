"""Bounded stack inventory and the six equipment slots."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from ashcore.domain.defs import ItemDef

DEFAULT_MAX_STACKS = 20


class EquipmentSlot(str, Enum):
    HEAD = "head"
    BODY = "body"
    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"
    BACK = "back"
    FEET = "feet"


# First matching tag decides the slot.
SLOT_TAG_PRIORITY: Tuple[Tuple[str, EquipmentSlot], ...] = (
    ("weapon", EquipmentSlot.MAIN_HAND),
    ("ammo", EquipmentSlot.BACK),
    ("armor", EquipmentSlot.BODY),
    ("body_armor", EquipmentSlot.BODY),
    ("helmet", EquipmentSlot.HEAD),
    ("head_armor", EquipmentSlot.HEAD),
    ("boots", EquipmentSlot.FEET),
    ("feet_armor", EquipmentSlot.FEET),
    ("shield", EquipmentSlot.OFF_HAND),
    ("offhand", EquipmentSlot.OFF_HAND),
)


def equippable_slot(item: ItemDef) -> EquipmentSlot | None:
    """Return the slot ``item`` goes into, or None when it cannot be equipped."""
    for tag, slot in SLOT_TAG_PRIORITY:
        if item.has_tag(tag):
            return slot
    return None


def _empty_equipment() -> Dict[EquipmentSlot, ItemDef | None]:
    return {slot: None for slot in EquipmentSlot}


@dataclass(slots=True)
class InventoryStack:
    item: ItemDef
    amount: int


@dataclass(slots=True)
class Inventory:
    """Carried stacks plus equipped items."""

    max_stacks: int = DEFAULT_MAX_STACKS
    stacks: List[InventoryStack] = field(default_factory=list)
    equipment: Dict[EquipmentSlot, ItemDef | None] = field(default_factory=_empty_equipment)

    # ------------------------------------------------------------------
    # Stacks
    # ------------------------------------------------------------------

    def count(self, item: ItemDef) -> int:
        return sum(stack.amount for stack in self.stacks if stack.item.id == item.id)

    def has(self, item: ItemDef, amount: int = 1) -> bool:
        return self.count(item) >= amount

    def capacity_for(self, item: ItemDef) -> int:
        """Units of ``item`` that would still fit."""
        limit = item.stack_limit
        room = sum(limit - stack.amount for stack in self.stacks if stack.item.id == item.id and item.stackable)
        free_stacks = max(0, self.max_stacks - len(self.stacks))
        return max(0, room) + free_stacks * limit

    def can_add(self, item: ItemDef, amount: int = 1) -> bool:
        return amount <= 0 or self.capacity_for(item) >= amount

    def add(self, item: ItemDef, amount: int = 1) -> bool:
        """Add ``amount`` units, topping up stacks first; nothing changes when it cannot all fit."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        if amount == 0:
            return True
        if not self.can_add(item, amount):
            return False
        remaining = amount
        limit = item.stack_limit
        if item.stackable:
            for stack in self.stacks:
                if stack.item.id != item.id or stack.amount >= limit:
                    continue
                moved = min(limit - stack.amount, remaining)
                stack.amount += moved
                remaining -= moved
                if remaining == 0:
                    return True
        while remaining > 0:
            moved = min(limit, remaining)
            self.stacks.append(InventoryStack(item=item, amount=moved))
            remaining -= moved
        return True

    def remove(self, item: ItemDef, amount: int = 1) -> bool:
        """Remove ``amount`` units from the earliest stacks, or nothing at all."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        if amount == 0:
            return True
        if self.count(item) < amount:
            return False
        remaining = amount
        for stack in self.stacks:
            if stack.item.id != item.id:
                continue
            moved = min(stack.amount, remaining)
            stack.amount -= moved
            remaining -= moved
            if remaining == 0:
                break
        self.stacks = [stack for stack in self.stacks if stack.amount > 0]
        return True

    # ------------------------------------------------------------------
    # Equipment
    # ------------------------------------------------------------------

    def equipped(self, slot: EquipmentSlot) -> ItemDef | None:
        return self.equipment.get(slot)

    def equip(self, item: ItemDef) -> bool:
        """Move one unit of ``item`` into its slot, swapping out the previous occupant."""
        slot = equippable_slot(item)
        if slot is None or not self.remove(item, 1):
            return False
        previous = self.equipment.get(slot)
        if previous is not None and not self.add(previous, 1):
            self.add(item, 1)
            return False
        self.equipment[slot] = item
        return True

    def unequip(self, slot: EquipmentSlot) -> bool:
        current = self.equipment.get(slot)
        if current is None or not self.add(current, 1):
            return False
        self.equipment[slot] = None
        return True
