"""Base grid actor with hit points and a burning status."""
from __future__ import annotations

from dataclasses import dataclass

from ashcore.core.types import GridPosition

from .stats import Stats


@dataclass(slots=True)
class Entity:
    """Anything that stands on a cell and can be hurt."""

    x: int
    y: int
    stats: Stats
    burning_turns: int = 0
    display_name: str = ""

    @property
    def position(self) -> GridPosition:
        return GridPosition(self.x, self.y)

    @property
    def is_dead(self) -> bool:
        return self.stats.max_hp > 0 and self.stats.hp <= 0

    @property
    def is_burning(self) -> bool:
        return self.burning_turns > 0

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def apply_damage_from(self, attacker: "Entity") -> int:
        """Take a melee hit; returns the damage dealt (always at least 1 when it lands)."""
        if self.stats.max_hp <= 0 or self.is_dead:
            return 0
        damage = max(1, attacker.stats.attack - self.stats.defense)
        return self.apply_raw_damage(damage)

    def apply_raw_damage(self, amount: int) -> int:
        """Lose ``amount`` HP ignoring defense; returns the HP actually lost."""
        if amount <= 0 or self.stats.max_hp <= 0:
            return 0
        before = self.stats.hp
        self.stats.set_hp(before - amount)
        return before - self.stats.hp

    def heal(self, amount: int) -> int:
        if amount <= 0 or self.is_dead:
            return 0
        before = self.stats.hp
        self.stats.set_hp(before + amount)
        return self.stats.hp - before

    def apply_burning(self, duration: int) -> None:
        # Longest remaining burn wins; re-igniting never shortens it.
        if duration > self.burning_turns:
            self.burning_turns = duration

    def tick_burning_duration(self) -> None:
        if self.burning_turns > 0:
            self.burning_turns -= 1

    def clear_burning(self) -> None:
        self.burning_turns = 0
