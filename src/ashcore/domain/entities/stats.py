"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Hit points and combat stats; HP writes always stay within ``0..max_hp``."""

    max_hp: int
    hp: int
    attack: int = 0
    defense: int = 0
    speed: int = 100

    def __post_init__(self) -> None:
        self.set_max_hp(self.max_hp)

    def set_max_hp(self, value: int) -> None:
        self.max_hp = max(0, value)
        self.set_hp(self.hp)

    def set_hp(self, value: int) -> None:
        self.hp = min(max(0, value), self.max_hp)
