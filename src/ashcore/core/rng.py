"""Deterministic 64-bit random streams and order-independent seed derivation."""
from __future__ import annotations

from typing import Sequence, TypeVar

T_co = TypeVar("T_co")

MASK64 = 0xFFFFFFFFFFFFFFFF
GOLDEN_GAMMA = 0x9E3779B97F4A7C15

# Role salts keep container loot and enemy drops on unrelated seed families.
LOOT_SEED_SALT = 0x4C4F4F545F534545
DROP_SEED_SALT = 0x44524F505F534545

_FNV_OFFSET_BASIS = 14695981039346656037
_FNV_PRIME = 1099511628211


def mix64(value: int) -> int:
    """Return the splitmix64 avalanche of a 64-bit value."""
    z = value & MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


def expand_seed(seed: int) -> int:
    """Spread a 32-bit run seed over both halves of a 64-bit word."""
    low = seed & 0xFFFFFFFF
    return (low << 32) | low


def pack_xy(x: int, y: int) -> int:
    return ((x & 0xFFFFFFFF) << 32) | (y & 0xFFFFFFFF)


def fnv1a64(value: str) -> int:
    """FNV-1a over the UTF-16 code units of ``value`` (low byte first)."""
    hashed = _FNV_OFFSET_BASIS
    for byte in value.encode("utf-16-le"):
        hashed ^= byte
        hashed = (hashed * _FNV_PRIME) & MASK64
    return hashed


def derive_seed(run_seed: int, salt: int, x: int, y: int, stable_id: str) -> int:
    """Derive a seed purely from stable inputs so call order never matters."""
    seed = expand_seed(run_seed) ^ salt ^ pack_xy(x, y) ^ fnv1a64(stable_id or "")
    return mix64(seed)


def derive_loot_seed(run_seed: int, x: int, y: int, prop_id: str) -> int:
    return derive_seed(run_seed, LOOT_SEED_SALT, x, y, prop_id)


def derive_drop_seed(run_seed: int, x: int, y: int, enemy_id: str) -> int:
    return derive_seed(run_seed, DROP_SEED_SALT, x, y, enemy_id)


class RngStream:
    """Splitmix64 generator whose whole future is determined by ``state``."""

    __slots__ = ("state",)

    def __init__(self, seed: int) -> None:
        self.state = seed & MASK64

    def clone(self) -> "RngStream":
        return RngStream(self.state)

    def next_u64(self) -> int:
        self.state = (self.state + GOLDEN_GAMMA) & MASK64
        return mix64(self.state)

    def next_u32(self) -> int:
        return self.next_u64() >> 32

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        """Return an integer in [min_inclusive, max_exclusive); ``min`` when the range is empty."""
        if max_exclusive <= min_inclusive:
            return min_inclusive
        span = max_exclusive - min_inclusive
        return min_inclusive + self.next_u32() % span

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self.next_int(a, b + 1)

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return seq[self.next_int(0, len(seq))]


class WorldRng:
    """The three shared streams of one run, all chained from the run seed."""

    __slots__ = ("run_seed", "generation", "loot", "ai")

    def __init__(self, run_seed: int) -> None:
        self.run_seed = run_seed
        seeder = RngStream(expand_seed(run_seed))
        self.generation = RngStream(seeder.next_u64())
        self.loot = RngStream(seeder.next_u64())
        self.ai = RngStream(seeder.next_u64())

    def snapshot(self) -> tuple[int, int, int]:
        """Return the internal states of the generation, loot and AI streams."""
        return (self.generation.state, self.loot.state, self.ai.state)
