import pytest

from ashcore.core.rng import (
    DROP_SEED_SALT,
    LOOT_SEED_SALT,
    RngStream,
    WorldRng,
    derive_drop_seed,
    derive_loot_seed,
    derive_seed,
    expand_seed,
    fnv1a64,
    pack_xy,
)


def test_splitmix_matches_reference_first_output() -> None:
    assert RngStream(0).next_u64() == 0xE220A8397B1DCDAF


def test_stream_determinism_same_seed() -> None:
    stream_a = RngStream(12345)
    stream_b = RngStream(12345)

    draws_a = [stream_a.next_int(0, 100) for _ in range(10)]
    draws_b = [stream_b.next_int(0, 100) for _ in range(10)]

    assert draws_a == draws_b
    assert stream_a.state == stream_b.state


def test_stream_different_seed() -> None:
    stream_a = RngStream(11111)
    stream_b = RngStream(22222)

    assert [stream_a.next_u64() for _ in range(5)] != [stream_b.next_u64() for _ in range(5)]


def test_state_fully_determines_future_output() -> None:
    stream = RngStream(99)
    stream.next_u64()
    clone = stream.clone()

    assert [stream.next_u32() for _ in range(5)] == [clone.next_u32() for _ in range(5)]


def test_next_int_stays_in_range() -> None:
    stream = RngStream(7)
    values = [stream.next_int(3, 8) for _ in range(200)]

    assert min(values) >= 3
    assert max(values) < 8


def test_next_int_empty_range_returns_min_without_advancing() -> None:
    stream = RngStream(7)
    before = stream.state

    assert stream.next_int(5, 5) == 5
    assert stream.next_int(5, 2) == 5
    assert stream.state == before


def test_randint_is_inclusive_and_choice_rejects_empty() -> None:
    stream = RngStream(3)
    assert {stream.randint(0, 1) for _ in range(100)} == {0, 1}
    with pytest.raises(ValueError):
        stream.choice([])


def test_world_rng_streams_are_independent_and_reproducible() -> None:
    world_a = WorldRng(42)
    world_b = WorldRng(42)

    assert world_a.snapshot() == world_b.snapshot()
    assert len(set(world_a.snapshot())) == 3
    world_a.loot.next_u64()
    assert world_a.generation.state == world_b.generation.state
    assert world_a.ai.state == world_b.ai.state
    assert world_a.loot.state != world_b.loot.state


def test_expand_and_pack_helpers() -> None:
    assert expand_seed(0x12345678) == 0x1234567812345678
    assert expand_seed(-1) == 0xFFFFFFFFFFFFFFFF
    assert pack_xy(1, 2) == (1 << 32) | 2
    assert pack_xy(-1, 0) == 0xFFFFFFFF << 32


def test_fnv1a64_empty_string_is_offset_basis() -> None:
    assert fnv1a64("") == 14695981039346656037
    assert fnv1a64("chest") != fnv1a64("chesT")


def test_derived_seeds_depend_only_on_inputs() -> None:
    assert derive_loot_seed(5, 3, 4, "chest") == derive_loot_seed(5, 3, 4, "chest")
    assert derive_loot_seed(5, 3, 4, "chest") != derive_loot_seed(5, 4, 3, "chest")
    assert derive_loot_seed(5, 3, 4, "chest") != derive_loot_seed(6, 3, 4, "chest")
    assert derive_loot_seed(5, 3, 4, "chest") != derive_loot_seed(5, 3, 4, "barrel")
    assert derive_loot_seed(5, 3, 4, "goblin") != derive_drop_seed(5, 3, 4, "goblin")
    assert derive_drop_seed(5, 3, 4, "goblin") == derive_seed(5, DROP_SEED_SALT, 3, 4, "goblin")
    assert derive_loot_seed(5, 3, 4, "chest") == derive_seed(5, LOOT_SEED_SALT, 3, 4, "chest")
