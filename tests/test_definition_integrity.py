from __future__ import annotations

import string
from pathlib import Path

import pytest

from ashcore.data import paths
from ashcore.data.json_loader import load_json
from ashcore.domain.messages import MessageId, message_arity


@pytest.fixture(scope="module")
def definitions_dir() -> Path:
    """Return the canonical definitions directory."""
    return paths.get_definitions_path()


@pytest.mark.parametrize(
    ("filename", "list_key"),
    [
        ("items.json", "items"),
        ("actors.json", "actors"),
        ("props.json", "props"),
        ("messages.json", "entries"),
    ],
)
def test_definition_files_are_valid_json(definitions_dir: Path, filename: str, list_key: str) -> None:
    """Every definition file should parse and hold its list."""
    payload = load_json(definitions_dir / filename)
    assert isinstance(payload, dict)
    assert isinstance(payload[list_key], list)
    assert payload[list_key]


def test_every_message_id_has_exactly_one_template(definitions_dir: Path) -> None:
    entries = load_json(definitions_dir / "messages.json")["entries"]
    ids = [entry["id"] for entry in entries]

    assert len(ids) == len(set(ids))
    assert {message_id.value for message_id in MessageId}.issubset(set(ids))


def test_message_templates_only_use_positional_fields(definitions_dir: Path) -> None:
    entries = load_json(definitions_dir / "messages.json")["entries"]
    formatter = string.Formatter()
    for entry in entries:
        for _, field_name, _, _ in formatter.parse(entry["text"]):
            if field_name is None:
                continue
            assert field_name.isdigit(), f"{entry['id']} uses named field '{field_name}'"


def test_bundled_templates_format_with_their_arity(definitions_dir: Path) -> None:
    texts = {entry["id"]: entry["text"] for entry in load_json(definitions_dir / "messages.json")["entries"]}
    for message_id in MessageId:
        args = ["x"] * message_arity(message_id)
        texts[message_id.value].format(*args)


def test_actor_inventory_references_known_items(definitions_dir: Path) -> None:
    item_ids = {item["id"] for item in load_json(definitions_dir / "items.json")["items"]}
    for actor in load_json(definitions_dir / "actors.json")["actors"]:
        for grant in actor["initial_inventory"]:
            assert grant["item_id"] in item_ids, f"{actor['id']} grants unknown {grant['item_id']}"


def test_non_stackable_items_have_stack_of_one(definitions_dir: Path) -> None:
    for item in load_json(definitions_dir / "items.json")["items"]:
        if not item["stackable"]:
            assert item["max_stack"] == 1, item["id"]


def test_exactly_one_player_actor(definitions_dir: Path) -> None:
    actors = load_json(definitions_dir / "actors.json")["actors"]
    assert [actor["id"] for actor in actors if actor["kind"] == "player"] == ["actor_player"]
