"""Tests for name checks and JSON file helpers."""

import json

import pytest

from userstore import storage
from userstore.storage.core import item_path, read_json, write_json


# ── check_name ───────────────────────────────────────────


@pytest.mark.parametrize("name", ["temp-0.7", "Dark Mode", "a.b", "théme", "v1..2", "wait...", "a..b"])
def test_check_name_accepts(name):
    storage.check_name(name)


@pytest.mark.parametrize(
    "name", ["..", ".", "../secrets", "a/b", "a\\b", "x.json", "nul\0byte"]
)
def test_check_name_rejects(name):
    with pytest.raises(storage.InvalidItem):
        storage.check_name(name)


# ── write_json / read_json ───────────────────────────────


def test_write_json_pretty_printed(root):
    path = root / "doc.json"
    write_json(path, {"a": 1, "b": [1, 2]})
    assert path.read_text(encoding="utf-8") == json.dumps(
        {"a": 1, "b": [1, 2]}, indent=2
    )


def test_write_json_keeps_unicode(root):
    path = root / "doc.json"
    write_json(path, {"name": "Café"})
    assert "Café" in path.read_text(encoding="utf-8")
    assert read_json(path) == {"name": "Café"}


def test_write_json_replaces_and_cleans_temp(root):
    path = root / "doc.json"
    write_json(path, {"old": True})
    write_json(path, {"new": True})
    assert read_json(path) == {"new": True}
    assert [p.name for p in root.iterdir()] == ["doc.json"]


def test_write_json_unserializable_leaves_no_temp(root):
    with pytest.raises(TypeError):
        write_json(root / "doc.json", {"bad": object()})
    assert list(root.iterdir()) == []


def test_item_path(root):
    assert item_path(root, "dark") == root / "dark.json"
