"""Tests for the canonical JSON serialization layer."""

import json
from pathlib import Path

from solscrape.model import FileWarning
from solscrape.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_normalizes_paths():
    obj = json.loads(stable_json_dumps({"p": Path("a") / "b"}))
    assert obj["p"] == "a/b"


def test_stable_json_dumps_converts_dataclasses_and_sets():
    obj = json.loads(
        stable_json_dumps({"w": FileWarning("x.sol", "boom"), "s": {"b", "a"}})
    )
    assert obj["w"] == {"relative_path": "x.sol", "message": "boom"}
    assert obj["s"] == ["a", "b"]


def test_non_ascii_is_kept():
    assert "═" in stable_json_dumps({"sep": "═"})


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert json.loads(txt) == {"a": 2, "b": 1}
