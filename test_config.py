# -*- coding: utf-8 -*-
import json

from octree3d.utils.config import Config, DEFAULT_CONFIG


def test_missing_file_creates_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(path)
    assert path.is_file()
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert cfg["index"]["capacity"] == 4


def test_existing_file_is_loaded(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"index": {"size": 64.0}}), encoding="utf-8")
    cfg = Config(path)
    assert cfg["index"] == {"size": 64.0}
    section = cfg.section("index")
    assert section["size"] == 64.0
    assert section["capacity"] == 4
    assert cfg["query"] == DEFAULT_CONFIG["query"]


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{ not json", encoding="utf-8")
    cfg = Config(path)
    assert cfg.data == DEFAULT_CONFIG
    assert path.read_text(encoding="utf-8") == "{ not json"


def test_setitem_persists(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(path)
    cfg["query"] = {"centre": [1, 2, 3], "radius": 5.0}
    assert Config(path)["query"]["radius"] == 5.0


def test_defaults_are_not_shared(tmp_path):
    cfg = Config(tmp_path / "cfg.json")
    cfg.data["index"]["capacity"] = 99
    assert DEFAULT_CONFIG["index"]["capacity"] == 4
