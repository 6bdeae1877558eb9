# tests/test_config.py
import json

import pytest

from catalog_autocompleter.core.trie import Trie
from catalog_autocompleter.utils.config_manager import Config


@pytest.fixture
def cfg_path(tmp_path):
    return tmp_path / "config.json"


def test_missing_file_is_created_with_defaults(cfg_path):
    cfg = Config(str(cfg_path))
    assert cfg_path.exists()
    assert json.loads(cfg_path.read_text()) == Config.DEFAULTS
    assert cfg.get("terminator") == "$"


def test_stored_values_override_defaults(cfg_path):
    cfg_path.write_text(json.dumps({"terminator": "#", "max_suggestions": 3, "bogus": 1}))
    cfg = Config(str(cfg_path))
    assert cfg.get("terminator") == "#"
    assert cfg.get("max_suggestions") == 3
    assert "bogus" not in cfg.data


def test_invalid_stored_values_fall_back_to_defaults(cfg_path, capsys):
    cfg_path.write_text(json.dumps({
        "terminator": "$$",
        "log_level": "loud",
        "max_suggestions": None,
        "root_value": "^",
    }))
    cfg = Config(str(cfg_path))
    assert cfg.get("terminator") == "$"
    assert cfg.get("log_level") == "INFO"
    assert cfg.get("max_suggestions") == 20
    assert cfg.get("root_value") == "^"
    err = capsys.readouterr().err
    assert "bad value for 'terminator'" in err
    assert "bad value for 'log_level'" in err
    cfg.build_trie()


def test_stored_strings_are_coerced(cfg_path):
    cfg_path.write_text(json.dumps({
        "sort_completions": "false",
        "max_suggestions": "5",
        "log_level": "debug",
    }))
    cfg = Config(str(cfg_path))
    assert cfg.get("sort_completions") is False
    assert cfg.get("max_suggestions") == 5
    assert cfg.get("log_level") == "DEBUG"
    trie = cfg.build_trie()
    trie.load_many(["b", "a"])
    assert sorted(trie.words()) == ["a", "b"]
    assert trie._sort is False


def test_main_starts_with_bad_stored_config(cfg_path, monkeypatch):
    from catalog_autocompleter.cli import cli as cli_module
    from catalog_autocompleter.utils.logger_utils import configure

    cfg_path.write_text(json.dumps({"terminator": "$$", "log_level": "loud"}))
    monkeypatch.setattr(cli_module.CLI, "run", lambda self: None)
    try:
        assert cli_module.main(["--config", str(cfg_path)]) == 0
    finally:
        configure(level="INFO", path="")


def test_corrupt_file_keeps_defaults(cfg_path, capsys):
    cfg_path.write_text("{not json")
    cfg = Config(str(cfg_path))
    assert cfg.data == Config.DEFAULTS
    assert "could not read" in capsys.readouterr().err


def test_set_coerces_and_saves(cfg_path):
    cfg = Config(str(cfg_path))
    cfg.set("max_suggestions", "7")
    cfg.set("sort_completions", "false")
    assert cfg.get("max_suggestions") == 7
    assert cfg.get("sort_completions") is False
    saved = json.loads(cfg_path.read_text())
    assert saved["max_suggestions"] == 7
    assert saved["sort_completions"] is False


def test_set_rejects_unknown_key_and_bad_value(cfg_path):
    cfg = Config(str(cfg_path))
    with pytest.raises(KeyError):
        cfg.set("colour", "blue")
    with pytest.raises(ValueError):
        cfg.set("sort_completions", "maybe")
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "lots")
    with pytest.raises(ValueError):
        cfg.set("terminator", "$$")
    with pytest.raises(ValueError):
        cfg.set("log_level", "loud")
    assert cfg.data == Config.DEFAULTS


def test_build_trie_uses_settings(cfg_path):
    cfg_path.write_text(json.dumps({"terminator": "|", "root_value": "^"}))
    trie = Config(str(cfg_path)).build_trie()
    assert isinstance(trie, Trie)
    assert trie.terminator == "|"
    assert trie.root.value == "^"
    trie.load("a$b")
    assert trie.find_completions("a") == ["a$b"]
