#!/usr/bin/env python3
import json
from pathlib import Path

import pytest

import objectschema.core.config as cfg


# --- Helpers --- #

def _write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OBJECTSCHEMA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("OBJECTSCHEMA_FAIL_FAST", raising=False)


# --- load_config: defaults only --- #

def test_load_config_defaults_only(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "no/such/config.json", raising=False)
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    result = cfg.load_config()
    assert result == cfg.DEFAULT_CONFIG


def test_load_config_does_not_mutate_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OBJECTSCHEMA_LOG_LEVEL", "DEBUG")

    cfg.load_config()
    assert cfg.DEFAULT_CONFIG["logging"]["level"] == "INFO"


# --- Precedence: global < project < env --- #

def test_load_config_global_and_project_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    global_cfg = tmp_path / ".config/objectschema/config.json"
    project_dir = tmp_path / "proj"
    _write_json(global_cfg, {"logging": {"level": "DEBUG"}, "extra": 1})
    _write_json(project_dir / "objectschema.json", {"logging": {"level": "WARNING"}, "validator": {"fail_fast": True}})

    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", global_cfg, raising=False)
    monkeypatch.chdir(project_dir)
    _clear_env(monkeypatch)

    result = cfg.load_config()
    assert result["logging"]["level"] == "WARNING"
    assert result["validator"]["fail_fast"] is True
    assert result["extra"] == 1


def test_load_config_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OBJECTSCHEMA_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("OBJECTSCHEMA_FAIL_FAST", "yes")

    result = cfg.load_config()
    assert result["logging"]["level"] == "ERROR"
    assert result["validator"]["fail_fast"] is True


def test_load_config_invalid_json_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    bad = tmp_path / "config.json"
    bad.write_text("{nope", encoding="utf-8")
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", bad, raising=False)
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    with pytest.raises(ValueError, match="Invalid JSON"):
        cfg.load_config()


# --- _parse_flag internals --- #

@pytest.mark.parametrize("value,expected", [
    ("1", True),
    ("true", True),
    (" YES ", True),
    ("on", True),
    ("0", False),
    ("no", False),
    ("whatever", False),
])
def test_parse_flag(value, expected):
    assert cfg._parse_flag(value) is expected
