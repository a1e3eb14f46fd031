#!/usr/bin/env python3
"""
objectschema configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from objectschema.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "logging": {"level": "INFO"},
    "validator": {"fail_fast": False},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "objectschema" / "config.json"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load objectschema configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/objectschema/config.json)
        3. Project config (./objectschema.json)
        4. Environment overrides:
           - OBJECTSCHEMA_LOG_LEVEL
           - OBJECTSCHEMA_FAIL_FAST (1/true/yes/on)

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "objectschema.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    log_level_env = os.getenv("OBJECTSCHEMA_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    fail_fast_env = os.getenv("OBJECTSCHEMA_FAIL_FAST")
    if fail_fast_env:
        config.setdefault("validator", {})["fail_fast"] = _parse_flag(fail_fast_env)

    return config


# --- Internals --- #

def _parse_flag(value: str) -> bool:
    """Interpret an environment flag; anything outside the truthy set is False."""
    return value.strip().lower() in _TRUTHY
