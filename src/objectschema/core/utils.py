#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as field name checks, producer
    invocation, dictionary merge, and file I/O utilities for objectschema.
"""

import inspect
import json
from pathlib import Path
from typing import Any, Callable, Dict

from objectschema.core.constants import FIELDNAME_ALLOWED_RE, DEFAULT_TEXT_ENCODING


# --- Validation Helpers --- #

def is_valid_fieldname_pattern(name: str) -> bool:
    """Return True if the field name fully matches the allowed pattern."""
    return bool(FIELDNAME_ALLOWED_RE.fullmatch(name))


# --- Callable Helpers --- #

def takes_positional_argument(fn: Callable[..., Any]) -> bool:
    """
    Return True if `fn` declares at least one required positional parameter.

    Builtins whose signature cannot be inspected are treated as zero-argument.
    """
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return any(
        p.kind == inspect.Parameter.VAR_POSITIONAL
        or (p.kind in positional and p.default is inspect.Parameter.empty)
        for p in params
    )


def call_producer(producer: Callable[..., Any], owner: Any) -> Any:
    """Invoke a default-value producer, passing `owner` only if it accepts an argument."""
    if takes_positional_argument(producer):
        return producer(owner)
    return producer()


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
