#!/usr/bin/env python3
"""
Purpose:
    Built-in validation rules. Every rule has the signature
    `rule(value, options, context) -> bool` (or an awaitable of bool) and
    returns True when the value passes. Apart from `presence` and `absence`,
    rules let `None` pass so optional fields are only checked when set.
"""
from __future__ import annotations

import re
from collections.abc import Sized
from typing import Any, Callable, Dict, Final, Mapping


Rule = Callable[[Any, Mapping[str, Any], Any], Any]


# --- Rules --- #

def presence(value: Any, options: Mapping[str, Any], context: Any) -> bool:
    """Value is set: not None, not a blank string, not an empty collection."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True


def absence(value: Any, options: Mapping[str, Any], context: Any) -> bool:
    """Value is unset (inverse of `presence`)."""
    return not presence(value, options, context)


def length(value: Any, options: Mapping[str, Any], context: Any) -> bool:
    """len(value) within [min, max]; values without a length pass."""
    if value is None or not isinstance(value, Sized):
        return True
    return _within(len(value), options)


def numericality(value: Any, options: Mapping[str, Any], context: Any) -> bool:
    """Value is a number (booleans excluded) within [min, max]."""
    if value is None:
        return True
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return _within(value, options)


def format(value: Any, options: Mapping[str, Any], context: Any) -> bool:  # noqa: A001
    """String value contains a match for `regex`."""
    if value is None:
        return True
    if not isinstance(value, str):
        return False
    return re.search(options["regex"], value) is not None


def inclusion(value: Any, options: Mapping[str, Any], context: Any) -> bool:
    """Value is one of `values`."""
    return value is None or value in options.get("values", ())


def exclusion(value: Any, options: Mapping[str, Any], context: Any) -> bool:
    """Value is none of `values`."""
    return value is None or value not in options.get("values", ())


def block(value: Any, options: Mapping[str, Any], context: Any) -> Any:
    """Delegate to `block(value, context)`; may return an awaitable."""
    fn = options.get("block")
    if not callable(fn):
        raise ValueError(f"The 'block' validator requires a callable 'block' option; got {fn!r}")
    return fn(value, context)


# --- Registry --- #

BUILTIN_RULES: Final[Dict[str, Rule]] = {
    "presence": presence,
    "absence": absence,
    "length": length,
    "numericality": numericality,
    "format": format,
    "inclusion": inclusion,
    "exclusion": exclusion,
    "block": block,
}

# Jinja2 templates rendered with the rule options plus `value` and `validator`
DEFAULT_MESSAGES: Final[Dict[str, str]] = {
    "presence": "is required",
    "absence": "must be blank",
    "length": "has invalid length",
    "numericality": "is not a valid number",
    "format": "has invalid format",
    "inclusion": "is not included in the list",
    "exclusion": "is reserved",
    "block": "is invalid",
}

FALLBACK_MESSAGE: Final[str] = "{{ validator }} validation failed"


# --- Internals --- #

def _within(n: Any, options: Mapping[str, Any]) -> bool:
    lo, hi = options.get("min"), options.get("max")
    if lo is not None and n < lo:
        return False
    if hi is not None and n > hi:
        return False
    return True
