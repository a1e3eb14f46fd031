#!/usr/bin/env python3
"""
Purpose:
    Validation result nodes. A field result is either `None` (valid) or a
    `FieldError`; a whole-document result is a sparse `{name: FieldError}`
    map holding only the invalid fields.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

# related: nested error map, per-element results, or None
Related = Union[Dict[str, "FieldError"], List[Any], None]
ErrorMap = Dict[str, "FieldError"]


@dataclass(frozen=True)
class FieldError:
    """Failure of one field (or one array element) and of what it contains."""
    is_valid: bool
    messages: List[str] = field(default_factory=list)
    related: Related = None


def is_invalid(result: Any) -> bool:
    """
    True if a result entry reports a failure.

    - None                   -> valid
    - FieldError             -> its `is_valid` flag decides
    - error map (Mapping)    -> invalid if any contained node is invalid
    """
    if result is None:
        return False
    if isinstance(result, FieldError):
        return not result.is_valid
    if isinstance(result, Mapping):
        return any(is_invalid(v) for v in result.values())
    return False


def related_is_invalid(related: Related) -> bool:
    """True if a nested error map or any per-element result is invalid."""
    if isinstance(related, list):
        return any(is_invalid(r) for r in related)
    return is_invalid(related)


def build_field_result(messages: List[str], related: Related) -> Optional[FieldError]:
    """Combine scalar messages and nested results into a field result (None if valid)."""
    is_valid = not messages and not related_is_invalid(related)
    if is_valid:
        return None
    return FieldError(is_valid=False, messages=list(messages), related=related)
