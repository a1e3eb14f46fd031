#!/usr/bin/env python3
"""
Purpose:
    Converts raw values to declared field types. Scalars are coerced through
    cached Pydantic TypeAdapters (lax mode); arrays are cast element-wise; and
    nested-document construction is delegated back to the caller through a
    `schema` hook so this module never needs to know about Document.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Dict, Optional

from pydantic import TypeAdapter, ValidationError

from objectschema.core.schema.field_type import FieldType
from objectschema.core.schema.schema import Schema


# Hook building a nested document from a raw value: schema(value) -> Document
SchemaHook = Callable[[Any], Any]


# --- Adapter registry --- #

_ADAPTERS: Dict[FieldType, TypeAdapter] = {
    FieldType.INTEGER: TypeAdapter(int),
    FieldType.FLOAT: TypeAdapter(float),
    FieldType.BOOLEAN: TypeAdapter(bool),
    FieldType.DATE: TypeAdapter(date),
    FieldType.DATETIME: TypeAdapter(datetime),
}


# --- Public API --- #

def cast(value: Any, type_: Any, *, schema: Optional[SchemaHook] = None) -> Any:
    """
    Cast `value` to the type descriptor `type_`.

    Rules:
        - `None` is returned unchanged for every type
        - untyped (`None`) and `FieldType.ANY` keep the value as-is
        - `[element]` casts each item; a non-list value becomes a one-item list
        - a nested `Schema` is handed to the `schema` hook
        - scalars that cannot be coerced become `None`

    Raises:
        TypeError: if a nested schema is declared but no `schema` hook is given,
                   or if the type descriptor is not understood
    """
    if value is None:
        return None

    if isinstance(type_, list):
        items = value if isinstance(value, (list, tuple)) else [value]
        return [cast(item, type_[0], schema=schema) for item in items]

    if isinstance(type_, Schema):
        if schema is None:
            raise TypeError("Casting to a nested schema requires a 'schema' hook")
        return schema(value)

    if type_ is None or type_ is FieldType.ANY:
        return value

    if isinstance(type_, FieldType):
        return _cast_scalar(value, type_)

    raise TypeError(f"Unsupported type descriptor {type_!r}")


# --- Internals --- #

def _cast_scalar(value: Any, ft: FieldType) -> Any:
    if ft is FieldType.STRING:
        return _to_string(value)
    if ft is FieldType.DATE and isinstance(value, datetime):
        return value.date()
    adapter = _ADAPTERS.get(ft)
    if adapter is None:
        raise TypeError(f"Unsupported field type {ft.value!r}")
    try:
        return adapter.validate_python(value)
    except ValidationError:
        return None


def _to_string(value: Any) -> Optional[str]:
    """Stringify scalars; containers and documents have no string form and become None."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)):
        return str(value)
    return None
