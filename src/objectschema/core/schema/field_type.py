#!/usr/bin/env python3
"""
Purpose:
    Defines the FieldType enumeration of scalar type tags understood by the
    type caster, along with helpers for parsing, type mapping, and
    introspection of field types.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """
    Scalar type tags usable in a field definition.

    - string   : textual scalar
    - integer  : whole number
    - float    : floating point number
    - boolean  : true/false scalar
    - date     : calendar date (ISO 8601 input)
    - datetime : timestamp (ISO 8601 input)
    - any      : value is stored as-is
    - invalid  : unrecognized/unsupported type (returned by `parse`)

    Arrays and nested documents are not tags: they are declared as a
    one-element list and a nested `Schema` respectively.
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    ANY = "any"
    INVALID = "invalid"

    # --- Parsing helpers --- #

    @classmethod
    def parse(cls, value: str | FieldType | None) -> FieldType:
        """
        Coerce arbitrary input to a `FieldType`.

        - `FieldType` instance → returned as-is
        - `None` or unknown strings → `FieldType.INVALID`
        - strings are trimmed and lowercased before lookup

        Examples
        --------
        >>> FieldType.parse(" Integer ")
        <FieldType.INTEGER: 'integer'>
        >>> FieldType.parse("foo")
        <FieldType.INVALID: 'invalid'>
        """
        if isinstance(value, FieldType):
            return value
        if value is None:
            return cls.INVALID
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.INVALID

    @classmethod
    def try_parse(cls, value: str | FieldType | None) -> FieldType | None:
        """
        Like `parse`, but returns `None` for unknowns instead of `FieldType.INVALID`.
        """
        ft = cls.parse(value)
        return None if ft is cls.INVALID else ft

    @classmethod
    def from_python_type(cls, t: type[Any]) -> FieldType:
        """
        Best-effort mapping from a Python type object to a `FieldType`.
        Unknowns -> `FieldType.INVALID`.
        """
        if t is str:
            return cls.STRING
        if t is bool:
            return cls.BOOLEAN
        if t is int:
            return cls.INTEGER
        if t is float:
            return cls.FLOAT
        if t is datetime:
            return cls.DATETIME
        if t is date:
            return cls.DATE
        if t is object:
            return cls.ANY
        return cls.INVALID

    # --- Introspection helpers --- #

    def is_numeric(self) -> bool:
        """True if the field is numeric (`integer` or `float`)."""
        return self in {FieldType.INTEGER, FieldType.FLOAT}

    def is_temporal(self) -> bool:
        """True if the field holds a date or a datetime."""
        return self in {FieldType.DATE, FieldType.DATETIME}
