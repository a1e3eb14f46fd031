#!/usr/bin/env python3
from datetime import date, datetime

import pytest

from objectschema.core.schema.field_type import FieldType
from objectschema.core.schema.schema import Schema
from objectschema.core.typecast import cast


# --- Scalars --- #

@pytest.mark.parametrize("value,ft,expected", [
    ("abc", FieldType.STRING, "abc"),
    (12, FieldType.STRING, "12"),
    (1.5, FieldType.STRING, "1.5"),
    (True, FieldType.STRING, "true"),
    (date(2024, 1, 2), FieldType.STRING, "2024-01-02"),
    ({"a": 1}, FieldType.STRING, None),
    ("12", FieldType.INTEGER, 12),
    (3.0, FieldType.INTEGER, 3),
    ("1.5", FieldType.INTEGER, None),
    ("abc", FieldType.INTEGER, None),
    ("1.5", FieldType.FLOAT, 1.5),
    (2, FieldType.FLOAT, 2.0),
    ("abc", FieldType.FLOAT, None),
    ("true", FieldType.BOOLEAN, True),
    (0, FieldType.BOOLEAN, False),
    ("maybe", FieldType.BOOLEAN, None),
    ("2024-01-02", FieldType.DATE, date(2024, 1, 2)),
    (datetime(2024, 1, 2, 3, 4), FieldType.DATE, date(2024, 1, 2)),
    ("2024-01-02T03:04:05", FieldType.DATETIME, datetime(2024, 1, 2, 3, 4, 5)),
    ("not a date", FieldType.DATE, None),
])
def test_scalar_casts(value, ft, expected):
    assert cast(value, ft) == expected


@pytest.mark.parametrize("ft", list(t for t in FieldType if t is not FieldType.INVALID) + [None])
def test_none_stays_none(ft):
    assert cast(None, ft) is None


@pytest.mark.parametrize("ft", [None, FieldType.ANY])
def test_untyped_keeps_value(ft):
    obj = object()
    assert cast(obj, ft) is obj


def test_unsupported_descriptor_raises():
    with pytest.raises(TypeError, match="Unsupported"):
        cast(1, "integer")
    with pytest.raises(TypeError, match="Unsupported field type"):
        cast(1, FieldType.INVALID)


# --- Arrays --- #

def test_array_casts_each_element():
    assert cast(["1", 2, "x"], [FieldType.INTEGER]) == [1, 2, None]
    assert cast(("a", 1), [FieldType.STRING]) == ["a", "1"]


def test_array_wraps_single_value():
    assert cast("7", [FieldType.INTEGER]) == [7]


# --- Nested schema hook --- #

def test_nested_schema_uses_hook():
    child = Schema(fields={"name": {"type": "string"}})
    seen = []

    def hook(raw):
        seen.append(raw)
        return ("built", raw)

    assert cast({"name": "x"}, child, schema=hook) == ("built", {"name": "x"})
    assert cast([{"a": 1}, None], [child], schema=hook) == [("built", {"a": 1}), None]
    assert seen == [{"name": "x"}, {"a": 1}]


def test_nested_schema_without_hook_raises():
    child = Schema()
    with pytest.raises(TypeError, match="requires a 'schema' hook"):
        cast({}, child)
