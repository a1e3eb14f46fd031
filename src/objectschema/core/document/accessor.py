#!/usr/bin/env python3
"""
Purpose:
    Per-field accessor installed on a Document. Mediates reads and writes of
    one field: casting on write, then the optional `set` hook; the optional
    `get` hook on read. The coerced value itself lives in the document's
    value table, indexed by field name.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from objectschema.core.schema.field_definition import FieldDefinition

if TYPE_CHECKING:
    from objectschema.core.document.document import Document


class FieldAccessor:
    """Read/write mediator for a single field of a single document."""

    __slots__ = ("name", "definition")

    def __init__(self, name: str, definition: FieldDefinition):
        self.name = name
        self.definition = definition

    def read(self, raw: Any, document: "Document") -> Any:
        """Return the visible value for the stored `raw` value."""
        if self.definition.get is not None:
            return self.definition.get(raw, document)
        return raw

    def write(self, value: Any, document: "Document") -> Any:
        """Return the value to store when `value` is assigned."""
        raw = document.cast_value(value, self.definition)
        if self.definition.set is not None:
            raw = self.definition.set(raw, document)
        return raw

    def __repr__(self) -> str:
        return f"<FieldAccessor {self.name!r} type={self.definition.type!r}>"
