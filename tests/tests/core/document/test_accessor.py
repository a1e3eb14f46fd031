#!/usr/bin/env python3
from objectschema.core.document.accessor import FieldAccessor
from objectschema.core.document.document import Document
from objectschema.core.schema.field_definition import FieldDefinition
from objectschema.core.schema.schema import Schema


def test_write_casts_then_applies_set_hook():
    doc = Document(Schema())
    acc = FieldAccessor("n", FieldDefinition(type="integer", set=lambda v, d: v * 2))
    assert acc.write("21", doc) == 42


def test_read_applies_get_hook_only_when_declared():
    doc = Document(Schema())
    plain = FieldAccessor("n", FieldDefinition(type="integer"))
    hooked = FieldAccessor("n", FieldDefinition(type="integer", get=lambda v, d: (v, d)))
    assert plain.read(5, doc) == 5
    assert hooked.read(5, doc) == (5, doc)


def test_repr_names_field():
    assert "'age'" in repr(FieldAccessor("age", FieldDefinition(type="integer")))
