#!/usr/bin/env python3
import asyncio

from objectschema.core.document.document import Document
from objectschema.core.formatting import errors_to_dict, format_errors_simple
from objectschema.core.schema.schema import Schema
from objectschema.core.validation.result import FieldError


def _errors():
    child = Schema(fields={"name": {"type": "string", "validations": ["presence"]}})
    schema = Schema(fields={
        "title": {"type": "string", "validations": ["presence"]},
        "child": {"type": child},
        "children": {"type": [child]},
        "tags": {"type": ["string"], "validations": [{"validator": "length", "max": 2, "message": "too long"}]},
    })
    doc = Document(schema, {"child": {}, "children": [{"name": "a"}, {}], "tags": ["ok", "long"]})
    return asyncio.run(doc.validate())


# --- format_errors_simple --- #

def test_format_errors_simple_paths():
    assert format_errors_simple(_errors()) == [
        "title: is required",
        "child.name: is required",
        "children[1].name: is required",
        "tags[1]: too long",
    ]


def test_format_errors_simple_empty():
    assert format_errors_simple({}) == []


def test_format_errors_simple_with_prefix():
    errors = {"x": FieldError(is_valid=False, messages=["bad", "worse"])}
    assert format_errors_simple(errors, prefix="root") == ["root.x: bad", "root.x: worse"]


# --- errors_to_dict --- #

def test_errors_to_dict_is_plain_data():
    data = errors_to_dict(_errors())
    assert data["title"] == {"is_valid": False, "messages": ["is required"], "related": None}
    assert data["child"]["related"]["name"]["messages"] == ["is required"]
    assert data["children"]["related"][0] == {}
    assert data["tags"]["related"][0] is None
    assert data["tags"]["related"][1]["messages"] == ["too long"]
