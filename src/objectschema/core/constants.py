#!/usr/bin/env python3
"""
Core constants used across objectschema.

- Population modes: how undeclared input keys are treated.
- Reserved identifiers: field names that would collide with the Document API.
- File handling: supported schema/data extensions and default text encoding.
- Regular expressions: compiled patterns used by validators and normalizers.
"""

import re
from typing import Final

# --- Population modes --- #

MODE_STRICT: Final[str] = "strict"
MODE_RELAXED: Final[str] = "relaxed"

# Field names that would shadow Document methods or internal state
RESERVED_FIELDNAMES: Final[frozenset[str]] = frozenset({
    "schema",
    "define", "define_fields", "define_field",
    "cast_value",
    "populate", "populate_field",
    "purge", "purge_fields", "purge_field",
    "clear", "clear_field",
    "clone", "to_object", "keys",
    "validate", "validate_field", "is_valid",
})


# --- File handling --- #

# Supported schema file extensions
SUPPORTED_SCHEMA_EXT: Final[frozenset[str]] = frozenset({".json", ".yml", ".yaml"})

# Supported data file extensions (CLI input)
SUPPORTED_DATA_EXT: Final[frozenset[str]] = frozenset({".json", ".yml", ".yaml"})

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #

# Matches valid field names: leading letter/underscore, then letters/numbers/underscores
FIELDNAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
