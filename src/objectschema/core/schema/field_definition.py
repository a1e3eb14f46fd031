#!/usr/bin/env python3
"""
Purpose:
    Implements the FieldDefinition model: the per-field declaration of type,
    default value, get/set hooks and validation rules consumed by Document.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from objectschema.core.schema.field_type import FieldType


# --- Model --- #

class FieldDefinition(BaseModel):
    """
    One field of a document schema.

    Type declarations (`type`):
      - None                 : untyped, values stored as-is
      - FieldType / tag str  : scalar, e.g. FieldType.INTEGER or "integer"
      - Python type          : mapped through FieldType.from_python_type (str, int, ...)
      - Schema / mapping     : nested document (a mapping is loaded as a Schema)
      - [element]            : array of any of the above (one level only)

    Hooks:
      - default_value : value, or a producer; producers accepting a positional
                        argument receive the owning document
      - get           : get(value, document) applied on read
      - set           : set(value, document) applied on write, after casting

    Validations:
      ordered rule declarations, e.g. {"validator": "presence", "message": "is required"};
      a bare string is shorthand for {"validator": <string>}.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    type: Any = Field(default=None, description="Type descriptor (scalar tag, [element] or nested Schema).")
    default_value: Any = Field(
        default=None,
        validation_alias=AliasChoices("default_value", "default"),
        description="Default value or producer.",
    )
    get: Optional[Callable[..., Any]] = Field(default=None, description="Read transform get(value, document).")
    set: Optional[Callable[..., Any]] = Field(default=None, description="Write transform set(value, document).")
    validations: List[Dict[str, Any]] = Field(default_factory=list, description="Ordered rule declarations.")

    # --- Validators --- #

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v: Any) -> Any:
        """Normalize the type declaration (see class docstring)."""
        if isinstance(v, (list, tuple)):
            if len(v) != 1:
                raise ValueError("Array types must declare exactly one element type, e.g. ['string']")
            if isinstance(v[0], (list, tuple)):
                raise ValueError("Nested array types are not supported")
            return [_parse_item_type(v[0])]
        return _parse_item_type(v)

    @field_validator("validations", mode="before")
    @classmethod
    def _normalize_validations(cls, v: Any) -> Any:
        """Expand string shorthands and require a `validator` name on every rule."""
        if v is None:
            return []
        rules = []
        for rule in v:
            if isinstance(rule, str):
                rule = {"validator": rule}
            if not isinstance(rule, Mapping) or not rule.get("validator"):
                raise ValueError(f"Each validation must name a 'validator'; got {rule!r}")
            rules.append(dict(rule))
        return rules

    # --- Introspection --- #

    @property
    def is_array(self) -> bool:
        """True if the field holds a list of `item_type` values."""
        return isinstance(self.type, list)

    @property
    def item_type(self) -> Any:
        """Element type for arrays, else the declared type itself."""
        return self.type[0] if self.is_array else self.type

    @property
    def is_nested(self) -> bool:
        """True if the field (not its elements) holds a nested document."""
        return _is_schema(self.type)

    @property
    def item_is_nested(self) -> bool:
        """True if the field is an array of nested documents."""
        return self.is_array and _is_schema(self.item_type)


# --- Internals --- #

def _is_schema(t: Any) -> bool:
    from objectschema.core.schema.schema import Schema  # local import: schema.py imports this module
    return isinstance(t, Schema)


def _parse_item_type(v: Any) -> Any:
    from objectschema.core.schema.schema import Schema  # local import: schema.py imports this module

    if v is None or isinstance(v, Schema):
        return v
    if isinstance(v, Mapping):
        return Schema.from_dict(v)
    if isinstance(v, type):
        ft = FieldType.from_python_type(v)
        if ft is FieldType.INVALID:
            raise ValueError(f"Unsupported python type {v.__name__!r}")
        return ft
    ft = FieldType.parse(v)
    if ft is FieldType.INVALID:
        valid = ", ".join(t.value for t in FieldType if t is not FieldType.INVALID)
        raise ValueError(f"Unknown type {v!r}; valid types are: {valid}, a nested schema, or [element]")
    return ft
