#!/usr/bin/env python3
"""
Purpose:
    Defines the Schema model: an immutable mapping of field names to
    FieldDefinitions plus the population mode and validator configuration
    shared by every Document built from it.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from objectschema.core import constants as C
from objectschema.core.schema.field_definition import FieldDefinition
from objectschema.core.utils import is_valid_fieldname_pattern, merge_dicts


# --- Model --- #

class Schema(BaseModel):
    """
    Descriptor of a document type.

    Fields:
    -------
    fields:
        ordered mapping of field name to `FieldDefinition`
    mode:
        "strict" (populate ignores undeclared keys) or "relaxed" (assigns them)
    validator:
        configuration for the rule executor (`validators` for custom rules,
        `fail_fast` to stop at the first failing rule)

    Notes:
    ------
    Nested schemas declared inline as mappings inherit the parent's `mode`
    unless they set their own.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    fields: Dict[str, FieldDefinition] = Field(default_factory=dict)
    mode: Literal["strict", "relaxed"] = Field(default=C.MODE_STRICT)
    validator: Dict[str, Any] = Field(default_factory=dict)

    # --- Convenience --- #

    @property
    def is_relaxed(self) -> bool:
        """True if undeclared keys are assigned during population."""
        return self.mode == C.MODE_RELAXED

    @property
    def field_names(self) -> list[str]:
        """Declared field names in definition order."""
        return list(self.fields.keys())

    # --- Normalization / Validation --- #

    @model_validator(mode="before")
    @classmethod
    def _prepare_fields(cls, data: Any) -> Any:
        """
        Expand shorthand field declarations (`{"name": "string"}`) and push the
        parent mode and validator config down into inline nested schemas.
        """
        if not isinstance(data, Mapping) or not isinstance(data.get("fields"), Mapping):
            return data
        mode = data.get("mode", C.MODE_STRICT)
        validator = data.get("validator") or {}
        fields = {}
        for name, definition in data["fields"].items():
            if not isinstance(definition, (Mapping, FieldDefinition)):
                definition = {"type": definition}
            if isinstance(definition, Mapping):
                definition = {**definition, "type": _inherit(definition.get("type"), mode, validator)}
            fields[name] = definition
        return {**data, "fields": fields}

    @field_validator("fields")
    @classmethod
    def _check_fieldnames(cls, v: Dict[str, FieldDefinition]) -> Dict[str, FieldDefinition]:
        """Reject names that are malformed, private, or shadow the Document API."""
        for name in v:
            if not is_valid_fieldname_pattern(name):
                raise ValueError(
                    f"The fieldname {name!r} must match the pattern {C.FIELDNAME_ALLOWED_RE.pattern!r}"
                )
            if name.startswith("_"):
                raise ValueError(f"The fieldname {name!r} must not start with an underscore")
            if name in C.RESERVED_FIELDNAMES:
                raise ValueError(f"{name!r} is a reserved name and cannot be used")
        return v

    # --- Loading --- #

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Schema":
        """Build a Schema from plain data (e.g. parsed JSON/YAML)."""
        return cls.model_validate(dict(data))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Schema":
        """
        Load a Schema from a JSON or YAML file.

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: if the file extension is not supported
            ValidationError: if the payload fails model validation
        """
        return cls.from_dict(cls.read_file(path))

    @staticmethod
    def read_file(path: Union[str, Path]) -> Dict[str, Any]:
        """Parse a JSON or YAML schema file into plain data without building the model."""
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"The file {str(p)!r} does not exist")
        suffix = p.suffix.lower()
        if suffix not in C.SUPPORTED_SCHEMA_EXT:
            raise ValueError(
                f"Invalid schema file extension for {p.name!r}; expected one of {sorted(C.SUPPORTED_SCHEMA_EXT)}"
            )
        text = p.read_text(encoding=C.DEFAULT_TEXT_ENCODING)
        data = json.loads(text) if suffix == ".json" else (yaml.safe_load(text) or {})
        if not isinstance(data, Mapping):
            raise ValueError(f"Schema file {p.name!r} must contain a mapping")
        return dict(data)


# --- Internals --- #

def _inherit(type_decl: Any, mode: str, validator: Mapping[str, Any]) -> Any:
    """
    Copy `mode` and the validator config into inline nested schema mappings
    (also inside array declarations). The nested schema's own settings win.
    """
    if isinstance(type_decl, Mapping):
        nested = {"mode": mode, **type_decl}
        if validator:
            nested["validator"] = merge_dicts(dict(validator), type_decl.get("validator") or {})
        return nested
    if isinstance(type_decl, (list, tuple)):
        return [_inherit(t, mode, validator) for t in type_decl]
    return type_decl
