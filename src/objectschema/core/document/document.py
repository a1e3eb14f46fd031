#!/usr/bin/env python3
"""
Purpose:
    Represents a live document materialized from a Schema. Fields are cast on
    assignment, populated selectively from raw input according to the schema
    mode, serialized back to plain data, and validated recursively (through
    nested documents and arrays of them) into a single error tree.
"""
from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional

from loguru import logger

from objectschema.core.document.accessor import FieldAccessor
from objectschema.core.schema.field_definition import FieldDefinition
from objectschema.core.schema.schema import Schema
from objectschema.core.typecast import cast
from objectschema.core.utils import call_producer
from objectschema.core.validation.result import ErrorMap, FieldError, build_field_result
from objectschema.core.validation.validator import Validator

# Definition used for relaxed-mode extras and fields without a declaration
_UNTYPED = FieldDefinition()


class Document:
    """
    A runtime instance of a Schema.

    Fields are reachable as attributes (`doc.name`) and as items
    (`doc["name"]`); `keys()` lists the fields currently materialized, in
    definition order.

    Typical use:
        >>> doc = Document(schema, {"name": "John", "age": "35"})
        >>> doc.age
        35
        >>> errors = asyncio.run(doc.validate())   # {} when valid
    """

    def __init__(self, schema: Schema, data: Optional[Mapping[str, Any]] = None):
        if not isinstance(schema, Schema):
            raise TypeError(f"{type(self).__name__} expects schema to be an instance of Schema class")

        object.__setattr__(self, "_schema", schema)
        object.__setattr__(self, "_validator", Validator(**schema.validator))
        object.__setattr__(self, "_accessors", {})
        object.__setattr__(self, "_values", {})

        self.purge()
        self.define()
        self.populate(data)

    @property
    def schema(self) -> Schema:
        """The (shared) schema this document was built from."""
        return self._schema

    # --- Definition --- #

    def define(self) -> "Document":
        """Install every schema field with its default value."""
        return self.define_fields(self._schema.fields)

    def define_fields(self, fields: Mapping[str, FieldDefinition]) -> "Document":
        for name, definition in fields.items():
            self.define_field(name, definition)
        return self

    def define_field(self, name: str, definition: Optional[FieldDefinition] = None) -> Any:
        """
        Install (or replace) the accessor for `name` and assign its default.

        A callable default is a producer: it is called with this document if it
        accepts a positional argument, else without arguments. Any other default
        is deep-copied so documents never share a mutable default.
        """
        definition = _UNTYPED if definition is None else definition
        self._accessors[name] = FieldAccessor(name, definition)

        default = definition.default_value
        self[name] = call_producer(default, self) if callable(default) else copy.deepcopy(default)
        return self[name]

    def cast_value(self, value: Any, definition: FieldDefinition) -> Any:
        """
        Cast `value` to the field's declared type. Nested schemas (and array
        elements of a nested schema) become new documents of this class.
        """
        def build(raw: Any) -> "Document":
            if isinstance(raw, Document):
                raw = raw.to_object()
            return type(self)(definition.item_type, raw)

        return cast(value, definition.type, schema=build)

    # --- Population --- #

    def populate(self, data: Optional[Mapping[str, Any]] = None) -> "Document":
        """
        Assign fields from `data` in key order, following the schema mode.

        Raises:
            TypeError: if `data` is not a mapping (or a Document).
        """
        if data is None:
            data = {}
        if isinstance(data, Document):
            data = data.to_object()
        if not isinstance(data, Mapping):
            raise TypeError(f"Only a mapping can populate a {type(self).__name__}")

        for name, value in data.items():
            self.populate_field(name, value)
        return self

    def populate_field(self, name: str, value: Any) -> Any:
        """
        Assign one input key. Strict documents silently skip undeclared keys;
        relaxed documents assign everything.
        """
        if not self._schema.is_relaxed and name not in self._schema.fields:
            logger.debug(f"{type(self).__name__}: ignoring undeclared field {name!r} (strict mode)")
            return None
        self[name] = value
        return self[name]

    # --- Purge / Clear --- #

    def purge(self) -> "Document":
        """Remove every field (shape change)."""
        return self.purge_fields(self.keys())

    def purge_fields(self, names: Iterable[str] = ()) -> "Document":
        for name in list(names):
            self.purge_field(name)
        return self

    def purge_field(self, name: str) -> bool:
        """Remove one field and its value. Returns False if it was not present."""
        self._values.pop(name, None)
        return self._accessors.pop(name, None) is not None

    def clear(self) -> "Document":
        """Reset every field to None through its setter (values change, shape does not)."""
        for name in self.keys():
            self.clear_field(name)
        return self

    def clear_field(self, name: str) -> Any:
        self[name] = None
        return self[name]

    # --- Copy / Serialize --- #

    def clone(self) -> "Document":
        """Deep structural copy: same class and schema, populated from `to_object()`."""
        return type(self)(self._schema, self.to_object())

    def to_object(self) -> Dict[str, Any]:
        """Plain data of every present field, recursing into documents and lists."""
        return {name: _value_to_object(self[name]) for name in self.keys()}

    # --- Validation --- #

    async def validate(self) -> ErrorMap:
        """
        Validate every present field.

        Returns:
            `{name: FieldError}` for invalid fields only (empty dict = valid).

        Raises:
            Whatever a rule or nested validation raises; no partial results.
        """
        errors: ErrorMap = {}
        for name in self.keys():
            error = await self.validate_field(self[name], self._schema.fields.get(name))
            if error is not None:
                errors[name] = error

        logger.debug(f"{type(self).__name__}: validated {len(self)} field(s), {len(errors)} invalid")
        return errors

    async def validate_field(self, value: Any, definition: Optional[FieldDefinition] = None) -> Optional[FieldError]:
        """
        Validate one value against a field definition.

        Scalar rules run on the value itself. Nested documents contribute their
        own error map as `related`; arrays contribute one entry per element
        (nested error maps, or element results produced by re-running this
        field's rules on each element).
        """
        definition = _UNTYPED if definition is None else definition
        messages = await self._validator.validate(value, definition.validations, context=self)

        related: Any = None
        if definition.is_nested and value is not None:
            related = await value.validate()
        elif definition.is_array and isinstance(value, list):
            related = []
            for item in value:
                if definition.item_is_nested:
                    related.append(await item.validate() if item is not None else None)
                else:
                    related.append(await self.validate_field(item, definition))

        return build_field_result(messages, related)

    async def is_valid(self) -> bool:
        """True if `validate()` reports no invalid field."""
        return not await self.validate()

    # --- Mapping-style access --- #

    def keys(self) -> List[str]:
        """Names of the fields currently present."""
        return list(self._accessors)

    def __getitem__(self, name: str) -> Any:
        accessor = self._accessors[name]
        return accessor.read(self._values.get(name), self)

    def __setitem__(self, name: str, value: Any) -> None:
        accessor = self._accessors.get(name)
        if accessor is None:
            accessor = self._install_missing(name)
        self._values[name] = accessor.write(value, self)

    def __delitem__(self, name: str) -> None:
        if not self.purge_field(name):
            raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return name in self._accessors

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._accessors)

    # --- Attribute-style access --- #

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; private names never map to fields
        if name.startswith("_") or name not in self.__dict__.get("_accessors", {}):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return self[name]

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or isinstance(getattr(type(self), name, None), property):
            object.__setattr__(self, name, value)
            return
        self[name] = value

    def __delattr__(self, name: str) -> None:
        if name.startswith("_"):
            object.__delattr__(self, name)
            return
        if not self.purge_field(name):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_object()!r})"

    # --- Internals --- #

    def _install_missing(self, name: str) -> FieldAccessor:
        """
        Accessor for a name assigned without one: a purged schema field gets its
        declaration back, a relaxed document gets an untyped field, a strict
        document refuses.
        """
        definition = self._schema.fields.get(name)
        if definition is None and not self._schema.is_relaxed:
            raise AttributeError(f"{type(self).__name__} has no field {name!r} and its schema is strict")
        accessor = FieldAccessor(name, _UNTYPED if definition is None else definition)
        self._accessors[name] = accessor
        return accessor


# --- Internals --- #

def _value_to_object(value: Any) -> Any:
    to_object = getattr(value, "to_object", None)
    if callable(to_object):
        return to_object()
    if isinstance(value, list):
        return [_value_to_object(v) for v in value]
    return value
