#!/usr/bin/env python3
from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

import yaml
from jinja2 import TemplateError
from loguru import logger
from pydantic import ValidationError

from objectschema.core.constants import DEFAULT_TEXT_ENCODING, SUPPORTED_DATA_EXT
from objectschema.core.document.document import Document
from objectschema.core.formatting import format_errors_simple
from objectschema.core.schema.schema import Schema
from objectschema.core.utils import merge_dicts
from objectschema.core.validation.rules import BUILTIN_RULES


def find_all_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand files and directories (non-recursive) into supported data files."""
    files: list[Path] = []
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            files.extend(c for c in p.iterdir() if c.is_file() and c.suffix.lower() in SUPPORTED_DATA_EXT)
        else:
            files.append(p)
    # stable, de-duplicated order
    return sorted(set(files))


def load_data_file(path: Path) -> Any:
    """Parse a JSON or YAML data file."""
    text = path.read_text(encoding=DEFAULT_TEXT_ENCODING)
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text) or {}


def load_schema(path: Path, config: Dict[str, Any]) -> Schema:
    """
    Load a schema; config `validator` settings sit beneath the schema's own
    and reach inline nested schemas too.

    Raises:
        ValueError: if a field declares a validator that no rule provides
    """
    data = Schema.read_file(path)
    data["validator"] = merge_dicts(config.get("validator", {}), data.get("validator") or {})
    schema = Schema.from_dict(data)
    check_validator_names(schema)
    return schema


def check_validator_names(schema: Schema, prefix: str = "") -> None:
    """Raise ValueError naming the first field whose validations reference an unknown rule."""
    known = set(BUILTIN_RULES) | set(schema.validator.get("validators") or {})
    for name, definition in schema.fields.items():
        path = f"{prefix}{name}"
        for rule in definition.validations:
            if rule["validator"] not in known:
                raise ValueError(f"Unknown validator {rule['validator']!r} on field {path!r}")
        if definition.is_nested or definition.item_is_nested:
            check_validator_names(definition.item_type, prefix=f"{path}.")


def validate_file(file_path: Path, schema: Schema) -> Tuple[bool, str, List[str]]:
    """
    Returns: (is_valid, summary_message, error_list)
    """
    if file_path.suffix.lower() not in SUPPORTED_DATA_EXT:
        return False, f"{file_path}: Unsupported file type", []
    try:
        data = load_data_file(file_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return False, f"{file_path}: Failed to read data ({e})", []

    try:
        doc = Document(schema, data)
    except TypeError as e:
        return False, f"{file_path}: Invalid data shape", [str(e)]

    try:
        errors = asyncio.run(doc.validate())
    except (LookupError, TemplateError) as e:
        return False, f"{file_path}: Validation could not run", [str(e)]
    if errors:
        return False, f"{file_path}: Validation Failed", format_errors_simple(errors)
    return True, f"{file_path}: Validation Passed", []


def validate(args, config: Dict[str, Any]) -> int:
    try:
        schema = load_schema(Path(args.schema), config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        print(f"Failed to load schema: {e}")
        return 1

    files = find_all_files(args.files)
    if not files:
        print("No data files found.")
        return 1

    success = 0
    for fp in files:
        ok, msg, errs = validate_file(fp, schema)
        logger.debug(msg)
        if ok and not args.verbose:
            success += 1
            continue
        print(f"\n{msg}")
        for e in errs:
            print(f"  - {e}")
        if ok:
            success += 1

    total = len(files)
    print(f"\nValidation complete: {success}/{total} passed.")
    return 0 if success == total else 1


def register(subparser):
    parser = subparser.add_parser("validate", help="Validate JSON/YAML data files against a schema.")
    parser.add_argument("files", nargs="+", help="Files or directories to validate.")
    parser.add_argument("--schema", "-s", required=True, help="Schema file (.json/.yml/.yaml).")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show all results, not only errors.")
    parser.set_defaults(func=validate)
