"""Draft-07 validation of compiled schemas."""

from __future__ import annotations

import logging
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

logger = logging.getLogger(__name__)


def schema_errors(schema: dict[str, Any]) -> list[str]:
    """Return the reasons ``schema`` is not a valid draft-07 schema."""
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as exc:
        path = "/".join(str(part) for part in exc.absolute_path)
        return [f"{path or '<root>'}: {exc.message}"]
    return []


def is_valid_schema(schema: dict[str, Any]) -> bool:
    errors = schema_errors(schema)
    for error in errors:
        logger.debug("%s rejected: %s", schema.get("title", "<untitled>"), error)
    return not errors
