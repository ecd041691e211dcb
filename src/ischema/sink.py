"""Validate-then-persist for compiled schemas."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import SchemaRejectedError
from .validate import schema_errors

logger = logging.getLogger(__name__)


def dump_schema(schema: dict[str, Any]) -> str:
    """Render ``schema`` as tab-indented JSON."""
    return json.dumps(schema, indent="\t", ensure_ascii=False)


class SchemaSink:
    """Writes each accepted schema to ``<out_dir>/<title>.json``."""

    def __init__(self, out_dir: str | Path, validate: bool = True) -> None:
        self.out_dir = Path(out_dir)
        self.validate = validate
        self.written: list[Path] = []

    def path_for(self, schema: dict[str, Any]) -> Path:
        return self.out_dir / f"{schema['title']}.json"

    def emit(self, schema: dict[str, Any]) -> Path:
        """Validate ``schema`` and write it out.

        Raises :class:`SchemaRejectedError` before anything is written when
        validation fails.
        """
        title = str(schema.get("title", ""))
        if self.validate:
            errors = schema_errors(schema)
            if errors:
                raise SchemaRejectedError(title, errors[0])
        path = self.path_for(schema)
        path.write_text(dump_schema(schema), encoding="utf-8")
        self.written.append(path)
        logger.info("Wrote %s", path)
        return path
