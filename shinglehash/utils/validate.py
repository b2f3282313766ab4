"""Schema validation helpers."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schema"
SWEEP_SCHEMA_PATH = SCHEMA_DIR / "sweep.schema.json"


class SchemaValidationError(RuntimeError):
    """Raised when a sweep configuration fails JSON Schema validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@lru_cache(maxsize=1)
def _load_schema() -> Dict[str, Any]:
    with SWEEP_SCHEMA_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=1)
def _build_validator() -> jsonschema.Draft7Validator:
    return jsonschema.Draft7Validator(_load_schema())


def validate_sweep_config(config: Dict[str, Any]) -> None:
    """Validate ``config`` or raise :class:`SchemaValidationError`."""

    errors = sorted(_build_validator().iter_errors(config), key=lambda err: [str(part) for part in err.path])
    if errors:
        formatted = "\n".join(
            f"{'/'.join(str(x) for x in error.path)}: {error.message}" if error.path else error.message
            for error in errors
        )
        raise SchemaValidationError(formatted)
