"""File and serialization helpers."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

__all__ = ["read_text", "read_yaml", "dumps_json"]


def read_text(path: str | Path) -> str:
    """Read ``path`` as UTF-8 text."""

    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except FileNotFoundError:  # pragma: no cover - upstream handling
        raise
    except (OSError, UnicodeDecodeError) as exc:
        raise RuntimeError(f"Failed to read '{file_path}': {exc}") from exc


def read_yaml(path: str | Path) -> Dict[str, Any]:
    """Load a YAML mapping from ``path``; an empty file yields ``{}``."""

    content = read_text(path)
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in '{path}': {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of '{path}', got {type(data).__name__}")
    return data


def dumps_json(obj: Any) -> str:
    """Serialize ``obj`` with deterministic formatting."""

    return json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True)
