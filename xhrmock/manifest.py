"""Stub manifests: JSON files describing a canned response."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from jsonschema import ValidationError, validate

from .errors import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "body": {"type": ["string", "null"]},
        "content_type": {"type": "string", "minLength": 1},
        "status": {"type": "integer", "minimum": 100, "maximum": 599},
        "headers": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
    "required": ["body"],
    "additionalProperties": False,
}


def load_json(path: str) -> Any:
    """Load JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def validate_manifest(data: Any, source: str = "<manifest>") -> Dict[str, Any]:
    """Check ``data`` against :data:`MANIFEST_SCHEMA` and return it."""
    try:
        validate(instance=data, schema=MANIFEST_SCHEMA)
    except ValidationError as exc:
        logger.warning("Invalid stub manifest %s: %s", source, exc.message)
        raise ManifestError(f"{source}: {exc.message}") from exc
    return data


def load_manifest(path: str) -> Dict[str, Any]:
    """Read and validate the stub manifest at ``path``."""
    try:
        data = load_json(path)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read stub manifest %s: %s", path, exc)
        raise ManifestError(f"{path}: {exc}") from exc
    return validate_manifest(data, source=str(path))


__all__ = ["MANIFEST_SCHEMA", "load_json", "load_manifest", "validate_manifest"]
