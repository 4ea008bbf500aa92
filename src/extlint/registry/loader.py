"""Load and validate the connector registry and the extension manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from extlint.errors import ConfigurationError
from extlint.registry.schemas import ConnectorEntry, Manifest

logger = logging.getLogger(__name__)

_CONNECTORS_ADAPTER = TypeAdapter(list[ConnectorEntry])


def load_connectors(path: Path) -> list[ConnectorEntry]:
    """Load ``connectors.json``, a top-level array of connector entries.

    Raises ``ConfigurationError`` if the file is missing, is not valid
    JSON, or an entry lacks a string ``js`` field.
    """
    raw = _read_json(path)
    try:
        connectors = _CONNECTORS_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        msg = f"Malformed connector registry {path}: {exc}"
        raise ConfigurationError(msg, source=str(path)) from exc

    logger.debug("Loaded %d connector entries from %s", len(connectors), path)
    return connectors


def load_manifest(path: Path) -> Manifest:
    """Load the extension manifest.

    A manifest without ``web_accessible_resources`` loads fine; the
    resolver rejects it only once a DOM-inject script needs it.
    """
    raw = _read_json(path)
    if not isinstance(raw, dict):
        msg = f"Malformed manifest {path}: expected a JSON object"
        raise ConfigurationError(msg, source=str(path))
    try:
        manifest = Manifest.model_validate(raw)
    except ValidationError as exc:
        msg = f"Malformed manifest {path}: {exc}"
        raise ConfigurationError(msg, source=str(path)) from exc

    if manifest.web_accessible_resources is None:
        logger.warning("Manifest %s has no web_accessible_resources", path)
    return manifest


def _read_json(path: Path) -> Any:
    if not path.exists():
        msg = f"File not found: {path}"
        raise ConfigurationError(msg, source=str(path))
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise ConfigurationError(msg, source=str(path)) from exc
    except OSError as exc:
        msg = f"Unable to read {path}: {exc}"
        raise ConfigurationError(msg, source=str(path)) from exc
