"""Connector registry and manifest, typed and validated at load time."""

from extlint.registry.loader import load_connectors, load_manifest
from extlint.registry.schemas import ConnectorEntry, Manifest

__all__ = [
    "ConnectorEntry",
    "Manifest",
    "load_connectors",
    "load_manifest",
]
