"""Decide whether a classified file is referenced by the registries."""

from __future__ import annotations

from collections.abc import Sequence

from extlint.constants import FileKind
from extlint.errors import ConfigurationError
from extlint.registry.schemas import ConnectorEntry, Manifest


def is_used(
    relative_path: str,
    kind: FileKind,
    connectors: Sequence[ConnectorEntry],
    manifest: Manifest | None,
) -> bool:
    """Return True if the file is referenced, False if it is orphaned.

    Comparison is an exact, case-sensitive match on the relative
    identifier. Raises ``ConfigurationError`` when a DOM-inject script
    has to be checked against a manifest with no resource list.
    """
    if kind is FileKind.CONNECTOR_SCRIPT:
        return is_connector_used(relative_path, connectors)
    if kind is FileKind.DOM_INJECT_SCRIPT:
        return is_dom_inject_script_used(relative_path, manifest)
    return True


def is_connector_used(
    relative_path: str, connectors: Sequence[ConnectorEntry]
) -> bool:
    return any(entry.js == relative_path for entry in connectors)


def is_dom_inject_script_used(
    relative_path: str, manifest: Manifest | None
) -> bool:
    resources = (
        manifest.web_accessible_resources if manifest is not None else None
    )
    if resources is None:
        msg = (
            "Manifest has no web_accessible_resources; "
            f"cannot check {relative_path}"
        )
        raise ConfigurationError(msg, source="web_accessible_resources")
    return relative_path in resources
