"""Classify connector-directory files by role."""

from __future__ import annotations

from pathlib import PurePath, PurePosixPath

from extlint.constants import (
    CONNECTORS_PREFIX,
    DOM_INJECT_SUFFIX,
    SERVICE_FILES,
    FileKind,
)


def relative_identifier(path: PurePath | str) -> str:
    """Return ``connectors/<basename>`` for an absolute file path."""
    return f"{CONNECTORS_PREFIX}/{PurePath(path).name}"


def classify(relative_path: str) -> FileKind:
    """Return the :class:`FileKind` of a relative identifier.

    The DOM-inject suffix is checked before the service-file set, so a
    service file name ending in ``dom-inject.js`` is still a DOM-inject
    script. Anything else defaults to a connector script and therefore
    has to be referenced somewhere.
    """
    if relative_path.endswith(DOM_INJECT_SUFFIX):
        return FileKind.DOM_INJECT_SCRIPT
    if PurePosixPath(relative_path).name in SERVICE_FILES:
        return FileKind.OTHER
    return FileKind.CONNECTOR_SCRIPT
