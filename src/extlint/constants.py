"""Shared constants used across modules.

StrEnum members are str-compatible, so diagnostics and log lines
render the plain value.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class FileKind(StrEnum):
    """Role of a script found in the connectors directory."""

    DOM_INJECT_SCRIPT = "dom_inject_script"
    CONNECTOR_SCRIPT = "connector_script"
    OTHER = "other"


# ── Detector ─────────────────────────────────────────────

# Prefix of every relative identifier compared against the registries
CONNECTORS_PREFIX = "connectors"

DOM_INJECT_SUFFIX = "dom-inject.js"

# Files that live next to connectors but are never referenced
SERVICE_FILES: frozenset[str] = frozenset({"dummy.js", ".eslintrc.yml"})

UNUSED_FILE_MESSAGE = "Unused file: {path}"

STREAMING_NOT_SUPPORTED = "Streaming not supported"

# ── CLI exit codes ───────────────────────────────────────

EXIT_OK = 0
EXIT_UNUSED_FILES = 1
EXIT_CONFIGURATION_ERROR = 2
EXIT_UNSUPPORTED_INPUT = 3
