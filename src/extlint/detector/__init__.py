"""Unused file detector: classify each file, then check the registries."""

from extlint.detector.classifier import classify, relative_identifier
from extlint.detector.resolver import is_used
from extlint.detector.scanner import (
    collect_diagnostics,
    inspect_file,
    scan,
    scan_async,
)
from extlint.detector.schemas import Diagnostic, SourceFile

__all__ = [
    "Diagnostic",
    "SourceFile",
    "classify",
    "collect_diagnostics",
    "inspect_file",
    "is_used",
    "relative_identifier",
    "scan",
    "scan_async",
]
