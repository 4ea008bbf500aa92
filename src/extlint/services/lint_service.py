"""Unused-file lint task: settings to registries to scan."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from extlint.config import Settings
from extlint.detector.scanner import scan
from extlint.detector.schemas import Diagnostic
from extlint.registry.loader import load_connectors, load_manifest
from extlint.walker import iter_source_files

logger = logging.getLogger(__name__)


@dataclass
class UnusedFilesReport:
    """Outcome of one unused-file run."""

    diagnostics: list[Diagnostic] = field(
        default_factory=lambda: list[Diagnostic]()
    )
    scanned: int = 0
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def run_unused_files(settings: Settings | None = None) -> UnusedFilesReport:
    """Check that every connector-directory script is referenced.

    Raises ``ConfigurationError`` if the registry or manifest is
    missing or malformed, or the connectors directory does not exist.
    """
    cfg = settings or Settings()
    start = time.monotonic()

    connectors = load_connectors(cfg.connectors_registry_path)
    manifest = load_manifest(cfg.manifest_path)

    report = UnusedFilesReport()
    files = iter_source_files(
        cfg.connectors_path, cfg.include_patterns, read=False
    )
    for _ in scan(files, connectors, manifest, report.diagnostics.append):
        report.scanned += 1

    report.duration_ms = (time.monotonic() - start) * 1000
    logger.info(
        "Scanned %d files in %s: %d unused (%.0fms)",
        report.scanned,
        cfg.connectors_path,
        len(report.diagnostics),
        report.duration_ms,
    )
    return report
