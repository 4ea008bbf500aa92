"""Pass-through scan that reports every unused file."""

from __future__ import annotations

import logging
from collections.abc import (
    AsyncIterable,
    AsyncIterator,
    Callable,
    Iterable,
    Iterator,
    Sequence,
)

from extlint.constants import STREAMING_NOT_SUPPORTED, UNUSED_FILE_MESSAGE
from extlint.detector.classifier import classify
from extlint.detector.resolver import is_used
from extlint.detector.schemas import Diagnostic, SourceFile
from extlint.errors import UnsupportedInputError
from extlint.registry.schemas import ConnectorEntry, Manifest

logger = logging.getLogger(__name__)

OnViolation = Callable[[Diagnostic], None]


def inspect_file(
    file: SourceFile,
    connectors: Sequence[ConnectorEntry],
    manifest: Manifest | None,
) -> Diagnostic | None:
    """Return a diagnostic if ``file`` is unused, ``None`` otherwise."""
    if file.is_directory:
        return None
    if file.is_stream:
        raise UnsupportedInputError(
            STREAMING_NOT_SUPPORTED, path=str(file.path)
        )

    rel_path = file.relative_path
    kind = classify(rel_path)
    logger.debug("%s classified as %s", rel_path, kind)
    if is_used(rel_path, kind, connectors, manifest):
        return None
    return Diagnostic(
        path=rel_path, message=UNUSED_FILE_MESSAGE.format(path=rel_path)
    )


def scan(
    files: Iterable[SourceFile],
    connectors: Sequence[ConnectorEntry],
    manifest: Manifest | None,
    on_violation: OnViolation | None = None,
) -> Iterator[SourceFile]:
    """Yield every file unchanged, reporting unused ones on the way.

    ``on_violation`` is called once per unused file, in input order.
    The scan never stops at the first violation; configuration and
    unsupported-input errors propagate.
    """
    for file in files:
        _report(inspect_file(file, connectors, manifest), on_violation)
        yield file


async def scan_async(
    files: AsyncIterable[SourceFile],
    connectors: Sequence[ConnectorEntry],
    manifest: Manifest | None,
    on_violation: OnViolation | None = None,
) -> AsyncIterator[SourceFile]:
    """Same as :func:`scan` for enumerators that deliver files async."""
    async for file in files:
        _report(inspect_file(file, connectors, manifest), on_violation)
        yield file


def collect_diagnostics(
    files: Iterable[SourceFile],
    connectors: Sequence[ConnectorEntry],
    manifest: Manifest | None,
) -> list[Diagnostic]:
    """Drain :func:`scan` and return the diagnostics in input order."""
    diagnostics: list[Diagnostic] = []
    for _ in scan(files, connectors, manifest, diagnostics.append):
        pass
    return diagnostics


def _report(
    diagnostic: Diagnostic | None, on_violation: OnViolation | None
) -> None:
    if diagnostic is None:
        return
    logger.debug(diagnostic.message)
    if on_violation is not None:
        on_violation(diagnostic)
