"""Enumerate candidate scripts in the connectors directory."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import pathspec

from extlint.detector.schemas import SourceFile
from extlint.errors import ConfigurationError

logger = logging.getLogger(__name__)


def iter_source_files(
    directory: Path,
    include_patterns: Sequence[str] = ("*.js",),
    *,
    read: bool = True,
) -> Iterator[SourceFile]:
    """Yield the files directly inside ``directory`` matching a pattern.

    * Non-recursive; subdirectories are not entered.
    * Patterns use gitignore syntax via ``pathspec``.
    * Entries are yielded in sorted order so diagnostics are stable.
    * Symlinks that resolve outside ``directory`` are skipped.
    * Symlinks inside ``directory`` keep their own name, not the target's.
    * With ``read=False`` files carry no contents (path only).
    """
    root = Path(directory)
    if not root.is_dir():
        msg = f"Connectors directory does not exist: {root}"
        raise ConfigurationError(msg, source=str(root))

    spec = pathspec.PathSpec.from_lines("gitignore", include_patterns)
    resolved_root = root.resolve()
    for item in sorted(root.iterdir()):
        if item.is_symlink():
            resolved = item.resolve()
            if not resolved.is_relative_to(resolved_root):
                logger.debug("Skipping symlink outside root: %s", item)
                continue
        if not item.is_file():
            continue
        if not spec.match_file(item.name):
            continue
        contents = item.read_bytes() if read else None
        yield SourceFile(path=resolved_root / item.name, contents=contents)
