"""Data flowing through the unused-file detector."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict

from extlint.detector.classifier import relative_identifier


@dataclass(frozen=True)
class SourceFile:
    """A file produced by the enumerator.

    ``contents`` is ``None`` for path-only files, ``bytes`` when the
    enumerator read the file, or a binary stream (which the detector
    rejects). Directory entries pass through the scan unchecked.
    """

    path: Path
    contents: bytes | BinaryIO | None = None
    is_directory: bool = False

    @property
    def relative_path(self) -> str:
        """Identifier compared against the registries (``connectors/<name>``)."""
        return relative_identifier(self.path)

    @property
    def is_stream(self) -> bool:
        return self.contents is not None and not isinstance(
            self.contents, bytes
        )


class Diagnostic(BaseModel):
    """One unused file, as reported to the build step."""

    model_config = ConfigDict(frozen=True)

    path: str
    message: str
