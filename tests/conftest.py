"""Shared test fixtures — registries and extension source trees."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest

from extlint.config import Settings
from extlint.registry.schemas import ConnectorEntry, Manifest

FIXTURE_SRC = Path(__file__).resolve().parent / "fixtures" / "extension" / "src"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's EXTLINT_* variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("EXTLINT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def connectors() -> list[ConnectorEntry]:
    return [
        ConnectorEntry(js="connectors/bugs.js"),
        ConnectorEntry(js="connectors/youtube.js"),
    ]


@pytest.fixture
def manifest() -> Manifest:
    return Manifest(
        web_accessible_resources=("connectors/youtube-dom-inject.js",)
    )


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    """A writable copy of the fixture extension sources."""
    dest = tmp_path / "src"
    shutil.copytree(FIXTURE_SRC, dest)
    return dest


@pytest.fixture
def settings(src_dir: Path) -> Settings:
    return Settings(src_dir=src_dir, _env_file=None)  # type: ignore[call-arg]

