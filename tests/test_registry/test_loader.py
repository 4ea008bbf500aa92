"""Tests for loading the connector registry and the manifest."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from extlint.errors import ConfigurationError
from extlint.registry.loader import load_connectors, load_manifest
from extlint.registry.schemas import ConnectorEntry, Manifest


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadConnectors:
    def test_loads_fixture_registry(self, src_dir: Path) -> None:
        entries = load_connectors(src_dir / "connectors.json")
        assert [e.js for e in entries] == [
            "connectors/bugs.js",
            "connectors/youtube.js",
        ]

    def test_extra_fields_preserved(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "connectors.json",
            [{"label": "Bugs", "js": "connectors/bugs.js", "id": "bugs"}],
        )
        entry = load_connectors(path)[0]
        assert isinstance(entry, ConnectorEntry)
        assert entry.model_extra == {"label": "Bugs", "id": "bugs"}

    def test_empty_registry(self, tmp_path: Path) -> None:
        assert load_connectors(_write(tmp_path / "c.json", [])) == []

    def test_entry_without_js_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.json", [{"label": "Broken"}])
        with pytest.raises(ConfigurationError, match="Malformed connector registry"):
            load_connectors(path)

    def test_non_array_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.json", {"js": "connectors/bugs.js"})
        with pytest.raises(ConfigurationError):
            load_connectors(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="File not found") as exc:
            load_connectors(tmp_path / "nope.json")
        assert exc.value.source == str(tmp_path / "nope.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text("[{,]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_connectors(path)


class TestLoadManifest:
    def test_loads_fixture_manifest(self, src_dir: Path) -> None:
        manifest = load_manifest(src_dir / "manifest.json")
        assert isinstance(manifest, Manifest)
        assert manifest.web_accessible_resources == (
            "connectors/youtube-dom-inject.js",
        )

    def test_missing_resource_list_loads_with_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = _write(tmp_path / "manifest.json", {"name": "ext"})
        manifest = load_manifest(path)
        assert manifest.web_accessible_resources is None
        assert "no web_accessible_resources" in caplog.text

    def test_non_string_resources_raise(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "manifest.json",
            {"web_accessible_resources": [{"resources": ["a.js"]}]},
        )
        with pytest.raises(ConfigurationError, match="Malformed manifest"):
            load_manifest(path)

    def test_non_object_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "manifest.json", ["connectors/a.js"])
        with pytest.raises(ConfigurationError, match="expected a JSON object"):
            load_manifest(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_manifest(tmp_path / "manifest.json")
