"""Tests for the package.json coordinate reader."""

import json
from pathlib import Path

import pytest

from artifactory_publish.errors import (
    ManifestIncomplete,
    ManifestNotFound,
    ManifestParseError,
)
from artifactory_publish.manifest import MANIFEST_READERS, read_manifest
from artifactory_publish.manifest.package_json import read_package_json
from artifactory_publish.types import ArtifactCoordinate


def _write_pkg(tmp_path: Path, data: object) -> str:
    (tmp_path / "package.json").write_text(json.dumps(data), encoding="utf-8")
    return "package.json"


class TestReadPackageJson:
    def test_reads_coordinates(self, workspace):
        result = read_package_json(workspace, "package.json")
        assert result.coordinate == ArtifactCoordinate("com.example.drone", "artifactory", "0")
        assert result.path == "package.json"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestNotFound) as exc_info:
            read_package_json(tmp_path, "NOP")
        assert "Given package file has to exist" in exc_info.value.message
        assert exc_info.value.manifest_format == "package"

    def test_invalid_json(self, workspace):
        with pytest.raises(ManifestParseError) as exc_info:
            read_package_json(workspace, "invalid_package.json")
        assert "An error happened while trying to parse the package file" in str(exc_info.value)

    def test_incomplete_package(self, workspace):
        with pytest.raises(ManifestIncomplete) as exc_info:
            read_package_json(workspace, "useless_package.json")
        assert "Some artifact details are missing from package file" in str(exc_info.value)

    def test_non_object_json_is_a_parse_error(self, tmp_path):
        name = _write_pkg(tmp_path, ["groupId", "name", "version"])
        with pytest.raises(ManifestParseError):
            read_package_json(tmp_path, name)

    def test_numeric_version_is_normalised(self, tmp_path):
        name = _write_pkg(tmp_path, {"group": "org.acme", "name": "widget", "version": 2})
        result = read_package_json(tmp_path, name)
        assert result.coordinate.version == "2"

    def test_artifact_id_preferred_over_name(self, tmp_path):
        name = _write_pkg(tmp_path, {
            "groupId": "org.acme",
            "artifactId": "widget-dist",
            "name": "@acme/widget",
            "version": "1.0.0",
        })
        result = read_package_json(tmp_path, name)
        assert result.coordinate.artifact_id == "widget-dist"

    def test_absolute_path(self, tmp_path):
        _write_pkg(tmp_path, {"groupId": "org.acme", "name": "widget", "version": "1.0.0"})
        result = read_package_json(None, str(tmp_path / "package.json"))
        assert result.coordinate.group_id == "org.acme"


def test_readers_checked_pom_first():
    assert list(MANIFEST_READERS) == ["pom", "package"]


def test_dispatch_by_config_key(workspace):
    result = read_manifest("package", workspace, "package.json")
    assert result.coordinate.group_id == "com.example.drone"
