"""Shared fixtures: a workspace laid out like a small Maven/npm project."""

import json
from pathlib import Path

import pytest

VALID_POM = """\
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>com.example.drone</groupId>
  <artifactId>artifactory</artifactId>
  <version>0</version>
</project>
"""

USELESS_POM = """\
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <artifactId>artifactory</artifactId>
</project>
"""


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Workspace with valid, broken and incomplete manifests plus a jar."""
    root = tmp_path / "files"
    root.mkdir()
    (root / "pom.xml").write_text(VALID_POM, encoding="utf-8")
    (root / "pom.json").write_text('{"not": "xml"}', encoding="utf-8")
    (root / "useless.xml").write_text(USELESS_POM, encoding="utf-8")
    (root / "package.json").write_text(
        json.dumps({"groupId": "com.example.drone", "name": "artifactory", "version": "0"}),
        encoding="utf-8",
    )
    (root / "invalid_package.json").write_text("not json {{", encoding="utf-8")
    (root / "useless_package.json").write_text(
        json.dumps({"name": "artifactory"}), encoding="utf-8"
    )
    (root / "test.jar").write_bytes(b"PK\x03\x04jar")
    return root
