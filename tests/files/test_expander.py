"""Tests for glob expansion of the upload file list."""

from pathlib import Path

import pytest

from artifactory_publish.files import expand_files
from artifactory_publish.files.expander import glob_root_and_pattern


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x", encoding="utf-8")
    return path


class TestExpandFiles:
    def test_resolves_wildcards(self, workspace):
        result = expand_files(workspace, ["*.json"])
        assert workspace / "pom.json" in result
        assert workspace / "package.json" in result
        assert all(path.suffix == ".json" for path in result)

    def test_mix_of_wildcards_and_literal_files(self, workspace):
        result = expand_files(workspace, ["*.xml", "test.jar"])
        assert result == [workspace / "pom.xml", workspace / "useless.xml", workspace / "test.jar"]

    def test_empty_pattern_list(self, workspace):
        assert expand_files(workspace, []) == []

    def test_recursive_glob(self, workspace):
        result = expand_files(workspace.parent, ["**/*.jar"])
        assert workspace / "test.jar" in result

    def test_recursive_glob_matches_nested_levels(self, tmp_path):
        one = _touch(tmp_path / "a" / "b" / "c" / "one.jar")
        two = _touch(tmp_path / "a" / "x" / "two.jar")
        _touch(tmp_path / "a" / "x" / "two.java")

        assert expand_files(tmp_path, ["**/*.jar"]) == sorted([one, two])

    def test_single_star_does_not_recurse(self, tmp_path):
        top = _touch(tmp_path / "top.jar")
        _touch(tmp_path / "nested" / "deep.jar")

        assert expand_files(tmp_path, ["*.jar"]) == [top]

    def test_unmatched_patterns_contribute_nothing(self, workspace):
        assert expand_files(workspace, ["*.war", "missing.jar"]) == []

    def test_directories_are_not_files(self, tmp_path):
        (tmp_path / "target.jar").mkdir()
        assert expand_files(tmp_path, ["*.jar", "target.jar"]) == []

    def test_order_follows_patterns(self, workspace):
        result = expand_files(workspace, ["test.jar", "pom.xml"])
        assert result == [workspace / "test.jar", workspace / "pom.xml"]

    def test_duplicates_are_preserved(self, workspace):
        result = expand_files(workspace, ["pom.xml", "*.xml"])
        assert result.count(workspace / "pom.xml") == 2

    def test_is_deterministic(self, workspace):
        patterns = ["*.json", "**/*.xml", "test.jar"]
        assert expand_files(workspace, patterns) == expand_files(workspace, patterns)

    def test_absolute_glob(self, tmp_path):
        target = _touch(tmp_path / "dist" / "1.2.3" / "app.tar.gz")
        pattern = f"{tmp_path.as_posix()}/dist/*/app.tar.gz"

        assert expand_files(Path("/nonexistent"), [pattern]) == [target]

    def test_absolute_literal_path(self, tmp_path):
        target = _touch(tmp_path / "app.zip")
        assert expand_files(Path("/nonexistent"), [str(target)]) == [target]


class TestGlobRootAndPattern:
    def test_splits_posix_path(self):
        root, pattern = glob_root_and_pattern(Path("/var/builds/*.jar"))
        assert root == "/"
        assert pattern == "var/builds/*.jar"

    def test_root_only(self):
        assert glob_root_and_pattern(Path("/")) == ("/", "*")

    def test_rejects_relative(self):
        with pytest.raises(ValueError):
            glob_root_and_pattern(Path("relative/*.jar"))
