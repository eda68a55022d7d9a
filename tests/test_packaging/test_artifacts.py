"""Tests for the artifact locator."""

import logging
from pathlib import Path

import pytest

from jpackwrap.core.errors import ArtifactNotFoundError
from jpackwrap.packaging.artifacts import (
    expected_artifact,
    find_artifacts,
    locate_artifact,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"PK")
    return path


class TestLocateArtifact:
    def test_single_match_used_verbatim(self, tmp_path: Path):
        _touch(tmp_path / "app-1.0.jar")
        archive = _touch(tmp_path / "app-1.0-jar-with-dependencies.jar")

        artifact = locate_artifact(tmp_path)

        assert artifact.path == archive
        assert artifact.file_name == "app-1.0-jar-with-dependencies.jar"
        assert artifact.input_dir == tmp_path

    def test_searches_recursively(self, tmp_path: Path):
        archive = _touch(tmp_path / "nested" / "deep" / "app-jar-with-dependencies.jar")

        assert locate_artifact(tmp_path).path == archive

    def test_no_match(self, tmp_path: Path):
        _touch(tmp_path / "app-1.0.jar")
        _touch(tmp_path / "app-1.0-sources.jar")

        with pytest.raises(ArtifactNotFoundError, match="jar-with-dependencies"):
            locate_artifact(tmp_path)

    def test_missing_build_directory(self, tmp_path: Path):
        with pytest.raises(ArtifactNotFoundError):
            locate_artifact(tmp_path / "target")

    def test_directory_with_matching_name_is_ignored(self, tmp_path: Path):
        (tmp_path / "odd-jar-with-dependencies.jar").mkdir()

        with pytest.raises(ArtifactNotFoundError):
            locate_artifact(tmp_path)

    def test_multiple_matches_first_wins_with_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ):
        first = _touch(tmp_path / "a-jar-with-dependencies.jar")
        _touch(tmp_path / "b-jar-with-dependencies.jar")

        with caplog.at_level(logging.WARNING, logger="jpackwrap.packaging.artifacts"):
            artifact = locate_artifact(tmp_path)

        assert artifact.path == first
        assert "Found 2 bundled archives" in caplog.text
        assert "b-jar-with-dependencies.jar" in caplog.text

    def test_find_artifacts_sorted(self, tmp_path: Path):
        second = _touch(tmp_path / "z-jar-with-dependencies.jar")
        first = _touch(tmp_path / "m-jar-with-dependencies.jar")

        assert find_artifacts(tmp_path) == [first, second]


def test_expected_artifact_name(tmp_path: Path, metadata):
    artifact = expected_artifact(tmp_path, metadata)

    assert artifact.path == tmp_path / "zenpad-1.2-SNAPSHOT-jar-with-dependencies.jar"
