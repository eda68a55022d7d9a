"""Tests for the build invoker."""

from pathlib import Path

import pytest

from jpackwrap.core.errors import BuildFailedError
from jpackwrap.packaging.build import build_command, run_build


class TestBuildCommand:
    def test_default(self):
        assert build_command() == ["mvn", "clean", "package"]

    def test_skip_tests(self):
        assert build_command("mvnw", skip_tests=True) == [
            "mvnw",
            "clean",
            "package",
            "-DskipTests",
        ]


class TestRunBuild:
    def test_runs_in_project_directory(self, runner_factory, tmp_path: Path):
        runner = runner_factory()

        run_build(runner, tmp_path)

        assert runner.calls == [["mvn", "clean", "package"]]
        assert runner.cwds == [tmp_path]

    @pytest.mark.parametrize("exit_code", [1, 127])
    def test_failure_carries_exit_code(self, runner_factory, tmp_path: Path, exit_code):
        runner = runner_factory(exit_codes={"mvn": exit_code})

        with pytest.raises(BuildFailedError) as exc_info:
            run_build(runner, tmp_path)

        assert exc_info.value.exit_code == exit_code
        assert exc_info.value.stage == "build"
