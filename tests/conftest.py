"""Core test fixtures for the jpackwrap project."""

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from typer.testing import CliRunner

from jpackwrap.models.options import PackagingOptions
from jpackwrap.models.project import ProjectMetadata


POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <modelVersion>4.0.0</modelVersion>
  <parent>
    <groupId>org.example</groupId>
    <artifactId>parent-pom</artifactId>
    <version>9.9</version>
  </parent>
  <groupId>org.example</groupId>
{artifact_id}{version}  <dependencies>
    <dependency>
      <groupId>junit</groupId>
      <artifactId>junit</artifactId>
      <version>4.13.2</version>
    </dependency>
  </dependencies>
</project>
"""


def make_pom(
    artifact_id: str | None = "zenpad", version: str | None = "1.2-SNAPSHOT"
) -> str:
    """Render a pom.xml; None leaves the element out entirely."""
    return POM_TEMPLATE.format(
        artifact_id=f"  <artifactId>{artifact_id}</artifactId>\n"
        if artifact_id is not None
        else "",
        version=f"  <version>{version}</version>\n" if version is not None else "",
    )


class FakeProcessRunner:
    """Process runner that records commands and returns scripted exit codes.

    ``exit_codes`` maps an executable to the code its run returns (0 if
    absent); ``available`` maps an executable to its version check result (True if
    absent). ``on_run`` is called with (cmd, cwd) to simulate side effects.
    """

    def __init__(
        self,
        exit_codes: dict[str, int] | None = None,
        available: dict[str, bool] | None = None,
        on_run: Callable[[list[str], Path | None], None] | None = None,
    ) -> None:
        self.exit_codes = exit_codes or {}
        self.available = available or {}
        self.on_run = on_run
        self.tool_checks: list[list[str]] = []
        self.calls: list[list[str]] = []
        self.cwds: list[Path | None] = []

    def is_available(self, executable: str, version_args: list[str]) -> bool:
        self.tool_checks.append([executable, *version_args])
        return self.available.get(executable, True)

    def run(
        self, cmd: list[str], cwd: Path | None = None, middleware: Any | None = None
    ) -> tuple[int, list[str], list[str]]:
        self.calls.append(list(cmd))
        self.cwds.append(cwd)
        if self.on_run is not None:
            self.on_run(cmd, cwd)
        return self.exit_codes.get(cmd[0], 0), [], []

    def call_for(self, executable: str) -> list[str]:
        return next(call for call in self.calls if call[0] == executable)


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture
def metadata() -> ProjectMetadata:
    return ProjectMetadata(name="zenpad", version="1.2-SNAPSHOT")


@pytest.fixture
def options(tmp_path: Path) -> PackagingOptions:
    return PackagingOptions(
        main_class="org.example.zenpad.Main",
        vendor="Zen Corp",
        description="A tiny editor",
        output_dir=tmp_path / "dist",
    )


@pytest.fixture
def maven_project(tmp_path: Path) -> Path:
    """A Maven project directory with pom.xml and a built archive."""
    project = tmp_path / "zenpad"
    project.mkdir()
    (project / "pom.xml").write_text(make_pom(), encoding="utf-8")
    (project / "LICENSE").write_text("MIT\n", encoding="utf-8")
    target = project / "target"
    target.mkdir()
    (target / "zenpad-1.2-SNAPSHOT.jar").write_bytes(b"PK")
    (target / "zenpad-1.2-SNAPSHOT-jar-with-dependencies.jar").write_bytes(b"PK")
    return project


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep user config files and JPACKWRAP_ variables out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("JPACKWRAP_"):
            monkeypatch.delenv(key)
    xdg = tmp_path / "xdg-config"
    xdg.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    yield


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging during CLI tests."""
    yield
    logging.getLogger().handlers = []
    logging.getLogger().setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def runner_factory() -> type[FakeProcessRunner]:
    """The FakeProcessRunner class, for tests that script exit codes."""
    return FakeProcessRunner


@pytest.fixture
def pom_factory() -> Callable[..., str]:
    return make_pom
