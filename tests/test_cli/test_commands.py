"""Tests for the jpackwrap CLI commands."""

from pathlib import Path
from unittest.mock import patch

import pytest

from jpackwrap.cli import app
from jpackwrap.cli.commands import register_all_commands
from jpackwrap.cli.commands.package import build_packaging_options
from jpackwrap.config.models import UserConfigData
from jpackwrap.core.errors import ConfigError


register_all_commands(app)

ARCHIVE = "zenpad-1.2-SNAPSHOT-jar-with-dependencies.jar"


def deb_writer(cmd: list[str], cwd: Path | None) -> None:
    if cmd[0] == "jpackage":
        dest = Path(cmd[cmd.index("--dest") + 1])
        (dest / "zenpad_1.2-SNAPSHOT_amd64.deb").write_bytes(b"installer")


@pytest.fixture
def in_project(maven_project: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(maven_project)
    return maven_project


class TestGlobalOptions:
    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("jpackwrap v")

    def test_no_command_shows_help(self, cli_runner):
        result = cli_runner.invoke(app, [])

        assert "package" in result.output

    def test_missing_config_file(self, cli_runner, in_project):
        result = cli_runner.invoke(
            app, ["--no-emoji", "-c", "missing.yaml", "info", "--platform", "linux"]
        )

        assert result.exit_code == 1
        assert "[config]" in result.output
        assert "Config file not found" in result.output

    def test_register_is_idempotent(self):
        before = len(app.registered_commands)

        register_all_commands(app)

        assert len(app.registered_commands) == before


class TestPackageCommand:
    def test_dry_run(self, cli_runner, in_project, runner_factory):
        runner = runner_factory()
        with patch(
            "jpackwrap.cli.commands.package.create_process_adapter", return_value=runner
        ):
            result = cli_runner.invoke(
                app,
                [
                    "package",
                    "org.example.zenpad.Main",
                    "--vendor",
                    "Zen Corp",
                    "--platform",
                    "linux",
                    "--dry-run",
                ],
            )

        assert result.exit_code == 0, result.output
        assert runner.calls == []
        assert runner.tool_checks == []
        assert "--main-class" in result.output
        assert "org.example.zenpad.Main" in result.output
        assert ARCHIVE in result.output
        assert "Zen Corp" in result.output
        assert "--linux-package-name" in result.output

    def test_full_run(self, cli_runner, in_project, runner_factory, tmp_path):
        runner = runner_factory(on_run=deb_writer)
        dist = tmp_path / "dist"
        with patch(
            "jpackwrap.cli.commands.package.create_process_adapter", return_value=runner
        ):
            result = cli_runner.invoke(
                app,
                [
                    "package",
                    "org.example.zenpad.Main",
                    "--platform",
                    "linux",
                    "--output-dir",
                    str(dist),
                    "--skip-tests",
                ],
            )

        assert result.exit_code == 0, result.output
        assert runner.call_for("mvn") == ["mvn", "clean", "package", "-DskipTests"]
        jpackage = runner.call_for("jpackage")
        assert jpackage[jpackage.index("--vendor") + 1] == "Unknown"
        assert jpackage[jpackage.index("--description") + 1] == "A Java application."
        assert "Installer ready" in result.output
        assert "zenpad_1.2-SNAPSHOT_amd64.deb" in result.output

    def test_config_file_defaults(
        self, cli_runner, in_project, runner_factory, tmp_path
    ):
        (in_project / "jpackwrap.yaml").write_text(
            "vendor: Config Corp\ndescription: Configured\n", encoding="utf-8"
        )
        runner = runner_factory(on_run=deb_writer)
        with patch(
            "jpackwrap.cli.commands.package.create_process_adapter", return_value=runner
        ):
            result = cli_runner.invoke(
                app,
                [
                    "package",
                    "org.example.zenpad.Main",
                    "--platform",
                    "linux",
                    "--description",
                    "From the CLI",
                    "-o",
                    str(tmp_path / "dist"),
                ],
            )

        assert result.exit_code == 0, result.output
        jpackage = runner.call_for("jpackage")
        assert jpackage[jpackage.index("--vendor") + 1] == "Config Corp"
        assert jpackage[jpackage.index("--description") + 1] == "From the CLI"

    def test_build_failure_reports_stage(self, cli_runner, in_project, runner_factory):
        runner = runner_factory(exit_codes={"mvn": 1})
        with patch(
            "jpackwrap.cli.commands.package.create_process_adapter", return_value=runner
        ):
            result = cli_runner.invoke(
                app,
                [
                    "--no-emoji",
                    "package",
                    "org.example.zenpad.Main",
                    "--platform",
                    "linux",
                ],
            )

        assert result.exit_code == 1
        assert "[build]" in result.output
        assert "exit code 1" in result.output
        assert [call[0] for call in runner.calls] == ["mvn"]

    def test_incomplete_descriptor(
        self, cli_runner, in_project, runner_factory, pom_factory
    ):
        (in_project / "pom.xml").write_text(pom_factory(version=""), encoding="utf-8")
        runner = runner_factory()
        with patch(
            "jpackwrap.cli.commands.package.create_process_adapter", return_value=runner
        ):
            result = cli_runner.invoke(
                app,
                [
                    "--no-emoji",
                    "package",
                    "org.example.zenpad.Main",
                    "--platform",
                    "linux",
                ],
            )

        assert result.exit_code == 1
        assert "[read_metadata]" in result.output
        assert runner.calls == []

    def test_blank_main_class(self, cli_runner, in_project, runner_factory):
        runner = runner_factory()
        with patch(
            "jpackwrap.cli.commands.package.create_process_adapter", return_value=runner
        ):
            result = cli_runner.invoke(app, ["--no-emoji", "package", " "])

        assert result.exit_code == 1
        assert "[config] Invalid packaging options" in result.output
        assert "main_class" in result.output
        assert "Unexpected error" not in result.output
        assert runner.calls == []

    def test_main_class_required(self, cli_runner, in_project):
        result = cli_runner.invoke(app, ["package"])

        assert result.exit_code != 0


class TestCheckCommand:
    def test_all_available(self, cli_runner, in_project, runner_factory):
        runner = runner_factory()
        with patch(
            "jpackwrap.cli.commands.check.create_process_adapter", return_value=runner
        ):
            result = cli_runner.invoke(app, ["--no-emoji", "check"])

        assert result.exit_code == 0, result.output
        assert "Available" in result.output
        assert [check[0] for check in runner.tool_checks] == ["mvn", "jpackage"]

    def test_missing_tool(self, cli_runner, in_project, runner_factory):
        runner = runner_factory(available={"jpackage": False})
        with patch(
            "jpackwrap.cli.commands.check.create_process_adapter", return_value=runner
        ):
            result = cli_runner.invoke(app, ["--no-emoji", "check"])

        assert result.exit_code == 1
        assert "Missing" in result.output
        assert "[check_tools]" in result.output


class TestInfoCommand:
    def test_shows_metadata(self, cli_runner, in_project):
        result = cli_runner.invoke(app, ["info", "--platform", "macos"])

        assert result.exit_code == 0, result.output
        assert "Project: zenpad" in result.output
        assert "Version: 1.2-SNAPSHOT" in result.output
        assert "Platform: macos" in result.output
        assert "appicon.icns (missing, default used)" in result.output

    def test_existing_icon(self, cli_runner, in_project):
        (in_project / "icons").mkdir()
        (in_project / "icons" / "appicon.png").write_bytes(b"\x89PNG")

        result = cli_runner.invoke(app, ["info", "--platform", "linux"])

        assert result.exit_code == 0, result.output
        assert "appicon.png" in result.output
        assert "missing" not in result.output

    def test_shows_configured_settings(self, cli_runner, in_project, monkeypatch):
        (in_project / "jpackwrap.yaml").write_text("vendor: ACME\n", encoding="utf-8")
        monkeypatch.setenv("JPACKWRAP_ICON", "zen")

        result = cli_runner.invoke(app, ["info", "--platform", "linux"])

        assert result.exit_code == 0, result.output
        assert "vendor = ACME (file:jpackwrap.yaml)" in result.output
        assert "icon = zen (environment)" in result.output
        assert "zen.png" in result.output

    def test_no_descriptor(self, cli_runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = cli_runner.invoke(app, ["--no-emoji", "info"])

        assert result.exit_code == 1
        assert "pom.xml not found" in result.output

    def test_unsupported_platform(self, cli_runner, in_project):
        result = cli_runner.invoke(app, ["--no-emoji", "info", "--platform", "AIX"])

        assert result.exit_code == 1
        assert "[resolve_platform]" in result.output


def test_build_packaging_options_layers_overrides():
    config = UserConfigData(vendor="Config Corp", installer_type="deb")

    options = build_packaging_options(
        config, "org.example.Main", vendor=None, installer_type="rpm"
    )

    assert options.vendor == "Config Corp"
    assert options.installer_type == "rpm"
    assert options.main_class == "org.example.Main"


def test_build_packaging_options_rejects_blank_main_class():
    with pytest.raises(ConfigError, match="main_class"):
        build_packaging_options(UserConfigData(), "   ")
