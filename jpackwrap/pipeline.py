"""The packaging pipeline: eight named stages run strictly in order.

Each stage wraps exactly one side effect and records its output on the
``PackageResult``. The first ``JPackWrapError`` aborts the run; nothing the
external tools left on disk is cleaned up.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from jpackwrap.adapters import create_process_adapter
from jpackwrap.core.errors import ArtifactNotFoundError, JPackWrapError
from jpackwrap.core.structlog_logger import StructlogMixin
from jpackwrap.models.options import PackagingOptions
from jpackwrap.models.platform import Platform, detect_platform, resolve_platform
from jpackwrap.models.results import PackageResult
from jpackwrap.packaging.artifacts import (
    BUILD_OUTPUT_DIR,
    expected_artifact,
    locate_artifact,
)
from jpackwrap.packaging.build import run_build
from jpackwrap.packaging.icons import ICON_DIR, resolve_icon
from jpackwrap.packaging.jpackage import build_packaging_args, run_packaging
from jpackwrap.packaging.result import (
    OutputSnapshot,
    apply_installer_name,
    find_installer,
    snapshot_output_dir,
)
from jpackwrap.packaging.tools import check_tools
from jpackwrap.project.descriptor import read_project_metadata
from jpackwrap.protocols import ProcessRunnerProtocol


STAGES = (
    "read_metadata",
    "resolve_platform",
    "check_tools",
    "build",
    "locate_artifact",
    "resolve_icon",
    "package",
    "verify_result",
)

# Stages skipped on a dry run; "package" still assembles its arguments
_DRY_RUN_SKIPPED = frozenset({"check_tools", "build", "verify_result"})


class PackagingPipeline(StructlogMixin):
    """Build a Maven project and wrap it into a native installer."""

    service_name = "packaging_pipeline"

    def __init__(
        self,
        runner: ProcessRunnerProtocol | None = None,
        platform: Platform | str | None = None,
        project_dir: Path | None = None,
        build_tool: str = "mvn",
        packaging_tool: str = "jpackage",
        skip_tests: bool = False,
        icon_dir: Path = ICON_DIR,
        middleware: Any | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            runner: Process runner for the external tools
            platform: Target platform, or a ``platform.system()`` style name;
                the host is inspected when None
            project_dir: Maven project root, the working directory if None
            build_tool: Build tool executable
            packaging_tool: Packaging tool executable
            skip_tests: Pass -DskipTests to the build
            icon_dir: Icon directory, relative paths resolve against project_dir
            middleware: Output middleware for the external tools
        """
        self.runner = runner or create_process_adapter()
        self.platform = platform
        self.project_dir = (project_dir or Path.cwd()).resolve()
        self.build_tool = build_tool
        self.packaging_tool = packaging_tool
        self.skip_tests = skip_tests
        self.icon_dir = icon_dir
        self.middleware = middleware
        self._previous_outputs: OutputSnapshot = {}

    def _project_path(self, path: Path) -> Path:
        return path if path.is_absolute() else self.project_dir / path

    # Stages

    def _read_metadata(self, result: PackageResult, options: PackagingOptions) -> None:
        result.metadata = read_project_metadata(self.project_dir)

    def _resolve_platform(
        self, result: PackageResult, options: PackagingOptions
    ) -> None:
        if self.platform is None:
            result.platform = detect_platform()
        elif isinstance(self.platform, Platform):
            result.platform = self.platform
        else:
            try:
                result.platform = Platform(self.platform)
            except ValueError:
                result.platform = resolve_platform(self.platform)

    def _check_tools(self, result: PackageResult, options: PackagingOptions) -> None:
        check_tools(self.runner, [self.build_tool, self.packaging_tool])

    def _build(self, result: PackageResult, options: PackagingOptions) -> None:
        run_build(
            self.runner,
            self.project_dir,
            build_tool=self.build_tool,
            skip_tests=self.skip_tests,
            middleware=self.middleware,
        )

    def _locate_artifact(
        self, result: PackageResult, options: PackagingOptions
    ) -> None:
        build_dir = self.project_dir / BUILD_OUTPUT_DIR
        try:
            result.artifact = locate_artifact(build_dir)
        except ArtifactNotFoundError:
            if not result.dry_run:
                raise
            assert result.metadata is not None
            result.artifact = expected_artifact(build_dir, result.metadata)
            result.add_message(
                f"No archive built yet, assuming {result.artifact.file_name}"
            )

    def _resolve_icon(self, result: PackageResult, options: PackagingOptions) -> None:
        assert result.platform is not None
        result.icon = resolve_icon(
            Platform(result.platform),
            options.icon,
            self._project_path(self.icon_dir),
        )

    def _package(self, result: PackageResult, options: PackagingOptions) -> None:
        assert result.metadata is not None
        assert result.artifact is not None
        assert result.platform is not None

        output_dir = options.resolve_output_dir().resolve()
        license_file = self._project_path(options.license_file)
        if not license_file.is_file():
            self.logger.warning("license_file_missing", path=str(license_file))

        result.packaging_args = build_packaging_args(
            result.metadata,
            options.model_copy(update={"license_file": license_file}),
            result.artifact,
            Platform(result.platform),
            icon=result.icon,
            output_dir=output_dir,
        )
        if result.dry_run:
            return

        output_dir.mkdir(parents=True, exist_ok=True)
        self._previous_outputs = snapshot_output_dir(output_dir)
        run_packaging(
            self.runner,
            result.packaging_args,
            packaging_tool=self.packaging_tool,
            cwd=self.project_dir,
            middleware=self.middleware,
        )

    def _verify_result(
        self, result: PackageResult, options: PackagingOptions
    ) -> None:
        assert result.metadata is not None
        assert result.platform is not None
        installer = find_installer(
            options.resolve_output_dir().resolve(),
            Platform(result.platform),
            result.metadata.name,
            previous=self._previous_outputs,
        )
        if options.installer_name:
            installer = apply_installer_name(installer, options.installer_name)
        result.installer_path = installer

    def _stage_handlers(
        self,
    ) -> dict[str, Callable[[PackageResult, PackagingOptions], None]]:
        return {
            "read_metadata": self._read_metadata,
            "resolve_platform": self._resolve_platform,
            "check_tools": self._check_tools,
            "build": self._build,
            "locate_artifact": self._locate_artifact,
            "resolve_icon": self._resolve_icon,
            "package": self._package,
            "verify_result": self._verify_result,
        }

    def run(self, options: PackagingOptions, dry_run: bool = False) -> PackageResult:
        """Run every stage in order.

        Args:
            options: Packaging options
            dry_run: Stop after assembling the packaging arguments without
                spawning any external tool

        Returns:
            The successful result

        Raises:
            JPackWrapError: From the first stage that fails
        """
        result = PackageResult(success=False, dry_run=dry_run)
        self._previous_outputs = {}
        handlers = self._stage_handlers()

        for stage in STAGES:
            if dry_run and stage in _DRY_RUN_SKIPPED:
                self.logger.debug("stage_skipped", stage=stage)
                continue

            self.logger.info("stage_started", stage=stage)
            try:
                handlers[stage](result, options)
            except JPackWrapError as e:
                self.logger.error(
                    "stage_failed", stage=stage, error=e.message, exit_code=e.exit_code
                )
                raise
            self.logger.debug("stage_completed", stage=stage)

        result.success = True
        self.logger.info("pipeline_completed", **result.get_summary())
        return result


def create_packaging_pipeline(
    runner: ProcessRunnerProtocol | None = None,
    platform: Platform | str | None = None,
    project_dir: Path | None = None,
    **kwargs: Any,
) -> PackagingPipeline:
    """Factory function to create a PackagingPipeline instance."""
    return PackagingPipeline(
        runner=runner, platform=platform, project_dir=project_dir, **kwargs
    )


__all__ = ["STAGES", "PackagingPipeline", "create_packaging_pipeline"]
