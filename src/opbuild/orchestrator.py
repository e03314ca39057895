"""Two-stage operator build: cross-compile the Go binary, then build the OCI image.

Stage A runs only for Go operators; Stage B runs unless skip_image is set. Each
collaborator failure is wrapped into the matching BuildError subclass and ends
the build; nothing is retried.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any, Protocol

from opbuild.build.go_build import GoCmdOptions, GoToolchain, go_build_args_for, go_build_env
from opbuild.docker.image import BuilderCommand, create_build_command
from opbuild.docker.manifest import verify_deployment_image
from opbuild.errors import (
    BuildError,
    CompileError,
    ExecError,
    ImageBuildError,
    ProjectError,
    ToolchainError,
    UsageError,
)
from opbuild.process import ProcessExecutor
from opbuild.project import (
    BUILD_BIN_DIR,
    BUILD_DOCKERFILE,
    DEPLOY_DIR,
    MANAGER_DIR,
    OPERATOR_YAML,
    ProjectInspector,
)

log = logging.getLogger(__name__)

BUILD_CONTEXT = "."


class Inspector(Protocol):
    def must_in_project_root(self) -> None: ...

    def getwd(self) -> Path: ...

    def is_operator_go(self) -> bool: ...

    def go_pkg(self) -> str: ...


class Compiler(Protocol):
    def go_build(self, opts: GoCmdOptions) -> None: ...


class Executor(Protocol):
    def exec_cmd(
        self,
        argv: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> None: ...


@dataclass(frozen=True)
class BuildRequest:
    image: str | None = None
    image_builder: str = "docker"
    image_build_args: str = ""
    go_build_args: str = ""
    skip_image: bool = False


def _compile(
    request: BuildRequest,
    inspector: Inspector,
    compiler: Compiler,
    environ: Mapping[str, str] | None,
) -> None:
    project_root = inspector.getwd()
    project_name = project_root.name
    try:
        go_pkg = inspector.go_pkg()
    except ProjectError as e:
        raise UsageError(e.message, hint=e.hint) from e
    opts = GoCmdOptions(
        bin_name=str(project_root / BUILD_BIN_DIR / project_name),
        package_path=str(PurePosixPath(go_pkg) / MANAGER_DIR),
        args=tuple(go_build_args_for(project_root, request.go_build_args)),
        env=go_build_env(environ),
    )
    try:
        compiler.go_build(opts)
    except ToolchainError as e:
        raise CompileError(
            f"failed to build operator binary: {e.message}",
            context={"binary": opts.bin_name},
        ) from e


def _check_manifest(project_root: Path, image: str) -> None:
    manifest = project_root / DEPLOY_DIR / OPERATOR_YAML
    if not manifest.is_file():
        return
    for warning in verify_deployment_image(manifest.read_text(), image):
        log.warning("%s", warning)


def _build_image(
    image: str,
    command: BuilderCommand,
    project_root: Path,
    executor: Executor,
) -> None:
    log.info("Building OCI image %s", image)
    try:
        executor.exec_cmd(command.argv)
    except ExecError as e:
        msg = f"failed to output build image {image}: {e.message}"
        raise ImageBuildError(msg, image=image) from e
    _check_manifest(project_root, image)


def run_build(
    request: BuildRequest,
    *,
    inspector: Inspector | None = None,
    compiler: Compiler | None = None,
    executor: Executor | None = None,
    environ: Mapping[str, str] | None = None,
    dockerfile: str = BUILD_DOCKERFILE,
    context: str = BUILD_CONTEXT,
) -> None:
    """Run the build described by request. Raises a BuildError subclass on failure."""
    if not request.image and not request.skip_image:
        msg = "build requires exactly one <image> argument or --skip-image"
        raise UsageError(msg)

    inspector = inspector or ProjectInspector()
    executor = executor or ProcessExecutor()
    compiler = compiler or GoToolchain(executor)

    try:
        inspector.must_in_project_root()
    except ProjectError as e:
        raise UsageError(e.message, hint=e.hint) from e

    # Builder and extra-arg errors must surface before go build runs.
    command = None
    if not request.skip_image:
        command = create_build_command(
            request.image_builder, context, dockerfile, request.image or "", request.image_build_args
        )

    if inspector.is_operator_go():
        _compile(request, inspector, compiler, environ)
    else:
        log.debug("Not a Go operator; skipping binary build")

    if command is None:
        log.info("Skipping image building")
    else:
        _build_image(request.image or "", command, inspector.getwd(), executor)

    log.info("Operator build complete.")


def run(request: BuildRequest, **kwargs: Any) -> int:
    """Run the build. Returns 0 on success, 1 on error (printed to stderr)."""
    try:
        run_build(request, **kwargs)
        return 0
    except BuildError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
