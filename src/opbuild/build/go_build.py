"""Cross-compile the operator binary with `go build` for linux.

The environment is inherited with GOOS forced to linux; CGO_ENABLED defaults to 0
but an inherited value always wins. -gcflags/-asmflags trim the parent of the
project root so binaries do not embed the local filesystem path.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from opbuild.errors import ExecError, ToolchainError
from opbuild.helpers import split_go_build_args
from opbuild.process import ProcessExecutor

log = logging.getLogger(__name__)

TARGET_GOOS = "linux"
CGO_DISABLED = "0"


@dataclass(frozen=True)
class GoCmdOptions:
    bin_name: str = ""
    package_path: str = ""
    args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)
    dir: Path | None = None


def go_build_env(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Copy of environ (default os.environ) with GOOS=linux and CGO_ENABLED=0 unless already set."""
    env = dict(os.environ if environ is None else environ)
    env["GOOS"] = TARGET_GOOS
    env.setdefault("CGO_ENABLED", CGO_DISABLED)
    return env


def go_build_args_for(project_root: Path, raw: str = "") -> list[str]:
    """Fixed trimpath directives first, then whitespace-split user args."""
    trim_path = f"all=-trimpath={project_root.parent}"
    return ["-gcflags", trim_path, "-asmflags", trim_path, *split_go_build_args(raw)]


def go_cmd_args(subcommand: str, opts: GoCmdOptions) -> list[str]:
    args = [subcommand]
    if opts.bin_name:
        args += ["-o", opts.bin_name]
    args += list(opts.args)
    args.append(opts.package_path)
    return args


class GoToolchain:
    """Runs the go tool through a ProcessExecutor."""

    def __init__(self, executor: ProcessExecutor | None = None, go: str = "go") -> None:
        self.executor = executor or ProcessExecutor()
        self.go = go

    def go_cmd(self, subcommand: str, opts: GoCmdOptions) -> None:
        argv: Sequence[str] = [self.go, *go_cmd_args(subcommand, opts)]
        try:
            self.executor.exec_cmd(argv, env=opts.env or None, cwd=opts.dir)
        except ExecError as e:
            raise ToolchainError(
                f"go {subcommand} failed: {e.message}",
                context={"package": opts.package_path},
            ) from e

    def go_build(self, opts: GoCmdOptions) -> None:
        log.debug("go build %s -> %s", opts.package_path, opts.bin_name)
        self.go_cmd("build", opts)
