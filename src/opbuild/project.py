"""Project inspection: root check, operator type, Go package path.

Layout follows the operator-sdk scaffold: build/Dockerfile marks the project root,
cmd/manager/main.go marks a Go operator, roles/ an Ansible one, helm-charts/ a Helm one.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path, PurePosixPath

from opbuild.errors import ProjectError

BUILD_DOCKERFILE = "build/Dockerfile"
MAIN_FILE = "cmd/manager/main.go"
ROLES_DIR = "roles"
HELM_CHARTS_DIR = "helm-charts"
GO_MOD_FILE = "go.mod"
BUILD_BIN_DIR = "build/_output/bin"
MANAGER_DIR = "cmd/manager"
DEPLOY_DIR = "deploy"
OPERATOR_YAML = "operator.yaml"

_MODULE_LINE = re.compile(r'^\s*module\s+"?([^"\s]+)"?\s*(?://.*)?$', re.MULTILINE)


class OperatorType(StrEnum):
    GO = "go"
    ANSIBLE = "ansible"
    HELM = "helm"
    UNKNOWN = "unknown"


def read_go_mod_module(go_mod: Path) -> str | None:
    """Module path from the `module` directive of go.mod, or None if absent."""
    m = _MODULE_LINE.search(go_mod.read_text())
    return m.group(1) if m else None


class ProjectInspector:
    """Reports on the operator project rooted at `root` (default: cwd)."""

    def __init__(self, root: Path | None = None, environ: Mapping[str, str] | None = None) -> None:
        self.root = (root if root is not None else Path.cwd()).resolve()
        self.environ = environ if environ is not None else os.environ

    def must_in_project_root(self) -> None:
        if not (self.root / BUILD_DOCKERFILE).is_file():
            msg = f"must run command in project root dir: project structure requires {BUILD_DOCKERFILE}"
            raise ProjectError(msg, hint=f"no {BUILD_DOCKERFILE} under {self.root}")

    def getwd(self) -> Path:
        return self.root

    def operator_type(self) -> OperatorType:
        if (self.root / MAIN_FILE).exists():
            return OperatorType.GO
        if (self.root / ROLES_DIR).is_dir():
            return OperatorType.ANSIBLE
        if (self.root / HELM_CHARTS_DIR).is_dir():
            return OperatorType.HELM
        return OperatorType.UNKNOWN

    def is_operator_go(self) -> bool:
        return self.operator_type() is OperatorType.GO

    def go_pkg(self) -> str:
        """Import path of the project: go.mod module, else path under $GOPATH/src."""
        go_mod = self.root / GO_MOD_FILE
        if go_mod.is_file():
            module = read_go_mod_module(go_mod)
            if module:
                return module
        for gopath in self._gopaths():
            src = (gopath / "src").resolve()
            try:
                rel = self.root.relative_to(src)
            except ValueError:
                continue
            if rel.parts:
                return str(PurePosixPath(*rel.parts))
        msg = "could not determine project repository path"
        raise ProjectError(
            msg,
            hint="add a go.mod with a module directive, or place the project under $GOPATH/src",
        )

    def _gopaths(self) -> list[Path]:
        raw = self.environ.get("GOPATH", "")
        if not raw:
            return [Path(self.environ.get("HOME") or Path.home()) / "go"]
        return [Path(p) for p in raw.split(os.pathsep) if p]
