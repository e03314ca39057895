"""Pytest fixtures for opbuild tests."""

from pathlib import Path

import pytest


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Bare operator project: only build/Dockerfile. Returns the root (tmp_path/app-operator)."""
    root = tmp_path / "app-operator"
    (root / "build").mkdir(parents=True)
    (root / "build" / "Dockerfile").write_text("FROM scratch\n")
    return root


@pytest.fixture
def go_project(project_root: Path) -> Path:
    """Go operator project with go.mod and cmd/manager/main.go."""
    (project_root / "cmd" / "manager").mkdir(parents=True)
    (project_root / "cmd" / "manager" / "main.go").write_text("package main\n")
    (project_root / "go.mod").write_text("module github.com/example/app-operator\n\ngo 1.13\n")
    return project_root
