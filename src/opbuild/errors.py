"""Build error model: every failure carries a stable code, optional hint, and context."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers, one per failure outcome."""

    USAGE = "E_USAGE"
    ARGUMENT_PARSE = "E_ARGUMENT_PARSE"
    COMPILE = "E_COMPILE"
    UNSUPPORTED_BUILDER = "E_UNSUPPORTED_BUILDER"
    IMAGE_BUILD = "E_IMAGE_BUILD"
    PROJECT = "E_PROJECT"
    TOOLCHAIN = "E_TOOLCHAIN"
    EXEC = "E_EXEC"


class BuildError(Exception):
    """Base error class that carries code, optional hint, and context."""

    code: str
    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.hint = hint
        self.context = dict(context or {})

    @property
    def message(self) -> str:
        return self.args[0] if self.args else ""

    def __str__(self) -> str:
        """Single line: message, then hint and context in parentheses."""
        extras = [f"hint: {self.hint}"] if self.hint else []
        extras += [f"{k}: {v}" for k, v in self.context.items() if v]
        if not extras:
            return self.message
        return f"{self.message} ({'; '.join(extras)})"


class UsageError(BuildError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.USAGE, hint=hint, context=context)


class ArgumentParseError(BuildError):
    """Extra-argument string could not be tokenized (unbalanced quotes, dangling escape)."""

    def __init__(self, message: str, *, raw: str) -> None:
        super().__init__(message, code=ErrorCode.ARGUMENT_PARSE)
        self.raw = raw


class CompileError(BuildError):
    def __init__(self, message: str, *, context: Mapping[str, str] | None = None) -> None:
        super().__init__(message, code=ErrorCode.COMPILE, context=context)


class UnsupportedBuilderError(BuildError):
    def __init__(self, builder: str, supported: Sequence[str]) -> None:
        super().__init__(
            f"{builder} is not supported image builder",
            code=ErrorCode.UNSUPPORTED_BUILDER,
            hint=f"use one of: {', '.join(supported)}",
        )
        self.builder = builder


class ImageBuildError(BuildError):
    def __init__(self, message: str, *, image: str) -> None:
        super().__init__(message, code=ErrorCode.IMAGE_BUILD, context={"image": image})
        self.image = image


class ProjectError(BuildError):
    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, code=ErrorCode.PROJECT, hint=hint)


class ToolchainError(BuildError):
    def __init__(self, message: str, *, context: Mapping[str, str] | None = None) -> None:
        super().__init__(message, code=ErrorCode.TOOLCHAIN, context=context)


class ExecError(BuildError):
    """External command failed to start or exited non-zero."""

    def __init__(self, argv: Sequence[str], returncode: int | None = None, reason: str = "") -> None:
        detail = reason or f"exit status {returncode}"
        super().__init__(f"failed to exec {list(argv)!r}: {detail}", code=ErrorCode.EXEC)
        self.argv = list(argv)
        self.returncode = returncode


__all__ = [
    "ArgumentParseError",
    "BuildError",
    "CompileError",
    "ErrorCode",
    "ExecError",
    "ImageBuildError",
    "ProjectError",
    "ToolchainError",
    "UnsupportedBuilderError",
    "UsageError",
]
