"""Shared helpers for opbuild: splitting raw extra-argument strings into argv tokens.

Image build args are shell-lexed (quotes and backslash escapes honored, no shell
spawned). Go build args are split on whitespace only, matching operator-sdk.
"""

from __future__ import annotations

import shlex

from opbuild.errors import ArgumentParseError


def split_image_build_args(raw: str) -> list[str]:
    """Split a shell-quoted string, e.g. '--build-arg "A=b c"' -> ['--build-arg', 'A=b c']."""
    if not raw.strip():
        return []
    try:
        return shlex.split(raw, comments=False, posix=True)
    except ValueError as e:
        msg = f"image-build-args is not parseable: {raw!r}: {e}"
        raise ArgumentParseError(msg, raw=raw) from e


def split_go_build_args(raw: str) -> list[str]:
    """Whitespace split; quotes are not interpreted."""
    return raw.split()
