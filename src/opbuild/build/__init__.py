"""Go cross-compilation of the operator binary."""

from .go_build import (
    GoCmdOptions,
    GoToolchain,
    go_build_args_for,
    go_build_env,
    go_cmd_args,
)

__all__ = [
    "GoCmdOptions",
    "GoToolchain",
    "go_build_args_for",
    "go_build_env",
    "go_cmd_args",
]
