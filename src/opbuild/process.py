"""Run an already-built external command with output streamed to the terminal."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from opbuild.errors import ExecError

log = logging.getLogger(__name__)


class ProcessExecutor:
    def exec_cmd(
        self,
        argv: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> None:
        """Run argv; stdout/stderr are inherited. Raises ExecError on non-zero exit or start failure."""
        argv = list(argv)
        log.debug("Running %r", argv)
        try:
            r = subprocess.run(
                argv,
                env=dict(env) if env is not None else None,
                cwd=str(cwd) if cwd is not None else None,
                check=False,
            )
        except OSError as e:
            raise ExecError(argv, reason=str(e)) from e
        if r.returncode != 0:
            raise ExecError(argv, returncode=r.returncode)
