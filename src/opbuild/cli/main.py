"""Main CLI entry point for opbuild."""

import logging
import sys

from opbuild.cli.build import parse_build_request
from opbuild.orchestrator import run


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    request, verbose = parse_build_request(argv)
    setup_logging(verbose)
    sys.exit(run(request))


if __name__ == "__main__":
    main()
