"""`opbuild [<image>]` — compile the operator binary and build its OCI image."""

from __future__ import annotations

import argparse

from opbuild.docker.image import ImageBuilder
from opbuild.orchestrator import BuildRequest

DESCRIPTION = """\
Compile the operator code into an executable binary, then build the container image.

<image> is the container image to be built, e.g. "quay.io/example/operator:v0.0.1".
Use --skip-image to only build the operator binary.

After the build completes the image exists locally; push it to a registry, e.g.:

  $ opbuild quay.io/example/operator:v0.0.1
  $ docker push quay.io/example/operator:v0.0.1
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="opbuild",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("image", nargs="?", default=None, help="container image to build")
    ap.add_argument(
        "--image-build-args",
        default="",
        help='Extra image build arguments as one string such as "--build-arg https_proxy=$https_proxy"',
    )
    ap.add_argument(
        "--image-builder",
        default=ImageBuilder.DOCKER.value,
        help=f"Tool to build OCI images. One of: [{', '.join(b.value for b in ImageBuilder)}]",
    )
    ap.add_argument(
        "--go-build-args",
        default="",
        help='Extra Go build arguments as one string such as "-ldflags -X=main.xyz=abc"',
    )
    ap.add_argument(
        "--skip-image",
        action="store_true",
        help="If set, only the operator binary is built and the container image build is skipped.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def parse_build_request(argv: list[str]) -> tuple[BuildRequest, bool]:
    """Parse argv into (BuildRequest, verbose)."""
    args = build_parser().parse_args(argv)
    request = BuildRequest(
        image=args.image,
        image_builder=args.image_builder,
        image_build_args=args.image_build_args,
        go_build_args=args.go_build_args,
        skip_image=args.skip_image,
    )
    return request, args.verbose
