"""Construct the OCI image build command for docker, podman or buildah."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from opbuild.errors import UnsupportedBuilderError
from opbuild.helpers import split_image_build_args


class ImageBuilder(StrEnum):
    DOCKER = "docker"
    PODMAN = "podman"
    BUILDAH = "buildah"

    def template(self, dockerfile: str, image: str) -> list[str]:
        if self is ImageBuilder.BUILDAH:
            return ["bud", "--format=docker", "-f", dockerfile, "-t", image]
        return ["build", "-f", dockerfile, "-t", image]

    @classmethod
    def parse(cls, name: str) -> ImageBuilder:
        """Map a builder name to its member. Raises UnsupportedBuilderError for anything else."""
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedBuilderError(name, [b.value for b in cls]) from None


@dataclass(frozen=True)
class BuilderCommand:
    program: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


def create_build_command(
    image_builder: str,
    context: str,
    dockerfile: str,
    image: str,
    *image_build_args: str,
) -> BuilderCommand:
    """Template args, then tokenized extra args, then the build context (always last)."""
    builder = ImageBuilder.parse(image_builder)
    args = builder.template(dockerfile, image)
    for raw in image_build_args:
        if raw:
            args.extend(split_image_build_args(raw))
    args.append(context)
    return BuilderCommand(program=builder.value, args=tuple(args))
