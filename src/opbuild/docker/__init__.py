"""OCI image helpers: builder command construction and manifest image checks."""

from .image import BuilderCommand, ImageBuilder, create_build_command
from .manifest import verify_deployment_image

__all__ = [
    "BuilderCommand",
    "ImageBuilder",
    "create_build_command",
    "verify_deployment_image",
]
