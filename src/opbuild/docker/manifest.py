"""Check that Deployment containers in the operator manifest use the image being built."""

from __future__ import annotations

from typing import Any

import yaml


def _containers(doc: dict[str, Any]) -> list[Any]:
    spec = doc.get("spec") or {}
    template = spec.get("template") if isinstance(spec, dict) else None
    pod_spec = (template or {}).get("spec") if isinstance(template, dict) else None
    containers = (pod_spec or {}).get("containers") if isinstance(pod_spec, dict) else None
    return containers if isinstance(containers, list) else []


def verify_deployment_image(manifest_text: str, image: str) -> list[str]:
    """Return one warning per Deployment container image that differs from image."""
    try:
        docs = list(yaml.safe_load_all(manifest_text))
    except yaml.YAMLError as e:
        return [f"could not parse operator manifest: {e}"]
    warnings: list[str] = []
    for doc in docs:
        if not isinstance(doc, dict) or doc.get("kind") != "Deployment":
            continue
        for container in _containers(doc):
            if not isinstance(container, dict):
                continue
            found = container.get("image")
            if found != image:
                warnings.append(
                    f"operator manifest contains a deployment with image {found}, "
                    f"which does not match the name of the image being built: {image}"
                )
    return warnings
