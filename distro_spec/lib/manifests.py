from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


def _manifests_dir() -> Path:
    # distro_spec/lib/manifests.py -> distro_spec/manifests
    return Path(__file__).resolve().parents[1] / "manifests"


@lru_cache(maxsize=None)
def load_manifest(name: str) -> Dict[str, Any]:
    """Load a YAML manifest shipped with the package (distro_spec/manifests/<name>.yaml)."""
    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML required to load manifests") from e

    p = _manifests_dir() / f"{name}.yaml"
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be a mapping/dict: {p}")
    logger.debug("Loaded manifest %s", str(p))
    return data


def load_licenses_manifest() -> Dict[str, Any]:
    return load_manifest("licenses")


def load_acorn_packages_manifest() -> Dict[str, Any]:
    return load_manifest("acorn_packages")
