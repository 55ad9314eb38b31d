"""AcornOS package tiers and Alpine signing keys.

Tiers are cumulative:

- bootable: kernel, init, bootloader, basic filesystem tools
- core: device management, firmware, storage, privilege escalation
- daily driver: networking, certificates, diagnostics
- live ISO: installer-only tools

The lists live in ``manifests/acorn_packages.yaml``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..lib.manifests import load_acorn_packages_manifest
from ..shared.paths import env_override

logger = logging.getLogger(__name__)

_TIERS = load_acorn_packages_manifest()

BOOTABLE_PACKAGES: Tuple[str, ...] = tuple(_TIERS.get("bootable") or ())
CORE_PACKAGES: Tuple[str, ...] = tuple(_TIERS.get("core") or ())
DAILY_DRIVER_PACKAGES: Tuple[str, ...] = tuple(_TIERS.get("daily_driver") or ())
LIVE_ISO_PACKAGES: Tuple[str, ...] = tuple(_TIERS.get("live_iso") or ())

ALPINE_KEY_FILENAMES: Tuple[str, ...] = (
    "alpine-devel@lists.alpinelinux.org-4a6a0840.rsa.pub",
    "alpine-devel@lists.alpinelinux.org-5243ef4b.rsa.pub",
    "alpine-devel@lists.alpinelinux.org-5261cecb.rsa.pub",
    "alpine-devel@lists.alpinelinux.org-6165ee59.rsa.pub",
    "alpine-devel@lists.alpinelinux.org-61666e3f.rsa.pub",
)

KEYS_DIR = Path(__file__).resolve().parent / "keys"
KEYS_DIR_ENV = "DISTRO_SPEC_ALPINE_KEYS_DIR"

# Where apk-tools keeps the same keys on an Alpine build host.
HOST_KEYS_DIRS: Tuple[str, ...] = (
    "/etc/apk/keys",
    "/usr/share/apk/keys/x86_64",
)


def bootable_packages() -> List[str]:
    return list(BOOTABLE_PACKAGES)


def core_packages() -> List[str]:
    return bootable_packages() + list(CORE_PACKAGES)


def daily_driver_packages() -> List[str]:
    return core_packages() + list(DAILY_DRIVER_PACKAGES)


def all_live_packages() -> List[str]:
    """Every tier; the default package set for a live ISO build."""
    return daily_driver_packages() + list(LIVE_ISO_PACKAGES)


def _has_all_keys(d: Path) -> bool:
    return all((d / name).is_file() for name in ALPINE_KEY_FILENAMES)


def default_keys_dir() -> Path:
    """$DISTRO_SPEC_ALPINE_KEYS_DIR, else the packaged keys, else the host's apk keys."""

    override = env_override(KEYS_DIR_ENV, "")
    if override:
        return Path(override)
    for candidate in (KEYS_DIR, *map(Path, HOST_KEYS_DIRS)):
        if _has_all_keys(candidate):
            return candidate
    return KEYS_DIR


def alpine_keys(keys_dir: Optional[Union[str, Path]] = None) -> List[Tuple[str, str]]:
    """Return (filename, PEM text) for every Alpine signing key.

    Raises FileNotFoundError when a key file is absent and ValueError when a
    file is not a PEM public key.
    """

    d = Path(keys_dir) if keys_dir is not None else default_keys_dir()
    out: List[Tuple[str, str]] = []
    for name in ALPINE_KEY_FILENAMES:
        p = d / name
        if not p.is_file():
            raise FileNotFoundError(f"Alpine signing key not found: {p}")
        pem = p.read_text(encoding="utf-8")
        if "BEGIN PUBLIC KEY" not in pem:
            raise ValueError(f"Not a PEM public key: {p}")
        out.append((name, pem))
    logger.debug("Loaded %d Alpine signing keys from %s", len(out), str(d))
    return out


def __getattr__(name: str):
    # Keys are read from disk on first access, not at import.
    if name == "ALPINE_KEYS":
        return tuple(alpine_keys())
    if name.startswith("ALPINE_KEY_"):
        key_id = name[len("ALPINE_KEY_"):].lower()
        for filename, pem in alpine_keys():
            if filename.endswith(f"-{key_id}.rsa.pub"):
                return pem
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
