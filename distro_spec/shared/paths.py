"""Filenames and paths common to both distros."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

KERNEL_FILENAME = "vmlinuz"
INITRAMFS_FILENAME = "initramfs.img"
LOADER_CONF_FILENAME = "loader.conf"

INTEL_UCODE_FILENAME = "intel-ucode.img"
AMD_UCODE_FILENAME = "amd-ucode.img"

INITRAMFS_BUILD_DIR = "initramfs-live-root"
INITRAMFS_LIVE_OUTPUT = "initramfs-live.cpio.gz"

DEFAULT_USER_GROUPS: Tuple[str, ...] = (
    "wheel",  # sudo/doas
    "audio",
    "video",
    "input",
)

# Installer targets must never be one of these.
PROTECTED_PATHS: Tuple[str, ...] = (
    "/",
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/home",
    "/lib",
    "/lib64",
    "/opt",
    "/proc",
    "/root",
    "/run",
    "/sbin",
    "/srv",
    "/sys",
    "/tmp",
    "/usr",
    "/var",
)

OS_VERSION = "1.0"


def is_protected_path(path: Union[str, PurePosixPath]) -> bool:
    """Exact match against PROTECTED_PATHS; subdirectories like /mnt/usr are fine."""

    p = PurePosixPath(path)
    return any(p == PurePosixPath(protected) for protected in PROTECTED_PATHS)


def first_existing(candidates: Sequence[str]) -> Optional[str]:
    """First path in `candidates` that exists on this host, or None."""

    for candidate in candidates:
        if Path(candidate).exists():
            logger.debug("Found %s", candidate)
            return candidate
    return None


def env_override(env_var: str, default: str) -> str:
    value = os.environ.get(env_var, "").strip()
    if value:
        logger.info("Using %s from %s", value, env_var)
        return value
    return default
