"""Render catalog text files and write them beneath a staging root.

Nothing outside the staging root is ever touched; the root itself may not
be one of the protected system directories.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from ..shared.auth.getty import SERIAL_GETTY_OVERRIDE, SERIAL_GETTY_OVERRIDE_PATH
from ..shared.auth.pam import PAM_FILES, SECURITY_CONF_FILES
from ..shared.auth.ssh import SSHD_TMPFILES_CONFIG, SSHD_TMPFILES_PATH
from ..shared.boot import LOADER_CONF_PATH
from ..shared.paths import is_protected_path
from ..shared.udev import (
    UDEV_DIRS_SERVICE,
    UDEV_DIRS_SERVICE_PATH,
    UDEV_TMPFILES_CONF,
    UDEV_TMPFILES_CONF_PATH,
)
from ..shared.users import sudoers_wheel_file, sudoers_wheel_path

logger = logging.getLogger(__name__)


class StagingViolation(ValueError):
    """A staged file would land outside the staging root, or the root is a system path."""


def staged_path(root: Union[str, Path], rel: str) -> Path:
    base = Path(root).resolve()
    p = (base / rel.lstrip("/")).resolve()
    try:
        p.relative_to(base)
    except ValueError:
        raise StagingViolation(f"{rel} escapes staging root {base}") from None
    return p


def write_file(root: Union[str, Path], rel: str, contents: str, *, dry_run: bool) -> Path:
    p = staged_path(root, rel)
    if dry_run:
        logger.info("Would write %s", str(p))
        return p
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(contents, encoding="utf-8")
    logger.info("Wrote %s", str(p))
    return p


def render_files(
    distro: str,
    *,
    hostname: Optional[str] = None,
    root_device: Optional[str] = None,
) -> Dict[str, str]:
    """Map of absolute target path -> file contents for `distro`.

    LevitateOS also gets the systemd-side files (PAM, tmpfiles, getty, udev).
    """

    if distro == "levitate":
        from .. import levitate as os_spec
    elif distro == "acorn":
        from .. import acorn as os_spec  # type: ignore[no-redef]
    else:
        raise ValueError(f"Unknown distro: {distro}")

    entry = os_spec.boot_entry_with_root(root_device) if root_device else os_spec.default_boot_entry()
    host = (hostname or "").strip() or os_spec.DEFAULT_HOSTNAME

    files: Dict[str, str] = {
        LOADER_CONF_PATH: os_spec.default_loader_config().to_loader_conf(),
        entry.entry_path(): entry.to_entry_file(),
        "/etc/hostname": host + "\n",
    }

    if distro == "levitate":
        files[sudoers_wheel_path()] = sudoers_wheel_file()
        for rel, body in list(PAM_FILES.items()) + list(SECURITY_CONF_FILES.items()):
            files["/" + rel] = body
        files[SSHD_TMPFILES_PATH] = SSHD_TMPFILES_CONFIG
        files[SERIAL_GETTY_OVERRIDE_PATH] = SERIAL_GETTY_OVERRIDE
        files[UDEV_TMPFILES_CONF_PATH] = UDEV_TMPFILES_CONF
        files[UDEV_DIRS_SERVICE_PATH] = UDEV_DIRS_SERVICE

    return files


def stage_files(root: Union[str, Path], files: Mapping[str, str], *, dry_run: bool = False) -> List[str]:
    """Write every entry of `files` under `root`; returns the staged paths in order.

    All paths are checked before anything is written, so a violation leaves
    the staging root untouched.
    """

    base = Path(root).resolve()
    if is_protected_path(str(base)):
        raise StagingViolation(f"Refusing to stage into protected path {base} (from {root})")

    for rel in files:
        staged_path(root, rel)

    return [str(write_file(root, rel, contents, dry_run=dry_run)) for rel, contents in files.items()]
