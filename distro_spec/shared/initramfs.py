from __future__ import annotations

from typing import Tuple

INITRAMFS_DIRS: Tuple[str, ...] = (
    "bin",
    "dev",
    "proc",
    "sys",
    "tmp",
    "mnt",
    "squashfs",
    "overlay",
    "newroot",
    "live-overlay",
)

# Mount points used by the init script.
MOUNT_SQUASHFS = "/squashfs"
MOUNT_ROOTFS = "/rootfs"
MOUNT_OVERLAY = "/overlay"
MOUNT_NEWROOT = "/newroot"  # switch_root target
MOUNT_LIVE_OVERLAY = "/live-overlay"

CPIO_GZIP_LEVEL = 9
