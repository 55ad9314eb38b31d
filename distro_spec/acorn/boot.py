"""AcornOS boot configuration.

AcornOS boots with systemd-boot even though it runs OpenRC as init.
"""

from __future__ import annotations

from typing import Tuple

from ..shared.boot import BootEntry, LoaderConfig
from .paths import INITRAMFS_FILENAME, KERNEL_FILENAME, OS_ID, OS_NAME

# Alpine's linux-lts compresses modules with gzip.
BOOT_MODULES: Tuple[str, ...] = (
    "kernel/drivers/cdrom/cdrom.ko.gz",
    "kernel/drivers/scsi/sr_mod.ko.gz",
    "kernel/drivers/scsi/virtio_scsi.ko.gz",
    "kernel/fs/isofs/isofs.ko.gz",
    "kernel/drivers/block/virtio_blk.ko.gz",
    # squashfs + overlay live root
    "kernel/drivers/block/loop.ko.gz",
    "kernel/fs/squashfs/squashfs.ko.gz",
    "kernel/fs/overlayfs/overlay.ko.gz",
)


def default_boot_entry() -> BootEntry:
    return BootEntry.with_defaults(OS_ID, OS_NAME, KERNEL_FILENAME, INITRAMFS_FILENAME)


def boot_entry_with_root(root_device: str) -> BootEntry:
    return BootEntry.with_root(OS_ID, OS_NAME, KERNEL_FILENAME, INITRAMFS_FILENAME, root_device)


def boot_entry_with_partuuid(partuuid: str) -> BootEntry:
    return BootEntry.with_partuuid(OS_ID, OS_NAME, KERNEL_FILENAME, INITRAMFS_FILENAME, partuuid)


def boot_entry_with_label(label: str) -> BootEntry:
    return BootEntry.with_label(OS_ID, OS_NAME, KERNEL_FILENAME, INITRAMFS_FILENAME, label)


def default_loader_config() -> LoaderConfig:
    return LoaderConfig.with_defaults(OS_ID)
