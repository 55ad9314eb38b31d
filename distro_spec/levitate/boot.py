from __future__ import annotations

from ..shared.boot import BootEntry, LoaderConfig
from ..shared.boot_modules import CORE_BOOT_MODULES
from .paths import INITRAMFS_FILENAME, KERNEL_FILENAME, OS_ID, OS_NAME

BOOT_MODULES = CORE_BOOT_MODULES


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
