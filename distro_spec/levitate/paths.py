"""Names and locations of LevitateOS build outputs and install defaults."""

from __future__ import annotations

from typing import Optional, Tuple

from ..shared.paths import (  # noqa: F401
    AMD_UCODE_FILENAME,
    DEFAULT_USER_GROUPS,
    INITRAMFS_BUILD_DIR,
    INITRAMFS_FILENAME,
    INITRAMFS_LIVE_OUTPUT,
    INTEL_UCODE_FILENAME,
    KERNEL_FILENAME,
    LOADER_CONF_FILENAME,
    OS_VERSION,
    env_override,
    first_existing,
)
from ..shared.users import UserSpec

# Must match `xorriso -V`; the initramfs finds the boot media by this label.
ISO_LABEL = "LEVITATEOS"

# gzip works on every kernel; zstd needs CONFIG_SQUASHFS_ZSTD=y.
SQUASHFS_COMPRESSION = "gzip"
SQUASHFS_BLOCK_SIZE = "1M"
SQUASHFS_NAME = "filesystem.squashfs"
SQUASHFS_CDROM_PATH = "/media/cdrom/live/filesystem.squashfs"

# Container-based rootfs tests only; installs extract the image instead.
TARBALL_NAME = "levitateos-base.tar.xz"

BOOT_ENTRY_FILENAME = "levitateos.conf"

DEFAULT_HOSTNAME = "levitateos"
OS_NAME = "LevitateOS"
OS_ID = "levitateos"

TARBALL_SEARCH_PATHS: Tuple[str, ...] = (
    "/levitateos-base.tar.xz",
    "/run/media/levitateos-base.tar.xz",
    "/mnt/cdrom/levitateos-base.tar.xz",
)

DEFAULT_SHELL = "/bin/bash"
ROOT_SHELL = "/bin/bash"

ISO_FILENAME = "levitateos.iso"

QEMU_MEMORY_GB = 4
QEMU_DISK_GB = 20

BUSYBOX_URL = "https://busybox.net/downloads/binaries/1.35.0-x86_64-linux-musl/busybox"
BUSYBOX_URL_ENV = "BUSYBOX_URL"

# Full dracut initramfs for the installed system, copied to /boot/initramfs.img.
INITRAMFS_INSTALLED_OUTPUT = "initramfs-installed.img"
INITRAMFS_INSTALLED_ISO_PATH = "boot/initramfs-installed.img"

# /etc/issue on the live ISO. "\l" is expanded by agetty to the tty name.
LIVE_ISSUE_MESSAGE = "\nLevitateOS Live - \\l\n\n"


def find_tarball() -> Optional[str]:
    return first_existing(TARBALL_SEARCH_PATHS)


def busybox_url() -> str:
    return env_override(BUSYBOX_URL_ENV, BUSYBOX_URL)


def default_user(username: str) -> UserSpec:
    return UserSpec.new(username, DEFAULT_SHELL, DEFAULT_USER_GROUPS)
