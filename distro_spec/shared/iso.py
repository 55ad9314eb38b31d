"""Live ISO layout and kernel command line fragments."""

from __future__ import annotations

from typing import Tuple

ISO_BOOT_DIR = "boot"
ISO_LIVE_DIR = "live"
ISO_EFI_DIR = "EFI/BOOT"

ROOTFS_ISO_PATH = "live/filesystem.erofs"
SQUASHFS_ISO_PATH = "live/filesystem.squashfs"  # legacy
KERNEL_ISO_PATH = "boot/vmlinuz"
INITRAMFS_LIVE_ISO_PATH = "boot/initramfs-live.img"
LIVE_OVERLAY_ISO_PATH = "live/overlay"

EFIBOOT_FILENAME = "efiboot.img"
EFIBOOT_SIZE_MB = 200
EFI_BOOTLOADER = "BOOTX64.EFI"
EFI_GRUB = "grubx64.efi"

SERIAL_CONSOLE = "console=ttyS0,115200n8"
VGA_CONSOLE = "console=tty0"
SERIAL_BAUD_RATE = 115200
SELINUX_DISABLE = "selinux=0"
EFI_DEBUG = "efi=debug"

ISO_CHECKSUM_SUFFIX = ".sha512"
# sha512sum output: "<hash>  <file>"
SHA512_SEPARATOR = "  "

XORRISO_PARTITION_OFFSET = 16
XORRISO_FS_FLAGS: Tuple[str, ...] = (
    "-full-iso9660-filenames",
    "-joliet",
    "-rational-rock",
)


def checksum_filename(iso_filename: str) -> str:
    return iso_filename + ISO_CHECKSUM_SUFFIX


def checksum_line(digest: str, iso_filename: str) -> str:
    """One line of a .sha512 file, as `sha512sum -c` expects it."""

    return f"{digest}{SHA512_SEPARATOR}{iso_filename}\n"
