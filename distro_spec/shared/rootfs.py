"""Live root filesystem image settings.

EROFS is the primary format; squashfs constants are kept for older images.
"""

from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .paths import first_existing

logger = logging.getLogger(__name__)

ROOTFS_TYPE = "erofs"

EROFS_COMPRESSION = "zstd"
EROFS_COMPRESSION_LEVEL = 6
EROFS_CHUNK_SIZE = 1048576
EROFS_NAME = "filesystem.erofs"
EROFS_CDROM_PATH = "/media/cdrom/live/filesystem.erofs"

# Superblock magic (little endian u32) and where it sits in the image.
EROFS_MAGIC = 0xE0F5E1E2
EROFS_MAGIC_OFFSET = 1024

ROOTFS_NAME = EROFS_NAME
ROOTFS_CDROM_PATH = EROFS_CDROM_PATH

SQUASHFS_COMPRESSION = "zstd"
SQUASHFS_BLOCK_SIZE = "1M"
SQUASHFS_NAME = "filesystem.squashfs"
SQUASHFS_CDROM_PATH = "/media/cdrom/live/filesystem.squashfs"
SQUASHFS_MAGIC = b"hsqs"

# Must exist after extracting a rootfs onto the target.
ESSENTIAL_DIRS: Tuple[str, ...] = ("bin", "etc", "lib", "sbin", "usr", "var")

# Free space required on the target before extraction (2 GiB).
MIN_REQUIRED_BYTES = 2 * 1024 * 1024 * 1024

ROOTFS_SEARCH_PATHS: Tuple[str, ...] = (
    EROFS_CDROM_PATH,
    "/run/initramfs/live/filesystem.erofs",
    SQUASHFS_CDROM_PATH,
)


def detect_rootfs_type(path: Union[str, Path]) -> Optional[str]:
    """Return 'erofs', 'squashfs' or None by reading the image magic."""

    p = Path(path)
    with p.open("rb") as f:
        head = f.read(EROFS_MAGIC_OFFSET + 4)

    if head[:4] == SQUASHFS_MAGIC:
        return "squashfs"
    if len(head) >= EROFS_MAGIC_OFFSET + 4:
        (magic,) = struct.unpack_from("<I", head, EROFS_MAGIC_OFFSET)
        if magic == EROFS_MAGIC:
            return "erofs"

    logger.debug("No known rootfs magic in %s", str(p))
    return None


def find_rootfs() -> Optional[str]:
    return first_existing(ROOTFS_SEARCH_PATHS)


def missing_essential_dirs(root: Union[str, Path]) -> List[str]:
    r = Path(root)
    return [d for d in ESSENTIAL_DIRS if not (r / d).is_dir()]
