from __future__ import annotations

from typing import Tuple

# Searched in order when looking for boot media.
BOOT_DEVICE_SEARCH_ORDER: Tuple[str, ...] = (
    "/dev/sr0",  # CD/DVD
    "/dev/sda",
    "/dev/sdb",
    "/dev/vda",  # virtio (QEMU)
    "/dev/nvme0n1",
)
