"""Kernel module names per initramfs flavour, and where to find them.

Consumed by the initramfs builder (copies the .ko files) and by the image
checker (verifies they are present).
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Live ISO boot: CD/USB media plus the EROFS rootfs. EROFS itself is built in.
LIVE_MODULES: Tuple[str, ...] = (
    "virtio",
    "virtio_ring",
    "virtio_pci",
    "scsi_mod",
    "cdrom",
    "sr_mod",
    "sd_mod",
    "virtio_scsi",
    "isofs",
    "nvme-core",
    "nvme",
    "libata",
    "libahci",
    "ahci",
    "virtio_blk",
    "loop",
    "overlay",
)

# Built into the LevitateOS kernel (=y), so there is no .ko to copy.
LIVE_MODULES_BUILTIN: Tuple[str, ...] = (
    "erofs",
    "loop",
    "overlay",
    "virtio",
    "virtio_ring",
    "virtio_pci",
    "virtio_scsi",
    "virtio_blk",
    "scsi_mod",
    "sd_mod",
    "cdrom",
    "sr_mod",
    "isofs",
    "nvme-core",
    "nvme",
    "libata",
    "libahci",
    "ahci",
)

# Installed system boot: every storage path plus filesystems and dm for LUKS/LVM.
INSTALL_MODULES: Tuple[str, ...] = (
    "virtio",
    "virtio_ring",
    "virtio_pci",
    "virtio_scsi",
    "virtio_blk",
    "scsi_mod",
    "sd_mod",
    "nvme-core",
    "nvme",
    "libata",
    "libahci",
    "ahci",
    "ata_piix",
    "usb-common",
    "usbcore",
    "xhci-hcd",
    "xhci-pci",
    "ehci-hcd",
    "ehci-pci",
    "usb-storage",
    "hid",  # keyboards for LUKS prompts
    "hid-generic",
    "usbhid",
    "ext4",
    "xfs",
    "btrfs",
    "fat",
    "vfat",
    "nls_cp437",
    "nls_iso8859-1",
    "nls_utf8",
    "dm-mod",
    "dm-crypt",
)

# The installed kernel builds the whole install set in.
INSTALL_MODULES_BUILTIN: Tuple[str, ...] = INSTALL_MODULES

# Module name -> path under /lib/modules/<kver>/, without the .ko suffix.
MODULE_PATHS: Dict[str, str] = {
    "virtio": "kernel/drivers/virtio/virtio",
    "virtio_ring": "kernel/drivers/virtio/virtio_ring",
    "virtio_pci": "kernel/drivers/virtio/virtio_pci",
    "virtio_scsi": "kernel/drivers/scsi/virtio_scsi",
    "virtio_blk": "kernel/drivers/block/virtio_blk",
    "scsi_mod": "kernel/drivers/scsi/scsi_mod",
    "sd_mod": "kernel/drivers/scsi/sd_mod",
    "sr_mod": "kernel/drivers/scsi/sr_mod",
    "cdrom": "kernel/drivers/cdrom/cdrom",
    "isofs": "kernel/fs/isofs/isofs",
    "nvme-core": "kernel/drivers/nvme/host/nvme-core",
    "nvme": "kernel/drivers/nvme/host/nvme",
    "libata": "kernel/drivers/ata/libata",
    "libahci": "kernel/drivers/ata/libahci",
    "ahci": "kernel/drivers/ata/ahci",
    "ata_piix": "kernel/drivers/ata/ata_piix",
    "loop": "kernel/drivers/block/loop",
    "overlay": "kernel/fs/overlayfs/overlay",
    "usb-common": "kernel/drivers/usb/common/usb-common",
    "usbcore": "kernel/drivers/usb/core/usbcore",
    "xhci-hcd": "kernel/drivers/usb/host/xhci-hcd",
    "xhci-pci": "kernel/drivers/usb/host/xhci-pci",
    "ehci-hcd": "kernel/drivers/usb/host/ehci-hcd",
    "ehci-pci": "kernel/drivers/usb/host/ehci-pci",
    "usb-storage": "kernel/drivers/usb/storage/usb-storage",
    "hid": "kernel/drivers/hid/hid",
    "hid-generic": "kernel/drivers/hid/hid-generic",
    "usbhid": "kernel/drivers/hid/usbhid/usbhid",
    "ext4": "kernel/fs/ext4/ext4",
    "xfs": "kernel/fs/xfs/xfs",
    "btrfs": "kernel/fs/btrfs/btrfs",
    "fat": "kernel/fs/fat/fat",
    "vfat": "kernel/fs/vfat/vfat",
    "nls_cp437": "kernel/fs/nls/nls_cp437",
    "nls_iso8859-1": "kernel/fs/nls/nls_iso8859-1",
    "nls_utf8": "kernel/fs/nls/nls_utf8",
    "dm-mod": "kernel/drivers/md/dm-mod",
    "dm-crypt": "kernel/drivers/md/dm-crypt",
}


def module_path(name: str) -> Optional[str]:
    return MODULE_PATHS.get(name)


def module_paths_for(modules: Iterable[str]) -> List[str]:
    """Paths for `modules` in the given order; unknown names are skipped."""

    paths: List[str] = []
    for name in modules:
        p = module_path(name)
        if p is None:
            logger.warning("No known path for kernel module %s; skipping", name)
            continue
        paths.append(p)
    return paths
