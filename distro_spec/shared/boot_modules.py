"""Kernel modules loaded by the initramfs, as paths under /lib/modules/<kver>/.

Order matters: the init script uses insmod, so dependencies come first.
"""

from __future__ import annotations

from typing import Tuple

VIRTIO_CORE: Tuple[str, ...] = (
    "kernel/drivers/virtio/virtio",
    "kernel/drivers/virtio/virtio_ring",
    "kernel/drivers/virtio/virtio_pci",
)

SCSI_CORE: Tuple[str, ...] = ("kernel/drivers/scsi/scsi_mod",)

CDROM_SCSI: Tuple[str, ...] = (
    "kernel/drivers/cdrom/cdrom",
    "kernel/drivers/scsi/sr_mod",
    "kernel/drivers/scsi/sd_mod",
    "kernel/drivers/scsi/virtio_scsi",
    "kernel/fs/isofs/isofs",
)

NVME_STORAGE: Tuple[str, ...] = (
    "kernel/drivers/nvme/host/nvme-core",
    "kernel/drivers/nvme/host/nvme",
)

SATA_STORAGE: Tuple[str, ...] = (
    "kernel/drivers/ata/libata",
    "kernel/drivers/ata/libahci",
    "kernel/drivers/ata/ahci",
)

VIRTIO_BLK: Tuple[str, ...] = ("kernel/drivers/block/virtio_blk",)

SQUASHFS_OVERLAY: Tuple[str, ...] = (
    "kernel/drivers/block/loop",
    "kernel/fs/squashfs/squashfs",
    "kernel/fs/overlayfs/overlay",
)

USB_CORE: Tuple[str, ...] = (
    "kernel/drivers/usb/common/usb-common",
    "kernel/drivers/usb/core/usbcore",
)

# xHCI for USB 3, EHCI for USB 2.
USB_HOST_CONTROLLERS: Tuple[str, ...] = (
    "kernel/drivers/usb/host/xhci-hcd",
    "kernel/drivers/usb/host/xhci-pci",
    "kernel/drivers/usb/host/ehci-hcd",
    "kernel/drivers/usb/host/ehci-pci",
)

USB_STORAGE: Tuple[str, ...] = ("kernel/drivers/usb/storage/usb-storage",)

USB_HID: Tuple[str, ...] = (
    "kernel/drivers/hid/hid",
    "kernel/drivers/hid/hid-generic",
    "kernel/drivers/hid/usbhid/usbhid",
)

# QEMU, CD-ROM, NVMe, SATA and squashfs+overlay live boot. No USB.
CORE_BOOT_MODULES: Tuple[str, ...] = (
    VIRTIO_CORE + SCSI_CORE + CDROM_SCSI + NVME_STORAGE + SATA_STORAGE + VIRTIO_BLK + SQUASHFS_OVERLAY
)

# USB boot media and USB keyboards during early boot.
USB_BOOT_MODULES: Tuple[str, ...] = USB_CORE + USB_HOST_CONTROLLERS + USB_STORAGE + USB_HID

INSTALL_BOOT_MODULES: Tuple[str, ...] = CORE_BOOT_MODULES + USB_BOOT_MODULES
