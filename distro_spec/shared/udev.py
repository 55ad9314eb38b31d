"""udev runtime pieces for the initramfs and the rootfs.

/run/udev is created three times over: by the init wrapper, by
udev-dirs.service and by tmpfiles.d. Socket activation needs it to exist.
"""

from __future__ import annotations

from typing import Tuple

# /usr/lib/udev/ helpers invoked from rules.
UDEV_HELPERS: Tuple[str, ...] = (
    "ata_id",
    "scsi_id",
    "cdrom_id",
    "v4l_id",
    "dmi_memory_id",
    "mtd_probe",
)

# These carry ConditionPathIsReadWrite=/sys, which fails in the initramfs.
UDEV_UNITS_TO_PATCH: Tuple[str, ...] = (
    "systemd-udevd-control.socket",
    "systemd-udevd-kernel.socket",
    "systemd-udevd.service",
    "systemd-udev-trigger.service",
    "systemd-udev-settle.service",
)

UDEV_TMPFILES_ENTRIES: Tuple[str, ...] = (
    "d /run/udev 0755 root root -",
    "d /run/udev/rules.d 0755 root root -",
)

UDEV_TMPFILES_CONF_PATH = "/usr/lib/tmpfiles.d/udev-initrd.conf"
UDEV_DIRS_SERVICE_PATH = "/usr/lib/systemd/system/udev-dirs.service"

UDEV_TMPFILES_CONF = """\
# Create /run/udev for udev socket activation in initrd
# Required before systemd-udevd-control.socket can bind
#
# Defense in depth: /run/udev is created in 3 places:
# 1. Init wrapper (earliest, most reliable)
# 2. udev-dirs.service (systemd-managed)
# 3. This tmpfiles.d config (declarative)
# Redundancy is intentional - udev socket activation is boot-critical.
d /run/udev 0755 root root -
d /run/udev/rules.d 0755 root root -
"""

UDEV_DIRS_SERVICE = """\
# LevitateOS: Create /run/udev before socket activation
#
# Defense in depth: /run/udev is created in 3 places:
# 1. Init wrapper (earliest, most reliable)
# 2. This service (systemd-managed)
# 3. tmpfiles.d/udev-initrd.conf (declarative)
# Redundancy is intentional - udev socket activation is boot-critical.
[Unit]
Description=Create udev runtime directories
Documentation=man:udev(7)
DefaultDependencies=no
# Run before both sockets.target AND the specific udev sockets
Before=sockets.target systemd-udevd-control.socket systemd-udevd-kernel.socket
ConditionPathIsDirectory=!/run/udev

[Service]
Type=oneshot
RemainAfterExit=yes
ExecStart=/bin/mkdir -p /run/udev /run/udev/rules.d
"""
