"""QEMU test defaults shared by both distros."""

# Sized like a real desktop, not a minimal VM.
QEMU_MEMORY_GB = 8
QEMU_DISK_GB = 256

QEMU_DISK_FILENAME = "virtual-disk.qcow2"
QEMU_SERIAL_LOG = "/tmp/levitateos-serial.log"

# TCG fallback when KVM is unavailable.
QEMU_CPU_MODE = "qemu64"

QCOW2_IMAGE_FILENAME = "levitateos.qcow2"
# Converted to qcow2 once built.
RAW_DISK_FILENAME = "levitateos.raw"
