"""Unified Kernel Image paths (kernel + initramfs + cmdline in one PE binary)."""

from __future__ import annotations

from dataclasses import dataclass

UKI_EFI_DIR = "EFI/Linux"

# Stub consumed by ukify.
SYSTEMD_BOOT_STUB = "/usr/lib/systemd/boot/efi/linuxx64.efi.stub"
# Copied to EFI/BOOT/BOOTX64.EFI.
SYSTEMD_BOOT_EFI = "/usr/lib/systemd/boot/efi/systemd-bootx64.efi"

UKI_LIVE_FILENAME = "levitateos-live.efi"
UKI_EMERGENCY_FILENAME = "levitateos-emergency.efi"
UKI_DEBUG_FILENAME = "levitateos-debug.efi"

# Installed systems boot the full initramfs with root=LABEL=root.
UKI_INSTALLED_FILENAME = "levitateos.efi"
UKI_INSTALLED_RECOVERY_FILENAME = "levitateos-recovery.efi"

LOADER_ENTRIES_DIR = "loader"


@dataclass(frozen=True)
class UkiEntry:
    name: str  # boot menu title
    filename: str
    extra_cmdline: str = ""

    def esp_path(self) -> str:
        return f"{UKI_EFI_DIR}/{self.filename}"

    def cmdline(self, base: str) -> str:
        """Kernel command line: `base` plus this entry's extra arguments."""

        if not self.extra_cmdline:
            return base
        return f"{base} {self.extra_cmdline}"
