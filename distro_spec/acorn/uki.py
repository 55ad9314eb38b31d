"""AcornOS UKI menu entries."""

from __future__ import annotations

from typing import Tuple

from ..shared.uki import UkiEntry
from .paths import OS_NAME

UKI_LIVE_FILENAME = "acornos-live.efi"
UKI_EMERGENCY_FILENAME = "acornos-emergency.efi"
UKI_DEBUG_FILENAME = "acornos-debug.efi"
UKI_INSTALLED_FILENAME = "acornos.efi"
UKI_INSTALLED_RECOVERY_FILENAME = "acornos-recovery.efi"

UKI_ENTRIES: Tuple[UkiEntry, ...] = (
    UkiEntry(OS_NAME, UKI_LIVE_FILENAME),
    UkiEntry(f"{OS_NAME} (Emergency)", UKI_EMERGENCY_FILENAME, "emergency"),
    UkiEntry(f"{OS_NAME} (Debug)", UKI_DEBUG_FILENAME, "debug"),
)

UKI_INSTALLED_ENTRIES: Tuple[UkiEntry, ...] = (
    UkiEntry(OS_NAME, UKI_INSTALLED_FILENAME),
    UkiEntry(f"{OS_NAME} (Recovery)", UKI_INSTALLED_RECOVERY_FILENAME, "single"),
)
