"""LevitateOS UKI menu entries.

Live entries boot the tiny initramfs and mount the ISO's EROFS image;
installed entries boot the full dracut initramfs from disk.
"""

from __future__ import annotations

from typing import Tuple

from ..shared.uki import (
    UKI_DEBUG_FILENAME,
    UKI_EMERGENCY_FILENAME,
    UKI_INSTALLED_FILENAME,
    UKI_INSTALLED_RECOVERY_FILENAME,
    UKI_LIVE_FILENAME,
    UkiEntry,
)
from .paths import OS_NAME

UKI_ENTRIES: Tuple[UkiEntry, ...] = (
    UkiEntry(OS_NAME, UKI_LIVE_FILENAME),
    UkiEntry(f"{OS_NAME} (Emergency)", UKI_EMERGENCY_FILENAME, "emergency"),
    UkiEntry(f"{OS_NAME} (Debug)", UKI_DEBUG_FILENAME, "debug"),
)

UKI_INSTALLED_ENTRIES: Tuple[UkiEntry, ...] = (
    UkiEntry(OS_NAME, UKI_INSTALLED_FILENAME),
    UkiEntry(f"{OS_NAME} (Recovery)", UKI_INSTALLED_RECOVERY_FILENAME, "single"),
)
