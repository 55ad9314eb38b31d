"""LevitateOS: Rocky Linux base, systemd, glibc, GNU coreutils, systemd-boot."""

from .boot import (
    BOOT_MODULES,
    boot_entry_with_label,
    boot_entry_with_partuuid,
    boot_entry_with_root,
    default_boot_entry,
    default_loader_config,
)
from .paths import (
    BOOT_ENTRY_FILENAME,
    DEFAULT_HOSTNAME,
    DEFAULT_SHELL,
    ISO_FILENAME,
    ISO_LABEL,
    OS_ID,
    OS_NAME,
    OS_VERSION,
    ROOT_SHELL,
    TARBALL_NAME,
    busybox_url,
    default_user,
    find_tarball,
)
from .services import ENABLED_SERVICES, ServiceSpec, optional_services, required_services
from .uki import UKI_ENTRIES, UKI_INSTALLED_ENTRIES

__all__ = [
    "BOOT_MODULES",
    "boot_entry_with_label",
    "boot_entry_with_partuuid",
    "boot_entry_with_root",
    "default_boot_entry",
    "default_loader_config",
    "BOOT_ENTRY_FILENAME",
    "DEFAULT_HOSTNAME",
    "DEFAULT_SHELL",
    "ISO_FILENAME",
    "ISO_LABEL",
    "OS_ID",
    "OS_NAME",
    "OS_VERSION",
    "ROOT_SHELL",
    "TARBALL_NAME",
    "busybox_url",
    "default_user",
    "find_tarball",
    "ENABLED_SERVICES",
    "ServiceSpec",
    "optional_services",
    "required_services",
    "UKI_ENTRIES",
    "UKI_INSTALLED_ENTRIES",
]
