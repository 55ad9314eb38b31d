"""AcornOS: Alpine Linux base, OpenRC, musl, busybox, systemd-boot."""

from .boot import (
    BOOT_MODULES,
    boot_entry_with_label,
    boot_entry_with_partuuid,
    boot_entry_with_root,
    default_boot_entry,
    default_loader_config,
)
from .packages import (
    ALPINE_KEY_FILENAMES,
    BOOTABLE_PACKAGES,
    CORE_PACKAGES,
    DAILY_DRIVER_PACKAGES,
    LIVE_ISO_PACKAGES,
    all_live_packages,
    alpine_keys,
    bootable_packages,
    core_packages,
    daily_driver_packages,
)
from .paths import (
    ALPINE_PATCH_VERSION,
    ALPINE_VERSION,
    APK_TOOLS_VERSION,
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
    TARGET_ARCH,
    alpine_community_repo,
    alpine_iso_sha256_url,
    alpine_iso_url,
    apk_tools_static_url,
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
    "ALPINE_KEY_FILENAMES",
    "BOOTABLE_PACKAGES",
    "CORE_PACKAGES",
    "DAILY_DRIVER_PACKAGES",
    "LIVE_ISO_PACKAGES",
    "all_live_packages",
    "alpine_keys",
    "bootable_packages",
    "core_packages",
    "daily_driver_packages",
    "ALPINE_PATCH_VERSION",
    "ALPINE_VERSION",
    "APK_TOOLS_VERSION",
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
    "TARGET_ARCH",
    "alpine_community_repo",
    "alpine_iso_sha256_url",
    "alpine_iso_url",
    "apk_tools_static_url",
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
