"""Catalog shared by LevitateOS and AcornOS.

Types and helpers are re-exported here; the larger tables (components,
licenses, modules, PAM text) are imported from their own modules.
"""

from .boot import (
    DEFAULT_TIMEOUT,
    ENTRIES_DIR,
    ESP_MOUNT_POINT,
    LOADER_CONF_PATH,
    BootEntry,
    LoaderConfig,
    bootctl_install_command,
)
from .chroot import CHROOT_BIND_MOUNTS, BindMount, mounts_in_order, mounts_in_unmount_order
from .error import ToolError, ToolErrorCode, ToolErrorEnum
from .partitions import PartitionLayout, PartitionSpec
from .paths import PROTECTED_PATHS, is_protected_path
from .requirements import ACORN_REQUIREMENTS, LEVITATE_REQUIREMENTS, SystemRequirements
from .services import ServiceManager
from .system import is_mount_point, is_root
from .uki import UkiEntry
from .users import UserSpec

__all__ = [
    "DEFAULT_TIMEOUT",
    "ENTRIES_DIR",
    "ESP_MOUNT_POINT",
    "LOADER_CONF_PATH",
    "BootEntry",
    "LoaderConfig",
    "bootctl_install_command",
    "CHROOT_BIND_MOUNTS",
    "BindMount",
    "mounts_in_order",
    "mounts_in_unmount_order",
    "ToolError",
    "ToolErrorCode",
    "ToolErrorEnum",
    "PartitionLayout",
    "PartitionSpec",
    "PROTECTED_PATHS",
    "is_protected_path",
    "ACORN_REQUIREMENTS",
    "LEVITATE_REQUIREMENTS",
    "SystemRequirements",
    "ServiceManager",
    "is_mount_point",
    "is_root",
    "UkiEntry",
    "UserSpec",
]
