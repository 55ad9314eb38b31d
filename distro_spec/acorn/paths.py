"""Names and locations of AcornOS build outputs, install defaults and Alpine downloads."""

from __future__ import annotations

from typing import Optional, Tuple

from ..shared.paths import (  # noqa: F401
    AMD_UCODE_FILENAME,
    DEFAULT_USER_GROUPS,
    INITRAMFS_FILENAME,
    INTEL_UCODE_FILENAME,
    KERNEL_FILENAME,
    LOADER_CONF_FILENAME,
    OS_VERSION,
    env_override,
    first_existing,
)
from ..shared.users import UserSpec

ISO_LABEL = "ACORNOS"

# Alpine kernels ship squashfs with gzip enabled.
SQUASHFS_COMPRESSION = "gzip"
SQUASHFS_BLOCK_SIZE = "1M"
SQUASHFS_NAME = "filesystem.squashfs"
SQUASHFS_CDROM_PATH = "/media/cdrom/live/filesystem.squashfs"

TARBALL_NAME = "acornos-base.tar.xz"

BOOT_ENTRY_FILENAME = "acornos.conf"

DEFAULT_HOSTNAME = "acornos"
OS_NAME = "AcornOS"
OS_ID = "acornos"

TARBALL_SEARCH_PATHS: Tuple[str, ...] = (
    "/acornos-base.tar.xz",
    "/run/media/acornos-base.tar.xz",
    "/mnt/cdrom/acornos-base.tar.xz",
)

# busybox ash; bash is installed later as an ordinary package.
DEFAULT_SHELL = "/bin/ash"
ROOT_SHELL = "/bin/ash"

ISO_FILENAME = "acornos.iso"

QEMU_MEMORY_GB = 4
QEMU_DISK_GB = 20

BUSYBOX_VERSION = "1.35.0"
BUSYBOX_URL = f"https://busybox.net/downloads/binaries/{BUSYBOX_VERSION}-x86_64-linux-musl/busybox"
BUSYBOX_URL_ENV = "BUSYBOX_URL"

INITRAMFS_BUILD_DIR = "initramfs-tiny-root"
INITRAMFS_OUTPUT = "initramfs-tiny.cpio.gz"
INITRAMFS_LIVE_OUTPUT = INITRAMFS_OUTPUT

LIVE_ISSUE_MESSAGE = "\nAcornOS Live - \\l\n\n"

# Alpine release the rootfs is bootstrapped from.
ALPINE_VERSION = "3.21"
ALPINE_PATCH_VERSION = "3.21.3"
APK_TOOLS_VERSION = "2.14.6-r3"
TARGET_ARCH = "x86_64"

ALPINE_MIRROR = "https://dl-cdn.alpinelinux.org/alpine"

# Local copies skip the download when set.
ALPINE_ISO_PATH_ENV = "ALPINE_ISO_PATH"
APK_TOOLS_PATH_ENV = "APK_TOOLS_PATH"


def alpine_iso_filename() -> str:
    return f"alpine-extended-{ALPINE_PATCH_VERSION}-{TARGET_ARCH}.iso"


def alpine_iso_url() -> str:
    return f"{ALPINE_MIRROR}/v{ALPINE_VERSION}/releases/{TARGET_ARCH}/{alpine_iso_filename()}"


def alpine_iso_sha256_url() -> str:
    return f"{alpine_iso_url()}.sha256"


def alpine_community_repo() -> str:
    return f"{ALPINE_MIRROR}/v{ALPINE_VERSION}/community"


def apk_tools_static_filename() -> str:
    return f"apk-tools-static-{APK_TOOLS_VERSION}.apk"


def apk_tools_static_url() -> str:
    return f"{ALPINE_MIRROR}/v{ALPINE_VERSION}/main/{TARGET_ARCH}/{apk_tools_static_filename()}"


ALPINE_EXTENDED_ISO_FILENAME = alpine_iso_filename()
ALPINE_EXTENDED_ISO_URL = alpine_iso_url()
ALPINE_EXTENDED_ISO_SHA256_URL = alpine_iso_sha256_url()
APK_TOOLS_STATIC_FILENAME = apk_tools_static_filename()
APK_TOOLS_STATIC_URL = apk_tools_static_url()


def alpine_iso_path() -> Optional[str]:
    """Local Alpine ISO named by $ALPINE_ISO_PATH, if any."""
    return env_override(ALPINE_ISO_PATH_ENV, "") or None


def apk_tools_path() -> Optional[str]:
    return env_override(APK_TOOLS_PATH_ENV, "") or None


def find_tarball() -> Optional[str]:
    return first_existing(TARBALL_SEARCH_PATHS)


def busybox_url() -> str:
    return env_override(BUSYBOX_URL_ENV, BUSYBOX_URL)


def default_user(username: str) -> UserSpec:
    return UserSpec.new(username, DEFAULT_SHELL, DEFAULT_USER_GROUPS)
