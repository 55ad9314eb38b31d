"""Bind mounts needed before entering a chroot.

Mount in CHROOT_BIND_MOUNTS order, unmount in reverse. Only the command
strings live here; running them is up to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class BindMount:
    source: str  # path on the live system
    target: str  # path relative to the chroot root
    required: bool = True

    def full_target(self, chroot_root: str) -> str:
        return f"{chroot_root}{self.target}"

    def mount_command(self, chroot_root: str) -> str:
        return f"mount --bind {self.source} {self.full_target(chroot_root)}"

    def umount_command(self, chroot_root: str) -> str:
        return f"umount {self.full_target(chroot_root)}"


CHROOT_BIND_MOUNTS: Tuple[BindMount, ...] = (
    BindMount("/dev", "/dev"),
    BindMount("/dev/pts", "/dev/pts"),
    BindMount("/proc", "/proc"),
    BindMount("/sys", "/sys"),
    # UEFI-only targets, so efivars is mandatory.
    BindMount("/sys/firmware/efi/efivars", "/sys/firmware/efi/efivars"),
    BindMount("/run", "/run"),
)


def mounts_in_order() -> Iterator[BindMount]:
    return iter(CHROOT_BIND_MOUNTS)


def mounts_in_unmount_order() -> Iterator[BindMount]:
    return reversed(CHROOT_BIND_MOUNTS)
