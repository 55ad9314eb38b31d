from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

EFI_PARTITION_SIZE_MB = 512
EFI_PARTITION_LABEL = "EFI"
ROOT_PARTITION_LABEL = "root"
EFI_FILESYSTEM = "vfat"
ROOT_FILESYSTEM = "ext4"


@dataclass(frozen=True)
class PartitionSpec:
    number: int
    size_mb: int  # 0 = use remaining space
    filesystem: str
    label: str
    mount_point: str
    gpt_type: str  # sfdisk shorthand: U=EFI System, L=Linux filesystem


def _default_efi() -> PartitionSpec:
    return PartitionSpec(
        number=1,
        size_mb=EFI_PARTITION_SIZE_MB,
        filesystem=EFI_FILESYSTEM,
        label=EFI_PARTITION_LABEL,
        mount_point="/boot",
        gpt_type="U",
    )


def _default_root() -> PartitionSpec:
    return PartitionSpec(
        number=2,
        size_mb=0,
        filesystem=ROOT_FILESYSTEM,
        label=ROOT_PARTITION_LABEL,
        mount_point="/",
        gpt_type="L",
    )


@dataclass(frozen=True)
class PartitionLayout:
    """Two-partition GPT layout: bootable ESP followed by a root filling the disk."""

    efi: PartitionSpec = field(default_factory=_default_efi)
    root: PartitionSpec = field(default_factory=_default_root)

    def partitions(self) -> List[PartitionSpec]:
        return sorted([self.efi, self.root], key=lambda p: p.number)

    def to_sfdisk_script(self) -> str:
        return f"label: gpt\n,{self.efi.size_mb}M,{self.efi.gpt_type},*\n,,{self.root.gpt_type}\n"
