"""Hardware floors for a daily-driver desktop install (not minimum-to-boot)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SystemRequirements:
    min_ram_gb: int
    recommended_ram_gb: int
    min_disk_gb: int
    recommended_disk_gb: int
    cpu_microarch: str  # x86-64-v2, x86-64-v3, ...
    supported_vendors: Tuple[str, ...]
    gpu_vendors: Tuple[str, ...]

    def check_ram(self, ram_gb: float) -> str:
        return _grade(ram_gb, self.min_ram_gb, self.recommended_ram_gb)

    def check_disk(self, disk_gb: float) -> str:
        return _grade(disk_gb, self.min_disk_gb, self.recommended_disk_gb)


def _grade(value: float, minimum: int, recommended: int) -> str:
    if value >= recommended:
        return "ok"
    if value >= minimum:
        return "minimum"
    return "insufficient"


LEVITATE_REQUIREMENTS = SystemRequirements(
    min_ram_gb=8,
    recommended_ram_gb=16,
    min_disk_gb=64,
    recommended_disk_gb=256,
    cpu_microarch="x86-64-v3",  # Haswell+ / Zen+, AVX2
    supported_vendors=("AMD", "Intel"),
    gpu_vendors=("AMD", "NVIDIA", "Intel"),
)

# Lower floor for the musl/busybox base.
ACORN_REQUIREMENTS = SystemRequirements(
    min_ram_gb=4,
    recommended_ram_gb=8,
    min_disk_gb=32,
    recommended_disk_gb=128,
    cpu_microarch="x86-64-v3",
    supported_vendors=("AMD", "Intel"),
    gpu_vendors=("AMD", "NVIDIA", "Intel"),
)
