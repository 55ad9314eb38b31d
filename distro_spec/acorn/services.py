"""OpenRC services enabled on a fresh AcornOS install."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..shared import services as _services


@dataclass(frozen=True)
class ServiceSpec:
    name: str
    runlevel: str  # boot, default, ...
    description: str
    required: bool

    def enable_command(self) -> str:
        return f"rc-update add {self.name} {self.runlevel}"

    def disable_command(self) -> str:
        return f"rc-update del {self.name} {self.runlevel}"

    def start_command(self) -> str:
        return f"rc-service {self.name} start"

    def stop_command(self) -> str:
        return f"rc-service {self.name} stop"


ENABLED_SERVICES: Tuple[ServiceSpec, ...] = (
    ServiceSpec("networking", "boot", "Network configuration", True),
    ServiceSpec("chronyd", "default", "Time synchronization", True),
    ServiceSpec("sshd", "default", "SSH server", False),
)


def required_services() -> List[ServiceSpec]:
    return _services.required_services(ENABLED_SERVICES)


def optional_services() -> List[ServiceSpec]:
    return _services.optional_services(ENABLED_SERVICES)
