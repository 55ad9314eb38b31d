"""systemd services enabled on a fresh LevitateOS install."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..shared import services as _services


@dataclass(frozen=True)
class ServiceSpec:
    name: str  # without .service
    description: str
    required: bool

    def unit_name(self) -> str:
        return f"{self.name}.service"

    def enable_command(self) -> str:
        return f"systemctl enable {self.name}"

    def disable_command(self) -> str:
        return f"systemctl disable {self.name}"

    def start_command(self) -> str:
        return f"systemctl start {self.name}"

    def stop_command(self) -> str:
        return f"systemctl stop {self.name}"


ENABLED_SERVICES: Tuple[ServiceSpec, ...] = (
    ServiceSpec("systemd-networkd", "Network configuration", True),
    ServiceSpec("systemd-resolved", "DNS resolution", True),
    ServiceSpec("systemd-timesyncd", "Time synchronization", True),
    ServiceSpec("sshd", "SSH server", False),
)


def required_services() -> List[ServiceSpec]:
    return _services.required_services(ENABLED_SERVICES)


def optional_services() -> List[ServiceSpec]:
    return _services.optional_services(ENABLED_SERVICES)
