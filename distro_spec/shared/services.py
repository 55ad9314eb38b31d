from __future__ import annotations

from typing import List, Protocol, Sequence, TypeVar


class ServiceManager(Protocol):
    """Init-system agnostic view of a service (systemd or OpenRC)."""

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def required(self) -> bool:
        """Whether failing to enable this service should abort an install."""
        ...

    def enable_command(self) -> str: ...

    def disable_command(self) -> str: ...

    def start_command(self) -> str: ...

    def stop_command(self) -> str: ...


S = TypeVar("S", bound=ServiceManager)


def required_services(services: Sequence[S]) -> List[S]:
    return [s for s in services if s.required]


def optional_services(services: Sequence[S]) -> List[S]:
    return [s for s in services if not s.required]
