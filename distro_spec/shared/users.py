from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

ROOT_HOME = "/root"

# First IDs handed to regular users.
MIN_UID = 1000
MIN_GID = 1000

SUDOERS_WHEEL_LINE = "%wheel ALL=(ALL:ALL) ALL"
SUDOERS_D_PATH = "/etc/sudoers.d"
SUDOERS_WHEEL_FILENAME = "wheel"


@dataclass(frozen=True)
class UserSpec:
    username: str
    shell: str
    groups: Tuple[str, ...] = field(default_factory=tuple)
    full_name: Optional[str] = None
    create_home: bool = True

    @classmethod
    def new(cls, username: str, shell: str, groups: Sequence[str] = ()) -> "UserSpec":
        return cls(username=username, shell=shell, groups=tuple(groups))

    def with_full_name(self, name: str) -> "UserSpec":
        return replace(self, full_name=name)

    def useradd_command(self) -> str:
        cmd = f"useradd -m -s {self.shell}"
        if self.groups:
            cmd += " -G " + ",".join(self.groups)
        if self.full_name is not None:
            cmd += f' -c "{self.full_name}"'
        return f"{cmd} {self.username}"


def sudoers_wheel_path() -> str:
    return f"{SUDOERS_D_PATH}/{SUDOERS_WHEEL_FILENAME}"


def sudoers_wheel_file() -> str:
    return SUDOERS_WHEEL_LINE + "\n"
