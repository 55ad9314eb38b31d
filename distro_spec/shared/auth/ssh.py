"""OpenSSH server defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

SSHD_CONFIG_SETTINGS: Tuple[Tuple[str, str], ...] = (
    ("Port", "22"),
    ("PermitRootLogin", "yes"),  # tightened post-install
    ("PasswordAuthentication", "yes"),
    ("PubkeyAuthentication", "yes"),
    ("Protocol", "2"),
    ("AddressFamily", "any"),
    ("X11Forwarding", "no"),
    ("PrintMotD", "yes"),
    ("PermitEmptyPasswords", "no"),
    ("ClientAliveInterval", "300"),
    ("ClientAliveCountMax", "2"),
)

SSHD_TMPFILES_PATH = "/usr/lib/tmpfiles.d/sshd.conf"

# /run is tmpfs; sshd needs /run/sshd for privilege separation on every boot.
SSHD_TMPFILES_CONFIG = """\
# /run/sshd is needed by sshd for privilege separation
d /run/sshd 0755 root root -
"""


@dataclass(frozen=True)
class HostKeyConfig:
    key_type: str  # rsa|ecdsa|ed25519
    bits: int  # 0 for fixed-size keys
    min_recommended_bits: int

    def keygen_command(self, path: str) -> str:
        cmd = f"ssh-keygen -q -t {self.key_type}"
        if self.bits:
            cmd += f" -b {self.bits}"
        return f"{cmd} -N '' -f {path}"


# Shared keys are fine on the live ISO; installed systems regenerate on first boot.
HOST_KEY_CONFIGS: Tuple[HostKeyConfig, ...] = (
    HostKeyConfig("rsa", 3072, 2048),
    HostKeyConfig("ecdsa", 256, 256),
    HostKeyConfig("ed25519", 0, 0),
)

SSH_KEY_TYPES_PREFERRED: Tuple[str, ...] = (
    "ssh-ed25519",
    "ecdsa-sha2-nistp256",
    "ssh-rsa",
)


def sshd_config_text() -> str:
    return "".join(f"{key} {value}\n" for key, value in SSHD_CONFIG_SETTINGS)
