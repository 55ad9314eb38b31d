"""PAM service files (/etc/pam.d) and security configs (/etc/security).

File bodies are written out verbatim by the rootfs builder.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

PAM_SYSTEM_AUTH = """\
# LevitateOS system-auth - PAM configuration for system authentication
# Based on Fedora/Rocky authselect defaults

auth        required                     pam_env.so
auth        required                     pam_faildelay.so delay=2000000
auth        sufficient                   pam_unix.so nullok
auth        required                     pam_deny.so

account     required                     pam_unix.so
account     required                     pam_nologin.so

password    requisite                    pam_pwquality.so
password    sufficient                   pam_unix.so yescrypt shadow use_authtok
password    required                     pam_deny.so

session     optional                     pam_keyinit.so revoke
session     required                     pam_limits.so
-session    optional                     pam_systemd.so
session     [success=1 default=ignore]   pam_succeed_if.so service in crond quiet use_uid
session     required                     pam_unix.so
"""

PAM_POSTLOGIN = """\
# Postlogin processing (included by login services)
session     optional                     pam_lastlog.so showfailed silent
session     optional                     pam_motd.so motd=/etc/motd
session     optional                     pam_motd.so noupdate
"""

PAM_LOGIN = """\
# LevitateOS login - PAM configuration for local login
auth       substack     system-auth
auth       include      postlogin
account    required     pam_nologin.so
account    include      system-auth
password   include      system-auth
session    required     pam_loginuid.so
session    required     pam_namespace.so
session    optional     pam_keyinit.so force revoke
session    include      system-auth
session    include      postlogin
"""

PAM_SSHD = """\
# SSH login - PAM configuration for SSH remote access
auth       substack     system-auth
auth       include      postlogin
account    required     pam_nologin.so
account    include      system-auth
password   include      system-auth
session    required     pam_loginuid.so
session    required     pam_namespace.so
session    optional     pam_keyinit.so force revoke
session    include      system-auth
session    include      postlogin
"""

PAM_REMOTE = """\
# Remote login - PAM configuration for remote login services
auth       substack     system-auth
auth       include      postlogin
account    required     pam_nologin.so
account    include      system-auth
password   include      system-auth
session    required     pam_loginuid.so
session    include      system-auth
session    include      postlogin
"""

PAM_SUDO = """\
# sudo - PAM configuration for privilege escalation
auth       include      system-auth
account    include      system-auth
password   include      system-auth
session    include      system-auth
"""

PAM_SU = """\
# su - PAM configuration for user switching
auth       sufficient   pam_rootok.so
auth       include      system-auth
account    required     pam_nologin.so
account    include      system-auth
password   include      system-auth
session    required     pam_unix.so
session    include      system-auth
"""

PAM_SU_L = """\
# su-l - PAM configuration for su with login shell
auth       sufficient   pam_rootok.so
auth       include      system-auth
account    required     pam_nologin.so
account    include      system-auth
password   include      system-auth
session    required     pam_loginuid.so
session    required     pam_namespace.so
session    optional     pam_keyinit.so force revoke
session    required     pam_unix.so
session    include      system-auth
"""

PAM_RUNUSER = """\
# runuser - PAM configuration for root-only user switching
auth       sufficient   pam_rootok.so
account    include      system-auth
session    include      system-auth
"""

PAM_RUNUSER_L = """\
# runuser-l - PAM configuration for runuser with login shell
auth       sufficient   pam_rootok.so
account    include      system-auth
session    required     pam_loginuid.so
session    required     pam_namespace.so
session    include      system-auth
"""

PAM_CROND = """\
# crond - PAM configuration for cron job execution
auth       required     pam_env.so
auth       required     pam_unix.so
account    required     pam_unix.so
session    required     pam_limits.so
"""

PAM_PASSWD = """\
# passwd - PAM configuration for password changes
password   substack     system-auth
"""

PAM_CHPASSWD = """\
# chpasswd - PAM configuration for batch password changes
account    required     pam_unix.so
password   required     pam_unix.so yescrypt shadow
"""

PAM_CHFN = """\
# chfn - PAM configuration for changing user info
auth       include      system-auth
account    include      system-auth
password   include      system-auth
session    include      system-auth
"""

PAM_CHSH = """\
# chsh - PAM configuration for changing shell
auth       include      system-auth
account    include      system-auth
password   include      system-auth
session    include      system-auth
"""

PAM_OTHER = """\
# other - Fallback PAM configuration (deny all)
auth       required     pam_deny.so
account    required     pam_deny.so
password   required     pam_deny.so
session    required     pam_deny.so
"""

PAM_SYSTEMD_USER = """\
# systemd-user - PAM configuration for systemd user sessions
auth       required     pam_env.so
auth       required     pam_unix.so nullok
account    required     pam_unix.so
password   required     pam_unix.so
session    required     pam_loginuid.so
session    optional     pam_keyinit.so revoke
session    required     pam_limits.so
-session   optional     pam_systemd.so
session    required     pam_unix.so
"""

LIMITS_CONF = """\
*               soft    core            0
*               hard    nofile          1048576
*               soft    nofile          1024
root            soft    nofile          1048576
"""

ACCESS_CONF = """\
# Access control rules for pam_access.so
# Format: permission:users:origins
# Allow root from LOCAL or network
+:root:LOCAL
# Allow all other users
+:ALL:ALL
"""

NAMESPACE_CONF = """\
# Polyinstantiation configuration for pam_namespace.so
# Defines per-user isolated directories
# See pam_namespace(5) for syntax
"""

PAM_ENV_CONF = """\
# PAM environment configuration
# Format: variable DEFAULT|@{PAM_ITEM}
# See pam_env.conf(5) for syntax
"""

PWQUALITY_CONF = """\
# Password quality requirements (pam_pwquality.so)
minlen = 12
minclass = 3
dcredit = -1
ucredit = -1
maxrepeat = 3
"""

# Install path (relative to the rootfs) -> file body.
PAM_FILES: Dict[str, str] = {
    "etc/pam.d/system-auth": PAM_SYSTEM_AUTH,
    "etc/pam.d/postlogin": PAM_POSTLOGIN,
    "etc/pam.d/login": PAM_LOGIN,
    "etc/pam.d/sshd": PAM_SSHD,
    "etc/pam.d/remote": PAM_REMOTE,
    "etc/pam.d/sudo": PAM_SUDO,
    "etc/pam.d/su": PAM_SU,
    "etc/pam.d/su-l": PAM_SU_L,
    "etc/pam.d/runuser": PAM_RUNUSER,
    "etc/pam.d/runuser-l": PAM_RUNUSER_L,
    "etc/pam.d/crond": PAM_CROND,
    "etc/pam.d/passwd": PAM_PASSWD,
    "etc/pam.d/chpasswd": PAM_CHPASSWD,
    "etc/pam.d/chfn": PAM_CHFN,
    "etc/pam.d/chsh": PAM_CHSH,
    "etc/pam.d/other": PAM_OTHER,
    "etc/pam.d/systemd-user": PAM_SYSTEMD_USER,
}

SECURITY_CONF_FILES: Dict[str, str] = {
    "etc/security/limits.conf": LIMITS_CONF,
    "etc/security/access.conf": ACCESS_CONF,
    "etc/security/namespace.conf": NAMESPACE_CONF,
    "etc/security/pam_env.conf": PAM_ENV_CONF,
    "etc/security/pwquality.conf": PWQUALITY_CONF,
}

PAM_PHASES: Tuple[str, ...] = ("auth", "account", "password", "session")

_RULE_RE = re.compile(r"^(?P<dash>-?)(?P<type>[a-z]+)\s+(?P<control>\[[^\]]*\]|\S+)\s+(?P<module>\S+)\s*(?P<args>.*)$")


@dataclass(frozen=True)
class PamRule:
    type: str  # auth|account|password|session
    control: str  # required, sufficient, include, [success=1 default=ignore], ...
    module: str  # module .so or the included service name
    args: Tuple[str, ...] = ()
    ignore_missing: bool = False  # leading '-'


def parse_pam_config(text: str) -> List[PamRule]:
    """Parse a pam.d service file into its rules, skipping comments and blanks."""

    rules: List[PamRule] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = _RULE_RE.match(line)
        if not m or m.group("type") not in PAM_PHASES:
            raise ValueError(f"Malformed PAM rule on line {lineno}: {raw!r}")
        rules.append(
            PamRule(
                type=m.group("type"),
                control=m.group("control"),
                module=m.group("module"),
                args=tuple(m.group("args").split()),
                ignore_missing=bool(m.group("dash")),
            )
        )
    return rules


def rules_for_phase(text: str, phase: str) -> List[PamRule]:
    return [r for r in parse_pam_config(text) if r.type == phase]
