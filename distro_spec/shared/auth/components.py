"""Binaries, PAM modules and config files the login stack needs in the rootfs."""

from __future__ import annotations

from typing import Tuple

AUTH_BIN: Tuple[str, ...] = ("su", "sudo", "sudoedit", "sudoreplay")

# pam_unix.so execs /usr/sbin/unix_chkpwd by hardcoded path.
AUTH_SBIN: Tuple[str, ...] = ("visudo", "unix_chkpwd")

SHADOW_SBIN: Tuple[str, ...] = (
    "faillock",
    "chage",
    "newusers",
    "chgpasswd",
    "pwck",
    "grpck",
    "vipw",
    "vigr",
    "pwconv",
    "pwunconv",
    "grpconv",
    "grpunconv",
)

SSH_SBIN: Tuple[str, ...] = ("sshd",)
SSH_BIN: Tuple[str, ...] = ("ssh", "scp", "sftp", "ssh-keygen", "ssh-add", "ssh-agent")

PAM_MODULES: Tuple[str, ...] = (
    # core
    "pam_unix.so",
    "pam_permit.so",
    "pam_deny.so",
    # password quality
    "pam_pwquality.so",
    "pam_pwhistory.so",
    # lockout
    "pam_faillock.so",
    "pam_faildelay.so",
    "pam_tally2.so",
    # access control
    "pam_access.so",
    "pam_time.so",
    "pam_group.so",
    "pam_wheel.so",
    "pam_nologin.so",
    "pam_securetty.so",
    "pam_shells.so",
    # limits
    "pam_limits.so",
    "pam_umask.so",
    # session
    "pam_env.so",
    "pam_systemd.so",
    "pam_keyinit.so",
    "pam_loginuid.so",
    "pam_namespace.so",
    # conditional
    "pam_succeed_if.so",
    "pam_listfile.so",
    "pam_rootok.so",
    "pam_localuser.so",
    # selinux
    "pam_selinux.so",
    "pam_sepermit.so",
    # info
    "pam_lastlog.so",
    "pam_motd.so",
    "pam_mail.so",
    "pam_warn.so",
    "pam_echo.so",
    "pam_xauth.so",
    "pam_exec.so",
    "pam_mkhomedir.so",
    "pam_ftp.so",
)

PAM_CONFIGS: Tuple[str, ...] = (
    "etc/pam.d/system-auth",
    "etc/pam.d/password-auth",
    "etc/pam.d/login",
    "etc/pam.d/sshd",
    "etc/pam.d/remote",
    "etc/pam.d/sudo",
    "etc/pam.d/su",
    "etc/pam.d/su-l",
    "etc/pam.d/runuser",
    "etc/pam.d/runuser-l",
    "etc/pam.d/passwd",
    "etc/pam.d/chpasswd",
    "etc/pam.d/useradd",
    "etc/pam.d/usermod",
    "etc/pam.d/userdel",
    "etc/pam.d/groupadd",
    "etc/pam.d/groupmod",
    "etc/pam.d/groupdel",
    "etc/pam.d/chage",
    "etc/pam.d/chgpasswd",
    "etc/pam.d/groupmems",
    "etc/pam.d/newusers",
    "etc/pam.d/other",  # must deny
    "etc/pam.d/systemd-user",
)

SECURITY_FILES: Tuple[str, ...] = (
    "etc/security/limits.conf",
    "etc/security/pam_env.conf",
    "etc/security/faillock.conf",
    "etc/security/access.conf",
    "etc/security/group.conf",
    "etc/security/namespace.conf",
    "etc/security/time.conf",
    "etc/security/pwquality.conf",
)

SUDO_LIBS: Tuple[str, ...] = (
    "libsudo_util.so.0.0.0",
    "libsudo_util.so.0",
    "libsudo_util.so",
    "sudoers.so",
    "group_file.so",
    "system_group.so",
)
