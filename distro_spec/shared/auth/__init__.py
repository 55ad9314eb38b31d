"""Login stack: PAM files, getty, sshd and the components they need.

Live ISOs boot with an empty root password from the live overlay; installed
systems extract only the base image and keep root locked.
"""

from .components import (
    AUTH_BIN,
    AUTH_SBIN,
    PAM_CONFIGS,
    PAM_MODULES,
    SECURITY_FILES,
    SHADOW_SBIN,
    SSH_BIN,
    SSH_SBIN,
    SUDO_LIBS,
)
from .getty import (
    GETTY_TERM_TYPE,
    LIVE_CONSOLE_AUTOLOGIN_SERVICE,
    LIVE_SERIAL_CONSOLE_SERVICE,
    SERIAL_BAUD_RATES,
    SERIAL_GETTY_OVERRIDE,
)
from .pam import (
    ACCESS_CONF,
    LIMITS_CONF,
    NAMESPACE_CONF,
    PAM_CHFN,
    PAM_CHPASSWD,
    PAM_CHSH,
    PAM_CROND,
    PAM_ENV_CONF,
    PAM_FILES,
    PAM_LOGIN,
    PAM_OTHER,
    PAM_PASSWD,
    PAM_POSTLOGIN,
    PAM_REMOTE,
    PAM_RUNUSER,
    PAM_RUNUSER_L,
    PAM_SSHD,
    PAM_SU,
    PAM_SU_L,
    PAM_SUDO,
    PAM_SYSTEM_AUTH,
    PAM_SYSTEMD_USER,
    PWQUALITY_CONF,
    SECURITY_CONF_FILES,
    PamRule,
    parse_pam_config,
)
from .ssh import HOST_KEY_CONFIGS, SSHD_CONFIG_SETTINGS, SSHD_TMPFILES_CONFIG, sshd_config_text

__all__ = [
    "AUTH_BIN",
    "AUTH_SBIN",
    "PAM_CONFIGS",
    "PAM_MODULES",
    "SECURITY_FILES",
    "SHADOW_SBIN",
    "SSH_BIN",
    "SSH_SBIN",
    "SUDO_LIBS",
    "GETTY_TERM_TYPE",
    "LIVE_CONSOLE_AUTOLOGIN_SERVICE",
    "LIVE_SERIAL_CONSOLE_SERVICE",
    "SERIAL_BAUD_RATES",
    "SERIAL_GETTY_OVERRIDE",
    "ACCESS_CONF",
    "LIMITS_CONF",
    "NAMESPACE_CONF",
    "PAM_CHFN",
    "PAM_CHPASSWD",
    "PAM_CHSH",
    "PAM_CROND",
    "PAM_ENV_CONF",
    "PAM_FILES",
    "PAM_LOGIN",
    "PAM_OTHER",
    "PAM_PASSWD",
    "PAM_POSTLOGIN",
    "PAM_REMOTE",
    "PAM_RUNUSER",
    "PAM_RUNUSER_L",
    "PAM_SSHD",
    "PAM_SU",
    "PAM_SU_L",
    "PAM_SUDO",
    "PAM_SYSTEM_AUTH",
    "PAM_SYSTEMD_USER",
    "PWQUALITY_CONF",
    "SECURITY_CONF_FILES",
    "PamRule",
    "parse_pam_config",
    "HOST_KEY_CONFIGS",
    "SSHD_CONFIG_SETTINGS",
    "SSHD_TMPFILES_CONFIG",
    "sshd_config_text",
]
