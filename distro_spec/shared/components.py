"""What a complete LevitateOS rootfs contains.

The rootfs builder creates these and the image checker verifies them, so a
change here is picked up by both.
"""

from __future__ import annotations

from typing import Tuple

from .auth.components import (  # noqa: F401  re-exported
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
from .udev import UDEV_HELPERS  # noqa: F401

# Installer tools shipped on the live ISO.
LEVITATE_TOOLS: Tuple[str, ...] = ("recstrap", "recfstab", "recchroot")

FHS_DIRS: Tuple[str, ...] = (
    # /usr hierarchy (merged)
    "usr/bin",
    "usr/sbin",
    "usr/lib",
    "usr/lib64",
    "usr/share",
    "usr/share/man",
    "usr/share/doc",
    "usr/share/licenses",
    "usr/share/zoneinfo",
    "usr/local/bin",
    "usr/local/sbin",
    "usr/local/lib",
    "usr/local/share",
    # /etc configuration
    "etc",
    "etc/systemd/system",
    "etc/pam.d",
    "etc/security",
    "etc/profile.d",
    # XDG Base Directory spec
    "etc/xdg",
    "etc/xdg/autostart",
    # User skeleton with XDG structure
    "etc/skel",
    "etc/skel/.config",
    "etc/skel/.local",
    "etc/skel/.local/share",
    "etc/skel/.local/state",
    "etc/skel/.cache",
    # Volatile directories
    "proc",
    "sys",
    "dev",
    "dev/pts",
    "dev/shm",
    "run",
    "run/lock",
    "tmp",
    # Persistent data
    "var",
    "var/log",
    "var/log/journal",
    "var/tmp",
    "var/cache",
    "var/lib",
    "var/spool",
    # Mount points
    "mnt",
    "media",
    # User directories
    "root",
    "home",
    # Optional
    "opt",
    "srv",
    # Boot (for installed kernels)
    "boot",
    # Systemd
    "usr/lib/systemd/system",
    "usr/lib/systemd/system-generators",
    "usr/lib64/systemd",
    # Modules
    "usr/lib/modules",
    # pam
    "usr/lib64/security",
    # D-Bus
    "usr/share/dbus-1/system.d",
    "usr/share/dbus-1/system-services",
    # Locale
    "usr/lib/locale",
)

FHS_SYMLINKS: Tuple[Tuple[str, str], ...] = (
    ("bin", "usr/bin"),
    ("sbin", "usr/sbin"),
    ("lib", "usr/lib"),
    ("lib64", "usr/lib64"),
)

BIN_UTILS: Tuple[str, ...] = (
    # coreutils
    "ls", "cat", "cp", "mv", "rm", "mkdir", "rmdir", "touch",
    "chmod", "chown", "chgrp", "ln", "readlink", "realpath",
    "stat", "file", "mknod", "mkfifo",
    "timeout", "sleep", "true", "false", "test", "[",
    # Text processing
    "echo", "head", "tail", "wc", "sort", "cut", "tr", "tee",
    "sed", "awk", "gawk", "printf", "uniq", "seq",
    # Search
    "grep", "find", "xargs",
    # System info
    "pwd", "uname", "date", "env", "id", "hostname",
    "printenv", "whoami", "groups", "dmesg", "lsusb",
    # Process control
    "kill", "nice", "nohup", "setsid",
    # Compression
    "gzip", "gunzip", "xz", "unxz", "tar", "bzip2", "bunzip2", "cpio",
    # Shell utilities
    "expr", "yes", "mktemp",
    # Disk info
    "df", "du", "sync", "mount", "umount", "lsblk", "findmnt", "flock",
    # Path utilities
    "dirname", "basename",
    # Other
    "which",
    # diffutils
    "diff", "cmp",
    # procps-ng
    "ps", "pgrep", "pkill", "top", "free", "uptime", "w", "vmstat", "watch",
    # systemd
    "systemctl", "journalctl", "timedatectl", "hostnamectl", "localectl", "loginctl", "bootctl",
    "systemd-tmpfiles",  # lives in /usr/bin
    # editors
    "vi", "vim", "nano",
    # network
    "ping", "curl", "wget",
    # terminal
    "clear", "stty", "tty",
    # keyboard
    "loadkeys",
    # locale
    "localedef",
    # udev
    "udevadm",
    # misc
    "less", "more",
    # util-linux
    "getopt",
    # glibc utilities
    "getent", "ldd",
    # checksums
    "base64", "md5sum", "sha256sum", "sha512sum",
    # terminal multiplexer
    "tmux", "screen",
    # network diagnostics
    "dig", "nslookup", "tracepath",
    # no iwctl: Rocky 10 does wifi through NetworkManager-wifi
    # binary inspection
    "strings", "hexdump",
    # file sync
    "rsync",
    # documentation
    "man", "mandb", "apropos", "whatis",
    # file managers
    "mc", "mcedit", "mcview",
    # pipe utilities
    "pv",
    # text browser
    "lynx",
    # network tools
    "nmap",
    # audio
    "alsamixer", "amixer", "aplay", "arecord", "speaker-test",
    # gpg/crypto
    "gpg", "gpg2", "gpgconf", "gpg-agent",
    # NTFS (bin tools)
    "ntfsfix", "ntfscat", "ntfscluster", "ntfscmp", "ntfsfallocate",
    "ntfsinfo", "ntfsls", "ntfsmove", "ntfsrecover", "ntfssecaudit",
    "ntfstruncate", "ntfsusermap", "ntfswipe",
    # version control
    "git",
    # scripting languages
    "python3",  # 'python' symlink not created by Rocky, use python3
    "perl",
    # process monitoring
    "htop",
    # archive tools
    "zip", "unzip",
    "7za",  # p7zip only provides 7za wrapper script, not 7z/7zr
    # directory tools
    "tree",
    # bluetooth
    "bluetoothctl",
    # pipewire audio
    "pw-cli", "pw-dump", "pw-cat", "pw-play", "pw-record",
    "pw-top", "pw-metadata", "pw-mon", "pw-link",
    "wpctl",  # WirePlumber control
    # PULSEAUDIO COMPAT (pipewire-pulse)
    "pactl", "paplay", "parecord",  # pacmd not provided by pipewire-pulseaudio
    # polkit
    "pkexec", "pkaction", "pkcheck",
    # UDISKS2
    "udisksctl",
    # power management
    "upower",
)

NM_BIN: Tuple[str, ...] = ("nmcli", "nm-online", "nmtui")

SBIN_UTILS: Tuple[str, ...] = (
    # util-linux
    "fsck", "blkid", "losetup", "mkswap", "swapon", "swapoff",
    "fdisk", "sfdisk", "wipefs", "blockdev", "pivot_root", "chroot",
    "switch_root", "parted",
    # e2fsprogs
    "fsck.ext4", "fsck.ext2", "fsck.ext3", "e2fsck", "mke2fs",
    "mkfs.ext4", "mkfs.ext2", "mkfs.ext3", "tune2fs", "resize2fs",
    # dosfstools
    "mkfs.fat", "mkfs.vfat", "fsck.fat", "fsck.vfat",
    # btrfs
    "btrfs", "btrfsck", "mkfs.btrfs", "btrfs-convert", "btrfs-find-root",
    "btrfs-image", "btrfs-map-logical", "btrfs-select-super",
    # NTFS (sbin tools)
    "mkfs.ntfs", "ntfsresize", "ntfsclone", "ntfscp", "ntfslabel",
    # kmod
    "insmod", "rmmod", "modprobe", "lsmod", "depmod", "modinfo",
    # shadow-utils
    "useradd", "userdel", "usermod", "groupadd", "groupdel", "groupmod",
    "chpasswd", "passwd",
    # iproute
    "ip", "ss", "bridge",
    # procps-ng
    "sysctl",
    # system control
    "reboot", "shutdown", "poweroff", "halt", "efibootmgr",
    # other
    "ldconfig", "hwclock", "lspci", "ifconfig", "route",
    "agetty", "login", "sulogin", "nologin", "chronyd",
    # squashfs-tools
    "unsquashfs",
    # cryptsetup (luks)
    "cryptsetup",
    # lvm
    "lvm",
    # raid
    "mdadm", "mdmon",
    # hardware detection
    "dmidecode", "ethtool",
    # xfs
    "mkfs.xfs", "xfs_repair", "xfs_admin", "xfs_copy", "xfs_db",
    "xfs_freeze", "xfs_growfs", "xfs_info", "xfs_io", "xfs_logprint",
    "xfs_mdrestore", "xfs_metadump", "xfs_ncheck", "xfs_quota",
    "xfs_rtcp", "xfs_spaceman",
    # disk health
    "smartctl", "hdparm", "nvme",
    # recovery tools
    "ddrescue", "testdisk", "photorec",
)

NM_SBIN: Tuple[str, ...] = ("NetworkManager",)

WPA_SBIN: Tuple[str, ...] = ("wpa_supplicant", "wpa_cli", "wpa_passphrase")

BLUETOOTH_SBIN: Tuple[str, ...] = ()

PIPEWIRE_SBIN: Tuple[str, ...] = ("pipewire", "pipewire-pulse", "wireplumber")

POLKIT_SBIN: Tuple[str, ...] = ()

UDISKS_SBIN: Tuple[str, ...] = ()

UPOWER_SBIN: Tuple[str, ...] = ()

SYSTEMD_BINARIES: Tuple[str, ...] = (
    "systemd-executor",
    "systemd-shutdown",
    "systemd-sulogin-shell",
    "systemd-cgroups-agent",
    "systemd-journald",
    "systemd-modules-load",
    "systemd-sysctl",
    # systemd-tmpfiles is in BIN_UTILS
    "systemd-timedated",
    "systemd-hostnamed",
    "systemd-localed",
    "systemd-logind",
    "systemd-networkd",
    "systemd-resolved",
    "systemd-udevd",
    "systemd-fsck",
    "systemd-remount-fs",
    "systemd-makefs",
    "systemd-vconsole-setup",
    "systemd-random-seed",
)

ESSENTIAL_UNITS: Tuple[str, ...] = (
    # Targets
    "basic.target", "sysinit.target", "multi-user.target", "default.target",
    "getty.target", "local-fs.target", "local-fs-pre.target",
    "remote-fs.target", "remote-fs-pre.target",
    "network.target", "network-pre.target", "network-online.target",
    "paths.target", "slices.target", "sockets.target", "timers.target",
    "swap.target", "shutdown.target", "rescue.target", "emergency.target",
    "reboot.target", "poweroff.target", "halt.target",
    "suspend.target", "sleep.target", "umount.target", "final.target",
    "graphical.target",
    # Initrd targets (required for install initramfs boot)
    "initrd.target", "initrd-root-fs.target", "initrd-root-device.target",
    "initrd-switch-root.target", "initrd-fs.target",
    # Services - core
    "systemd-journald.service", "systemd-journald@.service",
    "systemd-udevd.service", "systemd-udev-trigger.service",
    "systemd-modules-load.service", "systemd-sysctl.service",
    "systemd-tmpfiles-setup.service", "systemd-tmpfiles-setup-dev.service",
    "systemd-tmpfiles-clean.service",
    "systemd-random-seed.service", "systemd-vconsole-setup.service",
    # Services - disk
    "systemd-fsck-root.service", "systemd-fsck@.service",
    "systemd-remount-fs.service",
    # systemd-fstab-generator is a generator, not a unit
    # Services - initrd (required for install initramfs boot)
    "initrd-switch-root.service", "initrd-cleanup.service",
    "initrd-udevadm-cleanup-db.service", "initrd-parse-etc.service",
    # Services - auth
    "systemd-logind.service",
    # Services - getty
    "getty@.service", "serial-getty@.service",
    "console-getty.service", "container-getty@.service",
    # Services - time/network
    "systemd-timedated.service", "systemd-hostnamed.service",
    "systemd-localed.service", "systemd-networkd.service",
    "systemd-resolved.service", "systemd-networkd-wait-online.service",
    # Services - misc
    "dbus.service", "dbus-broker.service", "chronyd.service",
    # Services - SSH
    "sshd.service", "sshd@.service", "sshd.socket",
    "sshd-keygen.target", "sshd-keygen@.service",
    # Sockets
    "systemd-journald.socket", "systemd-journald-dev-log.socket",
    "systemd-journald-audit.socket",
    "systemd-udevd-control.socket", "systemd-udevd-kernel.socket",
    "dbus.socket",
    # Paths
    "systemd-ask-password-console.path", "systemd-ask-password-wall.path",
    # Slices (-.slice, system.slice and machine.slice are built in)
    "user.slice",
)

NM_UNITS: Tuple[str, ...] = ("NetworkManager.service", "NetworkManager-dispatcher.service")

WPA_UNITS: Tuple[str, ...] = ("wpa_supplicant.service",)

BLUETOOTH_UNITS: Tuple[str, ...] = ("bluetooth.service", "bluetooth.target")

PIPEWIRE_UNITS: Tuple[str, ...] = (
    "pipewire.service",
    "pipewire.socket",
    "pipewire-pulse.service",
    "pipewire-pulse.socket",
    "wireplumber.service",
)

POLKIT_UNITS: Tuple[str, ...] = ("polkit.service",)

UDISKS_UNITS: Tuple[str, ...] = ("udisks2.service",)

UPOWER_UNITS: Tuple[str, ...] = ("upower.service",)

SSH_UNITS: Tuple[str, ...] = (
    "sshd.service",
    "sshd.socket",
    "sshd@.service",
    "sshd-keygen.target",
    "sshd-keygen@.service",
    "ssh-host-keys-migration.service",
)

DBUS_ACTIVATION_SYMLINKS: Tuple[str, ...] = (
    "dbus-org.freedesktop.timedate1.service",
    "dbus-org.freedesktop.hostname1.service",
    "dbus-org.freedesktop.locale1.service",
    "dbus-org.freedesktop.login1.service",
    "dbus-org.freedesktop.network1.service",
    "dbus-org.freedesktop.resolve1.service",
)

ETC_FILES: Tuple[str, ...] = (
    # user database
    "etc/passwd",
    "etc/group",
    "etc/shadow",
    "etc/gshadow",
    # network
    "etc/hostname",
    "etc/hosts",
    "etc/resolv.conf",
    "etc/nsswitch.conf",
    # system identity
    "etc/os-release",
    "etc/machine-id",
    # filesystem
    "etc/fstab",
    # libraries
    "etc/ld.so.conf",
    # shells
    "etc/shells",
    # login/auth
    "etc/login.defs",
    # sudo
    "etc/sudoers",
    "etc/sudo.conf",
    # ssh server
    "etc/ssh/sshd_config",
    "etc/ssh/ssh_host_rsa_key",
    "etc/ssh/ssh_host_rsa_key.pub",
    "etc/ssh/ssh_host_ecdsa_key",
    "etc/ssh/ssh_host_ecdsa_key.pub",
    "etc/ssh/ssh_host_ed25519_key",
    "etc/ssh/ssh_host_ed25519_key.pub",
    # ssh client
    "etc/ssh/ssh_config",
    # timezone
    "etc/localtime",
    # time sync
    "etc/chrony.conf",
    # locale
    "etc/locale.conf",
    "etc/vconsole.conf",
)

CRITICAL_LIBS: Tuple[str, ...] = (
    "usr/lib64/libc.so.6",
    "usr/lib64/ld-linux-x86-64.so.2",
    "usr/lib64/libpam.so.0",
    "usr/lib64/libsystemd.so.0",
    "usr/lib64/libnss_files.so.2",
    "usr/lib64/libcrypt.so.2",
    "usr/lib64/libselinux.so.1",
)

SYSTEM_USERS: Tuple[str, ...] = (
    "root",
    "dbus",
    "sshd",
    "chrony",
    "polkitd",
    "pipewire",  # system mode only
)

SYSTEM_GROUPS: Tuple[str, ...] = (
    "root",
    "wheel",
    "dbus",
    "sshd",
    "chrony",
    "polkitd",
    "pipewire",
    "bluetooth",
    "audio",
    "video",
)

ALL_SYSTEMD_UNITS: Tuple[str, ...] = tuple(
    dict.fromkeys(
        ESSENTIAL_UNITS
        + NM_UNITS
        + WPA_UNITS
        + BLUETOOTH_UNITS
        + PIPEWIRE_UNITS
        + POLKIT_UNITS
        + UDISKS_UNITS
        + UPOWER_UNITS
        + SSH_UNITS
    )
)
