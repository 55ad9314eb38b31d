"""systemd-boot entry and loader.conf types shared by both distros."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

ESP_MOUNT_POINT = "/boot"
LOADER_CONF_PATH = "/boot/loader/loader.conf"
ENTRIES_DIR = "/boot/loader/entries"

# Seconds; 0 hides the menu.
DEFAULT_TIMEOUT = 3

DEFAULT_OPTIONS = "root=LABEL=root rw quiet"


def _root_options(root_device: str) -> str:
    return f"root={root_device} rw quiet"


@dataclass(frozen=True)
class BootEntry:
    """A single /boot/loader/entries/*.conf entry.

    `linux` and `initrd` are relative to the ESP.
    """

    filename: str  # without .conf
    title: str
    linux: str
    initrd: str
    options: str

    @classmethod
    def with_defaults(
        cls,
        os_id: str,
        os_name: str,
        kernel_filename: str,
        initramfs_filename: str,
    ) -> "BootEntry":
        return cls(
            filename=os_id,
            title=os_name,
            linux=f"/{kernel_filename}",
            initrd=f"/{initramfs_filename}",
            options=DEFAULT_OPTIONS,
        )

    @classmethod
    def with_root(
        cls,
        os_id: str,
        os_name: str,
        kernel_filename: str,
        initramfs_filename: str,
        root_device: str,
    ) -> "BootEntry":
        entry = cls.with_defaults(os_id, os_name, kernel_filename, initramfs_filename)
        return replace(entry, options=_root_options(root_device))

    @classmethod
    def with_partuuid(
        cls,
        os_id: str,
        os_name: str,
        kernel_filename: str,
        initramfs_filename: str,
        partuuid: str,
    ) -> "BootEntry":
        return cls.with_root(os_id, os_name, kernel_filename, initramfs_filename, f"PARTUUID={partuuid}")

    @classmethod
    def with_label(
        cls,
        os_id: str,
        os_name: str,
        kernel_filename: str,
        initramfs_filename: str,
        label: str,
    ) -> "BootEntry":
        return cls.with_root(os_id, os_name, kernel_filename, initramfs_filename, f"LABEL={label}")

    def entry_path(self) -> str:
        return f"{ENTRIES_DIR}/{self.filename}.conf"

    def to_entry_file(self) -> str:
        return (
            f"title   {self.title}\n"
            f"linux   {self.linux}\n"
            f"initrd  {self.initrd}\n"
            f"options {self.options}\n"
        )

    def with_microcode(self, ucode_path: str) -> "BootEntry":
        """Return a copy that loads `ucode_path` before the main initrd."""

        return replace(self, initrd=f"{ucode_path}\ninitrd  {self.initrd}")

    def set_root(self, root_device: str) -> "BootEntry":
        return replace(self, options=_root_options(root_device))


@dataclass(frozen=True)
class LoaderConfig:
    default_entry: str  # without .conf
    timeout: int = DEFAULT_TIMEOUT
    console_mode: Optional[str] = None  # keep|auto|max|<resolution>
    editor: bool = True

    @classmethod
    def with_defaults(cls, os_id: str) -> "LoaderConfig":
        return cls(default_entry=os_id)

    def to_loader_conf(self) -> str:
        conf = f"default {self.default_entry}.conf\ntimeout {self.timeout}\n"
        if self.console_mode is not None:
            conf += f"console-mode {self.console_mode}\n"
        if not self.editor:
            conf += "editor no\n"
        return conf

    def with_timeout(self, timeout: int) -> "LoaderConfig":
        return replace(self, timeout=timeout)

    def with_console_mode(self, mode: str) -> "LoaderConfig":
        return replace(self, console_mode=mode)

    def disable_editor(self) -> "LoaderConfig":
        return replace(self, editor=False)


def bootctl_install_command() -> str:
    return "bootctl install"
