from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional

from .config import DISTROS, SpecConfig, load_config
from .lib.staging import StagingViolation, render_files, stage_files
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .shared.auth.pam import PAM_FILES, SECURITY_CONF_FILES, parse_pam_config
from .shared.error import ToolError, ToolErrorEnum
from .shared.licenses import package_for_binary, package_for_library
from .shared.modules import INSTALL_MODULES, LIVE_MODULES, module_paths_for
from .shared.partitions import PartitionLayout
from .shared.requirements import ACORN_REQUIREMENTS, LEVITATE_REQUIREMENTS
from .shared.system import is_mount_point, is_root

logger = logging.getLogger(__name__)

PACKAGE_TIERS = ("bootable", "core", "daily_driver", "live")


class ErrorCode(ToolErrorEnum):
    INVALID_CONFIG = ("E001", 2)
    NOT_FOUND = ("E002", 3)
    UNSUPPORTED = ("E003", 4)
    STAGING_FAILED = ("E004", 5)
    REQUIREMENTS_NOT_MET = ("E005", 6)


def _distro_module(distro: str) -> Any:
    if distro == "acorn":
        from . import acorn

        return acorn
    from . import levitate

    return levitate


def cmd_loader_conf(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    conf = _distro_module(distro).default_loader_config()
    if args.timeout is not None:
        conf = conf.with_timeout(args.timeout)
    if args.console_mode:
        conf = conf.with_console_mode(args.console_mode)
    if args.no_editor:
        conf = conf.disable_editor()
    sys.stdout.write(conf.to_loader_conf())
    return 0


def cmd_boot_entry(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    spec = _distro_module(distro)
    root_device = args.root or cfg.root_device
    if args.partuuid:
        entry = spec.boot_entry_with_partuuid(args.partuuid)
    elif args.label:
        entry = spec.boot_entry_with_label(args.label)
    elif root_device:
        entry = spec.boot_entry_with_root(root_device)
    else:
        entry = spec.default_boot_entry()
    if args.microcode:
        entry = entry.with_microcode(args.microcode)
    if args.path:
        print(entry.entry_path())
    sys.stdout.write(entry.to_entry_file())
    return 0


def cmd_sfdisk(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    sys.stdout.write(PartitionLayout().to_sfdisk_script())
    return 0


def cmd_useradd(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    username = args.username or cfg.username
    if not username:
        raise ToolError(ErrorCode.INVALID_CONFIG, "no username given")
    user = _distro_module(distro).default_user(username)
    if args.full_name:
        user = user.with_full_name(args.full_name)
    print(user.useradd_command())
    return 0


def cmd_services(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    spec = _distro_module(distro)
    if args.required:
        services = spec.required_services()
    elif args.optional:
        services = spec.optional_services()
    else:
        services = list(spec.ENABLED_SERVICES)
    for s in services:
        print(s.enable_command())
    return 0


def cmd_pam(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    files = dict(PAM_FILES)
    files.update(SECURITY_CONF_FILES)
    if not args.name:
        for rel in files:
            print(rel)
        return 0

    rel = args.name if "/" in args.name else f"etc/pam.d/{args.name}"
    body = files.get(rel.lstrip("/"))
    if body is None:
        raise ToolError(ErrorCode.NOT_FOUND, f"unknown PAM file {args.name}")
    if args.rules:
        for rule in parse_pam_config(body):
            dash = "-" if rule.ignore_missing else ""
            print(f"{dash}{rule.type}\t{rule.control}\t{rule.module}\t{' '.join(rule.args)}".rstrip())
    else:
        sys.stdout.write(body)
    return 0


def cmd_packages(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    if distro != "acorn":
        raise ToolError(ErrorCode.UNSUPPORTED, "package tiers are only defined for acorn")
    from .acorn import packages

    tiers = {
        "bootable": packages.bootable_packages,
        "core": packages.core_packages,
        "daily_driver": packages.daily_driver_packages,
        "live": packages.all_live_packages,
    }
    for name in tiers[args.tier]():
        print(name)
    return 0


def cmd_modules(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    if distro == "acorn":
        from .acorn.boot import BOOT_MODULES

        paths = list(BOOT_MODULES)
    else:
        paths = module_paths_for(LIVE_MODULES if args.flavour == "live" else INSTALL_MODULES)
    for p in paths:
        print(p)
    return 0


def cmd_license(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    pkg = package_for_library(args.name) if args.library else package_for_binary(args.name)
    if pkg is None:
        raise ToolError(ErrorCode.NOT_FOUND, f"no package known for {args.name}")
    print(pkg)
    return 0


def cmd_check(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    spec = _distro_module(distro)
    reqs = ACORN_REQUIREMENTS if distro == "acorn" else LEVITATE_REQUIREMENTS

    print(f"root: {'yes' if is_root() else 'no'}")
    print(f"tarball: {spec.find_tarball() or 'not found'}")

    if args.target:
        try:
            mounted = is_mount_point(args.target)
        except OSError as e:
            raise ToolError(ErrorCode.NOT_FOUND, f"cannot stat {args.target}: {e}") from e
        print(f"mount point {args.target}: {'yes' if mounted else 'no'}")

    grades = []
    if args.ram is not None:
        grades.append(reqs.check_ram(args.ram))
        print(f"ram: {grades[-1]}")
    if args.disk is not None:
        grades.append(reqs.check_disk(args.disk))
        print(f"disk: {grades[-1]}")

    if "insufficient" in grades:
        raise ToolError(ErrorCode.REQUIREMENTS_NOT_MET, f"host does not meet {spec.OS_NAME} requirements")
    return 0


def cmd_stage(args: argparse.Namespace, cfg: SpecConfig, distro: str) -> int:
    root = args.root or cfg.staging_root
    if not root:
        raise ToolError(ErrorCode.INVALID_CONFIG, "no staging root given (--root or staging.root)")
    dry_run = bool(args.dry_run or cfg.dry_run)

    files = render_files(distro, hostname=args.hostname or cfg.hostname, root_device=args.root_device or cfg.root_device)
    try:
        staged = stage_files(root, files, dry_run=dry_run)
    except StagingViolation as e:
        raise ToolError(ErrorCode.STAGING_FAILED, str(e)) from e

    logger.info("Staged %d files for %s under %s (dry_run=%s)", len(staged), distro, root, dry_run)
    for p in staged:
        print(p)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="distro-spec")
    p.add_argument("-c", "--config", default=None, help="Path to a YAML config file")
    p.add_argument("--distro", choices=DISTROS, default=None, help="Target distro (default: levitate)")
    p.add_argument("--log", default=None, help=f"Log file (default: {DEFAULT_LOG_PATH})")
    p.add_argument("-v", "--verbose", action="store_true", help="Also log to the console, at DEBUG")

    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("loader-conf", help="Print loader.conf")
    sp.add_argument("--timeout", type=int, default=None)
    sp.add_argument("--console-mode", default=None)
    sp.add_argument("--no-editor", action="store_true")
    sp.set_defaults(func=cmd_loader_conf)

    sp = sub.add_parser("boot-entry", help="Print the systemd-boot entry")
    g = sp.add_mutually_exclusive_group()
    g.add_argument("--root", default=None, help="Root device, e.g. /dev/vda2")
    g.add_argument("--partuuid", default=None)
    g.add_argument("--label", default=None)
    sp.add_argument("--microcode", default=None, help="Microcode initrd loaded first, e.g. /intel-ucode.img")
    sp.add_argument("--path", action="store_true", help="Print the entry path first")
    sp.set_defaults(func=cmd_boot_entry)

    sp = sub.add_parser("sfdisk", help="Print the default sfdisk script")
    sp.set_defaults(func=cmd_sfdisk)

    sp = sub.add_parser("useradd", help="Print the useradd command for the default user")
    sp.add_argument("username", nargs="?", default=None)
    sp.add_argument("--full-name", default=None)
    sp.set_defaults(func=cmd_useradd)

    sp = sub.add_parser("services", help="Print enable commands for default services")
    g = sp.add_mutually_exclusive_group()
    g.add_argument("--required", action="store_true")
    g.add_argument("--optional", action="store_true")
    sp.set_defaults(func=cmd_services)

    sp = sub.add_parser("pam", help="List PAM files or print one")
    sp.add_argument("name", nargs="?", default=None, help="e.g. login or etc/security/limits.conf")
    sp.add_argument("--rules", action="store_true", help="Print parsed rules instead of the text")
    sp.set_defaults(func=cmd_pam)

    sp = sub.add_parser("packages", help="Print an AcornOS package tier (cumulative)")
    sp.add_argument("--tier", choices=PACKAGE_TIERS, default="live")
    sp.set_defaults(func=cmd_packages)

    sp = sub.add_parser("modules", help="Print initramfs kernel module paths")
    sp.add_argument("--flavour", choices=("live", "install"), default="live")
    sp.set_defaults(func=cmd_modules)

    sp = sub.add_parser("license", help="Print the package owning a binary or library")
    sp.add_argument("name")
    sp.add_argument("--library", action="store_true")
    sp.set_defaults(func=cmd_license)

    sp = sub.add_parser("check", help="Check this host against the install requirements")
    sp.add_argument("--target", default=None, help="Path that should be a mount point")
    sp.add_argument("--ram", type=float, default=None, help="RAM in GB")
    sp.add_argument("--disk", type=float, default=None, help="Disk in GB")
    sp.set_defaults(func=cmd_check)

    sp = sub.add_parser("stage", help="Write rendered config files under a staging root")
    sp.add_argument("--root", default=None)
    sp.add_argument("--hostname", default=None)
    sp.add_argument("--root-device", default=None, help="Root device for the boot entry, e.g. /dev/vda2")
    sp.add_argument("--dry-run", action="store_true")
    sp.set_defaults(func=cmd_stage)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config) if args.config else SpecConfig(raw={})
        distro = args.distro or cfg.distro
    except (FileNotFoundError, ValueError) as e:
        err = ToolError(ErrorCode.INVALID_CONFIG, str(e))
        print(str(err), file=sys.stderr)
        return err.exit_code()

    configure_logging(
        log_path=args.log or cfg.log_path,
        level=logging.DEBUG if args.verbose else logging.INFO,
        also_console=args.verbose,
    )

    try:
        return int(args.func(args, cfg, distro))
    except ToolError as e:
        logger.error("%s", e)
        print(str(e), file=sys.stderr)
        return e.exit_code()


if __name__ == "__main__":
    raise SystemExit(main())
