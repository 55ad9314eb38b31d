"""Optional YAML configuration for the distro-spec CLI.

Example::

    distro: acorn
    hostname: workstation
    username: alice
    root_device: LABEL=root
    staging:
      root: build/staging
      dry_run: true
    logging:
      path: build/distro-spec.log
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .logging_utils import DEFAULT_LOG_PATH

DISTROS = ("levitate", "acorn")


@dataclass(frozen=True)
class SpecConfig:
    raw: Dict[str, Any]

    @property
    def distro(self) -> str:
        value = str(self.raw.get("distro") or "levitate").strip().lower()
        if value not in DISTROS:
            raise ValueError(f"distro must be one of {', '.join(DISTROS)}: {value!r}")
        return value

    @property
    def staging_root(self) -> Optional[str]:
        value = (self.raw.get("staging") or {}).get("root")
        return str(value) if value else None

    @property
    def dry_run(self) -> bool:
        return bool((self.raw.get("staging") or {}).get("dry_run", False))

    @property
    def log_path(self) -> str:
        return str(((self.raw.get("logging") or {}).get("path")) or DEFAULT_LOG_PATH)

    @property
    def hostname(self) -> Optional[str]:
        value = str(self.raw.get("hostname") or "").strip()
        return value or None

    @property
    def username(self) -> Optional[str]:
        value = str(self.raw.get("username") or "").strip()
        return value or None

    @property
    def root_device(self) -> Optional[str]:
        value = str(self.raw.get("root_device") or "").strip()
        return value or None


def load_config(path: str) -> SpecConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the config file") from e

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"{p.name}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"{p.name} must contain a mapping/object")

    return SpecConfig(raw=raw)
