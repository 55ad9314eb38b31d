"""Which package's license directory to ship with a copied binary or library.

Copying a file out of a package means also copying
/usr/share/licenses/<package>/. The tables live in manifests/licenses.yaml.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..lib.manifests import load_licenses_manifest

_manifest = load_licenses_manifest()

BINARY_TO_PACKAGE: Dict[str, str] = {str(k): str(v) for k, v in (_manifest.get("binaries") or {}).items()}

# Ordered (prefix, package) pairs; "libc.so" matches "libc.so.6".
LIB_TO_PACKAGE: Tuple[Tuple[str, str], ...] = tuple(
    (str(prefix), str(pkg)) for prefix, pkg in (_manifest.get("libraries") or [])
)

LICENSES_DIR = "/usr/share/licenses"


def package_for_binary(binary: str) -> Optional[str]:
    return BINARY_TO_PACKAGE.get(binary)


def package_for_library(lib: str) -> Optional[str]:
    """First package whose prefix `lib` starts with, or None."""

    for prefix, pkg in LIB_TO_PACKAGE:
        if lib.startswith(prefix):
            return pkg
    return None


def license_dir(package: str) -> str:
    return f"{LICENSES_DIR}/{package}"
