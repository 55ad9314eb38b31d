"""Host checks used before mounting, chrooting or extracting."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def is_root() -> bool:
    return os.geteuid() == 0


def is_mount_point(path: Union[str, Path]) -> bool:
    """True when `path` sits on a different device than its parent.

    "/" is always a mount point. Raises OSError if `path` or its parent
    cannot be stat'ed.
    """

    p = Path(path)
    path_dev = os.stat(p).st_dev

    if p == Path(p.anchor) and p.anchor:
        return True

    parent = p.parent
    if not p.is_absolute() and str(parent) == ".":
        parent = Path("/")

    parent_dev = os.stat(parent).st_dev
    mounted = path_dev != parent_dev
    logger.debug("is_mount_point(%s) = %s", str(p), mounted)
    return mounted
