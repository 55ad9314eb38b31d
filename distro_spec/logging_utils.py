from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = "/var/log/distro-spec.log"
FALLBACK_LOG_NAME = "distro-spec.log"


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Install file (and optionally console) handlers on the root logger.

    When `log_path` cannot be opened (no /var/log access outside root), the
    log goes to distro-spec.log in the current directory instead.

    Safe to call more than once; later calls keep the first configuration.
    Returns the file path actually used.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    if getattr(logger, "_distro_spec_configured", False):
        return getattr(logger, "_distro_spec_log_path", log_path)

    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        chosen_path = log_path
    except OSError:
        chosen_path = str(Path.cwd() / FALLBACK_LOG_NAME)
        file_handler = logging.FileHandler(chosen_path)
    file_handler.setFormatter(fmt)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_distro_spec_configured", True)
    setattr(logger, "_distro_spec_log_path", chosen_path)

    logging.getLogger(__name__).debug("Logging to %s (requested %s)", chosen_path, log_path)
    return chosen_path
