import logging

import pytest


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Undo configure_logging() so every test starts unconfigured."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers and type(h) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    for attr in ('_distro_spec_configured', '_distro_spec_log_path'):
        if hasattr(root, attr):
            delattr(root, attr)
