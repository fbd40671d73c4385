"""Path resolution for the rpmsnap installation directory."""

import os
from pathlib import Path
from typing import Optional

DEFAULT_INSTALL_ROOT = "/usr/local/toolbox/rpmsnap"
INSTALL_ROOT_ENV = "RPMSNAP_HOME"


def get_install_root(custom_path: Optional[str] = None) -> Path:
    """Resolve the installation directory.

    Precedence: parameter > RPMSNAP_HOME environment variable > default.

    Args:
        custom_path: Explicit installation directory (optional)

    Returns:
        Absolute Path with '~' expanded
    """
    raw = custom_path or os.environ.get(INSTALL_ROOT_ENV) or DEFAULT_INSTALL_ROOT
    return Path(raw).expanduser().resolve()


def get_data_root(install_root: Path) -> Path:
    """Directory holding one storage directory per host."""
    return install_root / "data"


def get_default_tool_path(install_root: Path) -> Path:
    """Default location of the inventory script."""
    return install_root / "sbin" / "rpmsnap.pl"
