"""Hostname lookup used to key the storage directory."""

import logging
import socket
from typing import Optional

from ..errors import EnvironmentSetupError

logger = logging.getLogger(__name__)


def get_hostname(override: Optional[str] = None) -> str:
    """Determine the host name used for the storage directory.

    The configured override wins. Otherwise the system host name is used,
    falling back to the fully qualified name when the short name carries
    no domain part.

    Args:
        override: Host name from configuration (optional)

    Returns:
        Host name string

    Raises:
        EnvironmentSetupError: If no host name can be determined
    """
    if override:
        return override.strip()

    try:
        hostname = socket.gethostname().strip()
        if hostname and "." not in hostname:
            fqdn = socket.getfqdn(hostname).strip()
            if "." in fqdn:
                hostname = fqdn
    except OSError as e:
        raise EnvironmentSetupError(f"Could not determine hostname: {e}") from e

    if not hostname:
        raise EnvironmentSetupError("Could not determine hostname: lookup returned an empty name")

    logger.debug(f"Hostname lookup returned '{hostname}'")
    return hostname
