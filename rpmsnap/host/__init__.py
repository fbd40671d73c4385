"""Host identity and storage location routing."""

from .identity import get_hostname
from .location import DEFAULT_LOCATION_RULES, LocationRule, resolve_storage_dir, resolve_suffix

__all__ = [
    "get_hostname",
    "DEFAULT_LOCATION_RULES",
    "LocationRule",
    "resolve_storage_dir",
    "resolve_suffix",
]
