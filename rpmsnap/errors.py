"""Exception hierarchy for rpmsnap runs.

Every error below is fatal for the current run. The CLI maps all of them to
exit code 1; the next scheduled invocation is the only retry.
"""

from pathlib import Path
from typing import Optional


class RpmsnapError(Exception):
    """Base class for all rpmsnap failures."""


class ConfigError(RpmsnapError):
    """Raised when the configuration file cannot be read or parsed."""


class EnvironmentSetupError(RpmsnapError):
    """Raised when hostname or inventory tool resolution fails before any work starts."""


class StorageError(RpmsnapError):
    """Raised when the storage directory cannot be created."""


class ComparisonError(RpmsnapError):
    """Raised when comparing a candidate against the latest snapshot fails."""


class InventoryCommandError(RpmsnapError):
    """Raised when the inventory command fails, cannot start or times out."""

    def __init__(self, message: str, returncode: Optional[int] = None, error_file: Optional[Path] = None):
        super().__init__(message)
        self.returncode = returncode
        self.error_file = error_file


class SnapshotExistsError(StorageError):
    """Raised when a candidate would replace an already retained snapshot."""
