"""Snapshot data model for retained inventory snapshots."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

# Sorts lexicographically in chronological order; latest-selection relies on it
TIMESTAMP_FORMAT = "%Y-%m-%d_%H:%M:%S"

FILE_PREFIX = "rpmsnap"
PROVISIONAL_SUFFIX = ".new"


class SnapshotKind(str, Enum):
    """The two streams captured from one inventory run."""

    PRIMARY = "primary"
    SECONDARY = "secondary"

    @property
    def extension(self) -> str:
        """File extension used for retained snapshots of this kind."""
        return "txt" if self is SnapshotKind.PRIMARY else "err"

    @property
    def pattern(self) -> str:
        """Glob matching retained snapshots of this kind (never provisional ones)."""
        return f"{FILE_PREFIX}.*.{self.extension}"

    def file_name(self, label: str) -> str:
        """Final file name for a snapshot with the given timestamp label."""
        return f"{FILE_PREFIX}.{label}.{self.extension}"


def make_label(moment: datetime) -> str:
    """Format a timestamp label, e.g. '2013-01-07_17:00:01'."""
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class Snapshot:
    """A retained snapshot file in a host's storage directory."""

    path: Path
    kind: SnapshotKind
    label: str

    @classmethod
    def from_path(cls, path: Path, kind: SnapshotKind) -> 'Snapshot':
        """Create a snapshot from its file path.

        Raises:
            ValueError: If the file name does not follow the naming scheme
        """
        name = path.name
        prefix = f"{FILE_PREFIX}."
        suffix = f".{kind.extension}"
        if not name.startswith(prefix) or not name.endswith(suffix) or len(name) < len(prefix) + len(suffix):
            raise ValueError(f"Not a {kind.value} snapshot file name: {name}")

        return cls(path=path, kind=kind, label=name[len(prefix):-len(suffix)])

    @property
    def created_at(self) -> Optional[datetime]:
        """Timestamp parsed from the label, or None if the label is not a timestamp."""
        try:
            return datetime.strptime(self.label, TIMESTAMP_FORMAT)
        except ValueError:
            return None

    @property
    def size_bytes(self) -> int:
        """Size of the snapshot file on disk."""
        return self.path.stat().st_size

    def read_text(self) -> str:
        """Return snapshot content, replacing undecodable bytes."""
        return self.path.read_text(encoding="utf-8", errors="replace")

    def to_dict(self) -> Dict[str, Any]:
        """Convert snapshot to dictionary for serialization."""
        return {
            'path': str(self.path),
            'kind': self.kind.value,
            'label': self.label,
        }
