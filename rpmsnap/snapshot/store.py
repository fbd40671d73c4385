"""Directory-backed store of retained snapshots for one host."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..errors import StorageError
from ..models.snapshot import PROVISIONAL_SUFFIX, Snapshot, SnapshotKind

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Retained and provisional snapshot files in a single storage directory.

    Snapshots are never rewritten once retained. The latest snapshot of a kind
    is the one whose file name sorts greatest, which matches chronological
    order as long as labels use the ``YYYY-MM-DD_HH:MM:SS`` format.
    """

    def __init__(self, storage_dir: Union[str, Path]):
        self.storage_dir = Path(storage_dir)

    def ensure_exists(self) -> Path:
        """Create the storage directory if needed.

        Returns:
            Path to the storage directory

        Raises:
            StorageError: If the directory cannot be created
        """
        if self.storage_dir.is_dir():
            return self.storage_dir

        logger.info(f"Directory '{self.storage_dir}' does not exist - creating it")
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create directory '{self.storage_dir}': {e}") from e

        return self.storage_dir

    def final_path(self, kind: SnapshotKind, label: str) -> Path:
        """Path a retained snapshot with this label gets."""
        return self.storage_dir / kind.file_name(label)

    def provisional_path(self, kind: SnapshotKind, label: str) -> Path:
        """Path the freshly captured content is written to before the decision."""
        return self.storage_dir / (kind.file_name(label) + PROVISIONAL_SUFFIX)

    def list_snapshots(self, kind: SnapshotKind) -> List[Snapshot]:
        """List retained snapshots of a kind, oldest first.

        Args:
            kind: Which stream's snapshots to list

        Returns:
            Snapshots sorted lexicographically by file name
        """
        if not self.storage_dir.is_dir():
            return []

        paths = sorted(
            (p for p in self.storage_dir.glob(kind.pattern) if p.is_file()),
            key=lambda p: p.name,
        )
        return [Snapshot.from_path(p, kind) for p in paths]

    def latest(self, kind: SnapshotKind) -> Optional[Path]:
        """Return the most recent retained snapshot of a kind, or None if there is none."""
        snapshots = self.list_snapshots(kind)
        if not snapshots:
            return None
        return snapshots[-1].path

    def list_provisional(self) -> List[Path]:
        """List provisional files left behind, e.g. by a failed inventory run."""
        if not self.storage_dir.is_dir():
            return []
        return sorted(self.storage_dir.glob(f"*{PROVISIONAL_SUFFIX}"))
