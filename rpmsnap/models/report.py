"""Retention results and run reports."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .snapshot import SnapshotKind


class RetentionAction(str, Enum):
    """Outcome of the keep-or-delete decision for one candidate."""

    RETAINED = "retained"
    DISCARDED = "discarded"


@dataclass
class RetentionResult:
    """What happened to one captured stream."""

    kind: SnapshotKind
    action: RetentionAction
    candidate_path: Path
    final_path: Path
    latest_path: Optional[Path] = None

    @property
    def retained(self) -> bool:
        return self.action is RetentionAction.RETAINED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'kind': self.kind.value,
            'action': self.action.value,
            'candidate_path': str(self.candidate_path),
            'final_path': str(self.final_path),
            'latest_path': str(self.latest_path) if self.latest_path else None,
        }


@dataclass
class RunReport:
    """Summary of a complete snapshot run."""

    hostname: str
    storage_dir: Path
    label: str
    started_at: datetime
    results: List[RetentionResult] = field(default_factory=list)

    @property
    def retained_count(self) -> int:
        """Number of streams kept as new snapshots."""
        return sum(1 for r in self.results if r.retained)

    @property
    def has_changes(self) -> bool:
        """Whether any stream differed from its latest snapshot."""
        return self.retained_count > 0

    def result_for(self, kind: SnapshotKind) -> Optional[RetentionResult]:
        for result in self.results:
            if result.kind is kind:
                return result
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'hostname': self.hostname,
            'storage_dir': str(self.storage_dir),
            'label': self.label,
            'started_at': self.started_at.isoformat(),
            'results': [r.to_dict() for r in self.results],
            'summary': {
                'retained': self.retained_count,
                'discarded': len(self.results) - self.retained_count,
            },
        }
