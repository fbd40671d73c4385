"""Data models for rpmsnap."""

from .snapshot import Snapshot, SnapshotKind, make_label
from .report import RetentionAction, RetentionResult, RunReport

__all__ = [
    "Snapshot",
    "SnapshotKind",
    "make_label",
    "RetentionAction",
    "RetentionResult",
    "RunReport",
]
