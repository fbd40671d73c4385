"""Snapshot capture, storage and retention."""

from .retention import ComparisonOutcome, compare_files, resolve_candidate
from .store import SnapshotStore

__all__ = ["ComparisonOutcome", "compare_files", "resolve_candidate", "SnapshotStore"]
