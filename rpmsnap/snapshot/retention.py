"""Keep-or-delete decision for freshly captured snapshot candidates."""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from ..errors import ComparisonError, SnapshotExistsError, StorageError
from ..models.report import RetentionAction

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class ComparisonOutcome(str, Enum):
    """Result of a byte-for-byte file comparison."""

    IDENTICAL = "identical"
    DIFFERENT = "different"


Comparator = Callable[[Path, Path], object]


def compare_files(first: Path, second: Path) -> ComparisonOutcome:
    """Compare two files byte for byte.

    Args:
        first: Path to the first file
        second: Path to the second file

    Returns:
        ComparisonOutcome.IDENTICAL or ComparisonOutcome.DIFFERENT

    Raises:
        ComparisonError: If either file cannot be read
    """
    try:
        with open(first, "rb") as f1, open(second, "rb") as f2:
            while True:
                block1 = f1.read(CHUNK_SIZE)
                block2 = f2.read(CHUNK_SIZE)
                if block1 != block2:
                    return ComparisonOutcome.DIFFERENT
                if not block1:
                    return ComparisonOutcome.IDENTICAL
    except OSError as e:
        raise ComparisonError(f"Could not compare '{first}' and '{second}': {e}") from e


def resolve_candidate(
    latest: Optional[Path],
    candidate: Path,
    final: Path,
    compare: Comparator = compare_files,
) -> RetentionAction:
    """Keep the candidate as a new snapshot or delete it as a duplicate.

    Performs exactly one filesystem mutation: the candidate is either renamed
    to ``final`` or deleted. ``latest`` is only read.

    Args:
        latest: Most recent retained snapshot of the same kind, or None
        candidate: Provisional file holding the freshly captured content
        final: Name the candidate takes if it is retained
        compare: Comparator returning a ComparisonOutcome

    Returns:
        RetentionAction.RETAINED or RetentionAction.DISCARDED

    Raises:
        ComparisonError: If the comparison fails or yields an unexpected outcome
        SnapshotExistsError: If a retained snapshot already holds the final name
        StorageError: If the candidate cannot be renamed or deleted
    """
    if latest is None:
        logger.info(f"No earlier snapshot - keeping '{candidate}' as '{final}'")
        _retain(candidate, final)
        return RetentionAction.RETAINED

    outcome = compare(candidate, latest)

    if outcome == ComparisonOutcome.IDENTICAL:
        logger.info(f"No differences found between '{candidate}' and '{latest}' -- deleting '{candidate}'")
        try:
            candidate.unlink()
        except OSError as e:
            raise StorageError(f"Could not delete '{candidate}': {e}") from e
        return RetentionAction.DISCARDED

    if outcome == ComparisonOutcome.DIFFERENT:
        logger.info(f"Differences found between '{candidate}' and '{latest}' -- keeping '{candidate}' as '{final}'")
        _retain(candidate, final)
        return RetentionAction.RETAINED

    raise ComparisonError(f"Unexpected comparison outcome {outcome!r} for '{candidate}' and '{latest}'")


def _retain(candidate: Path, final: Path) -> None:
    # Retained snapshots are never replaced
    if final.exists():
        raise SnapshotExistsError(f"Snapshot '{final}' already exists -- not replacing it with '{candidate}'")
    try:
        candidate.rename(final)
    except OSError as e:
        raise StorageError(f"Could not rename '{candidate}' to '{final}': {e}") from e
