"""Extract prelink repair candidates from error snapshots.

``rpm --verify`` reports binaries whose prelink state is stale as lines like
``prelink: /usr/bin/foo: at least one of file's dependencies has changed``.
The paths can be fed to ``xargs prelink`` to fix them.
"""

import re
from pathlib import Path
from typing import Iterable, List

PRELINK_LINE = re.compile(r"prelink: (\S+):")


def extract_prelink_paths(lines: Iterable[str]) -> List[str]:
    """Return the unique, sorted paths named in prelink error lines."""
    paths = set()
    for line in lines:
        match = PRELINK_LINE.search(line)
        if match:
            paths.add(match.group(1))
    return sorted(paths)


def prelink_candidates(error_snapshot: Path) -> List[str]:
    """Read an error snapshot and return the files prelink should be re-run on.

    Raises:
        OSError: If the snapshot cannot be read
    """
    with open(error_snapshot, "r", encoding="utf-8", errors="replace") as f:
        return extract_prelink_paths(f)
