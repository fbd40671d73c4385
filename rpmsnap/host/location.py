"""Storage directory routing keyed by host identity.

Some machines boot different OS releases under the same host name. Their
snapshots must not be compared against each other, so such hosts get a
directory suffix derived from a probe file (``/etc/issue`` by default).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationRule:
    """Maps markers found in a probe file to a storage directory suffix for one host."""

    host: str
    probe_path: Path = Path("/etc/issue")
    markers: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def matches(self, hostname: str) -> bool:
        return self.host == hostname

    def suffix_for(self, probe_text: str) -> str:
        """Return the suffix of the first marker present in the probe text, or ''."""
        for marker, suffix in self.markers:
            if marker in probe_text:
                return suffix
        return ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LocationRule':
        """Create a rule from a configuration mapping.

        Expected shape::

            host: some.random.host.org
            probe: /etc/issue
            markers:
              - {marker: Heisenbug, suffix: .f20}

        Raises:
            ValueError: If required keys are missing
        """
        if not data.get('host'):
            raise ValueError("Location rule requires a 'host'")

        markers = []
        for entry in data.get('markers') or []:
            if 'marker' not in entry or 'suffix' not in entry:
                raise ValueError(f"Location rule marker needs 'marker' and 'suffix': {entry}")
            markers.append((str(entry['marker']), str(entry['suffix'])))

        return cls(
            host=str(data['host']),
            probe_path=Path(data.get('probe', '/etc/issue')),
            markers=tuple(markers),
        )


# https://fedoraproject.org/wiki/History_of_Fedora_release_names
FEDORA_RELEASE_MARKERS: Tuple[Tuple[str, str], ...] = (
    ("Heisenbug", ".f20"),
    ("Schrödinger’s Cat", ".f19"),
    ("Spherical Cow", ".f18"),
    ("Beefy Miracle", ".f17"),
)

DEFAULT_LOCATION_RULES: List[LocationRule] = [
    LocationRule(host="some.random.host.org", markers=FEDORA_RELEASE_MARKERS),
]


def _read_probe(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Could not read probe file '{path}': {e} - no directory suffix applied")
        return None


def resolve_suffix(hostname: str, rules: Sequence[LocationRule]) -> str:
    """Find the storage directory suffix for a host.

    Only the first rule naming the host is evaluated.

    Args:
        hostname: Host name the storage directory is keyed by
        rules: Ordered rule table

    Returns:
        Suffix string, '' when no rule or marker applies
    """
    for rule in rules:
        if not rule.matches(hostname):
            continue
        probe_text = _read_probe(rule.probe_path)
        if probe_text is None:
            return ""
        suffix = rule.suffix_for(probe_text)
        logger.debug(f"Location rule for '{hostname}' yields suffix '{suffix}'")
        return suffix
    return ""


def resolve_storage_dir(data_root: Path, hostname: str, rules: Sequence[LocationRule]) -> Path:
    """Return ``<data_root>/<hostname><suffix>``."""
    return Path(data_root) / f"{hostname}{resolve_suffix(hostname, rules)}"
