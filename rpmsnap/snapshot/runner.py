"""Run coordinator: capture one inventory run and decide what to keep."""

import logging
import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Callable, List

from ..cli.config import Config
from ..errors import EnvironmentSetupError, InventoryCommandError
from ..host.identity import get_hostname
from ..host.location import resolve_storage_dir
from ..models.report import RetentionResult, RunReport
from ..models.snapshot import SnapshotKind, make_label
from ..utils.progress import create_spinner_progress
from .retention import Comparator, compare_files, resolve_candidate
from .store import SnapshotStore

logger = logging.getLogger(__name__)


class SnapshotRunner:
    """Runs the inventory command once and applies the retention decision to both streams."""

    def __init__(
        self,
        config: Config,
        clock: Callable[[], datetime] = datetime.now,
        compare: Comparator = compare_files,
        show_progress: bool = False,
    ):
        self.config = config
        self.clock = clock
        self.compare = compare
        self.show_progress = show_progress

    def resolve_tool(self) -> Path:
        """Return the inventory command path.

        Raises:
            EnvironmentSetupError: If the command is missing or not executable
        """
        tool = self.config.tool_path
        if not tool.is_file() or not os.access(tool, os.X_OK):
            raise EnvironmentSetupError(f"Script '{tool}' not found or not executable")
        return tool

    def resolve_store(self, hostname: str) -> SnapshotStore:
        """Build the store for this host, applying any location rule."""
        storage_dir = resolve_storage_dir(self.config.data_root, hostname, self.config.location_rules)
        logger.info(f"Target directory is '{storage_dir}'")
        return SnapshotStore(storage_dir)

    def run(self) -> RunReport:
        """Execute one complete snapshot run.

        Returns:
            RunReport describing what was retained or discarded

        Raises:
            EnvironmentSetupError: If hostname or tool resolution fails
            StorageError: If the storage directory cannot be created
            InventoryCommandError: If the inventory command fails
            ComparisonError: If a retention comparison fails
        """
        started_at = self.clock()
        label = make_label(started_at)

        tool = self.resolve_tool()
        hostname = get_hostname(self.config.hostname)
        logger.info(f"Hostname determined to be '{hostname}'")

        store = self.resolve_store(hostname)
        store.ensure_exists()

        out_new = store.provisional_path(SnapshotKind.PRIMARY, label)
        err_new = store.provisional_path(SnapshotKind.SECONDARY, label)
        logger.info(f"'rpmsnap' information goes to '{out_new}'")
        logger.info(f"'rpmsnap' errors go to '{err_new}'")

        self._run_inventory(tool, out_new, err_new)

        report = RunReport(
            hostname=hostname,
            storage_dir=store.storage_dir,
            label=label,
            started_at=started_at,
        )
        for kind in (SnapshotKind.PRIMARY, SnapshotKind.SECONDARY):
            latest = store.latest(kind)
            final = store.final_path(kind, label)
            candidate = store.provisional_path(kind, label)
            action = resolve_candidate(latest, candidate, final, compare=self.compare)
            report.results.append(RetentionResult(
                kind=kind,
                action=action,
                candidate_path=candidate,
                final_path=final,
                latest_path=latest,
            ))

        logger.info(f"Run complete: {report.retained_count} of {len(report.results)} stream(s) retained")
        return report

    def _command(self, tool: Path) -> List[str]:
        return [str(tool), *self.config.tool_args]

    def _run_inventory(self, tool: Path, out_path: Path, err_path: Path) -> None:
        """Run the inventory command with stdout and stderr captured to the provisional files.

        Provisional files are left in place on failure for post-mortem.
        """
        command = self._command(tool)
        logger.debug(f"Running {command}")

        try:
            with open(out_path, "wb") as out, open(err_path, "wb") as err:
                if self.show_progress:
                    with create_spinner_progress() as progress:
                        progress.add_task(f"Running {tool.name}...", total=None)
                        returncode = self._execute(command, out, err)
                else:
                    returncode = self._execute(command, out, err)
        except subprocess.TimeoutExpired as e:
            raise InventoryCommandError(
                f"Problem running '{tool}': timed out after {e.timeout} seconds",
                error_file=err_path,
            ) from e
        except OSError as e:
            raise InventoryCommandError(f"Problem running '{tool}': {e}", error_file=err_path) from e

        if returncode != 0:
            raise InventoryCommandError(
                f"Problem running '{tool}': exit status {returncode}. Errors may be in '{err_path}'",
                returncode=returncode,
                error_file=err_path,
            )

    def _execute(self, command: List[str], out, err) -> int:
        completed = subprocess.run(
            command,
            stdout=out,
            stderr=err,
            stdin=subprocess.DEVNULL,
            timeout=self.config.command_timeout,
            check=False,
        )
        return completed.returncode
