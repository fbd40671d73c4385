"""Unit tests for export functionality."""

import json
from datetime import datetime
from pathlib import Path

from rpmsnap.models.report import RetentionAction, RetentionResult, RunReport
from rpmsnap.models.snapshot import SnapshotKind
from rpmsnap.utils.export import export_to_json


class TestJSONExport:
    """Tests for JSON export functionality."""

    def test_export_to_json(self, tmp_path):
        filepath = tmp_path / "data.json"

        result = export_to_json({"a": 1, "when": datetime(2013, 1, 7)}, str(filepath))

        assert result == filepath
        with open(filepath) as f:
            data = json.load(f)
        assert data == {"a": 1, "when": "2013-01-07 00:00:00"}

    def test_export_run_report(self, tmp_path):
        storage_dir = Path("/data/host")
        report = RunReport(
            hostname="host",
            storage_dir=storage_dir,
            label="2013-01-07_17:00:01",
            started_at=datetime(2013, 1, 7, 17, 0, 1),
            results=[
                RetentionResult(
                    kind=SnapshotKind.PRIMARY,
                    action=RetentionAction.DISCARDED,
                    candidate_path=storage_dir / "rpmsnap.2013-01-07_17:00:01.txt.new",
                    final_path=storage_dir / "rpmsnap.2013-01-07_17:00:01.txt",
                    latest_path=storage_dir / "rpmsnap.2012-12-01_17:00:01.txt",
                ),
                RetentionResult(
                    kind=SnapshotKind.SECONDARY,
                    action=RetentionAction.RETAINED,
                    candidate_path=storage_dir / "rpmsnap.2013-01-07_17:00:01.err.new",
                    final_path=storage_dir / "rpmsnap.2013-01-07_17:00:01.err",
                ),
            ],
        )

        filepath = export_to_json(report.to_dict(), tmp_path / "report.json")

        with open(filepath) as f:
            data = json.load(f)
        assert data['summary'] == {'retained': 1, 'discarded': 1}
        assert data['results'][0]['action'] == "discarded"
        assert data['results'][0]['latest_path'] == "/data/host/rpmsnap.2012-12-01_17:00:01.txt"
        assert data['results'][1]['latest_path'] is None
