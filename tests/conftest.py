"""Shared test fixtures for rpmsnap tests."""

import logging
import pytest
import tempfile
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Iterator

from rpmsnap.cli.config import Config


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI attached to streams that CliRunner has closed."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_tool(temp_dir) -> Callable[..., Path]:
    """Factory writing an executable stand-in for rpmsnap.pl.

    The script prints fixed stdout/stderr content and exits with the given
    status. Calling the factory again rewrites the same script.
    """
    sbin = temp_dir / "sbin"
    sbin.mkdir(exist_ok=True)
    tool = sbin / "rpmsnap.pl"

    def _make(stdout: str = "", stderr: str = "", exit_code: int = 0) -> Path:
        out_file = sbin / "fake.out"
        err_file = sbin / "fake.err"
        out_file.write_text(stdout)
        err_file.write_text(stderr)
        tool.write_text(
            "#!/bin/sh\n"
            f"cat '{out_file}'\n"
            f"cat '{err_file}' >&2\n"
            f"exit {exit_code}\n"
        )
        tool.chmod(0o755)
        return tool

    return _make


@pytest.fixture
def config(temp_dir) -> Config:
    """Configuration rooted in the temporary directory with a fixed hostname."""
    return Config(
        install_root=temp_dir,
        hostname="testhost.example.org",
        location_rules=[],
    )


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Clock advancing one hour per call, starting 2013-01-07 17:00:01."""
    moments: Iterator[datetime] = (
        datetime(2013, 1, 7, 17, 0, 1) + timedelta(hours=i) for i in range(1000)
    )
    return lambda: next(moments)
