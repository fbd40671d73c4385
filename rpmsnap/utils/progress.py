"""Progress indicator utilities using Rich library."""

from typing import Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn


def create_spinner_progress(console: Optional[Console] = None) -> Progress:
    """Create a transient spinner for the indeterminate inventory run.

    Args:
        console: Console to render on; defaults to a stderr console

    Returns:
        Progress instance with spinner
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console or Console(stderr=True),
        transient=True,
    )
