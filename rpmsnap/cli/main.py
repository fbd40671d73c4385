"""Main CLI entry point using Typer."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import Config
from ..errors import ConfigError, InventoryCommandError, RpmsnapError
from ..host.identity import get_hostname
from ..models.snapshot import SnapshotKind
from ..snapshot.runner import SnapshotRunner
from ..utils.export import export_to_json
from ..utils.logging import setup_logging
from ..utils.prelink import prelink_candidates

app = typer.Typer(
    name="rpmsnap",
    help="Package inventory snapshots, kept only when something changed",
    add_completion=False,
)

# Narration goes to stderr; stdout carries command results only
console = Console(stderr=True)
out_console = Console()

# Global config
config: Optional[Config] = None


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (YAML)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress output except errors"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write log messages to this file"),
):
    """Package inventory snapshots, kept only when something changed.

    Without a command, performs a snapshot run (suitable for crontab):

        00 17 */3 * * /usr/local/bin/rpmsnap --quiet
    """
    global config

    if no_color:
        console.no_color = True

    try:
        config = Config.load(config_file)
    except ConfigError as e:
        console.print(f"✗ Error: {e}", style="bold red")
        raise typer.Exit(code=1)

    log_level = "ERROR" if quiet else ("DEBUG" if verbose else config.log_level)
    setup_logging(level=log_level, log_file=str(log_file) if log_file else config.log_file)
    ctx.obj = {"quiet": quiet}

    if ctx.invoked_subcommand is None:
        _run_snapshot(report_file=None, quiet=quiet)


def _run_snapshot(report_file: Optional[Path], quiet: bool = False) -> None:
    runner = SnapshotRunner(config, show_progress=not quiet)

    try:
        report = runner.run()
    except InventoryCommandError as e:
        console.print(f"✗ {e}", style="bold red")
        if e.error_file:
            console.print(f"  Errors may be in '{e.error_file}'")
        raise typer.Exit(code=1)
    except RpmsnapError as e:
        console.print(f"✗ {e} -- exiting", style="bold red")
        raise typer.Exit(code=1)

    if not quiet:
        for result in report.results:
            if result.retained:
                console.print(f"✓ {result.kind.value}: kept {result.final_path.name}", style="green")
            else:
                console.print(f"= {result.kind.value}: unchanged since {result.latest_path.name}")

    if report_file:
        export_to_json(report.to_dict(), report_file)


@app.command()
def run(
    ctx: typer.Context,
    report: Optional[Path] = typer.Option(None, "--report", help="Write a JSON run report to this file"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress status lines"),
):
    """Run the inventory tool and keep the new snapshots that differ from the latest ones."""
    _run_snapshot(report_file=report, quiet=quiet or ctx.obj["quiet"])


@app.command("list")
def list_snapshots(
    kind: Optional[SnapshotKind] = typer.Option(None, "--kind", "-k", case_sensitive=False, help="Only list this kind"),
):
    """List retained snapshots for this host."""
    try:
        store = SnapshotRunner(config).resolve_store(get_hostname(config.hostname))
    except RpmsnapError as e:
        console.print(f"✗ {e}", style="bold red")
        raise typer.Exit(code=1)

    kinds = [kind] if kind else list(SnapshotKind)
    snapshots = [s for k in kinds for s in store.list_snapshots(k)]

    if not snapshots:
        console.print(f"No snapshots found in '{store.storage_dir}'.", style="yellow")
        return

    table = Table(show_header=True, title=f"Snapshots in {store.storage_dir}")
    table.add_column("Label", style="cyan")
    table.add_column("Kind", style="green")
    table.add_column("Size (bytes)", justify="right")

    for snap in snapshots:
        table.add_row(snap.label, snap.kind.value, str(snap.size_bytes))

    out_console.print(table)

    leftovers = store.list_provisional()
    if leftovers:
        console.print(f"\n⚠️  {len(leftovers)} provisional file(s) left by failed runs", style="yellow")


@app.command()
def latest(
    kind: SnapshotKind = typer.Option(SnapshotKind.PRIMARY, "--kind", "-k", case_sensitive=False, help="Snapshot kind"),
):
    """Print the path of the latest retained snapshot."""
    try:
        store = SnapshotRunner(config).resolve_store(get_hostname(config.hostname))
    except RpmsnapError as e:
        console.print(f"✗ {e}", style="bold red")
        raise typer.Exit(code=1)

    path = store.latest(kind)
    if path is None:
        console.print(f"✗ No {kind.value} snapshot in '{store.storage_dir}'", style="bold red")
        raise typer.Exit(code=1)

    typer.echo(str(path))


@app.command("prelink-candidates")
def prelink(
    snapshot: Optional[Path] = typer.Argument(None, help="Error snapshot to read (default: latest)"),
):
    """Print files with stale prelink state, one per line.

    Pipe into prelink to repair them:

        rpmsnap prelink-candidates | xargs prelink
    """
    try:
        if snapshot is None:
            store = SnapshotRunner(config).resolve_store(get_hostname(config.hostname))
            snapshot = store.latest(SnapshotKind.SECONDARY)
            if snapshot is None:
                console.print(f"✗ No error snapshot in '{store.storage_dir}'", style="bold red")
                raise typer.Exit(code=1)
        paths = prelink_candidates(snapshot)
    except RpmsnapError as e:
        console.print(f"✗ {e}", style="bold red")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"✗ Could not read '{snapshot}': {e}", style="bold red")
        raise typer.Exit(code=1)

    for path in paths:
        typer.echo(path)


@app.command()
def version():
    """Show version information."""
    from .. import __version__
    import sys

    typer.echo(f"rpmsnap version {__version__}")
    typer.echo(f"Python {sys.version.split()[0]}")


def cli_main():
    """Entry point for console script."""
    app()


if __name__ == "__main__":
    cli_main()
