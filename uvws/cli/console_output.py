# uvws/cli/console_output.py
"""
Prints a resolution summary to the console (stderr) during CLI execution.
"""
import sys

import click
import structlog
from rich.console import Console as RichConsole
from rich.table import Table

from uvws.core.pipeline import WorkspaceResolution

log = structlog.get_logger(__name__)

def print_resolution_summary(resolution: WorkspaceResolution):
    log.debug("console_summary_output_requested")
    click.secho("--- Workspace Summary ---", fg="cyan", err=True)
    click.echo(f"Member root: {resolution.member_root}", err=True)

    if not resolution.found:
        click.secho("No workspace root found above the member root.", fg="yellow", err=True)
        return

    click.echo(f"Workspace root: {resolution.workspace_root}", err=True)
    click.echo(f"Member patterns: {', '.join(resolution.member_patterns) or '(none)'}", err=True)
    if resolution.exclude_patterns:
        click.echo(f"Exclude patterns: {', '.join(resolution.exclude_patterns)}", err=True)

    if not resolution.members:
        click.secho("No member directories matched.", fg="yellow", err=True)
        return

    table = Table(title=f"{len(resolution.members)} members", title_justify="left")
    table.add_column("member")
    table.add_column("extra path")
    extra_paths = iter(resolution.extra_paths)
    for member in resolution.members:
        if member == resolution.member_root:
            table.add_row(str(member), "[dim](self)[/dim]")
        else:
            table.add_row(str(member), next(extra_paths, ""))
    RichConsole(file=sys.stderr).print(table)
