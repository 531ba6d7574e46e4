"""Snapshot export/import commands."""

import json

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.errors import PersistenceError


@click.group()
def snapshot_group():
    """Export or import all data as JSON."""
    pass


@snapshot_group.command("export")
@click.argument("path", type=click.Path(dir_okay=False, writable=True))
@click.pass_context
def export_snapshot(ctx, path: str):
    """Write transactions, budgets and goals to a JSON file."""
    store = ctx.obj["store"]

    try:
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(store.export_snapshot(), handle, indent=2)
    except OSError as e:
        click.echo(f"Error: Could not write {path}: {e.strerror or e}", err=True)
        ctx.exit(1)

    click.echo(
        f"Exported {len(store.transactions)} transactions, "
        f"{len(store.budget_categories)} budget categories and "
        f"{len(store.goals)} goals to {path}"
    )


@snapshot_group.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def import_snapshot(ctx, path: str, yes: bool):
    """Replace all data with the contents of a JSON snapshot.

    Accepts files written by 'snapshot export' as well as a dump of the
    browser edition's local storage.
    """
    store = ctx.obj["store"]

    if not yes:
        click.confirm("Replace all existing data?", abort=True)

    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        store.import_snapshot(data)
    except json.JSONDecodeError as e:
        click.echo(f"Error: {path} is not valid JSON: {e}", err=True)
        ctx.exit(1)
    except OSError as e:
        click.echo(f"Error: Could not read {path}: {e.strerror or e}", err=True)
        ctx.exit(1)
    except PersistenceError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Imported {len(store.transactions)} transactions, "
        f"{len(store.budget_categories)} budget categories and "
        f"{len(store.goals)} goals"
    )


def register_commands(cli):
    """Register snapshot commands with main CLI."""
    cli.add_command(snapshot_group, name="snapshot")
