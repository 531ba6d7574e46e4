"""Main CLI entry point."""

import logging

import click
from fintrack.database.factories import create_sqlite_storage
from fintrack.database.store import RecordStore
from fintrack.domain.errors import PersistenceError
from fintrack.utils.formatting import DEFAULT_CURRENCY

# Import and register all commands at module level
from fintrack.cli.commands import (
    add,
    transaction,
    budget,
    goal,
    dashboard,
    report,
    category,
    snapshot,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--currency",
    default=DEFAULT_CURRENCY,
    show_default=True,
    envvar="FINTRACK_CURRENCY",
    help="Currency symbol used when displaying amounts",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, currency: str, verbose: bool):
    """Fintrack - Personal finance tracker.

    Record income and expenses, keep monthly budgets in check and track
    progress towards savings goals.
    """
    ctx.ensure_object(dict)
    ctx.obj["currency"] = currency

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            storage = create_sqlite_storage(database_path=db_path)
            storage.connect()
            storage.initialize_schema()
            ctx.obj["store"] = RecordStore(storage).load()
        except PersistenceError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        ctx.call_on_close(storage.disconnect)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
budget.register_commands(cli)
goal.register_commands(cli)
dashboard.register_commands(cli)
report.register_commands(cli)
category.register_commands(cli)
snapshot.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
