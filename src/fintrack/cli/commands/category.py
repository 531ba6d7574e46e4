"""Category listing command."""

import click
from fintrack.domain.categories import categories_for
from fintrack.domain.entities import TransactionKind


@click.group()
def category_group():
    """Show transaction categories."""
    pass


@category_group.command("list")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["income", "expense", "all"], case_sensitive=False),
    default="all",
    show_default=True,
)
def list_categories(kind: str):
    """List the categories available for each transaction type."""
    kinds = list(TransactionKind) if kind.lower() == "all" else [TransactionKind(kind.lower())]
    for txn_kind in kinds:
        click.echo(f"\n{txn_kind.value.capitalize()} categories:")
        for name in categories_for(txn_kind):
            click.echo(f"  {name}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
