"""Transaction listing and deletion commands."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import Transaction
from fintrack.domain.errors import PersistenceError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.formatting import format_short_date, format_signed_amount


def print_transactions(transactions: list[Transaction], currency: str) -> None:
    """Print transactions as a compact table."""
    click.echo("-" * 88)
    click.echo(
        f"{'ID':<15} {'Date':<8} {'Amount':>14}  {'Category':<15} {'Description':<30}"
    )
    click.echo("-" * 88)
    for txn in transactions:
        amount_str = format_signed_amount(txn.kind, txn.amount, currency)
        click.echo(
            f"{txn.id:<15} {format_short_date(txn.date):<8} {amount_str:>14}  "
            f"{txn.category:<15} {txn.description[:30]:<30}"
        )


@click.group()
def transaction_group():
    """View and delete transactions."""
    pass


@transaction_group.command("list")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["income", "expense", "all"], case_sensitive=False),
    default="all",
    show_default=True,
    help="Only show this transaction type",
)
@click.option(
    "--period",
    type=click.Choice(["week", "month", "all"], case_sensitive=False),
    default="all",
    show_default=True,
    help="Only show the last 7 days, the last month, or everything",
)
@click.pass_context
def list_transactions(ctx, kind: str, period: str):
    """List transactions, newest first."""
    service = TransactionService(ctx.obj["store"])

    transactions = service.list_transactions(
        kind=None if kind.lower() == "all" else kind.lower(),
        window=period.lower(),
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    print_transactions(transactions, ctx.obj["currency"])


@transaction_group.command("recent")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=5,
    show_default=True,
    help="Number of transactions",
)
@click.pass_context
def recent_transactions(ctx, limit: int):
    """Show the most recently added transactions."""
    service = TransactionService(ctx.obj["store"])

    transactions = service.recent_transactions(limit=limit)
    if not transactions:
        click.echo("No transactions yet.")
        return
    print_transactions(transactions, ctx.obj["currency"])


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool):
    """Delete a transaction by ID."""
    service = TransactionService(ctx.obj["store"])

    if not yes:
        click.confirm("Delete this transaction?", abort=True)

    try:
        deleted = service.delete_transaction(transaction_id)
    except PersistenceError as e:
        handle_domain_error(ctx, e)
        return

    if deleted:
        click.echo(f"Deleted transaction {transaction_id}")
    else:
        click.echo(f"No transaction with ID {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
