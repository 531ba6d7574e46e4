"""Add transaction command."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.errors import DomainError, PersistenceError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date
from fintrack.utils.formatting import format_currency


@click.command("add")
@click.option(
    "--type",
    "kind",
    required=True,
    type=click.Choice(["income", "expense"], case_sensitive=False),
    help="Transaction type",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 1200 or 1,250.50)")
@click.option("--category", required=True, help="Category (see 'fintrack category list')")
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def add_transaction(
    ctx,
    kind: str,
    amount: str,
    category: str,
    description: str,
    date: str,
):
    """Add an income or expense transaction.

    Examples:
        fintrack add --type income --amount 5000 --category Salary --description "March pay"
        fintrack add --type expense --amount 1200 --category Food --description Groceries --date 2024-03-15
    """
    store = ctx.obj["store"]
    currency = ctx.obj["currency"]
    service = TransactionService(store)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = service.add_transaction(
            kind=kind.lower(),
            amount=txn_amount,
            description=description,
            category=category,
            date=txn_date,
        )
    except (DomainError, PersistenceError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created {txn.kind.value} transaction {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {format_currency(txn.amount, currency)}")
    click.echo(f"  Category: {txn.category}")
    click.echo(f"  Description: {txn.description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
