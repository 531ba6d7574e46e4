"""Dashboard command."""

import calendar
from decimal import Decimal

import click
from fintrack.cli.commands.transaction import print_transactions
from fintrack.domain.summary import SummaryService
from fintrack.domain.transaction import TransactionService
from fintrack.utils.formatting import format_currency


def print_category_breakdown(breakdown: dict[str, Decimal], currency: str) -> None:
    """Print expense totals per category, largest first."""
    if not breakdown:
        click.echo("  No expenses")
        return
    for name, total in sorted(breakdown.items(), key=lambda item: (-item[1], item[0])):
        click.echo(f"  {name:<30} {format_currency(total, currency):>16}")


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show this month's totals, spending by category and recent transactions."""
    store = ctx.obj["store"]
    currency = ctx.obj["currency"]
    summary_service = SummaryService(store)

    summary = summary_service.current_period_summary()

    click.echo(f"\n{calendar.month_name[summary.month]} {summary.year}")
    click.echo("=" * 48)
    click.echo(f"{'Balance':<30} {format_currency(summary.balance, currency):>16}")
    click.echo(f"{'Income':<30} {format_currency(summary.income, currency):>16}")
    click.echo(f"{'Expenses':<30} {format_currency(summary.expenses, currency):>16}")
    click.echo(f"{'Savings':<30} {format_currency(summary.total_savings, currency):>16}")

    click.echo("\nExpenses by category:")
    print_category_breakdown(summary_service.dashboard_breakdown(), currency)

    click.echo("\nRecent transactions:")
    recent = TransactionService(store).recent_transactions()
    if not recent:
        click.echo("  No transactions yet")
        return
    print_transactions(recent, currency)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
