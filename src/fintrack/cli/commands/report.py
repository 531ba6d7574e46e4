"""Report commands."""

from datetime import date

import click
from fintrack.cli.commands.dashboard import print_category_breakdown
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import MonthlyReport, YearlyReport
from fintrack.domain.errors import DomainError
from fintrack.domain.summary import SummaryService
from fintrack.utils.formatting import format_currency


def print_report(report: MonthlyReport | YearlyReport, currency: str) -> None:
    """Print a monthly or yearly report."""
    click.echo(f"\n{report.title}")
    click.echo("=" * 48)
    click.echo(f"{'Total Income':<30} {format_currency(report.income, currency):>16}")
    click.echo(f"{'Total Expenses':<30} {format_currency(report.expenses, currency):>16}")
    click.echo(f"{'Net Balance':<30} {format_currency(report.balance, currency):>16}")

    click.echo("\nExpenses by Category:")
    print_category_breakdown(report.category_breakdown, currency)

    if isinstance(report, YearlyReport):
        click.echo("\nMonthly Breakdown:")
        click.echo(f"  {'Month':<6} {'Income':>16} {'Expenses':>16} {'Balance':>16}")
        for row in report.monthly_breakdown:
            click.echo(
                f"  {row.label:<6} {format_currency(row.income, currency):>16} "
                f"{format_currency(row.expenses, currency):>16} "
                f"{format_currency(row.balance, currency):>16}"
            )

    click.echo(f"\nTotal Transactions: {len(report.transactions)}")


@click.group()
def report_group():
    """Monthly and yearly reports."""
    pass


@report_group.command("monthly")
@click.option("--period", help="Month as YYYY-MM (default: current month)")
@click.pass_context
def monthly_report(ctx, period: str | None):
    """Show income, expenses and spending by category for one month."""
    service = SummaryService(ctx.obj["store"])
    period = period or date.today().strftime("%Y-%m")

    try:
        report = service.generate_report("monthly", period)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    print_report(report, ctx.obj["currency"])


@report_group.command("yearly")
@click.option("--year", help="Year as YYYY (default: current year)")
@click.pass_context
def yearly_report(ctx, year: str | None):
    """Show yearly totals with a month-by-month breakdown."""
    service = SummaryService(ctx.obj["store"])
    year = year or str(date.today().year)

    try:
        report = service.generate_report("yearly", year)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    print_report(report, ctx.obj["currency"])


@report_group.command("periods")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["monthly", "yearly"], case_sensitive=False),
    default="monthly",
    show_default=True,
)
@click.pass_context
def list_periods(ctx, kind: str):
    """List the periods reports are usually requested for."""
    service = SummaryService(ctx.obj["store"])
    for period in service.report_periods(kind.lower()):
        click.echo(period)


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
