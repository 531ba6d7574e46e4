"""Budget category commands."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.budget import BudgetService
from fintrack.domain.errors import DomainError, PersistenceError
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.formatting import format_currency, format_percentage, progress_bar


@click.group()
def budget_group():
    """Manage monthly budget categories."""
    pass


@budget_group.command("add")
@click.argument("name")
@click.option("--limit", required=True, help="Monthly spending limit")
@click.pass_context
def add_budget(ctx, name: str, limit: str):
    """Add a budget category.

    NAME should match an expense category (e.g., Food) for spending to be
    counted against it.
    """
    service = BudgetService(ctx.obj["store"])

    try:
        budget = service.add_budget_category(name=name, limit=parse_amount(limit))
    except (DomainError, PersistenceError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Created budget '{budget.name}' with limit "
        f"{format_currency(budget.limit, ctx.obj['currency'])} (ID: {budget.id})"
    )


@budget_group.command("list")
@click.pass_context
def list_budgets(ctx):
    """Show budget categories with this month's spending."""
    service = BudgetService(ctx.obj["store"])
    currency = ctx.obj["currency"]

    statuses = service.budget_statuses()
    if not statuses:
        click.echo("No budget categories. Add one with 'budget add'.")
        return

    for status in statuses:
        budget = status.budget
        click.echo(f"\n{budget.name} (ID: {budget.id})")
        click.echo(
            f"  {format_currency(status.spent, currency)} / "
            f"{format_currency(budget.limit, currency)}"
        )
        line = f"  {progress_bar(status.progress)} {format_percentage(status.progress)} used"
        if status.is_over_budget:
            line += f" ({format_currency(status.overage, currency)} over)"
        click.echo(line)


@budget_group.command("delete")
@click.argument("budget_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_budget(ctx, budget_id: int, yes: bool):
    """Delete a budget category by ID."""
    service = BudgetService(ctx.obj["store"])

    if not yes:
        click.confirm("Delete this budget category?", abort=True)

    try:
        deleted = service.delete_budget_category(budget_id)
    except PersistenceError as e:
        handle_domain_error(ctx, e)
        return

    if deleted:
        click.echo(f"Deleted budget category {budget_id}")
    else:
        click.echo(f"No budget category with ID {budget_id}")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
