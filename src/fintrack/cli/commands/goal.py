"""Savings goal commands."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.errors import DomainError, PersistenceError
from fintrack.domain.goal import GoalService
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date
from fintrack.utils.formatting import format_currency, format_percentage, progress_bar


@click.group()
def goal_group():
    """Manage savings goals."""
    pass


@goal_group.command("add")
@click.argument("name")
@click.option("--target", required=True, help="Amount to save")
@click.option("--deadline", required=True, help="Deadline (YYYY-MM-DD)")
@click.pass_context
def add_goal(ctx, name: str, target: str, deadline: str):
    """Add a savings goal."""
    service = GoalService(ctx.obj["store"])

    try:
        deadline_date = parse_date(deadline)
    except ValueError as e:
        click.echo(f"Error: Invalid deadline: {e}", err=True)
        ctx.exit(1)

    try:
        goal = service.add_goal(name=name, target=parse_amount(target), deadline=deadline_date)
    except (DomainError, PersistenceError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Created goal '{goal.name}' targeting "
        f"{format_currency(goal.target, ctx.obj['currency'])} by {goal.deadline} (ID: {goal.id})"
    )


@goal_group.command("list")
@click.pass_context
def list_goals(ctx):
    """Show savings goals with progress."""
    service = GoalService(ctx.obj["store"])
    currency = ctx.obj["currency"]

    progress_list = service.goal_progress()
    if not progress_list:
        click.echo("No savings goals. Add one with 'goal add'.")
        return

    for item in progress_list:
        goal = item.goal
        click.echo(f"\n{goal.name} (ID: {goal.id}) - target {format_currency(goal.target, currency)}")
        deadline_str = (
            "Deadline passed"
            if item.is_deadline_passed
            else f"{item.days_remaining} days left"
        )
        click.echo(
            f"  {progress_bar(item.progress)} {format_currency(goal.current, currency)} saved "
            f"({format_percentage(item.progress)}) - {deadline_str}"
        )


@goal_group.command("deposit")
@click.argument("goal_id", type=int)
@click.argument("amount")
@click.pass_context
def deposit(ctx, goal_id: int, amount: str):
    """Add money to a savings goal."""
    service = GoalService(ctx.obj["store"])

    try:
        goal = service.deposit_to_goal(goal_id, parse_amount(amount))
    except (DomainError, PersistenceError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Saved {format_currency(goal.current, ctx.obj['currency'])} "
        f"of {format_currency(goal.target, ctx.obj['currency'])} for '{goal.name}'"
    )


@goal_group.command("delete")
@click.argument("goal_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_goal(ctx, goal_id: int, yes: bool):
    """Delete a savings goal by ID."""
    service = GoalService(ctx.obj["store"])

    if not yes:
        click.confirm("Delete this goal?", abort=True)

    try:
        deleted = service.delete_goal(goal_id)
    except PersistenceError as e:
        handle_domain_error(ctx, e)
        return

    if deleted:
        click.echo(f"Deleted goal {goal_id}")
    else:
        click.echo(f"No goal with ID {goal_id}")


def register_commands(cli):
    """Register goal commands with main CLI."""
    cli.add_command(goal_group, name="goal")
