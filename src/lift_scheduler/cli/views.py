"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of plans, calendars, training days
and summaries.
"""

from datetime import date

from rich.console import Console
from rich.table import Table

from ..core.dates import build_month_grid, plan_end_date
from ..core.metrics import count_completed_sets, count_empty_sets
from ..core.models import (
    WEEKDAY_NAMES,
    ActivePlan,
    Exercise,
    Plan,
    TrainingDay,
    TrainingDaySummary,
    format_weekdays,
)
from ..core.progression import anchor_estimate, estimated_one_rep_max, suggested_weights

console = Console()


def _fmt_kg(value: float | None) -> str:
    return "-" if value is None else f"{value:g}"


def _fmt_rpe(value: float | None) -> str:
    return "-" if value is None else f"{value:g}"


def format_plans_table(plans: list[Plan], active: ActivePlan | None = None) -> Table:
    """
    Create a Rich table listing the plan catalog.

    Args:
        plans: Catalog entries
        active: Current active plan, marked with '*'

    Returns:
        Rich Table object
    """
    table = Table(title="Plans")
    table.add_column("", width=1)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Weeks", justify="right")
    table.add_column("Days/week", justify="right")

    for plan in plans:
        mark = "*" if active is not None and active.plan_id == plan.id else ""
        table.add_row(mark, plan.id, plan.name, str(plan.weeks), str(plan.days_per_week))
    return table


def format_active_plan(plan: Plan | None, active: ActivePlan, scheduled_days: int) -> str:
    """
    Format the active plan as a text block.

    Returns:
        Formatted string
    """
    fmt = "%a, %d %b %Y"
    lines = [plan.name if plan is not None else "Unknown plan"]
    if plan is not None:
        end = plan_end_date(active.start_date, plan.weeks)
        lines.append(f"- Duration: {active.start_date.strftime(fmt)} → {end.strftime(fmt)}")
    else:
        lines.append(f"- Start: {active.start_date.strftime(fmt)}")
    lines.append(f"- Training days: {format_weekdays(active.training_days)}")
    lines.append(f"- Scheduled sessions: {scheduled_days}")
    return "\n".join(lines)


def print_month_calendar(year: int, month: int, training_dates: set[date]) -> None:
    """
    Print a month grid with training days highlighted.

    Args:
        year: Calendar year
        month: Month number
        training_dates: Dates that have a scheduled session
    """
    title = date(year, month, 1).strftime("%B %Y")
    table = Table(title=title, show_lines=False)
    for n in range(1, 8):
        table.add_column(WEEKDAY_NAMES[n][:2], justify="center", width=4)

    for week in build_month_grid(year, month):
        cells = []
        for d in week:
            if d is None:
                cells.append("")
            elif d in training_dates:
                cells.append(f"[bold green]{d.day}•[/bold green]")
            else:
                cells.append(f"[dim]{d.day}[/dim]")
        table.add_row(*cells)

    console.print(table)


def format_day_table(day: TrainingDay) -> Table:
    """
    Create a Rich table with one row per exercise of a training day.

    Returns:
        Rich Table object
    """
    table = Table(title=f"Training day {day.date.isoformat()} ({day.date.strftime('%a')})")
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Exercise", style="bold")
    table.add_column("Sets", justify="right")
    table.add_column("Entered", justify="right")
    table.add_column("Done", justify="right")
    table.add_column("ID", style="dim")

    for i, ex in enumerate(day.exercises, 1):
        entered = len(ex.sets) - count_empty_sets(ex.sets)
        done = count_completed_sets(ex.sets)
        table.add_row(
            str(i),
            ex.name,
            str(len(ex.sets)),
            f"{entered}/{len(ex.sets)}",
            f"{done}/{len(ex.sets)}",
            ex.id,
        )
    return table


def format_exercise_table(exercise: Exercise) -> Table:
    """
    Create a Rich table with the sets of one exercise.

    Shows target reps/RPE, entries, per-set E1RM and, for anchored
    exercises, the suggested weight derived from set 1.

    Returns:
        Rich Table object
    """
    suggestions = suggested_weights(exercise)
    table = Table(title=exercise.name)
    table.add_column("Set", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("Target RPE", justify="right")
    table.add_column("Weight (kg)", justify="right", style="bold")
    table.add_column("RPE", justify="right")
    table.add_column("Done", justify="center")
    table.add_column("E1RM", justify="right", style="cyan")
    if exercise.is_anchored:
        table.add_column("Suggested", justify="right", style="green")

    for s in exercise.sets:
        e1 = estimated_one_rep_max(s.weight, s.reps, s.achieved_rpe)
        row = [
            str(s.set_index),
            str(s.reps),
            _fmt_rpe(s.target_rpe),
            _fmt_kg(s.weight),
            _fmt_rpe(s.achieved_rpe),
            "✓" if s.completed else "",
            f"{e1} kg" if e1 is not None else "-",
        ]
        if exercise.is_anchored:
            suggestion = suggestions.get(s.set_index)
            row.append(f"{suggestion:.1f} kg" if suggestion is not None else "")
        table.add_row(*row)
    return table


def format_anchor_note(exercise: Exercise) -> str | None:
    """Explain where suggestions come from for an anchored exercise."""
    if not exercise.is_anchored:
        return None
    anchor = anchor_estimate(exercise)
    if anchor is None:
        return "Enter set 1 weight to get suggestions for the following sets."
    return f"Suggestions anchored to set 1 E1RM of {anchor} kg."


def format_summary(d: date, summary: TrainingDaySummary) -> str:
    """
    Format a day summary as text block.

    Returns:
        Formatted string
    """
    return "\n".join(
        [
            f"Summary {d.isoformat()}",
            f"- Sets: {summary.total_sets}",
            f"- Reps: {summary.total_reps}",
            f"- Weight moved: {summary.total_weight_moved_kg:.1f} kg",
        ]
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} [y/N]: ")
    return response.lower() in ("y", "yes")
