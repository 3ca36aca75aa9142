"""Plan commands: plans, activate, status, reset."""

import json
from datetime import date
from typing import Annotated, Optional

import typer

from ...core.models import parse_weekdays
from ...io.serializers import active_plan_to_dict
from .. import views
from ..app import JsonOption, StatePathOption, TemplatesOption, app, open_tracker, parse_date_arg


@app.command()
def plans(
    state_path: StatePathOption = None,
    json_out: JsonOption = False,
) -> None:
    """List the available training plans."""
    _, tracker = open_tracker(state_path)

    if json_out:
        print(json.dumps([
            {
                "id": p.id,
                "name": p.name,
                "weeks": p.weeks,
                "days_per_week": p.days_per_week,
            }
            for p in tracker.plans
        ], indent=2))
        return

    views.console.print(views.format_plans_table(tracker.plans, tracker.active_plan))


@app.command()
def activate(
    plan_id: Annotated[str, typer.Argument(help="Plan ID (see 'plans')")],
    days: Annotated[
        str,
        typer.Option("--days", "-d", help="Training weekdays, e.g. mon,wed,fri or 1,3,5"),
    ],
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", help="Start date (YYYY-MM-DD, default: today)"),
    ] = None,
    state_path: StatePathOption = None,
    templates: TemplatesOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Replace an active plan without asking"),
    ] = False,
) -> None:
    """
    Activate a plan and generate its training calendar.

    The number of weekdays must match the plan's days per week.
    Re-activating discards all previously scheduled days and entries.

      lift-scheduler activate powerbuilding-3 --start 2026-03-02 --days mon,wed,fri
    """
    store, tracker = open_tracker(state_path, templates)

    plan = tracker.plan_by_id(plan_id)
    if plan is None:
        views.print_error(f"Unknown plan '{plan_id}'. Run 'plans' to list IDs.")
        raise typer.Exit(1)

    try:
        weekdays = parse_weekdays(days)
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if len(weekdays) != plan.days_per_week:
        views.print_error(
            f"{plan.name} needs exactly {plan.days_per_week} training days, "
            f"got {len(weekdays)}"
        )
        raise typer.Exit(1)

    start_date = parse_date_arg(start) if start is not None else date.today()

    if tracker.active_plan is not None and not force:
        if not views.confirm_action("Replace the active plan and discard its entries?"):
            views.print_info("Cancelled.")
            return

    tracker.activate(plan.id, start_date, weekdays)
    store.save_tracker(tracker)

    views.print_success(
        f"Activated {plan.name}: {len(tracker.training_days())} sessions "
        f"starting {start_date.isoformat()}"
    )


@app.command()
def status(
    state_path: StatePathOption = None,
    json_out: JsonOption = False,
) -> None:
    """Show the active plan."""
    _, tracker = open_tracker(state_path)
    active = tracker.active_plan

    if json_out:
        print(json.dumps(
            {
                "active_plan": active_plan_to_dict(active) if active is not None else None,
                "scheduled_days": len(tracker.training_days()),
            },
            indent=2,
        ))
        return

    if active is None:
        views.print_info("No active plan. Run 'plans' and 'activate' to start one.")
        return

    plan = tracker.plan_by_id(active.plan_id)
    views.console.print(
        views.format_active_plan(plan, active, len(tracker.training_days()))
    )


@app.command()
def reset(
    state_path: StatePathOption = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Do not ask for confirmation"),
    ] = False,
) -> None:
    """Clear the active plan and discard its schedule."""
    store, tracker = open_tracker(state_path)

    if tracker.active_plan is None:
        views.print_info("No active plan.")
        return

    if not yes and not views.confirm_action("Reset the active plan and discard all entries?"):
        views.print_info("Cancelled.")
        return

    tracker.clear_active_plan()
    store.save_tracker(tracker)
    views.print_success("Active plan cleared.")
