"""Session commands: calendar, day, exercise, log-set, finish, summary."""

import json
from dataclasses import asdict
from datetime import date
from typing import Annotated, Optional

import typer

from ...core.config import clamp_rpe
from ...core.progression import estimated_one_rep_max, suggested_weights
from ...io.serializers import exercise_to_dict, training_day_to_dict
from .. import views
from ..app import (
    JsonOption,
    StatePathOption,
    app,
    open_tracker,
    parse_date_arg,
    require_day,
    require_exercise,
)

DateArgument = Annotated[str, typer.Argument(help="Training date (YYYY-MM-DD or 'today')")]
ExerciseArgument = Annotated[
    str, typer.Argument(help="Exercise position on the day (1, 2, ...), ID, or name")
]


def _parse_month(raw: str | None) -> tuple[int, int]:
    if raw is None:
        today = date.today()
        return today.year, today.month
    try:
        year_s, month_s = raw.strip().split("-")
        year, month = int(year_s), int(month_s)
        if not 1 <= month <= 12:
            raise ValueError
    except ValueError:
        views.print_error(f"Invalid month: {raw}. Expected YYYY-MM")
        raise typer.Exit(1)
    return year, month


@app.command()
def calendar(
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="Month to show (YYYY-MM, default: current)"),
    ] = None,
    state_path: StatePathOption = None,
    json_out: JsonOption = False,
) -> None:
    """Show a month with the scheduled training days marked."""
    _, tracker = open_tracker(state_path)
    days = tracker.training_days()

    if json_out:
        print(json.dumps([d.date.isoformat() for d in days], indent=2))
        return

    if not days:
        views.print_info("Nothing scheduled. Activate a plan first.")
        return

    if month is None and tracker.active_plan is not None:
        # Default to the plan's first month when it has not started yet
        first = days[0].date
        year, month_num = (first.year, first.month) if first > date.today() else _parse_month(None)
    else:
        year, month_num = _parse_month(month)

    views.print_month_calendar(year, month_num, {d.date for d in days})


@app.command()
def day(
    when: DateArgument,
    state_path: StatePathOption = None,
    json_out: JsonOption = False,
) -> None:
    """Show the exercises of a training day."""
    _, tracker = open_tracker(state_path)
    d = parse_date_arg(when)
    training_day = require_day(tracker, d)
    missing = tracker.count_missing_entries(d)

    if json_out:
        data = training_day_to_dict(training_day)
        data["missing_entries"] = missing
        print(json.dumps(data, indent=2))
        return

    views.console.print(views.format_day_table(training_day))
    if missing > 0:
        views.print_warning(f"{missing} set(s) have no entries yet.")


@app.command()
def exercise(
    when: DateArgument,
    exercise_ref: ExerciseArgument,
    state_path: StatePathOption = None,
    json_out: JsonOption = False,
) -> None:
    """Show the sets of one exercise with E1RM and suggested weights."""
    _, tracker = open_tracker(state_path)
    d = parse_date_arg(when)
    ex = require_exercise(require_day(tracker, d), exercise_ref)

    if json_out:
        data = exercise_to_dict(ex)
        suggestions = suggested_weights(ex)
        for s in data["sets"]:
            s["e1rm"] = estimated_one_rep_max(s["weight"], s["reps"], s["achieved_rpe"])
            s["suggested_weight"] = suggestions.get(s["set_index"])
        print(json.dumps(data, indent=2))
        return

    views.console.print(views.format_exercise_table(ex))
    note = views.format_anchor_note(ex)
    if note:
        views.print_info(note)
    views.console.print(f"[dim]Rest between sets: {tracker.options.rest_seconds}s[/dim]")


@app.command("log-set")
def log_set(
    when: DateArgument,
    exercise_ref: ExerciseArgument,
    set_index: Annotated[int, typer.Argument(help="Set number (1-based)")],
    weight: Annotated[
        Optional[float],
        typer.Option("--weight", "-w", help="Performed weight in kg"),
    ] = None,
    rpe: Annotated[
        Optional[float],
        typer.Option("--rpe", "-r", help="Achieved RPE (1-10)"),
    ] = None,
    done: Annotated[
        Optional[bool],
        typer.Option("--done/--not-done", help="Mark the set completed or not"),
    ] = None,
    use_suggested: Annotated[
        bool,
        typer.Option("--suggested", help="Use the suggested weight (anchored exercises)"),
    ] = False,
    state_path: StatePathOption = None,
) -> None:
    """
    Enter weight, RPE and/or completion for one set.

    Only the given fields change; the rest of the set is kept.

      lift-scheduler log-set 2026-03-02 1 1 --weight 100 --rpe 8 --done
    """
    store, tracker = open_tracker(state_path)
    d = parse_date_arg(when)
    ex = require_exercise(require_day(tracker, d), exercise_ref)

    if ex.find_set(set_index) is None:
        views.print_error(f"{ex.name} has no set {set_index}")
        raise typer.Exit(1)

    if use_suggested and weight is None:
        weight = suggested_weights(ex).get(set_index)
        if weight is None:
            views.print_error("No suggestion available for this set")
            raise typer.Exit(1)
        weight = round(weight, 1)

    if weight is None and rpe is None and done is None:
        views.print_error("Nothing to update. Give --weight, --rpe or --done/--not-done.")
        raise typer.Exit(1)

    if rpe is not None:
        rpe = clamp_rpe(rpe)

    tracker.update_set(d, ex.id, set_index, weight=weight, achieved_rpe=rpe, completed=done)
    store.save_tracker(tracker)

    updated = ex.find_set(set_index)
    e1 = estimated_one_rep_max(updated.weight, updated.reps, updated.achieved_rpe)
    e1_str = f", E1RM {e1} kg" if e1 is not None else ""
    views.print_success(f"Updated {ex.name} set {set_index}{e1_str}")


def _print_summary(tracker, d: date, json_out: bool) -> None:
    summary = tracker.summary_for(d)
    if json_out:
        data = asdict(summary)
        data["date"] = d.isoformat()
        print(json.dumps(data, indent=2))
        return
    views.console.print(views.format_summary(d, summary))


@app.command()
def finish(
    when: DateArgument,
    fill_zeros: Annotated[
        Optional[bool],
        typer.Option("--fill-zeros/--keep-missing", help="Fill unentered sets with 0"),
    ] = None,
    state_path: StatePathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Finish a training day and show its summary.

    Sets with neither weight nor RPE entered can be filled with 0.
    """
    store, tracker = open_tracker(state_path)
    d = parse_date_arg(when)
    require_day(tracker, d)

    missing = tracker.count_missing_entries(d)
    if missing > 0:
        if fill_zeros is None:
            fill_zeros = views.confirm_action(
                f"There are {missing} sets with no entries. Fill missing values with 0?"
            )
        if fill_zeros:
            tracker.fill_missing_with_zeros(d)
            store.save_tracker(tracker)
            if not json_out:
                views.print_info(f"Filled {missing} set(s) with 0.")

    _print_summary(tracker, d, json_out)


@app.command()
def summary(
    when: DateArgument,
    state_path: StatePathOption = None,
    json_out: JsonOption = False,
) -> None:
    """Show totals (sets, reps, weight moved) for a training day."""
    _, tracker = open_tracker(state_path)
    d = parse_date_arg(when)
    require_day(tracker, d)
    _print_summary(tracker, d, json_out)
