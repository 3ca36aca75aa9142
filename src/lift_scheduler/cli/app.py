"""Shared Typer app object, shared option types, and store utilities."""

from datetime import date
from pathlib import Path
from typing import Annotated, Optional

import typer

from ..core.models import Exercise, TrainingDay
from ..core.templates import load_template_provider
from ..core.tracker import Tracker
from ..io.serializers import ValidationError, parse_date
from ..io.state_store import StateStore, get_default_state_path
from . import views

# Shared options used across commands
StatePathOption = Annotated[
    Optional[Path],
    typer.Option("--state-path", "-p", help="Path to the JSON state file"),
]
TemplatesOption = Annotated[
    Optional[Path],
    typer.Option("--templates", help="YAML template catalog replacing the built-in rotations"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="lift-scheduler",
    help="Strength-training planner: schedule a multi-week plan and log your sets.",
    no_args_is_help=False,
    invoke_without_command=True,
)


def get_store(state_path: Path | None) -> StateStore:
    """Get state store from path or default location."""
    if state_path is None:
        state_path = get_default_state_path()
    return StateStore(state_path)


def open_tracker(
    state_path: Path | None,
    templates_path: Path | None = None,
) -> tuple[StateStore, Tracker]:
    """Load the tracker; print the error and exit 1 when state or templates are invalid."""
    store = get_store(state_path)
    try:
        provider = load_template_provider(templates_path)
        tracker = store.load_tracker(provider)
    except (ValidationError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)
    return store, tracker


def parse_date_arg(raw: str) -> date:
    """Parse 'today' or YYYY-MM-DD; exit 1 on bad input."""
    if raw.strip().lower() == "today":
        return date.today()
    try:
        return parse_date(raw.strip())
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def require_day(tracker: Tracker, d: date) -> TrainingDay:
    """Return the scheduled day or exit 1."""
    day = tracker.training_day(d)
    if day is None:
        views.print_error(f"No training scheduled on {d.isoformat()}")
        raise typer.Exit(1)
    return day


def resolve_exercise(day: TrainingDay, ref: str) -> Exercise | None:
    """
    Find an exercise on a day by 1-based position, id, or name.

    Names are matched case-insensitively.
    """
    ref = ref.strip()
    if ref.isdigit() and 1 <= int(ref) <= len(day.exercises):
        return day.exercises[int(ref) - 1]
    by_id = day.find_exercise(ref)
    if by_id is not None:
        return by_id
    for ex in day.exercises:
        if ex.name.lower() == ref.lower():
            return ex
    return None


def require_exercise(day: TrainingDay, ref: str) -> Exercise:
    """Return the referenced exercise or exit 1."""
    exercise = resolve_exercise(day, ref)
    if exercise is None:
        views.print_error(f"No exercise {ref!r} on {day.date.isoformat()}")
        raise typer.Exit(1)
    return exercise
