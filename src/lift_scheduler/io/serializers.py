"""
JSON serialization for tracker data models.

Handles conversion between dataclasses and JSON-compatible dicts.
"""

import re
from datetime import date, datetime
from typing import Any

from ..core.config import DEFAULT_REST_SECONDS
from ..core.models import (
    WEIGHT_MODES,
    ActivePlan,
    Exercise,
    ExerciseSet,
    Options,
    TrainingDay,
)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def parse_date(date_str: str) -> date:
    """
    Parse an ISO date string.

    Args:
        date_str: Date in YYYY-MM-DD form

    Returns:
        The parsed date

    Raises:
        ValidationError: If the format or the date is invalid
    """
    if not isinstance(date_str, str) or not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        raise ValidationError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")

    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(f"Invalid date: {date_str}") from e


def _optional_float(value: Any, name: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be a number or null, got {value!r}") from e


def exercise_set_to_dict(s: ExerciseSet) -> dict[str, Any]:
    return {
        "set_index": s.set_index,
        "reps": s.reps,
        "target_rpe": s.target_rpe,
        "weight": s.weight,
        "achieved_rpe": s.achieved_rpe,
        "completed": s.completed,
    }


def dict_to_exercise_set(data: dict[str, Any]) -> ExerciseSet:
    """
    Convert dict to ExerciseSet.

    Raises:
        ValidationError: If data is invalid
    """
    try:
        return ExerciseSet(
            set_index=int(data["set_index"]),
            reps=int(data["reps"]),
            target_rpe=_optional_float(data.get("target_rpe"), "target_rpe"),
            weight=_optional_float(data.get("weight"), "weight"),
            achieved_rpe=_optional_float(data.get("achieved_rpe"), "achieved_rpe"),
            completed=bool(data.get("completed", False)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid set record {data!r}: {e}") from e


def exercise_to_dict(ex: Exercise) -> dict[str, Any]:
    return {
        "id": ex.id,
        "name": ex.name,
        "weight_mode": ex.weight_mode,
        "sets": [exercise_set_to_dict(s) for s in ex.sets],
    }


def dict_to_exercise(data: dict[str, Any]) -> Exercise:
    """
    Convert dict to Exercise.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Exercise record must be an object, got {data!r}")
    if not isinstance(data.get("sets", []), list):
        raise ValidationError(f"Exercise record {data.get('name')!r}: 'sets' must be a list")
    weight_mode = data.get("weight_mode", "manual")
    if weight_mode not in WEIGHT_MODES:
        raise ValidationError(f"Invalid weight_mode: {weight_mode}. Must be one of {WEIGHT_MODES}")
    try:
        return Exercise(
            id=str(data["id"]),
            name=str(data["name"]),
            weight_mode=weight_mode,
            sets=[dict_to_exercise_set(s) for s in data.get("sets", [])],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid exercise record: {e}") from e


def training_day_to_dict(day: TrainingDay) -> dict[str, Any]:
    return {
        "date": day.date.isoformat(),
        "exercises": [exercise_to_dict(ex) for ex in day.exercises],
    }


def dict_to_training_day(data: dict[str, Any]) -> TrainingDay:
    """
    Convert dict to TrainingDay.

    Raises:
        ValidationError: If data is invalid
    """
    if "date" not in data:
        raise ValidationError("Training day record has no date")
    if not isinstance(data.get("exercises", []), list):
        raise ValidationError(f"Training day {data['date']!r}: 'exercises' must be a list")
    return TrainingDay(
        date=parse_date(data["date"]),
        exercises=[dict_to_exercise(ex) for ex in data.get("exercises", [])],
    )


def active_plan_to_dict(active: ActivePlan) -> dict[str, Any]:
    return {
        "plan_id": active.plan_id,
        "start_date": active.start_date.isoformat(),
        "training_days": sorted(active.training_days),
    }


def dict_to_active_plan(data: dict[str, Any]) -> ActivePlan:
    """
    Convert dict to ActivePlan.

    Raises:
        ValidationError: If data is invalid
    """
    try:
        return ActivePlan(
            plan_id=str(data["plan_id"]),
            start_date=parse_date(data["start_date"]),
            training_days=frozenset(int(d) for d in data["training_days"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid active plan record: {e}") from e


def options_to_dict(options: Options) -> dict[str, Any]:
    return {"rest_seconds": options.rest_seconds}


def dict_to_options(data: dict[str, Any]) -> Options:
    """
    Convert dict to Options, defaulting missing keys.

    Raises:
        ValidationError: If data is invalid
    """
    try:
        return Options(rest_seconds=int(data.get("rest_seconds", DEFAULT_REST_SECONDS)))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid options record: {e}") from e
