"""
Base types for session templates.

A day template is an ordered list of Exercise skeletons: sets carry their
target reps and target RPE while weight, achieved RPE and completion are
unset.  A TemplateProvider supplies the rotation of day templates for a
given weekly frequency, so the built-in table can be swapped for a
richer catalog without touching the schedule or progression code.
"""

from typing import Protocol

from ..config import SETS_PER_TEMPLATE_EXERCISE
from ..models import Exercise, ExerciseSet

DayTemplate = list[Exercise]


class TemplateProvider(Protocol):
    """Source of day-template rotations keyed by training days per week."""

    def day_templates(self, days_per_week: int) -> list[DayTemplate]:
        """Return a fresh rotation of day templates (never shared instances)."""
        ...


def uniform_sets(
    reps: int,
    target_rpe: float | None,
    count: int = SETS_PER_TEMPLATE_EXERCISE,
) -> list[ExerciseSet]:
    """Build ``count`` identical unentered sets numbered from 1."""
    return [
        ExerciseSet(set_index=i + 1, reps=reps, target_rpe=target_rpe)
        for i in range(count)
    ]
