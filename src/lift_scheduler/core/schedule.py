"""
Schedule store: the materialised calendar of training days.

Owns every TrainingDay of the active plan and all set-level state.  This
is the only stateful component; it assumes a single writer and does no
locking.  Lookups of unscheduled dates, unknown exercises or unknown set
indices are silent no-ops.
"""

from datetime import date
from typing import Callable

from .dates import generate_training_dates
from .metrics import count_empty_sets
from .models import ActivePlan, Plan, TrainingDay
from .templates.base import TemplateProvider
from .templates.defaults import DefaultTemplateProvider

PlanLookup = Callable[[str], Plan | None]


class ScheduleStore:
    """
    Date-keyed store of training days.

    Days are kept in a dict keyed by date; listing sorts chronologically.
    """

    def __init__(self, template_provider: TemplateProvider | None = None):
        self.template_provider = template_provider or DefaultTemplateProvider()
        self._days: dict[date, TrainingDay] = {}

    # -- queries -------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._days)

    def __contains__(self, d: object) -> bool:
        return d in self._days

    def training_days(self) -> list[TrainingDay]:
        """All scheduled days in chronological order."""
        return [self._days[d] for d in sorted(self._days)]

    def get_day(self, d: date) -> TrainingDay | None:
        return self._days.get(d)

    def count_missing_entries(self, d: date) -> int:
        """
        Count sets on a day with neither weight nor achieved RPE.

        Returns 0 for an unscheduled date.
        """
        day = self._days.get(d)
        if day is None:
            return 0
        return count_empty_sets(day.iter_sets())

    # -- commands ------------------------------------------------------------

    def clear(self) -> None:
        """Discard every materialised day."""
        self._days.clear()

    def rebuild_schedule(self, active: ActivePlan | None, plan_lookup: PlanLookup) -> None:
        """
        Rebuild all days from the active plan.

        Clears existing days first.  With no active plan, an unknown plan
        id, or an empty template rotation the schedule stays empty.  The
        i-th training date gets template ``i % len(templates)``; exercises
        and sets are copied so no two days share mutable state.
        """
        self._days.clear()
        if active is None:
            return
        plan = plan_lookup(active.plan_id)
        if plan is None:
            return

        dates = generate_training_dates(active.start_date, plan.weeks, active.training_days)
        templates = self.template_provider.day_templates(plan.days_per_week)
        if not templates:
            return

        for idx, d in enumerate(dates):
            template = templates[idx % len(templates)]
            self._days[d] = TrainingDay(date=d, exercises=[ex.copy() for ex in template])

    def load_days(self, days: list[TrainingDay]) -> None:
        """Replace the schedule with previously saved days."""
        self._days = {day.date: day for day in days}

    def update_set(
        self,
        d: date,
        exercise_id: str,
        set_index: int,
        weight: float | None = None,
        achieved_rpe: float | None = None,
        completed: bool | None = None,
    ) -> bool:
        """
        Patch one set.  Only the fields given (not None) are overwritten.

        Returns:
            True if a matching set was found and patched, else False
        """
        day = self._days.get(d)
        if day is None:
            return False
        exercise = day.find_exercise(exercise_id)
        if exercise is None:
            return False
        target = exercise.find_set(set_index)
        if target is None:
            return False

        if weight is not None:
            target.weight = weight
        if achieved_rpe is not None:
            target.achieved_rpe = achieved_rpe
        if completed is not None:
            target.completed = completed
        return True

    def fill_missing_with_zeros(self, d: date) -> int:
        """
        Set weight and achieved RPE to 0 on every empty set of a day.

        The completed flag is left alone.

        Returns:
            Number of sets filled (0 for an unscheduled date)
        """
        day = self._days.get(d)
        if day is None:
            return 0
        filled = 0
        for s in day.iter_sets():
            if s.is_empty:
                s.weight = 0.0
                s.achieved_rpe = 0.0
                filled += 1
        return filled
