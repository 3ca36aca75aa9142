"""
Tracker: the query/command surface used by the presentation layer.

Ties the plan repository (catalog + active-plan slot) to the schedule
store.  Active-plan lifecycle:

    NoPlan --activate--> Active --clear--> NoPlan
    Active --activate--> Active   (full rebuild, previous days discarded)
"""

from datetime import date
from typing import Iterable

from .config import clamp_rest_seconds
from .metrics import compute_day_summary
from .models import ActivePlan, Options, Plan, TrainingDay, TrainingDaySummary
from .plans import InMemoryPlanRepository, PlanRepository
from .schedule import ScheduleStore
from .templates.base import TemplateProvider


class Tracker:
    """Facade over the plan repository and the schedule store."""

    def __init__(
        self,
        repository: PlanRepository | None = None,
        template_provider: TemplateProvider | None = None,
        store: ScheduleStore | None = None,
        options: Options | None = None,
    ):
        self.repository = repository if repository is not None else InMemoryPlanRepository()
        self.store = store if store is not None else ScheduleStore(template_provider)
        self.options = options if options is not None else Options()

    # -- plans ---------------------------------------------------------------

    @property
    def plans(self) -> list[Plan]:
        return self.repository.plans

    @property
    def active_plan(self) -> ActivePlan | None:
        return self.repository.active_plan

    def plan_by_id(self, plan_id: str) -> Plan | None:
        return self.repository.get_plan(plan_id)

    def activate(self, plan_id: str, start_date: date, days: Iterable[int]) -> None:
        """Activate a plan and rebuild the schedule from scratch.

        An unknown plan id leaves the schedule empty.
        """
        self.repository.activate_plan(plan_id, start_date, days)
        self.store.rebuild_schedule(self.repository.active_plan, self.repository.get_plan)

    def clear_active_plan(self) -> None:
        self.repository.clear_active_plan()
        self.store.clear()

    # -- days ----------------------------------------------------------------

    def training_days(self) -> list[TrainingDay]:
        return self.store.training_days()

    def training_day(self, d: date) -> TrainingDay | None:
        return self.store.get_day(d)

    def update_set(
        self,
        d: date,
        exercise_id: str,
        set_index: int,
        weight: float | None = None,
        achieved_rpe: float | None = None,
        completed: bool | None = None,
    ) -> bool:
        return self.store.update_set(
            d,
            exercise_id,
            set_index,
            weight=weight,
            achieved_rpe=achieved_rpe,
            completed=completed,
        )

    def count_missing_entries(self, d: date) -> int:
        return self.store.count_missing_entries(d)

    def fill_missing_with_zeros(self, d: date) -> int:
        return self.store.fill_missing_with_zeros(d)

    def summary_for(self, d: date) -> TrainingDaySummary | None:
        """Summary of a scheduled day, or None for an unscheduled date."""
        day = self.store.get_day(d)
        if day is None:
            return None
        return compute_day_summary(day)

    # -- options -------------------------------------------------------------

    def set_rest_seconds(self, seconds: int) -> int:
        """Store the rest timer, clamped to the allowed range; return it."""
        self.options.rest_seconds = clamp_rest_seconds(seconds)
        return self.options.rest_seconds
