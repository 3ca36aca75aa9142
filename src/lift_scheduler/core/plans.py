"""
Plan catalog and the active-plan slot.

The catalog is a fixed in-memory list.  At most one plan is active at a
time; activating replaces it and clearing empties the slot.
"""

from datetime import date
from typing import Iterable, Protocol

from .models import ActivePlan, Plan

PLAN_CATALOG: tuple[Plan, ...] = (
    Plan(id="powerbuilding-3", name="Powerbuilding 3-Day", weeks=8, days_per_week=3),
    Plan(id="hypertrophy-4", name="Hypertrophy 4-Day", weeks=10, days_per_week=4),
    Plan(id="strength-5", name="Strength 5-Day", weeks=12, days_per_week=5),
)


class PlanRepository(Protocol):
    """Plan catalog plus the singleton active-plan slot."""

    @property
    def plans(self) -> list[Plan]: ...

    @property
    def active_plan(self) -> ActivePlan | None: ...

    def get_plan(self, plan_id: str) -> Plan | None: ...

    def activate_plan(self, plan_id: str, start_date: date, days: Iterable[int]) -> None: ...

    def restore_active_plan(self, active: ActivePlan | None) -> None: ...

    def clear_active_plan(self) -> None: ...


class InMemoryPlanRepository:
    """PlanRepository holding everything in memory."""

    def __init__(self, plans: Iterable[Plan] = PLAN_CATALOG):
        self._plans = list(plans)
        ids = [p.id for p in self._plans]
        if len(ids) != len(set(ids)):
            raise ValueError("Plan ids must be unique")
        self._active: ActivePlan | None = None

    @property
    def plans(self) -> list[Plan]:
        return list(self._plans)

    @property
    def active_plan(self) -> ActivePlan | None:
        return self._active

    def get_plan(self, plan_id: str) -> Plan | None:
        for plan in self._plans:
            if plan.id == plan_id:
                return plan
        return None

    def activate_plan(self, plan_id: str, start_date: date, days: Iterable[int]) -> None:
        """Store the active plan.  The plan id is not checked against the catalog."""
        self._active = ActivePlan(plan_id, start_date, frozenset(days))

    def restore_active_plan(self, active: ActivePlan | None) -> None:
        """Put a previously saved active plan back in the slot."""
        self._active = active

    def clear_active_plan(self) -> None:
        self._active = None
