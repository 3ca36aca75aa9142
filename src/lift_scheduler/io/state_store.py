"""
JSON-based storage for tracker state.

A single state.json file holds the active plan, user options and every
materialised training day with its set entries.  Writes overwrite the
whole file; there are no durability guarantees beyond that.
"""

import json
from pathlib import Path

from ..core.config import STATE_FILENAME, get_data_dir
from ..core.models import Options
from ..core.plans import InMemoryPlanRepository
from ..core.schedule import ScheduleStore
from ..core.templates.base import TemplateProvider
from ..core.tracker import Tracker
from .serializers import (
    ValidationError,
    active_plan_to_dict,
    dict_to_active_plan,
    dict_to_options,
    dict_to_training_day,
    options_to_dict,
    training_day_to_dict,
)


class StateStore:
    """
    Manages tracker state stored as one JSON document.

    Layout:
        {"active_plan": {...} | null, "options": {...}, "days": [...]}
    """

    def __init__(self, state_path: str | Path):
        """
        Initialize the state store.

        Args:
            state_path: Path to the JSON state file
        """
        self.state_path = Path(state_path)

    def exists(self) -> bool:
        """Check if the state file exists."""
        return self.state_path.exists()

    def _read(self) -> dict:
        try:
            with open(self.state_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Error parsing {self.state_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError(f"{self.state_path} must contain a JSON object")
        return data

    def load_tracker(self, template_provider: TemplateProvider | None = None) -> Tracker:
        """
        Build a Tracker from the saved state.

        A missing state file yields a fresh tracker with no active plan.

        Raises:
            ValidationError: If the file exists but is malformed
        """
        repository = InMemoryPlanRepository()
        store = ScheduleStore(template_provider)
        if not self.exists():
            return Tracker(repository, store=store)

        data = self._read()

        raw_active = data.get("active_plan")
        if raw_active is not None and not isinstance(raw_active, dict):
            raise ValidationError(f"{self.state_path}: 'active_plan' must be an object or null")
        repository.restore_active_plan(
            dict_to_active_plan(raw_active) if raw_active is not None else None
        )

        raw_days = data.get("days", [])
        if not isinstance(raw_days, list):
            raise ValidationError(f"{self.state_path}: 'days' must be a list")
        for i, raw_day in enumerate(raw_days, 1):
            if not isinstance(raw_day, dict):
                raise ValidationError(f"{self.state_path}: day record {i} must be an object")
        store.load_days([dict_to_training_day(d) for d in raw_days])

        raw_options = data.get("options") or {}
        if not isinstance(raw_options, dict):
            raise ValidationError(f"{self.state_path}: 'options' must be an object")
        options = dict_to_options(raw_options)

        return Tracker(repository, store=store, options=options)

    def save_tracker(self, tracker: Tracker) -> None:
        """
        Write the tracker's state, creating parent directories if needed.

        Args:
            tracker: Tracker to persist
        """
        self.state_path.parent.mkdir(parents=True, exist_ok=True)
        active = tracker.active_plan
        data = {
            "active_plan": active_plan_to_dict(active) if active is not None else None,
            "options": options_to_dict(tracker.options),
            "days": [training_day_to_dict(day) for day in tracker.training_days()],
        }
        with open(self.state_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def get_default_state_path() -> Path:
    """
    Get the default state file path.

    Returns:
        ``$LIFT_SCHEDULER_HOME/state.json`` or ``~/.lift-scheduler/state.json``
    """
    return get_data_dir() / STATE_FILENAME

