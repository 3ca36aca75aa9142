"""
Data models for lift-scheduler.

All core dataclasses representing plans, scheduled training days,
exercises and sets.  Entry values (performed weight, achieved effort)
are not range-checked here; only structural fields are.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Iterable, Literal
from uuid import uuid4

from .config import DEFAULT_REST_SECONDS

WeightMode = Literal["manual", "anchor_e1rm_from_set1"]
WEIGHT_MODES: tuple[str, ...] = ("manual", "anchor_e1rm_from_set1")

# ISO weekday numbering, same as date.isoweekday()
WEEKDAY_NAMES: dict[int, str] = {
    1: "MON",
    2: "TUE",
    3: "WED",
    4: "THU",
    5: "FRI",
    6: "SAT",
    7: "SUN",
}

_FULL_WEEKDAY_NAMES: tuple[str, ...] = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)

_WEEKDAY_LOOKUP: dict[str, int] = {
    **{name.lower(): n for n, name in WEEKDAY_NAMES.items()},
    **{name: i + 1 for i, name in enumerate(_FULL_WEEKDAY_NAMES)},
}


def parse_weekdays(text: str) -> frozenset[int]:
    """
    Parse a comma separated weekday list into ISO weekday numbers.

    Accepts numbers ("1,3,5"), short names ("mon,wed,fri") and full
    names ("Monday, Friday"), case-insensitive.

    Raises:
        ValueError: If a token is not a weekday
    """
    result: set[int] = set()
    for raw in text.split(","):
        token = raw.strip().lower()
        if not token:
            continue
        if token.isdigit():
            value = int(token)
            if value not in WEEKDAY_NAMES:
                raise ValueError(f"Weekday number must be 1-7, got {value}")
            result.add(value)
            continue
        number = _WEEKDAY_LOOKUP.get(token)
        if number is None:
            raise ValueError(f"Unknown weekday: {raw.strip()!r}")
        result.add(number)
    return frozenset(result)


def format_weekdays(days: Iterable[int]) -> str:
    """Format weekday numbers as 'MON, WED, FRI' in week order."""
    return ", ".join(WEEKDAY_NAMES[d] for d in sorted(days))


@dataclass(frozen=True)
class Plan:
    """A catalog entry: a multi-week plan with a fixed weekly frequency."""

    id: str
    name: str
    weeks: int
    days_per_week: int

    def __post_init__(self) -> None:
        """Validate plan data."""
        if not self.id:
            raise ValueError("Plan id must be non-empty")
        if self.weeks <= 0:
            raise ValueError("weeks must be positive")
        if not 1 <= self.days_per_week <= 7:
            raise ValueError("days_per_week must be between 1 and 7")


@dataclass(frozen=True)
class ActivePlan:
    """
    The currently activated plan.

    ``training_days`` holds ISO weekday numbers (Monday=1 .. Sunday=7).
    An empty set is allowed and yields an empty schedule.
    """

    plan_id: str
    start_date: date
    training_days: frozenset[int]

    def __post_init__(self) -> None:
        """Validate and normalise the weekday set."""
        days = frozenset(self.training_days)
        invalid = sorted(d for d in days if d not in WEEKDAY_NAMES)
        if invalid:
            raise ValueError(f"Invalid ISO weekday numbers: {invalid}")
        object.__setattr__(self, "training_days", days)


@dataclass
class ExerciseSet:
    """
    A single set within an exercise.

    ``reps`` and ``target_rpe`` come from the template and are fixed;
    ``weight``, ``achieved_rpe`` and ``completed`` are entered by the user.
    """

    set_index: int  # 1-based, identity key for edits
    reps: int
    target_rpe: float | None = None
    weight: float | None = None
    achieved_rpe: float | None = None
    completed: bool = False

    def __post_init__(self) -> None:
        """Validate set structure."""
        if self.set_index < 1:
            raise ValueError("set_index must be >= 1")
        if self.reps < 1:
            raise ValueError("reps must be positive")

    @property
    def is_empty(self) -> bool:
        """True when neither weight nor achieved effort has been entered."""
        return self.weight is None and self.achieved_rpe is None

    def copy(self) -> "ExerciseSet":
        """Return an independent copy of this set."""
        return replace(self)


@dataclass
class Exercise:
    """An exercise on a training day with its ordered sets."""

    name: str
    sets: list[ExerciseSet] = field(default_factory=list)
    weight_mode: WeightMode = "manual"
    id: str = field(default_factory=lambda: uuid4().hex)

    def __post_init__(self) -> None:
        """Validate exercise data."""
        if self.weight_mode not in WEIGHT_MODES:
            raise ValueError(f"Invalid weight_mode: {self.weight_mode}")
        indices = [s.set_index for s in self.sets]
        if len(indices) != len(set(indices)):
            raise ValueError(f"Duplicate set_index in exercise {self.name!r}")

    @property
    def is_anchored(self) -> bool:
        """True when later sets derive their weight from set 1's E1RM."""
        return self.weight_mode == "anchor_e1rm_from_set1"

    def find_set(self, set_index: int) -> ExerciseSet | None:
        """Return the set with the given index, or None."""
        for s in self.sets:
            if s.set_index == set_index:
                return s
        return None

    def copy(self) -> "Exercise":
        """Return a deep copy; the sets are fresh instances."""
        return replace(self, sets=[s.copy() for s in self.sets])


@dataclass
class TrainingDay:
    """One scheduled calendar date and the exercises planned for it."""

    date: date
    exercises: list[Exercise] = field(default_factory=list)

    def find_exercise(self, exercise_id: str) -> Exercise | None:
        """Return the exercise with the given id, or None."""
        for ex in self.exercises:
            if ex.id == exercise_id:
                return ex
        return None

    def iter_sets(self):
        """Yield every set of every exercise in order."""
        for ex in self.exercises:
            yield from ex.sets


@dataclass(frozen=True)
class TrainingDaySummary:
    """Totals for one training day.  Derived on demand, never stored."""

    total_sets: int
    total_reps: int
    total_weight_moved_kg: float


@dataclass
class Options:
    """User options (currently the rest timer between sets)."""

    rest_seconds: int = DEFAULT_REST_SECONDS

    def __post_init__(self) -> None:
        """Validate option values."""
        if self.rest_seconds <= 0:
            raise ValueError("rest_seconds must be positive")
