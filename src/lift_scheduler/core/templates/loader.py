"""
YAML → day-template loader.

Loads a template catalog that replaces the built-in rotations.  The file
maps a weekly frequency to a rotation of days, each day a list of
exercises:

    rotations:
      3:
        - - name: Bench Press
            weight_mode: anchor_e1rm_from_set1
            sets: 3
            reps: 5
            target_rpe: 7.5
          - name: Squat
            sets:
              - {reps: 5, target_rpe: 7.5}
              - {reps: 5, target_rpe: 8}
    default:
      - - name: Bench Press
          sets: 3
          reps: 5

``sets`` is either a count (with shared ``reps`` / ``target_rpe``) or an
explicit list of sets.  Frequencies missing from the file fall back to
``default`` and then to the built-in table.

User catalog: ``~/.lift-scheduler/templates.yaml`` (or
``$LIFT_SCHEDULER_HOME/templates.yaml``).
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any

import yaml

from ..config import TEMPLATES_FILENAME, get_data_dir
from ..models import WEIGHT_MODES, Exercise, ExerciseSet
from .base import DayTemplate, TemplateProvider, uniform_sets
from .defaults import DefaultTemplateProvider

_REQUIRED_EXERCISE_FIELDS: frozenset[str] = frozenset({"name", "sets"})


def _set_from_dict(d: Any, set_index: int) -> ExerciseSet:
    if not isinstance(d, dict) or "reps" not in d:
        raise ValueError(f"set {set_index} must be a mapping with 'reps'")
    rpe = d.get("target_rpe")
    return ExerciseSet(
        set_index=set_index,
        reps=int(d["reps"]),
        target_rpe=float(rpe) if rpe is not None else None,
    )


def exercise_from_dict(d: dict) -> Exercise:
    """Convert a raw dict (from YAML) to an Exercise skeleton.

    Raises ValueError if any required field is absent or malformed.
    """
    if not isinstance(d, dict):
        raise ValueError(f"exercise entry must be a mapping, got {type(d).__name__}")
    missing = _REQUIRED_EXERCISE_FIELDS - set(d)
    if missing:
        raise ValueError(f"exercise missing fields: {sorted(missing)}")

    weight_mode = str(d.get("weight_mode", "manual"))
    if weight_mode not in WEIGHT_MODES:
        raise ValueError(f"invalid weight_mode {weight_mode!r} for {d['name']!r}")

    raw_sets = d["sets"]
    if isinstance(raw_sets, int):
        if "reps" not in d:
            raise ValueError(f"exercise {d['name']!r} gives a set count without 'reps'")
        rpe = d.get("target_rpe")
        sets = uniform_sets(
            int(d["reps"]),
            float(rpe) if rpe is not None else None,
            count=raw_sets,
        )
    elif isinstance(raw_sets, list):
        sets = [_set_from_dict(s, i + 1) for i, s in enumerate(raw_sets)]
    else:
        raise ValueError(f"exercise {d['name']!r}: 'sets' must be a count or a list")

    if not sets:
        raise ValueError(f"exercise {d['name']!r} has no sets")

    return Exercise(name=str(d["name"]), sets=sets, weight_mode=weight_mode)  # type: ignore[arg-type]


def _rotation_from_list(raw: Any, label: str) -> list[list[dict]]:
    """Validate a rotation's shape (list of days, each a list of exercises)."""
    if not isinstance(raw, list) or not raw:
        raise ValueError(f"rotation {label} must be a non-empty list of days")
    for i, day in enumerate(raw, 1):
        if not isinstance(day, list) or not day:
            raise ValueError(f"rotation {label}, day {i} must be a non-empty list of exercises")
        for entry in day:
            exercise_from_dict(entry)
    return raw


def load_template_catalog(path: Path) -> dict[str, Any]:
    """
    Load and validate a template catalog file.

    Returns:
        Dict with ``rotations`` ({days_per_week: raw rotation}) and
        ``default`` (raw rotation or None)

    Raises:
        ValueError: If the file cannot be parsed or has an invalid shape
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"cannot read template catalog {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"template catalog {path} must be a mapping")

    rotations: dict[int, list[list[dict]]] = {}
    for key, raw in (data.get("rotations") or {}).items():
        try:
            days = int(key)
        except (TypeError, ValueError) as e:
            raise ValueError(f"rotation key {key!r} is not a number of days") from e
        rotations[days] = _rotation_from_list(raw, str(days))

    default = data.get("default")
    if default is not None:
        default = _rotation_from_list(default, "default")

    if not rotations and default is None:
        raise ValueError(f"template catalog {path} defines no rotations")

    return {"rotations": rotations, "default": default}


class YamlTemplateProvider:
    """TemplateProvider backed by a YAML catalog, with built-in fallback."""

    def __init__(self, path: str | Path, fallback: TemplateProvider | None = None):
        self.path = Path(path)
        self.fallback = fallback or DefaultTemplateProvider()
        catalog = load_template_catalog(self.path)
        self._rotations: dict[int, list[list[dict]]] = catalog["rotations"]
        self._default: list[list[dict]] | None = catalog["default"]

    def day_templates(self, days_per_week: int) -> list[DayTemplate]:
        raw = self._rotations.get(days_per_week, self._default)
        if raw is None:
            return self.fallback.day_templates(days_per_week)
        return [[exercise_from_dict(entry) for entry in day] for day in raw]


def get_user_templates_path() -> Path | None:
    """Return the user template catalog if it exists, else None."""
    p = get_data_dir() / TEMPLATES_FILENAME
    return p if p.exists() else None


def load_template_provider(path: str | Path | None = None) -> TemplateProvider:
    """
    Return the template provider to use.

    An explicit ``path`` must load cleanly (ValueError otherwise).  Without
    one, the user catalog is used when present; if it is invalid a warning
    is issued and the built-in table is used instead.
    """
    if path is not None:
        return YamlTemplateProvider(path)

    user = get_user_templates_path()
    if user is None:
        return DefaultTemplateProvider()
    try:
        return YamlTemplateProvider(user)
    except ValueError as exc:
        warnings.warn(
            f"lift-scheduler: ignoring template catalog {user} ({exc}); "
            "using built-in templates.",
            stacklevel=2,
        )
        return DefaultTemplateProvider()
