"""
Pure aggregate computations over training days.

All functions are pure and typed for testability.
"""

from typing import Iterable

from .models import ExerciseSet, TrainingDay, TrainingDaySummary


def compute_day_summary(day: TrainingDay) -> TrainingDaySummary:
    """
    Reduce a training day to its totals.

    total_sets            = number of sets
    total_reps            = sum of target reps
    total_weight_moved_kg = sum(weight * reps), unset weight counting as 0

    Args:
        day: Training day to summarise

    Returns:
        TrainingDaySummary (no rounding applied)
    """
    total_sets = 0
    total_reps = 0
    total_weight = 0.0
    for s in day.iter_sets():
        total_sets += 1
        total_reps += s.reps
        total_weight += (s.weight or 0.0) * s.reps
    return TrainingDaySummary(
        total_sets=total_sets,
        total_reps=total_reps,
        total_weight_moved_kg=total_weight,
    )


def count_empty_sets(sets: Iterable[ExerciseSet]) -> int:
    """Number of sets with neither weight nor achieved RPE entered."""
    return sum(1 for s in sets if s.is_empty)


def count_completed_sets(sets: Iterable[ExerciseSet]) -> int:
    """Number of sets marked completed."""
    return sum(1 for s in sets if s.completed)
