"""
Load progression from effort-adjusted one-rep-max estimates.

The Epley formula is extended with reps in reserve: a set of ``reps`` at
RPE ``e`` counts as ``reps + (10 - e)`` reps to failure.

    E1RM      = w * (1 + (reps + rir) / 30)
    suggested = E1RM / (1 + (reps + rir) / 30)

E1RM values are rounded half-up to whole kilograms; suggested weights are
returned unrounded (display code rounds them).
"""

import math

from .config import EPLEY_DIVISOR, RPE_MAX
from .models import Exercise


def reps_in_reserve(rpe: float | None) -> float:
    """
    Convert an RPE value to reps in reserve.

    RIR = max(0, 10 - RPE).  An unset RPE counts as 10 (taken to failure).

    Args:
        rpe: Effort rating on the 1-10 scale, or None

    Returns:
        Reps in reserve (>= 0)
    """
    if rpe is None:
        return 0.0
    return max(0.0, RPE_MAX - rpe)


def _epley_factor(reps: int, rpe: float | None) -> float:
    return 1.0 + (reps + reps_in_reserve(rpe)) / EPLEY_DIVISOR


def estimated_one_rep_max(
    weight: float | None,
    reps: int,
    achieved_rpe: float | None = None,
) -> int | None:
    """
    Estimate 1RM from a performed set.

    Args:
        weight: Performed weight in kg, or None if not entered
        reps: Reps performed
        achieved_rpe: Effort reached on the set (None counts as RPE 10)

    Returns:
        Estimated 1RM in kg rounded half-up, or None without a weight
    """
    if weight is None:
        return None
    return math.floor(weight * _epley_factor(reps, achieved_rpe) + 0.5)


def suggested_weight(
    anchor_e1rm: float,
    reps: int,
    target_rpe: float | None = None,
) -> float:
    """
    Invert the E1RM formula to get a working weight.

    Args:
        anchor_e1rm: Reference one-rep max in kg
        reps: Target reps of the set
        target_rpe: Target effort of the set (None counts as RPE 10)

    Returns:
        Suggested weight in kg (unrounded)
    """
    return anchor_e1rm / _epley_factor(reps, target_rpe)


def anchor_estimate(exercise: Exercise) -> int | None:
    """
    Return the E1RM of set 1 for an anchored exercise.

    None when the exercise is not anchored, has no set 1, or set 1 has no
    weight entered yet.
    """
    if not exercise.is_anchored:
        return None
    first = exercise.find_set(1)
    if first is None:
        return None
    return estimated_one_rep_max(first.weight, first.reps, first.achieved_rpe)


def suggested_weights(exercise: Exercise) -> dict[int, float]:
    """
    Suggested weights for the later sets of an anchored exercise.

    Returns:
        {set_index: suggested kg} for every set after the first; empty
        when no anchor exists
    """
    anchor = anchor_estimate(exercise)
    if anchor is None:
        return {}
    return {
        s.set_index: suggested_weight(anchor, s.reps, s.target_rpe)
        for s in exercise.sets
        if s.set_index > 1
    }
