"""
Built-in day-template rotations.

A closed lookup table: 3 and 4 training days per week have their own
rotation, every other frequency uses a single full-body fallback day.
The first exercise of each rotation is anchored to its set-1 E1RM.
"""

from ..models import Exercise
from .base import DayTemplate, uniform_sets


def default_day_templates(days_per_week: int) -> list[DayTemplate]:
    """
    Return the built-in rotation for the given weekly frequency.

    Args:
        days_per_week: Training days per week

    Returns:
        List of day templates; each call builds new Exercise objects
    """
    if days_per_week == 3:
        return [
            [
                Exercise("Bench Press", uniform_sets(5, 7.5), weight_mode="anchor_e1rm_from_set1"),
                Exercise("DB Bench Press", uniform_sets(10, 8.0)),
                Exercise("Squat", uniform_sets(5, 7.5)),
            ],
            [
                Exercise("OHP", uniform_sets(8, 8.0)),
                Exercise("Pull-Ups", uniform_sets(8, 8.0)),
                Exercise("Leg Curl", uniform_sets(12, 8.0)),
            ],
            [
                Exercise("Deadlift", uniform_sets(5, 7.5)),
                Exercise("Row", uniform_sets(10, 8.0)),
                Exercise("Leg Press", uniform_sets(12, 8.0)),
            ],
        ]
    if days_per_week == 4:
        return [
            [
                Exercise("Bench Press", uniform_sets(5, 7.5), weight_mode="anchor_e1rm_from_set1"),
                Exercise("Incline DB Press", uniform_sets(10, 8.0)),
            ],
            [
                Exercise("Squat", uniform_sets(5, 7.5)),
                Exercise("RDL", uniform_sets(8, 8.0)),
            ],
            [
                Exercise("OHP", uniform_sets(6, 8.0)),
                Exercise("Row", uniform_sets(10, 8.0)),
            ],
            [
                Exercise("Deadlift", uniform_sets(3, 8.0)),
                Exercise("Leg Press", uniform_sets(12, 8.0)),
            ],
        ]
    return [
        [
            Exercise("Bench Press", uniform_sets(5, 7.5), weight_mode="anchor_e1rm_from_set1"),
            Exercise("Squat", uniform_sets(5, 7.5)),
        ]
    ]


class DefaultTemplateProvider:
    """TemplateProvider backed by the built-in table."""

    def day_templates(self, days_per_week: int) -> list[DayTemplate]:
        return default_day_templates(days_per_week)
