"""
Configuration constants for the strength-training planner.

All adjustable parameters are centralized here for easy tuning.
"""

import os
from pathlib import Path
from typing import Final

# =============================================================================
# EFFORT SCALE (RPE)
# =============================================================================

RPE_MIN: Final[float] = 1.0  # Lowest effort a user can report
RPE_MAX: Final[float] = 10.0  # Effort at failure: zero reps in reserve

# =============================================================================
# LOAD ESTIMATION (Epley)
# =============================================================================

EPLEY_DIVISOR: Final[float] = 30.0  # 1RM = w * (1 + reps / 30)

# =============================================================================
# SESSION TEMPLATES
# =============================================================================

SETS_PER_TEMPLATE_EXERCISE: Final[int] = 3  # Built-in templates are all 3 x N

# =============================================================================
# OPTIONS
# =============================================================================

DEFAULT_REST_SECONDS: Final[int] = 90
REST_SECONDS_MIN: Final[int] = 10
REST_SECONDS_MAX: Final[int] = 600

# =============================================================================
# FILE LOCATIONS
# =============================================================================

HOME_ENV_VAR: Final[str] = "LIFT_SCHEDULER_HOME"
STATE_FILENAME: Final[str] = "state.json"
TEMPLATES_FILENAME: Final[str] = "templates.yaml"


def get_data_dir() -> Path:
    """Return the data directory (``$LIFT_SCHEDULER_HOME`` or ~/.lift-scheduler)."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".lift-scheduler"


def clamp_rest_seconds(seconds: int) -> int:
    """Clamp a rest-timer value into [REST_SECONDS_MIN, REST_SECONDS_MAX]."""
    return max(REST_SECONDS_MIN, min(REST_SECONDS_MAX, int(seconds)))


def clamp_rpe(rpe: float) -> float:
    """Clamp an effort rating into the 1-10 scale (presentation-layer use)."""
    return max(RPE_MIN, min(RPE_MAX, float(rpe)))
