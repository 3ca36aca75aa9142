"""lift-scheduler: strength-training plan scheduling and progression."""

__version__ = "0.1.0"
