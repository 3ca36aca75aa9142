"""Core planning engine: calendar, templates, schedule store, progression."""
