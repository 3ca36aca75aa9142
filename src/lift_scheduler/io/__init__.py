"""Serialization and on-disk state."""
