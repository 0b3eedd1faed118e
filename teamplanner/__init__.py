"""teamplanner - scheduling helpers for student and team event planning."""

__version__ = "0.1.0"
