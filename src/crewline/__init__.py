"""Crewline - access control and team management for construction projects."""

__version__ = "0.1.0"
