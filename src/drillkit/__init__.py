"""drillkit — small programming drills with a Click front end."""

__version__ = "0.1.0"
