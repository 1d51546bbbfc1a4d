"""CLI command modules."""

from .data import reset, seed
from .log import history, log, today
from .profile import prefs, profile
from .serve import serve
from .stats import chart, distribution, stats

__all__ = [
    "log",
    "today",
    "history",
    "stats",
    "chart",
    "distribution",
    "profile",
    "prefs",
    "seed",
    "reset",
    "serve",
]
