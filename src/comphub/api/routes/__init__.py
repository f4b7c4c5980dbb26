"""API Routes"""

from . import activity, tasks

__all__ = ["activity", "tasks"]
