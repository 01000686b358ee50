"""Hostsnap - Best-effort snapshots of static host metadata."""

__version__ = "0.1.0"

from .core.collector import collect_system_info, try_get_distribution
from .core.models import Distribution, SystemInfo

__all__ = [
    "Distribution",
    "SystemInfo",
    "collect_system_info",
    "try_get_distribution",
]
