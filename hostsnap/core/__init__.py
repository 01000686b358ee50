"""Core functionality for hostsnap."""

from .collector import collect_system_info, try_get_distribution
from .models import CPU_COUNT_FALLBACK, Distribution, SystemInfo
from .provider import FactUnavailableError, MemInfo, OSFactsProvider

__all__ = [
    "CPU_COUNT_FALLBACK",
    "Distribution",
    "FactUnavailableError",
    "MemInfo",
    "OSFactsProvider",
    "SystemInfo",
    "collect_system_info",
    "try_get_distribution",
]
