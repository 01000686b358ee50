"""Host metadata collection."""

import logging
import sys
from collections.abc import Callable
from typing import Any, Optional, TypeVar

from pydantic import ValidationError

from .models import CPU_COUNT_FALLBACK, Distribution, SystemInfo
from .provider import OSFactsProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Both totals come from one retrieval and are dropped together
MEMORY_FIELDS = ("memory_total", "swap_total")

DistributionProbe = Callable[[OSFactsProvider], Optional[Distribution]]


def _best_effort(field: str, getter: Callable[[], T]) -> Optional[T]:
    """Call getter, degrading any failure to None."""
    try:
        return getter()
    except Exception as e:
        logger.debug("%s unavailable: %s", field, e)
        return None


def _probe_linux_distribution(provider: OSFactsProvider) -> Optional[Distribution]:
    try:
        info = provider.linux_os_release()
        return Distribution.from_os_release(info)
    except Exception as e:
        logger.debug("Distribution unavailable: %s", e)
        return None


def _probe_no_distribution(provider: OSFactsProvider) -> Optional[Distribution]:
    return None


def select_distribution_probe(platform: str) -> DistributionProbe:
    """
    Select the distribution probe for a platform.

    Only Linux gets a probe that reads the os-release descriptor; every other
    platform gets a constant probe that never touches the provider.

    Args:
        platform: Platform identifier as reported by ``sys.platform``

    Returns:
        Callable mapping a provider to a Distribution or None
    """
    if platform.startswith("linux"):
        return _probe_linux_distribution
    return _probe_no_distribution


_probe_distribution = select_distribution_probe(sys.platform)


def try_get_distribution(
    provider: Optional[OSFactsProvider] = None,
) -> Optional[Distribution]:
    """
    Attempt to get the Linux distribution metadata.

    Succeeds only on Linux and if the os-release descriptor can be read and
    parsed; otherwise returns None. Partial distributions are never returned.

    Args:
        provider: OS facts provider (defaults to a fresh OSFactsProvider)

    Returns:
        Distribution or None
    """
    return _probe_distribution(provider or OSFactsProvider())


def _cpu_count(field: str, getter: Callable[[], int]) -> int:
    count = _best_effort(field, getter)
    return CPU_COUNT_FALLBACK if count is None else count


def collect_system_info(provider: Optional[OSFactsProvider] = None) -> SystemInfo:
    """
    Collect a fresh snapshot of host metadata.

    Never raises: every field that cannot be retrieved is left absent, and
    the CPU counts fall back to ``CPU_COUNT_FALLBACK``.

    Args:
        provider: OS facts provider (defaults to a fresh OSFactsProvider)

    Returns:
        SystemInfo snapshot
    """
    provider = provider or OSFactsProvider()

    mem_info = _best_effort("Memory info", provider.mem_info)
    fields = {
        "os_type": _best_effort("OS type", provider.os_type),
        "os_release": _best_effort("OS release", provider.os_release),
        "distribution": try_get_distribution(provider),
        "memory_total": mem_info.total if mem_info is not None else None,
        "swap_total": mem_info.swap_total if mem_info is not None else None,
        "hostname": _best_effort("Hostname", provider.hostname),
        "cpu_count": _cpu_count("CPU count", provider.cpu_count),
        "cpu_online_count": _cpu_count(
            "Online CPU count", provider.cpu_online_count
        ),
        "cpu_speed": _best_effort("CPU speed", provider.cpu_speed),
    }
    info = _build_snapshot(fields)
    logger.debug("Collected system info for %s", info.hostname or "unknown host")
    return info


def _build_snapshot(fields: dict[str, Any]) -> SystemInfo:
    """Validate fields, resetting any value the schema rejects to its default."""
    try:
        return SystemInfo(**fields)
    except ValidationError as e:
        by_alias = {f.alias: name for name, f in SystemInfo.model_fields.items()}
        for error in e.errors():
            name = by_alias.get(error["loc"][0], error["loc"][0])
            logger.debug("%s rejected: %s", name, error["msg"])
            if name in MEMORY_FIELDS:
                for coupled in MEMORY_FIELDS:
                    fields[coupled] = None
            else:
                fields[name] = SystemInfo.model_fields[name].default
        return SystemInfo(**fields)
