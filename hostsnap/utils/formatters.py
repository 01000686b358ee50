"""Formatting utilities for hostsnap."""

from typing import Optional

from ..core.models import SystemInfo

NOT_AVAILABLE = "n/a"


MEMORY_UNITS = ("KB", "MB", "GB", "TB", "PB")


def format_memory(kilobytes: int) -> str:
    """Format a memory total given in KB, e.g. ``"15.6 GB"``."""
    value = float(kilobytes)
    for unit in MEMORY_UNITS[:-1]:
        if value < 1024:
            return f"{kilobytes} {unit}" if unit == "KB" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {MEMORY_UNITS[-1]}"


def format_frequency(mhz: int) -> str:
    """Format a clock speed given in MHz.

    Examples:
        >>> format_frequency(800)
        '800 MHz'
        >>> format_frequency(2400)
        '2.40 GHz'
    """
    if mhz < 1000:
        return f"{mhz} MHz"
    return f"{mhz / 1000:.2f} GHz"


def _or_na(value: Optional[str]) -> str:
    return value if value else NOT_AVAILABLE


def generate_summary(info: SystemInfo) -> str:
    """Generate a human-readable overview of a snapshot.

    Absent fields are shown as ``n/a``; memory totals are converted from
    kilobytes.

    Args:
        info: Snapshot to summarise

    Returns:
        Multi-line summary text
    """
    memory = (
        format_memory(info.memory_total)
        if info.memory_total is not None
        else NOT_AVAILABLE
    )
    swap = (
        format_memory(info.swap_total)
        if info.swap_total is not None
        else NOT_AVAILABLE
    )
    speed = (
        format_frequency(info.cpu_speed)
        if info.cpu_speed is not None
        else NOT_AVAILABLE
    )

    distribution = NOT_AVAILABLE
    if info.distribution is not None:
        distribution = _or_na(
            info.distribution.pretty_name
            or info.distribution.name
            or info.distribution.id
        )

    os_line = _or_na(info.os_type)
    if info.os_type and info.os_release:
        os_line = f"{info.os_type} {info.os_release}"

    lines = [
        f"Hostname:     {_or_na(info.hostname)}",
        f"OS:           {os_line}",
        f"Distribution: {distribution}",
        f"CPUs:         {info.cpu_online_count}/{info.cpu_count} online",
        f"CPU speed:    {speed}",
        f"Memory:       {memory}",
        f"Swap:         {swap}",
    ]
    return "\n".join(lines) + "\n"
