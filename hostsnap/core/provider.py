"""Best-effort access to raw operating system facts."""

import os
import platform
import socket
import sys
from pathlib import Path
from typing import NamedTuple, Optional

import distro
import psutil

from .models import CPU_COUNT_FALLBACK

OS_RELEASE_PATHS = (Path("/etc/os-release"), Path("/usr/lib/os-release"))

# os-release keys carried into a Distribution, in declaration order
OS_RELEASE_KEYS = (
    "ID",
    "ID_LIKE",
    "NAME",
    "PRETTY_NAME",
    "VERSION",
    "VERSION_ID",
    "VERSION_CODENAME",
    "CPE_NAME",
    "BUILD_ID",
    "VARIANT",
    "VARIANT_ID",
)


class FactUnavailableError(RuntimeError):
    """Raised when a host fact cannot be retrieved."""


class MemInfo(NamedTuple):
    """Total physical and swap memory, in kilobytes."""

    total: int
    swap_total: int


def read_os_release(path: Path) -> dict[str, Optional[str]]:
    """
    Read an os-release descriptor with distro.

    Args:
        path: Path to an os-release file

    Returns:
        Mapping of every recognised key to its value, or None when missing

    Raises:
        OSError: If the descriptor cannot be read
        ValueError: If the descriptor's quoting is malformed
        FactUnavailableError: If the descriptor holds no assignments
    """
    parsed = distro.LinuxDistribution(
        include_lsb=False,
        include_uname=False,
        os_release_file=str(path),
    ).os_release_info()
    if not parsed:
        raise FactUnavailableError(f"No os-release assignments in {path}")
    return {key: parsed.get(key.lower()) for key in OS_RELEASE_KEYS}


class OSFactsProvider:
    """Retrieves raw OS facts, one independent call per fact.

    Every getter raises on failure, except the two CPU counters which always
    return a number.
    """

    def __init__(self, os_release_paths: tuple[Path, ...] = OS_RELEASE_PATHS):
        self.os_release_paths = os_release_paths

    def os_type(self) -> str:
        value = platform.system()
        if not value:
            raise FactUnavailableError("OS type could not be determined")
        return value

    def os_release(self) -> str:
        value = platform.release()
        if not value:
            raise FactUnavailableError("OS release could not be determined")
        return value

    def mem_info(self) -> MemInfo:
        """Total memory and swap in KB, both from one retrieval."""
        return MemInfo(
            total=psutil.virtual_memory().total // 1024,
            swap_total=psutil.swap_memory().total // 1024,
        )

    def hostname(self) -> str:
        value = socket.gethostname()
        if not value:
            raise FactUnavailableError("Hostname is empty")
        # Undecodable bytes surface as lone surrogates
        value.encode("utf-8")
        return value

    def cpu_count(self) -> int:
        """Logical CPU count, never failing."""
        try:
            count = psutil.cpu_count(logical=True)
        except (OSError, RuntimeError):
            count = None
        return count or os.cpu_count() or CPU_COUNT_FALLBACK

    def cpu_online_count(self) -> int:
        """Logical CPUs available to this process, never failing."""
        count = 0
        if hasattr(os, "sched_getaffinity"):
            try:
                count = len(os.sched_getaffinity(0))
            except OSError:
                count = 0
        if not count:
            try:
                count = len(psutil.Process().cpu_affinity())
            except (AttributeError, OSError, psutil.Error):
                count = 0
        return count or self.cpu_count()

    def cpu_speed(self) -> int:
        """Nominal CPU clock speed in MHz."""
        freq = psutil.cpu_freq()
        if freq is None:
            raise FactUnavailableError("CPU frequency is not exposed")
        mhz = int(freq.max or freq.current)
        if mhz <= 0:
            raise FactUnavailableError("CPU frequency is not exposed")
        return mhz

    def linux_os_release(self) -> dict[str, Optional[str]]:
        """
        Read and parse the os-release descriptor.

        Returns:
            Parsed os-release mapping

        Raises:
            FactUnavailableError: If not running on Linux, or no usable
                descriptor exists
            OSError: If the descriptor cannot be read
            ValueError: If the descriptor is malformed
        """
        if not sys.platform.startswith("linux"):
            raise FactUnavailableError("os-release is only available on Linux")
        for path in self.os_release_paths:
            if path.is_file():
                return read_os_release(path)
        raise FactUnavailableError("No os-release descriptor found")
