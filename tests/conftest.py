"""Pytest configuration and shared fixtures for hostsnap tests."""

import pytest

from hostsnap.core import collector
from hostsnap.core.models import Distribution, SystemInfo
from hostsnap.core.provider import FactUnavailableError, MemInfo, OSFactsProvider

DEBIAN_OS_RELEASE = {
    "ID": "debian",
    "ID_LIKE": None,
    "NAME": "Debian GNU/Linux",
    "PRETTY_NAME": "Debian GNU/Linux 12 (bookworm)",
    "VERSION": "12 (bookworm)",
    "VERSION_ID": "12",
    "VERSION_CODENAME": "bookworm",
    "CPE_NAME": None,
    "BUILD_ID": None,
    "VARIANT": None,
    "VARIANT_ID": None,
}


class FakeProvider(OSFactsProvider):
    """
    Scriptable provider for tests.

    Every getter returns the configured value, or raises
    FactUnavailableError if its name is listed in ``failing``. Calls are
    recorded in ``calls``.
    """

    def __init__(self, failing=(), **overrides):
        super().__init__()
        self.failing = set(failing)
        self.calls = []
        self.values = {
            "os_type": "Linux",
            "os_release": "6.1.0-test",
            "mem_info": MemInfo(total=16384000, swap_total=2097148),
            "hostname": "test-host",
            "cpu_count": 8,
            "cpu_online_count": 6,
            "cpu_speed": 2400,
            "linux_os_release": dict(DEBIAN_OS_RELEASE),
        }
        self.values.update(overrides)

    def _get(self, name):
        self.calls.append(name)
        if name in self.failing:
            raise FactUnavailableError(f"{name} failed")
        return self.values[name]

    def os_type(self):
        return self._get("os_type")

    def os_release(self):
        return self._get("os_release")

    def mem_info(self):
        return self._get("mem_info")

    def hostname(self):
        return self._get("hostname")

    def cpu_count(self):
        return self._get("cpu_count")

    def cpu_online_count(self):
        return self._get("cpu_online_count")

    def cpu_speed(self):
        return self._get("cpu_speed")

    def linux_os_release(self):
        return self._get("linux_os_release")


@pytest.fixture
def fake_provider():
    """Provider returning a complete set of Debian host facts."""
    return FakeProvider()


@pytest.fixture
def linux_platform(monkeypatch):
    """Force the Linux distribution probe regardless of the host platform."""
    monkeypatch.setattr(
        collector, "_probe_distribution", collector.select_distribution_probe("linux")
    )


@pytest.fixture
def non_linux_platform(monkeypatch):
    """Force the constant distribution probe used off Linux."""
    monkeypatch.setattr(
        collector, "_probe_distribution", collector.select_distribution_probe("darwin")
    )


@pytest.fixture
def full_info():
    """Fully populated snapshot matching FakeProvider's defaults."""
    return SystemInfo(
        os_type="Linux",
        os_release="6.1.0-test",
        distribution=Distribution.from_os_release(DEBIAN_OS_RELEASE),
        memory_total=16384000,
        swap_total=2097148,
        hostname="test-host",
        cpu_count=8,
        cpu_online_count=6,
        cpu_speed=2400,
    )


@pytest.fixture
def make_provider():
    """Factory for providers with selected failures or overridden values."""
    return FakeProvider


@pytest.fixture
def debian_os_release():
    """Parsed os-release mapping returned by FakeProvider by default."""
    return dict(DEBIAN_OS_RELEASE)
