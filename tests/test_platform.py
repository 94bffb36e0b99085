"""Tests for OS name reporting and platform family classification."""

import pytest

import browser_launcher.platform as host
from browser_launcher.platform import PlatformFamily, detect_platform_family, get_os_name


@pytest.mark.parametrize(
    ("os_name", "expected"),
    [
        ("Windows 11", PlatformFamily.WINDOWS),
        ("WINDOWS 10", PlatformFamily.WINDOWS),
        ("Windows Server 2022", PlatformFamily.WINDOWS),
        ("Mac OS X", PlatformFamily.MACOS),
        ("macOS", PlatformFamily.MACOS),
        ("Linux", PlatformFamily.UNIX),
        ("Linux 6.1.0-18-amd64", PlatformFamily.UNIX),
        ("Unix", PlatformFamily.UNIX),
        ("plan9", PlatformFamily.UNSUPPORTED),
        ("FreeBSD 14.0", PlatformFamily.UNSUPPORTED),
        ("", PlatformFamily.UNSUPPORTED),
    ],
)
def test_detect_platform_family(os_name, expected):
    assert detect_platform_family(os_name) is expected


def test_windows_checked_before_other_families():
    # A name matching several families resolves to the first in priority order
    assert detect_platform_family("winux mac") is PlatformFamily.WINDOWS
    assert detect_platform_family("mac linux") is PlatformFamily.MACOS


def test_get_os_name_reports_macos_instead_of_darwin(monkeypatch):
    monkeypatch.setattr(host.sys, "platform", "darwin")
    monkeypatch.setattr(host.platform, "system", lambda: "Darwin")

    os_name = get_os_name()

    assert os_name == "Mac OS X"
    assert detect_platform_family(os_name) is PlatformFamily.MACOS


def test_get_os_name_includes_release(monkeypatch):
    monkeypatch.setattr(host.sys, "platform", "linux")
    monkeypatch.setattr(host.platform, "system", lambda: "Linux")
    monkeypatch.setattr(host.platform, "release", lambda: "6.1.0")

    assert get_os_name() == "Linux 6.1.0"


def test_get_os_name_without_release(monkeypatch):
    monkeypatch.setattr(host.sys, "platform", "win32")
    monkeypatch.setattr(host.platform, "system", lambda: "Windows")
    monkeypatch.setattr(host.platform, "release", lambda: "")

    assert get_os_name() == "Windows"
