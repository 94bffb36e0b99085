"""Shared fixtures: isolated configuration and fake launch collaborators."""

import io

import pytest
from rich.console import Console

from browser_launcher.models import LaunchOutcome
from browser_launcher.openers import BrowserOpener


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at an empty directory and clear launcher env vars."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("BROWSER_LAUNCHER_CONFIG_DIR", str(config_dir))
    for name in ("BROWSER_LAUNCHER_NO_NATIVE", "BROWSER_LAUNCHER_STOP_ON_ERROR", "BROWSER_LAUNCHER_OS_NAME"):
        monkeypatch.delenv(name, raising=False)
    return config_dir


class RecordingConsole(Console):
    """Console that writes to an in-memory buffer."""

    def __init__(self):
        self.sink = io.StringIO()
        super().__init__(file=self.sink, width=200, color_system=None, soft_wrap=True)

    @property
    def text(self) -> str:
        return self.sink.getvalue()


class FakeSpawn:
    """Stands in for subprocess.Popen; optionally raises for selected URLs."""

    def __init__(self, fail_on=()):
        self.calls = []
        self.kwargs = []
        self.fail_on = set(fail_on)

    def __call__(self, argv, **kwargs):
        self.calls.append(list(argv))
        self.kwargs.append(kwargs)
        if argv[-1] in self.fail_on:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        return object()


class FakeNativeOpener(BrowserOpener):
    method = "native"

    def __init__(self):
        self.opened = []

    def open(self, url):
        self.opened.append(url)
        return LaunchOutcome.opened(url, method="native")


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def spawn():
    return FakeSpawn()


@pytest.fixture
def native_opener():
    return FakeNativeOpener()
