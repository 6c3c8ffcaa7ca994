"""Shared fixtures: isolated directories and stand-in player processes."""

import subprocess
import sys
from pathlib import Path

import pytest
from rich.console import Console

from tradio.context import AppContext
from tradio.core.config import Config
from tradio.core.store import Store
from tradio.domain.playback.session import PlaybackSession
from tradio.domain.playback.state import FileSessionStore
from tradio.domain.stations.registry import StationRegistry

# Stand-ins for cvlc/mpv: one keeps running, one exits straight away
SLEEPER = [sys.executable, "-c", "import time; time.sleep(60)"]
QUITTER = [sys.executable, "-c", "raise SystemExit(3)"]


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config, data and runtime dirs at a temp directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("TRADIO_RUNTIME_DIR", str(tmp_path / "run"))
    (tmp_path / "run").mkdir()
    for name in ("TRADIO_PLAYER", "TRADIO_VOLUME", "TRADIO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def store(tmp_path: Path) -> Store:
    return Store(tmp_path / "config" / "tradio")


@pytest.fixture
def session_store(tmp_path: Path) -> FileSessionStore:
    return FileSessionStore(tmp_path / "run")


@pytest.fixture
def config() -> Config:
    cfg = Config()
    cfg.player.stop_timeout_seconds = 5.0
    return cfg


class FakeLauncher:
    """Records player command lines and spawns a stand-in process instead."""

    def __init__(self, argv: list[str]):
        self.argv = argv
        self.commands: list[list[str]] = []
        self.processes: list[subprocess.Popen] = []

    def __call__(self, cmd: list[str]) -> subprocess.Popen:
        self.commands.append(cmd)
        process = subprocess.Popen(
            self.argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        self.processes.append(process)
        return process

    def wait_for_last(self, _seconds: float) -> None:
        """Grace-period stand-in: block until the last process exits."""
        self.processes[-1].wait(timeout=30)

    def cleanup(self) -> None:
        for process in self.processes:
            if process.poll() is None:
                process.kill()
                process.wait()


@pytest.fixture
def sleeper_launcher():
    launcher = FakeLauncher(SLEEPER)
    yield launcher
    launcher.cleanup()


@pytest.fixture
def quitter_launcher():
    launcher = FakeLauncher(QUITTER)
    yield launcher
    launcher.cleanup()


@pytest.fixture
def notified() -> list:
    return []


@pytest.fixture
def session(config, store, session_store, sleeper_launcher, notified) -> PlaybackSession:
    """Session whose player is a sleeping Python process; no grace wait."""
    return PlaybackSession(
        config,
        store,
        session_store,
        launcher=sleeper_launcher,
        notifier=notified.append,
        sleep=lambda _seconds: None,
    )


@pytest.fixture
def ctx(config, store, session) -> AppContext:
    return AppContext.create(
        store=store,
        config=config,
        registry=StationRegistry(),
        session=session,
        console=Console(width=120),
    )
