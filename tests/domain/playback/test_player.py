"""Tests for player command lines and process helpers."""

import subprocess
import sys
import time

import psutil
import pytest

from tradio.core.errors import PlayerUnsupported
from tradio.domain.playback import player
from tradio.domain.playback.player import (
    build_player_command,
    check_player_available,
    is_process_alive,
    next_player,
    terminate_process,
)


SLEEPER_ARGV = [sys.executable, "-c", "import time; time.sleep(60)"]

# Starts a sleeper, prints its pid, then never reaps it
UNREAPING_PARENT = (
    "import subprocess, sys, time\n"
    "child = subprocess.Popen([sys.executable, '-c', 'import time; time.sleep(60)'],"
    " stdout=subprocess.DEVNULL)\n"
    "print(child.pid, flush=True)\n"
    "time.sleep(60)\n"
)


@pytest.fixture
def sleeper():
    process = subprocess.Popen(SLEEPER_ARGV, start_new_session=True)
    yield process
    if process.poll() is None:
        process.kill()
        process.wait()


class TestBuildPlayerCommand:
    def test_cvlc(self):
        assert build_player_command("cvlc", "http://s", 80) == [
            "cvlc",
            "--no-video",
            "--play-and-exit",
            "--quiet",
            "--intf",
            "dummy",
            "--volume=80",
            "http://s",
        ]

    def test_mpv(self):
        assert build_player_command("mpv", "http://s", 100) == [
            "mpv",
            "--no-video",
            "--quiet",
            "--volume=100",
            "http://s",
        ]

    def test_volume_clamped(self):
        assert "--volume=100" in build_player_command("mpv", "http://s", 400)

    def test_unknown_player(self):
        with pytest.raises(PlayerUnsupported, match="winamp"):
            build_player_command("winamp", "http://s", 50)


def test_next_player_cycles():
    assert next_player("cvlc") == "mpv"
    assert next_player("mpv") == "cvlc"
    assert next_player("winamp") == "cvlc"


def test_check_player_available(monkeypatch):
    monkeypatch.setattr(player.shutil, "which", lambda name: f"/usr/bin/{name}")
    assert check_player_available("mpv")
    assert not check_player_available("winamp")

    monkeypatch.setattr(player.shutil, "which", lambda name: None)
    assert not check_player_available("mpv")


class TestIsProcessAlive:
    def test_running_process(self, sleeper):
        assert is_process_alive(sleeper.pid)

    def test_exited_process(self):
        process = subprocess.Popen(["true"])
        process.wait()
        assert not is_process_alive(process.pid)

    def test_zombie_counts_as_dead(self):
        process = subprocess.Popen(["true"])
        # Not reaped yet: the pid exists as a zombie until wait()
        deadline = time.time() + 10
        while time.time() < deadline:
            try:
                if psutil.Process(process.pid).status() == psutil.STATUS_ZOMBIE:
                    break
            except psutil.NoSuchProcess:
                break
            time.sleep(0.02)
        assert not is_process_alive(process.pid)
        process.wait()

    def test_recycled_pid_is_not_ours(self, sleeper):
        """A process created after the pid file was written is a different process."""
        created = psutil.Process(sleeper.pid).create_time()
        assert is_process_alive(sleeper.pid, started_before=created + 1)
        assert not is_process_alive(sleeper.pid, started_before=created - 60)


class TestTerminateProcess:
    def test_terminates_running_process(self, sleeper):
        assert terminate_process(sleeper.pid, timeout=5)
        assert not is_process_alive(sleeper.pid)

    def test_already_gone(self):
        process = subprocess.Popen(["true"])
        process.wait()
        assert terminate_process(process.pid) is False

    def test_player_owned_by_another_process(self):
        """A player whose parent never reaps it turns zombie; that counts as stopped."""
        parent = subprocess.Popen(
            [sys.executable, "-c", UNREAPING_PARENT],
            stdout=subprocess.PIPE,
            text=True,
        )
        try:
            child_pid = int(parent.stdout.readline())
            started = time.monotonic()
            assert terminate_process(child_pid, timeout=5)
            assert time.monotonic() - started < 4
            assert not is_process_alive(child_pid)
        finally:
            parent.kill()
            parent.wait()
            parent.stdout.close()
