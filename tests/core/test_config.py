"""Tests for the config model, parsing and paths."""

from pathlib import Path

from tradio.core.config import (
    Config,
    apply_env_overrides,
    format_config,
    get_config_dir,
    get_runtime_dir,
    load_env_file,
    parse_config,
)


class TestParseConfig:
    def test_defaults_for_empty_text(self):
        config = parse_config("")
        assert config == Config()

    def test_reads_known_keys(self):
        config = parse_config(
            "volume=55\nplayer=mpv\nlog_level=debug\nnotifications=false\nhistory_length=3\n"
        )
        assert config.player.volume == 55
        assert config.player.name == "mpv"
        assert config.logging.level == "DEBUG"
        assert config.notifications.enabled is False
        assert config.ui.history_length == 3

    def test_ignores_comments_and_unknown_keys(self):
        config = parse_config("# comment\ncolour=blue\nnot a pair\nvolume = 20\n")
        assert config.player.volume == 20

    def test_invalid_number_keeps_default(self):
        assert parse_config("volume=loud\n").player.volume == 100

    def test_volume_is_clamped(self):
        assert parse_config("volume=150\n").player.volume == 100
        assert parse_config("volume=-5\n").player.volume == 0

    def test_unknown_player_is_kept(self):
        """An unknown player is reported when playback starts, not at load."""
        assert parse_config("player=winamp\n").player.name == "winamp"

    def test_format_round_trips_through_parse(self):
        config = Config()
        config.player.volume = 12
        config.notifications.timeout_ms = 500
        text = format_config(config)
        assert text.startswith("volume=12\nplayer=cvlc\n")
        assert parse_config(text) == config


class TestEnvironment:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("TRADIO_PLAYER", "mpv")
        monkeypatch.setenv("TRADIO_VOLUME", "30")
        config = apply_env_overrides(Config())
        assert config.player.name == "mpv"
        assert config.player.volume == 30

    def test_dotenv_file(self, isolated_dirs: Path, monkeypatch):
        # Registered with monkeypatch so the value loaded below is removed on teardown
        monkeypatch.setenv("TRADIO_LOG_LEVEL", "placeholder")
        monkeypatch.delenv("TRADIO_LOG_LEVEL")
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True)
        (config_dir / ".env").write_text("TRADIO_LOG_LEVEL=warning\n")
        load_env_file()
        assert apply_env_overrides(Config()).logging.level == "WARNING"


def test_paths_follow_environment(isolated_dirs: Path):
    assert get_config_dir() == isolated_dirs / "config" / "tradio"
    assert get_runtime_dir() == isolated_dirs / "run"
