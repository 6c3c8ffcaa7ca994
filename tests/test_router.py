"""Tests for interactive menu routing."""

import pytest

from tradio import router, ui
from tradio.main import interactive_mode


class ScriptedInput:
    """Stands in for ui.ask, replaying answers in order."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, ctx, prompt, default=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture(autouse=True)
def no_waiting(monkeypatch):
    monkeypatch.setattr(router.time, "sleep", lambda _seconds: None)
    monkeypatch.setattr(ui, "wait_for_key", lambda ctx, message="": None)


def script(monkeypatch, *answers):
    scripted = ScriptedInput(*answers)
    monkeypatch.setattr(ui, "ask", scripted)
    return scripted


@pytest.mark.parametrize("choice", ["q", "Q", "quit", "exit"])
def test_quit(ctx, choice):
    _, should_continue = router.handle_command(ctx, choice)
    assert should_continue is False


def test_number_toggles_station(ctx):
    router.handle_command(ctx, "3")
    assert ctx.session.now_playing().station_name == "Joy Jazz"
    router.handle_command(ctx, "3")
    assert not ctx.session.is_playing()


def test_invalid_number(ctx, sleeper_launcher, capsys):
    _, should_continue = router.handle_command(ctx, "42")
    assert should_continue is True
    assert sleeper_launcher.commands == []
    assert "Invalid station number" in capsys.readouterr().out


def test_superscript_digit_is_not_a_number(ctx, sleeper_launcher, capsys):
    _, should_continue = router.handle_command(ctx, "²")
    assert should_continue is True
    assert sleeper_launcher.commands == []
    assert "Invalid argument: ²" in capsys.readouterr().out


def test_invalid_choice(ctx, capsys):
    _, should_continue = router.handle_command(ctx, "z")
    assert should_continue is True
    assert "Invalid choice!" in capsys.readouterr().out


def test_random_play(ctx):
    router.handle_command(ctx, "r")
    assert ctx.session.now_playing().station_name in ctx.registry


def test_stop(ctx):
    router.handle_command(ctx, "1")
    router.handle_command(ctx, "x")
    assert not ctx.session.is_playing()


def test_history(ctx, capsys):
    router.handle_command(ctx, "1")
    router.handle_command(ctx, "2")
    capsys.readouterr()
    router.handle_command(ctx, "h")
    out = capsys.readouterr().out
    assert out.index("Virgin Radio") < out.index("Joy FM")


def test_volume(ctx, monkeypatch):
    monkeypatch.setattr("tradio.commands.settings.set_system_volume", lambda volume: True)
    script(monkeypatch, "35")
    router.handle_command(ctx, "v")
    assert ctx.config.player.volume == 35
    assert ctx.store.load_config().player.volume == 35


@pytest.mark.parametrize("answer", ["101", "-1", "loud", "²"])
def test_volume_rejected(ctx, monkeypatch, answer, capsys):
    script(monkeypatch, answer)
    router.handle_command(ctx, "v")
    assert ctx.config.player.volume == 100
    assert "Invalid volume level!" in capsys.readouterr().out


def test_player_switch(ctx):
    router.handle_command(ctx, "p")
    assert ctx.config.player.name == "mpv"


def test_search_and_play(ctx, monkeypatch):
    script(monkeypatch, "jazz")
    monkeypatch.setattr(ui, "ask_index", lambda ctx, prompt, count: 0)
    router.handle_command(ctx, "s")
    assert ctx.session.now_playing().station_name == "Joy Jazz"


def test_search_no_results(ctx, monkeypatch, capsys):
    script(monkeypatch, "zzzz")
    router.handle_command(ctx, "s")
    assert "No results found" in capsys.readouterr().out
    assert not ctx.session.is_playing()


class TestFavorites:
    def test_add_by_number(self, ctx, monkeypatch):
        script(monkeypatch, "2")
        router.handle_command(ctx, "a")
        assert ctx.store.list_favorites() == ["Joy FM"]

    def test_add_invalid_number(self, ctx, monkeypatch, capsys):
        script(monkeypatch, "99")
        router.handle_command(ctx, "a")
        assert ctx.store.list_favorites() == []
        assert "Invalid station number" in capsys.readouterr().out

    def test_play_favorite(self, ctx, monkeypatch):
        ctx.store.add_favorite("Metro FM")
        script(monkeypatch, "1")
        router.handle_command(ctx, "f")
        assert ctx.session.now_playing().station_name == "Metro FM"

    def test_remove_and_skip(self, ctx, monkeypatch):
        for name in ("Joy FM", "Metro FM"):
            ctx.store.add_favorite(name)
        script(monkeypatch, "2", "3")
        router.handle_command(ctx, "f")
        assert ctx.store.list_favorites() == ["Metro FM"]
        assert not ctx.session.is_playing()

    def test_empty_favorites(self, ctx, capsys):
        router.handle_command(ctx, "f")
        assert "no favorites yet" in capsys.readouterr().out


def test_menu_loop_stops_playback_on_exit(ctx, monkeypatch):
    script(monkeypatch, "1", "q")
    monkeypatch.setattr(ui, "render_menu", lambda ctx: None)
    interactive_mode(ctx)
    assert not ctx.session.is_playing()


def test_menu_loop_handles_eof(ctx, monkeypatch):
    script(monkeypatch, "1")
    monkeypatch.setattr(ui, "render_menu", lambda ctx: None)
    interactive_mode(ctx)
    assert not ctx.session.is_playing()
