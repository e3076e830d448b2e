import builtins

from main import run_session
from tile_merge.env.session import GameSession, RunState


def _feed(monkeypatch, commands):
    answers = iter(commands)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)


def test_run_session_handles_commands(monkeypatch, capsys):
    session = GameSession(seed=0)
    _feed(monkeypatch, ["a", "bogus", "e", "d", "n", "q", "a"])

    run_session(session)

    out = capsys.readouterr().out
    assert "[main] unknown command 'bogus'" in out
    assert "[main] game ended" in out
    assert "[main] game is over" in out
    assert "[main] new game" in out
    assert "[main] exiting" in out
    assert session.run_state is RunState.PLAYING
    assert len(session.grid) == 2


def test_run_session_stops_on_eof(monkeypatch, capsys):
    _feed(monkeypatch, [])
    run_session(GameSession(seed=0))
    assert "[main] exiting: score=0 best=0" in capsys.readouterr().out
