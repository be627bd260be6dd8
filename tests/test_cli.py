import sys

import pytest

import play_cli
from pentago.game import Place, Reset, Rotate
from pentago.rotation import CLOCKWISE, COUNTER_CLOCKWISE


def test_parse_commands():
    assert play_cli.parse_command("p 1 2 0") == Place(1, 2, 0)
    assert play_cli.parse_command("r 3 cw") == Rotate(3, CLOCKWISE)
    assert play_cli.parse_command("ROTATE 0 ccw") == Rotate(0, COUNTER_CLOCKWISE)
    assert play_cli.parse_command("reset") == Reset()
    assert play_cli.parse_command("   ") is None


@pytest.mark.parametrize("bad", ["p 1 2", "r 0 up", "jump", "p a b c"])
def test_parse_rejects(bad):
    with pytest.raises(ValueError):
        play_cli.parse_command(bad)


def test_session(monkeypatch, capsys):
    inputs = iter(["p 0 0 0", "p 0 0 1", "r 0 cw", "board", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    monkeypatch.setattr(sys, "argv", ["play_cli.py"])
    assert play_cli.main() == 0
    out = capsys.readouterr().out
    assert "White to rotate" in out
    assert "Illegal move: Must rotate a quadrant before placing" in out
    assert "Black to place" in out
    assert "Bye." in out
