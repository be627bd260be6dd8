from dataclasses import replace

from pentago.board import Cell, Phase, create_initial_state
from pentago.game import Place, Rotate, apply_action
from pentago.render import render_board, status_text, to_state
from pentago.rotation import COUNTER_CLOCKWISE


def test_status_text_follows_phase():
    s = create_initial_state()
    assert status_text(s) == "White to place"
    s = apply_action(s, Place(3, 2, 2))
    assert status_text(s) == "White to rotate"
    s = apply_action(s, Rotate(3, COUNTER_CLOCKWISE))
    assert status_text(s) == "Black to place"


def test_render_board_layout():
    s = apply_action(create_initial_state(), Place(1, 0, 2))
    lines = render_board(s).splitlines()
    assert lines[0] == "    0 1 2   0 1 2"
    assert lines[1] == "  +-------+-------+"
    assert lines[2] == "0 | . . . | . . W |"
    assert len(lines) == 10
    assert lines[5] == lines[1]


def test_to_state_json_shape():
    s = apply_action(create_initial_state(), Place(2, 1, 0))
    js = to_state(s)
    assert js["quadrants"][2][1][0] == "W"
    assert js["board"][4][0] == "W"
    assert js["turn"] == "W"
    assert js["phase"] == "awaiting_rotation"
    assert js["winner"] is None
    won = replace(s, phase=Phase.GAME_OVER, winner=Cell.BLACK)
    assert to_state(won)["winner"] == "B"
    assert to_state(won)["status"] == "Black wins"
