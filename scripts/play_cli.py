import argparse
import logging
import sys
from typing import Optional

from pentago.board import BoardState
from pentago.errors import IllegalAction
from pentago.game import Action, Game, Place, Reset, Rotate, check_action
from pentago.render import RULES, render_board, status_text
from pentago.rotation import CLOCKWISE, COUNTER_CLOCKWISE

DMAP = {"CW": CLOCKWISE, "CCW": COUNTER_CLOCKWISE}

HELP = (
    "Commands:",
    "  p Q R C     place a marble in quadrant Q (0-3) at row R, column C (0-2)",
    "  r Q cw|ccw  rotate quadrant Q clockwise or counter-clockwise",
    "  reset       start a new game",
    "  board       show the board",
    "  help        show this text",
    "  quit        exit",
    "Quadrants are numbered 0 1 on top and 2 3 below.",
)


def parse_command(s: str) -> Optional[Action]:
    parts = s.strip().upper().split()
    if not parts:
        return None
    if parts[0] in ("P", "PLACE"):
        if len(parts) != 4:
            raise ValueError("Format: p Q R C")
        q, r, c = (int(x) for x in parts[1:])
        return Place(q, r, c)
    if parts[0] in ("R", "ROTATE"):
        if len(parts) != 3:
            raise ValueError("Format: r Q cw|ccw")
        if parts[2] not in DMAP:
            raise ValueError("Direction")
        return Rotate(int(parts[1]), DMAP[parts[2]])
    if parts[0] == "RESET":
        return Reset()
    raise ValueError("Unknown command")


def show(state: BoardState) -> None:
    print(render_board(state))
    print(status_text(state))


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    g = Game()
    print("Pentago CLI")
    for line in RULES:
        print(f"- {line}")
    print("Type 'help' for commands.")
    show(g.get_state())

    while True:
        p = g.get_state().turn.name[0]
        try:
            s = input(f"[{p}] > ").strip()
        except EOFError:
            print()
            break
        if not s:
            continue
        if s.lower() in ("q", "quit", "exit"):
            print("Bye.")
            return 0
        if s.lower() in ("h", "help", "?"):
            print("\n".join(HELP))
            continue
        if s.lower() in ("b", "board"):
            show(g.get_state())
            continue
        try:
            action = parse_command(s)
        except ValueError as e:
            print(f"Invalid command: {e}")
            continue
        try:
            check_action(g.get_state(), action)
        except IllegalAction as e:
            print(f"Illegal move: {e}")
            continue
        show(g.dispatch(action))
    return 0


if __name__ == "__main__":
    sys.exit(main())
