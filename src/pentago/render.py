from typing import List

from .board import BOARD_SIZE, QUADRANT_SIZE, BoardState, Cell, Phase
from .wincheck import quadrants_to_board

SYMBOLS = {Cell.EMPTY: ".", Cell.WHITE: "W", Cell.BLACK: "B"}

RULES = (
    "Take turns placing marbles on the board until one player gets five in a row.",
    "After placing a marble you must rotate one of the four quadrants 90 degrees.",
    "Five in a row counts along any row, column or diagonal, after either half of a turn.",
)


def color_name(c: Cell) -> str:
    return c.name.capitalize()


def status_text(state: BoardState) -> str:
    if state.winner is not None:
        return f"{color_name(state.winner)} wins"
    if state.phase == Phase.AWAITING_ROTATION:
        return f"{color_name(state.turn)} to rotate"
    return f"{color_name(state.turn)} to place"


def render_board(state: BoardState) -> str:
    grid = quadrants_to_board(state.quadrants)
    sep = "  +" + "+".join(["-------"] * (BOARD_SIZE // QUADRANT_SIZE)) + "+"
    header = " ".join(str(c) for c in range(QUADRANT_SIZE))
    lines: List[str] = [f"    {header}   {header}"]
    for r in range(BOARD_SIZE):
        if r % QUADRANT_SIZE == 0:
            lines.append(sep)
        line = [SYMBOLS[grid[r][c]] for c in range(BOARD_SIZE)]
        left = " ".join(line[:QUADRANT_SIZE])
        right = " ".join(line[QUADRANT_SIZE:])
        lines.append(f"{r % QUADRANT_SIZE} | {left} | {right} |")
    lines.append(sep)
    return "\n".join(lines)


def to_state(state: BoardState) -> dict:
    quadrants = [[[SYMBOLS[v] for v in row] for row in q] for q in state.quadrants]
    board = [[SYMBOLS[v] for v in row] for row in quadrants_to_board(state.quadrants)]
    winner = SYMBOLS[state.winner] if state.winner is not None else None
    return {
        "quadrants": quadrants,
        "board": board,
        "turn": SYMBOLS[state.turn],
        "phase": state.phase.value,
        "winner": winner,
        "status": status_text(state),
    }
