from typing import Optional, Sequence, Tuple

from .board import (
    BOARD_SIZE,
    NUM_QUADRANTS,
    QUADRANT_SIZE,
    WIN_COUNT,
    Cell,
    Row,
    col_offset,
    row_offset,
)
from .errors import InvalidInput

Grid = Tuple[Row, ...]


def quadrants_to_board(quadrants: Sequence[Sequence[Sequence[Cell]]]) -> Grid:
    if len(quadrants) != NUM_QUADRANTS:
        raise InvalidInput(f"Expected {NUM_QUADRANTS} quadrants, got {len(quadrants)}")
    grid = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for idx, quad in enumerate(quadrants):
        if len(quad) != QUADRANT_SIZE or any(len(row) != QUADRANT_SIZE for row in quad):
            raise InvalidInput(f"Quadrant {idx} is not {QUADRANT_SIZE}x{QUADRANT_SIZE}")
        r0, c0 = row_offset(idx), col_offset(idx)
        for i in range(QUADRANT_SIZE):
            for j in range(QUADRANT_SIZE):
                grid[r0 + i][c0 + j] = quad[i][j]
    return tuple(tuple(row) for row in grid)


def _scan_line(cells) -> Optional[Cell]:
    white = 0
    black = 0
    for v in cells:
        if v == Cell.WHITE:
            white += 1
            black = 0
        elif v == Cell.BLACK:
            black += 1
            white = 0
        else:
            white = 0
            black = 0
        if white >= WIN_COUNT:
            return Cell.WHITE
        if black >= WIN_COUNT:
            return Cell.BLACK
    return None


def vertical_winner(grid: Grid) -> Optional[Cell]:
    for c in range(BOARD_SIZE):
        w = _scan_line(grid[r][c] for r in range(BOARD_SIZE))
        if w is not None:
            return w
    return None


def horizontal_winner(grid: Grid) -> Optional[Cell]:
    for r in range(BOARD_SIZE):
        w = _scan_line(grid[r][c] for c in range(BOARD_SIZE))
        if w is not None:
            return w
    return None


def _compute_diagonal_windows():
    # anchors in each corner band, stepping toward the opposite corner
    span = BOARD_SIZE - WIN_COUNT + 1
    near = range(span)
    far = range(BOARD_SIZE - 1, BOARD_SIZE - 1 - span, -1)
    windows = []
    seen = set()
    for rows, dr in ((near, 1), (far, -1)):
        for cols, dc in ((near, 1), (far, -1)):
            for r in rows:
                for c in cols:
                    win = tuple((r + k * dr, c + k * dc) for k in range(WIN_COUNT))
                    key = frozenset(win)
                    if key not in seen:
                        seen.add(key)
                        windows.append(win)
    return windows


DIAGONAL_WINDOWS = _compute_diagonal_windows()


def diagonal_winner(grid: Grid) -> Optional[Cell]:
    for win in DIAGONAL_WINDOWS:
        r, c = win[0]
        first = grid[r][c]
        if first == Cell.EMPTY:
            continue
        if all(grid[r2][c2] == first for r2, c2 in win[1:]):
            return first
    return None


def get_winner(quadrants: Sequence[Sequence[Sequence[Cell]]]) -> Optional[Cell]:
    """Return the color holding five in a row, checking vertical, then
    horizontal, then diagonal lines. ``None`` when nobody has one."""
    grid = quadrants_to_board(quadrants)
    return vertical_winner(grid) or horizontal_winner(grid) or diagonal_winner(grid)


def board_to_quadrants(grid: Sequence[Sequence[Cell]]):
    if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
        raise InvalidInput(f"Expected a {BOARD_SIZE}x{BOARD_SIZE} board")
    return tuple(
        tuple(
            tuple(Cell(grid[row_offset(idx) + i][col_offset(idx) + j]) for j in range(QUADRANT_SIZE))
            for i in range(QUADRANT_SIZE)
        )
        for idx in range(NUM_QUADRANTS)
    )
