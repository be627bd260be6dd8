from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

from .errors import InvalidInput

BOARD_SIZE = 6
QUADRANT_SIZE = 3
NUM_QUADRANTS = 4
QUADRANTS_PER_ROW = 2
WIN_COUNT = 5


class Cell(IntEnum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2


class Phase(Enum):
    AWAITING_PLACEMENT = "awaiting_placement"
    AWAITING_ROTATION = "awaiting_rotation"
    GAME_OVER = "game_over"


Row = Tuple[Cell, ...]
Quadrant = Tuple[Row, ...]
Quadrants = Tuple[Quadrant, ...]


def opponent(p: Cell) -> Cell:
    return Cell.BLACK if p == Cell.WHITE else Cell.WHITE


def row_offset(quadrant_idx: int) -> int:
    return (quadrant_idx // QUADRANTS_PER_ROW) * QUADRANT_SIZE


def col_offset(quadrant_idx: int) -> int:
    return (quadrant_idx % QUADRANTS_PER_ROW) * QUADRANT_SIZE


def empty_quadrant() -> Quadrant:
    return tuple(tuple(Cell.EMPTY for _ in range(QUADRANT_SIZE)) for _ in range(QUADRANT_SIZE))


def empty_quadrants() -> Quadrants:
    return tuple(empty_quadrant() for _ in range(NUM_QUADRANTS))


@dataclass(frozen=True)
class BoardState:
    """Immutable snapshot of one Pentago game.

    ``phase`` is the only turn-order selector. ``last_player_rotated`` and
    ``last_player_moved`` are derived from it and can never both be true.
    """

    quadrants: Quadrants
    turn: Cell = Cell.WHITE
    phase: Phase = Phase.AWAITING_PLACEMENT
    winner: Optional[Cell] = None

    def __post_init__(self) -> None:
        quads = self.quadrants
        if len(quads) != NUM_QUADRANTS:
            raise InvalidInput(f"Expected {NUM_QUADRANTS} quadrants, got {len(quads)}")
        for idx, quad in enumerate(quads):
            if len(quad) != QUADRANT_SIZE or any(len(row) != QUADRANT_SIZE for row in quad):
                raise InvalidInput(f"Quadrant {idx} is not {QUADRANT_SIZE}x{QUADRANT_SIZE}")
        try:
            frozen = tuple(tuple(tuple(Cell(v) for v in row) for row in quad) for quad in quads)
        except ValueError as e:
            raise InvalidInput(str(e)) from e
        object.__setattr__(self, "quadrants", frozen)

    @property
    def last_player_rotated(self) -> bool:
        return self.phase == Phase.AWAITING_PLACEMENT

    @property
    def last_player_moved(self) -> bool:
        return self.phase == Phase.AWAITING_ROTATION

    @property
    def game_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    def cell(self, quadrant_idx: int, row: int, col: int) -> Cell:
        return self.quadrants[quadrant_idx][row][col]


def create_initial_state() -> BoardState:
    return BoardState(
        quadrants=empty_quadrants(),
        turn=Cell.WHITE,
        phase=Phase.AWAITING_PLACEMENT,
        winner=None,
    )
