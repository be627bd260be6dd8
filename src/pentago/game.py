import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from .board import (
    NUM_QUADRANTS,
    QUADRANT_SIZE,
    BoardState,
    Cell,
    Phase,
    create_initial_state,
    opponent,
)
from .errors import IllegalAction, UnknownAction
from .rotation import DIRECTIONS, rotate
from .wincheck import get_winner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Place:
    quadrant_idx: int
    row: int
    col: int


@dataclass(frozen=True)
class Rotate:
    quadrant_idx: int
    direction: int


@dataclass(frozen=True)
class Reset:
    pass


Action = Union[Place, Rotate, Reset]


def _in_range(v: int, hi: int) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and 0 <= v < hi


def check_action(state: BoardState, action: Action) -> None:
    """Raise ``IllegalAction`` (or ``UnknownAction``) if ``action`` cannot be
    applied to ``state``. Returns ``None`` for a legal action."""
    if isinstance(action, Reset):
        return
    if isinstance(action, Place):
        if state.game_over:
            raise IllegalAction("Game over")
        if state.phase != Phase.AWAITING_PLACEMENT:
            raise IllegalAction("Must rotate a quadrant before placing")
        if not _in_range(action.quadrant_idx, NUM_QUADRANTS):
            raise IllegalAction(f"Invalid quadrant {action.quadrant_idx!r}")
        if not _in_range(action.row, QUADRANT_SIZE) or not _in_range(action.col, QUADRANT_SIZE):
            raise IllegalAction(f"Invalid cell ({action.row!r}, {action.col!r})")
        if state.cell(action.quadrant_idx, action.row, action.col) != Cell.EMPTY:
            raise IllegalAction("Cell not empty")
        return
    if isinstance(action, Rotate):
        if state.game_over:
            raise IllegalAction("Game over")
        if state.phase != Phase.AWAITING_ROTATION:
            raise IllegalAction("Must place a marble before rotating")
        if not _in_range(action.quadrant_idx, NUM_QUADRANTS):
            raise IllegalAction(f"Invalid quadrant {action.quadrant_idx!r}")
        if action.direction not in DIRECTIONS:
            raise IllegalAction(f"Invalid direction {action.direction!r}")
        return
    raise UnknownAction(f"Unknown action type: {type(action).__name__}")


def _after_half_move(state: BoardState, quadrants, next_phase: Phase, turn: Cell) -> BoardState:
    winner = get_winner(quadrants)
    return replace(
        state,
        quadrants=quadrants,
        turn=turn,
        phase=Phase.GAME_OVER if winner is not None else next_phase,
        winner=winner,
    )


def place(state: BoardState, quadrant_idx: int, row: int, col: int) -> BoardState:
    check_action(state, Place(quadrant_idx, row, col))
    quad = state.quadrants[quadrant_idx]
    new_row = quad[row][:col] + (state.turn,) + quad[row][col + 1:]
    new_quad = quad[:row] + (new_row,) + quad[row + 1:]
    quadrants = state.quadrants[:quadrant_idx] + (new_quad,) + state.quadrants[quadrant_idx + 1:]
    return _after_half_move(state, quadrants, Phase.AWAITING_ROTATION, state.turn)


def rotate_quadrant(state: BoardState, quadrant_idx: int, direction: int) -> BoardState:
    check_action(state, Rotate(quadrant_idx, direction))
    quadrants = list(state.quadrants)
    quadrants[quadrant_idx] = rotate(quadrants[quadrant_idx], direction)
    return _after_half_move(state, tuple(quadrants), Phase.AWAITING_PLACEMENT, opponent(state.turn))


def reset() -> BoardState:
    return create_initial_state()


def apply_action(state: BoardState, action: Action) -> BoardState:
    """Return the state after ``action``.

    Illegal moves and unknown action kinds leave ``state`` untouched; the
    same object is returned.
    """
    try:
        if isinstance(action, Reset):
            return reset()
        if isinstance(action, Place):
            new = place(state, action.quadrant_idx, action.row, action.col)
        elif isinstance(action, Rotate):
            new = rotate_quadrant(state, action.quadrant_idx, action.direction)
        else:
            check_action(state, action)
            return state
    except IllegalAction as e:
        logger.debug("Rejected %r: %s", action, e)
        return state
    except UnknownAction as e:
        logger.error("%s", e)
        return state
    logger.debug("Applied %r -> phase=%s turn=%s", action, new.phase.value, new.turn.name)
    if new.winner is not None:
        logger.info("%s wins", new.winner.name.capitalize())
    return new


class Game:
    """Holds the current snapshot of one game and the snapshots before it."""

    def __init__(self) -> None:
        self._history: Tuple[BoardState, ...] = (create_initial_state(),)

    def get_state(self) -> BoardState:
        return self._history[-1]

    @property
    def history(self) -> Tuple[BoardState, ...]:
        return self._history

    def dispatch(self, action: Action) -> BoardState:
        prev = self.get_state()
        new = apply_action(prev, action)
        if isinstance(action, Reset):
            self._history = (new,)
        elif new is not prev:
            self._history = self._history + (new,)
        return new

    def place(self, quadrant_idx: int, row: int, col: int) -> BoardState:
        return self.dispatch(Place(quadrant_idx, row, col))

    def rotate(self, quadrant_idx: int, direction: int) -> BoardState:
        return self.dispatch(Rotate(quadrant_idx, direction))

    def reset(self) -> BoardState:
        return self.dispatch(Reset())

    def winner(self) -> Optional[Cell]:
        return self.get_state().winner

    def terminal(self) -> bool:
        return self.get_state().game_over
