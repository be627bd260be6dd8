from typing import Any, Sequence, Tuple

from .errors import InvalidInput

CLOCKWISE = 1
COUNTER_CLOCKWISE = 3
DIRECTIONS = (CLOCKWISE, COUNTER_CLOCKWISE)


def _check_square(matrix: Any) -> int:
    if not isinstance(matrix, Sequence) or isinstance(matrix, str) or len(matrix) == 0:
        raise InvalidInput("Expected a non-empty square matrix")
    n = len(matrix)
    for row in matrix:
        if not isinstance(row, Sequence) or isinstance(row, str) or len(row) != n:
            raise InvalidInput("Expected a non-empty square matrix")
    return n


def normalize_turns(k: int) -> int:
    return ((k % 4) + 4) % 4


def rotate(matrix: Sequence[Sequence[Any]], k: int) -> Tuple[Tuple[Any, ...], ...]:
    """Rotate a square matrix clockwise by ``k`` quarter turns.

    ``k`` may be negative; ``rotate(m, -1)`` equals ``rotate(m, 3)``. The
    result is always a fresh tuple of tuples.
    """
    n = _check_square(matrix)
    turns = normalize_turns(k)
    rot = [[None] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if turns == 0:
                rot[i][j] = matrix[i][j]
            elif turns == 1:
                rot[j][n - 1 - i] = matrix[i][j]
            elif turns == 2:
                rot[n - 1 - i][n - 1 - j] = matrix[i][j]
            else:
                rot[n - 1 - j][i] = matrix[i][j]
    return tuple(tuple(row) for row in rot)
