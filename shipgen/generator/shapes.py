from typing import List, Optional, Set, Tuple

from shipgen.domain.board import Cell, Grid, in_bounds
from shipgen.domain.config import DIRECTIONS, EMPTY

from .rng import RandomSource, permuted

Shape = Tuple[Cell, ...]


def enumerate_shapes(
    grid: Grid,
    start: Cell,
    size: int,
    rng: RandomSource,
    board_size: Optional[int] = None,
) -> List[Shape]:
    """Return every simple orthogonal path of ``size`` cells rooted at ``start``.

    Paths grow depth-first from the last cell of the current path and only
    through EMPTY cells not already on the path. The order of the four
    directions is reshuffled at every extension step, so the order of the
    returned shapes depends on ``rng`` while their set does not. Shapes are
    distinguished by cell sequence: two growth orders covering the same cells
    both appear.

    The grid is only read. An empty list means nothing of that size fits.
    """
    if board_size is None:
        board_size = len(grid)
    if size < 1:
        raise ValueError(f"shape size must be >= 1, got {size}")
    r0, c0 = start
    if not in_bounds(r0, c0, board_size):
        raise ValueError(f"start cell {start} is outside a {board_size}x{board_size} board")

    if size == 1:
        return [(start,)]

    shapes: List[Shape] = []
    path: List[Cell] = [start]
    visited: Set[Cell] = {start}

    def extend(current: Cell) -> None:
        if len(path) == size:
            shapes.append(tuple(path))
            return
        r, c = current
        for dr, dc in permuted(DIRECTIONS, rng):
            nxt = (r + dr, c + dc)
            if not in_bounds(nxt[0], nxt[1], board_size):
                continue
            if grid[nxt[0]][nxt[1]] != EMPTY or nxt in visited:
                continue
            visited.add(nxt)
            path.append(nxt)
            extend(nxt)
            path.pop()
            visited.discard(nxt)

    extend(start)
    return shapes
