from typing import Iterator, List, Optional, Sequence, Tuple

from .config import BOARD_SIZE, DIRECTIONS, EMPTY, NEIGHBORS, SHIP

Cell = Tuple[int, int]
Grid = List[List[str]]


def cell_index(r: int, c: int, board_size: int = BOARD_SIZE) -> int:
    return r * board_size + c


def make_mask(cells: Sequence[Cell], board_size: int = BOARD_SIZE) -> int:
    m = 0
    for r, c in cells:
        m |= 1 << cell_index(r, c, board_size)
    return m


def create_grid(board_size: int = BOARD_SIZE) -> Grid:
    return [[EMPTY for _ in range(board_size)] for _ in range(board_size)]


def all_cells(board_size: int = BOARD_SIZE) -> List[Cell]:
    return [(r, c) for r in range(board_size) for c in range(board_size)]


def in_bounds(r: int, c: int, board_size: int = BOARD_SIZE) -> bool:
    return 0 <= r < board_size and 0 <= c < board_size


def orthogonal_neighbors(cell: Cell, board_size: int = BOARD_SIZE) -> Iterator[Cell]:
    r, c = cell
    for dr, dc in DIRECTIONS:
        rr = r + dr
        cc = c + dc
        if in_bounds(rr, cc, board_size):
            yield (rr, cc)


def surrounding_cells(cell: Cell, board_size: int = BOARD_SIZE) -> Iterator[Cell]:
    """Yield the in-bounds 8-neighbours of ``cell`` (the cell itself excluded)."""
    r, c = cell
    for dr, dc in NEIGHBORS:
        rr = r + dr
        cc = c + dc
        if in_bounds(rr, cc, board_size):
            yield (rr, cc)


def encode_grid(grid: Grid) -> str:
    """Row-major flat encoding, one character per cell."""
    return "".join("".join(row) for row in grid)


def decode_board(encoding: str, board_size: int = BOARD_SIZE) -> Grid:
    expected = board_size * board_size
    if len(encoding) != expected:
        raise ValueError(f"board encoding must have {expected} characters, got {len(encoding)}")
    bad = sorted(set(encoding) - {EMPTY, SHIP})
    if bad:
        raise ValueError(f"board encoding contains invalid characters: {''.join(bad)!r}")
    return [list(encoding[r * board_size:(r + 1) * board_size]) for r in range(board_size)]


def ship_components(grid: Grid, board_size: Optional[int] = None) -> List[Tuple[Cell, ...]]:
    """Group SHIP cells into 4-connected components, in row-major discovery order."""
    if board_size is None:
        board_size = len(grid)
    visited = [[False] * board_size for _ in range(board_size)]
    components: List[Tuple[Cell, ...]] = []
    for r in range(board_size):
        for c in range(board_size):
            if grid[r][c] != SHIP or visited[r][c]:
                continue
            stack = [(r, c)]
            visited[r][c] = True
            cells: List[Cell] = []
            while stack:
                cur = stack.pop()
                cells.append(cur)
                for rr, cc in orthogonal_neighbors(cur, board_size):
                    if grid[rr][cc] == SHIP and not visited[rr][cc]:
                        visited[rr][cc] = True
                        stack.append((rr, cc))
            components.append(tuple(sorted(cells)))
    return components
