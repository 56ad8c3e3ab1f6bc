from dataclasses import dataclass
from typing import Iterable, Optional, Set

from shipgen.domain.board import Cell, Grid, all_cells, create_grid, encode_grid, surrounding_cells
from shipgen.domain.config import BOARD_SIZE, SHIP


def can_place(grid: Grid, shape: Iterable[Cell], board_size: Optional[int] = None) -> bool:
    """True if no cell of ``shape`` touches (or sits on) an already committed ship."""
    if board_size is None:
        board_size = len(grid)
    for r, c in shape:
        if grid[r][c] == SHIP:
            return False
        for rr, cc in surrounding_cells((r, c), board_size):
            if grid[rr][cc] == SHIP:
                return False
    return True


def commit(grid: Grid, eligible: Set[Cell], shape: Iterable[Cell], board_size: Optional[int] = None) -> None:
    """Mark ``shape`` as SHIP and drop it and its 8-neighbourhood from ``eligible``.

    Every write to the grid goes through here so the eligible-start set never
    holds an occupied cell or a cell touching a ship.
    """
    if board_size is None:
        board_size = len(grid)
    cells = list(shape)
    for r, c in cells:
        grid[r][c] = SHIP
    for cell in cells:
        eligible.discard(cell)
    for cell in cells:
        for neighbor in surrounding_cells(cell, board_size):
            eligible.discard(neighbor)


@dataclass
class PlacementState:
    grid: Grid
    eligible: Set[Cell]
    board_size: int = BOARD_SIZE

    @classmethod
    def fresh(cls, board_size: int = BOARD_SIZE) -> "PlacementState":
        return cls(create_grid(board_size), set(all_cells(board_size)), board_size)

    def can_place(self, shape: Iterable[Cell]) -> bool:
        return can_place(self.grid, shape, self.board_size)

    def commit(self, shape: Iterable[Cell]) -> None:
        commit(self.grid, self.eligible, shape, self.board_size)

    def encode(self) -> str:
        return encode_grid(self.grid)
