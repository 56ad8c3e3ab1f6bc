from collections import Counter
from typing import List, Optional

from shipgen.domain.board import decode_board, make_mask, ship_components, surrounding_cells

from .fleet import FleetDefinition, classic_fleet


def validate_fleet(fleet: FleetDefinition) -> List[str]:
    errors: List[str] = []

    if fleet.board_size <= 0:
        errors.append("board_size must be positive")

    if not fleet.ship_lengths:
        errors.append("fleet must define at least one ship")

    for i, length in enumerate(fleet.ship_lengths):
        if int(length) <= 0:
            errors.append(f"ship {i} must have length > 0, got {length}")

    if fleet.board_size > 0 and fleet.total_cells() > fleet.board_size * fleet.board_size:
        errors.append(
            f"fleet needs {fleet.total_cells()} cells but the board only has "
            f"{fleet.board_size * fleet.board_size}"
        )

    return errors


def validate_board(encoding: str, fleet: Optional[FleetDefinition] = None) -> List[str]:
    """Check a flat board encoding against ``fleet``; an empty list means valid."""
    if fleet is None:
        fleet = classic_fleet()
    board_size = fleet.board_size
    try:
        grid = decode_board(encoding, board_size)
    except ValueError as e:
        return [str(e)]

    errors: List[str] = []
    components = ship_components(grid, board_size)

    occupied = sum(len(cells) for cells in components)
    if occupied != fleet.total_cells():
        errors.append(f"expected {fleet.total_cells()} ship cells, found {occupied}")

    found = Counter(len(cells) for cells in components)
    wanted = Counter(fleet.ship_lengths)
    if found != wanted:
        errors.append(
            f"ship sizes {sorted(found.elements(), reverse=True)} do not match "
            f"fleet {sorted(wanted.elements(), reverse=True)}"
        )

    masks = [make_mask(cells, board_size) for cells in components]
    for i, cells in enumerate(components):
        halo = make_mask(
            [n for cell in cells for n in surrounding_cells(cell, board_size)],
            board_size,
        )
        for j in range(i + 1, len(components)):
            if halo & masks[j]:
                errors.append(f"ships at {cells[0]} and {components[j][0]} touch")

    return errors
