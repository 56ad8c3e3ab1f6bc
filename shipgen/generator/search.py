from typing import Optional, Tuple

from shipgen.domain.config import DEFAULT_MAX_ATTEMPTS
from shipgen.utils.debug import debug_event

from .fleet import FleetDefinition, classic_fleet
from .placement import PlacementState
from .rng import RandomSource, default_rng, permuted
from .shapes import Shape, enumerate_shapes
from .validation import validate_fleet


class GenerationInfeasible(RuntimeError):
    """The search ran out of candidates for one ship. Retrying may succeed."""

    def __init__(self, ship_index: int, ship_size: int, attempts: int = 1):
        self.ship_index = ship_index
        self.ship_size = ship_size
        self.attempts = attempts
        super().__init__(
            f"no valid placement for ship {ship_index} (size {ship_size}) "
            f"after {attempts} attempt(s)"
        )


class BoardGenerator:
    """Randomized largest-first placement search over one fleet.

    Each ``generate()`` call starts from an empty board and an eligible-start
    set holding every cell. For each ship it walks the eligible cells in a
    random order, enumerates candidate shapes from each one in a random order,
    and commits the first shape that does not touch an existing ship. If every
    start and shape is exhausted the run fails with ``GenerationInfeasible``;
    no partial board is ever returned.
    """

    def __init__(self, rng: Optional[RandomSource] = None, fleet: Optional[FleetDefinition] = None):
        self.rng = default_rng(rng)
        self.fleet = fleet if fleet is not None else classic_fleet()
        errors = validate_fleet(self.fleet)
        if errors:
            raise ValueError("invalid fleet: " + "; ".join(errors))

    def new_state(self) -> PlacementState:
        return PlacementState.fresh(self.fleet.board_size)

    def find_placement(self, state: PlacementState, size: int) -> Optional[Shape]:
        starts = permuted(sorted(state.eligible), self.rng)
        for start in starts:
            shapes = enumerate_shapes(state.grid, start, size, self.rng, state.board_size)
            for shape in permuted(shapes, self.rng):
                if state.can_place(shape):
                    return shape
        return None

    def place_ship(self, state: PlacementState, size: int) -> Optional[Shape]:
        """Find and commit one ship of ``size``; None when nothing fits."""
        shape = self.find_placement(state, size)
        if shape is not None:
            state.commit(shape)
        return shape

    def generate(self) -> str:
        state = self.new_state()
        for i, size in enumerate(self.fleet.placement_order()):
            shape = self.place_ship(state, size)
            if shape is None:
                debug_event(
                    "Generation",
                    f"fleet={self.fleet.fleet_id} infeasible at ship={i} size={size}",
                    f"eligible={len(state.eligible)}",
                    level="warning",
                )
                raise GenerationInfeasible(i, size)
            debug_event("Generation", f"ship={i} size={size} cells={list(shape)}")
        return state.encode()


def generate_board(rng: Optional[RandomSource] = None, fleet: Optional[FleetDefinition] = None) -> str:
    """Generate one board; raises ``GenerationInfeasible`` if the search dead-ends."""
    return BoardGenerator(rng, fleet).generate()


def generate_board_with_retries(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[RandomSource] = None,
    fleet: Optional[FleetDefinition] = None,
) -> str:
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    generator = BoardGenerator(rng, fleet)
    last: Tuple[int, int] = (0, 0)
    for attempt in range(1, max_attempts + 1):
        try:
            return generator.generate()
        except GenerationInfeasible as e:
            last = (e.ship_index, e.ship_size)
            debug_event("Generation", f"attempt {attempt}/{max_attempts} failed: {e}", level="warning")
    raise GenerationInfeasible(last[0], last[1], attempts=max_attempts)
