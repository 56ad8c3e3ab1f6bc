from .fleet import FleetDefinition, builtin_fleets, classic_fleet, mini_fleet, resolve_fleet
from .placement import PlacementState, can_place, commit
from .rng import RandomSource, shuffle
from .search import BoardGenerator, GenerationInfeasible, generate_board, generate_board_with_retries
from .shapes import Shape, enumerate_shapes
from .validation import validate_board, validate_fleet

__all__ = [
    "FleetDefinition",
    "PlacementState",
    "RandomSource",
    "Shape",
    "BoardGenerator",
    "GenerationInfeasible",
    "classic_fleet",
    "mini_fleet",
    "builtin_fleets",
    "resolve_fleet",
    "enumerate_shapes",
    "can_place",
    "commit",
    "shuffle",
    "generate_board",
    "generate_board_with_retries",
    "validate_board",
    "validate_fleet",
]
