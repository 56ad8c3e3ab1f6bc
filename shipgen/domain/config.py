# Board and cell constants
BOARD_SIZE = 10

EMPTY = "."
SHIP = "#"

# Ship lengths, largest first. Placement order matters: big ships go down
# while the board still has the most free space.
FLEET = (4, 3, 3, 2, 2, 2, 1, 1, 1, 1)

# Orthogonal growth directions for shape enumeration.
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))

# 8-neighbourhood used for the no-touching rule.
NEIGHBORS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

# Retry cap for generate_board_with_retries / the CLI.
DEFAULT_MAX_ATTEMPTS = 100

DEBUG_ENV_VAR = "SHIPGEN_DEBUG"
