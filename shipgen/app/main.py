import argparse
import random
import sys
from typing import Iterable

from shipgen.domain.config import DEFAULT_MAX_ATTEMPTS
from shipgen.generator import GenerationInfeasible, generate_board_with_retries, resolve_fleet
from shipgen.utils import debug


def format_rows(encoding: str, board_size: int) -> str:
    return "\n".join(encoding[r * board_size:(r + 1) * board_size] for r in range(board_size))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shipgen", description="Generate random no-touch Battleship boards.")
    parser.add_argument("--count", type=int, default=1, help="Number of boards to generate")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument("--attempts", type=int, default=DEFAULT_MAX_ATTEMPTS, help="Retries per board before giving up")
    parser.add_argument("--fleet", default="classic", help="Fleet id (classic|mini)")
    parser.add_argument("--grid", action="store_true", help="Print one row per line instead of the flat string")
    parser.add_argument("--debug", action="store_true", help="Write search events to the debug log")
    return parser


def main(argv: Iterable[str] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    # Enable debug via flag or env var (SHIPGEN_DEBUG=1)
    if args.debug or debug.env_debug_enabled():
        debug.enable_debug()

    if args.count < 1:
        parser.error("--count must be >= 1")
    if args.attempts < 1:
        parser.error("--attempts must be >= 1")
    try:
        fleet = resolve_fleet(args.fleet)
    except ValueError as e:
        parser.error(str(e))

    rng = random.Random(args.seed)
    for i in range(args.count):
        try:
            board = generate_board_with_retries(args.attempts, rng=rng, fleet=fleet)
        except GenerationInfeasible as e:
            print(f"Board {i + 1}: generation failed: {e}", file=sys.stderr)
            return 1
        if args.grid:
            if i:
                print()
            print(format_rows(board, fleet.board_size))
        else:
            print(board)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
