#!/usr/bin/env python3
import argparse
import hashlib
import random
import statistics
import time
from typing import Iterable, List

from shipgen.generator import GenerationInfeasible, builtin_fleets, generate_board, resolve_fleet, validate_board


def _stable_seed(global_seed: int, fleet_id: str, game_index: int) -> int:
    payload = f"{int(global_seed)}|{fleet_id}|{int(game_index)}".encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8).digest()
    return int.from_bytes(digest, "little") & 0x7FFFFFFF


def _percentile(values: List[float], pct: float) -> float:
    if not values:
        return 0.0
    if pct <= 0:
        return float(values[0])
    if pct >= 100:
        return float(values[-1])
    k = (len(values) - 1) * (pct / 100.0)
    f = int(k)
    c = min(f + 1, len(values) - 1)
    if f == c:
        return float(values[f])
    d0 = values[f] * (c - k)
    d1 = values[c] * (k - f)
    return float(d0 + d1)


def _resolve_fleets(raw: str):
    if not raw or raw.strip().lower() in {"all", "*"}:
        return list(builtin_fleets())
    return [resolve_fleet(name) for name in raw.split(",") if name.strip()]


def _run_fleet(fleet, games: int, seed: int) -> dict:
    times: List[float] = []
    boards = set()
    failures = 0
    invalid = 0
    for i in range(games):
        rng = random.Random(_stable_seed(seed, fleet.fleet_id, i))
        start = time.perf_counter()
        try:
            board = generate_board(rng=rng, fleet=fleet)
        except GenerationInfeasible:
            failures += 1
            continue
        finally:
            times.append(time.perf_counter() - start)
        if validate_board(board, fleet):
            invalid += 1
        boards.add(board)
    times_sorted = sorted(times)
    return {
        "games": games,
        "ok": games - failures,
        "invalid": invalid,
        "distinct": len(boards),
        "mean_ms": 1000.0 * statistics.mean(times) if times else 0.0,
        "median_ms": 1000.0 * statistics.median(times_sorted) if times_sorted else 0.0,
        "p90_ms": 1000.0 * _percentile(times_sorted, 90.0),
        "p95_ms": 1000.0 * _percentile(times_sorted, 95.0),
    }


def main(argv: Iterable[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Generation harness: success rate and timing on fixed RNG seeds.")
    parser.add_argument("--fleets", default="all", help="Comma-separated fleet ids or 'all'")
    parser.add_argument("--games", type=int, default=500, help="Boards per fleet")
    parser.add_argument("--seed", type=int, default=1337, help="Global seed")
    args = parser.parse_args(list(argv) if argv is not None else None)

    print(f"Boards per fleet: {args.games}, Seed: {args.seed}")
    print()

    header = f"{'Fleet':<10} {'OK':>6} {'Invalid':>7} {'Distinct':>8} {'Mean':>8} {'Median':>8} {'P90':>8} {'P95':>8}"
    print(header)
    print("-" * len(header))
    for fleet in _resolve_fleets(args.fleets):
        s = _run_fleet(fleet, args.games, args.seed)
        print(
            f"{fleet.fleet_id:<10} {s['ok']:>6} {s['invalid']:>7} {s['distinct']:>8} "
            f"{s['mean_ms']:>8.2f} {s['median_ms']:>8.2f} {s['p90_ms']:>8.2f} {s['p95_ms']:>8.2f}"
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
