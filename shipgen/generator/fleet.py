import hashlib
import json
from dataclasses import dataclass
from typing import Tuple

from shipgen.domain.config import BOARD_SIZE, FLEET


@dataclass(frozen=True)
class FleetDefinition:
    fleet_id: str
    name: str
    board_size: int
    ship_lengths: Tuple[int, ...]
    fleet_version: int = 1

    def normalized(self) -> dict:
        return {
            "fleet_id": self.fleet_id,
            "name": self.name,
            "board_size": int(self.board_size),
            "ship_lengths": [int(n) for n in self.placement_order()],
        }

    @property
    def fleet_hash(self) -> str:
        payload = json.dumps(self.normalized(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]

    def placement_order(self) -> Tuple[int, ...]:
        """Ship lengths largest first, the order the search places them in."""
        return tuple(sorted(self.ship_lengths, reverse=True))

    def total_cells(self) -> int:
        return sum(self.ship_lengths)


def classic_fleet() -> FleetDefinition:
    return FleetDefinition(
        fleet_id="classic",
        name="Classic no-touch fleet (10x10)",
        board_size=BOARD_SIZE,
        ship_lengths=FLEET,
    )


def mini_fleet() -> FleetDefinition:
    return FleetDefinition(
        fleet_id="mini",
        name="Mini no-touch fleet (6x6)",
        board_size=6,
        ship_lengths=(3, 2, 2, 1, 1),
    )


def builtin_fleets() -> Tuple[FleetDefinition, ...]:
    return (classic_fleet(), mini_fleet())


def resolve_fleet(name: str) -> FleetDefinition:
    name = (name or "classic").strip().lower()
    for fleet in builtin_fleets():
        if fleet.fleet_id == name:
            return fleet
    known = ", ".join(f.fleet_id for f in builtin_fleets())
    raise ValueError(f"Unknown fleet '{name}'. Use one of: {known}.")
