"""The game world and the deltas that synchronise it."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Protocol

from starforge.players import Player, PlayerDelta

# Fixed in-memory footprint of one world delta record, in bytes.
_WORLD_DELTA_SIZE = 176


class EntityDelta(Protocol):
    """What a grid or celestial delta must offer to take part in a world delta."""

    def apply_to(self, entity: Any) -> None: ...

    def estimated_size(self) -> int: ...


def _find(entities: Iterable[Any], entity_id: int) -> Optional[Any]:
    return next((entity for entity in entities if entity.id == entity_id), None)


@dataclass
class WorldDelta:
    """Changes to the whole world; only entities that changed are listed."""

    time: Optional[float] = None
    grids_delta: dict[int, Any] = field(default_factory=dict)
    players_delta: dict[int, PlayerDelta] = field(default_factory=dict)
    celestials_delta: dict[int, Any] = field(default_factory=dict)
    timestamp: int = 0
    sequence: int = 0

    @classmethod
    def empty(cls, timestamp: int, sequence: int) -> WorldDelta:
        return cls(timestamp=timestamp, sequence=sequence)

    def apply_to(self, world: World) -> None:
        """Apply every change to the matching entities; unknown ids are ignored."""
        if self.time is not None:
            world.time = self.time
        for collection, deltas in (
            (world.grids, self.grids_delta),
            (world.players, self.players_delta),
            (world.celestials, self.celestials_delta),
        ):
            for entity_id, delta in deltas.items():
                entity = _find(collection, entity_id)
                if entity is not None:
                    delta.apply_to(entity)

    @staticmethod
    def merge(deltas: Iterable[WorldDelta]) -> Optional[WorldDelta]:
        """Fold deltas in sequence order; later entries replace earlier ones."""
        ordered = sorted(deltas, key=lambda d: d.sequence)
        if not ordered:
            return None
        merged = copy.deepcopy(ordered[0])
        for delta in ordered[1:]:
            if delta.time is not None:
                merged.time = delta.time
            merged.grids_delta.update(copy.deepcopy(delta.grids_delta))
            merged.players_delta.update(copy.deepcopy(delta.players_delta))
            merged.celestials_delta.update(copy.deepcopy(delta.celestials_delta))
            merged.timestamp = delta.timestamp
            merged.sequence = delta.sequence
        return merged

    def is_empty(self) -> bool:
        return (
            self.time is None
            and not self.grids_delta
            and not self.players_delta
            and not self.celestials_delta
        )

    def estimated_size(self) -> int:
        """Approximate size in bytes, including every nested delta."""
        nested = (
            *self.grids_delta.values(),
            *self.players_delta.values(),
            *self.celestials_delta.values(),
        )
        return _WORLD_DELTA_SIZE + sum(delta.estimated_size() for delta in nested)

    def add_grid_delta(self, grid_delta: Any) -> None:
        self.grids_delta[grid_delta.grid_id] = grid_delta

    def add_player_delta(self, player_delta: PlayerDelta) -> None:
        self.players_delta[player_delta.player_id] = player_delta

    def add_celestial_delta(self, celestial_delta: Any) -> None:
        self.celestials_delta[celestial_delta.celestial_id] = celestial_delta

    def count_modified_entities(self) -> int:
        return len(self.grids_delta) + len(self.players_delta) + len(self.celestials_delta)


@dataclass
class World:
    seed: int
    name: str
    grids: list[Any] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)
    celestials: list[Any] = field(default_factory=list)
    time: float = 0.0
    pending_deltas: list[WorldDelta] = field(default_factory=list)

    def record_delta(self, delta: WorldDelta) -> None:
        self.pending_deltas.append(delta)

    def compute_and_apply_pending_deltas(self) -> Optional[WorldDelta]:
        """Merge, apply and clear pending deltas, returning the merged one."""
        merged = WorldDelta.merge(self.pending_deltas)
        if merged is not None:
            merged.apply_to(self)
        self.pending_deltas.clear()
        return merged

    def create_time_delta(self, new_time: float, timestamp: int, sequence: int) -> WorldDelta:
        return WorldDelta(time=new_time, timestamp=timestamp, sequence=sequence)