"""Players, their vital resources and the deltas that change them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from typing import Iterable, Optional

from starforge.objects import (
    Acceleration,
    FloatOrientation,
    FloatPosition,
    PhysicalObject,
    Velocity,
)

_MAX_HEALTH = 100.0
_FULL_TANK = 100.0
_LOW_RESOURCE = 20.0
# Fixed in-memory footprint of one delta record, in bytes.
_DELTA_SIZE = 104

_CHANGE_FIELDS = ("position", "orientation", "velocity", "health", "oxygen", "hydrogen", "energy")


@dataclass
class PlayerDelta:
    """Changes to one player; a field left as None is unchanged."""

    player_id: int
    position: Optional[FloatPosition] = None
    orientation: Optional[FloatOrientation] = None
    velocity: Optional[Velocity] = None
    health: Optional[float] = None
    oxygen: Optional[float] = None
    hydrogen: Optional[float] = None
    energy: Optional[float] = None
    timestamp: int = 0
    sequence: int = 0

    @classmethod
    def empty(cls, player_id: int, timestamp: int, sequence: int) -> PlayerDelta:
        return cls(player_id, timestamp=timestamp, sequence=sequence)

    def apply_to(self, player: Player) -> None:
        placed = player.physical_object.placed_object
        if self.position is not None:
            placed.position = copy.copy(self.position)
        if self.orientation is not None:
            placed.orientation = copy.copy(self.orientation)
        if self.velocity is not None:
            player.physical_object.velocity = copy.copy(self.velocity)
        if self.health is not None:
            player.health = self.health
        if self.oxygen is not None:
            player.oxygen = self.oxygen
        if self.hydrogen is not None:
            player.hydrogen = self.hydrogen
        if self.energy is not None:
            player.energy = self.energy

    @staticmethod
    def merge(deltas: Iterable[PlayerDelta]) -> Optional[PlayerDelta]:
        """Fold deltas in sequence order; later values win. None if there are none."""
        ordered = sorted(deltas, key=lambda d: d.sequence)
        if not ordered:
            return None
        merged = copy.deepcopy(ordered[0])
        for delta in ordered[1:]:
            for name in _CHANGE_FIELDS:
                value = getattr(delta, name)
                if value is not None:
                    setattr(merged, name, copy.copy(value))
            merged.timestamp = delta.timestamp
            merged.sequence = delta.sequence
        return merged

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in _CHANGE_FIELDS)

    def estimated_size(self) -> int:
        return _DELTA_SIZE


@dataclass
class Player:
    id: int
    name: str
    physical_object: PhysicalObject = field(default_factory=PhysicalObject.undefined)
    health: float = _MAX_HEALTH
    oxygen: float = _FULL_TANK
    hydrogen: float = _FULL_TANK
    energy: float = _FULL_TANK
    pending_deltas: list[PlayerDelta] = field(default_factory=list)
    faction_id: int = 0

    @property
    def position(self) -> FloatPosition:
        return self.physical_object.placed_object.position

    @position.setter
    def position(self, value: FloatPosition) -> None:
        self.physical_object.placed_object.position = value

    @property
    def orientation(self) -> FloatOrientation:
        return self.physical_object.placed_object.orientation

    @orientation.setter
    def orientation(self, value: FloatOrientation) -> None:
        self.physical_object.placed_object.orientation = value

    @property
    def velocity(self) -> Velocity:
        return self.physical_object.velocity

    @velocity.setter
    def velocity(self, value: Velocity) -> None:
        self.physical_object.velocity = value

    @property
    def acceleration(self) -> Acceleration:
        return self.physical_object.acceleration

    @acceleration.setter
    def acceleration(self, value: Acceleration) -> None:
        self.physical_object.acceleration = value

    def spawn_at(self, position: FloatPosition, orientation: FloatOrientation) -> None:
        self.position = position
        self.orientation = orientation

    def is_alive(self) -> bool:
        return self.health > 0.0

    def take_damage(self, damage: float) -> None:
        self.health = max(self.health - damage, 0.0)

    def heal(self, amount: float) -> None:
        self.health = min(self.health + amount, _MAX_HEALTH)

    def update_resources(self, delta_time: float) -> None:
        """Drain oxygen and energy; suffocation deals 10 damage per second."""
        self.oxygen = max(self.oxygen - delta_time, 0.0)
        self.energy = max(self.energy - delta_time * 0.5, 0.0)
        if self.oxygen <= 0.0:
            self.take_damage(delta_time * 10.0)

    def refill_oxygen(self) -> None:
        self.oxygen = _FULL_TANK

    def refill_energy(self) -> None:
        self.energy = _FULL_TANK

    def needs_oxygen(self) -> bool:
        return self.oxygen < _LOW_RESOURCE

    def needs_energy(self) -> bool:
        return self.energy < _LOW_RESOURCE

    def move_to(self, position: FloatPosition) -> None:
        self.position = position

    def record_delta(self, delta: PlayerDelta) -> None:
        self.pending_deltas.append(delta)

    def compute_and_apply_pending_deltas(self) -> Optional[PlayerDelta]:
        """Merge, apply and clear pending deltas, returning the merged one."""
        merged = PlayerDelta.merge(self.pending_deltas)
        if merged is not None:
            merged.apply_to(self)
        self.pending_deltas.clear()
        return merged

    def create_position_delta(
        self, new_position: FloatPosition, timestamp: int, sequence: int
    ) -> PlayerDelta:
        return PlayerDelta(self.id, position=new_position, timestamp=timestamp, sequence=sequence)

    def create_resources_delta(self, timestamp: int, sequence: int) -> PlayerDelta:
        return PlayerDelta(
            self.id,
            health=self.health,
            oxygen=self.oxygen,
            hydrogen=self.hydrogen,
            energy=self.energy,
            timestamp=timestamp,
            sequence=sequence,
        )


assert {f.name for f in fields(PlayerDelta)} >= set(_CHANGE_FIELDS)