"""Point-cloud volumes used for block and object shapes."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float, float]


def _cube(half: float) -> list[Point]:
    return [
        (-half, -half, -half), (half, -half, -half),
        (half, half, -half), (-half, half, -half),
        (-half, -half, half), (half, -half, half),
        (half, half, half), (-half, half, half),
    ]


@dataclass
class Volume:
    """A set of corner points placed at a position."""

    points: list[Point] = field(default_factory=list)
    position: Point = (0.0, 0.0, 0.0)

    @classmethod
    def unit_cube(cls) -> Volume:
        return cls(_cube(0.5))

    @classmethod
    def block_volume(cls) -> Volume:
        """The cube of one standard 2.5 m grid block."""
        return cls(_cube(1.25))