"""Spatial primitives shared by every game entity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Union

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_BLOCK_SIZE = 2.5  # metres per grid block


@dataclass(frozen=True)
class Vec3:
    """A plain three-component vector."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def _about_axis(cls, axis: int, angle: float) -> Quat:
        half = angle * 0.5
        components = [0.0, 0.0, 0.0]
        components[axis] = math.sin(half)
        return cls(*components, math.cos(half))

    @classmethod
    def from_euler_xyz(cls, a: float, b: float, c: float) -> Quat:
        """Rotation about X by ``a``, then Y by ``b``, then Z by ``c`` (intrinsic XYZ)."""
        return cls._about_axis(0, a) * cls._about_axis(1, b) * cls._about_axis(2, c)

    def __mul__(self, rhs: Quat) -> Quat:
        if not isinstance(rhs, Quat):
            return NotImplemented
        x0, y0, z0, w0 = self.x, self.y, self.z, self.w
        x1, y1, z1, w1 = rhs.x, rhs.y, rhs.z, rhs.w
        return Quat(
            w0 * x1 + x0 * w1 + y0 * z1 - z0 * y1,
            w0 * y1 - x0 * z1 + y0 * w1 + z0 * x1,
            w0 * z1 + x0 * y1 - y0 * x1 + z0 * w1,
            w0 * w1 - x0 * x1 - y0 * y1 - z0 * z1,
        )


@dataclass
class FloatPosition:
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> FloatPosition:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def undefined(cls) -> FloatPosition:
        return cls(math.nan, math.nan, math.nan)

    def to_vec3(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


@dataclass
class IntPosition:
    """A position on a block grid, in whole blocks."""

    x: int
    y: int
    z: int

    @classmethod
    def zero(cls) -> IntPosition:
        return cls(0, 0, 0)

    def to_vec3(self) -> Vec3:
        return Vec3(float(self.x), float(self.y), float(self.z))

    def to_world_position(self, grid_position: FloatPosition) -> FloatPosition:
        """World position of this block given the grid's origin."""
        return FloatPosition(
            grid_position.x + self.x * _BLOCK_SIZE,
            grid_position.y + self.y * _BLOCK_SIZE,
            grid_position.z + self.z * _BLOCK_SIZE,
        )


@dataclass
class IntDistance:
    x: int
    y: int
    z: int

    @classmethod
    def zero(cls) -> IntDistance:
        return cls(0, 0, 0)

    def to_vec3(self) -> Vec3:
        return Vec3(float(self.x), float(self.y), float(self.z))

    @classmethod
    def between(cls, a: IntPosition, b: IntPosition) -> IntDistance:
        """Per-axis absolute distance between two grid positions."""
        return cls(abs(b.x - a.x), abs(b.y - a.y), abs(b.z - a.z))


@dataclass
class Velocity:
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Velocity:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def undefined(cls) -> Velocity:
        return cls(math.nan, math.nan, math.nan)


@dataclass
class Acceleration:
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Acceleration:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def undefined(cls) -> Acceleration:
        return cls(math.nan, math.nan, math.nan)


@dataclass
class FloatOrientation:
    pitch: float
    yaw: float
    roll: float

    @classmethod
    def identity(cls) -> FloatOrientation:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def undefined(cls) -> FloatOrientation:
        return cls(math.nan, math.nan, math.nan)

    def to_quat(self) -> Quat:
        return Quat.from_euler_xyz(self.pitch, self.yaw, self.roll)


@dataclass
class IntOrientation:
    pitch: int
    yaw: int
    roll: int

    @classmethod
    def identity(cls) -> IntOrientation:
        return cls(0, 0, 0)

    def to_quat(self) -> Quat:
        return Quat.from_euler_xyz(float(self.pitch), float(self.yaw), float(self.roll))


@dataclass
class PlacedObject:
    """Something that has a place and a facing in the world."""

    position: FloatPosition = field(default_factory=FloatPosition.zero)
    orientation: FloatOrientation = field(default_factory=FloatOrientation.identity)

    @classmethod
    def default(cls) -> PlacedObject:
        return cls(FloatPosition.zero(), FloatOrientation.identity())

    @classmethod
    def undefined(cls) -> PlacedObject:
        return cls(FloatPosition.undefined(), FloatOrientation.undefined())


@dataclass
class RectBounds:
    kind: ClassVar[str] = "Rectangular"

    x_min: int
    x_max: int
    y_min: int
    y_max: int
    z_min: int
    z_max: int

    @classmethod
    def null(cls) -> RectBounds:
        return cls(0, 0, 0, 0, 0, 0)

    @classmethod
    def undefined(cls) -> RectBounds:
        return cls(_I32_MIN, _I32_MAX, _I32_MIN, _I32_MAX, _I32_MIN, _I32_MAX)


@dataclass
class CircleBounds:
    kind: ClassVar[str] = "Circular"

    radius: float

    @classmethod
    def null(cls) -> CircleBounds:
        return cls(0.0)

    @classmethod
    def undefined(cls) -> CircleBounds:
        return cls(math.nan)


Boundaries = Union[RectBounds, CircleBounds]


@dataclass
class PhysicalObject:
    """A placed object with motion, mass and collision bounds."""

    placed_object: PlacedObject
    velocity: Velocity
    acceleration: Acceleration
    mass: float
    boundaries: Boundaries

    @classmethod
    def undefined(cls) -> PhysicalObject:
        return cls(
            PlacedObject.undefined(),
            Velocity.undefined(),
            Acceleration.undefined(),
            math.nan,
            RectBounds.undefined(),
        )