# starforge

Building blocks for a space-building simulation game, with no
dependencies beyond the standard library:

- `starforge.objects`: `FloatPosition`, `IntPosition`, `IntDistance`,
  `Velocity`, `Acceleration`, `FloatOrientation`, `IntOrientation`,
  `PlacedObject`, `RectBounds`, `CircleBounds` and `PhysicalObject`, plus
  small `Vec3` and `Quat` value types. Most types offer `zero()` /
  `identity()` / `null()` and `undefined()` (NaN or full 32-bit range)
  constructors. `IntPosition.to_world_position` scales grid blocks by 2.5 m.
- `starforge.volume`: `Volume`, a point cloud with `unit_cube()` and
  `block_volume()` (a 2.5 m cube).
- `starforge.players`: `Player`, which has health, oxygen, hydrogen and
  energy, and `PlayerDelta` records that can be queued, merged in sequence
  order and applied.
- `starforge.world`: the `World` container and `WorldDelta`, which groups
  time, grid, player and celestial changes keyed by entity id.
- `starforge.threading`: `Threader`, a bounded FIFO job queue feeding a
  worker pool. `global_threader()` returns a shared instance with a queue
  of 4096. `job` and `job_do` submit timed jobs to it.
  `get_job_report`, `get_all_job_reports`, `reset_job_report` and
  `reset_all_job_reports` give per-label timing.
- `starforge.scene_cache`: `SceneCache`, which keeps one render resource
  per object at its current version, with `CacheStats`.
- `starforge.overlay`: `build_overlay` and `OverlayMesh`, the geometry of
  the on-screen HUD. This covers an FPS bar and position bars drawn with a
  tiny block font. Vertices are in normalised device coordinates, and
  `to_bytes()` packs them as little-endian float32 values x, y, r, g, b, a.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Players and deltas:

```python
from starforge.objects import FloatPosition
from starforge.players import Player

player = Player(1, "alice")
player.record_delta(player.create_position_delta(FloatPosition(1.0, 2.0, 3.0), 10, 1))
player.take_damage(30.0)
player.record_delta(player.create_resources_delta(11, 2))

merged = player.compute_and_apply_pending_deltas()
print(merged.position, player.health)
```

Background jobs with timing:

```python
from starforge.threading import get_job_report, job

future = job("square", lambda: 12 * 12)
print(future.result())
print(get_job_report("square"))
```

A private runner that stops cleanly:

```python
from starforge.threading import Threader

with Threader(queue_cap=16) as runner:
    future = runner.submit_result(lambda: sum(range(10)))
    print(future.result())
```

Overlay geometry:

```python
from starforge.objects import Vec3
from starforge.overlay import build_overlay

mesh = build_overlay(60.0, Vec3(5.0, 100.0, -3.0), 1280.0, 720.0)
payload = mesh.to_bytes()
```

## What this package does not do

- It has no game server, client or network protocol. Deltas are plain
  data objects, and sending them anywhere is left to the caller.
- It draws nothing on screen. `SceneCache` stores whatever objects it is
  given. The overlay module produces vertex data only, with no window or
  GPU pipeline.
- It defines no grid (ship) or celestial body types. `World.grids` and
  `World.celestials` hold any objects with an `id` attribute. Their deltas
  need `apply_to` and `estimated_size` methods, plus `grid_id` or
  `celestial_id` when they are added with `WorldDelta.add_grid_delta` or
  `WorldDelta.add_celestial_delta`.