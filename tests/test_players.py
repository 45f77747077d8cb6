import math

import pytest

from starforge.objects import FloatOrientation, FloatPosition, Velocity
from starforge.players import Player, PlayerDelta


@pytest.fixture
def player():
    return Player(7, "Ada")


def test_new_player_defaults(player):
    assert player.id == 7
    assert player.name == "Ada"
    assert (player.health, player.oxygen, player.hydrogen, player.energy) == (100.0,) * 4
    assert math.isnan(player.position.x)
    assert player.pending_deltas == []
    assert player.faction_id == 0


def test_spawn_and_move(player):
    player.spawn_at(FloatPosition(0.0, 100.0, 0.0), FloatOrientation.identity())
    assert player.position == FloatPosition(0.0, 100.0, 0.0)
    assert player.orientation == FloatOrientation.identity()
    player.move_to(FloatPosition(1.0, 2.0, 3.0))
    assert player.physical_object.placed_object.position == FloatPosition(1.0, 2.0, 3.0)


def test_damage_and_heal_are_clamped(player):
    player.take_damage(30.0)
    assert player.health == 100.0 - 30.0
    player.heal(1000.0)
    assert player.health == 100.0
    player.take_damage(1000.0)
    assert player.health == 0.0
    assert not player.is_alive()


def test_update_resources_drains(player):
    player.update_resources(2.0)
    assert player.oxygen == 100.0 - 2.0
    assert player.energy == 100.0 - 2.0 * 0.5
    assert player.health == 100.0


def test_suffocation_deals_damage(player):
    player.oxygen = 0.5
    player.update_resources(1.0)
    assert player.oxygen == 0.0
    assert player.health == 100.0 - 1.0 * 10.0
    assert player.needs_oxygen()
    player.refill_oxygen()
    assert player.oxygen == 100.0
    assert not player.needs_oxygen()


def test_needs_energy_threshold(player):
    player.energy = 20.0
    assert not player.needs_energy()
    player.energy = 19.9
    assert player.needs_energy()
    player.refill_energy()
    assert player.energy == 100.0


def test_empty_delta():
    delta = PlayerDelta.empty(3, 10, 1)
    assert delta.is_empty()
    assert (delta.player_id, delta.timestamp, delta.sequence) == (3, 10, 1)


def test_position_delta_applies(player):
    delta = player.create_position_delta(FloatPosition(4.0, 5.0, 6.0), 1, 1)
    assert not delta.is_empty()
    assert delta.player_id == player.id
    delta.apply_to(player)
    assert player.position == FloatPosition(4.0, 5.0, 6.0)
    assert player.health == 100.0


def test_resources_delta_round_trip(player):
    player.take_damage(25.0)
    player.update_resources(3.0)
    delta = player.create_resources_delta(5, 2)
    other = Player(7, "Ada")
    delta.apply_to(other)
    assert (other.health, other.oxygen, other.hydrogen, other.energy) == (
        player.health,
        player.oxygen,
        player.hydrogen,
        player.energy,
    )


def test_merge_orders_by_sequence():
    first = PlayerDelta(1, health=50.0, oxygen=40.0, timestamp=100, sequence=1)
    second = PlayerDelta(1, health=60.0, velocity=Velocity(1.0, 0.0, 0.0), timestamp=200, sequence=2)
    merged = PlayerDelta.merge([second, first])
    assert merged.health == 60.0
    assert merged.oxygen == 40.0
    assert merged.velocity == Velocity(1.0, 0.0, 0.0)
    assert (merged.timestamp, merged.sequence) == (200, 2)
    assert first.velocity is None


def test_merge_of_nothing_is_none():
    assert PlayerDelta.merge([]) is None


def test_compute_and_apply_pending(player):
    assert player.compute_and_apply_pending_deltas() is None
    player.record_delta(player.create_position_delta(FloatPosition(1.0, 1.0, 1.0), 1, 1))
    player.record_delta(PlayerDelta(player.id, energy=12.0, timestamp=2, sequence=2))
    merged = player.compute_and_apply_pending_deltas()
    assert merged.position == FloatPosition(1.0, 1.0, 1.0)
    assert player.position == FloatPosition(1.0, 1.0, 1.0)
    assert player.energy == 12.0
    assert player.pending_deltas == []


def test_estimated_size_is_fixed():
    empty = PlayerDelta.empty(1, 0, 0)
    full = Player(1, "x").create_resources_delta(0, 0)
    assert empty.estimated_size() == full.estimated_size()
    assert empty.estimated_size() > 0