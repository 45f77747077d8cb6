import struct

import pytest

from starforge.objects import FloatPosition, Vec3
from starforge.overlay import OverlayMesh, OverlayVertex, build_overlay

WHITE = (1.0, 1.0, 1.0, 1.0)


def _colors(mesh):
    return {v.color for v in mesh.vertices}


def test_full_screen_rect_maps_to_device_corners():
    mesh = OverlayMesh(800.0, 600.0)
    mesh.add_rect(0.0, 0.0, 800.0, 600.0, WHITE)
    positions = [v.position for v in mesh.vertices]
    assert positions == [
        (-1.0, 1.0), (1.0, 1.0), (-1.0, -1.0),
        (1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),
    ]
    assert all(v.color == WHITE for v in mesh.vertices)


def test_rect_always_adds_two_triangles():
    mesh = OverlayMesh(100.0, 100.0)
    mesh.add_rect(5.0, 5.0, 10.0, 10.0, WHITE)
    mesh.add_rect(20.0, 20.0, 1.0, 1.0, WHITE)
    assert len(mesh) == 12


def test_unknown_character_draws_nothing():
    mesh = OverlayMesh(100.0, 100.0)
    mesh.add_char(0.0, 0.0, "Z", WHITE)
    assert mesh.vertices == []


def test_text_is_sum_of_its_characters():
    text = OverlayMesh(640.0, 480.0)
    text.add_text(10.0, 10.0, "FPS:", WHITE)
    total = 0
    for ch in "FPS:":
        single = OverlayMesh(640.0, 480.0)
        single.add_char(0.0, 0.0, ch, WHITE)
        assert len(single) > 0
        assert len(single) % 6 == 0
        total += len(single)
    assert len(text) == total


def test_text_characters_are_spaced_by_eight_pixels():
    mesh = OverlayMesh(800.0, 600.0)
    mesh.add_text(0.0, 0.0, "FF", WHITE)
    half = len(mesh) // 2
    first, second = mesh.vertices[:half], mesh.vertices[half:]
    shift = 8.0 / 800.0 * 2.0
    for a, b in zip(first, second):
        assert b.position[0] == pytest.approx(a.position[0] + shift)
        assert b.position[1] == pytest.approx(a.position[1])


def test_number_digits_are_spaced_by_ten_pixels():
    mesh = OverlayMesh(800.0, 600.0)
    mesh.add_number(0.0, 0.0, 77, WHITE)
    half = len(mesh) // 2
    shift = 10.0 / 800.0 * 2.0
    for a, b in zip(mesh.vertices[:half], mesh.vertices[half:]):
        assert b.position[0] == pytest.approx(a.position[0] + shift)


def test_negative_number_includes_minus_sign():
    positive = OverlayMesh(800.0, 600.0)
    positive.add_number(0.0, 0.0, 5, WHITE)
    minus = OverlayMesh(800.0, 600.0)
    minus.add_number(0.0, 0.0, -5, WHITE)
    assert len(minus) == len(positive) + 3 * 6


def test_to_bytes_round_trip():
    mesh = OverlayMesh(200.0, 100.0)
    mesh.add_rect(10.0, 20.0, 30.0, 40.0, (0.25, 0.5, 0.75, 1.0))
    data = mesh.to_bytes()
    assert len(data) == len(mesh) * 24
    for vertex, values in zip(mesh.vertices, struct.iter_unpack("<6f", data)):
        assert values[:2] == pytest.approx(vertex.position)
        assert values[2:] == pytest.approx(vertex.color)


@pytest.mark.parametrize(
    "fps, expected",
    [
        (60.0, (0.0, 1.0, 0.0, 1.0)),
        (40.0, (1.0, 1.0, 0.0, 1.0)),
        (10.0, (1.0, 0.0, 0.0, 1.0)),
    ],
)
def test_fps_bar_color(fps, expected):
    colors = _colors(build_overlay(fps, None, 800.0, 600.0))
    assert expected in colors
    others = {(0.0, 1.0, 0.0, 1.0), (1.0, 1.0, 0.0, 1.0), (1.0, 0.0, 0.0, 1.0)} - {expected}
    assert not colors & others


def test_fps_bar_width_is_capped():
    slow = build_overlay(144.0, None, 800.0, 600.0)
    fast = build_overlay(1000.0, None, 800.0, 600.0)
    green = (0.0, 1.0, 0.0, 1.0)
    slow_bar = [v.position for v in slow.vertices if v.color == green]
    fast_bar = [v.position for v in fast.vertices if v.color == green]
    assert slow_bar == pytest.approx(fast_bar)


def test_position_section_is_appended():
    without = build_overlay(60.0, None, 800.0, 600.0)
    with_pos = build_overlay(60.0, Vec3(12.0, -3.0, 250.0), 800.0, 600.0)
    assert len(with_pos) > len(without)
    assert with_pos.vertices[: len(without)] == without.vertices
    colors = _colors(with_pos)
    assert {(1.0, 0.3, 0.3, 1.0), (0.3, 1.0, 0.3, 1.0), (0.3, 0.3, 1.0, 1.0)} <= colors


def test_overlay_accepts_float_position():
    a = build_overlay(30.0, FloatPosition(1.0, 2.0, 3.0), 1024.0, 768.0)
    b = build_overlay(30.0, Vec3(1.0, 2.0, 3.0), 1024.0, 768.0)
    assert a.vertices == b.vertices


def test_panel_is_first_rect():
    mesh = build_overlay(60.0, None, 800.0, 600.0)
    assert all(v.color == (0.1, 0.1, 0.1, 0.8) for v in mesh.vertices[:6])
    assert isinstance(mesh.vertices[0], OverlayVertex)
    assert mesh.vertices[0].position[0] == pytest.approx(10.0 / 800.0 * 2.0 - 1.0)


def test_nan_fps_still_builds():
    mesh = build_overlay(float("nan"), None, 800.0, 600.0)
    zero = build_overlay(0.0, None, 800.0, 600.0)
    assert len(mesh) == len(zero)