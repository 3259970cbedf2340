import pytest

from quadkit.geometry import Vec2
from quadkit.mouse_camera import MouseCamera


def test_defaults():
    cam = MouseCamera()
    assert cam.offset == Vec2(0.0, 0.0)
    assert cam.scale == 1.0


def test_scale_new_around_origin_keeps_zero_offset():
    cam = MouseCamera()
    cam.scale_new(Vec2(0.0, 0.0), 2.0)
    assert cam.scale == 2.0
    assert cam.offset == Vec2(0.0, 0.0)


def test_scale_new_keeps_center_fixed():
    cam = MouseCamera(Vec2(2.0, -1.0), 1.5)
    center = Vec2(1.0, 0.5)
    before = (center - cam.offset) / cam.scale
    cam.scale_new(center, 3.0)
    after = (center - cam.offset) / cam.scale
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_scale_wheel_in_then_out_round_trips():
    cam = MouseCamera(Vec2(0.3, 0.7), 1.0)
    center = Vec2(0.1, -0.2)
    cam.scale_wheel(center, 1.0, 1.1)
    assert cam.scale == pytest.approx(1.1)
    cam.scale_wheel(center, -1.0, 1.1)
    assert cam.scale == pytest.approx(1.0)
    assert cam.offset.x == pytest.approx(0.3)
    assert cam.offset.y == pytest.approx(0.7)


def test_zero_wheel_changes_nothing():
    cam = MouseCamera(Vec2(0.5, 0.5), 2.0)
    cam.scale_wheel(Vec2(1.0, 1.0), 0.0, 1.1)
    assert cam.scale == 2.0
    assert cam.offset == Vec2(0.5, 0.5)


def test_update_follows_mouse_only_when_asked():
    cam = MouseCamera()
    cam.update(Vec2(1.0, 1.0), True)
    assert cam.offset == Vec2(1.0, 1.0)
    cam.update(Vec2(3.0, 1.0), False)
    assert cam.offset == Vec2(1.0, 1.0)
    cam.update(Vec2(4.0, 2.0), True)
    assert cam.offset == Vec2(2.0, 2.0)