import math

import pytest

from jmart.camera import Camera, Camera3, Key
from jmart.vertex import Position


def _close(a, b):
    return all(x == pytest.approx(y, abs=1e-9) for x, y in zip(a, b))


def _dist(a, b):
    return math.dist(tuple(a), tuple(b))


def test_camera_defaults():
    cam = Camera()
    assert cam.position == Position(1, 0, 0)
    assert cam.target == Position(0, 0, 0)
    assert cam.up == Position(0, 1, 0)


def test_camera_init_and_reset():
    cam = Camera()
    cam.init((5, 6, 7), (1, 2, 3), (0, 0, 1))
    assert cam.position == Position(5, 6, 7)
    assert cam.target == Position(1, 2, 3)
    cam.reset()
    assert cam.position == Position(1, 0, 0)


def test_camera_left_and_a_move_alike():
    left, a = Camera(), Camera()
    left.update(0.5, {Key.LEFT})
    a.update(0.5, {Key.A})
    assert left.position == a.position
    assert left.position.x < 1.0
    assert left.position.y == 0.0


def test_camera_left_then_right_returns():
    cam = Camera()
    cam.update(0.25, [Key.LEFT])
    cam.update(0.25, [Key.D])
    assert cam.position.x == pytest.approx(1.0)


def test_camera_up_down_moves_y_only():
    cam = Camera()
    cam.update(0.1, [Key.W])
    assert cam.position.y > 0.0
    cam.update(0.1, [Key.DOWN])
    assert cam.position.y == pytest.approx(0.0)
    assert cam.position.x == 1.0


def test_camera_no_keys_no_move():
    cam = Camera()
    cam.update(1.0)
    assert cam.position == Position(1, 0, 0)


def _camera3():
    cam = Camera3()
    cam.init((0, 0, 0), (0, 0, -10), (0, 1, 0))
    return cam


def test_camera3_init_straightens_up_and_sets_targetwhere():
    cam = Camera3()
    cam.init((0, 0, 0), (0, 0, -10), (0, 1, 1))
    assert _close(cam.up, (0, 1, 0))
    assert cam.targetwhere == Position(0, 0, -30)


def test_camera3_centred_cursor_does_nothing():
    cam = _camera3()
    cam.update(0.1, 100, 50, 100, 50)
    assert cam.target == Position(0, 0, -10)
    assert cam.targetwhere == Position(0, 0, -30)


def test_camera3_yaw_left_turns_left_and_keeps_distance():
    cam = _camera3()
    cam.update(0.01, 100, 50, 90, 50)
    assert cam.target.x < 0
    assert _dist(cam.target, cam.position) == pytest.approx(10.0)
    assert cam.target.y == pytest.approx(0.0)
    assert cam.yaw_total > 0


def test_camera3_yaw_left_then_right_returns():
    cam = _camera3()
    cam.update(0.01, 100, 50, 95, 50)
    cam.update(0.01, 100, 50, 105, 50)
    assert _close(cam.target, (0, 0, -10))
    assert _close(cam.targetwhere, (0, 0, -30))
    assert cam.yaw_total == pytest.approx(0.0)


def test_camera3_pitch_up_raises_target():
    cam = _camera3()
    cam.update(0.01, 100, 50, 100, 40)
    assert cam.target.y > 0
    assert _dist(cam.target, cam.position) == pytest.approx(10.0)


def test_camera3_pitch_up_blocked_at_ceiling():
    cam = Camera3()
    cam.init((0, 0, 0), (0, 50, -10), (0, 1, 0))
    before = cam.target
    cam.update(0.01, 100, 50, 100, 40)
    assert cam.target == before


def test_camera3_pitch_down_lowers_target():
    cam = _camera3()
    cam.update(0.01, 100, 50, 100, 60)
    assert cam.target.y < 0


def test_camera3_reset_restores_init():
    cam = _camera3()
    cam.update(0.02, 100, 50, 80, 30)
    assert cam.target != Position(0, 0, -10) or cam.targetwhere != Position(0, 0, -30)
    cam.reset()
    assert cam.target == Position(0, 0, -10)
    assert cam.targetwhere == Position(0, 0, -30)
    assert cam.position == Position(0, 0, 0)


def test_camera3_init_rejects_target_at_position():
    cam = Camera3()
    with pytest.raises(ValueError):
        cam.init((1, 1, 1), (1, 1, 1), (0, 1, 0))