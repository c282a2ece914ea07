import pytest

from halozero.camera import Camera
from halozero.structs import Point2f, Rectf

BOUNDS = Rectf(0, 0, 2000, 800)


@pytest.fixture
def camera():
    cam = Camera(360, 240)
    cam.set_level_boundaries(BOUNDS)
    return cam


def test_default_size():
    cam = Camera()
    assert (cam.width, cam.height) == (360, 240)


def test_clamps_to_left_and_bottom(camera):
    pos = camera.camera_pos(Rectf(-100, -100, 10, 10))
    assert pos == Point2f(BOUNDS.left, BOUNDS.bottom)


def test_clamps_to_right_and_top(camera):
    pos = camera.camera_pos(Rectf(5000, 5000, 10, 10))
    assert pos == Point2f(
        BOUNDS.left + BOUNDS.width - camera.width,
        BOUNDS.bottom + BOUNDS.height - camera.height,
    )


def test_follows_target_linearly_in_middle(camera):
    first = camera.camera_pos(Rectf(900, 400, 20, 40))
    second = camera.camera_pos(Rectf(950, 430, 20, 40))
    assert second.x - first.x == pytest.approx(50)
    assert second.y - first.y == pytest.approx(30)


def test_tracks_right_edge_and_vertical_middle(camera):
    pos = camera.camera_pos(Rectf(900, 400, 20, 40))
    assert pos == Point2f(900 + 20 - 360 / 2, 400 + 40 / 2 - 240 / 2)


@pytest.mark.parametrize(
    "target",
    [Rectf(0, 0, 5, 5), Rectf(1000, 300, 30, 60), Rectf(1990, 790, 10, 10), Rectf(-50, 900, 1, 1)],
)
def test_view_stays_inside_bounds(camera, target):
    pos = camera.camera_pos(target)
    assert BOUNDS.left <= pos.x <= BOUNDS.left + BOUNDS.width - camera.width
    assert BOUNDS.bottom <= pos.y <= BOUNDS.bottom + BOUNDS.height - camera.height


def test_without_boundaries_clamps_to_origin():
    cam = Camera(100, 50)
    assert cam.camera_pos(Rectf(-500, -500, 1, 1)) == Point2f(0, 0)