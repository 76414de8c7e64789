import math

import pytest

from minirt.color import Color
from minirt.scene import (
    AmbientLight,
    Camera,
    Cylinder,
    Plane,
    Scene,
    SceneObject,
    Sphere,
    SpotLight,
)
from minirt.scene import ShapeType
from minirt.vector import Vec


def test_default_scene_is_empty():
    scene = Scene()
    assert scene.objects == []
    assert scene.camera.fov == 0
    assert scene.ambient_light.intensity == 0
    assert scene.spot_light.pos == Vec()


def test_default_scenes_do_not_share_objects():
    a = Scene()
    b = Scene()
    a.objects.append(SceneObject(0, Sphere()))
    assert b.objects == []


@pytest.mark.parametrize(
    "shape, expected",
    [
        (Sphere(), ShapeType.SPHERE),
        (Cylinder(), ShapeType.CYLINDER),
        (Plane(), ShapeType.PLANE),
    ],
)
def test_scene_object_type_follows_shape(shape, expected):
    obj = SceneObject(7, shape)
    assert obj.type is expected
    assert obj.display is True


def test_ambient_mod_color_is_scaled_color():
    light = AmbientLight(Color(200, 100, 50), 0.5)
    assert light.mod_color == Color(200, 100, 50).scaled(0.5)


def test_spot_mod_color_follows_intensity_changes():
    light = SpotLight(Color(255, 255, 255), 1.0, Vec(0, 5, 0))
    assert light.mod_color == Color(255, 255, 255)
    light.intensity = 0.0
    assert light.mod_color == Color(0, 0, 0)


def test_camera_basis_is_orthonormal():
    cam = Camera(fov=70, pos=Vec(1, 2, 3), dir=Vec(0.3, -0.2, 1))
    cam.setup(16 / 9)
    assert cam.dir.length() == pytest.approx(1.0)
    assert cam.right.length() == pytest.approx(1.0)
    assert cam.up.length() == pytest.approx(1.0)
    assert cam.dir.dot(cam.right) == pytest.approx(0.0, abs=1e-9)
    assert cam.dir.dot(cam.up) == pytest.approx(0.0, abs=1e-9)
    assert cam.right.dot(cam.up) == pytest.approx(0.0, abs=1e-9)


def test_camera_screen_geometry():
    cam = Camera(fov=90, pos=Vec(1, 2, 3), dir=Vec(0, 0, 1))
    aspect = 16 / 9
    cam.setup(aspect)
    screen = cam.screen
    assert screen.d == 1.0
    assert screen.width == pytest.approx(2 * math.tan(math.pi / 4))
    assert screen.height == pytest.approx(screen.width / aspect)
    assert screen.center == cam.pos + cam.dir
    back = screen.top_left + cam.right * (screen.width / 2) - cam.up * (screen.height / 2)
    for got, want in zip(back, screen.center):
        assert got == pytest.approx(want)


def test_camera_looking_straight_up_uses_z_as_temporary_up():
    cam = Camera(fov=60, pos=Vec(), dir=Vec(0, 1, 0))
    cam.setup(1.0)
    assert all(not math.isnan(c) for c in cam.right)
    assert cam.right.dot(Vec(0, 0, 1)) == pytest.approx(0.0)
    assert cam.right.length() == pytest.approx(1.0)


def test_camera_looking_straight_down_has_valid_basis():
    cam = Camera(fov=60, pos=Vec(), dir=Vec(0, -1, 0))
    cam.setup(1.0)
    assert cam.up.length() == pytest.approx(1.0)
    assert cam.up.dot(cam.dir) == pytest.approx(0.0)