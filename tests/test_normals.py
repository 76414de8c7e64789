import pytest

from minirt.intersection import Intersection
from minirt.normals import surface_normal
from minirt.scene import Cylinder, Plane, ShapeType, Sphere
from minirt.vector import Vec


def test_sphere_normal_points_away_from_center():
    sphere = Sphere(pos=Vec(1, 2, 3), radius=2.0)
    hit = Intersection(pos=Vec(1, 2, 1), shape_type=ShapeType.SPHERE, shape=sphere, dist=1.0, id=0)
    normal = surface_normal(hit)
    outward = hit.pos - sphere.pos
    assert normal.cross(outward).length() == pytest.approx(0.0)
    assert normal.dot(outward) > 0
    assert normal.length() == pytest.approx(sphere.radius)


def test_cylinder_normal_is_perpendicular_to_axis():
    cylinder = Cylinder(pos=Vec(0, 0, 0), dir=Vec(0, 1, 0), radius=1.0, height=2.0)
    hit = Intersection(
        pos=Vec(0.6, 1.5, 0.8), shape_type=ShapeType.CYLINDER, shape=cylinder, dist=1.0, id=0
    )
    normal = surface_normal(hit)
    assert normal.dot(cylinder.dir) == pytest.approx(0.0)
    assert normal.length() == pytest.approx(cylinder.radius)
    assert normal.dot(hit.pos) > 0


def test_plane_normal_is_the_plane_normal():
    plane = Plane(pos=Vec(0, 0, 0), normal=Vec(0, 1, 0))
    hit = Intersection(pos=Vec(3, 0, 4), shape_type=ShapeType.PLANE, shape=plane, dist=1.0, id=0)
    assert surface_normal(hit) == plane.normal