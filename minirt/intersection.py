"""Finding the closest shape hit by a ray and testing for occluders."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from minirt.equations import Quadratic, Ray, cylinder_equation, sphere_equation
from minirt.scene import Cylinder, Plane, SceneObject, Shape, ShapeType, Sphere
from minirt.vector import Vec

NO_HIT = -1


@dataclass
class Intersection:
    """The closest hit found so far; ``shape_type`` is NO_SHAPE when nothing was hit."""

    pos: Vec = field(default_factory=Vec)
    shape_type: ShapeType = ShapeType.NO_SHAPE
    shape: Shape | None = None
    dist: float = float(NO_HIT)
    id: int = NO_HIT

    def _is_closer(self, t: float) -> bool:
        return t < self.dist or self.dist == NO_HIT

    def _record(self, ray: Ray, t: float, shape: Shape, shape_type: ShapeType, obj_id: int) -> None:
        self.id = obj_id
        self.shape = shape
        self.shape_type = shape_type
        self.pos = ray.pos + ray.dir * t
        self.dist = t


def _nearest_root(eq: Quadratic, inter: Intersection) -> float | None:
    s1, s2 = eq.s1, eq.s2
    if s1 > 0 and (s2 < 0 or s1 < s2) and inter._is_closer(s1):
        return s1
    if s2 > 0 and (s1 < 0 or s2 < s1) and inter._is_closer(s2):
        return s2
    return None


def _hit_sphere(ray: Ray, sphere: Sphere, inter: Intersection, obj_id: int) -> None:
    eq = sphere_equation(ray, sphere)
    if eq.discriminant < 0:
        return
    t = _nearest_root(eq, inter)
    if t is not None:
        inter._record(ray, t, sphere, ShapeType.SPHERE, obj_id)


def _hit_plane(ray: Ray, plane: Plane, inter: Intersection, obj_id: int) -> None:
    normal = plane.normal.normalized()
    denominator = ray.dir.dot(normal)
    if denominator == 0:
        return
    t = (plane.pos - ray.pos).dot(normal) / denominator
    if t > 0 and inter._is_closer(t):
        inter._record(ray, t, replace(plane, normal=normal), ShapeType.PLANE, obj_id)


def _hit_cylinder(ray: Ray, cylinder: Cylinder, inter: Intersection, obj_id: int) -> None:
    cylinder = replace(cylinder, dir=cylinder.dir.normalized())
    eq = cylinder_equation(ray, cylinder)
    if eq.discriminant < 0:
        return
    t = _nearest_root(eq, inter)
    if t is not None:
        inter._record(ray, t, cylinder, ShapeType.CYLINDER, obj_id)


def find_intersection(ray: Ray, objects: Iterable[SceneObject]) -> Intersection:
    """Closest displayed object hit in front of the ray's origin."""
    inter = Intersection()
    for obj in objects:
        if not obj.display:
            continue
        shape = obj.shape
        if isinstance(shape, Sphere):
            _hit_sphere(ray, shape, inter, obj.id)
        elif isinstance(shape, Plane):
            _hit_plane(ray, shape, inter, obj.id)
        elif isinstance(shape, Cylinder):
            _hit_cylinder(ray, shape, inter, obj.id)
    return inter


def _segment(p1: Vec, p2: Vec) -> tuple[Ray, float]:
    direction = p2 - p1
    return Ray(p1, direction.normalized()), direction.length()


def _roots_within(eq: Quadratic, length: float) -> bool:
    return 0 < eq.s1 < length or 0 < eq.s2 < length


def _sphere_between(p1: Vec, p2: Vec, sphere: Sphere) -> bool:
    ray, length = _segment(p1, p2)
    eq = sphere_equation(ray, sphere)
    if eq.discriminant < 0:
        return False
    return _roots_within(eq, length)


def _plane_between(p1: Vec, p2: Vec, plane: Plane) -> bool:
    ray, length = _segment(p1, p2)
    normal = plane.normal.normalized()
    denominator = ray.dir.dot(normal)
    if denominator == 0:
        return False
    t = (plane.pos - ray.pos).dot(normal) / denominator
    return 0 < t < length


def _cylinder_between(p1: Vec, p2: Vec, cylinder: Cylinder) -> bool:
    cylinder = replace(cylinder, dir=cylinder.dir.normalized())
    ray, length = _segment(p1, p2)
    eq = cylinder_equation(ray, cylinder)
    if eq.discriminant < 0:
        return False
    return _roots_within(eq, length)


def is_blocked(p1: Vec, p2: Vec, objects: Iterable[SceneObject], skip_id: int) -> bool:
    """True when a displayed object other than ``skip_id`` lies between the two points."""
    for obj in objects:
        if obj.id == skip_id or not obj.display:
            continue
        shape = obj.shape
        if isinstance(shape, Sphere) and _sphere_between(p1, p2, shape):
            return True
        if isinstance(shape, Plane) and _plane_between(p1, p2, shape):
            return True
        if isinstance(shape, Cylinder) and _cylinder_between(p1, p2, shape):
            return True
    return False