"""Surface normals at intersection points."""

from __future__ import annotations

from minirt.intersection import Intersection
from minirt.scene import ShapeType
from minirt.vector import Vec, get_vec


def surface_normal(hit: Intersection) -> Vec:
    """Outward (not normalized) normal of the hit shape at the hit point."""
    shape = hit.shape
    if hit.shape_type is ShapeType.SPHERE:
        return get_vec(shape.pos, hit.pos)
    if hit.shape_type is ShapeType.CYLINDER:
        pc = get_vec(shape.pos, hit.pos)
        along_axis = shape.dir * shape.dir.dot(pc)
        return get_vec(along_axis, pc)
    return shape.normal