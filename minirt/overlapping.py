"""Hiding objects that exactly duplicate an earlier object."""

from __future__ import annotations

from collections.abc import Sequence

from minirt.scene import Cylinder, Plane, SceneObject, Sphere


def _geometry(obj: SceneObject) -> tuple:
    shape = obj.shape
    if isinstance(shape, Sphere):
        return (Sphere, shape.pos, shape.radius)
    if isinstance(shape, Plane):
        return (Plane, shape.pos, shape.normal)
    if isinstance(shape, Cylinder):
        return (Cylinder, shape.pos, shape.dir, shape.radius, shape.height)
    return (type(shape), id(shape))


def hide_overlapping(objects: Sequence[SceneObject]) -> None:
    """Set ``display`` to False on every object whose geometry repeats an earlier one."""
    for index, current in enumerate(objects):
        key = _geometry(current)
        for later in objects[index + 1:]:
            if _geometry(later) == key:
                later.display = False