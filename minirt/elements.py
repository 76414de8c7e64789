"""Parsing of individual scene elements (lights, camera and shapes)."""

from __future__ import annotations

from minirt.parsing_utils import SceneParseError, skip_space
from minirt.scene import (
    AmbientLight,
    Camera,
    Cylinder,
    ElementType,
    Plane,
    Scene,
    SceneObject,
    Sphere,
    SpotLight,
)
from minirt.values import FieldReader


def _finish(reader: FieldReader) -> None:
    if not reader.at_end():
        raise SceneParseError(f"unexpected trailing data: {reader.remaining.strip()!r}")


def parse_ambient_light(description: str) -> AmbientLight:
    """Parse ``<ratio> <r,g,b>``."""
    reader = FieldReader(description)
    intensity = reader.read_intensity()
    color = reader.read_rgb()
    _finish(reader)
    return AmbientLight(color=color, intensity=intensity)


def parse_spot_light(description: str) -> SpotLight:
    """Parse ``<x,y,z> <ratio> <r,g,b>``."""
    reader = FieldReader(description)
    pos = reader.read_position()
    intensity = reader.read_intensity()
    color = reader.read_rgb()
    _finish(reader)
    return SpotLight(color=color, intensity=intensity, pos=pos)


def parse_camera(description: str) -> Camera:
    """Parse ``<x,y,z> <dx,dy,dz> <fov>``."""
    reader = FieldReader(description)
    pos = reader.read_position()
    direction = reader.read_direction()
    fov = reader.read_fov()
    _finish(reader)
    return Camera(fov=fov, pos=pos, dir=direction)


def parse_sphere(description: str) -> Sphere:
    """Parse ``<x,y,z> <radius> <r,g,b>``."""
    reader = FieldReader(description)
    pos = reader.read_position()
    radius = reader.read_float()
    color = reader.read_rgb()
    _finish(reader)
    return Sphere(pos=pos, radius=radius, color=color)


def parse_cylinder(description: str) -> Cylinder:
    """Parse ``<x,y,z> <dx,dy,dz> <radius> <height> <r,g,b>``."""
    reader = FieldReader(description)
    pos = reader.read_position()
    direction = reader.read_direction()
    radius = reader.read_float()
    height = reader.read_float()
    color = reader.read_rgb()
    _finish(reader)
    return Cylinder(pos=pos, dir=direction, radius=radius, height=height, color=color)


def parse_plane(description: str) -> Plane:
    """Parse ``<x,y,z> <nx,ny,nz> <r,g,b>``."""
    reader = FieldReader(description)
    pos = reader.read_position()
    normal = reader.read_direction()
    color = reader.read_rgb()
    _finish(reader)
    return Plane(pos=pos, normal=normal, color=color)


_SHAPE_PARSERS = {
    ElementType.SP: parse_sphere,
    ElementType.CY: parse_cylinder,
    ElementType.PL: parse_plane,
}


def parse_element(scene: Scene, description: str | None, kind: ElementType) -> None:
    """Parse ``description`` as an element of ``kind`` and store it in ``scene``."""
    if description is None:
        raise SceneParseError("missing element description")
    description = skip_space(description)
    if kind == ElementType.AMBIENT_LIGHT:
        scene.ambient_light = parse_ambient_light(description)
    elif kind == ElementType.SPOT_LIGHT:
        scene.spot_light = parse_spot_light(description)
    elif kind == ElementType.CAMERA:
        scene.camera = parse_camera(description)
    elif kind in _SHAPE_PARSERS:
        shape = _SHAPE_PARSERS[kind](description)
        scene.objects.append(SceneObject(id=len(scene.objects), shape=shape))
    else:
        raise SceneParseError("unidentified element")