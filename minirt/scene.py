"""Scene description: shapes, lights, camera and the whole scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Union

from minirt.color import Color
from minirt.vector import Vec


class ShapeType(Enum):
    SPHERE = 0
    CYLINDER = 1
    PLANE = 2
    NO_SHAPE = 3


class ElementType(IntEnum):
    NOT_IDENTIFIED = -1
    AMBIENT_LIGHT = 0
    SPOT_LIGHT = 1
    CAMERA = 2
    SP = 3
    CY = 4
    PL = 5


@dataclass
class Sphere:
    pos: Vec = field(default_factory=Vec)
    radius: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Cylinder:
    pos: Vec = field(default_factory=Vec)
    dir: Vec = field(default_factory=Vec)
    radius: float = 0.0
    height: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Plane:
    pos: Vec = field(default_factory=Vec)
    normal: Vec = field(default_factory=Vec)
    color: Color = field(default_factory=Color)


Shape = Union[Sphere, Cylinder, Plane]

_SHAPE_TYPES = {Sphere: ShapeType.SPHERE, Cylinder: ShapeType.CYLINDER, Plane: ShapeType.PLANE}


@dataclass
class SceneObject:
    """A shape placed in the scene, with its identifier and visibility."""

    id: int
    shape: Shape
    display: bool = True

    @property
    def type(self) -> ShapeType:
        return _SHAPE_TYPES[type(self.shape)]


@dataclass
class AmbientLight:
    color: Color = field(default_factory=Color)
    intensity: float = 0.0

    @property
    def mod_color(self) -> Color:
        """Light colour scaled by its intensity."""
        return self.color.scaled(self.intensity)


@dataclass
class SpotLight:
    color: Color = field(default_factory=Color)
    intensity: float = 0.0
    pos: Vec = field(default_factory=Vec)

    @property
    def mod_color(self) -> Color:
        """Light colour scaled by its intensity."""
        return self.color.scaled(self.intensity)


@dataclass
class VirtualScreen:
    width: float = 0.0
    height: float = 0.0
    center: Vec = field(default_factory=Vec)
    top_left: Vec = field(default_factory=Vec)
    d: float = 0.0


@dataclass
class Camera:
    fov: int = 0
    pos: Vec = field(default_factory=Vec)
    dir: Vec = field(default_factory=Vec)
    up: Vec = field(default_factory=Vec)
    right: Vec = field(default_factory=Vec)
    screen: VirtualScreen = field(default_factory=VirtualScreen)

    def setup(self, aspect_ratio: float) -> None:
        """Compute the camera basis and the virtual screen in front of it."""
        if self.dir in (Vec(0, 1, 0), Vec(0, -1, 0)):
            temp_up = Vec(0, 0, 1)
        else:
            temp_up = Vec(0, 1, 0)
        screen = self.screen
        screen.d = 1.0
        self.dir = self.dir.normalized()
        self.right = self.dir.cross(temp_up).normalized()
        self.up = self.right.cross(self.dir).normalized()
        screen.width = 2 * screen.d * math.tan(self.fov * math.pi / 360)
        screen.height = screen.width / aspect_ratio
        screen.center = self.pos + self.dir * screen.d
        screen.top_left = (
            screen.center - self.right * (screen.width / 2) + self.up * (screen.height / 2)
        )


@dataclass
class Scene:
    ambient_light: AmbientLight = field(default_factory=AmbientLight)
    spot_light: SpotLight = field(default_factory=SpotLight)
    camera: Camera = field(default_factory=Camera)
    objects: list[SceneObject] = field(default_factory=list)