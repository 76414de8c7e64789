"""Phong-style lighting: ambient plus diffuse light, and shadow darkening."""

from __future__ import annotations

import math

from minirt.color import Color
from minirt.intersection import Intersection
from minirt.normals import surface_normal
from minirt.scene import Scene
from minirt.vector import get_vec

SHADOW_EPSILON = 0.0001


def diffuse(scene: Scene, hit: Intersection) -> Color:
    """Spot light colour weighted by the cosine between normal and light direction."""
    normal = surface_normal(hit).normalized()
    to_light = get_vec(hit.pos, scene.spot_light.pos).normalized()
    cosine = normal.dot(to_light)
    if math.isnan(cosine):
        cosine = 0.0
    return scene.spot_light.mod_color.scaled(max(0.0, cosine))


def phong(scene: Scene, hit: Intersection) -> Color:
    """Colour of the hit point lit by ambient and diffuse light."""
    light = scene.ambient_light.mod_color + diffuse(scene, hit)
    return light * hit.shape.color


def shade(scene: Scene, color: Color) -> Color:
    """Darken ``color`` for a point in shadow of the spot light."""
    spot = scene.spot_light.intensity
    if abs(0.0 - spot) > SHADOW_EPSILON:
        return color.scaled(1.0 - (spot - scene.ambient_light.intensity))
    return color