"""Rays and the quadratic equations for ray/sphere and ray/cylinder hits."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.scene import Cylinder, Sphere
from minirt.vector import Vec

OUT_OF_BOUNDS = -1.0


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``pos`` going along ``dir``."""

    pos: Vec
    dir: Vec


@dataclass
class Quadratic:
    """Coefficients and roots of ``a*t^2 + b*t + c = 0``.

    Roots are NaN when the discriminant is negative or undefined.
    """

    co: Vec
    a: float
    b: float
    c: float
    discriminant: float
    s1: float = math.nan
    s2: float = math.nan


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _solve(eq: Quadratic) -> None:
    if not eq.discriminant >= 0:
        return
    root = math.sqrt(eq.discriminant)
    eq.s1 = _divide(-eq.b - root, 2 * eq.a)
    eq.s2 = _divide(-eq.b + root, 2 * eq.a)


def sphere_equation(ray: Ray, sphere: Sphere) -> Quadratic:
    """Equation for a ray with a unit direction hitting ``sphere``."""
    co = ray.pos - sphere.pos
    b = 2.0 * co.dot(ray.dir)
    c = co.dot(co) - sphere.radius ** 2
    eq = Quadratic(co=co, a=1.0, b=b, c=c, discriminant=b ** 2 - 4 * c)
    _solve(eq)
    return eq


def cylinder_equation(ray: Ray, cylinder: Cylinder) -> Quadratic:
    """Equation for a ray hitting the side of a finite ``cylinder``.

    A root whose hit point falls outside the cylinder's height is set to -1.
    """
    axis = cylinder.dir.normalized()
    co = ray.pos - cylinder.pos
    ray_axis = ray.dir.dot(axis)
    co_axis = co.dot(axis)
    a = ray.dir.dot(ray.dir) - ray_axis ** 2
    b = 2 * (ray.dir.dot(co) - ray_axis * co_axis)
    c = co.dot(co) - co_axis ** 2 - cylinder.radius ** 2
    eq = Quadratic(co=co, a=a, b=b, c=c, discriminant=b ** 2 - 4 * a * c)
    if eq.discriminant < 0:
        return eq
    _solve(eq)
    extent = axis * cylinder.height
    limit = extent.dot(extent)

    def within_height(t: float) -> bool:
        projection = ((ray.pos + ray.dir * t) - cylinder.pos).dot(extent)
        return not (projection < 0 or projection > limit)

    if not within_height(eq.s1):
        eq.s1 = OUT_OF_BOUNDS
    if not within_height(eq.s2):
        eq.s2 = OUT_OF_BOUNDS
    return eq