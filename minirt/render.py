"""Casting primary rays through the camera and drawing the scene to a canvas."""

from __future__ import annotations

import os

from PIL import Image

from minirt.color import Color
from minirt.equations import Ray
from minirt.intersection import Intersection, find_intersection, is_blocked
from minirt.lighting import phong, shade
from minirt.scene import Camera, Scene, ShapeType

BACKGROUND = Color(0, 0, 0)


class Canvas:
    """A width x height grid of 0xRRGGBB pixels, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size: {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; positions on the first row or column or outside are ignored."""
        if x >= self.width or y >= self.height or x <= 0 or y <= 0:
            return
        self._pixels[y * self.width + x] = color & 0xFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB value of a pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self._pixels[y * self.width + x]

    def to_image(self) -> Image.Image:
        """Convert the canvas to an RGB image."""
        image = Image.new("RGB", (self.width, self.height))
        image.putdata([(p >> 16 & 0xFF, p >> 8 & 0xFF, p & 0xFF) for p in self._pixels])
        return image

    def save(self, path: str | os.PathLike) -> None:
        """Write the canvas to an image file; the format follows the extension."""
        self.to_image().save(path)


def primary_ray(width: int, height: int, camera: Camera, x: int, y: int) -> Ray:
    """Ray from the camera through pixel (x, y) of the virtual screen."""
    u = x / width
    v = y / height
    screen = camera.screen
    pixel_pos = screen.top_left + (
        camera.right * (u * screen.width) - camera.up * (v * screen.height)
    )
    return Ray(camera.pos, (pixel_pos - camera.pos).normalized())


def pixel_color(hit: Intersection, scene: Scene) -> Color:
    """Lit colour of a hit, darkened when the spot light is blocked; black for no hit."""
    if hit.shape_type is ShapeType.NO_SHAPE:
        return BACKGROUND
    color = phong(scene, hit)
    if is_blocked(scene.spot_light.pos, hit.pos, scene.objects, hit.id):
        color = shade(scene, color)
    return color


def render_scene(scene: Scene, width: int, height: int) -> Canvas:
    """Trace one ray per pixel; the camera must already be set up."""
    canvas = Canvas(width, height)
    for y in range(height):
        for x in range(width):
            ray = primary_ray(width, height, scene.camera, x, y)
            hit = find_intersection(ray, scene.objects)
            canvas.put_pixel(x, y, pixel_color(hit, scene).to_int())
    return canvas