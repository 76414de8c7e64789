"""Command line entry point: render a ``.rt`` scene to an image file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from minirt.overlapping import hide_overlapping
from minirt.parsing_utils import SceneParseError
from minirt.render import render_scene
from minirt.scene_file import load_scene

ASPECT_RATIO = 16.0 / 9.0
DEFAULT_HEIGHT = 756


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="miniRT", description="Render a .rt scene.")
    parser.add_argument("scene", nargs="*", help="scene description file (.rt)")
    parser.add_argument("-o", "--output", help="image file to write (default: scene name with .png)")
    parser.add_argument(
        "--height", type=int, default=DEFAULT_HEIGHT, help="image height in pixels"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse the scene file, render it and save the image; return an exit status."""
    args = _build_parser().parse_args(argv)
    if len(args.scene) != 1:
        print("Input Error, try: ./miniRT example_scene.rt")
        return 1
    scene_path = args.scene[0]
    try:
        scene = load_scene(scene_path)
    except SceneParseError as exc:
        print(exc)
        print("Error during parsing")
        return 1
    height = args.height
    width = int(height * ASPECT_RATIO)
    if height <= 0 or width <= 0:
        print("Error initialising data")
        return 1
    scene.camera.setup(ASPECT_RATIO)
    hide_overlapping(scene.objects)
    canvas = render_scene(scene, width, height)
    output = Path(args.output) if args.output else Path(scene_path).with_suffix(".png")
    try:
        canvas.save(output)
    except (OSError, ValueError) as exc:
        print(f"Error writing image: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())