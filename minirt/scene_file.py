"""Reading a whole ``.rt`` scene file."""

from __future__ import annotations

import os
from collections.abc import Iterable

from minirt.elements import parse_element
from minirt.parsing_utils import SceneParseError
from minirt.scene import ElementType, Scene
from minirt.values import identify_element

_UNIQUE_ELEMENTS = (ElementType.AMBIENT_LIGHT, ElementType.SPOT_LIGHT, ElementType.CAMERA)


def has_rt_extension(name: str | os.PathLike) -> bool:
    """True when the file name ends with ``.rt``."""
    return os.fspath(name).endswith(".rt")


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from description lines; each of A, L and C must appear exactly once."""
    scene = Scene()
    seen: set[ElementType] = set()
    for line in lines:
        if line == "" or line.startswith("\n"):
            continue
        kind, description = identify_element(line)
        if kind in _UNIQUE_ELEMENTS:
            if kind in seen:
                raise SceneParseError("duplication of elements detected")
            seen.add(kind)
        try:
            parse_element(scene, description, kind)
        except SceneParseError as exc:
            raise SceneParseError(f"description error : {line.rstrip()}") from exc
    if not seen.issuperset(_UNIQUE_ELEMENTS):
        raise SceneParseError("missing scene element in file")
    return scene


def load_scene(path: str | os.PathLike) -> Scene:
    """Read and parse the scene file at ``path``."""
    if not has_rt_extension(path):
        raise SceneParseError("name of file is incorrect")
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_scene(handle)
    except OSError as exc:
        raise SceneParseError("opening file failed") from exc