"""Reading typed fields (numbers, positions, colours) from element descriptions."""

from __future__ import annotations

from minirt.color import Color
from minirt.parsing_utils import (
    SceneParseError,
    find_value_end,
    go_next_value,
    in_float_range,
    in_int_range,
    is_end_of_line,
    is_float,
    is_int,
    parse_float,
    skip_space,
)
from minirt.scene import ElementType
from minirt.vector import Vec

_PREFIXES = (
    ("A ", ElementType.AMBIENT_LIGHT),
    ("L ", ElementType.SPOT_LIGHT),
    ("C ", ElementType.CAMERA),
    ("sp ", ElementType.SP),
    ("cy ", ElementType.CY),
    ("pl ", ElementType.PL),
)

MAX_FOV = 180
MAX_CHANNEL = 255


def identify_element(line: str | None) -> tuple[ElementType, str | None]:
    """Return the element kind a line describes and the text after its identifier."""
    if not line or line.startswith("\n"):
        return ElementType.NOT_IDENTIFIED, None
    line = skip_space(line)
    for prefix, kind in _PREFIXES:
        if line.startswith(prefix):
            return kind, line[len(prefix):]
    return ElementType.NOT_IDENTIFIED, None


class FieldReader:
    """Consumes whitespace- or comma-separated values from a description."""

    def __init__(self, text: str) -> None:
        self.remaining = text

    def _next_token(self) -> str:
        if not self.remaining or self.remaining.startswith("\n"):
            raise SceneParseError("missing value")
        self.remaining = skip_space(self.remaining)
        return self.remaining[:find_value_end(self.remaining)]

    def read_float(self) -> float:
        """Read one decimal value."""
        token = self._next_token()
        if not is_float(token):
            raise SceneParseError(f"invalid float: {token!r}")
        value = parse_float(token)
        self.remaining = go_next_value(self.remaining)
        return value

    def read_int(self) -> int:
        """Read one integer value."""
        token = self._next_token()
        if not is_int(token):
            raise SceneParseError(f"invalid integer: {token!r}")
        value = int(token)
        self.remaining = go_next_value(self.remaining)
        return value

    def read_intensity(self) -> float:
        """Read a light ratio in [0, 1]."""
        value = self.read_float()
        if not in_float_range(value, 0.0, 1.0):
            raise SceneParseError(f"intensity out of range: {value}")
        return value

    def read_fov(self) -> int:
        """Read a field of view in degrees, [0, 180]."""
        value = self.read_int()
        if not in_int_range(value, 0, MAX_FOV):
            raise SceneParseError(f"field of view out of range: {value}")
        return value

    def read_position(self) -> Vec:
        """Read three coordinates."""
        x = self.read_float()
        y = self.read_float()
        z = self.read_float()
        return Vec(x, y, z)

    def read_direction(self) -> Vec:
        """Read three components each in [-1, 1]."""
        components = []
        for _ in range(3):
            value = self.read_float()
            if not in_float_range(value, -1.0, 1.0):
                raise SceneParseError(f"direction component out of range: {value}")
            components.append(value)
        return Vec(*components)

    def read_rgb(self) -> Color:
        """Read three colour channels each in [0, 255]."""
        channels = []
        for _ in range(3):
            value = self.read_int()
            if not in_int_range(value, 0, MAX_CHANNEL):
                raise SceneParseError(f"colour channel out of range: {value}")
            channels.append(value)
        return Color(*channels)

    def at_end(self) -> bool:
        """True when only whitespace remains."""
        return is_end_of_line(self.remaining)