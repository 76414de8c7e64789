"""RGB colours with the clamping rules used by the shader."""

from __future__ import annotations

from dataclasses import dataclass

MAX_CHANNEL = 255


@dataclass(frozen=True)
class Color:
    """An RGB colour with integer channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def scaled(self, intensity: float) -> Color:
        """Colour multiplied by ``intensity`` clamped to [0, 1], truncated to ints."""
        intensity = min(max(intensity, 0.0), 1.0)
        return Color(
            int(self.r * intensity),
            int(self.g * intensity),
            int(self.b * intensity),
        )

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            min(self.r + other.r, MAX_CHANNEL),
            min(self.g + other.g, MAX_CHANNEL),
            min(self.b + other.b, MAX_CHANNEL),
        )

    def __mul__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            _div_trunc(self.r * other.r, MAX_CHANNEL),
            _div_trunc(self.g * other.g, MAX_CHANNEL),
            _div_trunc(self.b * other.b, MAX_CHANNEL),
        )

    def to_int(self) -> int:
        """Pack into a 0xRRGGBB integer."""
        return self.r << 16 | self.g << 8 | self.b


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient