# domain/color/color.py
from numbers import Real
from pydantic import Field
from utils.base_model import ImmutableModel


class Color(ImmutableModel):
    """
    An RGB color with floating-point channels.

    Channels are not clamped to [0, 1]; arithmetic may leave them out of range
    and it is up to whoever consumes the color to deal with that.
    """
    red: float = Field(description="Red channel")
    green: float = Field(description="Green channel")
    blue: float = Field(description="Blue channel")

    def equals(self, other: "Color") -> bool:
        """True if each channel differs from the same channel of other by less than EPSILON."""
        return self.is_close_to(other)

    def add(self, other: "Color") -> "Color":
        return Color(red=self.red + other.red, green=self.green + other.green,
                     blue=self.blue + other.blue)

    def subtract(self, other: "Color") -> "Color":
        return Color(red=self.red - other.red, green=self.green - other.green,
                     blue=self.blue - other.blue)

    def scale(self, factor: float) -> "Color":
        return Color(red=self.red * factor, green=self.green * factor,
                     blue=self.blue * factor)

    def multiply(self, other: "Color") -> "Color":
        """Hadamard (channel-wise) product, used to blend light and surface colors."""
        return Color(red=self.red * other.red, green=self.green * other.green,
                     blue=self.blue * other.blue)

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other) -> "Color":
        if isinstance(other, Color):
            return self.multiply(other)
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


def color(red: float, green: float, blue: float) -> Color:
    return Color(red=red, green=green, blue=blue)


BLACK = color(0.0, 0.0, 0.0)


def equals(left: Color, right: Color) -> bool:
    return left.equals(right)


def add(left: Color, right: Color) -> Color:
    return left.add(right)


def subtract(left: Color, right: Color) -> Color:
    return left.subtract(right)


def scale(c: Color, factor: float) -> Color:
    return c.scale(factor)


def multiply(left: Color, right: Color) -> Color:
    return left.multiply(right)
