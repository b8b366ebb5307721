# domain/geometry/tuples.py
import logging
import math
from numbers import Real
from pydantic import Field
from domain.geometry.constants import EPSILON, POINT_W, VECTOR_W
from domain.geometry.errors import DivisionByZero, NormalizingZeroVector
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


def is_close(left: float, right: float, tolerance: float = None) -> bool:
    """Check whether two scalars differ by less than the tolerance (EPSILON by default)."""
    if tolerance is None:
        tolerance = EPSILON
    return abs(left - right) < tolerance


class Tuple4(ImmutableModel):
    """
    Homogeneous 4-component coordinate.

    A tuple with w=1.0 is a point and a tuple with w=0.0 is a vector. The
    convention is not enforced: arithmetic combines w like any other component,
    so subtracting two points yields a vector and adding two points yields
    something that is neither.
    """
    x: float = Field(description="X component")
    y: float = Field(description="Y component")
    z: float = Field(description="Z component")
    w: float = Field(description="Homogeneous component (1.0 point, 0.0 vector)")

    @property
    def is_point(self) -> bool:
        return self.w == POINT_W

    @property
    def is_vector(self) -> bool:
        return self.w == VECTOR_W

    def equals(self, other: "Tuple4") -> bool:
        """True if x, y, z and w each differ from their counterparts by less than EPSILON."""
        return self.is_close_to(other)

    def negate(self) -> "Tuple4":
        return Tuple4(x=-self.x, y=-self.y, z=-self.z, w=-self.w)

    def add(self, other: "Tuple4") -> "Tuple4":
        return Tuple4(x=self.x + other.x, y=self.y + other.y,
                      z=self.z + other.z, w=self.w + other.w)

    def subtract(self, other: "Tuple4") -> "Tuple4":
        return Tuple4(x=self.x - other.x, y=self.y - other.y,
                      z=self.z - other.z, w=self.w - other.w)

    def scale(self, factor: float) -> "Tuple4":
        """Multiply every component, w included, by a scalar."""
        return Tuple4(x=self.x * factor, y=self.y * factor,
                      z=self.z * factor, w=self.w * factor)

    def divide(self, divisor: float) -> "Tuple4":
        """
        Divide every component, w included, by a scalar.

        Raises:
            DivisionByZero: If the divisor is exactly zero
        """
        if divisor == 0:
            logger.debug(f"Refusing to divide {self} by zero")
            raise DivisionByZero(f"Cannot divide tuple {self} by zero")
        return Tuple4(x=self.x / divisor, y=self.y / divisor,
                      z=self.z / divisor, w=self.w / divisor)

    def magnitude(self) -> float:
        """Euclidean length of the (x, y, z) part. w does not contribute."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Tuple4":
        """
        Scale the tuple to unit magnitude.

        Raises:
            NormalizingZeroVector: If the magnitude is below EPSILON
        """
        length = self.magnitude()
        if length < EPSILON:
            logger.debug(f"Refusing to normalize {self} with magnitude {length}")
            raise NormalizingZeroVector(
                f"Cannot normalize {self}: magnitude {length} is below {EPSILON}"
            )
        return self.divide(length)

    def dot(self, other: "Tuple4") -> float:
        """
        Dot product over all four components.

        Only meaningful as a 3D dot product for vectors; points contribute a w*w term.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple4") -> "Tuple4":
        """Cross product of the (x, y, z) parts, returned as a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __neg__(self) -> "Tuple4":
        return self.negate()

    def __add__(self, other: "Tuple4") -> "Tuple4":
        if not isinstance(other, Tuple4):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Tuple4") -> "Tuple4":
        if not isinstance(other, Tuple4):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: float) -> "Tuple4":
        if not isinstance(factor, Real):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Tuple4":
        if not isinstance(divisor, Real):
            return NotImplemented
        return self.divide(divisor)

    def format_as_tuple(self) -> str:
        return f"({self.x}, {self.y}, {self.z}, {self.w})"

    def __str__(self) -> str:
        return self.format_as_tuple()


def tuple4(x: float, y: float, z: float, w: float) -> Tuple4:
    """Build a tuple from its four components."""
    return Tuple4(x=x, y=y, z=z, w=w)


def point(x: float, y: float, z: float) -> Tuple4:
    return tuple4(x, y, z, POINT_W)


def vector(x: float, y: float, z: float) -> Tuple4:
    return tuple4(x, y, z, VECTOR_W)


# Free-function forms of the Tuple4 operations

def equals(left: Tuple4, right: Tuple4) -> bool:
    return left.equals(right)


def negate(t: Tuple4) -> Tuple4:
    return t.negate()


def add(left: Tuple4, right: Tuple4) -> Tuple4:
    return left.add(right)


def subtract(left: Tuple4, right: Tuple4) -> Tuple4:
    return left.subtract(right)


def scale(t: Tuple4, factor: float) -> Tuple4:
    return t.scale(factor)


def divide(t: Tuple4, divisor: float) -> Tuple4:
    return t.divide(divisor)


def magnitude(t: Tuple4) -> float:
    return t.magnitude()


def normalize(t: Tuple4) -> Tuple4:
    return t.normalize()


def dot(left: Tuple4, right: Tuple4) -> float:
    return left.dot(right)


def cross(left: Tuple4, right: Tuple4) -> Tuple4:
    return left.cross(right)
