# domain/canvas/canvas.py
import logging
from typing import Iterator, List, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator
from domain.color.color import BLACK, Color

logger = logging.getLogger(__name__)


class Canvas(BaseModel):
    """
    A fixed-size grid of colors.

    Pixels are stored row-major: pixel (x, y) lives at index y * width + x.
    Unlike the value types, a canvas is written to in place.
    """
    width: int = Field(description="Number of columns")
    height: int = Field(description="Number of rows")
    pixel_grid: List[Color] = Field(
        default_factory=list,
        description="Row-major pixel colors; filled with black when omitted"
    )

    @field_validator("width", "height")
    @classmethod
    def validate_dimension(cls, value: int) -> int:
        """Validate that dimensions are positive."""
        if value <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {value}")
        return value

    @model_validator(mode="after")
    def fill_pixel_grid(self) -> "Canvas":
        """Fill an empty grid with black and check the size of a provided one."""
        expected = self.width * self.height
        if not self.pixel_grid:
            self.pixel_grid = [BLACK] * expected
        elif len(self.pixel_grid) != expected:
            raise ValueError(
                f"Pixel grid holds {len(self.pixel_grid)} colors, expected {expected} "
                f"for a {self.width}x{self.height} canvas"
            )
        logger.debug(f"Created {self.width}x{self.height} canvas")
        return self

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            logger.warning(f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} canvas")
            raise IndexError(f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} canvas")
        return y * self.width + x

    def pixel_at(self, x: int, y: int) -> Color:
        return self.pixel_grid[self._index(x, y)]

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """
        Store a color at (x, y).

        Raises:
            IndexError: If (x, y) is outside the canvas
        """
        self.pixel_grid[self._index(x, y)] = color

    def pixels(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield (x, y, color) for every pixel in row-major order."""
        for index, pixel in enumerate(self.pixel_grid):
            y, x = divmod(index, self.width)
            yield x, y, pixel


def canvas(width: int, height: int) -> Canvas:
    return Canvas(width=width, height=height)
