import pytest
from domain.canvas.canvas import Canvas, canvas
from domain.color.color import BLACK, color


class TestCanvas:
    def test_creating_a_canvas(self):
        c = canvas(10, 20)
        assert c.width == 10
        assert c.height == 20

    def test_every_pixel_starts_black(self):
        c = canvas(10, 20)
        assert len(c.pixel_grid) == 200
        for _, _, pixel in c.pixels():
            assert pixel.equals(BLACK)

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            canvas(0, 20)
        with pytest.raises(ValueError):
            canvas(10, -1)

    def test_writing_pixels(self):
        c = canvas(10, 20)
        red = color(1, 0, 0)
        c.write_pixel(2, 3, red)

        assert c.pixel_at(2, 3).equals(red)
        assert c.pixel_at(3, 2).equals(BLACK)

    def test_row_major_layout(self):
        c = canvas(4, 3)
        green = color(0, 1, 0)
        c.write_pixel(1, 2, green)

        assert c.pixel_grid[2 * 4 + 1] is green

    def test_pixels_iterates_row_major(self):
        c = canvas(3, 2)
        coordinates = [(x, y) for x, y, _ in c.pixels()]
        assert coordinates == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_out_of_bounds(self):
        c = canvas(10, 20)

        with pytest.raises(IndexError):
            c.pixel_at(10, 0)
        with pytest.raises(IndexError):
            c.pixel_at(0, 20)
        with pytest.raises(IndexError):
            c.write_pixel(-1, 0, color(1, 1, 1))

    def test_provided_pixel_grid(self):
        white = color(1, 1, 1)
        c = Canvas(width=2, height=1, pixel_grid=[white, BLACK])

        assert c.pixel_at(0, 0).equals(white)
        assert c.pixel_at(1, 0).equals(BLACK)

    def test_provided_pixel_grid_must_match_size(self):
        with pytest.raises(ValueError):
            Canvas(width=2, height=2, pixel_grid=[BLACK])
