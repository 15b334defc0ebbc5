import pytest
from PIL import Image

from recreations.fractals import (
    Circle,
    Line,
    Point,
    circle_fractal,
    fern,
    figure,
    main,
    render,
    shrink_squares,
    sierpinski,
    snowflake,
    spiral_of_spirals,
    square_spiral,
    tree,
)


def test_sierpinski_small_triangle_is_empty():
    assert list(sierpinski(0, 0, 4, 0, 2, 4)) == []


def test_sierpinski_single_level():
    assert list(sierpinski(0, 0, 8, 0, 4, 8)) == [
        Line(0, 0, 8, 0),
        Line(8, 0, 4, 8),
        Line(4, 8, 0, 0),
    ]


def test_sierpinski_draws_whole_triangles():
    shapes = list(sierpinski(20, 20, 680, 20, 350, 680))
    assert len(shapes) % 3 == 0
    assert all(isinstance(shape, Line) for shape in shapes)


def test_shrink_squares_first_square_and_stop():
    assert list(shrink_squares(0, 0, 2, 0, 2, 2, 0, 2)) == []
    shapes = list(shrink_squares(10, 10, 20, 10, 20, 20, 10, 20))
    assert shapes[:4] == [
        Line(10, 10, 20, 10),
        Line(20, 10, 20, 20),
        Line(20, 20, 10, 20),
        Line(10, 20, 10, 10),
    ]
    assert len(shapes) % 4 == 0


def test_square_spiral_empty_and_growing():
    assert list(square_spiral(100, 100, 1.3, 0, 0.75)) == []
    shapes = list(square_spiral(100, 100, 1.3, 0.1, 0.75))
    assert len(shapes) == 4
    assert shapes[0] == Line(99, 99, 101, 99)


def test_circle_fractal_levels():
    assert list(circle_fractal(5, 5, 0)) == [Circle(5, 5, 0)]
    shapes = list(circle_fractal(50, 50, 2))
    assert shapes[0] == Circle(50, 50, 2)
    assert shapes[1] == Circle(52, 50, 0)
    assert len(shapes) == 7


def test_snowflake_stops_and_starts_with_trunk():
    assert list(snowflake(0, 0, 10, 10, 1)) == []
    shapes = list(snowflake(0, 0, 10, 10, 2))
    assert shapes == [Line(0, 0, 10, 10)]


def test_tree_starts_with_trunk():
    assert list(tree(0, 0, 0, 5, 1, 0.5, 0.5)) == []
    shapes = list(tree(350, 680, 350, 530, 150, 2.0944, 1.0472))
    assert shapes[0] == Line(350, 680, 350, 530)
    assert all(isinstance(shape, Line) for shape in shapes)


def test_fern_single_stroke():
    assert list(fern(10, 10, 2, 0)) == []
    assert list(fern(10, 10, 3, 0)) == [Line(10, 10, 10, 7)]


def test_spiral_of_spirals_single_point():
    assert list(spiral_of_spirals(0, 0, 1.5, 0)) == []
    assert list(spiral_of_spirals(10, 10, 2.0, 0)) == [Point(12, 10)]


def test_figure_layout_and_unknown_key():
    assert figure("1")[0] == Line(20, 20, 680, 20)
    assert figure("6")[0] == Line(350, 680, 350, 530)
    with pytest.raises(ValueError):
        figure("9")


@pytest.mark.parametrize("key", list("12345678"))
def test_every_figure_has_shapes(key):
    shapes = figure(key, 200, 200, 10)
    assert len(shapes) > 0


def test_render_draws_white_on_black():
    image = render([Line(0, 0, 9, 0), Point(3, 7)], 10, 10)
    assert image.size == (10, 10)
    assert image.getpixel((5, 0)) == (255, 255, 255)
    assert image.getpixel((3, 7)) == (255, 255, 255)
    assert image.getpixel((5, 5)) == (0, 0, 0)


def test_render_circle_outline():
    image = render([Circle(10, 10, 5)], 21, 21)
    assert image.getpixel((10, 10)) == (0, 0, 0)
    assert image.getpixel((15, 10)) == (255, 255, 255)


def test_main_writes_image(tmp_path):
    out = tmp_path / "figure.png"
    assert main(["4", str(out), "--width", "120", "--height", "90"]) == 0
    with Image.open(out) as image:
        assert image.size == (120, 90)


def test_main_rejects_unknown_figure(tmp_path):
    with pytest.raises(SystemExit):
        main(["0", str(tmp_path / "x.png")])