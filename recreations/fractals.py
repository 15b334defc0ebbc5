"""Recursive figures described as lines, circles and points, drawn to an image."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Union

from PIL import Image, ImageDraw

WIDTH = 700
HEIGHT = 700
MARGIN = 20

BACKGROUND = "black"
FOREGROUND = "white"


@dataclass(frozen=True)
class Line:
    x1: int
    y1: int
    x2: int
    y2: int


@dataclass(frozen=True)
class Circle:
    x: int
    y: int
    r: int


@dataclass(frozen=True)
class Point:
    x: int
    y: int


Shape = Union[Line, Circle, Point]


def _cdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _polygon(*corners: tuple[int, int]) -> Iterator[Line]:
    for (x1, y1), (x2, y2) in zip(corners, corners[1:] + corners[:1]):
        yield Line(x1, y1, x2, y2)


def sierpinski(x1: int, y1: int, x2: int, y2: int, x3: int, y3: int) -> Iterator[Shape]:
    if abs(x2 - x1) < 5:
        return
    yield from _polygon((x1, y1), (x2, y2), (x3, y3))
    m12 = (_cdiv(x1 + x2, 2), _cdiv(y1 + y2, 2))
    m13 = (_cdiv(x1 + x3, 2), _cdiv(y1 + y3, 2))
    m23 = (_cdiv(x2 + x3, 2), _cdiv(y2 + y3, 2))
    yield from sierpinski(x1, y1, *m12, *m13)
    yield from sierpinski(*m12, x2, y2, *m23)
    yield from sierpinski(*m13, *m23, x3, y3)


def shrink_squares(
    x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, x4: int, y4: int
) -> Iterator[Shape]:
    if abs(x2 - x1) < 3:
        return
    yield from _polygon((x1, y1), (x2, y2), (x3, y3), (x4, y4))
    d = _cdiv(_cdiv(x2, 2) - _cdiv(x1, 2), 2)
    for cx, cy in ((x1, y1), (x2, y2), (x3, y3), (x4, y4)):
        yield from shrink_squares(
            cx - d, cy - d, cx + d, cy - d, cx + d, cy + d, cx - d, cy + d
        )


def _spiral_square(x: int, y: int, size: int) -> Iterator[Shape]:
    half = _cdiv(size, 6)
    yield from _polygon(
        (x - half, y - half), (x + half, y - half), (x + half, y + half), (x - half, y + half)
    )


def square_spiral(
    x: int, y: int, a: float, theta_max: float, theta_step: float
) -> Iterator[Shape]:
    """Squares growing in size along a spiral that widens with the angle."""
    theta = 0.0
    size = 10.0
    r = 0.0
    while theta < theta_max:
        r += a * theta
        px = int(x + r * math.cos(-theta))
        py = int(y + r * math.sin(-theta))
        yield from _spiral_square(px, py, int(size))
        size *= 1.15
        theta += theta_step


def circle_fractal(x: int, y: int, r: int) -> Iterator[Shape]:
    yield Circle(x, y, r)
    if r < 1:
        return
    for k in range(6):
        angle = k * math.pi / 3
        yield from circle_fractal(
            int(x + r * math.cos(angle)), int(y + r * math.sin(angle)), _cdiv(r, 3)
        )


def snowflake(x1: int, y1: int, x2: int, y2: int, dist: float) -> Iterator[Shape]:
    if dist <= 1:
        return
    yield Line(x1, y1, x2, y2)
    for k in range(1, 6):
        angle = 2 * k * math.pi / 5 + math.pi / 2
        yield from snowflake(
            x2,
            y2,
            int(x2 + dist * math.cos(angle)),
            int(y2 + dist * math.sin(angle)),
            dist / 3,
        )


def tree(
    x1: int, y1: int, x2: int, y2: int, dist: float, theta1: float, theta2: float
) -> Iterator[Shape]:
    if dist <= 1:
        return
    yield Line(x1, y1, x2, y2)
    quarter = math.pi / 4
    yield from tree(
        x2,
        y2,
        int(x2 - dist * math.cos(theta1)),
        int(y2 - dist * math.sin(theta1)),
        2 * dist / 3,
        theta1 + quarter,
        theta2 + quarter,
    )
    yield from tree(
        x2,
        y2,
        int(x2 - dist * math.cos(theta2)),
        int(y2 - dist * math.sin(theta2)),
        2 * dist / 3,
        theta1 - quarter,
        theta2 - quarter,
    )


def fern(x: int, y: int, length: float, theta: float) -> Iterator[Shape]:
    if length <= 2:
        return
    x2 = int(x + length * math.sin(theta))
    y2 = int(y - length * math.cos(theta))
    yield Line(x, y, x2, y2)
    quarter = math.pi / 4
    for k in (0, 3, 2, 1):
        back = k * length / 4
        bx = int(x2 - back * math.sin(theta))
        by = int(y2 + back * math.cos(theta))
        yield from fern(bx, by, length / 3, theta + quarter)
        yield from fern(bx, by, length / 3, theta - quarter)


def spiral_of_spirals(x: int, y: int, radius: float, angle: float) -> Iterator[Shape]:
    if radius < 2:
        return
    x2 = int(x + radius * math.cos(angle))
    y2 = int(y + radius * math.sin(angle))
    yield Point(x2, y2)
    yield from spiral_of_spirals(x2, y2, radius * 0.25, angle)
    yield from spiral_of_spirals(x, y, radius * 0.95, angle + 0.5 * (math.pi / 4))


def _snowflake_figure(width: int, height: int, margin: int) -> Iterator[Shape]:
    dist = float(height // 2 - 5 * margin)
    cx, cy = width // 2, height // 2
    for i in range(5):
        angle = math.pi / 2 + i * (2 * math.pi / 5)
        x2 = int(cx + dist * math.cos(angle))
        y2 = int(cy + dist * math.sin(angle))
        yield from snowflake(cx, cy, x2, y2, dist / 3)


FIGURES = {
    "1": "Sierpinski triangles",
    "2": "shrinking squares",
    "3": "spiral of squares",
    "4": "circles",
    "5": "snowflake",
    "6": "tree",
    "7": "fern",
    "8": "spiral of spirals",
}


def figure(
    key: str, width: int = WIDTH, height: int = HEIGHT, margin: int = MARGIN
) -> list[Shape]:
    """The shapes of one of the numbered figures, laid out for a canvas of the given size."""
    key = str(key)
    cx, cy = width // 2, height // 2
    if key == "1":
        shapes = sierpinski(margin, margin, width - margin, margin, cx, height - margin)
    elif key == "2":
        s = width // 4
        shapes = shrink_squares(s, s, width - s, s, width - s, height - s, s, height - s)
    elif key == "3":
        shapes = square_spiral(cx, cy, 1.3, 7 * math.pi, 0.75)
    elif key == "4":
        shapes = circle_fractal(cx, cy, height // 3)
    elif key == "5":
        shapes = _snowflake_figure(width, height, margin)
    elif key == "6":
        base = height - margin
        shapes = tree(cx, base, cx, base - 150, 150, 2.0944, 1.0472)
    elif key == "7":
        shapes = fern(cx, height - margin, 400, 0)
    elif key == "8":
        shapes = spiral_of_spirals(cx, cy, width, 0)
    else:
        raise ValueError(f"no figure {key!r}")
    return list(shapes)


def render(shapes: Iterable[Shape], width: int = WIDTH, height: int = HEIGHT) -> Image.Image:
    """Draw the shapes in white on a black canvas."""
    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    for shape in shapes:
        if isinstance(shape, Line):
            draw.line([(shape.x1, shape.y1), (shape.x2, shape.y2)], fill=FOREGROUND)
        elif isinstance(shape, Circle):
            r = abs(shape.r)
            draw.ellipse(
                [shape.x - r, shape.y - r, shape.x + r, shape.y + r], outline=FOREGROUND
            )
        elif isinstance(shape, Point):
            draw.point((shape.x, shape.y), fill=FOREGROUND)
        else:
            raise TypeError(f"cannot draw {shape!r}")
    return image


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fractals", description="Draw one of the recursive figures to an image file."
    )
    parser.add_argument(
        "figure",
        choices=sorted(FIGURES),
        help="; ".join(f"{key}: {name}" for key, name in FIGURES.items()),
    )
    parser.add_argument("output", help="image file to write")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--margin", type=int, default=MARGIN)
    args = parser.parse_args(argv)
    shapes = figure(args.figure, args.width, args.height, args.margin)
    try:
        render(shapes, args.width, args.height).save(args.output)
    except (OSError, ValueError) as exc:
        print(f"Cannot write {args.output}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())