"""Poisson disc sampling inside a polygon (Bridson's algorithm)."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from popo.polygons import offset
from popo.vectors import Vec2


@dataclass
class _BackgroundGrid:
    """Grid of cells of side r/sqrt(2), each holding at most one sample."""

    min_x: float
    min_y: float
    cell_size: float
    width: int
    height: int
    cells: list[int] = field(init=False)
    points: list[Vec2] = field(default_factory=list)

    def __post_init__(self) -> None:
        # 0 means empty, otherwise the 1-based index into ``points``.
        self.cells = [0] * (self.width * self.height)

    @property
    def size(self) -> int:
        return len(self.cells)

    def cell_of(self, point: Vec2) -> tuple[int, int]:
        return (
            max(math.floor((point.x - self.min_x) / self.cell_size), 0),
            max(math.floor((point.y - self.min_y) / self.cell_size), 0),
        )

    def is_clear(self, candidate: Vec2, radius: float) -> bool:
        cell_x, cell_y = self.cell_of(candidate)
        limit = radius * radius
        for y in range(max(cell_y - 2, 0), min(cell_y + 2, self.height)):
            for x in range(max(cell_x - 2, 0), min(cell_x + 2, self.width)):
                slot = self.cells[y * self.width + x]
                if slot and (candidate - self.points[slot - 1]).length_squared() <= limit:
                    return False
        return True

    def insert(self, point: Vec2) -> None:
        self.points.append(point)
        cell_x, cell_y = self.cell_of(point)
        self.cells[cell_y * self.width + cell_x] = len(self.points)


def is_in_polygon(candidate: Vec2, polygon: Iterable[Vec2]) -> bool:
    """Return whether ``candidate`` lies inside the polygon (ray casting)."""
    vertices = list(polygon)
    inside = False
    for vert_j, vert_i in zip(vertices[-1:] + vertices[:-1], vertices):
        if (vert_i.y > candidate.y) != (vert_j.y > candidate.y) and candidate.x < (
            (vert_j.x - vert_i.x) * (candidate.y - vert_i.y) / (vert_j.y - vert_i.y) + vert_i.x
        ):
            inside = not inside
    return inside


def sample(
    polygon: Iterable[Vec2],
    r: float,
    max_attempts: int = 30,
    padding: float | None = None,
    start_point: Vec2 | None = None,
) -> Iterator[Vec2]:
    """Lazily place non-overlapping discs of radius ``r`` inside a polygon.

    The vertices may be in either winding order. A positive ``padding``
    moves the boundary inwards, a negative one outwards. If ``start_point``
    is missing or outside the polygon, a random point inside it seeds the
    search. Polygons with fewer than three vertices yield nothing.
    """
    vertices = list(polygon)
    if len(vertices) < 3:
        return iter(())
    if not r > 0:
        raise ValueError("disc radius must be positive")

    first, last = vertices[0], vertices[-1]
    if first.x != last.x or first.y != last.y:
        vertices.append(first)

    if padding is not None:
        # offset() expands for positive values, padding shrinks for them.
        vertices = offset(vertices, -padding)

    if any(math.isnan(v.x) or math.isnan(v.y) for v in vertices):
        raise ValueError("polygon vertices must not be NaN")

    min_x = min(v.x for v in vertices)
    max_x = max(v.x for v in vertices)
    min_y = min(v.y for v in vertices)
    max_y = max(v.y for v in vertices)

    cell_size = r / math.sqrt(2.0)
    grid = _BackgroundGrid(
        min_x=min_x,
        min_y=min_y,
        cell_size=cell_size,
        width=math.ceil(abs(max_x - min_x) / cell_size),
        height=math.ceil(abs(max_y - min_y) / cell_size),
    )

    rng = random.Random()

    def random_point() -> Vec2:
        return Vec2(
            min_x + rng.random() * (max_x - min_x),
            min_y + rng.random() * (max_y - min_y),
        )

    initial = start_point if start_point is not None else random_point()
    while not is_in_polygon(initial, vertices):
        initial = random_point()

    def in_bounds(point: Vec2) -> bool:
        return min_x <= point.x < max_x and min_y <= point.y < max_y

    def generate() -> Iterator[Vec2]:
        active = [initial]
        while active:
            index = rng.randrange(len(active))
            origin = active[index]
            for _ in range(max_attempts):
                angle = rng.random() * math.pi * 2.0
                radius = r + rng.random() * (2.0 - r) * r
                candidate = origin + Vec2.from_angle(angle) * radius
                if (
                    in_bounds(candidate)
                    and grid.is_clear(candidate, r)
                    and is_in_polygon(candidate, vertices)
                ):
                    grid.insert(candidate)
                    active.append(candidate)
                    yield candidate
                    break
            else:
                del active[index]
                if len(active) > grid.size:
                    raise RuntimeError(
                        "produced more active points than the grid can hold"
                    )

    return generate()