# popo

Place non-overlapping discs inside a polygon using Bridson's Poisson disc
sampling algorithm. Each new point is rejected if it lies within `r` of a
sample already stored in the nearby cells of a background grid. The
polygon's vertices may be given in either clockwise or counter-clockwise
order.

No third-party packages are needed.

## Installation

```
pip install .
```

## Usage

```python
from popo.sampling import sample
from popo.vectors import Vec2

square = [Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 1.0)]

points = list(sample(square, 0.1, 30, 0.01, None))
print(f"Generated {len(points)} samples")
```

`sample(polygon, r, max_attempts=30, padding=None, start_point=None)`
returns a lazy iterator of `Vec2` points:

- `polygon`: the polygon's vertices. It is closed automatically when its
  first and last vertices differ. A polygon with fewer than three vertices
  gives no samples.
- `r`: the minimum distance between samples. It must be positive, or
  `ValueError` is raised.
- `max_attempts`: how many candidates are tried around an active point
  before that point is retired.
- `padding`: an inward margin along the edges. A negative value lets samples
  fall outside the polygon by that much. `None` means no offset at all.
- `start_point`: where the search begins. When it is `None`, or lies outside
  the polygon, a random point inside the polygon is used instead.

`ValueError` is also raised when a vertex (after padding) is NaN.
`popo.sampling.is_in_polygon(candidate, polygon)` is the ray-casting
point-in-polygon test used by the sampler.

Polygons with holes are not supported.

### Polygon helpers

`popo.polygons` provides:

- `offset(polygon, value)`: puts the vertices in counter-clockwise order,
  then moves each one along its corner bisector; a positive `value` grows
  the polygon, a negative one shrinks it.
- `find_signed_area(polygon)`: the shoelace signed area.
- `find_winding_order(polygon)`: a `Winding` value (`CLOCKWISE`, `COLINEAR`
  or `COUNTER_CLOCKWISE`) from the sign of the area.
- `sort_ccw(polygon)`: the vertices reversed if they wind clockwise,
  otherwise unchanged.

### Vectors

`popo.vectors.Vec2` is a small immutable 2D vector. It supports `+`, `-`,
and `*` by a number or by another vector (component-wise), as well as
`dot`, `length_squared`, `normalize` and `Vec2.from_angle`.

## Benchmark

```
popo-bench
```

This samples a built-in irregular polygon over and over and prints how long
each run took, in milliseconds, with the number of samples. Options:

- `--radius` (default 0.1): disc radius.
- `--attempts` (default 30): attempts per active point.
- `--padding` (default 0.0): inward padding.
- `--iterations`: number of rounds; without it the command runs until
  interrupted with Ctrl-C.

The command only prints timings; it does not write the samples anywhere
or draw them.