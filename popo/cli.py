"""Command that repeatedly times sampling of a sample polygon."""

from __future__ import annotations

import argparse
import itertools
import time
from collections.abc import Sequence

from popo.sampling import sample
from popo.vectors import Vec2

_SEED_COORDINATES = [
    (0, 0), (0, -20), (2, -20), (2, -30), (18, -28), (22, -22), (26, -25),
    (28, -15), (25, -10), (20, -8), (18, -4), (20, 0), (10, 0), (10, 6),
    (12, 6), (12, 16), (8, 18), (10, 26), (0, 28), (-4, 24), (-10, 30),
    (-16, 26), (-14, 20), (-22, 18), (-24, 12), (-28, 8), (-26, 4), (-20, 2),
    (-20, -6), (-14, -6), (-10, -2), (-10, 0), (0, 0),
]


def seed_polygons() -> list[list[Vec2]]:
    """Return the polygons used for timing runs."""
    return [[Vec2(float(x), float(y)) for x, y in _SEED_COORDINATES]]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="popo", description="Time Poisson disc sampling of sample polygons."
    )
    parser.add_argument("--radius", type=float, default=0.1, help="disc radius")
    parser.add_argument("--attempts", type=int, default=30, help="attempts per active point")
    parser.add_argument("--padding", type=float, default=0.0, help="inward padding")
    parser.add_argument(
        "--iterations", type=int, default=None,
        help="rounds over the polygons (default: run until interrupted)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Sample every seed polygon in turn and report how long each took."""
    args = _parse_args(argv)
    polygons = seed_polygons()
    rounds = itertools.count() if args.iterations is None else range(args.iterations)
    for _ in rounds:
        for polygon in polygons:
            start = time.perf_counter()
            samples = list(sample(polygon, args.radius, args.attempts, args.padding, None))
            elapsed = int((time.perf_counter() - start) * 1000)
            print(f"Took: {elapsed}ms to generate {len(samples)} samples")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())