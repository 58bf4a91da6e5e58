import re

from popo.cli import main, seed_polygons
from popo.polygons import find_signed_area
from popo.vectors import Vec2


def test_seed_polygon_is_closed():
    polygons = seed_polygons()
    assert len(polygons) == 1
    polygon = polygons[0]
    assert polygon[0] == polygon[-1]
    assert polygon[0] == Vec2(0.0, 0.0)
    assert polygon[3] == Vec2(2.0, -30.0)


def test_seed_polygon_has_area():
    polygon = seed_polygons()[0]
    assert abs(find_signed_area(polygon)) > 0.0


def test_seed_polygons_are_fresh_copies():
    first = seed_polygons()
    first[0].clear()
    assert seed_polygons()[0]


def test_main_reports_timing(capsys):
    assert main(["--iterations", "1", "--radius", "2"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    match = re.fullmatch(r"Took: (\d+)ms to generate (\d+) samples", lines[0])
    assert match is not None
    assert int(match.group(2)) > 0


def test_main_zero_iterations_prints_nothing(capsys):
    assert main(["--iterations", "0"]) == 0
    assert capsys.readouterr().out == ""