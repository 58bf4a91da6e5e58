from popo.polygons import (
    Winding,
    find_signed_area,
    find_winding_order,
    offset,
    sort_ccw,
)
from popo.vectors import Vec2


def _ccw_triangle():
    return [Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(0.0, 1.0)]


def _cw_triangle():
    return [Vec2(0.0, 1.0), Vec2(1.0, 0.0), Vec2(0.0, 0.0)]


def _colinear():
    return [Vec2(0.0, 0.0), Vec2(1.0, 1.0), Vec2(2.0, 2.0)]


def test_sort_ccw_two_points_polygon():
    line = [Vec2(0.0, 0.0), Vec2(1.0, 0.0)]
    assert sort_ccw(line) == line


def test_sort_ccw_ccw_polygon():
    polygon = _ccw_triangle()
    assert sort_ccw(polygon) == polygon


def test_sort_ccw_cw_polygon():
    polygon = _cw_triangle()
    assert sort_ccw(polygon) == list(reversed(polygon))


def test_sort_ccw_colinear_polygon():
    polygon = _colinear()
    assert sort_ccw(polygon) == polygon


def test_sort_ccw_does_not_mutate_input():
    polygon = _cw_triangle()
    original = list(polygon)
    sort_ccw(polygon)
    assert polygon == original


def test_find_signed_area():
    assert find_signed_area(_ccw_triangle()) == 0.5


def test_find_signed_area_negative():
    assert find_signed_area(_cw_triangle()) == -0.5


def test_find_signed_area_colinear():
    assert find_signed_area(_colinear()) == 0.0


def test_find_winding_order():
    assert find_winding_order(_ccw_triangle()) is Winding.COUNTER_CLOCKWISE
    assert find_winding_order(_cw_triangle()) is Winding.CLOCKWISE
    assert find_winding_order(_colinear()) is Winding.COLINEAR


def test_offset_polygon():
    result = offset(_ccw_triangle(), 0.1)
    assert len(result) == 3
    assert result[0].x < 0.0 and result[0].y < 0.0
    assert result[1].x > 1.0 and result[1].y < 0.0
    assert result[2].x < 0.0 and result[2].y > 1.0


def test_offset_polygon_negative():
    result = offset(_ccw_triangle(), -0.1)
    assert len(result) == 3
    assert result[0].x > 0.0 and result[0].y > 0.0
    assert result[1].x < 1.0 and result[1].y > 0.0
    assert result[2].x > 0.0 and result[2].y < 1.0


def test_offset_zero_keeps_vertices():
    polygon = _ccw_triangle()
    result = offset(polygon, 0.0)
    for before, after in zip(polygon, result):
        assert abs(before.x - after.x) < 1e-12
        assert abs(before.y - after.y) < 1e-12


def test_offset_expands_area_and_shrink_reduces_it():
    polygon = _ccw_triangle()
    base = find_signed_area(polygon)
    assert find_signed_area(offset(polygon, 0.1)) > base
    assert find_signed_area(offset(polygon, -0.1)) < base


def test_offset_cw_input_is_reoriented():
    result = offset(_cw_triangle(), 0.1)
    assert find_winding_order(result) is Winding.COUNTER_CLOCKWISE
    assert find_signed_area(result) > 0.5