import pytest

import GraphDrawing.points_box as pb

area = pb.DrawArea(40, 40, 820, 520)


def test_box_size():
    box = pb.PointsBox([[1, 5], [3, -2], [2, 0]])
    assert box.size() == (1, 3, -2, 5)
    assert box.range_x() == 2
    assert box.range_y() == 7


def test_empty_box_has_unit_range():
    box = pb.PointsBox()
    assert box.is_empty
    assert box.range_x() == 1.0
    assert box.range_y() == 1.0


def test_draw_area():
    assert area.right == 860
    assert area.bottom == 560
    assert area.is_valid()
    assert not pb.DrawArea(0, 0, 0, 10).is_valid()
    assert not pb.DrawArea(0, 0, 10, -1).is_valid()


def test_area_inside_canvas():
    assert pb.DrawArea.inside(900, 600, 40) == pb.DrawArea(40, 40, 820, 520)
    assert not pb.DrawArea.inside(60, 600, 40).is_valid()


def test_corners_map_to_area_corners():
    screen = pb.map_to_area([[0.0, -1.0], [10.0, 1.0]], area)
    assert screen[0] == pytest.approx((area.left, area.bottom))
    assert screen[1] == pytest.approx((area.right, area.top))


def test_bigger_values_are_higher():
    screen = pb.map_to_area([[0.0, 0.0], [1.0, 5.0], [2.0, 2.0]], area)
    assert screen[1].y < screen[2].y < screen[0].y


def test_mapping_is_idempotent():
    points = [[2.3, 0.1], [3.1, -0.2], [3.9, 0.05]]
    mapper = pb.ScreenMapper(pb.PointsBox(points), area)
    first  = mapper.map_points(points)
    assert mapper.map_points(points) == first
    assert pb.map_to_area(points, area) == first


def test_single_point_mapping_matches_bulk():
    points = [[2.3, 0.1], [3.1, -0.2]]
    mapper = pb.ScreenMapper(pb.PointsBox(points), area)
    bulk = mapper.map_points(points)
    for p, screen_point in zip(points, bulk):
        assert mapper.map_point(p) == pytest.approx(screen_point)


def test_equal_values_stay_inside_area():
    screen = pb.map_to_area([[1.0, 0.5], [2.0, 0.5], [3.0, 0.5]], area)
    for x, y in screen:
        assert area.left <= x <= area.right
        assert area.top <= y <= area.bottom


def test_equal_domain_stays_inside_area():
    screen = pb.map_to_area([[4.0, 0.0], [4.0, 1.0]], area)
    for x, y in screen:
        assert x == pytest.approx(area.left)
        assert area.top <= y <= area.bottom


def test_no_points():
    assert pb.map_to_area([], area) == []
