"""曲线光栅化算法测试"""

import math

import pytest

from curves import CurveRasterization, bspline_basis, uniform_knots
from errors import InvalidParameterError
from point import Point


def _reference_basis(i, p, knots, t):
    """逐项递归的 Cox-de Boor 公式，用来核对自底向上的实现"""
    if p == 0:
        return 1 if knots[i] <= t < knots[i + 1] else 0
    term1 = 0
    denominator1 = knots[i + p] - knots[i]
    if denominator1 != 0:
        term1 = ((t - knots[i]) / denominator1) * _reference_basis(i, p - 1, knots, t)
    term2 = 0
    denominator2 = knots[i + p + 1] - knots[i + 1]
    if denominator2 != 0:
        term2 = ((knots[i + p + 1] - t) / denominator2) * _reference_basis(i + 1, p - 1, knots, t)
    return term1 + term2


class TestCircle:

    @pytest.mark.parametrize("radius", range(0, 16))
    def test_eight_way_symmetry(self, radius):
        cx, cy = 18, 18
        circle = CurveRasterization.build_circle((cx, cy), radius)
        offsets = {(p.x - cx, p.y - cy) for p in circle}
        for dx, dy in offsets:
            for sx in (1, -1):
                for sy in (1, -1):
                    assert (sx * dx, sy * dy) in offsets
                    assert (sx * dy, sy * dx) in offsets

    @pytest.mark.parametrize("radius", [3, 7, 12, 25])
    def test_points_near_radius(self, radius):
        circle = CurveRasterization.build_circle(Point(0, 0), radius)
        for p in circle:
            assert abs(math.hypot(p.x, p.y) - radius) < 1

    def test_emits_groups_of_eight(self):
        circle = CurveRasterization.build_circle((0, 0), 5)
        assert len(circle) % 8 == 0
        assert circle[:8] == [
            Point(5, 0), Point(0, -5), Point(0, -5), Point(-5, 0),
            Point(-5, 0), Point(0, 5), Point(0, 5), Point(5, 0),
        ]

    def test_negative_radius(self):
        assert CurveRasterization.build_circle((0, 0), -1) == []


class TestEllipse:

    def test_starts_at_top_and_bottom(self):
        ellipse = CurveRasterization.build_ellipse((18, 18), 8, 12)
        assert ellipse[:4] == [Point(18, 6), Point(18, 6), Point(18, 30), Point(18, 30)]

    def test_ends_on_major_axis(self):
        ellipse = CurveRasterization.build_ellipse((18, 18), 8, 12)
        assert ellipse[-1].y == 18

    @pytest.mark.parametrize("rx,ry", [(8, 12), (12, 8), (20, 5), (6, 6)])
    def test_four_way_symmetry_and_ring(self, rx, ry):
        ellipse = CurveRasterization.build_ellipse((0, 0), rx, ry)
        offsets = {(p.x, p.y) for p in ellipse}
        for x, y in offsets:
            assert (-x, y) in offsets
            assert (x, -y) in offsets
            inner = (max(abs(x) - 1, 0) / rx) ** 2 + (max(abs(y) - 1, 0) / ry) ** 2
            outer = ((abs(x) + 1) / rx) ** 2 + ((abs(y) + 1) / ry) ** 2
            assert inner <= 1 <= outer


class TestParabola:

    def test_sweep(self):
        vertex = Point(20, 30)
        parabola = CurveRasterization.build_parabola(vertex, 2, 5)
        assert parabola[0] == Point(10, 5)
        assert len(parabola) in (100, 101)
        for p in parabola:
            t = (p.x - vertex.x) / 2
            assert p.y == pytest.approx(vertex.y - t ** 2)

    def test_matches_accumulated_steps(self):
        expected = []
        t = -1.5
        while t <= 1.5:
            expected.append(Point(t * 3, -t ** 2))
            t += 0.1
        assert CurveRasterization.build_parabola((0, 0), 3, 1.5) == expected

    def test_large_density_is_iterative(self):
        parabola = CurveRasterization.build_parabola((0, 0), 1, 500)
        assert len(parabola) > 9000


class TestHyperbola:

    def test_branches(self):
        hyperbola = CurveRasterization.build_hyperbola((20, 20), 10, 5, 40, 40)
        at_vertex = [p for p in hyperbola if p.x == 20]
        assert at_vertex == [Point(20, 25.0), Point(20, 15.0)]

    def test_clipped_to_area(self):
        hyperbola = CurveRasterization.build_hyperbola((20, 20), 4, 6, 40, 30)
        assert hyperbola
        for p in hyperbola:
            assert 0 <= p.x < 40
            assert 0 <= p.y < 30

    def test_zero_major_axis(self):
        hyperbola = CurveRasterization.build_hyperbola((5, 10), 0, 3, 4, 20)
        assert hyperbola == [Point(x, y) for x in range(4) for y in (13.0, 7.0)]


class TestHermite:

    def test_endpoints(self):
        curve = CurveRasterization.build_hermite_curve((2, 2), (20, 10), (30, 0), (0, -30), 20)
        assert len(curve) == 21
        assert curve[0] == Point(2, 2)
        assert curve[-1] == Point(20, 10)

    def test_invalid_sample_count(self):
        with pytest.raises(InvalidParameterError):
            CurveRasterization.build_hermite_curve((0, 0), (1, 1), (0, 0), (0, 0), 0)


class TestBezier:

    def test_midpoint(self):
        curve = CurveRasterization.build_bezier_curve((0, 0), (0, 10), (10, 10), (10, 0), 2)
        assert curve[0] == Point(0, 0)
        assert curve[1] == Point(5, 7.5)
        assert curve[2] == Point(10, 0)

    def test_sample_count(self):
        curve = CurveRasterization.build_bezier_curve((0, 0), (3, 9), (6, 9), (9, 0), 50)
        assert len(curve) == 51


class TestBSpline:

    control_points = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]

    @pytest.mark.parametrize("degree", [0, 4, -1])
    def test_degree_guard(self, degree):
        with pytest.raises(InvalidParameterError):
            CurveRasterization.build_bspline_curve(self.control_points, degree, 10)

    def test_guard_is_value_error(self):
        with pytest.raises(ValueError):
            CurveRasterization.build_bspline_curve(self.control_points, len(self.control_points), 10)

    def test_linear_passes_through_control_points(self):
        curve = CurveRasterization.build_bspline_curve(self.control_points, 1, 3)
        assert curve == self.control_points

    def test_sample_count(self):
        curve = CurveRasterization.build_bspline_curve(self.control_points, 3, 25)
        assert len(curve) == 26

    @pytest.mark.parametrize("degree", [1, 2, 3])
    def test_partition_of_unity(self, degree):
        n = 5
        knots = uniform_knots(n, degree)
        for k in range(11):
            t = degree + k * (n + 1 - degree) / 10
            assert sum(bspline_basis(knots, degree, t)) == pytest.approx(1.0)

    @pytest.mark.parametrize("degree", [1, 2, 3, 4])
    def test_matches_recursive_definition(self, degree):
        n = 6
        knots = uniform_knots(n, degree)
        for k in range(13):
            t = degree + k * (n + 1 - degree) / 12
            basis = bspline_basis(knots, degree, t)
            assert basis == [_reference_basis(i, degree, knots, t) for i in range(n + 1)]


def test_idempotent():
    points = [(0, 0), (5, 12), (14, 3), (20, 18), (27, 6)]
    assert (CurveRasterization.build_bspline_curve(points, 3, 40)
            == CurveRasterization.build_bspline_curve(points, 3, 40))
