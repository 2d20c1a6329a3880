# curves.py
"""
曲线光栅化算法实现 - 完全手工实现，不使用现成库
包括：
1. 中点圆、中点椭圆（整数决策参数 + 对称性）
2. 抛物线、双曲线（参数扫描 / 逐列求值）
3. Hermite、三次Bézier、均匀B样条参数曲线
"""

import logging
import math

import settings
from errors import InvalidParameterError
from point import Point, round_half_up

logger = logging.getLogger(__name__)


def factorial(n):
    """计算阶乘"""
    if n <= 1:
        return 1
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def binomial_coefficient(n, i):
    """计算二项式系数 C(n, i)"""
    if i < 0 or i > n:
        return 0
    return factorial(n) // (factorial(i) * factorial(n - i))


def bernstein_polynomial(n, i, t):
    """
    Bernstein基函数
    B_{i,n}(t) = C(n,i) * t^i * (1-t)^(n-i)
    """
    return binomial_coefficient(n, i) * (t ** i) * ((1 - t) ** (n - i))


def uniform_knots(n, degree):
    """非周期、非钳位的均匀节点向量 0, 1, ..., n + degree + 1"""
    return [i for i in range(n + degree + 2)]


def bspline_basis(knots, degree, t):
    """
    Cox-de Boor 基函数，自底向上逐阶计算
    返回 [N_{0,p}(t), ..., N_{m-p-1,p}(t)]，m = len(knots) - 1
    分母为 0 的项贡献为 0
    """
    m = len(knots) - 1
    basis = [1 if knots[i] <= t < knots[i + 1] else 0 for i in range(m)]

    for p in range(1, degree + 1):
        higher = []
        for i in range(m - p):
            term1 = 0
            denominator1 = knots[i + p] - knots[i]
            if denominator1 != 0:
                term1 = ((t - knots[i]) / denominator1) * basis[i]

            term2 = 0
            denominator2 = knots[i + p + 1] - knots[i + 1]
            if denominator2 != 0:
                term2 = ((knots[i + p + 1] - t) / denominator2) * basis[i + 1]

            higher.append(term1 + term2)
        basis = higher

    return basis


def _check_num_points(num_points):
    if num_points < 1:
        raise InvalidParameterError(f"num_points must be >= 1, got {num_points}")


class CurveRasterization:
    """圆锥曲线与参数曲线的采样"""

    @staticmethod
    def build_circle(center, radius) -> list:
        """Midpoint圆形算法 - 8对称性，八分圆边界处的重复点保留"""
        points = []
        xc, yc = center[0], center[1]

        x = radius
        y = 0
        radius_error = 1 - x

        while x >= y:
            points.extend([
                Point(xc + x, yc - y), Point(xc + y, yc - x),
                Point(xc - y, yc - x), Point(xc - x, yc - y),
                Point(xc - x, yc + y), Point(xc - y, yc + x),
                Point(xc + y, yc + x), Point(xc + x, yc + y),
            ])
            y += 1

            if radius_error < 0:
                radius_error += 2 * y + 1
            else:
                x -= 1
                radius_error += 2 * (y - x) + 1

        return points

    @staticmethod
    def build_ellipse(center, rx, ry) -> list:
        """Midpoint椭圆算法 - 两个区域各自的决策参数，4对称性"""
        points = []
        xc, yc = center[0], center[1]

        def add_ellipse_points(x, y):
            points.extend([
                Point(xc + x, yc - y), Point(xc - x, yc - y),
                Point(xc - x, yc + y), Point(xc + x, yc + y),
            ])

        rx2 = rx * rx
        ry2 = ry * ry
        two_rx2 = 2 * rx2
        two_ry2 = 2 * ry2

        # Region 1：斜率绝对值 <= 1
        x = 0
        y = ry
        p1 = round_half_up(ry2 - rx2 * ry + 0.25 * rx2)
        dx = 0
        dy = two_rx2 * y

        add_ellipse_points(x, y)

        while dx < dy:
            x += 1
            dx += two_ry2
            if p1 < 0:
                p1 += ry2 + dx
            else:
                y -= 1
                dy -= two_rx2
                p1 += ry2 + dx - dy
            add_ellipse_points(x, y)

        # Region 2：斜率绝对值 > 1
        p2 = round_half_up(ry2 * (x + 0.5) * (x + 0.5) + rx2 * (y - 1) * (y - 1) - rx2 * ry2)

        while y > 0:
            y -= 1
            dy -= two_rx2
            if p2 > 0:
                p2 += rx2 - dy
            else:
                x += 1
                dx += two_ry2
                p2 += rx2 - dy + dx
            add_ellipse_points(x, y)

        return points

    @staticmethod
    def build_parabola(vertex, width, density, step=settings.PARABOLA_STEP) -> list:
        """
        抛物线参数扫描：x = vx + t*width, y = vy - t^2, t 从 -density 累加到 density
        浮点累加误差保留，最后一个采样点可能略微越过 density
        """
        points = []
        t = -density
        while t <= density:
            points.append(Point(vertex[0] + t * width, vertex[1] - t ** 2))
            t += step
        return points

    @staticmethod
    def build_hyperbola(vertex, major_axis, minor_axis, width, height) -> list:
        """双曲线逐列求值，只保留 y 落在 [0, height) 内的分支点"""
        points = []

        for x in range(max(0, math.ceil(width))):
            x_normalized = (x - vertex[0]) / major_axis if major_axis != 0 else 0
            root_term = math.sqrt(1 + x_normalized ** 2)

            y1 = vertex[1] + minor_axis * root_term
            y2 = vertex[1] - minor_axis * root_term

            if 0 <= y1 < height:
                points.append(Point(x, y1))
            if 0 <= y2 < height:
                points.append(Point(x, y2))

        return points

    @staticmethod
    def build_hermite_curve(p0, p1, m0, m1, num_points) -> list:
        """
        三次Hermite曲线
        p0, p1 为端点，m0, m1 为端点处的切向量
        在 [0, 1] 上均匀取 num_points + 1 个参数
        """
        _check_num_points(num_points)
        points = []

        for i in range(num_points + 1):
            t = i / num_points
            h00 = 2 * t ** 3 - 3 * t ** 2 + 1
            h10 = t ** 3 - 2 * t ** 2 + t
            h01 = -2 * t ** 3 + 3 * t ** 2
            h11 = t ** 3 - t ** 2

            x = h00 * p0[0] + h10 * m0[0] + h01 * p1[0] + h11 * m1[0]
            y = h00 * p0[1] + h10 * m0[1] + h01 * p1[1] + h11 * m1[1]
            points.append(Point(x, y))

        return points

    @staticmethod
    def build_bezier_curve(p0, p1, p2, p3, num_points) -> list:
        """三次Bézier曲线 P(t) = Σ B_{i,3}(t) * P_i"""
        _check_num_points(num_points)
        control_points = (p0, p1, p2, p3)
        points = []

        for i in range(num_points + 1):
            t = i / num_points
            x = 0
            y = 0
            for k, cp in enumerate(control_points):
                basis = bernstein_polynomial(3, k, t)
                x += basis * cp[0]
                y += basis * cp[1]
            points.append(Point(x, y))

        return points

    @staticmethod
    def build_bspline_curve(control_points, degree, num_points) -> list:
        """
        均匀B样条曲线
        degree 必须在 [1, len(control_points) - 1] 内，否则直接抛出 InvalidParameterError
        参数域为 [knots[degree], knots[n + 1]]
        """
        if degree < 1 or degree > len(control_points) - 1:
            raise InvalidParameterError(
                f"Invalid degree {degree} for B-spline with {len(control_points)} control points")
        _check_num_points(num_points)

        n = len(control_points) - 1
        knots = uniform_knots(n, degree)
        t_start = knots[degree]
        t_end = knots[n + 1]

        points = []
        for i in range(num_points + 1):
            t = t_start + i * (t_end - t_start) / num_points
            basis = bspline_basis(knots, degree, t)

            x = 0
            y = 0
            for k in range(n + 1):
                x += basis[k] * control_points[k][0]
                y += basis[k] * control_points[k][1]
            points.append(Point(x, y))

        logger.debug("sampled degree-%d B-spline: %d control points, %d samples",
                     degree, len(control_points), len(points))
        return points
