# helpers.py
"""
几何辅助函数 - 方向判定与极值点选择（凸包构建使用）
"""

from enum import Enum


class Orientation(Enum):
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


def orientation(p, q, r) -> Orientation:
    """
    三点方向判定：向量 pq 与 qr 的叉积符号
    > 0 顺时针，< 0 逆时针，恰好为 0 才算共线
    """
    val = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTER_CLOCKWISE


def find_leftmost_index(points) -> int:
    """x 最小的点的下标，x 相同时取最先出现的"""
    leftmost = 0
    for i in range(1, len(points)):
        if points[i][0] < points[leftmost][0]:
            leftmost = i
    return leftmost


def find_leftmost(points):
    return points[find_leftmost_index(points)]


def bounding_box(points) -> tuple:
    """返回 (min_x, min_y, max_x, max_y)"""
    x_coords = [p[0] for p in points]
    y_coords = [p[1] for p in points]
    return min(x_coords), min(y_coords), max(x_coords), max(y_coords)
