# hull.py
"""
凸包构建 - 两种礼品包装（gift wrapping）实现
关键顶点求出后用 DDA 折线连接成栅格边界
共线的点不作为关键顶点，边上只保留两端的角点
"""

import logging

from helpers import Orientation, find_leftmost_index, orientation
from raster import LineRasterization

logger = logging.getLogger(__name__)


def _unique_points(points):
    """去掉坐标完全相同的重复点，保留第一次出现的顺序"""
    return list(dict.fromkeys((p[0], p[1]) for p in points))


def _more_extreme(current, candidate, best) -> bool:
    """
    candidate 是否比 best 更适合作为 current 之后的凸包顶点：
    更逆时针者优先；共线时取离 current 更远的点
    """
    turn = orientation(current, candidate, best)
    if turn != Orientation.COLLINEAR:
        return turn == Orientation.COUNTER_CLOCKWISE

    cx, cy = candidate[0] - current[0], candidate[1] - current[1]
    bx, by = best[0] - current[0], best[1] - current[1]
    if cx * bx + cy * by < 0:
        # 反向共线只出现在位于最左竖直边中间的起点：沿这条边向下走
        return candidate[1] < best[1]
    return cx * cx + cy * cy > bx * bx + by * by


def _strictly_between(a, b, s) -> bool:
    """s 是否落在线段 ab 的内部（不含端点）"""
    if orientation(a, b, s) != Orientation.COLLINEAR:
        return False
    ahead = (s[0] - a[0]) * (b[0] - a[0]) + (s[1] - a[1]) * (b[1] - a[1])
    behind = (s[0] - b[0]) * (a[0] - b[0]) + (s[1] - b[1]) * (a[1] - b[1])
    return ahead > 0 and behind > 0


class ConvexHull:
    """凸包：gift wrap 与 angular march 两个变体"""

    @staticmethod
    def gift_wrap_vertices(points) -> list:
        """
        从最左点出发，每轮选出相对当前顶点"最逆时针"的点作为下一个顶点，
        回到起点（或越过位于边中间的起点）为止；返回的关键顶点以起点收尾
        """
        pts = _unique_points(points)
        if not pts:
            return []

        start = find_leftmost_index(pts)
        current = start
        visited = set()
        key_points = []

        while True:
            key_points.append(pts[current])
            visited.add(current)

            nxt = 0
            for i in range(len(pts)):
                if nxt == current or _more_extreme(pts[current], pts[i], pts[nxt]):
                    nxt = i

            if nxt == start or _strictly_between(pts[current], pts[nxt], pts[start]):
                break
            if nxt in visited:
                logger.warning("gift wrap revisited vertex %s; input is degenerate", pts[nxt])
                break
            current = nxt

        key_points.append(key_points[0])
        return key_points

    @staticmethod
    def march_vertices(points) -> list:
        """
        角度推进：从当前顶点 p 出发，暂定 q = p + 1，
        扫描所有点，遇到更逆时针的点就替换 q，直到回到最左点
        """
        pts = _unique_points(points)
        if not pts:
            return []

        leftmost = find_leftmost_index(pts)
        p = leftmost
        visited = {leftmost}
        key_points = [pts[leftmost]]

        while True:
            q = (p + 1) % len(pts)
            for i in range(len(pts)):
                if i != p and (q == p or _more_extreme(pts[p], pts[i], pts[q])):
                    q = i

            if q == leftmost or _strictly_between(pts[p], pts[q], pts[leftmost]):
                break
            if q in visited:
                logger.warning("hull march revisited vertex %s; input is degenerate", pts[q])
                break
            p = q
            key_points.append(pts[p])
            visited.add(p)

        key_points.append(pts[leftmost])
        return key_points

    @staticmethod
    def build_gift_wrap_hull(points) -> list:
        """少于 3 个点时原样返回输入"""
        if len(points) < 3:
            return list(points)

        key_points = ConvexHull.gift_wrap_vertices(points)
        logger.debug("gift wrap hull: %d of %d points on hull", len(key_points) - 1, len(points))
        return LineRasterization.build_chain(key_points)

    @staticmethod
    def build_march_hull(points) -> list:
        """少于 3 个点时返回空列表"""
        if len(points) < 3:
            return []

        key_points = ConvexHull.march_vertices(points)
        logger.debug("march hull: %d of %d points on hull", len(key_points) - 1, len(points))
        return LineRasterization.build_chain(key_points)
