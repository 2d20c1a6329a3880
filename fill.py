# fill.py
"""
多边形内部填充算法
1. 有序边表扫描线填充
2. 带点在多边形内交叉检查的扫描线填充
3. 逐像素洪水填充（4连通，栈实现）
4. 粗网格扫描线洪水填充
点在多边形内统一使用奇偶规则（向 +x 方向的水平射线）
"""

import logging
import math

import settings
from errors import InvalidParameterError
from helpers import bounding_box
from point import Edge, Point

logger = logging.getLogger(__name__)


class PolygonFill:
    """闭合多边形的内部填充；多边形最后一点到第一点的边是隐含的"""

    @staticmethod
    def build_edge_table(polygon) -> list:
        """由非水平边建立边表，水平边按扫描线规则忽略"""
        edges = []
        n = len(polygon)

        for i in range(n):
            x0, y0 = polygon[i][0], polygon[i][1]
            x1, y1 = polygon[(i + 1) % n][0], polygon[(i + 1) % n][1]
            if y0 == y1:
                continue
            edges.append(Edge(
                start_y=min(y0, y1),
                end_y=max(y0, y1),
                x_at_min_y=x0 if y0 < y1 else x1,
                slope_inverse=(x0 - x1) / (y0 - y1),
            ))
        return edges

    @staticmethod
    def is_point_inside_polygon(x, y, polygon) -> bool:
        """奇偶规则：半开区间判断，避免顶点被重复计数"""
        n = len(polygon)
        intersections = 0

        for i in range(n):
            x1, y1 = polygon[i][0], polygon[i][1]
            x2, y2 = polygon[(i + 1) % n][0], polygon[(i + 1) % n][1]

            if (y1 <= y < y2) or (y2 <= y < y1):
                if x < (x2 - x1) * (y - y1) / (y2 - y1) + x1:
                    intersections += 1

        return intersections % 2 != 0

    @staticmethod
    def is_point_inside_any_polygon(x, y, polygons) -> bool:
        for polygon in polygons:
            if PolygonFill.is_point_inside_polygon(x, y, polygon):
                return True
        return False

    @staticmethod
    def scanline_fill(polygon) -> list:
        """
        扫描线填充算法
        输入：polygon - 多边形顶点列表 [(x1,y1), (x2,y2), ...]
        输出：内部像素点列表，逐行从下到上、每行从左到右

        边在 start_y <= y < end_y 时与扫描线相交；最顶上一条扫描线同时闭合
        在该处结束的边，使上边界这一行也被填充。
        交点排序后两两配对，填充 ceil(x_i) 到 floor(x_{i+1})。
        """
        if not polygon:
            return []

        edges = PolygonFill.build_edge_table(polygon)
        y_coords = [p[1] for p in polygon]
        y_min = min(y_coords)
        y_max = max(y_coords)

        fill_points = []
        y = y_min
        while y <= y_max:
            intersections = []
            for edge in edges:
                if edge.start_y <= y < edge.end_y or (y == y_max and y == edge.end_y):
                    intersections.append(edge.x_at_min_y + edge.slope_inverse * (y - edge.start_y))

            intersections.sort()

            # 末尾落单的交点不参与配对
            for j in range(0, len(intersections) - 1, 2):
                x_start = math.ceil(intersections[j])
                x_end = math.floor(intersections[j + 1])
                for x in range(x_start, x_end + 1):
                    fill_points.append(Point(x, y))
            y += 1

        logger.debug("scanline fill: %d edges, %d points", len(edges), len(fill_points))
        return fill_points

    @staticmethod
    def scanline_with_point_test_fill(polygon) -> list:
        """
        扫描线填充 + 每条扫描线的射线法交叉检查
        记录每行活动边的最左交点，结果仍然是扫描线填充的输出
        """
        if not polygon:
            return []

        fill_points = PolygonFill.scanline_fill(polygon)

        n = len(polygon)
        y_coords = [p[1] for p in polygon]
        y_min = min(y_coords)
        y_max = max(y_coords)

        leftmost_crossing = {}
        y = y_min
        while y <= y_max:
            j = n - 1
            for i in range(n):
                xi, yi = polygon[i][0], polygon[i][1]
                xj, yj = polygon[j][0], polygon[j][1]
                if (yi > y) != (yj > y):
                    x_cross = math.floor(xi + (y - yi) / (yj - yi) * (xj - xi))
                    leftmost_crossing[y] = min(leftmost_crossing.get(y, x_cross), x_cross)
                j = i
            y += 1

        outside = 0
        left_of_edges = 0
        for p in fill_points:
            if not PolygonFill.is_point_inside_polygon(p.x, p.y, polygon):
                outside += 1
            if p.y in leftmost_crossing and p.x < leftmost_crossing[p.y]:
                left_of_edges += 1

        logger.debug("point test cross-check: %d of %d boundary-only points, %d left of active edges",
                     outside, len(fill_points), left_of_edges)
        return fill_points

    @staticmethod
    def flood_fill(polygon, margin=settings.FLOOD_FILL_MARGIN) -> list:
        """
        洪水填充算法 - 以每个顶点为种子的 4 连通填充
        使用栈实现，避免递归深度限制；探索范围限制在包围盒外扩 margin 以内
        """
        if not polygon:
            return []

        min_x, min_y, max_x, max_y = bounding_box(polygon)
        min_x, min_y = min_x - margin, min_y - margin
        max_x, max_y = max_x + margin, max_y + margin

        stack = [(math.floor(p[0]), math.floor(p[1])) for p in polygon]
        visited = set()
        filled_points = []

        while stack:
            x, y = stack.pop()
            if (x, y) in visited:
                continue
            visited.add((x, y))

            if not (min_x <= x <= max_x and min_y <= y <= max_y):
                continue
            if not PolygonFill.is_point_inside_any_polygon(x, y, [polygon]):
                continue

            filled_points.append(Point(x, y))
            stack.append((x + 1, y))
            stack.append((x - 1, y))
            stack.append((x, y + 1))
            stack.append((x, y - 1))

        logger.debug("flood fill: %d visited, %d filled", len(visited), len(filled_points))
        return filled_points

    @staticmethod
    def coarse_flood_cells(polygon, cell_size=settings.COARSE_CELL_SIZE, bounds=None) -> list:
        """
        粗网格扫描线洪水填充的遍历过程
        种子是每个顶点所在网格单元的中心；每次出栈后沿行向左右扩展，
        直到越界或遇到已绘制的单元，再把上下两行未绘制的单元压栈
        bounds: (x_min, y_min, x_max, y_max)，默认是包围盒外扩一个单元
        返回按绘制顺序排列的单元中心
        """
        if cell_size <= 0:
            raise InvalidParameterError(f"cell_size must be positive, got {cell_size}")
        if not polygon:
            return []

        if bounds is None:
            min_x, min_y, max_x, max_y = bounding_box(polygon)
            bounds = (min_x - cell_size, min_y - cell_size, max_x + cell_size, max_y + cell_size)
        x_min, y_min, x_max, y_max = bounds

        half = cell_size / 2
        stack = []
        for p in polygon:
            x_center = math.floor(p[0] / cell_size) * cell_size + half
            y_center = math.floor(p[1] / cell_size) * cell_size + half
            if x_min <= x_center < x_max and y_min <= y_center < y_max:
                stack.append((x_center, y_center))

        painted = set()
        cells = []

        while stack:
            x, y = stack.pop()
            if (x, y) in painted:
                continue

            left = x
            right = x
            while left - cell_size >= x_min and (left - cell_size, y) not in painted:
                left -= cell_size
            while right + cell_size < x_max and (right + cell_size, y) not in painted:
                right += cell_size

            i = left
            while i <= right:
                cells.append(Point(i, y))
                painted.add((i, y))
                if y - cell_size >= y_min and (i, y - cell_size) not in painted:
                    stack.append((i, y - cell_size))
                if y + cell_size < y_max and (i, y + cell_size) not in painted:
                    stack.append((i, y + cell_size))
                i += cell_size

        return cells

    @staticmethod
    def scanline_flood_fill(polygon, cell_size=settings.COARSE_CELL_SIZE, bounds=None) -> list:
        """粗网格遍历只决定访问顺序，返回值仍是扫描线填充的结果"""
        cells = PolygonFill.coarse_flood_cells(polygon, cell_size, bounds)
        logger.debug("coarse flood walk painted %d cells of size %s", len(cells), cell_size)
        return PolygonFill.scanline_fill(polygon)
