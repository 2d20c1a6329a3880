import logging
import math

from point import Point, round_half_up

logger = logging.getLogger(__name__)


def _fpart(value: float) -> float:
    return value - math.floor(value)


class LineRasterization:
    """直线光栅化算法（DDA / Bresenham / Wu 反走样）"""

    @staticmethod
    def build_incremental_line(start, end) -> list:
        """DDA直线算法 - 数字微分分析法，每步累加 dx/steps、dy/steps 后取整"""
        points = []
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        steps = max(abs(dx), abs(dy))

        if steps == 0:
            return [Point(round_half_up(start[0]), round_half_up(start[1]))]

        x_inc = dx / steps
        y_inc = dy / steps

        x = float(start[0])
        y = float(start[1])

        # 实数端点时 steps 可能是小数，共输出 floor(steps) + 1 个点
        for _ in range(int(math.floor(steps)) + 1):
            points.append(Point(round_half_up(x), round_half_up(y)))
            x += x_inc
            y += y_inc

        return points

    @staticmethod
    def build_error_accumulator_line(start, end) -> list:
        """Bresenham直线算法 - 整数误差累加，包含两个端点且没有对角缺口"""
        points = []
        x, y = round_half_up(start[0]), round_half_up(start[1])
        x1, y1 = round_half_up(end[0]), round_half_up(end[1])

        dx = abs(x1 - x)
        dy = abs(y1 - y)
        sx = 1 if x < x1 else -1
        sy = 1 if y < y1 else -1
        err = dx - dy

        while x != x1 or y != y1:
            points.append(Point(x, y))
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy
        points.append(Point(x, y))

        return points

    @staticmethod
    def build_anti_aliased_line(start, end) -> list:
        """
        Wu反走样直线算法
        每一列输出上下相邻的两个点，两者 intensity 之和为 1
        输出顺序：起点列、终点列，然后是从左到右的中间列
        """
        points = []

        x0, y0 = start[0], start[1]
        x1, y1 = end[0], end[1]
        # 只交换局部副本，调用方的端点不受影响
        if x1 < x0:
            x0, x1 = x1, x0
            y0, y1 = y1, y0

        dx = x1 - x0
        dy = y1 - y0
        # 垂直线：斜率项按 0 处理
        gradient = dy / dx if dx != 0 else 0.0

        xend = round_half_up(x0)
        yend = y0 + gradient * (xend - x0)
        xgap = 1 - _fpart(x0 + 0.5)
        xpxl1 = xend
        ypxl1 = math.floor(yend)
        points.append(Point(xpxl1, ypxl1, 1 - _fpart(yend) * xgap))
        points.append(Point(xpxl1, ypxl1 + 1, _fpart(yend) * xgap))
        intery = yend + gradient

        xend = round_half_up(x1)
        yend = y1 + gradient * (xend - x1)
        xgap = _fpart(x1 + 0.5)
        xpxl2 = xend
        ypxl2 = math.floor(yend)
        points.append(Point(xpxl2, ypxl2, 1 - _fpart(yend) * xgap))
        points.append(Point(xpxl2, ypxl2 + 1, _fpart(yend) * xgap))

        for x in range(xpxl1 + 1, xpxl2):
            points.append(Point(x, math.floor(intery), 1 - _fpart(intery)))
            points.append(Point(x, math.floor(intery) + 1, _fpart(intery)))
            intery += gradient

        return points

    @staticmethod
    def build_chain(points) -> list:
        """把相邻顶点之间的 DDA 线段连成一条折线，共享顶点只出现一次"""
        if not points:
            return []
        if len(points) == 1:
            return [Point(round_half_up(points[0][0]), round_half_up(points[0][1]))]

        chain = []
        for i in range(len(points) - 1):
            line = LineRasterization.build_incremental_line(points[i], points[i + 1])
            if i < len(points) - 2:
                line.pop()
            chain.extend(line)

        logger.debug("chained %d vertices into %d points", len(points), len(chain))
        return chain
