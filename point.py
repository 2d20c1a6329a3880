# point.py
"""
基础数据类型 - 点与扫描线边
所有光栅化算法的输入既可以是 Point，也可以是普通的 (x, y) 元组
"""

import math
from typing import NamedTuple, Optional


class Point(NamedTuple):
    """栅格点；intensity 仅在反走样输出中出现（0..1 覆盖率），None 表示完全覆盖"""
    x: float
    y: float
    intensity: Optional[float] = None


class Edge(NamedTuple):
    """扫描线填充的边表项，始终满足 start_y < end_y"""
    start_y: float
    end_y: float
    x_at_min_y: float
    slope_inverse: float


def round_half_up(value: float) -> int:
    """四舍五入到最近整数，.5 一律向上（不使用 Python 的银行家舍入）"""
    return int(math.floor(value + 0.5))
