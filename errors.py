# errors.py
"""光栅化库的异常类型"""


class RasterizationError(ValueError):
    """所有几何参数错误的基类"""


class InvalidParameterError(RasterizationError):
    """参数超出算法允许的范围（例如 B 样条次数、采样数量）"""
