# drawing_utils.py

"""
Preview rendering for rasterized point sequences.
把算法输出的点序列按放大倍数画成 PIL 图像（可选网格），intensity 映射为不透明度。
"""
import logging

from PIL import ImageDraw

import settings
from errors import InvalidParameterError
from pixel_buffer import PixelBuffer
from point import round_half_up

logger = logging.getLogger(__name__)


def collect_coverage(points) -> dict:
    """
    把点序列合并成 {(x, y): 覆盖率}
    实数坐标四舍五入到格子；没有 intensity 的点覆盖率为 1。
    同一格子多次写入时保留最大覆盖率，后写入的低覆盖率点不会遮住先前的高覆盖率点。
    """
    coverage = {}
    for p in points:
        cell = (round_half_up(p[0]), round_half_up(p[1]))
        intensity = getattr(p, "intensity", None)
        if intensity is None:
            intensity = 1.0
        intensity = max(0.0, min(1.0, intensity))
        if intensity > coverage.get(cell, -1.0):
            coverage[cell] = intensity
    return coverage


def render_points(points, scale=settings.DEFAULT_SCALE, grid=settings.DEFAULT_GRID_ENABLED,
                  color=settings.POINT_COLOR, background=settings.BACKGROUND_COLOR, size=None):
    """
    根据点序列创建预览图像
    - scale: 每个栅格点对应的像素边长
    - grid: 是否叠加网格线
    - size: (列数, 行数)，默认取最大坐标 + 1
    负坐标或超出 size 的点被跳过。
    """
    if scale < 1:
        raise InvalidParameterError(f"scale must be >= 1, got {scale}")

    coverage = collect_coverage(points)
    if size is None:
        cols = max((x for x, _ in coverage), default=0) + 1
        rows = max((y for _, y in coverage), default=0) + 1
    else:
        cols, rows = size
    cols, rows = max(1, cols), max(1, rows)

    buffer = PixelBuffer(cols * scale, rows * scale, background)
    if grid:
        buffer.draw_grid(scale, settings.GRID_COLOR)

    layer = buffer.new_layer()
    layer_draw = ImageDraw.Draw(layer)
    skipped = 0
    for (x, y), intensity in coverage.items():
        rgba = PixelBuffer.hex_to_rgba(color, alpha=round_half_up(255 * intensity))
        if not buffer.fill_cell(x, y, rgba, scale, draw=layer_draw):
            skipped += 1

    if skipped:
        logger.debug("skipped %d cells outside the %dx%d preview", skipped, cols, rows)
    return buffer.composite(layer)
