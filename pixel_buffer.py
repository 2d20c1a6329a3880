from PIL import Image, ImageDraw

import settings


class PixelBuffer:
    """封装用于预览栅格点的 PIL 像素缓冲。

    用法：
        buffer = PixelBuffer(width, height, "#FFFFFF")
        buffer.fill_cell(x, y, rgba, scale)
        buffer.draw_grid(scale, "#CCCCCC")
        buffer.composite(layer)  # 把半透明图层合成到主缓冲

    每个栅格点对应图像上一个 scale x scale 的方格。
    """
    def __init__(self, width, height, background=settings.BACKGROUND_COLOR):
        self.width = max(1, int(width))
        self.height = max(1, int(height))
        self.background = background
        self.image = Image.new("RGBA", (self.width, self.height), self.hex_to_rgba(background))
        self.draw = ImageDraw.Draw(self.image)

    @staticmethod
    def hex_to_rgba(hex_color, alpha=255):
        """颜色字符串转 RGBA：#RRGGBB 使用 alpha（渲染时由覆盖率换算而来），#RRGGBBAA 自带不透明度"""
        if not hex_color or hex_color == "transparent":
            return (0, 0, 0, 0)
        hex_color = hex_color.lstrip('#')
        if len(hex_color) == 6:
            r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
            return (r, g, b, alpha)
        elif len(hex_color) == 8:
            r, g, b, a = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4, 6))
            return (r, g, b, a)
        else:
            return (0, 0, 0, alpha)

    def new_layer(self):
        """与主缓冲同尺寸的透明图层"""
        return Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))

    def fill_cell(self, x, y, rgba, scale=settings.DEFAULT_SCALE, draw=None):
        """把栅格坐标 (x, y) 画成一个方格；超出图像的方格直接跳过"""
        left, top = x * scale, y * scale
        if left < 0 or top < 0 or left >= self.width or top >= self.height:
            return False
        target = self.draw if draw is None else draw
        target.rectangle([left, top, left + scale - 1, top + scale - 1], fill=rgba)
        return True

    def draw_grid(self, scale=settings.DEFAULT_SCALE, color=settings.GRID_COLOR):
        rgba = self.hex_to_rgba(color)
        for y in range(0, self.height, scale):
            self.draw.line([(0, y), (self.width, y)], fill=rgba, width=1)
        for x in range(0, self.width, scale):
            self.draw.line([(x, 0), (x, self.height)], fill=rgba, width=1)

    def composite(self, layer):
        """将 layer 按 alpha 合成到主缓冲"""
        self.image = Image.alpha_composite(self.image, layer)
        self.draw = ImageDraw.Draw(self.image)
        return self.image
