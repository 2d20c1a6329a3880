# settings.py
"""
默认参数配置
算法与预览渲染使用的常量都集中在这里，调用时可以通过关键字参数覆盖
"""

# 抛物线参数扫描步长
PARABOLA_STEP = 0.1

# 逐像素洪水填充：包围盒外扩的像素数
FLOOD_FILL_MARGIN = 1

# 粗网格洪水填充的单元大小（像素）
COARSE_CELL_SIZE = 10

# 预览渲染
DEFAULT_SCALE = 10
DEFAULT_GRID_ENABLED = False
GRID_COLOR = "#CCCCCC"
POINT_COLOR = "#000000"
BACKGROUND_COLOR = "#FFFFFF"
