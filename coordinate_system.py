# coordinate_system.py
"""
引擎坐标与画布坐标的转换
核心原则：
1. 光栅化引擎输出的点在引擎坐标系中（原点任意，y 轴向上），不带任何偏移
2. 画布坐标原点在左上角，y 轴向下；引擎原点放在画布中心
3. 转换流程：engine (x, y) -> (origin_x + x, origin_y - y) -> screen
"""


def surface_origin(width, height):
    """画布中心，50x50 的画布得到 (25, 25)"""
    return width // 2, height // 2


def engine_to_screen(engine_coords, origin_x, origin_y):
    """
    将引擎坐标转换为画布坐标

    Args:
        engine_coords: 列表，格式为 [x1, y1, x2, y2, ...]
        origin_x, origin_y: 引擎原点在画布上的位置

    Returns:
        画布坐标列表
    """
    if not engine_coords:
        return []

    screen_coords = []
    for i, coord in enumerate(engine_coords):
        if i % 2 == 0:  # x 坐标
            screen_coords.append(origin_x + coord)
        else:  # y 坐标，翻转
            screen_coords.append(origin_y - coord)
    return screen_coords


def screen_to_engine(screen_coords, origin_x, origin_y):
    """engine_to_screen 的逆变换"""
    if not screen_coords:
        return []

    engine_coords = []
    for i, coord in enumerate(screen_coords):
        if i % 2 == 0:
            engine_coords.append(coord - origin_x)
        else:
            engine_coords.append(origin_y - coord)
    return engine_coords


def in_bounds(sx, sy, width, height):
    return 0 <= sx < width and 0 <= sy < height
