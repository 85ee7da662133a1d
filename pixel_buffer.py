from PIL import Image, ImageDraw

import config
from coordinate_system import engine_to_screen, in_bounds, screen_to_engine, surface_origin


class PixelBuffer:
    """封装光栅化结果的 PIL 像素缓冲。

    引擎原点位于缓冲中心，y 轴向上。用法：
        buffer = PixelBuffer(50, 50)
        buffer.clear()                 # 背景 + 坐标轴
        buffer.plot_all(points)        # 按发射顺序逐点写入
        buffer.scaled(8)               # 放大后用于显示
        buffer.save("out.png")

    超出缓冲范围的点直接跳过，计入 clipped，不抛异常。
    """
    def __init__(self, width=config.CANVAS_SIZE, height=config.CANVAS_SIZE,
                 bg_color=config.CANVAS_BG_COLOR, point_color=config.POINT_COLOR,
                 axis_color=config.AXIS_COLOR):
        self.width = width
        self.height = height
        self.bg_rgba = self.hex_to_rgba(bg_color)
        self.point_rgba = self.hex_to_rgba(point_color)
        self.axis_rgba = self.hex_to_rgba(axis_color)
        self.origin_x, self.origin_y = surface_origin(width, height)
        self.image = None
        self.draw = None
        self.clipped = 0

    @staticmethod
    def hex_to_rgba(hex_color):
        if not hex_color or hex_color == "transparent":
            return (0, 0, 0, 0)
        hex_color = hex_color.lstrip('#')
        if len(hex_color) == 6:
            r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
            return (r, g, b, 255)
        elif len(hex_color) == 8:
            r, g, b, a = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4, 6))
            return (r, g, b, a)
        else:
            return (0, 0, 0, 255)

    def ensure(self):
        if self.image is None or self.image.size != (self.width, self.height):
            self.image = Image.new("RGBA", (self.width, self.height), self.bg_rgba)
            self.draw = ImageDraw.Draw(self.image)

    def clear(self):
        """清空缓冲并重画坐标轴"""
        self.ensure()
        self.draw.rectangle([0, 0, self.width - 1, self.height - 1], fill=self.bg_rgba)
        self.clipped = 0
        self.draw_axes()

    def draw_axes(self):
        self.ensure()
        self.draw.line([self.origin_x, 0, self.origin_x, self.height - 1], fill=self.axis_rgba)
        self.draw.line([0, self.origin_y, self.width - 1, self.origin_y], fill=self.axis_rgba)

    def plot(self, point):
        """写入一个引擎坐标点，返回是否落在缓冲内"""
        self.ensure()
        sx, sy = engine_to_screen(list(point), self.origin_x, self.origin_y)
        if not in_bounds(sx, sy, self.width, self.height):
            self.clipped += 1
            return False
        self.image.putpixel((sx, sy), self.point_rgba)
        return True

    def plot_all(self, points):
        plotted = 0
        for point in points:
            if self.plot(point):
                plotted += 1
        return plotted

    def engine_point_at(self, sx, sy):
        """缓冲像素 (sx, sy) 对应的引擎坐标，越界返回 None"""
        if not in_bounds(sx, sy, self.width, self.height):
            return None
        x, y = screen_to_engine([sx, sy], self.origin_x, self.origin_y)
        return x, y

    def pixel_at(self, point):
        """按引擎坐标读取像素颜色，越界返回 None"""
        self.ensure()
        sx, sy = engine_to_screen(list(point), self.origin_x, self.origin_y)
        if not in_bounds(sx, sy, self.width, self.height):
            return None
        return self.image.getpixel((sx, sy))

    def scaled(self, zoom=config.DISPLAY_ZOOM):
        """最近邻放大，保持像素格子清晰"""
        self.ensure()
        zoom = max(int(zoom), 1)
        return self.image.resize((self.width * zoom, self.height * zoom), Image.Resampling.NEAREST)

    def save(self, file_path):
        self.ensure()
        image = self.image
        if str(file_path).lower().endswith((".jpg", ".jpeg")):
            image = image.convert("RGB")
        image.save(file_path)
