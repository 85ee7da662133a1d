import logging
from tkinter import filedialog, messagebox

import customtkinter as ctk
from PIL import ImageTk

import config
from drawing_utils import Algorithm, DrawRequest, render
from pixel_buffer import PixelBuffer
from raster import RasterizationError
from ui_setup import setup_ui

logger = logging.getLogger(__name__)


class RasterApp(ctk.CTk):
    def __init__(self):
        super().__init__()

        # --- 基本窗口设置 ---
        self.title(config.WINDOW_TITLE)
        self.geometry(config.WINDOW_GEOMETRY)
        ctk.set_appearance_mode(config.APPEARANCE_MODE)
        ctk.set_default_color_theme(config.COLOR_THEME)

        # --- 状态变量 ---
        self.rasterization_algorithm = Algorithm.from_name(config.DEFAULT_ALGORITHM)
        self.display_zoom = config.DISPLAY_ZOOM
        self.pixel_buffer = PixelBuffer()
        self._image_reference = None
        self._image_origin = (0, 0)

        setup_ui(self)
        self._sync_radius_field()

        # 初始只画坐标轴
        self.clear_canvas()

    def set_rasterization_algorithm(self, label):
        """设置光栅化算法（下拉框回调，参数为显示名）"""
        self.rasterization_algorithm = Algorithm.from_name(label)
        self._sync_radius_field()
        self.algorithm_tooltip.refresh()
        self.status_label.configure(text=f"当前：{self.rasterization_algorithm.label}")

    def _sync_radius_field(self):
        # 半径只对圆有意义，直线用不到
        is_circle = self.rasterization_algorithm.is_circle
        self.fields["radius"].configure(state="normal" if is_circle else "disabled")
        for name in ("x1", "y1"):
            self.fields[name].configure(state="disabled" if is_circle else "normal")

    def read_fields(self):
        return {name: entry.get() for name, entry in self.fields.items()}

    def draw(self):
        """读取输入框，按所选算法光栅化并显示"""
        request = DrawRequest.from_fields(self.rasterization_algorithm, self.read_fields())
        try:
            emitted = render(self.pixel_buffer, request)
        except RasterizationError as e:
            logger.warning("Rejected %s: %s", request, e)
            messagebox.showwarning("输入无效", str(e))
            return
        status = f"{request.algorithm.label}: {emitted} 个点"
        if self.pixel_buffer.clipped:
            status += f"\n{self.pixel_buffer.clipped} 个点超出画布"
        self.status_label.configure(text=status)
        self.refresh_canvas()

    def clear_canvas(self):
        self.pixel_buffer.clear()
        self.status_label.configure(text="")
        self.refresh_canvas()

    def refresh_canvas(self):
        """把放大后的像素缓冲画到 Canvas 中央"""
        self.canvas.delete("pixelbuffer_image")
        tk_img = ImageTk.PhotoImage(self.pixel_buffer.scaled(self.display_zoom))
        width = max(self.canvas.winfo_width(), 1)
        height = max(self.canvas.winfo_height(), 1)
        self.canvas.create_image(width // 2, height // 2, image=tk_img, anchor="center", tags=("pixelbuffer_image",))
        # 保持引用避免 GC
        self._image_reference = tk_img
        self._image_origin = (width // 2 - tk_img.width() // 2, height // 2 - tk_img.height() // 2)

    def on_mouse_move(self, event):
        """在左下角显示鼠标所在像素的引擎坐标"""
        left, top = self._image_origin
        sx = (event.x - left) // self.display_zoom
        sy = (event.y - top) // self.display_zoom
        point = self.pixel_buffer.engine_point_at(sx, sy)
        self.position_label.configure(text="" if point is None else f"({point[0]}, {point[1]})")

    def export_as_image(self):
        file_path = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("PNG 文件", "*.png"), ("JPEG 文件", "*.jpg")],
            title="导出为图片"
        )
        if not file_path:
            return
        try:
            self.pixel_buffer.save(file_path)
        except (OSError, ValueError) as e:
            logger.error("Export to %s failed: %s", file_path, e)
            messagebox.showerror("导出失败", f"错误详情: {e}")
            return
        logger.info("Exported %dx%d image to %s", self.pixel_buffer.width, self.pixel_buffer.height, file_path)
        messagebox.showinfo("成功", f"图片导出成功！分辨率: {self.pixel_buffer.width}x{self.pixel_buffer.height}")
