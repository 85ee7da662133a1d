# tooltip.py
import tkinter as tk

import customtkinter as ctk


class AlgorithmTooltip:
    """算法下拉框的悬停说明。

    显示的是 app 当前选中算法的名称和描述；切换算法时调用 refresh()，
    已经弹出的提示会就地更新文字，不需要重新悬停。
    """

    def __init__(self, app, widget, delay=400):
        self.app = app
        self.widget = widget
        self.delay = delay
        self.window = None
        self.title_label = None
        self.body_label = None
        self._after_id = None

        self.widget.bind("<Enter>", self._schedule, add="+")
        self.widget.bind("<Leave>", self._cancel, add="+")

    def _schedule(self, event=None):
        self._cancel()
        self._after_id = self.widget.after(self.delay, self.show)

    def _cancel(self, event=None):
        if self._after_id:
            self.widget.after_cancel(self._after_id)
            self._after_id = None
        self.hide()

    def show(self):
        self._after_id = None
        if self.window is None:
            self.window = tk.Toplevel(self.widget)
            self.window.wm_overrideredirect(True)
            frame = ctk.CTkFrame(self.window, corner_radius=6, border_width=1, border_color="gray50")
            frame.pack(fill="both", expand=True)
            self.title_label = ctk.CTkLabel(frame, text="", font=("Microsoft YaHei", 12, "bold"), anchor="w")
            self.title_label.pack(fill="x", padx=8, pady=(6, 0))
            self.body_label = ctk.CTkLabel(frame, text="", font=("Microsoft YaHei", 11),
                                           text_color="gray70", justify="left", anchor="w")
            self.body_label.pack(fill="x", padx=8, pady=(0, 6))
        # 放在下拉框正下方
        x = self.widget.winfo_rootx()
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 4
        self.window.wm_geometry(f"+{x}+{y}")
        self.refresh()

    def refresh(self):
        if self.window is None:
            return
        algorithm = self.app.rasterization_algorithm
        self.title_label.configure(text=algorithm.label)
        self.body_label.configure(text=algorithm.description)

    def hide(self):
        if self.window is not None:
            self.window.destroy()
            self.window = None
