import customtkinter as ctk
from tkinter import Canvas, BOTH, YES

import config
from drawing_utils import Algorithm
from tooltip import AlgorithmTooltip


def setup_ui(app):
    """创建 RasterApp 的控件与布局，只负责把部件绑定到传入的 `app` 实例上。"""
    app.grid_rowconfigure(0, weight=1)
    app.grid_columnconfigure(1, weight=1)
    ui_font = config.UI_FONT

    # --- 左侧参数面板 ---
    app.options_panel = ctk.CTkFrame(app, width=220, corner_radius=0)
    app.options_panel.grid(row=0, column=0, sticky="ns")
    app.options_panel.grid_propagate(False)

    ctk.CTkLabel(app.options_panel, text="算法", font=ui_font).pack(pady=(20, 0))
    app.algorithm_selector = ctk.CTkOptionMenu(
        app.options_panel,
        values=[algorithm.label for algorithm in Algorithm],
        command=app.set_rasterization_algorithm,
        font=ui_font
    )
    app.algorithm_selector.set(app.rasterization_algorithm.label)
    app.algorithm_selector.pack(pady=5, padx=15, fill="x")
    app.algorithm_tooltip = AlgorithmTooltip(app, app.algorithm_selector)

    ctk.CTkFrame(app.options_panel, height=2, fg_color="gray40").pack(pady=10, padx=15, fill="x")

    # 输入框：x0, y0, x1, y1, radius
    app.field_frame = ctk.CTkFrame(app.options_panel, fg_color="transparent")
    app.field_frame.pack(pady=5, padx=15, fill="x")
    app.field_frame.grid_columnconfigure(1, weight=1)
    app.fields = {}
    for row, name in enumerate(("x0", "y0", "x1", "y1", "radius")):
        ctk.CTkLabel(app.field_frame, text=name, font=ui_font, width=60, anchor="w").grid(row=row, column=0, pady=4, sticky="w")
        entry = ctk.CTkEntry(app.field_frame, width=100)
        entry.insert(0, config.DEFAULT_FIELDS.get(name, "0"))
        entry.grid(row=row, column=1, pady=4, sticky="ew")
        entry.bind("<Return>", lambda event: app.draw())
        app.fields[name] = entry

    ctk.CTkFrame(app.options_panel, height=2, fg_color="gray40").pack(pady=10, padx=15, fill="x")

    button_kwargs = {"font": ui_font, "height": 36, "corner_radius": 8}
    app.draw_button = ctk.CTkButton(app.options_panel, text="绘制", command=app.draw, **button_kwargs)
    app.draw_button.pack(pady=5, padx=15, fill="x")
    app.clear_button = ctk.CTkButton(app.options_panel, text="清空", command=app.clear_canvas,
                                     fg_color="transparent", border_width=1, **button_kwargs)
    app.clear_button.pack(pady=5, padx=15, fill="x")
    app.export_button = ctk.CTkButton(app.options_panel, text="导出图片...", command=app.export_as_image,
                                      fg_color="transparent", border_width=1, **button_kwargs)
    app.export_button.pack(pady=5, padx=15, fill="x")

    app.status_label = ctk.CTkLabel(app.options_panel, text="", text_color="gray70", font=(ui_font[0], 11), justify="left")
    app.status_label.pack(pady=(15, 5), padx=15)

    # 鼠标所在像素的引擎坐标
    app.position_label = ctk.CTkLabel(app.options_panel, text="", text_color="gray60", font=(ui_font[0], 11))
    app.position_label.pack(side="bottom", pady=10, padx=15)

    # --- 右侧画布 ---
    app.canvas_frame = ctk.CTkFrame(app, corner_radius=0)
    app.canvas_frame.grid(row=0, column=1, sticky="nsew")
    app.canvas = Canvas(app.canvas_frame, bg=config.VIEWPORT_BG_COLOR, highlightthickness=0)
    app.canvas.pack(fill=BOTH, expand=YES)
    app.canvas.bind("<Configure>", lambda event: app.refresh_canvas())
    app.canvas.bind("<Motion>", app.on_mouse_move)
    app.canvas.bind("<Leave>", lambda event: app.position_label.configure(text=""))
