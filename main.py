import logging

import config


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    # 延迟导入：只在真正启动窗口时才需要 Tk
    from app_core import RasterApp

    app = RasterApp()
    app.mainloop()


if __name__ == "__main__":
    main()
