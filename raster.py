"""
光栅化引擎：把连续的几何参数（端点、圆心、半径）映射成离散的整数像素坐标。

四种算法互相独立，都是无状态的纯函数：
    - iter_step_line       逐点法（斜截式 y = kx + b）
    - iter_dda_line        DDA 数字微分分析法
    - iter_bresenham_line  Bresenham 直线（纯整数运算）
    - iter_midpoint_circle 中点/Bresenham 圆（8 对称）

iter_* 返回惰性迭代器，可以边算边画；SimpleRasterization 上的同名静态方法返回列表。
输出坐标与输入在同一坐标系，不做任何屏幕偏移。
"""
import math
import operator
from typing import Iterator, List, NamedTuple


class Point2D(NamedTuple):
    """一个像素坐标 (x, y)。"""
    x: int
    y: int


class RasterizationError(ValueError):
    """输入参数不在算法定义域内（竖直线的逐点法、负半径、非整数坐标等）。"""


def round_half_away(value: float) -> int:
    """四舍五入，.5 远离零取整：0.5 -> 1, 1.5 -> 2, -0.5 -> -1。

    不用 floor(v + 0.5)，那样 0.49999999999999994 会被进成 1。
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(whole) if value >= 0 else -int(whole)


def div_round_half_away(num: int, den: int) -> int:
    """精确计算 num / den 并按 .5 远离零取整，全程整数运算。

    逐点法和 DDA 的坐标都是有理数，先算成浮点会把 7.5 算成 7.4999...，
    所以取整必须在分数上完成。
    """
    if den == 0:
        raise ZeroDivisionError("div_round_half_away: zero denominator")
    if den < 0:
        num, den = -num, -den
    q, r = divmod(abs(num), den)
    if 2 * r >= den:
        q += 1
    return q if num >= 0 else -q


def _as_ints(**params) -> tuple:
    """校验并转换为 int；接受 numpy.int64 等整数类型，拒绝 bool 和浮点"""
    values = []
    for name, value in params.items():
        if isinstance(value, bool):
            raise RasterizationError(f"{name} must be an integer, got {value!r}")
        try:
            values.append(operator.index(value))
        except TypeError:
            raise RasterizationError(f"{name} must be an integer, got {value!r}") from None
    return tuple(values)


# --- 逐点法 ---

def iter_step_line(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point2D]:
    """逐点法：沿 x 轴每次走一格，用 y = kx + b 求 y。

    共产生 |x1 - x0| + 1 个点。陡峭的直线会出现断点，这是算法本身的特性。
    竖直线 (x0 == x1) 的斜率不存在，直接报错，请改用 DDA 或 Bresenham。
    """
    x0, y0, x1, y1 = _as_ints(x0=x0, y0=y0, x1=x1, y1=y1)
    if x0 == x1:
        raise RasterizationError(
            f"step-by-step cannot rasterize the vertical line x={x0}; use dda or bresenham"
        )
    return _step_line(x0, y0, x1, y1)


def _step_line(x0, y0, x1, y1):
    # y = kx + b 写成 (y0 * run + rise * (x - x0)) / run，k 不落成浮点
    rise = y1 - y0
    run = x1 - x0
    step = 1 if x0 < x1 else -1

    x = x0
    while x != x1:
        yield Point2D(x, div_round_half_away(y0 * run + rise * (x - x0), run))
        x += step
    # 终点单独补上
    yield Point2D(x1, div_round_half_away(y0 * run + rise * (x1 - x0), run))


# --- DDA ---

def iter_dda_line(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point2D]:
    """DDA 直线算法 - 步数等于主轴方向的跨度，共 steps + 1 个点。"""
    x0, y0, x1, y1 = _as_ints(x0=x0, y0=y0, x1=x1, y1=y1)
    return _dda_line(x0, y0, x1, y1)


def _dda_line(x0, y0, x1, y1):
    dx = x1 - x0
    dy = y1 - y0
    steps = max(abs(dx), abs(dy))

    if steps == 0:
        yield Point2D(x0, y0)
        return

    # 第 i 步的坐标是 x0 + i * dx / steps，按分数取整，i == steps 时恰好落在终点
    for i in range(steps + 1):
        yield Point2D(
            div_round_half_away(x0 * steps + i * dx, steps),
            div_round_half_away(y0 * steps + i * dy, steps),
        )


# --- Bresenham 直线 ---

def iter_bresenham_line(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point2D]:
    """Bresenham直线算法 - 整数运算，8 连通，包含两个端点。

    误差项在平局时的取舍与方向有关，所以总是从字典序较小的端点开始追踪，
    必要时再倒序输出。这样 A->B 与 B->A 得到的点集完全相同，
    并且输出仍然从 (x0, y0) 开始、到 (x1, y1) 结束。
    """
    x0, y0, x1, y1 = _as_ints(x0=x0, y0=y0, x1=x1, y1=y1)
    if (x1, y1) < (x0, y0):
        path = list(_bresenham_line(x1, y1, x0, y0))
        path.reverse()
        return iter(path)
    return _bresenham_line(x0, y0, x1, y1)


def _bresenham_line(x0, y0, x1, y1):
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        yield Point2D(x0, y0)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


# --- 中点圆 ---

def iter_midpoint_circle(xc: int, yc: int, radius: int) -> Iterator[Point2D]:
    """中点圆算法 - 每轮输出 8 个对称点，x == y 时允许重复，不去重。

    半径为 0 时只得到圆心（重复 8 次）。负半径报错。
    """
    xc, yc, radius = _as_ints(xc=xc, yc=yc, radius=radius)
    if radius < 0:
        raise RasterizationError(f"radius must be non-negative, got {radius}")
    return _midpoint_circle(xc, yc, radius)


def _midpoint_circle(xc, yc, radius):
    x = radius
    y = 0
    err = 0

    while x >= y:
        yield Point2D(xc + x, yc + y)
        yield Point2D(xc + y, yc + x)
        yield Point2D(xc - y, yc + x)
        yield Point2D(xc - x, yc + y)
        yield Point2D(xc - x, yc - y)
        yield Point2D(xc - y, yc - x)
        yield Point2D(xc + y, yc - x)
        yield Point2D(xc + x, yc - y)

        # 两个分支每轮都要判断，不是 if/else
        if err <= 0:
            y += 1
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1


class SimpleRasterization:
    """列表版本的光栅化算法，供需要一次拿到全部点的调用方使用"""

    @staticmethod
    def step_line(x0: int, y0: int, x1: int, y1: int) -> List[Point2D]:
        return list(iter_step_line(x0, y0, x1, y1))

    @staticmethod
    def dda_line(x0: int, y0: int, x1: int, y1: int) -> List[Point2D]:
        return list(iter_dda_line(x0, y0, x1, y1))

    @staticmethod
    def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> List[Point2D]:
        return list(iter_bresenham_line(x0, y0, x1, y1))

    @staticmethod
    def midpoint_circle(xc: int, yc: int, radius: int) -> List[Point2D]:
        return list(iter_midpoint_circle(xc, yc, radius))
