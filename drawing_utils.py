# drawing_utils.py

"""
Algorithm dispatch and form-field parsing for the raster demo.
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum

from raster import (
    RasterizationError,
    iter_bresenham_line,
    iter_dda_line,
    iter_midpoint_circle,
    iter_step_line,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"[+-]?\d+")


class Algorithm(Enum):
    STEP_BY_STEP = "stepByStep"
    DDA = "dda"
    BRESENHAM = "bresenham"
    BRESENHAM_CIRCLE = "bresenhamCircle"

    @property
    def label(self):
        return _LABELS[self]

    @property
    def description(self):
        return _DESCRIPTIONS[self]

    @property
    def is_circle(self):
        return self is Algorithm.BRESENHAM_CIRCLE

    @classmethod
    def from_name(cls, name):
        """按取值、成员名或显示名查找算法，大小写不敏感"""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for algorithm in cls:
            if key in (algorithm.value.lower(), algorithm.name.lower(), algorithm.label.lower()):
                return algorithm
        raise RasterizationError(f"unknown algorithm: {name!r}")


_LABELS = {
    Algorithm.STEP_BY_STEP: "Step by step",
    Algorithm.DDA: "DDA",
    Algorithm.BRESENHAM: "Bresenham",
    Algorithm.BRESENHAM_CIRCLE: "Bresenham circle",
}

_DESCRIPTIONS = {
    Algorithm.STEP_BY_STEP: "y = kx + b evaluated at every x.\nSteep lines leave gaps; vertical lines are rejected.",
    Algorithm.DDA: "Steps along the dominant axis with fixed x/y increments.",
    Algorithm.BRESENHAM: "Integer error accumulator, 8-connected, no rounding.",
    Algorithm.BRESENHAM_CIRCLE: "Midpoint circle, one octant mirrored 8 ways.\nUses x0, y0 as the centre.",
}


def parse_int_field(text):
    """
    Read an integer the way the form always has: leading signed digits win,
    anything unparsable becomes 0 ("12px" -> 12, "-3.7" -> -3, "" -> 0).
    """
    if text is None:
        return 0
    match = _LEADING_INT.match(str(text).strip())
    if not match:
        return 0
    return int(match.group())


@dataclass(frozen=True)
class DrawRequest:
    algorithm: Algorithm
    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0
    radius: int = 0

    @classmethod
    def from_fields(cls, algorithm, fields):
        """fields: {'x0': '3', 'y0': '', ...}，缺失或非法的值按 0 处理"""
        return cls(
            algorithm=Algorithm.from_name(algorithm),
            x0=parse_int_field(fields.get("x0")),
            y0=parse_int_field(fields.get("y0")),
            x1=parse_int_field(fields.get("x1")),
            y1=parse_int_field(fields.get("y1")),
            radius=parse_int_field(fields.get("radius")),
        )


_LINE_ALGORITHMS = {
    Algorithm.STEP_BY_STEP: iter_step_line,
    Algorithm.DDA: iter_dda_line,
    Algorithm.BRESENHAM: iter_bresenham_line,
}


def rasterize(request):
    """Return the lazy point sequence for a request."""
    logger.debug("Rasterizing %s", request)
    if request.algorithm.is_circle:
        return iter_midpoint_circle(request.x0, request.y0, request.radius)
    line_algo = _LINE_ALGORITHMS[request.algorithm]
    return line_algo(request.x0, request.y0, request.x1, request.y1)


def render(buffer, request):
    """
    Clear the buffer, then stream the request's points into it in emission order.
    Returns the number of points the algorithm emitted.
    """
    points = rasterize(request)
    buffer.clear()
    plotted = buffer.plot_all(points)
    # clear() 已把 clipped 归零，越界的点也算发射过
    emitted = plotted + buffer.clipped
    logger.info("%s emitted %d points (%d off-surface)", request.algorithm.label, emitted, buffer.clipped)
    return emitted
