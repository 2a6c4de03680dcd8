# -*- coding: utf-8 -*-
"""
Outline pens.

Two interchangeable collectors sit behind the fontTools pen protocol:

- PathDataPen   accumulates SVG path data ("M x y L x y ... Z ")
- SegmentPen    accumulates typed segments (MoveTo, LineTo, QuadTo, CubicTo, Close)

Both subclass BasePen, so TrueType runs of implied on-curve points and
multi-segment cubic runs reach us as single quad/cubic callbacks, in path
order. A recorded segment list can be replayed into any pen; replaying it
into a PathDataPen gives exactly the path data a direct draw would.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, List, Optional, Sequence, Tuple, Union

from fontTools.pens.basePen import BasePen
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.teePen import TeePen

from .errors import NonFiniteCoordinateError

Point = Tuple[float, float]


# -----------------------------
# Segments
# -----------------------------
@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float
    command: ClassVar[str] = "M"

    @property
    def coords(self) -> Tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float
    command: ClassVar[str] = "L"

    @property
    def coords(self) -> Tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True)
class QuadTo:
    cx: float
    cy: float
    x: float
    y: float
    command: ClassVar[str] = "Q"

    @property
    def coords(self) -> Tuple[float, ...]:
        return (self.cx, self.cy, self.x, self.y)


@dataclass(frozen=True)
class CubicTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float
    command: ClassVar[str] = "C"

    @property
    def coords(self) -> Tuple[float, ...]:
        return (self.c1x, self.c1y, self.c2x, self.c2y, self.x, self.y)


@dataclass(frozen=True)
class Close:
    command: ClassVar[str] = "Z"

    @property
    def coords(self) -> Tuple[float, ...]:
        return ()


PathSegment = Union[MoveTo, LineTo, QuadTo, CubicTo, Close]

SEGMENT_TYPES = {cls.command: cls for cls in (MoveTo, LineTo, QuadTo, CubicTo, Close)}


def segment_from_command(command: str, coords: Sequence[float]) -> PathSegment:
    try:
        cls = SEGMENT_TYPES[command]
    except KeyError:
        raise ValueError(f"Unknown path command: {command!r}") from None
    return cls(*(float(v) for v in coords))


@dataclass(frozen=True)
class BoundingBox:
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min


# -----------------------------
# Number formatting
# -----------------------------
def check_finite(command: str, values: Sequence[float]) -> Tuple[float, ...]:
    out = tuple(float(v) for v in values)
    if not all(math.isfinite(v) for v in out):
        raise NonFiniteCoordinateError(command, out)
    return out


def fmt(v: float) -> str:
    """Shortest round-trip form; integral values without a fraction."""
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return repr(v)


# -----------------------------
# Pens
# -----------------------------
class PathDataPen(BasePen):
    def __init__(self, glyphSet=None) -> None:
        super().__init__(glyphSet)
        self._parts: List[str] = []

    def _emit(self, command: str, *pts: Point) -> None:
        values = check_finite(command, [c for pt in pts for c in pt])
        self._parts.append(command + " " + "".join(fmt(v) + " " for v in values))

    def _moveTo(self, pt: Point) -> None:
        self._emit("M", pt)

    def _lineTo(self, pt: Point) -> None:
        self._emit("L", pt)

    def _qCurveToOne(self, pt1: Point, pt2: Point) -> None:
        self._emit("Q", pt1, pt2)

    def _curveToOne(self, pt1: Point, pt2: Point, pt3: Point) -> None:
        self._emit("C", pt1, pt2, pt3)

    def _closePath(self) -> None:
        self._parts.append("Z ")

    def _endPath(self) -> None:
        pass

    @property
    def path_data(self) -> str:
        return "".join(self._parts)

    def reset(self) -> None:
        self._parts.clear()


class SegmentPen(BasePen):
    def __init__(self, glyphSet=None) -> None:
        super().__init__(glyphSet)
        self.segments: List[PathSegment] = []

    def _moveTo(self, pt: Point) -> None:
        self.segments.append(MoveTo(*check_finite("M", pt)))

    def _lineTo(self, pt: Point) -> None:
        self.segments.append(LineTo(*check_finite("L", pt)))

    def _qCurveToOne(self, pt1: Point, pt2: Point) -> None:
        self.segments.append(QuadTo(*check_finite("Q", (*pt1, *pt2))))

    def _curveToOne(self, pt1: Point, pt2: Point, pt3: Point) -> None:
        self.segments.append(CubicTo(*check_finite("C", (*pt1, *pt2, *pt3))))

    def _closePath(self) -> None:
        self.segments.append(Close())

    def _endPath(self) -> None:
        pass

    def reset(self) -> None:
        self.segments = []


def replay(segments: Iterable[PathSegment], pen) -> None:
    """Drive any fontTools pen with a recorded segment list."""
    for seg in segments:
        if isinstance(seg, MoveTo):
            pen.moveTo((seg.x, seg.y))
        elif isinstance(seg, LineTo):
            pen.lineTo((seg.x, seg.y))
        elif isinstance(seg, QuadTo):
            pen.qCurveTo((seg.cx, seg.cy), (seg.x, seg.y))
        elif isinstance(seg, CubicTo):
            pen.curveTo((seg.c1x, seg.c1y), (seg.c2x, seg.c2y), (seg.x, seg.y))
        elif isinstance(seg, Close):
            pen.closePath()
        else:
            raise TypeError(f"Not a path segment: {seg!r}")


def segments_to_path_data(segments: Iterable[PathSegment]) -> str:
    pen = PathDataPen()
    replay(segments, pen)
    return pen.path_data


# -----------------------------
# Extraction
# -----------------------------
def extract_outline(glyph_set, glyph_name: str, pen) -> Optional[BoundingBox]:
    """
    Draw one glyph into `pen` and return its control box, or None when the
    glyph has no contours (space, .null, ...).
    """
    bounds_pen = ControlBoundsPen(glyph_set)
    glyph_set[glyph_name].draw(TeePen(pen, bounds_pen))
    if bounds_pen.bounds is None:
        return None
    x_min, y_min, x_max, y_max = bounds_pen.bounds
    return BoundingBox(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)
