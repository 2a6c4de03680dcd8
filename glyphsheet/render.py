# -*- coding: utf-8 -*-
"""
Per-glyph rendering: outline extraction, horizontal centering and the
font-unit -> sheet transform.

Font units grow upward, SVG units grow downward, so the transform always
carries scale_y == -scale_x. The glyph's baseline sits `descender` above
the bottom edge of its cell.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from fontTools.ttLib import TTFont

from .config import SheetConfig
from .layout import GridCell, GridLayout
from .metrics import FontMetrics
from .pens import (
    BoundingBox,
    PathDataPen,
    PathSegment,
    SegmentPen,
    extract_outline,
    fmt,
    segments_to_path_data,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AffineTransform:
    scale_x: float
    scale_y: float
    translate_x: float
    translate_y: float

    def to_svg(self) -> str:
        return (
            f"matrix({fmt(self.scale_x)} 0 0 {fmt(self.scale_y)} "
            f"{fmt(self.translate_x)} {fmt(self.translate_y)})"
        )


@dataclass
class CellOutput:
    """Everything one grid cell contributes to the sheet."""

    cell: GridCell
    glyph_name: str
    path_data: Optional[str] = None
    transform: Optional[AffineTransform] = None
    outline: Optional[List[PathSegment]] = None

    @property
    def has_path(self) -> bool:
        return self.path_data is not None


def centering_offset(bbox: BoundingBox, cell_size: float, scale: float) -> float:
    glyph_w = bbox.width * scale
    return (cell_size - glyph_w) / 2.0


def glyph_transform(
    bbox: BoundingBox,
    cell: GridCell,
    metrics: FontMetrics,
    font_size: float,
) -> AffineTransform:
    scale = font_size / metrics.units_per_em
    dx = centering_offset(bbox, cell.size, scale)
    baseline_y = cell.y + cell.size + metrics.descender * scale
    return AffineTransform(
        scale_x=scale,
        scale_y=-scale,
        translate_x=cell.x + dx,
        translate_y=baseline_y,
    )


class GlyphRenderer:
    def __init__(
        self,
        font: TTFont,
        metrics: FontMetrics,
        layout: GridLayout,
        config: SheetConfig,
    ) -> None:
        self.metrics = metrics
        self.layout = layout
        self.config = config
        self.glyph_set = font.getGlyphSet()
        self.glyph_order = font.getGlyphOrder()

    def render(self, glyph_id: int, record_outline: bool = False) -> CellOutput:
        cell = self.layout.cell(glyph_id)
        name = self.glyph_order[glyph_id]

        # Fresh pen per glyph; when the structured outline is wanted the path
        # data is derived from it instead of drawing the glyph twice.
        if record_outline:
            seg_pen = SegmentPen(self.glyph_set)
            bbox = extract_outline(self.glyph_set, name, seg_pen)
            outline: Optional[List[PathSegment]] = seg_pen.segments
            path_data = segments_to_path_data(seg_pen.segments)
        else:
            text_pen = PathDataPen(self.glyph_set)
            bbox = extract_outline(self.glyph_set, name, text_pen)
            outline = None
            path_data = text_pen.path_data

        out = CellOutput(cell=cell, glyph_name=name, outline=outline)
        if bbox is None:
            log.debug("glyph %d (%s): no outline", glyph_id, name)
            return out

        out.path_data = path_data.rstrip()
        out.transform = glyph_transform(bbox, cell, self.metrics, self.config.font_size)
        log.debug("glyph %d (%s): %s", glyph_id, name, out.transform.to_svg())
        return out
