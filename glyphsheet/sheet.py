# -*- coding: utf-8 -*-
"""
One pass over the font: metrics -> grid -> per-glyph cells -> SVG.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from fontTools.ttLib import TTFont

from .config import SheetConfig
from .document import build_document, to_svg_text
from .export import GlyphOutlines
from .layout import GridLayout
from .metrics import FontMetrics, font_full_names, read_metrics
from .render import CellOutput, GlyphRenderer

log = logging.getLogger(__name__)


@dataclass
class SheetResult:
    svg: str
    metrics: FontMetrics
    layout: GridLayout
    cells: List[CellOutput] = field(default_factory=list)
    outlines: Optional[GlyphOutlines] = None


def render_sheet(
    font: TTFont,
    config: Optional[SheetConfig] = None,
    with_outlines: bool = False,
) -> SheetResult:
    config = config or SheetConfig()
    started = time.perf_counter()

    metrics = read_metrics(font)
    names = font_full_names(font)
    if names:
        log.info("Full names: %s", ", ".join(names))
    log.info(
        "%d glyph(s), unitsPerEm=%d, ascender=%d, descender=%d",
        metrics.num_glyphs,
        metrics.units_per_em,
        metrics.ascender,
        metrics.descender,
    )

    layout = GridLayout.from_metrics(metrics, config)
    renderer = GlyphRenderer(font, metrics, layout, config)

    cells = [renderer.render(gid, record_outline=with_outlines) for gid in range(metrics.num_glyphs)]
    svg = to_svg_text(build_document(layout, cells, config))

    outlines: Optional[GlyphOutlines] = None
    if with_outlines:
        outlines = [(c.cell.index, list(c.outline or [])) for c in cells]

    log.info("Rendered %d cell(s) in %.1fms", len(cells), (time.perf_counter() - started) * 1000.0)
    return SheetResult(svg=svg, metrics=metrics, layout=layout, cells=cells, outlines=outlines)
