# -*- coding: utf-8 -*-
"""Glyph specimen sheets: every glyph of a font on one SVG grid."""

from .config import SheetConfig
from .errors import ConfigError, FontLoadError, GlyphSheetError, NonFiniteCoordinateError
from .export import collect_outlines, dumps_outlines, loads_outlines
from .layout import GridCell, GridLayout
from .metrics import FontMetrics, font_full_names, load_font, read_metrics
from .pens import (
    BoundingBox,
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    PathDataPen,
    QuadTo,
    SegmentPen,
    extract_outline,
    replay,
    segments_to_path_data,
)
from .render import AffineTransform, CellOutput, GlyphRenderer, glyph_transform
from .sheet import SheetResult, render_sheet

__version__ = "0.1.0"
