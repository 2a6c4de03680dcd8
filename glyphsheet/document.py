# -*- coding: utf-8 -*-
"""
SVG assembly.

Element order is fixed so identical fonts give byte-identical sheets:

  1. grid lines (optional, one <path> for the whole canvas)
  2. per glyph, ascending id: <text> label, then the glyph <path> if any
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable, List

from .config import SheetConfig
from .layout import GridCell, GridLayout
from .pens import fmt
from .render import CellOutput

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def grid_path_data(layout: GridLayout) -> str:
    width = layout.canvas_width
    height = layout.canvas_height

    parts: List[str] = []
    for c in range(layout.columns + 1):
        x = c * layout.cell_size
        parts.append(f"M {fmt(x)} 0 L {fmt(x)} {fmt(height)}")
    for r in range(layout.row_count + 1):
        y = r * layout.cell_size
        parts.append(f"M 0 {fmt(y)} L {fmt(width)} {fmt(y)}")
    return " ".join(parts)


def grid_element(layout: GridLayout, config: SheetConfig) -> ET.Element:
    el = ET.Element("path")
    el.set("fill", "none")
    el.set("stroke", config.grid_stroke)
    el.set("stroke-width", fmt(config.grid_stroke_width))
    el.set("d", grid_path_data(layout))
    return el


def label_element(cell: GridCell, config: SheetConfig) -> ET.Element:
    el = ET.Element("text")
    el.set("x", fmt(cell.x + config.label_inset_x))
    el.set("y", fmt(cell.y + cell.size - config.label_inset_y))
    el.set("font-size", fmt(config.label_font_size))
    el.set("fill", config.label_fill)
    el.text = str(cell.index)
    return el


def cell_elements(out: CellOutput, config: SheetConfig) -> List[ET.Element]:
    elements = [label_element(out.cell, config)]
    if out.has_path:
        el = ET.Element("path")
        el.set("d", out.path_data or "")
        el.set("transform", out.transform.to_svg())
        elements.append(el)
    return elements


def build_document(
    layout: GridLayout,
    cells: Iterable[CellOutput],
    config: SheetConfig,
) -> ET.Element:
    root = ET.Element("svg")
    root.set("xmlns", SVG_NS)
    root.set("xmlns:xlink", XLINK_NS)
    root.set("viewBox", f"0 0 {fmt(layout.canvas_width)} {fmt(layout.canvas_height)}")

    if config.show_grid:
        root.append(grid_element(layout, config))

    # Cells may arrive out of order; the sheet is always written by id.
    for out in sorted(cells, key=lambda o: o.cell.index):
        root.extend(cell_elements(out, config))
    return root


def to_svg_text(root: ET.Element) -> str:
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
