# -*- coding: utf-8 -*-
"""
Structured outline export.

Records are written as a JSON list, one glyph per line:

  {"glyph_id": 3, "outline": [["M", 10, 0], ["L", 10, 700], ["Z"]]}
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence, Tuple

from fontTools.ttLib import TTFont

from .pens import PathSegment, SegmentPen, extract_outline, segment_from_command

GlyphOutlines = List[Tuple[int, List[PathSegment]]]


def collect_outlines(font: TTFont) -> GlyphOutlines:
    """Standalone traversal for callers that only want the outlines."""
    glyph_set = font.getGlyphSet()
    out: GlyphOutlines = []
    for gid, name in enumerate(font.getGlyphOrder()):
        pen = SegmentPen(glyph_set)
        extract_outline(glyph_set, name, pen)
        out.append((gid, pen.segments))
    return out


def _number(v: float):
    return int(v) if float(v).is_integer() else v


def outline_records(outlines: Sequence[Tuple[int, Sequence[PathSegment]]]) -> List[Dict[str, Any]]:
    return [
        {
            "glyph_id": gid,
            "outline": [[seg.command, *(_number(v) for v in seg.coords)] for seg in segments],
        }
        for gid, segments in outlines
    ]


def dumps_outlines(outlines: Sequence[Tuple[int, Sequence[PathSegment]]]) -> str:
    records = outline_records(outlines)
    if not records:
        return "[]\n"
    lines = ",\n".join("  " + json.dumps(r, separators=(", ", ": ")) for r in records)
    return "[\n" + lines + "\n]\n"


def loads_outlines(text: str) -> GlyphOutlines:
    out: GlyphOutlines = []
    for rec in json.loads(text):
        segments = [segment_from_command(item[0], item[1:]) for item in rec["outline"]]
        out.append((int(rec["glyph_id"]), segments))
    return out
