#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
glyphsheet

Render every glyph of a font into one SVG specimen sheet: a fixed-column
grid, each cell holding the glyph outline centered over its glyph id.

Input:
  any TrueType/OpenType font (or a member of a collection via --font-number)

Output:
  <font>.svg              (or --out)
  outlines JSON           (--outlines, optional)
  PNG preview             (--png, optional, needs cairosvg)

Dependencies:
  pip install fonttools
  pip install cairosvg    (only for --png)
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import config as defaults
from .config import SheetConfig
from .errors import GlyphSheetError
from .export import dumps_outlines
from .metrics import load_font
from .sheet import render_sheet


def write_text_lf(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def write_png(path: Path, svg: str, scale: float) -> None:
    try:
        import cairosvg  # type: ignore
    except Exception as e:  # pragma: no cover
        raise SystemExit(
            "Missing dependency: cairosvg.\n"
            "Install with:\n"
            "  pip install cairosvg\n"
            "Note: On some systems you may also need Cairo system packages.\n"
        ) from e

    path.parent.mkdir(parents=True, exist_ok=True)
    cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        write_to=str(path),
        scale=scale,
        background_color="white",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="glyphsheet",
        description="Render every glyph of a font into an SVG specimen grid.",
    )
    ap.add_argument("font", help="Font file (.ttf, .otf, .ttc, .woff)")
    ap.add_argument("--out", default=None, help="Output SVG path (default: <font>.svg next to the font)")
    ap.add_argument(
        "--font-size",
        type=float,
        default=defaults.FONT_SIZE,
        help=f"Target em size in sheet units (default: {defaults.FONT_SIZE:g})",
    )
    ap.add_argument("--cols", type=int, default=defaults.COLUMNS, help=f"Glyphs per row (default: {defaults.COLUMNS})")
    ap.add_argument("--grid", action="store_true", help="Draw cell grid lines")
    ap.add_argument(
        "--label-size",
        type=float,
        default=defaults.LABEL_FONT_SIZE,
        help=f"Glyph id label font size (default: {defaults.LABEL_FONT_SIZE})",
    )
    ap.add_argument("--label-fill", default=defaults.LABEL_FILL, help=f"Label color (default: {defaults.LABEL_FILL})")
    ap.add_argument("--font-number", type=int, default=0, help="Font index inside a collection (default: 0, the first)")
    ap.add_argument("--outlines", default=None, help="Also write per-glyph outlines as JSON to this path")
    ap.add_argument("--png", default=None, help="Also rasterize the sheet to this PNG path (needs cairosvg)")
    ap.add_argument("--png-scale", type=float, default=1.0, help="Scale factor for --png (default: 1.0)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every glyph")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    font_path = Path(args.font)
    out_path = Path(args.out) if args.out else font_path.with_suffix(".svg")

    try:
        config = SheetConfig(
            font_size=args.font_size,
            columns=args.cols,
            show_grid=args.grid,
            label_font_size=args.label_size,
            label_fill=args.label_fill,
        )
        font = load_font(font_path, font_number=args.font_number)
        result = render_sheet(font, config, with_outlines=args.outlines is not None)
    except GlyphSheetError as e:
        raise SystemExit(f"Failed to render {font_path.as_posix()}: {e}") from e

    # Everything is rendered before anything touches the disk.
    write_text_lf(out_path, result.svg)
    layout = result.layout
    print(
        f"✓ Wrote {out_path.as_posix()} "
        f"({layout.canvas_width:g}×{layout.canvas_height:g}), glyphs: {result.metrics.num_glyphs}"
    )

    if args.outlines is not None:
        outlines_path = Path(args.outlines)
        write_text_lf(outlines_path, dumps_outlines(result.outlines or []))
        print(f"✓ Wrote {outlines_path.as_posix()}")

    if args.png:
        png_path = Path(args.png)
        write_png(png_path, result.svg, args.png_scale)
        print(f"✓ Wrote {png_path.as_posix()}")


if __name__ == "__main__":
    main()
