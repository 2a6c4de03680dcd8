"""
Shared fixtures: small fonts built in memory with fontTools' FontBuilder.

The default TrueType font has 25 glyphs, unitsPerEm=1000, ascender=800,
descender=-200:

  0  .notdef   rectangle 50..450 x -150..650
  1  space     no contours
  2  box       rectangle 100..500 x 0..700
  3  arch      one quadratic run with two off-curve points (two Q segments)
  4  boxcopy   composite: "box" shifted right by 50
  5+ tri05..   triangles of growing width
"""

import io
from typing import Dict, Optional

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphsheet.metrics import load_font

SVG = "{http://www.w3.org/2000/svg}"


def _rect(x0, y0, x1, y1):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x1, y0))
    pen.lineTo((x1, y1))
    pen.lineTo((x0, y1))
    pen.closePath()
    return pen.glyph()


def _arch():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.qCurveTo((100, 600), (500, 600), (500, 0))
    pen.closePath()
    return pen.glyph()


def _triangle(width):
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100 + width, 0))
    pen.lineTo((100 + width // 2, 600))
    pen.closePath()
    return pen.glyph()


def _composite(base, dx, glyph_set):
    pen = TTGlyphPen(glyph_set)
    pen.addComponent(base, (1, 0, 0, 1, dx, 0))
    return pen.glyph()


def glyph_order_for(num_glyphs: int):
    order = [".notdef", "space", "box", "arch", "boxcopy"]
    order += [f"tri{i:02d}" for i in range(5, num_glyphs)]
    return order[:num_glyphs]


def build_ttf_bytes(
    num_glyphs: int = 25,
    upm: int = 1000,
    ascent: int = 800,
    descent: int = -200,
    os2: Optional[Dict[str, int]] = None,
) -> bytes:
    order = glyph_order_for(num_glyphs)
    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder(order)

    glyphs = {}
    for name in order:
        if name == ".notdef":
            glyphs[name] = _rect(50, -150, 450, 650)
        elif name == "space":
            glyphs[name] = TTGlyphPen(None).glyph()
        elif name == "box":
            glyphs[name] = _rect(100, 0, 500, 700)
        elif name == "boxcopy":
            glyphs[name] = _composite("box", 50, glyphs)
        elif name == "arch":
            glyphs[name] = _arch()
        else:
            glyphs[name] = _triangle(20 * int(name[3:]))
    fb.setupGlyf(glyphs)
    # glyf glyph sets draw at lsb, so keep lsb == xMin to leave outlines in place
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics({name: (600, getattr(glyf[name], "xMin", 0)) for name in order})

    cmap = {}
    if "space" in order:
        cmap[0x20] = "space"
    for i, name in enumerate(order[2:]):
        cmap[0x41 + i] = name
    fb.setupCharacterMap(cmap)

    fb.setupHorizontalHeader(ascent=ascent, descent=descent)
    os2_values = dict(
        sTypoAscender=ascent,
        sTypoDescender=descent,
        usWinAscent=max(ascent, 0),
        usWinDescent=max(-descent, 0),
    )
    os2_values.update(os2 or {})
    fb.setupOS2(**os2_values)
    fb.setupNameTable(
        {
            "familyName": "Test Sans",
            "styleName": "Regular",
            "uniqueFontIdentifier": "TestSans-Regular",
            "fullName": "Test Sans Regular",
            "psName": "TestSans-Regular",
            "version": "Version 1.000",
        }
    )
    fb.setupPost()

    buf = io.BytesIO()
    fb.save(buf)
    return buf.getvalue()


def build_cff_bytes() -> bytes:
    order = [".notdef", "space", "round"]
    fb = FontBuilder(1000, isTTF=False)
    fb.setupGlyphOrder(order)

    charstrings = {}
    pen = T2CharStringPen(500, None)
    pen.moveTo((50, 0))
    pen.lineTo((450, 0))
    pen.lineTo((450, 700))
    pen.lineTo((50, 700))
    pen.closePath()
    charstrings[".notdef"] = pen.getCharString()

    charstrings["space"] = T2CharStringPen(250, None).getCharString()

    pen = T2CharStringPen(600, None)
    pen.moveTo((300, 0))
    pen.curveTo((466, 0), (600, 134), (600, 300))
    pen.curveTo((600, 466), (466, 600), (300, 600))
    pen.curveTo((134, 600), (0, 466), (0, 300))
    pen.curveTo((0, 134), (134, 0), (300, 0))
    pen.closePath()
    charstrings["round"] = pen.getCharString()

    fb.setupCFF("TestRound-Regular", {"FullName": "Test Round Regular"}, charstrings, {})
    fb.setupHorizontalMetrics({".notdef": (500, 50), "space": (250, 0), "round": (600, 0)})
    fb.setupCharacterMap({0x20: "space", 0x4F: "round"})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupNameTable({"familyName": "Test Round", "styleName": "Regular"})
    fb.setupPost()

    buf = io.BytesIO()
    fb.save(buf)
    return buf.getvalue()


def open_font(data: bytes):
    return load_font(io.BytesIO(data))


@pytest.fixture
def ttf_bytes():
    return build_ttf_bytes()


@pytest.fixture
def font(ttf_bytes):
    return open_font(ttf_bytes)


@pytest.fixture
def cff_font():
    return open_font(build_cff_bytes())


@pytest.fixture
def font_path(tmp_path, ttf_bytes):
    path = tmp_path / "TestSans-Regular.ttf"
    path.write_bytes(ttf_bytes)
    return path


class FakeGlyph:
    """Glyph-set entry that replays fixed pen calls."""

    def __init__(self, calls):
        self.calls = calls

    def draw(self, pen):
        for method, args in self.calls:
            getattr(pen, method)(*args)
