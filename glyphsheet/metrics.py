# -*- coding: utf-8 -*-
"""
Font-wide constants read from a fontTools TTFont.

Vertical metrics follow the usual rule: OS/2 typo metrics when the font
sets USE_TYPO_METRICS (fsSelection bit 7), hhea ascent/descent otherwise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Union

from fontTools.ttLib import TTFont, TTLibError
from fontTools.ttLib.tables._n_a_m_e import _MAC_LANGUAGES, _WINDOWS_LANGUAGES

from .errors import FontLoadError

log = logging.getLogger(__name__)

USE_TYPO_METRICS = 1 << 7
FULL_NAME_ID = 4
PLATFORM_NAMES = {0: "Unicode", 1: "Macintosh", 3: "Windows"}


@dataclass(frozen=True)
class FontMetrics:
    units_per_em: int
    ascender: int
    descender: int
    num_glyphs: int

    def __post_init__(self) -> None:
        if self.units_per_em <= 0:
            raise FontLoadError(f"unitsPerEm must be positive, got {self.units_per_em}")
        if self.num_glyphs < 0:
            raise FontLoadError(f"numGlyphs must not be negative, got {self.num_glyphs}")

    @property
    def height(self) -> int:
        return self.ascender - self.descender

    @property
    def descender_is_positive(self) -> bool:
        # Baseline placement assumes a negative descender.
        return self.descender > 0


def load_font(source: Union[str, Path, BinaryIO], font_number: int = 0) -> TTFont:
    """
    Open and fully decompile a font so that malformed data fails here,
    before any output is produced.
    """
    if isinstance(source, (str, Path)):
        source = str(source)
    try:
        font = TTFont(source, fontNumber=font_number)
        font.ensureDecompiled()
    except (OSError, TTLibError) as e:
        raise FontLoadError(f"Could not load font {source!r}: {e}") from e
    except Exception as e:
        # fontTools surfaces corrupt tables as assorted struct/index errors
        raise FontLoadError(f"Malformed font data in {source!r}: {e}") from e
    return font


def _vertical_metrics(font: TTFont):
    os2 = font.get("OS/2")
    if os2 is not None and os2.fsSelection & USE_TYPO_METRICS:
        return int(os2.sTypoAscender), int(os2.sTypoDescender)
    hhea = font["hhea"]
    return int(hhea.ascent), int(hhea.descent)


def read_metrics(font: TTFont) -> FontMetrics:
    missing = [tag for tag in ("head", "hhea", "maxp") if tag not in font]
    if missing:
        raise FontLoadError(f"Font is missing required table(s): {', '.join(missing)}")

    ascender, descender = _vertical_metrics(font)
    metrics = FontMetrics(
        units_per_em=int(font["head"].unitsPerEm),
        ascender=ascender,
        descender=descender,
        num_glyphs=int(font["maxp"].numGlyphs),
    )
    if metrics.descender_is_positive:
        log.warning(
            "Font reports a positive descender (%d); glyph baselines will sit below the cell",
            metrics.descender,
        )
    return metrics


def _language_tag(platform_id: int, lang_id: int) -> str:
    # BCP 47 tags from fontTools' own name-table language maps
    if platform_id == 3:
        tag = _WINDOWS_LANGUAGES.get(lang_id)
    elif platform_id == 1:
        tag = _MAC_LANGUAGES.get(lang_id)
    else:
        tag = None
    return tag or f"0x{lang_id:04X}"


def font_full_names(font: TTFont) -> List[str]:
    """Unicode full-name records as 'Name (language, platform)', e.g. 'Foo Bold (en, Windows)'."""
    if "name" not in font:
        return []
    out: List[str] = []
    for rec in font["name"].names:
        if rec.nameID != FULL_NAME_ID or not rec.isUnicode():
            continue
        platform = PLATFORM_NAMES.get(rec.platformID, str(rec.platformID))
        out.append(f"{rec.toUnicode()} ({_language_tag(rec.platformID, rec.langID)}, {platform})")
    return out
