# -*- coding: utf-8 -*-
"""
Sheet configuration.

The defaults mirror a 128px specimen with ten glyphs per row and the
red glyph-id labels in the bottom-left corner of every cell.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError

# -----------------------------
# Defaults
# -----------------------------
FONT_SIZE = 128.0
COLUMNS = 10

LABEL_FONT_SIZE = 36
LABEL_FILL = "red"
LABEL_INSET_X = 2.0
LABEL_INSET_Y = 4.0

GRID_STROKE = "black"
GRID_STROKE_WIDTH = 5


@dataclass(frozen=True)
class SheetConfig:
    font_size: float = FONT_SIZE
    columns: int = COLUMNS
    show_grid: bool = False

    label_font_size: float = LABEL_FONT_SIZE
    label_fill: str = LABEL_FILL
    label_inset_x: float = LABEL_INSET_X
    label_inset_y: float = LABEL_INSET_Y

    grid_stroke: str = GRID_STROKE
    grid_stroke_width: float = GRID_STROKE_WIDTH

    def __post_init__(self) -> None:
        if not self.font_size > 0:
            raise ConfigError(f"font_size must be positive, got {self.font_size!r}")
        if self.columns < 1:
            raise ConfigError(f"columns must be at least 1, got {self.columns!r}")
