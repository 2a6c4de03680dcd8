# -*- coding: utf-8 -*-

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import SheetConfig
from .metrics import FontMetrics


@dataclass(frozen=True)
class GridCell:
    index: int
    row: int
    col: int
    x: float
    y: float
    size: float


@dataclass(frozen=True)
class GridLayout:
    columns: int
    cell_size: float
    num_glyphs: int

    @classmethod
    def from_metrics(cls, metrics: FontMetrics, config: SheetConfig) -> "GridLayout":
        # one em line height (ascender to descender) at the target size
        cell_size = metrics.height * config.font_size / metrics.units_per_em
        return cls(columns=config.columns, cell_size=cell_size, num_glyphs=metrics.num_glyphs)

    @property
    def row_count(self) -> int:
        return math.ceil(self.num_glyphs / self.columns)

    @property
    def canvas_width(self) -> float:
        return self.columns * self.cell_size

    @property
    def canvas_height(self) -> float:
        return self.row_count * self.cell_size

    def cell(self, index: int) -> GridCell:
        if not 0 <= index < self.num_glyphs:
            raise IndexError(f"glyph index {index} outside [0, {self.num_glyphs})")
        row, col = divmod(index, self.columns)
        return GridCell(
            index=index,
            row=row,
            col=col,
            x=col * self.cell_size,
            y=row * self.cell_size,
            size=self.cell_size,
        )
