# -*- coding: utf-8 -*-

from __future__ import annotations


class GlyphSheetError(Exception):
    """Base class for everything this package raises on purpose."""


class FontLoadError(GlyphSheetError):
    pass


class ConfigError(GlyphSheetError, ValueError):
    pass


class NonFiniteCoordinateError(GlyphSheetError, ValueError):
    """An outline produced NaN or infinity; the sheet would be malformed."""

    def __init__(self, command: str, values: tuple) -> None:
        self.command = command
        self.values = values
        super().__init__(f"Non-finite coordinate in {command} {values!r}")
