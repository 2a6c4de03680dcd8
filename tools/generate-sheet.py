#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tools/generate-sheet.py

Render a glyph specimen sheet for a font without installing the package:

  python tools/generate-sheet.py path/to/Font.ttf --grid --outlines build/outlines.json
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from glyphsheet.cli import main  # noqa: E402

if __name__ == "__main__":
    main()
