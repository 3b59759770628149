"""Glyph positions in a font texture, read from a plain-text description."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass

_INT = re.compile(r"\s*([+-]?[0-9]+)")
_WORD = re.compile(r"\s*(\S+)")
_DIGITS = "0123456789"

_CONFIG_KEYS = {
    "TEXTURE_WIDTH": "texture_width",
    "TEXTURE_HEIGHT": "texture_height",
    "CELL_WIDTH": "cell_width",
    "CELL_HEIGHT": "cell_height",
    "CELLS_PER_ROW": "cells_per_row",
    "CELLS_PER_COLUMN": "cells_per_column",
}


@dataclass(frozen=True)
class GlyphInfo:
    """Texture coordinates and size of one glyph, in UV units."""

    u: float
    v: float
    width: float
    height: float
    offset_x: float = 0.0
    offset_y: float = 0.0


def _read_int(text: str, pos: int) -> tuple[int | None, int]:
    match = _INT.match(text, pos)
    if match is None:
        return None, pos
    return int(match.group(1)), match.end()


class FontAtlas:
    """Maps characters to their glyph cell in a fixed-grid font texture."""

    DEFAULT_GLYPH = GlyphInfo(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def __init__(self, glyph_aspect_ratio: float = 1.0, kerning: float = 0.6) -> None:
        self.glyph_aspect_ratio = glyph_aspect_ratio
        self.kerning = kerning
        self._glyphs: dict[str, GlyphInfo] = {}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> FontAtlas:
        """Build an atlas from description lines.

        Lines are ``KEY value`` settings or ``index unicode`` glyph entries;
        blank lines and lines starting with ``#`` are skipped.
        """
        config = {
            "texture_width": 512,
            "texture_height": 512,
            "cell_width": 14,
            "cell_height": 32,
            "cells_per_row": 36,
            "cells_per_column": 16,
        }
        glyph_chars: list[str] = []

        for raw in lines:
            line = raw.rstrip("\r\n")
            if not line or line[0] == "#":
                continue
            word = _WORD.match(line)
            if word is None:
                continue
            key = word.group(1)
            setting = _CONFIG_KEYS.get(key)
            if setting is not None:
                value, _ = _read_int(line, word.end())
                config[setting] = value if value is not None else 0
                continue

            start = 0 if key[0] in _DIGITS else word.end()
            index, pos = _read_int(line, start)
            if index is None:
                continue
            code, _ = _read_int(line, pos)
            if code is None:
                continue
            if 0 <= index < config["cells_per_row"] * config["cells_per_column"]:
                if index >= len(glyph_chars):
                    glyph_chars.extend(" " * (index + 1 - len(glyph_chars)))
                glyph_chars[index] = chr(code & 0xFFFF)

        for setting in ("texture_width", "texture_height", "cell_height"):
            if config[setting] == 0:
                raise ValueError(f"{setting} must not be zero")

        cell_w, cell_h = config["cell_width"], config["cell_height"]
        tex_w, tex_h = config["texture_width"], config["texture_height"]
        per_row = config["cells_per_row"]

        atlas = cls(glyph_aspect_ratio=cell_w / cell_h)
        uv_w, uv_h = cell_w / tex_w, cell_h / tex_h
        for index, char in enumerate(glyph_chars):
            row, col = divmod(index, per_row)
            if row >= config["cells_per_column"]:
                break
            glyph = GlyphInfo(col * cell_w / tex_w, row * cell_h / tex_h, uv_w, uv_h)
            atlas.add_glyph(char, glyph)
        return atlas

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> FontAtlas:
        """Read an atlas description file; raise OSError if it cannot be opened."""
        with open(path, encoding="utf-8", errors="replace") as handle:
            return cls.from_lines(handle)

    def get_glyph(self, char: str) -> GlyphInfo:
        """Return the glyph for ``char``, or an all-zero glyph if unknown."""
        return self._glyphs.get(char, self.DEFAULT_GLYPH)

    def add_glyph(self, char: str, glyph: GlyphInfo) -> None:
        self._glyphs[char] = glyph

    def __contains__(self, char: object) -> bool:
        return char in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)