"""Glyph sets for diagnostic framing.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from tanavalidation.constants import (
    ASCII_BAR,
    ASCII_KIND_MARKER,
    ASCII_LOCATION_MARKER,
    CARET,
    NOTE_PREFIX,
    UNICODE_BAR,
    UNICODE_KIND_MARKER,
    UNICODE_LOCATION_MARKER,
)

__all__ = [
    "ASCII_GLYPHS",
    "UNICODE_GLYPHS",
    "GlyphSet",
]


@dataclass(frozen=True, slots=True)
class GlyphSet:
    """Characters used to frame a diagnostic block.

    Attributes:
        kind_marker: Prefix of the error kind line
        location_marker: Prefix of the file location line
        bar: Gutter separator between line number and source text
        caret: Character repeated to underline the offending span
        help_prefix: Prefix of the help line (followed by "help:")
    """

    kind_marker: str
    location_marker: str
    bar: str
    caret: str
    help_prefix: str


UNICODE_GLYPHS = GlyphSet(
    kind_marker=UNICODE_KIND_MARKER,
    location_marker=UNICODE_LOCATION_MARKER,
    bar=UNICODE_BAR,
    caret=CARET,
    help_prefix=NOTE_PREFIX,
)
"""Canonical glyph set shared by every embedding."""

ASCII_GLYPHS = GlyphSet(
    kind_marker=ASCII_KIND_MARKER,
    location_marker=ASCII_LOCATION_MARKER,
    bar=ASCII_BAR,
    caret=CARET,
    help_prefix=NOTE_PREFIX,
)
"""Plain ASCII glyph set for terminals without box-drawing support."""
