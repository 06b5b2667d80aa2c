"""Shared constants for tanavalidation.

Centralized fixed strings used by the diagnostic renderer. Every embedding
reads the same values from here, so the rendered block never depends on
which entry point produced it.

Constants are grouped by domain:
- Framing text: Title and help label of the diagnostic block
- Defaults: Values applied when a caller omits an optional field
- Glyphs: Literal characters for the Unicode and ASCII glyph sets

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Framing text
    "TITLE",
    "HELP_LABEL",
    # Defaults
    "DEFAULT_UNDERLINE_LENGTH",
    # Glyphs
    "CARET",
    "UNICODE_KIND_MARKER",
    "UNICODE_LOCATION_MARKER",
    "UNICODE_BAR",
    "ASCII_KIND_MARKER",
    "ASCII_LOCATION_MARKER",
    "ASCII_BAR",
    "NOTE_PREFIX",
]

# ============================================================================
# FRAMING TEXT
# ============================================================================

# First line of every diagnostic block.
TITLE: str = "Validation Error"

# Label placed after the note prefix on the help line (e.g. "= help: ...").
HELP_LABEL: str = "help:"

# ============================================================================
# DEFAULTS
# ============================================================================

# Caret count used when a request does not specify an underline length.
DEFAULT_UNDERLINE_LENGTH: int = 1

# ============================================================================
# GLYPHS
# ============================================================================
#
# The Unicode set is the canonical one: it is what the native runtime and the
# browser/CLI tooling have always printed. The ASCII set only exists for
# terminals that cannot display box-drawing characters and is never selected
# implicitly.
#
# ============================================================================

CARET: str = "^"
NOTE_PREFIX: str = "="

UNICODE_KIND_MARKER: str = "❌"
UNICODE_LOCATION_MARKER: str = "┌─"
UNICODE_BAR: str = "│"

ASCII_KIND_MARKER: str = "error:"
ASCII_LOCATION_MARKER: str = "-->"
ASCII_BAR: str = "|"
