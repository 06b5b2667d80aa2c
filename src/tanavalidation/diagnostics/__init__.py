"""Diagnostic system for contract validation errors.

Provides the request record, glyph sets, renderer and exception types.
Inspired by Rust compiler diagnostics and Gleam error messages.

Python 3.13+. Zero external dependencies.
"""

from .errors import TanaError, TanaValidationError
from .formatter import DiagnosticRenderer, OutputFormat, extract_line, gutter_width
from .glyphs import ASCII_GLYPHS, UNICODE_GLYPHS, GlyphSet
from .request import DiagnosticRequest

__all__ = [
    "ASCII_GLYPHS",
    "UNICODE_GLYPHS",
    "DiagnosticRenderer",
    "DiagnosticRequest",
    "GlyphSet",
    "OutputFormat",
    "TanaError",
    "TanaValidationError",
    "extract_line",
    "gutter_width",
]
