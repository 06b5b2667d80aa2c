"""Diagnostic rendering service.

Turns a DiagnosticRequest into a compiler-style error block. This module is
the only place that knows the layout; every entry point delegates here so
the output is identical regardless of how the renderer was reached.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from tanavalidation.constants import HELP_LABEL, TITLE

from .glyphs import UNICODE_GLYPHS, GlyphSet
from .request import DiagnosticRequest

__all__ = [
    "DiagnosticRenderer",
    "OutputFormat",
    "extract_line",
    "gutter_width",
]

logger = logging.getLogger(__name__)


class OutputFormat(StrEnum):
    """Output format options for diagnostic rendering."""

    RUST = "rust"  # Compiler-style block (canonical)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def extract_line(source: str, line: int) -> str:
    """Return the 1-based line of source without its terminator.

    Lines are split on "\\n" only; a trailing "\\r" is dropped so CRLF
    sources display like LF sources. Other Unicode line separators are
    ordinary characters here.

    Args:
        source: Full source text
        line: 1-based line number

    Returns:
        Line text, or "" when line is below 1 or past the end of source
    """
    if line < 1:
        logger.debug("Line %d is before the start of source; rendering empty line", line)
        return ""

    lines = source.split("\n")
    if line > len(lines):
        logger.debug(
            "Line %d is past the end of source (%d lines); rendering empty line",
            line,
            len(lines),
        )
        return ""

    text = lines[line - 1]
    if text.endswith("\r"):
        return text[:-1]
    return text


def gutter_width(line: int) -> int:
    """Width of the line number gutter: the decimal digit count of line."""
    return len(str(line))


@dataclass(frozen=True, slots=True)
class DiagnosticRenderer:
    """Diagnostic rendering service.

    Holds presentation options only; rendering reads nothing but the
    request, so one renderer can be shared freely between threads.

    Attributes:
        output_format: Output style (rust, simple, json)
        glyphs: Framing characters for the rust style

    Example:
        >>> renderer = DiagnosticRenderer()
        >>> request = DiagnosticRequest(
        ...     source="import { console } from 'tana/invalid';",
        ...     file_path="contract.ts",
        ...     error_kind="Invalid Import",
        ...     line=1,
        ...     column=26,
        ...     message="module 'tana/invalid' not found",
        ...     help="available modules: tana/core, tana/kv",
        ...     underline_length=12,
        ... )
        >>> print(renderer.render(request))
        Validation Error
        ❌ Invalid Import
        <BLANKLINE>
          ┌─ contract.ts:1:26
          │
        1 │ import { console } from 'tana/invalid';
          │                          ^^^^^^^^^^^^ module 'tana/invalid' not found
          │
          = help: available modules: tana/core, tana/kv
    """

    output_format: OutputFormat = OutputFormat.RUST
    glyphs: GlyphSet = UNICODE_GLYPHS

    def render(self, request: DiagnosticRequest) -> str:
        """Render a single diagnostic.

        Args:
            request: Diagnostic to render

        Returns:
            Rendered diagnostic text (no trailing newline)
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._render_rust(request)
            case OutputFormat.SIMPLE:
                return self._render_simple(request)
            case OutputFormat.JSON:
                return self._render_json(request)

    def render_all(self, requests: Iterable[DiagnosticRequest]) -> str:
        """Render several independent diagnostics.

        Args:
            requests: Iterable of requests to render

        Returns:
            Rendered diagnostics separated by a blank line
        """
        return "\n\n".join(self.render(r) for r in requests)

    def _render_rust(self, request: DiagnosticRequest) -> str:
        """Render diagnostic as a compiler-style block.

        Example output:
            Validation Error
            ❌ Type Error

              ┌─ multi.ts:2:7
              │
            2 │ line 2 with error
              │       ^^^^ Something wrong here
              │
              = help: Fix it like this
        """
        glyphs = self.glyphs
        pad = " " * gutter_width(request.line)
        source_line = extract_line(request.source, request.line)
        underline = " " * request.padding_width + glyphs.caret * request.caret_count

        parts = [
            TITLE,
            f"{glyphs.kind_marker} {request.error_kind}",
            "",
            f"{pad} {glyphs.location_marker} "
            f"{request.file_path}:{request.line}:{request.column}",
            f"{pad} {glyphs.bar}",
            f"{request.line} {glyphs.bar} {source_line}",
            f"{pad} {glyphs.bar} {underline} {request.message}",
        ]

        if request.has_help:
            parts.append(f"{pad} {glyphs.bar}")
            parts.append(f"{pad} {glyphs.help_prefix} {HELP_LABEL} {request.help}")

        return "\n".join(parts)

    def _render_simple(self, request: DiagnosticRequest) -> str:
        """Render diagnostic in single-line format.

        Example output:
            contract.ts:1:26: Invalid Import: module 'tana/invalid' not found
        """
        return (
            f"{request.file_path}:{request.line}:{request.column}: "
            f"{request.error_kind}: {request.message}"
        )

    def _render_json(self, request: DiagnosticRequest) -> str:
        """Render diagnostic as JSON.

        Example output:
            {"source": "...", "file_path": "contract.ts", ..., "source_line": "..."}
        """
        import json  # noqa: PLC0415

        data = request.to_dict()
        data["source_line"] = extract_line(request.source, request.line)
        return json.dumps(data, ensure_ascii=False)
