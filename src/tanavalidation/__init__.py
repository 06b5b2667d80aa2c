"""tanavalidation - Shared validation error formatting for Tana smart contracts.

Renders one validation error as a compiler-style diagnostic block with a file
location, the quoted source line, a caret underline and an optional help
line. The runtime, the contract server, the playground and the CLI all print
through this package, so a developer sees one error language everywhere.

Public API:
    format_validation_error - Eight-argument entry point for native hosts
    format_validation_error_from_mapping - Entry point for JSON payloads
    DiagnosticRequest - Input record for one validation error
    DiagnosticRenderer - Configurable renderer (output format, glyphs)

Exceptions:
    TanaError - Base exception class
    TanaValidationError - Validation failure carrying its request

Submodules:
    tanavalidation.diagnostics - Request, glyph sets, renderer and errors
    tanavalidation.constants - Fixed framing strings and glyph literals
"""

# Essential Public API - Minimal exports for clean namespace
from .bindings import format_validation_error, format_validation_error_from_mapping
from .diagnostics import (
    DiagnosticRenderer,
    DiagnosticRequest,
    TanaError,
    TanaValidationError,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tanavalidation")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "DiagnosticRenderer",
    "DiagnosticRequest",
    "TanaError",
    "TanaValidationError",
    "__version__",
    "format_validation_error",
    "format_validation_error_from_mapping",
]
