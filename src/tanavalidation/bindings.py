"""Entry points for the embeddings that print validation errors.

Each host reaches the renderer through its own calling convention: the
native runtime passes eight positional values, while browser and CLI tooling
hand over a decoded JSON payload. These functions only adapt arguments;
all layout lives in DiagnosticRenderer, so every host prints the same bytes.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from .diagnostics import DiagnosticRenderer, DiagnosticRequest

__all__ = [
    "format_validation_error",
    "format_validation_error_from_mapping",
]

_CANONICAL_RENDERER = DiagnosticRenderer()


def format_validation_error(  # noqa: PLR0913 - fixed cross-host signature
    source: str,
    file_path: str,
    error_kind: str,
    line: int,
    column: int,
    message: str,
    help: str | None,  # noqa: A002 - field name shared with every host
    underline_length: int,
) -> str:
    """Render a validation error as a compiler-style diagnostic block.

    Args:
        source: Source code containing the error
        file_path: Path to display (e.g. "contract.ts")
        error_kind: Category of error (e.g. "Invalid Import", "Type Error")
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        message: Error message shown beside the carets
        help: Help text explaining how to fix; None or "" omits it
        underline_length: Number of carets to draw

    Returns:
        Diagnostic text without a trailing newline

    Example:
        >>> print(format_validation_error(
        ...     "line 1\\nline 2 with error\\nline 3",
        ...     "multi.ts",
        ...     "Type Error",
        ...     2,
        ...     7,
        ...     "Something wrong here",
        ...     None,
        ...     4,
        ... ))
        Validation Error
        ❌ Type Error
        <BLANKLINE>
          ┌─ multi.ts:2:7
          │
        2 │ line 2 with error
          │       ^^^^ Something wrong here
    """
    request = DiagnosticRequest(
        source=source,
        file_path=file_path,
        error_kind=error_kind,
        line=line,
        column=column,
        message=message,
        help=help,
        underline_length=underline_length,
    )
    return _CANONICAL_RENDERER.render(request)


def format_validation_error_from_mapping(payload: Mapping[str, object]) -> str:
    """Render a validation error from a decoded payload.

    Args:
        payload: Request fields, camelCase or snake_case keys

    Returns:
        Same text format_validation_error returns for the same values
    """
    return _CANONICAL_RENDERER.render(DiagnosticRequest.from_mapping(payload))
