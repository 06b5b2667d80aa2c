"""Diagnostic request data structure.

Defines the single input record consumed by the diagnostic renderer.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from tanavalidation.constants import DEFAULT_UNDERLINE_LENGTH

__all__ = [
    "DiagnosticRequest",
]

_TEXT_FIELDS: tuple[str, ...] = ("source", "file_path", "error_kind", "message")
_INTEGER_FIELDS: tuple[str, ...] = ("line", "column", "underline_length")

# Field order matches the positional signature of format_validation_error.
_FIELD_NAMES: tuple[str, ...] = (
    "source",
    "file_path",
    "error_kind",
    "line",
    "column",
    "message",
    "help",
    "underline_length",
)
_REQUIRED_FIELDS: tuple[str, ...] = _FIELD_NAMES[:6]

# JavaScript hosts send camelCase keys; map them onto Python field names.
_CAMEL_CASE_ALIASES: dict[str, str] = {
    "filePath": "file_path",
    "errorKind": "error_kind",
    "underlineLength": "underline_length",
}


@dataclass(frozen=True, slots=True)
class DiagnosticRequest:
    """Everything needed to render one validation error.

    Constructed fresh by the caller for each error. The renderer never
    mutates or stores it. Field values are never rejected: out-of-range
    lines, non-positive columns and zero-length underlines all render.

    Attributes:
        source: Full text of the file being diagnosed
        file_path: Display-only file identifier (e.g. "contract.ts")
        error_kind: Short category label (e.g. "Invalid Import")
        line: 1-based line number the error refers to
        column: 1-based column (code point offset) where the underline starts
        message: Explanation shown beside the carets
        help: Optional guidance; None or "" omits the help section
        underline_length: Number of caret characters to draw
    """

    source: str
    file_path: str
    error_kind: str
    line: int
    column: int
    message: str
    help: str | None = None
    underline_length: int = DEFAULT_UNDERLINE_LENGTH

    def __post_init__(self) -> None:
        """Validate field types.

        Raises:
            TypeError: If a text field is not a str, a numeric field is not
                an int (bool is rejected), or help is neither str nor None.
        """
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                msg = f"DiagnosticRequest.{name} must be str, got {type(value).__name__}"
                raise TypeError(msg)
        for name in _INTEGER_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"DiagnosticRequest.{name} must be int, got {type(value).__name__}"
                raise TypeError(msg)
        if self.help is not None and not isinstance(self.help, str):
            msg = f"DiagnosticRequest.help must be str or None, got {type(self.help).__name__}"
            raise TypeError(msg)

    @property
    def has_help(self) -> bool:
        """True when a non-empty help text is present."""
        return bool(self.help)

    @property
    def padding_width(self) -> int:
        """Spaces before the first caret (column - 1, never negative)."""
        return max(self.column - 1, 0)

    @property
    def caret_count(self) -> int:
        """Carets to draw (underline_length, never negative)."""
        return max(self.underline_length, 0)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> "DiagnosticRequest":
        """Build a request from a decoded payload.

        Accepts camelCase keys (filePath, errorKind, underlineLength) as sent
        by browser and CLI tooling, or the snake_case field names. A missing
        help means no help section; a missing underline length means one
        caret.

        Args:
            mapping: Payload with the request fields

        Returns:
            New DiagnosticRequest

        Raises:
            KeyError: If a required field is missing
            TypeError: If a key is unknown, given twice, or has a wrong type
        """
        fields: dict[str, object] = {}
        for key, value in mapping.items():
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name not in _FIELD_NAMES:
                msg = f"Unknown diagnostic field: {key!r}"
                raise TypeError(msg)
            if name in fields:
                msg = f"Diagnostic field given twice: {name!r}"
                raise TypeError(msg)
            fields[name] = value

        for name in _REQUIRED_FIELDS:
            if name not in fields:
                raise KeyError(name)

        return cls(**fields)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, str | int | None]:
        """Return the fields as a snake_case dictionary in signature order."""
        return {name: getattr(self, name) for name in _FIELD_NAMES}
