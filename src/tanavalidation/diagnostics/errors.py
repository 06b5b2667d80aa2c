"""Exception hierarchy carrying diagnostic requests.

The renderer itself never raises for degenerate input. These exceptions are
for host code that wants to abort on a validation failure while keeping the
structured request around.

Python 3.13+. Zero external dependencies.
"""

from .formatter import DiagnosticRenderer
from .request import DiagnosticRequest


class TanaError(Exception):
    """Base exception for all tanavalidation errors.

    Attributes:
        request: Structured diagnostic request (optional)
    """

    def __init__(self, message: str | DiagnosticRequest) -> None:
        """Initialize TanaError.

        Args:
            message: Error message string OR DiagnosticRequest object
        """
        if isinstance(message, DiagnosticRequest):
            self.request: DiagnosticRequest | None = message
            super().__init__(DiagnosticRenderer().render(message))
        else:
            self.request = None
            super().__init__(message)


class TanaValidationError(TanaError):
    """Source failed validation.

    Raised by hosts that stop on the first validation failure. str(error)
    is the canonical diagnostic block, so printing the exception shows the
    same text every other host prints.
    """
