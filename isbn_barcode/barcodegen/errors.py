"""Exception taxonomy for barcode generation."""

from __future__ import annotations

from typing import Optional

from isbn_barcode.model.enums import FailureKind

__all__ = [
    "BarcodeGenError",
    "ValidationError",
    "InvalidLengthError",
    "InvalidDigitError",
    "InvalidChecksumError",
    "UnsupportedResolutionError",
    "ContractViolation",
    "InvalidHeightError",
]


class BarcodeGenError(Exception):
    """Barcode generation/validation error.

    Attributes:
        message: Human-readable error description
        kind: Failure classification, if any
    """

    def __init__(self, message: str, kind: Optional[FailureKind] = None) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __str__(self) -> str:
        if self.kind:
            return f"[{self.kind.value}] {self.message}"
        return self.message


class ValidationError(BarcodeGenError):
    """Rejected user input. Recoverable: the facade reports it as a message.

    Attributes:
        field: The input that failed validation (identifier, addon, dpi)
    """

    def __init__(self, message: str, kind: FailureKind, field: Optional[str] = None) -> None:
        super().__init__(message, kind)
        self.field = field


class InvalidLengthError(ValidationError):
    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, FailureKind.INVALID_LENGTH, field)


class InvalidDigitError(ValidationError):
    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, FailureKind.INVALID_DIGIT, field)


class InvalidChecksumError(ValidationError):
    """Identifier fails check-digit arithmetic.

    Attributes:
        expected_check_digit: Check digit the first 12 digits call for
    """

    def __init__(
        self,
        message: str,
        expected_check_digit: int,
        field: Optional[str] = "identifier",
    ) -> None:
        super().__init__(message, FailureKind.INVALID_CHECKSUM, field)
        self.expected_check_digit = expected_check_digit


class UnsupportedResolutionError(ValidationError):
    def __init__(self, message: str, field: Optional[str] = "dpi") -> None:
        super().__init__(message, FailureKind.UNSUPPORTED_RESOLUTION, field)


class ContractViolation(BarcodeGenError):
    """Caller broke a precondition (e.g. encoded unvalidated digits). Not a user error."""


class InvalidHeightError(ContractViolation):
    def __init__(self, message: str) -> None:
        super().__init__(message, FailureKind.INVALID_HEIGHT)
