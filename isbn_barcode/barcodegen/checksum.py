"""
Check-digit arithmetic and input validation for ISBN-13 / EAN-5.

Identifier: 13 ASCII digits, weights 1,3,1,3,... (0-indexed even
positions x1, odd x3), valid iff the weighted sum is a multiple of 10.
Add-on: empty or 5 ASCII digits; it carries no check digit, only a parity
signature derived from weights 3,9,3,9,3.
"""

from __future__ import annotations

import logging
from typing import Final, Sequence, Tuple

from .errors import InvalidChecksumError, InvalidDigitError, InvalidLengthError

logger = logging.getLogger(__name__)

__all__ = [
    "IDENTIFIER_LENGTH",
    "ADDON_LENGTH",
    "BOOKLAND_PREFIXES",
    "weighted_sum",
    "ean13_check_digit",
    "ean5_parity_signature",
    "is_valid_identifier",
    "validate_identifier",
    "validate_addon",
]

IDENTIFIER_LENGTH: Final[int] = 13
ADDON_LENGTH: Final[int] = 5
BOOKLAND_PREFIXES: Final[Tuple[str, ...]] = ("978", "979")

_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


def weighted_sum(digits: Sequence[int]) -> int:
    return sum(d * (1 if i % 2 == 0 else 3) for i, d in enumerate(digits))


def ean13_check_digit(first_twelve: Sequence[int]) -> int:
    """Check digit that completes ``first_twelve`` to a valid EAN-13."""
    if len(first_twelve) != IDENTIFIER_LENGTH - 1:
        raise ValueError(f"Expected 12 digits, got {len(first_twelve)}")
    return (10 - weighted_sum(first_twelve) % 10) % 10


def ean5_parity_signature(digits: Sequence[int]) -> int:
    """Row of the EAN-5 parity table selected by ``digits``."""
    if len(digits) != ADDON_LENGTH:
        raise ValueError(f"Expected 5 digits, got {len(digits)}")
    return sum(d * (3 if i % 2 == 0 else 9) for i, d in enumerate(digits)) % 10


def _to_digits(value: str, field: str, label: str) -> Tuple[int, ...]:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be str, got {type(value)!r}")
    # str.isdigit() принимает и не-ASCII цифры, поэтому явная проверка
    if any(ch not in _ASCII_DIGITS for ch in value):
        raise InvalidDigitError(f"{label} must contain digits 0-9 only.", field=field)
    return tuple(int(ch) for ch in value)


def validate_identifier(identifier: str) -> Tuple[int, ...]:
    """
    Validate a 13-digit identifier and return its digits.

    Raises:
        InvalidDigitError: a character outside 0-9.
        InvalidLengthError: not exactly 13 digits.
        InvalidChecksumError: weighted sum not a multiple of 10.
        TypeError: ``identifier`` is not a string.
    """
    digits = _to_digits(identifier, "identifier", "ISBN")
    if len(digits) != IDENTIFIER_LENGTH:
        raise InvalidLengthError(
            f"ISBN must be exactly {IDENTIFIER_LENGTH} digits, got {len(digits)}.",
            field="identifier",
        )
    if weighted_sum(digits) % 10 != 0:
        expected = ean13_check_digit(digits[:-1])
        raise InvalidChecksumError(
            f"ISBN check digit is invalid: expected {expected}, got {digits[-1]}.",
            expected_check_digit=expected,
        )
    if not identifier.startswith(BOOKLAND_PREFIXES):
        logger.info("Identifier %s is a valid EAN-13 outside the 978/979 ISBN range", identifier)
    return digits


def validate_addon(addon: str) -> Tuple[int, ...]:
    """
    Validate an add-on code; ``""`` means no add-on and yields ``()``.

    Raises:
        InvalidDigitError: a character outside 0-9.
        InvalidLengthError: neither empty nor 5 digits.
        TypeError: ``addon`` is not a string.
    """
    digits = _to_digits(addon, "addon", "Add-on")
    if digits and len(digits) != ADDON_LENGTH:
        raise InvalidLengthError(
            f"Add-on must be exactly {ADDON_LENGTH} digits, got {len(digits)}.",
            field="addon",
        )
    return digits


def is_valid_identifier(identifier: str) -> bool:
    try:
        validate_identifier(identifier)
    except (InvalidDigitError, InvalidLengthError, InvalidChecksumError, TypeError):
        return False
    return True
