"""
EAN-13 / EAN-5 symbology encoder.

Turns validated digit sequences into colour-alternating module runs,
tagged with their role so the layout can give guards their extended height.

The encoder trusts its input: malformed digits are a ContractViolation,
callers must run ``checksum.validate_identifier`` / ``validate_addon`` first.
"""

from __future__ import annotations

import logging
from itertools import groupby
from typing import List, Optional, Sequence

from isbn_barcode.model.enums import ModuleRole, ParityCode, Symbology
from isbn_barcode.model.symbol import ModulePattern, ModuleRun

from . import tables
from .checksum import ADDON_LENGTH, IDENTIFIER_LENGTH, ean5_parity_signature, weighted_sum
from .errors import ContractViolation

logger = logging.getLogger(__name__)

__all__ = ["encode_digit", "encode_ean13", "encode_ean5"]


def _check_digits(digits: Sequence[int], length: int, what: str) -> None:
    if len(digits) != length or any(
        not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9 for d in digits
    ):
        raise ContractViolation(f"{what} encoder requires {length} validated digits, got {digits!r}")


def _runs(bits: str, role: ModuleRole, digit_index: Optional[int] = None) -> List[ModuleRun]:
    return [
        ModuleRun(dark=bit == "1", width=len(list(group)), role=role, digit_index=digit_index)
        for bit, group in groupby(bits)
    ]


def encode_digit(digit: int, parity: ParityCode) -> str:
    """7-module code of ``digit`` in the given parity set."""
    return tables.DIGIT_CODES[parity][digit]


def encode_ean13(digits: Sequence[int]) -> ModulePattern:
    """
    Encode a validated 13-digit identifier.

    The leading digit is not drawn; it selects the L/G parity row for
    digits 2-7. Digits 8-13 always use R codes.
    """
    _check_digits(digits, IDENTIFIER_LENGTH, "EAN-13")
    if weighted_sum(digits) % 10 != 0:
        raise ContractViolation(f"EAN-13 encoder received an unvalidated checksum: {digits!r}")

    parity_row = tables.EAN13_PARITY[digits[0]]
    runs: List[ModuleRun] = _runs(tables.EAN13_START_GUARD, ModuleRole.GUARD)
    for offset, parity in enumerate(parity_row):
        index = offset + 1
        runs += _runs(encode_digit(digits[index], parity), ModuleRole.DIGIT, index)
    runs += _runs(tables.EAN13_CENTER_GUARD, ModuleRole.GUARD)
    for index in range(7, IDENTIFIER_LENGTH):
        runs += _runs(encode_digit(digits[index], ParityCode.R), ModuleRole.DIGIT, index)
    runs += _runs(tables.EAN13_END_GUARD, ModuleRole.GUARD)

    pattern = ModulePattern(Symbology.EAN13, tuple(runs))
    logger.debug("Encoded EAN-13 parity %s: %s", "".join(p.value for p in parity_row), pattern)
    return pattern


def encode_ean5(digits: Sequence[int]) -> ModulePattern:
    """
    Encode a validated 5-digit add-on.

    Start guard 1011, ``01`` separators between digits, no end guard.
    """
    _check_digits(digits, ADDON_LENGTH, "EAN-5")

    signature = ean5_parity_signature(digits)
    parity_row = tables.EAN5_PARITY[signature]
    runs: List[ModuleRun] = _runs(tables.EAN5_START_GUARD, ModuleRole.GUARD)
    for index, parity in enumerate(parity_row):
        if index:
            runs += _runs(tables.EAN5_SEPARATOR, ModuleRole.SEPARATOR)
        runs += _runs(encode_digit(digits[index], parity), ModuleRole.DIGIT, index)

    pattern = ModulePattern(Symbology.EAN5, tuple(runs))
    logger.debug("Encoded EAN-5 signature %d: %s", signature, pattern)
    return pattern
