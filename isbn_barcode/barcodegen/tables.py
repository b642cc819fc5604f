"""
EAN symbology tables.

Reference: ISO/IEC 15420 (EAN/UPC), GS1 General Specifications 5.2.2
           (EAN-13) and 5.2.2.6 (two/five-digit add-on symbols)

Each digit code is a 7-module string, ``1`` = bar, ``0`` = space.
"""

from typing import Final, Mapping, Tuple

from isbn_barcode.model.enums import ParityCode

__all__ = [
    "L_CODES",
    "G_CODES",
    "R_CODES",
    "DIGIT_CODES",
    "EAN13_PARITY",
    "EAN5_PARITY",
    "EAN13_START_GUARD",
    "EAN13_CENTER_GUARD",
    "EAN13_END_GUARD",
    "EAN5_START_GUARD",
    "EAN5_SEPARATOR",
]

# =============================================================================
# DIGIT CODES
# =============================================================================

L_CODES: Final[Tuple[str, ...]] = (
    "0001101", "0011001", "0010011", "0111101", "0100011",
    "0110001", "0101111", "0111011", "0110111", "0001011",
)

G_CODES: Final[Tuple[str, ...]] = (
    "0100111", "0110011", "0011011", "0100001", "0011101",
    "0111001", "0000101", "0010001", "0001001", "0010111",
)

R_CODES: Final[Tuple[str, ...]] = (
    "1110010", "1100110", "1101100", "1000010", "1011100",
    "1001110", "1010000", "1000100", "1001000", "1110100",
)

DIGIT_CODES: Final[Mapping[ParityCode, Tuple[str, ...]]] = {
    ParityCode.L: L_CODES,
    ParityCode.G: G_CODES,
    ParityCode.R: R_CODES,
}

# =============================================================================
# PARITY TABLES
# =============================================================================


def _row(markers: str) -> Tuple[ParityCode, ...]:
    return tuple(ParityCode(ch) for ch in markers)


# Indexed by the leading digit; covers digits 2-7.
EAN13_PARITY: Final[Tuple[Tuple[ParityCode, ...], ...]] = tuple(
    _row(markers)
    for markers in (
        "LLLLLL", "LLGLGG", "LLGGLG", "LLGGGL", "LGLLGG",
        "LGGLLG", "LGGGLL", "LGLGLG", "LGLGGL", "LGGLGL",
    )
)

# Indexed by the add-on parity signature (weighted sum mod 10).
EAN5_PARITY: Final[Tuple[Tuple[ParityCode, ...], ...]] = tuple(
    _row(markers)
    for markers in (
        "GGLLL", "GLGLL", "GLLGL", "GLLLG", "LGGLL",
        "LLGGL", "LLLGG", "LGLGL", "LGLLG", "LLGLG",
    )
)

# =============================================================================
# GUARDS
# =============================================================================

EAN13_START_GUARD: Final[str] = "101"
EAN13_CENTER_GUARD: Final[str] = "01010"
EAN13_END_GUARD: Final[str] = "101"

EAN5_START_GUARD: Final[str] = "1011"
EAN5_SEPARATOR: Final[str] = "01"
