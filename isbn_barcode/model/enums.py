"""
model/enums.py

(Краткое RU: Перечисления доменной модели штрихкода ISBN.)

EN: Domain enums for the ISBN barcode core (symbologies, parity codes,
module roles, output resolutions, failure kinds).
NO encoding tables or PostScript logic here!

See Also:
    - isbn_barcode/barcodegen/tables.py (symbology tables)
    - isbn_barcode/eps (document grammar)
"""

from __future__ import annotations

import logging
import math
from enum import Enum, IntEnum
from typing import Final, Literal

_logger: Final[logging.Logger] = logging.getLogger(__name__)

MM_PER_INCH: Final[float] = 25.4
POINTS_PER_INCH: Final[int] = 72


class ParityCode(str, Enum):
    """7-module digit encoding set of the EAN family."""

    L = "L"  # odd parity, left half
    G = "G"  # even parity, left half
    R = "R"  # right half

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            self.L: "Нечётная чётность (L)",
            self.G: "Чётная чётность (G)",
            self.R: "Правая половина (R)",
        }
        names_en = {
            self.L: "Odd parity (L)",
            self.G: "Even parity (G)",
            self.R: "Right side (R)",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


class Symbology(str, Enum):
    EAN13 = "ean13"
    EAN5 = "ean5"

    @property
    def digit_count(self) -> int:
        return 13 if self is Symbology.EAN13 else 5

    @property
    def module_count(self) -> int:
        # 3 + 42 + 5 + 42 + 3 / 4 + 5 * 7 + 4 * 2
        return 95 if self is Symbology.EAN13 else 47

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            self.EAN13: "EAN-13 (ISBN)",
            self.EAN5: "EAN-5 (дополнительный код)",
        }
        names_en = {
            self.EAN13: "EAN-13 (ISBN)",
            self.EAN5: "EAN-5 (add-on)",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


class ModuleRole(str, Enum):
    GUARD = "guard"
    DIGIT = "digit"
    SEPARATOR = "separator"


class Resolution(IntEnum):
    """Supported output resolutions; the value is dots per inch."""

    DPI_300 = 300
    DPI_600 = 600
    DPI_1200 = 1200

    @property
    def units_per_mm(self) -> float:
        """Device units (dots) per millimetre."""
        return self.value / MM_PER_INCH

    @property
    def points_per_unit(self) -> float:
        """PostScript points per device unit."""
        return POINTS_PER_INCH / self.value

    def to_units(self, mm: float) -> int:
        """
        Snap a millimetre coordinate to the nearest device unit.

        Half-way values round up, so the result does not depend on
        banker's rounding of ``round()``.
        """
        return int(math.floor(mm * self.value / MM_PER_INCH + 0.5))

    def to_mm(self, units: int) -> float:
        return units * MM_PER_INCH / self.value

    def to_points(self, units: int) -> float:
        return units * POINTS_PER_INCH / self.value

    def ceil_points(self, units: int) -> int:
        """Integer points covering ``units`` (for %%BoundingBox)."""
        return -(-units * POINTS_PER_INCH // self.value)

    @classmethod
    def supported_values(cls) -> tuple[int, ...]:
        return tuple(member.value for member in cls)


class FailureKind(str, Enum):
    INVALID_LENGTH = "invalid_length"
    INVALID_DIGIT = "invalid_digit"
    INVALID_CHECKSUM = "invalid_checksum"
    UNSUPPORTED_RESOLUTION = "unsupported_resolution"
    INVALID_HEIGHT = "invalid_height"

    @property
    def is_user_facing(self) -> bool:
        return self is not FailureKind.INVALID_HEIGHT


DEFAULT_RESOLUTION: Final[Resolution] = Resolution.DPI_600
