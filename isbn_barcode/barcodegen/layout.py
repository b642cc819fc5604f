"""
Layout engine: module patterns -> bar rectangles and label anchors.

All positions are computed in millimetres from the left edge of the
document and snapped to the device grid of the output resolution one edge
at a time, so rounding never accumulates across bars.

Vertical axis is PostScript's: y grows upwards, labels sit below the main
symbol and above the add-on.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Final, List, Optional, Sequence, Tuple

from isbn_barcode.model.enums import ModuleRole, Resolution, Symbology
from isbn_barcode.model.geometry import Geometry, Rect, TextAnchor
from isbn_barcode.model.symbol import ModulePattern

from .errors import ContractViolation, InvalidHeightError

logger = logging.getLogger(__name__)

__all__ = [
    "MODULE_WIDTH_MM",
    "QUIET_ZONE_LEFT_MM",
    "QUIET_ZONE_RIGHT_MM",
    "ADDON_QUIET_ZONE_RIGHT_MM",
    "TOP_MARGIN_MM",
    "MIN_BAR_HEIGHT_MM",
    "MAX_BAR_HEIGHT_MM",
    "DEFAULT_BAR_HEIGHT_MM",
    "ADDON_OFFSET_STEP_MM",
    "MAX_ADDON_OFFSET_STEPS",
    "clamp_bar_height",
    "clamp_offset_steps",
    "offset_steps_from_mm",
    "font_size_for_height",
    "LayoutEngine",
]

# === SYMBOL DIMENSIONS (мм) ===
MODULE_WIDTH_MM: Final[float] = 0.33
QUIET_ZONE_LEFT_MM: Final[float] = 3.63  # 11 X
QUIET_ZONE_RIGHT_MM: Final[float] = 2.31  # 7 X
ADDON_GAP_MODULES: Final[int] = 7
ADDON_QUIET_ZONE_RIGHT_MM: Final[float] = 4.31
TOP_MARGIN_MM: Final[float] = 0.5

# === VERTICAL POSITIONS (мм) ===
TEXT_BASELINE_MM: Final[float] = 0.0847
GUARD_BOTTOM_MM: Final[float] = 1.093
DIGIT_BAR_BOTTOM_MM: Final[float] = 2.743
ADDON_TEXT_GAP_MM: Final[float] = 0.4147

# === BAR HEIGHT ===
MIN_BAR_HEIGHT_MM: Final[float] = 5.0
MAX_BAR_HEIGHT_MM: Final[float] = 50.0
DEFAULT_BAR_HEIGHT_MM: Final[float] = 15.0

# === ADD-ON OFFSET ===
ADDON_OFFSET_STEP_MM: Final[float] = 0.1
MAX_ADDON_OFFSET_STEPS: Final[int] = 10

# === HUMAN-READABLE TEXT ===
BASE_FONT_SIZE_MM: Final[float] = 3.175  # ~9 pt at the default height
MIN_FONT_SIZE_MM: Final[float] = 2.2
MAX_FONT_SIZE_MM: Final[float] = 4.0
FIRST_DIGIT_SHIFT: Final[float] = 0.9  # x font size, left of the quiet-zone edge
LABEL_CENTER_SHIFT: Final[float] = 0.3  # x font size, left of the digit centre

# Module index of the first digit in each symbol half
_EAN13_LEFT_START: Final[int] = 3
_EAN13_RIGHT_START: Final[int] = 50
_EAN5_DIGIT_START: Final[int] = 4
_EAN5_DIGIT_STRIDE: Final[int] = 9
_DIGIT_MODULES: Final[int] = 7


def clamp_bar_height(height_mm: float) -> float:
    """
    Clamp bar height to [5, 50] mm.

    Callers clamp upstream; a value outside the range is logged and fixed,
    a value that cannot be compared (NaN, inf, non-number) is fatal.
    """
    if isinstance(height_mm, bool) or not isinstance(height_mm, (int, float)):
        raise InvalidHeightError(f"Bar height must be a number, got {type(height_mm)!r}")
    if not math.isfinite(height_mm):
        raise InvalidHeightError(f"Bar height must be finite, got {height_mm!r}")
    clamped = min(max(float(height_mm), MIN_BAR_HEIGHT_MM), MAX_BAR_HEIGHT_MM)
    if clamped != height_mm:
        logger.warning("Bar height %.3f mm clamped to %.3f mm", height_mm, clamped)
    return clamped


def clamp_offset_steps(steps: int) -> int:
    clamped = min(max(steps, -MAX_ADDON_OFFSET_STEPS), MAX_ADDON_OFFSET_STEPS)
    if clamped != steps:
        logger.warning("Add-on offset of %d steps clamped to %d", steps, clamped)
    return clamped


def offset_steps_from_mm(offset_mm: float) -> int:
    """
    Nearest 0.1 mm step count, clamped to [-10, 10].

    Rounds the decimal value the caller typed, so 0.15 mm is 2 steps; halves
    round away from zero (-0.15 mm is -2 steps).
    """
    if isinstance(offset_mm, bool) or not isinstance(offset_mm, (int, float)):
        raise ContractViolation(f"Add-on offset must be a number, got {type(offset_mm)!r}")
    if not math.isfinite(offset_mm):
        raise ContractViolation(f"Add-on offset must be finite, got {offset_mm!r}")
    steps = Decimal(str(offset_mm)) / Decimal(str(ADDON_OFFSET_STEP_MM))
    return clamp_offset_steps(int(steps.to_integral_value(rounding=ROUND_HALF_UP)))


def font_size_for_height(height_mm: float) -> float:
    """Label font size proportional to bar height, 3.175 mm at 15 mm."""
    scaled = height_mm * BASE_FONT_SIZE_MM / DEFAULT_BAR_HEIGHT_MM
    return min(max(scaled, MIN_FONT_SIZE_MM), MAX_FONT_SIZE_MM)


class LayoutEngine:
    """
    Physical layout of an EAN-13 symbol with an optional EAN-5 add-on.

    Args:
        resolution: Output resolution; every coordinate snaps to its grid.
        bar_height_mm: Guard bar height, clamped to [5, 50].
        addon_offset_steps: Add-on vertical offset in 0.1 mm steps,
            clamped to [-10, 10]. Bars and labels of the add-on move together.
    """

    def __init__(
        self,
        resolution: Resolution,
        bar_height_mm: float = DEFAULT_BAR_HEIGHT_MM,
        addon_offset_steps: int = 0,
    ) -> None:
        if not isinstance(resolution, Resolution):
            raise TypeError(f"resolution must be Resolution enum, got {type(resolution)!r}")
        self.resolution = resolution
        self.bar_height_mm = clamp_bar_height(bar_height_mm)
        self.addon_offset_steps = clamp_offset_steps(int(addon_offset_steps))
        self.font_size_mm = font_size_for_height(self.bar_height_mm)

    # --- derived millimetre positions ---

    @property
    def bar_top_mm(self) -> float:
        return GUARD_BOTTOM_MM + self.bar_height_mm

    @property
    def addon_offset_mm(self) -> float:
        return self.addon_offset_steps * ADDON_OFFSET_STEP_MM

    @property
    def addon_offset_units(self) -> int:
        return self.resolution.to_units(self.addon_offset_steps / 10)

    @staticmethod
    def addon_origin_mm(main_modules: int) -> float:
        return QUIET_ZONE_LEFT_MM + (main_modules + ADDON_GAP_MODULES) * MODULE_WIDTH_MM

    def _label_x(self, symbol_x_mm: float, module_start: int) -> int:
        center = symbol_x_mm + (module_start + _DIGIT_MODULES / 2) * MODULE_WIDTH_MM
        return self.resolution.to_units(center - self.font_size_mm * LABEL_CENTER_SHIFT)

    def _bar_rects(
        self,
        pattern: ModulePattern,
        origin_mm: float,
        bottom_mm: float,
        top_mm: float,
        guard_bottom_mm: Optional[float] = None,
    ) -> List[Rect]:
        to_units = self.resolution.to_units
        rects: List[Rect] = []
        for index, (dark, role) in enumerate(pattern.modules()):
            if not dark:
                continue
            # каждая грань считается от начала символа, без накопления
            left = origin_mm + index * MODULE_WIDTH_MM
            right = origin_mm + (index + 1) * MODULE_WIDTH_MM
            bottom = guard_bottom_mm if role is ModuleRole.GUARD and guard_bottom_mm is not None else bottom_mm
            rects.append(
                Rect(to_units(left), to_units(bottom), to_units(right), to_units(top_mm), pattern.symbology, role)
            )
        return rects

    def layout_main(self, pattern: ModulePattern, digits: Sequence[int]) -> Tuple[List[Rect], List[TextAnchor]]:
        if pattern.symbology is not Symbology.EAN13 or len(digits) != Symbology.EAN13.digit_count:
            raise ContractViolation("layout_main requires an EAN-13 pattern and its 13 digits")

        bars = self._bar_rects(
            pattern,
            QUIET_ZONE_LEFT_MM,
            DIGIT_BAR_BOTTOM_MM,
            self.bar_top_mm,
            guard_bottom_mm=GUARD_BOTTOM_MM,
        )

        to_units = self.resolution.to_units
        baseline = to_units(TEXT_BASELINE_MM)
        labels = [
            TextAnchor(
                to_units(QUIET_ZONE_LEFT_MM - self.font_size_mm * FIRST_DIGIT_SHIFT),
                baseline,
                str(digits[0]),
                Symbology.EAN13,
            )
        ]
        for i in range(6):
            labels.append(
                TextAnchor(
                    self._label_x(QUIET_ZONE_LEFT_MM, _EAN13_LEFT_START + i * _DIGIT_MODULES),
                    baseline,
                    str(digits[i + 1]),
                    Symbology.EAN13,
                )
            )
        for i in range(6):
            labels.append(
                TextAnchor(
                    self._label_x(QUIET_ZONE_LEFT_MM, _EAN13_RIGHT_START + i * _DIGIT_MODULES),
                    baseline,
                    str(digits[i + 7]),
                    Symbology.EAN13,
                )
            )
        return bars, labels

    def layout_addon(
        self,
        pattern: ModulePattern,
        digits: Sequence[int],
        main_modules: int = Symbology.EAN13.module_count,
    ) -> Tuple[List[Rect], List[TextAnchor]]:
        """
        Add-on bars and labels, laid out at zero offset and then moved by
        the snapped offset as one unit.
        """
        if pattern.symbology is not Symbology.EAN5 or len(digits) != Symbology.EAN5.digit_count:
            raise ContractViolation("layout_addon requires an EAN-5 pattern and its 5 digits")

        origin = self.addon_origin_mm(main_modules)
        text_baseline_mm = self.bar_top_mm - self.font_size_mm
        bar_top_mm = text_baseline_mm - ADDON_TEXT_GAP_MM
        dy = self.addon_offset_units

        bars = [rect.shifted(dy) for rect in self._bar_rects(pattern, origin, GUARD_BOTTOM_MM, bar_top_mm)]

        baseline = self.resolution.to_units(text_baseline_mm) + dy
        labels = [
            TextAnchor(
                self._label_x(origin, _EAN5_DIGIT_START + i * _EAN5_DIGIT_STRIDE),
                baseline,
                str(digit),
                Symbology.EAN5,
            )
            for i, digit in enumerate(digits)
        ]
        return bars, labels

    def layout(
        self,
        main: ModulePattern,
        identifier_digits: Sequence[int],
        addon: Optional[ModulePattern] = None,
        addon_digits: Sequence[int] = (),
    ) -> Geometry:
        bars, labels = self.layout_main(main, identifier_digits)
        addon_bars: List[Rect] = []
        addon_labels: List[TextAnchor] = []
        if addon is not None:
            addon_bars, addon_labels = self.layout_addon(addon, addon_digits, main.module_count)

        logger.debug(
            "Layout at %d DPI: %d main bars, %d add-on bars, font %.4f mm",
            self.resolution.value,
            len(bars),
            len(addon_bars),
            self.font_size_mm,
        )
        return Geometry(
            resolution=self.resolution,
            bars=tuple(bars),
            addon_bars=tuple(addon_bars),
            labels=tuple(labels),
            addon_labels=tuple(addon_labels),
            font_size_mm=self.font_size_mm,
            bar_height_mm=self.bar_height_mm,
        )
