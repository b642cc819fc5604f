"""Geometry value objects in integer device units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .enums import ModuleRole, Resolution, Symbology

__all__ = ["Rect", "TextAnchor", "Geometry"]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned bar rectangle, origin bottom-left (PostScript axes)."""

    x0: int
    y0: int
    x1: int
    y1: int
    symbology: Symbology
    role: ModuleRole

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    def shifted(self, dy: int) -> Rect:
        return Rect(self.x0, self.y0 + dy, self.x1, self.y1 + dy, self.symbology, self.role)


@dataclass(frozen=True, slots=True)
class TextAnchor:
    """Baseline start point of a human-readable label."""

    x: int
    y: int
    text: str
    symbology: Symbology


@dataclass(frozen=True, slots=True)
class Geometry:
    """
    Layout result: bars and labels of both symbols.

    Attributes:
        resolution: Grid all coordinates are snapped to.
        bars: Main-symbol rectangles, left to right.
        addon_bars: Add-on rectangles, left to right (empty without add-on).
        labels: Main-symbol digit labels, left to right.
        addon_labels: Add-on digit labels, left to right.
        font_size_mm: Label font size.
        bar_height_mm: Bar height after clamping.
    """

    resolution: Resolution
    bars: Tuple[Rect, ...]
    addon_bars: Tuple[Rect, ...]
    labels: Tuple[TextAnchor, ...]
    addon_labels: Tuple[TextAnchor, ...]
    font_size_mm: float
    bar_height_mm: float

    @property
    def has_addon(self) -> bool:
        return bool(self.addon_bars)

    def all_bars(self) -> Iterator[Rect]:
        yield from self.bars
        yield from self.addon_bars

    def all_labels(self) -> Iterator[TextAnchor]:
        yield from self.labels
        yield from self.addon_labels
