"""
Vector document model: the drawing operations a serializer emits.

Coordinates are integer device units at ``RenderDocument.resolution``;
the serializer decides how they are written out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional, Tuple

from .enums import MM_PER_INCH, POINTS_PER_INCH, Resolution, Symbology

__all__ = [
    "CMYK_BLACK",
    "CMYK_WHITE",
    "Point",
    "FillOp",
    "TextOp",
    "BoundingBox",
    "DocumentInfo",
    "RenderDocument",
]

CMYK_BLACK: Final[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 1.0)
CMYK_WHITE: Final[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class FillOp:
    """Closed four-corner path, filled with the document colour."""

    corners: Tuple[Point, Point, Point, Point]
    symbology: Symbology

    @classmethod
    def rectangle(cls, x0: int, y0: int, x1: int, y1: int, symbology: Symbology) -> FillOp:
        # bottom-left, top-left, top-right, bottom-right
        return cls(
            (Point(x0, y0), Point(x0, y1), Point(x1, y1), Point(x1, y0)),
            symbology,
        )

    @property
    def x0(self) -> int:
        return min(p.x for p in self.corners)

    @property
    def x1(self) -> int:
        return max(p.x for p in self.corners)

    @property
    def y0(self) -> int:
        return min(p.y for p in self.corners)

    @property
    def y1(self) -> int:
        return max(p.y for p in self.corners)


@dataclass(frozen=True, slots=True)
class TextOp:
    anchor: Point
    text: str
    symbology: Symbology


@dataclass(frozen=True, slots=True)
class BoundingBox:
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


@dataclass(frozen=True, slots=True)
class DocumentInfo:
    """Generation parameters echoed into the document header."""

    identifier: str
    addon: str
    bar_height_mm: float
    module_width_mm: float
    addon_offset_mm: float
    creator: str


@dataclass(frozen=True, slots=True)
class RenderDocument:
    """
    Ordered drawing operations plus document metadata.

    Invariants:
        - ``fills`` hold main-symbol bars left to right, then add-on bars.
        - ``texts`` are ordered left to right.
        - ``color`` is always 100% black in CMYK.
    """

    info: DocumentInfo
    resolution: Resolution
    bounding_box: BoundingBox
    fills: Tuple[FillOp, ...]
    texts: Tuple[TextOp, ...]
    font_name: str
    font_size_mm: float
    color: Tuple[float, float, float, float] = CMYK_BLACK

    @property
    def units_per_mm(self) -> float:
        """Device units per millimetre."""
        return self.resolution.units_per_mm

    @property
    def points_per_mm(self) -> float:
        """Scale applied to the millimetre drawing space."""
        return POINTS_PER_INCH / MM_PER_INCH

    def fills_for(self, symbology: Symbology) -> Tuple[FillOp, ...]:
        return tuple(op for op in self.fills if op.symbology is symbology)

    def texts_for(self, symbology: Symbology) -> Tuple[TextOp, ...]:
        return tuple(op for op in self.texts if op.symbology is symbology)

    def label_text(self, symbology: Optional[Symbology] = None) -> str:
        ops = self.texts if symbology is None else self.texts_for(symbology)
        return "".join(op.text for op in ops)
