"""Assembles layout geometry into an ordered RenderDocument."""

from __future__ import annotations

import logging
from typing import Iterable, List

from isbn_barcode.model.document import (
    CMYK_BLACK,
    BoundingBox,
    DocumentInfo,
    FillOp,
    RenderDocument,
    TextOp,
    Point,
)
from isbn_barcode.model.geometry import Geometry, Rect, TextAnchor

from .layout import (
    ADDON_QUIET_ZONE_RIGHT_MM,
    QUIET_ZONE_RIGHT_MM,
    TOP_MARGIN_MM,
)

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_FONT_NAME", "VectorDocumentBuilder"]

DEFAULT_FONT_NAME = "ArialMT"


class VectorDocumentBuilder:
    """
    Builds the drawing-operation model the serializer emits.

    Ordering is fixed here, not in the serializer: main bars left to right,
    then add-on bars left to right, then every label left to right.
    """

    def __init__(self, font_name: str = DEFAULT_FONT_NAME) -> None:
        if not font_name or any(ch.isspace() or ch in "()/{}[]<>%" for ch in font_name):
            raise ValueError(f"Invalid PostScript font name: {font_name!r}")
        self.font_name = font_name

    @staticmethod
    def _fills(rects: Iterable[Rect]) -> List[FillOp]:
        ordered = sorted(rects, key=lambda r: (r.x0, r.y0))
        return [FillOp.rectangle(r.x0, r.y0, r.x1, r.y1, r.symbology) for r in ordered]

    @staticmethod
    def _texts(anchors: Iterable[TextAnchor]) -> List[TextOp]:
        ordered = sorted(anchors, key=lambda a: a.x)
        return [TextOp(Point(a.x, a.y), a.text, a.symbology) for a in ordered]

    def bounding_box(self, geometry: Geometry) -> BoundingBox:
        """
        Symbol extent plus the export margins, origin at (0, 0).

        Width is bars only: the right-most symbol always ends on a dark
        module, so it equals quiet zone + modules + trailing margin.
        Height also covers the label glyph boxes (baseline + font size).
        """
        to_units = geometry.resolution.to_units
        glyph_height = to_units(geometry.font_size_mm)

        bars = list(geometry.all_bars())
        right = max(r.x1 for r in bars)
        top = max([r.y1 for r in bars] + [a.y + glyph_height for a in geometry.all_labels()])

        trailing = ADDON_QUIET_ZONE_RIGHT_MM if geometry.has_addon else QUIET_ZONE_RIGHT_MM
        return BoundingBox(0, 0, right + to_units(trailing), top + to_units(TOP_MARGIN_MM))

    def build(self, geometry: Geometry, info: DocumentInfo) -> RenderDocument:
        fills = self._fills(geometry.bars) + self._fills(geometry.addon_bars)
        texts = self._texts(geometry.all_labels())
        bbox = self.bounding_box(geometry)
        logger.debug(
            "Document: %d fills, %d labels, bbox %dx%d units",
            len(fills),
            len(texts),
            bbox.width,
            bbox.height,
        )
        return RenderDocument(
            info=info,
            resolution=geometry.resolution,
            bounding_box=bbox,
            fills=tuple(fills),
            texts=tuple(texts),
            font_name=self.font_name,
            font_size_mm=geometry.font_size_mm,
            color=CMYK_BLACK,
        )
