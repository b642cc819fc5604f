"""
Reader for the fixed EPS barcode grammar.

Recovers what a preview or print-pipeline consumer needs from an emitted
document by pattern matching, without a PostScript interpreter:
bounding box, scale directive, font size, bar rectangles and labels.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final, Optional, Tuple

logger = logging.getLogger(__name__)

__all__ = ["EpsBar", "EpsLabel", "EpsReadError", "ParsedEps", "read_eps"]

_NUM = r"(-?[\d.]+)"

_HIRES_RE: Final[re.Pattern[str]] = re.compile(
    rf"%%HiResBoundingBox:\s*{_NUM}\s+{_NUM}\s+{_NUM}\s+{_NUM}"
)
_SCALE_RE: Final[re.Pattern[str]] = re.compile(rf"^{_NUM}\s+{_NUM}\s+sc$", re.MULTILINE)
_FONT_RE: Final[re.Pattern[str]] = re.compile(r"/(\S+)\s+findfont\s+([\d.]+)\s+scalefont")
_BAR_RE: Final[re.Pattern[str]] = re.compile(
    rf"n\s+{_NUM}\s+{_NUM}\s+m\s+{_NUM}\s+{_NUM}\s+l\s+{_NUM}\s+{_NUM}\s+l\s+{_NUM}\s+{_NUM}\s+l\s+f\s+c"
)
_TEXT_RE: Final[re.Pattern[str]] = re.compile(rf"n\s+{_NUM}\s+{_NUM}\s+m\s+\(((?:[^()\\]|\\.)*)\)\s+s\s+c")
_UNESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"\\(.)")


class EpsReadError(ValueError):
    """Document does not follow the barcode EPS grammar."""


@dataclass(frozen=True, slots=True)
class EpsBar:
    """Bar rectangle in document units (millimetres)."""

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


@dataclass(frozen=True, slots=True)
class EpsLabel:
    x: float
    y: float
    text: str


@dataclass(frozen=True, slots=True)
class ParsedEps:
    """
    Attributes:
        width_pt, height_pt: %%HiResBoundingBox extent in points.
        scale: User-space scale (points per document unit).
        font_name, font_size: Label font, size in document units.
        bars: Rectangles in emission order.
        labels: Labels in emission order.
    """

    width_pt: float
    height_pt: float
    scale: float
    font_name: Optional[str]
    font_size: Optional[float]
    bars: Tuple[EpsBar, ...]
    labels: Tuple[EpsLabel, ...]

    @property
    def text(self) -> str:
        return "".join(label.text for label in self.labels)


def read_eps(content: str) -> ParsedEps:
    """
    Parse an emitted barcode document.

    Raises:
        EpsReadError: the header lacks %%HiResBoundingBox or a scale directive.
    """
    bb_match = _HIRES_RE.search(content)
    if not bb_match:
        raise EpsReadError("Missing %%HiResBoundingBox")
    scale_match = _SCALE_RE.search(content)
    if not scale_match:
        raise EpsReadError("Missing scale directive")
    sx, sy = float(scale_match.group(1)), float(scale_match.group(2))
    if sx != sy:
        raise EpsReadError(f"Non-uniform scale {sx} x {sy}")

    font_match = _FONT_RE.search(content)

    bars = tuple(
        EpsBar(x0=float(m.group(1)), y0=float(m.group(2)), x1=float(m.group(5)), y1=float(m.group(4)))
        for m in _BAR_RE.finditer(content)
    )
    labels = tuple(
        EpsLabel(float(m.group(1)), float(m.group(2)), _UNESCAPE_RE.sub(r"\1", m.group(3)))
        for m in _TEXT_RE.finditer(content)
    )
    logger.debug("Read EPS: %d bars, %d labels", len(bars), len(labels))

    return ParsedEps(
        width_pt=float(bb_match.group(3)),
        height_pt=float(bb_match.group(4)),
        scale=sx,
        font_name=font_match.group(1) if font_match else None,
        font_size=float(font_match.group(2)) if font_match else None,
        bars=bars,
        labels=labels,
    )
