"""
PostScript operator vocabulary for EPS barcode documents.

The vocabulary is deliberately small: single-letter abbreviations defined
once in the prolog, a rectangle grammar and a label grammar. Readers of the
document (preview, print pipeline) match exactly these two lines:

    n x0 y0 m x0 y1 l x1 y1 l x1 y0 l f c
    n x y m (text) s c

Reference: Adobe PostScript Language Reference, 3rd ed.;
           Encapsulated PostScript File Format Specification 3.0
"""

from typing import Final, Sequence, Tuple

__all__ = [
    "EPS_VERSION_LINE",
    "END_COMMENTS",
    "PROLOG",
    "MM_TO_PT",
    "TRAILER",
    "fmt_coord",
    "escape_text",
    "bounding_box",
    "hires_bounding_box",
    "creator",
    "set_scale",
    "set_cmyk_color",
    "select_font",
    "fill_path",
    "show_text",
]

# =============================================================================
# DOCUMENT STRUCTURE
# =============================================================================

EPS_VERSION_LINE: Final[str] = "%!PS-Adobe-2.0 EPSF-1.2"
END_COMMENTS: Final[str] = "%%EndComments"

PROLOG: Final[Tuple[str, ...]] = (
    "/bd {bind def} bind def",
    "/c {closepath} bd",
    "/f {fill} bd",
    "/l {lineto} bd",
    "/m {moveto} bd",
    "/n {newpath} bd",
    "/r {rotate} bd",
    "/sc {scale} bd",
    "/s {show} bd",
    "/t {translate} bd",
)
"""
Operator abbreviations.

Effect: binds short names to the operators used by the drawing grammar
Note: ``r`` and ``t`` are defined for downstream editing tools, the
      generator itself never rotates or translates.
"""

TRAILER: Final[Tuple[str, ...]] = ("showpage", "%%EOF")

MM_TO_PT: Final[float] = 72 / 25.4
"""PostScript points per millimetre; the document draws in millimetres."""

# =============================================================================
# FORMATTING
# =============================================================================


def fmt_coord(mm: float) -> str:
    """Millimetre coordinate, 4 decimals (0.1 um, far below 1/1200 in)."""
    return f"{mm:.4f}"


def escape_text(text: str) -> str:
    """Escape a PostScript string literal body."""
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


# =============================================================================
# HEADER COMMENTS
# =============================================================================


def bounding_box(width_pt: int, height_pt: int) -> str:
    return f"%%BoundingBox: 0 0 {width_pt} {height_pt}"


def hires_bounding_box(width_pt: float, height_pt: float) -> str:
    return f"%%HiResBoundingBox: 0 0 {width_pt:.5f} {height_pt:.5f}"


def creator(name: str) -> str:
    return f"%%Creator: {name}"


# =============================================================================
# GRAPHICS STATE
# =============================================================================


def set_scale(factor: float) -> str:
    """Uniform user-space scale, ``sx sy sc``."""
    return f"{factor:.8f} {factor:.8f} sc"


def set_cmyk_color(c: float, m: float, y: float, k: float) -> str:
    return f"{c:.3f} {m:.3f} {y:.3f} {k:.3f} setcmykcolor"


def select_font(name: str, size: float) -> str:
    """Select ``name`` at ``size`` user units; emitted once per document."""
    return f"/{name} findfont {size:.7f} scalefont setfont"


# =============================================================================
# DRAWING
# =============================================================================


def fill_path(corners: Sequence[Tuple[float, float]]) -> str:
    """
    Filled closed path through four corners (millimetres).

    Grammar: n x0 y0 m x1 y1 l x2 y2 l x3 y3 l f c
    """
    if len(corners) != 4:
        raise ValueError(f"Filled path needs 4 corners, got {len(corners)}")
    (ax, ay), *rest = corners
    parts = ["n", fmt_coord(ax), fmt_coord(ay), "m"]
    for x, y in rest:
        parts += [fmt_coord(x), fmt_coord(y), "l"]
    parts += ["f", "c"]
    return " ".join(parts)


def show_text(x: float, y: float, text: str) -> str:
    """
    Label at baseline start (millimetres).

    Grammar: n x y m (text) s c
    """
    return f"n {fmt_coord(x)} {fmt_coord(y)} m ({escape_text(text)}) s c"
