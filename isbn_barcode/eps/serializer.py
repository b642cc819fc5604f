"""
EPS serializer for RenderDocument.

Output is plain text, byte-identical for identical documents: fixed header,
%SETTINGS comment block, operator prolog, graphics state, fills, labels,
trailer. The document draws in millimetres; device-unit coordinates are
converted back through the document resolution.
"""

from __future__ import annotations

import logging
from typing import List

from isbn_barcode.model.document import CMYK_BLACK, CMYK_WHITE, RenderDocument

from . import commands

logger = logging.getLogger(__name__)

__all__ = ["serialize_eps"]


def _cmyk_comment(label: str, cmyk: tuple[float, float, float, float]) -> str:
    return f"% {label}: " + " ".join(f"{v:.3f}" for v in cmyk)


def _settings(doc: RenderDocument) -> List[str]:
    info = doc.info
    lines = [
        "%SETTINGS",
        "% Color: CMYK",
        _cmyk_comment("Background", CMYK_WHITE),
        _cmyk_comment("Foreground", doc.color),
        "% Human Readable: Yes",
        f"% Text Font: {doc.font_name}",
        f"% Output DPI: {doc.resolution.value}",
        "% Symbology: ISBN",
        f"% Value: {info.identifier}",
    ]
    if info.addon:
        lines.append(f"% Add-On: {info.addon}")
    lines += [
        f"% X-Dimension: {info.module_width_mm:.8f} mm",
        f"% Bar Height: {info.bar_height_mm:.8f} mm",
        f"% Add-On Offset: {info.addon_offset_mm:.4f} mm",
    ]
    return lines


def serialize_eps(doc: RenderDocument) -> str:
    """
    Render ``doc`` as EPS text.

    Raises:
        ValueError: the document colour is not CMYK black.
    """
    if doc.color != CMYK_BLACK:
        raise ValueError(f"Only CMYK black is supported, got {doc.color!r}")

    res = doc.resolution
    to_mm = res.to_mm
    bbox = doc.bounding_box

    lines: List[str] = [
        commands.EPS_VERSION_LINE,
        commands.bounding_box(res.ceil_points(bbox.width), res.ceil_points(bbox.height)),
        commands.hires_bounding_box(res.to_points(bbox.width), res.to_points(bbox.height)),
        commands.creator(doc.info.creator),
        commands.END_COMMENTS,
        "",
    ]
    lines += _settings(doc)
    lines.append("")
    lines += commands.PROLOG
    lines.append("")
    lines += [
        commands.set_scale(doc.points_per_mm),
        commands.set_cmyk_color(*doc.color),
        commands.select_font(doc.font_name, doc.font_size_mm),
    ]

    for op in doc.fills:
        lines.append(commands.fill_path([(to_mm(p.x), to_mm(p.y)) for p in op.corners]))
    for op in doc.texts:
        lines.append(commands.show_text(to_mm(op.anchor.x), to_mm(op.anchor.y), op.text))

    lines += commands.TRAILER
    text = "\n".join(lines) + "\n"
    logger.debug("Serialized EPS: %d bytes, %d fills, %d labels", len(text), len(doc.fills), len(doc.texts))
    return text
