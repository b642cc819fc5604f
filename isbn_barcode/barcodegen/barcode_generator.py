from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, TypedDict

from isbn_barcode.eps.serializer import serialize_eps
from isbn_barcode.model.document import DocumentInfo, RenderDocument
from isbn_barcode.model.enums import DEFAULT_RESOLUTION, FailureKind, Resolution
from isbn_barcode.model.request import BarcodeRequest
from isbn_barcode.model.symbol import ModulePattern

from .checksum import validate_addon, validate_identifier
from .document_builder import DEFAULT_FONT_NAME, VectorDocumentBuilder
from .encoder import encode_ean5, encode_ean13
from .errors import UnsupportedResolutionError, ValidationError
from .layout import DEFAULT_BAR_HEIGHT_MM, MODULE_WIDTH_MM, LayoutEngine, offset_steps_from_mm

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CREATOR",
    "EpsOptions",
    "GenerationResult",
    "BarcodeGenerator",
    "generate",
    "handle_request",
    "options_from_config",
    "resolve_resolution",
    "suggested_filename",
]

DEFAULT_CREATOR = "ISBN Barcode Maker"


class EpsOptions(TypedDict, total=False):
    """Типобезопасные опции генерации EPS."""

    bar_height_mm: float  # Высота охранных штрихов, 5..50 мм
    dpi: int  # Разрешение вывода: 300, 600 или 1200
    addon_offset_mm: float  # Вертикальный сдвиг EAN-5, -1.0..1.0 мм, шаг 0.1
    font_name: str  # PostScript-шрифт для цифр под штрихкодом
    creator: str  # Значение %%Creator


_DEFAULT_OPTIONS: EpsOptions = {
    "bar_height_mm": DEFAULT_BAR_HEIGHT_MM,
    "dpi": DEFAULT_RESOLUTION.value,
    "addon_offset_mm": 0.0,
    "font_name": DEFAULT_FONT_NAME,
    "creator": DEFAULT_CREATOR,
}


def options_from_config(config: Mapping[str, Any]) -> EpsOptions:
    """Pick generation options out of a ``load_config()`` mapping."""
    options: EpsOptions = {}
    for key in _DEFAULT_OPTIONS:
        if key in config:
            options[key] = config[key]  # type: ignore[literal-required]
    return options


def resolve_resolution(dpi: Any) -> Resolution:
    """
    Raises:
        UnsupportedResolutionError: ``dpi`` is not 300, 600 or 1200.
    """
    if isinstance(dpi, Resolution):
        return dpi
    if isinstance(dpi, int) and not isinstance(dpi, bool) and dpi in Resolution.supported_values():
        return Resolution(dpi)
    supported = ", ".join(str(v) for v in Resolution.supported_values())
    raise UnsupportedResolutionError(f"Unsupported resolution: {dpi!r} DPI (expected one of {supported}).")


def suggested_filename(identifier: str, addon: str = "") -> str:
    """Default save name: ``isbn_{identifier}_{addon}.eps`` or ``isbn_{identifier}.eps``."""
    return f"isbn_{identifier}_{addon}.eps" if addon else f"isbn_{identifier}.eps"


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one generation call.

    ``document`` is the EPS text on success and None on failure; a partial
    document is never returned.
    """

    success: bool
    message: str
    document: Optional[str] = None
    failure: Optional[FailureKind] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "message": self.message, "document": self.document}


class BarcodeGenerator:
    """
    ISBN EAN-13 (+ optional EAN-5) vector barcode generator.

    Args:
        identifier: 13-digit ISBN / EAN-13
        addon: "" or 5-digit add-on (classification or price code)
        options: Optional generation options; missing keys use defaults

    Pipeline: validate -> encode -> layout -> build document -> serialize.
    """

    def __init__(
        self,
        identifier: str,
        addon: str = "",
        options: Optional[EpsOptions] = None,
    ) -> None:
        self.identifier = identifier
        self.addon = addon
        self.options: Dict[str, Any] = {**_DEFAULT_OPTIONS, **(options or {})}

    def validate(self) -> Tuple[Tuple[int, ...], Tuple[int, ...], Resolution]:
        """
        Validate identifier, add-on and resolution.

        Returns:
            (identifier digits, add-on digits, resolution)

        Raises:
            ValidationError: on any user-input failure.
        """
        identifier_digits = validate_identifier(self.identifier)
        addon_digits = validate_addon(self.addon)
        resolution = resolve_resolution(self.options["dpi"])
        return identifier_digits, addon_digits, resolution

    def encode(self) -> Tuple[ModulePattern, Optional[ModulePattern]]:
        identifier_digits, addon_digits, _ = self.validate()
        main = encode_ean13(identifier_digits)
        addon = encode_ean5(addon_digits) if addon_digits else None
        return main, addon

    def build_document(self) -> RenderDocument:
        identifier_digits, addon_digits, resolution = self.validate()
        main = encode_ean13(identifier_digits)
        addon = encode_ean5(addon_digits) if addon_digits else None

        engine = LayoutEngine(
            resolution,
            bar_height_mm=self.options["bar_height_mm"],
            addon_offset_steps=offset_steps_from_mm(self.options["addon_offset_mm"]),
        )
        geometry = engine.layout(main, identifier_digits, addon, addon_digits)

        info = DocumentInfo(
            identifier=self.identifier,
            addon=self.addon,
            bar_height_mm=engine.bar_height_mm,
            module_width_mm=MODULE_WIDTH_MM,
            addon_offset_mm=engine.addon_offset_mm,
            creator=self.options["creator"],
        )
        return VectorDocumentBuilder(self.options["font_name"]).build(geometry, info)

    def render_eps(self) -> str:
        return serialize_eps(self.build_document())

    def filename(self) -> str:
        return suggested_filename(self.identifier, self.addon)


def generate(
    identifier: str,
    addon: str = "",
    bar_height_mm: float = DEFAULT_BAR_HEIGHT_MM,
    dpi: int = DEFAULT_RESOLUTION.value,
    addon_offset_mm: float = 0.0,
    options: Optional[EpsOptions] = None,
) -> GenerationResult:
    """
    Generate an EPS barcode document.

    User-input failures come back as ``success=False`` with a message;
    contract violations (e.g. a NaN bar height) propagate.
    """
    merged: EpsOptions = {
        **(options or {}),
        "bar_height_mm": bar_height_mm,
        "dpi": dpi,
        "addon_offset_mm": addon_offset_mm,
    }
    generator = BarcodeGenerator(identifier, addon, merged)
    logger.debug("Generating barcode for %r add-on=%r options=%s", identifier, addon, merged)
    try:
        document = generator.render_eps()
    except ValidationError as e:
        logger.warning("Barcode generation rejected: %s", e)
        return GenerationResult(success=False, message=e.message, document=None, failure=e.kind)

    symbols = f"ISBN {identifier}" + (f" with add-on {addon}" if addon else "")
    return GenerationResult(
        success=True,
        message=f"Barcode generated: {symbols} at {merged['dpi']} DPI.",
        document=document,
    )


def handle_request(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Request-shaped entry point: mapping in, ``{success, message, document}`` out.

    Raises:
        ValueError: the payload has no identifier.
    """
    request = BarcodeRequest.from_dict(payload)
    return generate(**request.to_kwargs()).to_dict()
