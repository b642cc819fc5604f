# RU: Запрос на генерацию штрихкода ISBN (форма входных данных фасада).
# EN: Barcode generation request: the facade input shape as a dataclass, with dict round-trip.

import logging
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarcodeRequest:
    """
    Input of one generation call.

    Examples:
        req = BarcodeRequest.from_dict({"identifier": "9788969930460", "addon": "13590"})
        result = generate(**req.to_kwargs())
    """

    schema_version: ClassVar[str] = "1.0"

    identifier: str
    addon: str = ""
    bar_height_mm: float = 15.0
    dpi: int = 600
    addon_offset_mm: float = 0.0

    # Older clients send the identifier as "isbn".
    _ALIASES: ClassVar[Dict[str, str]] = {"isbn": "identifier"}

    def to_kwargs(self) -> Dict[str, Any]:
        return asdict(self)

    def to_dict(self) -> Dict[str, Any]:
        dct: Dict[str, Any] = asdict(self)
        dct["schema_version"] = self.schema_version
        return dct

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "BarcodeRequest":
        """
        Build a request from a mapping; unknown keys are ignored with a warning.

        Raises:
            ValueError: ``identifier`` (or ``isbn``) is missing.
        """
        d = {cls._ALIASES.get(k, k): v for k, v in d.items()}
        if "schema_version" in d and d["schema_version"] != cls.schema_version:
            logger.warning(
                "Schema version mismatch (expected %s, got %s)",
                cls.schema_version,
                d["schema_version"],
            )
        d.pop("schema_version", None)
        if "identifier" not in d:
            raise ValueError("Request must contain 'identifier'")

        known = {"identifier", "addon", "bar_height_mm", "dpi", "addon_offset_mm"}
        unknown = sorted(set(d) - known)
        if unknown:
            logger.warning("Ignoring unknown request keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in d.items() if k in known})

    def __str__(self) -> str:
        addon = f"+{self.addon}" if self.addon else ""
        return f"BarcodeRequest({self.identifier}{addon}, {self.dpi} DPI)"
