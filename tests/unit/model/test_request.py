from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from isbn_barcode.model import request as request_module
from isbn_barcode.model.request import BarcodeRequest


def test_defaults() -> None:
    req = BarcodeRequest("9788969930460")
    assert req.addon == ""
    assert req.bar_height_mm == 15.0
    assert req.dpi == 600
    assert req.addon_offset_mm == 0.0


def test_to_kwargs_matches_generate_signature() -> None:
    req = BarcodeRequest("9788969930460", "13590", 20.0, 1200, 0.5)
    assert req.to_kwargs() == {
        "identifier": "9788969930460",
        "addon": "13590",
        "bar_height_mm": 20.0,
        "dpi": 1200,
        "addon_offset_mm": 0.5,
    }


def test_to_dict_carries_schema_version() -> None:
    dct = BarcodeRequest("9788969930460").to_dict()
    assert dct["schema_version"] == BarcodeRequest.schema_version
    assert dct["identifier"] == "9788969930460"


def test_round_trip() -> None:
    req = BarcodeRequest("9788969930460", "13590", dpi=300)
    assert BarcodeRequest.from_dict(req.to_dict()) == req


def test_isbn_alias() -> None:
    req = BarcodeRequest.from_dict({"isbn": "9788969930460", "addon": "13590"})
    assert req.identifier == "9788969930460"
    assert req.addon == "13590"


def test_missing_identifier() -> None:
    with pytest.raises(ValueError, match="identifier"):
        BarcodeRequest.from_dict({"addon": "13590"})


def test_unknown_keys_ignored_with_warning() -> None:
    with patch.object(request_module.logger, "warning") as mock_warning:
        req = BarcodeRequest.from_dict({"identifier": "9788969930460", "color": "red"})
    assert req == BarcodeRequest("9788969930460")
    mock_warning.assert_called_once()
    assert "color" in mock_warning.call_args[0][1]


def test_schema_version_mismatch_warns() -> None:
    with patch.object(request_module.logger, "warning") as mock_warning:
        BarcodeRequest.from_dict({"identifier": "9788969930460", "schema_version": "0.1"})
    mock_warning.assert_called_once()


def test_frozen() -> None:
    req = BarcodeRequest("9788969930460")
    with pytest.raises(FrozenInstanceError):
        req.dpi = 300  # type: ignore[misc]


def test_str() -> None:
    assert str(BarcodeRequest("9788969930460", "13590")) == "BarcodeRequest(9788969930460+13590, 600 DPI)"
