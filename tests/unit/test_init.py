"""
Модульные тесты для isbn_barcode/__init__.py
Тестирует метаданные, конфигурацию, логирование и публичный API пакета.
"""

import json
import logging
import re
import tempfile
from pathlib import Path
from unittest import mock

import isbn_barcode


class TestVersionMetadata:
    """Тестирование метаданных версии."""

    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", isbn_barcode.__version__)

    def test_version_components(self) -> None:
        expected = f"{isbn_barcode.VERSION_MAJOR}.{isbn_barcode.VERSION_MINOR}.{isbn_barcode.VERSION_PATCH}"
        assert isbn_barcode.__version__ == expected

    def test_metadata_attributes(self) -> None:
        for attr in ("__author__", "__description__", "__license__", "__python_requires__"):
            value = getattr(isbn_barcode, attr)
            assert isinstance(value, str) and value, f"{attr} должен быть непустой строкой"


class TestPublicAPI:
    """Тестирование экспортов публичного API."""

    def test_all_exports_exist(self) -> None:
        for name in isbn_barcode.__all__:
            assert hasattr(isbn_barcode, name), f"Имя '{name}' из __all__ не существует в модуле"

    def test_no_duplicate_exports(self) -> None:
        assert len(isbn_barcode.__all__) == len(set(isbn_barcode.__all__))

    def test_facade_exported(self) -> None:
        for name in ("generate", "handle_request", "BarcodeGenerator", "read_eps", "Resolution"):
            assert name in isbn_barcode.__all__

    def test_generate_from_package_root(self) -> None:
        result = isbn_barcode.generate("9788969930460", "13590", dpi=300)
        assert result.success
        assert result.document is not None


class TestLogging:
    """Тестирование настройки логирования."""

    def test_get_logger_name_format(self) -> None:
        logger = isbn_barcode.get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "isbn_barcode.test_module"

    def test_get_logger_with_qualified_name(self) -> None:
        assert isbn_barcode.get_logger("isbn_barcode.eps").name == "isbn_barcode.eps"

    def test_get_logger_with_main(self) -> None:
        assert isbn_barcode.get_logger("__main__").name == "isbn_barcode.main"

    def test_get_logger_strips_leading_dots(self) -> None:
        assert isbn_barcode.get_logger(".relative").name == "isbn_barcode.relative"

    def test_package_logger_is_configured(self) -> None:
        package_logger = logging.getLogger(isbn_barcode.PACKAGE_LOGGER_NAME)
        assert package_logger.handlers
        assert package_logger.propagate is False
        stream_handlers = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]
        assert any(h.level == logging.WARNING for h in stream_handlers)

    def test_setup_logging_is_idempotent(self) -> None:
        package_logger = logging.getLogger(isbn_barcode.PACKAGE_LOGGER_NAME)
        before = list(package_logger.handlers)
        isbn_barcode._setup_logging()
        assert package_logger.handlers == before

    def test_module_loggers_live_under_package(self) -> None:
        from isbn_barcode.barcodegen import layout

        assert layout.logger.name.startswith("isbn_barcode.")


class TestConfiguration:
    """Тестирование управления конфигурацией."""

    def test_load_config_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = isbn_barcode.load_config(Path(tmpdir) / "nonexistent_config.json")
        assert config["dpi"] == 600
        assert config["bar_height_mm"] == 15.0
        assert config["addon_offset_mm"] == 0.0
        assert config["font_name"] == "ArialMT"
        assert config["creator"] == "ISBN Barcode Maker"
        assert config["log_level"] == "INFO"

    def test_load_config_returns_copy(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = isbn_barcode.load_config(Path(tmpdir) / "nonexistent_config.json")
            config["dpi"] = 1
            again = isbn_barcode.load_config(Path(tmpdir) / "nonexistent_config.json")
        assert again["dpi"] == 600

    def test_load_config_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.json"
            with open(config_path, "w", encoding="utf-8") as f:
                json.dump({"dpi": 1200, "creator": "Press", "custom_key": 1}, f)
            config = isbn_barcode.load_config(config_path)
        assert config["dpi"] == 1200
        assert config["creator"] == "Press"
        assert "custom_key" not in config
        assert config["bar_height_mm"] == 15.0

    def test_load_config_skips_wrong_types(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.json"
            config_path.write_text(
                json.dumps({"dpi": "300", "bar_height_mm": 20, "addon_offset_mm": True, "font_name": 5}),
                encoding="utf-8",
            )
            config = isbn_barcode.load_config(config_path)
        assert config["dpi"] == 600
        assert config["bar_height_mm"] == 20
        assert config["addon_offset_mm"] == 0.0
        assert config["font_name"] == "ArialMT"

    def test_load_config_warns_on_unknown_key(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.json"
            config_path.write_text(json.dumps({"custom_key": 1}), encoding="utf-8")
            with mock.patch.object(logging.getLogger("isbn_barcode"), "warning") as mock_warning:
                config = isbn_barcode.load_config(config_path)
        assert set(config) == set(isbn_barcode._DEFAULT_CONFIG)
        mock_warning.assert_called_once()
        assert "custom_key" in mock_warning.call_args[0][0]

    def test_load_config_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "invalid_config.json"
            config_path.write_text("{invalid json content", encoding="utf-8")
            config = isbn_barcode.load_config(config_path)
        assert config["dpi"] == 600

    def test_load_config_non_dict_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "list_config.json"
            config_path.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
            config = isbn_barcode.load_config(config_path)
        assert config["dpi"] == 600
        assert "not" not in config

    def test_load_config_permission_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.json"
            config_path.write_text("{}", encoding="utf-8")
            with mock.patch.object(Path, "read_text", side_effect=PermissionError("denied")):
                config = isbn_barcode.load_config(config_path)
        assert config["font_name"] == "ArialMT"

    def test_config_feeds_generator(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.json"
            config_path.write_text(json.dumps({"dpi": 300, "font_name": "Helvetica"}), encoding="utf-8")
            options = isbn_barcode.options_from_config(isbn_barcode.load_config(config_path))
        generator = isbn_barcode.BarcodeGenerator("9788969930460", options=options)
        text = generator.render_eps()
        assert "% Output DPI: 300" in text
        assert "/Helvetica findfont" in text


class TestDocumentation:
    def test_module_has_docstring(self) -> None:
        assert isbn_barcode.__doc__ and "ISBN" in isbn_barcode.__doc__

    def test_public_functions_have_docstrings(self) -> None:
        assert isbn_barcode.get_logger.__doc__
        assert isbn_barcode.load_config.__doc__
        assert isbn_barcode.generate.__doc__
