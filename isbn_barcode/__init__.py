"""
Пакет ISBN Barcode
==================

Vector ISBN barcode generator for commercial print.

Этот пакет предоставляет:
    - Проверку контрольной цифры EAN-13 (ISBN-13)
    - Кодирование EAN-13 и дополнительного символа EAN-5 (add-on)
    - Раскладку модулей в миллиметрах с квантованием под DPI вывода
    - Построение модели векторного документа (CMYK, только чёрный канал)
    - Сериализацию в EPS и разбор полученной грамматики

Пример базового использования:
    >>> from isbn_barcode import generate
    >>>
    >>> result = generate("9788969930460", addon="13590", dpi=600)
    >>> if result.success:
    ...     eps_text = result.document

Управление конфигурацией:
    >>> import os
    >>> os.environ['ISBN_BARCODE_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from isbn_barcode import load_config, options_from_config
    >>> options = options_from_config(load_config())

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "ISBN Barcode Development Team"
__description__ = "Vector EAN-13/EAN-5 ISBN barcode generator with EPS output"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"ISBN Barcode требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

PACKAGE_LOGGER_NAME = "isbn_barcode"
LOG_LEVEL_ENV = "ISBN_BARCODE_LOG_LEVEL"
LOG_FILE_ENV = "ISBN_BARCODE_LOG_FILE"


def _setup_logging() -> None:
    """
    Configure the package logger once.

    - stderr handler for WARNING and above
    - optional rotating file handler when ISBN_BARCODE_LOG_FILE is set
    - level from ISBN_BARCODE_LOG_LEVEL (default INFO)

    Idempotent: a logger that already has handlers is left untouched.
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Файловое логирование только по явному запросу
    log_file = os.environ.get(LOG_FILE_ENV)
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except (OSError, PermissionError) as e:
            root_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the ``isbn_barcode`` namespace.

    Args:
        module_name: Usually ``__name__``. Names outside the package are
            prefixed with ``isbn_barcode.``; ``__main__`` becomes
            ``isbn_barcode.main``.

    Returns:
        Configured ``logging.Logger``.
    """
    if not module_name.startswith(PACKAGE_LOGGER_NAME):
        if module_name == "__main__":
            full_name = f"{PACKAGE_LOGGER_NAME}.main"
        else:
            clean_name = module_name.lstrip(".")
            full_name = f"{PACKAGE_LOGGER_NAME}.{clean_name}"
    else:
        full_name = module_name

    return logging.getLogger(full_name)


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "dpi": 600,
    "bar_height_mm": 15.0,
    "addon_offset_mm": 0.0,
    "font_name": "ArialMT",
    "creator": "ISBN Barcode Maker",
    "log_level": "INFO",
}


def _read_config_file(config_path: Path) -> Optional[Dict[str, Any]]:
    """Parsed JSON object from ``config_path``, or None when it cannot be used."""
    logger = get_logger(__name__)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning(f"Недопустимый JSON в {config_path} (строка {e.lineno}, столбец {e.colno})")
        return None
    except OSError as e:
        logger.warning(f"Не удалось прочитать {config_path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"{config_path}: ожидался JSON-объект, получен {type(data).__name__}")
        return None
    return data


def _accepts(default: Any, value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(default, float):
        return isinstance(value, (int, float))
    return isinstance(value, type(default))


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load generation defaults from ``config.json`` or fall back to built-ins.

    Ключи конфигурации:
        - dpi: int - output resolution (300, 600 or 1200)
        - bar_height_mm: float - guard bar height, 5..50 mm
        - addon_offset_mm: float - add-on vertical offset, -1.0..1.0 mm
        - font_name: str - PostScript font for human-readable digits
        - creator: str - value of the %%Creator header
        - log_level: str - informational, logging reads ISBN_BARCODE_LOG_LEVEL

    Only the keys above are merged. Unknown keys and values of the wrong
    JSON type are skipped with a warning; range checks happen at generation
    time. An unreadable or malformed file leaves every default in place.

    Args:
        config_path: Optional path; defaults to ``config.json`` in the
            current directory.

    Returns:
        A fresh dict with exactly the default keys.
    """
    logger = get_logger(__name__)
    config = dict(_DEFAULT_CONFIG)
    path = config_path if config_path is not None else Path("config.json")

    if not path.exists():
        logger.info(f"Файл конфигурации {path} не найден, используются значения по умолчанию")
        return config

    user_config = _read_config_file(path)
    if user_config is None:
        return config

    for key, value in user_config.items():
        if key not in config:
            logger.warning(f"{path}: неизвестный ключ '{key}' пропущен")
        elif not _accepts(config[key], value):
            logger.warning(f"{path}: ключ '{key}' имеет недопустимый тип {type(value).__name__}, пропущен")
        else:
            config[key] = value

    logger.info(f"Конфигурация загружена из {path}")
    logger.debug(f"Конфигурация: {config}")
    return config


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

# Импорты после утилит: логирование настраивается первым.
_setup_logging()

from .barcodegen.barcode_generator import (  # noqa: E402
    BarcodeGenerator,
    EpsOptions,
    GenerationResult,
    generate,
    handle_request,
    options_from_config,
    suggested_filename,
)
from .barcodegen.errors import (  # noqa: E402
    BarcodeGenError,
    ContractViolation,
    InvalidChecksumError,
    InvalidDigitError,
    InvalidHeightError,
    InvalidLengthError,
    UnsupportedResolutionError,
    ValidationError,
)
from .eps.reader import read_eps  # noqa: E402
from .model.enums import Resolution  # noqa: E402
from .model.request import BarcodeRequest  # noqa: E402

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    # Фасад
    "BarcodeGenerator",
    "BarcodeRequest",
    "EpsOptions",
    "GenerationResult",
    "Resolution",
    "generate",
    "handle_request",
    "options_from_config",
    "read_eps",
    "suggested_filename",
    # Исключения
    "BarcodeGenError",
    "ContractViolation",
    "InvalidChecksumError",
    "InvalidDigitError",
    "InvalidHeightError",
    "InvalidLengthError",
    "UnsupportedResolutionError",
    "ValidationError",
]

_logger = get_logger(__name__)
_logger.debug(f"ISBN Barcode v{__version__} инициализирован")
