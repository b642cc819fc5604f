"""
barcodegen

Модуль генерации векторного штрихкода ISBN: EAN-13 с необязательным
дополнительным символом EAN-5.

- Проверка контрольной цифры и набора символов
- Кодирование по таблицам L/G/R и таблицам чётности
- Раскладка в миллиметрах с привязкой к сетке DPI вывода
- Сборка упорядоченной модели документа для сериализатора EPS

Public API:
    - BarcodeGenerator: генератор EAN-13 (+EAN-5) (class)
    - EpsOptions: типобезопасные опции генерации (TypedDict)
    - GenerationResult: результат фасада {success, message, document}
    - generate / handle_request: точки входа фасада
    - BarcodeGenError: базовое исключение генерации

Примеры:
    >>> from isbn_barcode.barcodegen import BarcodeGenerator
    >>> eps = BarcodeGenerator("9788969930460", "13590").render_eps()
"""

from isbn_barcode.barcodegen.barcode_generator import (
    BarcodeGenerator,
    EpsOptions,
    GenerationResult,
    generate,
    handle_request,
    options_from_config,
    suggested_filename,
)
from isbn_barcode.barcodegen.errors import BarcodeGenError, ContractViolation, ValidationError

__all__ = [
    "BarcodeGenerator",
    "BarcodeGenError",
    "ContractViolation",
    "EpsOptions",
    "GenerationResult",
    "ValidationError",
    "generate",
    "handle_request",
    "options_from_config",
    "suggested_filename",
]
