"""
eps

Сериализация RenderDocument в Encapsulated PostScript и разбор
получившейся фиксированной грамматики.

Public API:
    - serialize_eps: RenderDocument -> текст EPS
    - read_eps: текст EPS -> ParsedEps (штрихи, подписи, bbox, масштаб)
"""

from isbn_barcode.eps.reader import EpsReadError, ParsedEps, read_eps
from isbn_barcode.eps.serializer import serialize_eps

__all__ = ["EpsReadError", "ParsedEps", "read_eps", "serialize_eps"]
