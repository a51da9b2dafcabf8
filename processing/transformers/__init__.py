"""Transformers — convert raw Escavador payloads into canonical models."""

from processing.transformers.movimentacoes import map_movimentacao, map_movimentacoes
from processing.transformers.partes import extract_partes
from processing.transformers.processo import normalize_processo

__all__ = [
    "extract_partes",
    "map_movimentacao",
    "map_movimentacoes",
    "normalize_processo",
]
