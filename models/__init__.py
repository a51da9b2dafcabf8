"""Canonical proceeding models and lookup parameter schemas."""

from models.base import BaseSchema, RawSchema
from models.params import BuscarAdvogadoParams, BuscarMovimentacoesParams, BuscarProcessoParams
from models.processo import (
    STATUS_PADRAO,
    Advogado,
    FonteMovimentacao,
    Movimentacao,
    Parte,
    Processo,
    TipoParte,
)

__all__ = [
    "BaseSchema",
    "RawSchema",
    "BuscarAdvogadoParams",
    "BuscarMovimentacoesParams",
    "BuscarProcessoParams",
    "STATUS_PADRAO",
    "Advogado",
    "FonteMovimentacao",
    "Movimentacao",
    "Parte",
    "Processo",
    "TipoParte",
]
