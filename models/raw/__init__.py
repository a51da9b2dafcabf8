"""Raw provider payload models (Escavador API v2)."""

from models.raw.escavador_raw import (
    EscavadorAdvogadoProcessosResponse,
    EscavadorAdvogadoRaw,
    EscavadorCapaRaw,
    EscavadorEnvolvidoRaw,
    EscavadorEstadoOrigemRaw,
    EscavadorFonteRaw,
    EscavadorMovimentacaoFonteRaw,
    EscavadorMovimentacaoRaw,
    EscavadorMovimentacoesResponse,
    EscavadorOabRaw,
    EscavadorProcessoRaw,
    EscavadorUnidadeOrigemRaw,
    EscavadorValorCausaRaw,
)

__all__ = [
    "EscavadorAdvogadoProcessosResponse",
    "EscavadorAdvogadoRaw",
    "EscavadorCapaRaw",
    "EscavadorEnvolvidoRaw",
    "EscavadorEstadoOrigemRaw",
    "EscavadorFonteRaw",
    "EscavadorMovimentacaoFonteRaw",
    "EscavadorMovimentacaoRaw",
    "EscavadorMovimentacoesResponse",
    "EscavadorOabRaw",
    "EscavadorProcessoRaw",
    "EscavadorUnidadeOrigemRaw",
    "EscavadorValorCausaRaw",
]
