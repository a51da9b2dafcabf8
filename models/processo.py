"""Processo (judicial proceeding) and its parties, attorneys and movements."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any, Optional

from pydantic import Field, FieldSerializationInfo, field_serializer

from models.base import BaseSchema

STATUS_PADRAO = "ATIVO"


class TipoParte(StrEnum):
    AUTOR = "autor"
    REU = "reu"


class Advogado(BaseSchema):
    nome: str
    oab: str = ""
    documento: str = ""


class Parte(BaseSchema):
    tipo: TipoParte
    nome: str
    documento: str = ""
    advogados: list[Advogado] = []


class FonteMovimentacao(BaseSchema):
    """Court record a movement was published by."""

    id: Optional[int | str] = None
    nome: Optional[str] = None
    tipo: Optional[str] = None
    sigla: Optional[str] = None
    grau: Optional[int | str] = None
    grau_formatado: Optional[str] = None


class Movimentacao(BaseSchema):
    # None when the provider's date could not be parsed.
    data: Optional[datetime] = None
    descricao: str
    tipo: str
    documentos: list[dict[str, Any]] = []
    fonte: FonteMovimentacao = FonteMovimentacao()

    @field_serializer("fonte", when_used="json")
    def _fonte_without_nulls(
        self, fonte: FonteMovimentacao, info: FieldSerializationInfo
    ) -> dict[str, Any]:
        # Attribution keys the provider did not send are left out.
        return fonte.model_dump(mode="json", by_alias=bool(info.by_alias), exclude_none=True)


class Processo(BaseSchema):
    numero: str
    tribunal: str
    vara: str
    classe: str
    assunto: str
    data_distribuicao: datetime
    valor_causa: Decimal = Field(default=Decimal(0), ge=0)
    status: str = STATUS_PADRAO
    partes: list[Parte] = []
    movimentacoes: list[Movimentacao] = []

    @field_serializer("valor_causa", when_used="json")
    def _valor_causa_as_number(self, value: Decimal) -> float:
        return float(value)
