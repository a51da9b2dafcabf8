"""Raw models for Escavador API v2 responses.

The provider aggregates one record per court ("fonte") and each court fills a
different subset of fields, so every field here is optional. Values that
cannot be parsed become ``None`` instead of failing validation; the
transformers decide which fallback applies.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import field_validator

from models.base import RawSchema

logger = logging.getLogger(__name__)

__all__ = [
    "EscavadorOabRaw",
    "EscavadorAdvogadoRaw",
    "EscavadorEnvolvidoRaw",
    "EscavadorValorCausaRaw",
    "EscavadorCapaRaw",
    "EscavadorFonteRaw",
    "EscavadorUnidadeOrigemRaw",
    "EscavadorEstadoOrigemRaw",
    "EscavadorProcessoRaw",
    "EscavadorMovimentacaoFonteRaw",
    "EscavadorMovimentacaoRaw",
    "EscavadorAdvogadoProcessosResponse",
    "EscavadorMovimentacoesResponse",
]


def _none_as_empty(v: object) -> object:
    """The API sends ``null`` for lists that have no entries."""
    if v is None:
        return []
    return v


def _parse_datetime(v: object) -> datetime | None:
    """Accept ISO dates/datetimes, DD/MM/YYYY and epoch milliseconds; anything
    else is ``None``.

    Naive values are taken as UTC.
    """
    if v is None or v == "":
        return None
    if isinstance(v, datetime):
        parsed = v
    elif isinstance(v, date):
        parsed = datetime(v.year, v.month, v.day)
    elif isinstance(v, (int, float)) and not isinstance(v, bool):
        # Epoch milliseconds.
        try:
            return datetime.fromtimestamp(v / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug("Out of range timestamp %r", v)
            return None
    elif isinstance(v, str):
        text = v.strip()
        try:
            if "/" in text:
                parsed = datetime.strptime(text[:10], "%d/%m/%Y")
            else:
                parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.debug("Unparsable date %r", v)
            return None
    else:
        logger.debug("Unsupported date value %r", v)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_decimal(v: object) -> Decimal | None:
    """Parse a monetary amount; negative, NaN and infinite values are rejected.

    Accepts plain numbers, ``"1500.50"`` and the Brazilian ``"R$ 1.500,50"``.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float, Decimal)):
        text = str(v)
    elif isinstance(v, str):
        text = v.replace("R$", "").strip()
        if "," in text:
            text = text.replace(".", "").replace(",", ".")
    else:
        return None

    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        logger.debug("Unparsable amount %r", v)
        return None
    if not value.is_finite() or value < 0:
        logger.debug("Rejected amount %r", v)
        return None
    return value


class EscavadorOabRaw(RawSchema):
    numero: Optional[int | str] = None
    uf: Optional[str] = None
    tipo: Optional[str] = None


class EscavadorAdvogadoRaw(RawSchema):
    nome: Optional[str] = None
    nome_normalizado: Optional[str] = None
    cpf: Optional[str] = None
    oabs: list[EscavadorOabRaw] = []

    @field_validator("oabs", mode="before")
    @classmethod
    def _oabs_list(cls, v: object) -> object:
        return _none_as_empty(v)


class EscavadorEnvolvidoRaw(RawSchema):
    nome: Optional[str] = None
    nome_normalizado: Optional[str] = None
    tipo: Optional[str] = None
    tipo_normalizado: Optional[str] = None
    polo: Optional[str] = None
    cpf: Optional[str] = None
    cnpj: Optional[str] = None
    advogados: list[EscavadorAdvogadoRaw] = []

    @field_validator("advogados", mode="before")
    @classmethod
    def _advogados_list(cls, v: object) -> object:
        return _none_as_empty(v)


class EscavadorValorCausaRaw(RawSchema):
    valor: Optional[Decimal] = None
    moeda: Optional[str] = None
    valor_formatado: Optional[str] = None

    @field_validator("valor", mode="before")
    @classmethod
    def _parse_valor(cls, v: object) -> Decimal | None:
        return _parse_decimal(v)


class EscavadorCapaRaw(RawSchema):
    classe: Optional[str] = None
    assunto: Optional[str] = None
    situacao: Optional[str] = None
    data_distribuicao: Optional[datetime] = None
    valor_causa: Optional[EscavadorValorCausaRaw] = None

    @field_validator("data_distribuicao", mode="before")
    @classmethod
    def _parse_data_distribuicao(cls, v: object) -> datetime | None:
        return _parse_datetime(v)

    @field_validator("valor_causa", mode="before")
    @classmethod
    def _wrap_valor_causa(cls, v: object) -> object:
        """Some courts send the bare amount instead of a ``{"valor": ...}`` object."""
        if v is None or isinstance(v, dict):
            return v
        return {"valor": v}


class EscavadorFonteRaw(RawSchema):
    id: Optional[int | str] = None
    nome: Optional[str] = None
    sigla: Optional[str] = None
    tipo: Optional[str] = None
    grau: Optional[int | str] = None
    grau_formatado: Optional[str] = None
    capa: Optional[EscavadorCapaRaw] = None
    envolvidos: list[EscavadorEnvolvidoRaw] = []

    @field_validator("envolvidos", mode="before")
    @classmethod
    def _envolvidos_list(cls, v: object) -> object:
        return _none_as_empty(v)


class EscavadorUnidadeOrigemRaw(RawSchema):
    nome: Optional[str] = None
    tribunal_sigla: Optional[str] = None
    cidade: Optional[str] = None


class EscavadorEstadoOrigemRaw(RawSchema):
    nome: Optional[str] = None
    sigla: Optional[str] = None


class EscavadorProcessoRaw(RawSchema):
    """A proceeding as returned by the detail endpoint or inside a listing."""

    numero_cnj: Optional[str] = None
    data_inicio: Optional[datetime] = None
    unidade_origem: Optional[EscavadorUnidadeOrigemRaw] = None
    estado_origem: Optional[EscavadorEstadoOrigemRaw] = None
    fontes: list[EscavadorFonteRaw] = []

    @field_validator("data_inicio", mode="before")
    @classmethod
    def _parse_data_inicio(cls, v: object) -> datetime | None:
        return _parse_datetime(v)

    @field_validator("fontes", mode="before")
    @classmethod
    def _fontes_list(cls, v: object) -> object:
        return _none_as_empty(v)


class EscavadorMovimentacaoFonteRaw(RawSchema):
    fonte_id: Optional[int | str] = None
    nome: Optional[str] = None
    tipo: Optional[str] = None
    sigla: Optional[str] = None
    grau: Optional[int | str] = None
    grau_formatado: Optional[str] = None


class EscavadorMovimentacaoRaw(RawSchema):
    id: Optional[int | str] = None
    data: Optional[datetime] = None
    tipo: Optional[str] = None
    conteudo: Optional[str] = None
    fonte: Optional[EscavadorMovimentacaoFonteRaw] = None

    @field_validator("data", mode="before")
    @classmethod
    def _parse_data(cls, v: object) -> datetime | None:
        return _parse_datetime(v)


class EscavadorAdvogadoProcessosResponse(RawSchema):
    """Body of ``GET /advogado/processos``."""

    advogado_encontrado: Optional[Any] = None
    items: list[EscavadorProcessoRaw] = []
    links: Optional[dict[str, Any]] = None
    paginator: Optional[dict[str, Any]] = None

    @field_validator("items", mode="before")
    @classmethod
    def _items_list(cls, v: object) -> object:
        return _none_as_empty(v)


class EscavadorMovimentacoesResponse(RawSchema):
    """Body of ``GET /processos/numero_cnj/{numero}/movimentacoes``."""

    items: list[EscavadorMovimentacaoRaw] = []
    links: Optional[dict[str, Any]] = None
    paginator: Optional[dict[str, Any]] = None

    @field_validator("items", mode="before")
    @classmethod
    def _items_list(cls, v: object) -> object:
        return _none_as_empty(v)
