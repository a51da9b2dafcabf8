"""Input parameters accepted by the lookup use cases.

Callers send camelCase keys (``numeroProcesso``, ``oabEstado``); field names
are the provider's query keys so optional options can be dumped straight
into the query string.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from models.base import BaseSchema

OabTipo = Literal["ADVOGADO", "SUPLEMENTAR", "ESTAGIARIO", "CONSULTOR_ESTRANGEIRO"]
PageLimit = Literal[50, 100]


def _limit_as_int(v: object) -> object:
    """Hosts often send every param as a string: ``"50"`` means 50."""
    if isinstance(v, str) and v.strip().isdigit():
        return int(v)
    return v


class ParamsSchema(BaseSchema):
    model_config = ConfigDict(coerce_numbers_to_str=True)


class BuscarProcessoParams(ParamsSchema):
    numero_processo: str = Field(min_length=1)


class BuscarMovimentacoesParams(ParamsSchema):
    numero_processo: str = Field(min_length=1)
    limit: Optional[PageLimit] = None

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, v: object) -> object:
        return _limit_as_int(v)


class BuscarAdvogadoParams(ParamsSchema):
    oab_estado: str = Field(min_length=1)
    oab_numero: str = Field(min_length=1)
    oab_tipo: Optional[OabTipo] = None
    ordem: Optional[Literal["asc", "desc"]] = None
    limit: Optional[PageLimit] = None
    tribunais: list[str] = []
    status: Optional[Literal["ATIVO", "INATIVO"]] = None
    data_minima: Optional[str] = None
    data_maxima: Optional[str] = None

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, v: object) -> object:
        return _limit_as_int(v)
