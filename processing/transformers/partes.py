"""Party extraction — flattens every court's participant list into parties.

Judges, rapporteurs and entries without a side are participants of the
case, not parties, and are dropped. Parties are unique per (nome, tipo):
the first court that lists one wins, attorneys included.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from models.processo import Advogado, Parte, TipoParte
from models.raw.escavador_raw import (
    EscavadorAdvogadoRaw,
    EscavadorEnvolvidoRaw,
    EscavadorProcessoRaw,
)

from processing.transformers.base import as_raw, first_present

logger = logging.getLogger(__name__)

NOME_NAO_INFORMADO = "Nome não informado"

POLO_ATIVO = "ATIVO"
POLO_NENHUM = "NENHUM"
_TIPOS_EXCLUIDOS = frozenset({"JUIZ", "RELATOR"})


def is_parte(envolvido: EscavadorEnvolvidoRaw) -> bool:
    if not envolvido.polo or envolvido.polo == POLO_NENHUM:
        return False
    return envolvido.tipo not in _TIPOS_EXCLUIDOS


def tipo_parte(polo: str) -> TipoParte:
    return TipoParte.AUTOR if polo == POLO_ATIVO else TipoParte.REU


def _oab(advogado: EscavadorAdvogadoRaw) -> str:
    """``"<numero>/<uf>"`` from the first registration, or ``""``."""
    if not advogado.oabs or not advogado.oabs[0].numero:
        return ""
    oab = advogado.oabs[0]
    return f"{oab.numero}/{oab.uf or ''}"


def _advogado(raw: EscavadorAdvogadoRaw) -> Advogado:
    return Advogado(
        nome=first_present(raw.nome, raw.nome_normalizado, default=NOME_NAO_INFORMADO),
        oab=_oab(raw),
        # Attorneys are always people: no CNPJ fallback here.
        documento=first_present(raw.cpf, default=""),
    )


def _parte(envolvido: EscavadorEnvolvidoRaw, include_cnpj: bool) -> Parte:
    documentos = [envolvido.cpf]
    if include_cnpj:
        documentos.append(envolvido.cnpj)

    return Parte(
        tipo=tipo_parte(envolvido.polo or ""),
        nome=first_present(
            envolvido.nome, envolvido.nome_normalizado, default=NOME_NAO_INFORMADO
        ),
        documento=first_present(*documentos, default=""),
        advogados=[_advogado(a) for a in envolvido.advogados],
    )


def extract_partes(
    item: EscavadorProcessoRaw | Mapping[str, Any],
    *,
    include_cnpj: bool = False,
) -> list[Parte]:
    """Build the deduplicated party list of a proceeding.

    Args:
        item: Raw proceeding (detail body or listing item).
        include_cnpj: Fall back to the company CNPJ when a party has no CPF.
            Only the attorney search does this.

    Returns:
        Parties in first-seen order across courts and entries.
    """
    raw = as_raw(EscavadorProcessoRaw, item)
    partes: list[Parte] = []
    seen: set[tuple[str, TipoParte]] = set()

    for fonte in raw.fontes:
        for envolvido in fonte.envolvidos:
            if not is_parte(envolvido):
                logger.debug(
                    "skipping participant %r (tipo=%r, polo=%r)",
                    envolvido.nome,
                    envolvido.tipo,
                    envolvido.polo,
                )
                continue

            parte = _parte(envolvido, include_cnpj)
            key = (parte.nome, parte.tipo)
            if key in seen:
                continue
            seen.add(key)
            partes.append(parte)

    return partes
