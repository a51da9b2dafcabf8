"""Proceeding normalizer — raw Escavador proceeding to ``Processo``.

Cover data (classe, assunto, valor, situação, distribuição) comes from the
first court record only; parties come from every court record.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Mapping

from models.processo import STATUS_PADRAO, Processo
from models.raw.escavador_raw import EscavadorCapaRaw, EscavadorProcessoRaw

from processing.transformers.base import as_raw, first_present
from processing.transformers.partes import extract_partes

logger = logging.getLogger(__name__)

TRIBUNAL_DESCONHECIDO = "Desconhecido"
VARA_DESCONHECIDA = "Desconhecida"
SEM_CLASSE = "Sem classe"
SEM_ASSUNTO = "Sem assunto"


def _capa(raw: EscavadorProcessoRaw) -> EscavadorCapaRaw:
    if raw.fontes and raw.fontes[0].capa is not None:
        return raw.fontes[0].capa
    return EscavadorCapaRaw()


def normalize_processo(
    item: EscavadorProcessoRaw | Mapping[str, Any],
    *,
    numero: str | None = None,
    include_cnpj: bool = False,
) -> Processo:
    """Build a ``Processo`` from a detail body or a listing item.

    Args:
        item: Raw proceeding.
        numero: Case number the caller asked for, used when the body has none.
        include_cnpj: Passed through to ``extract_partes``.
    """
    raw = as_raw(EscavadorProcessoRaw, item)
    capa = _capa(raw)
    unidade = raw.unidade_origem
    estado = raw.estado_origem

    data_distribuicao = first_present(capa.data_distribuicao, raw.data_inicio, default=None)
    if data_distribuicao is None:
        logger.debug("processo %s: no distribution date, using now", raw.numero_cnj or numero)
        data_distribuicao = datetime.now(timezone.utc)

    valor_causa = capa.valor_causa.valor if capa.valor_causa is not None else None

    return Processo(
        numero=first_present(raw.numero_cnj, numero, default=""),
        tribunal=first_present(
            unidade.tribunal_sigla if unidade else None,
            estado.sigla if estado else None,
            default=TRIBUNAL_DESCONHECIDO,
        ),
        vara=first_present(unidade.nome if unidade else None, default=VARA_DESCONHECIDA),
        classe=first_present(capa.classe, default=SEM_CLASSE),
        assunto=first_present(capa.assunto, default=SEM_ASSUNTO),
        data_distribuicao=data_distribuicao,
        valor_causa=valor_causa if valor_causa is not None else Decimal(0),
        status=first_present(capa.situacao, default=STATUS_PADRAO),
        partes=extract_partes(raw, include_cnpj=include_cnpj),
        # Neither the detail nor the listing endpoint returns movements.
        movimentacoes=[],
    )
