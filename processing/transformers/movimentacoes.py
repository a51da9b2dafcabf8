"""Movement mapping — raw docket entries to ``Movimentacao`` records."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from models.processo import FonteMovimentacao, Movimentacao
from models.raw.escavador_raw import EscavadorMovimentacaoRaw

from processing.transformers.base import as_raw, first_present

DESCRICAO_PADRAO = "Movimentação sem descrição"
TIPO_PADRAO = "ANDAMENTO"


def map_movimentacao(item: EscavadorMovimentacaoRaw | Mapping[str, Any]) -> Movimentacao:
    raw = as_raw(EscavadorMovimentacaoRaw, item)
    fonte = raw.fonte

    return Movimentacao(
        data=raw.data,
        descricao=first_present(raw.conteudo, default=DESCRICAO_PADRAO),
        tipo=first_present(raw.tipo, default=TIPO_PADRAO),
        # The API does not expose documents on movements.
        documentos=[],
        fonte=FonteMovimentacao(
            id=fonte.fonte_id,
            nome=fonte.nome,
            tipo=fonte.tipo,
            sigla=fonte.sigla,
            grau=fonte.grau,
            grau_formatado=fonte.grau_formatado,
        )
        if fonte is not None
        else FonteMovimentacao(),
    )


def map_movimentacoes(
    items: Iterable[EscavadorMovimentacaoRaw | Mapping[str, Any]],
) -> list[Movimentacao]:
    """Map movements keeping the provider's order."""
    return [map_movimentacao(item) for item in items]
