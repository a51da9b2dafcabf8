"""Shared fixtures: raw Escavador payload builders and a recording sink."""

from __future__ import annotations

from typing import Any

import pytest


class RecordingSink:
    """Result sink that keeps every report for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[bool, dict[str, Any] | None, str | None]] = []

    def __call__(
        self, success: bool, payload: dict[str, Any] | None, error: str | None = None
    ) -> None:
        self.calls.append((success, payload, error))

    @property
    def last(self) -> tuple[bool, dict[str, Any] | None, str | None]:
        return self.calls[-1]


def make_envolvido(
    nome: str = "Maria da Silva",
    polo: str | None = "ATIVO",
    tipo: str = "AUTOR",
    **overrides: Any,
) -> dict[str, Any]:
    envolvido = {
        "nome": nome,
        "nome_normalizado": nome.upper() if nome else None,
        "tipo": tipo,
        "polo": polo,
        "cpf": "12345678901",
        "advogados": [
            {
                "nome": "Dr. João Pereira",
                "cpf": "98765432100",
                "oabs": [{"numero": 123456, "uf": "SP", "tipo": "ADVOGADO"}],
            }
        ],
    }
    envolvido.update(overrides)
    return envolvido


def make_fonte(envolvidos: list[dict[str, Any]] | None = None, capa: Any = "default") -> dict[str, Any]:
    if capa == "default":
        capa = {
            "classe": "Procedimento Comum Cível",
            "assunto": "Indenização por Dano Moral",
            "situacao": "ATIVO",
            "data_distribuicao": "2020-01-15",
            "valor_causa": {"valor": "1500.50", "moeda": "R$", "valor_formatado": "R$ 1.500,50"},
        }
    return {
        "id": 1,
        "nome": "Tribunal de Justiça de São Paulo",
        "sigla": "TJSP",
        "tipo": "TRIBUNAL",
        "grau": 1,
        "grau_formatado": "Primeiro Grau",
        "capa": capa,
        "envolvidos": envolvidos if envolvidos is not None else [make_envolvido()],
    }


def make_processo(**overrides: Any) -> dict[str, Any]:
    processo = {
        "numero_cnj": "0001234-56.2020.8.26.0100",
        "data_inicio": "2019-12-01",
        "unidade_origem": {"nome": "1ª Vara Cível de São Paulo", "tribunal_sigla": "TJSP"},
        "estado_origem": {"nome": "São Paulo", "sigla": "SP"},
        "fontes": [
            make_fonte(
                [
                    make_envolvido(),
                    make_envolvido("Banco Exemplo S.A.", polo="PASSIVO", tipo="REU", cpf=None, cnpj="12345678000199"),
                ]
            )
        ],
    }
    processo.update(overrides)
    return processo


def make_movimentacao(**overrides: Any) -> dict[str, Any]:
    movimentacao = {
        "id": 10,
        "data": "2021-03-04",
        "tipo": "PUBLICACAO",
        "conteudo": "Juntada de petição",
        "fonte": {
            "fonte_id": 1,
            "nome": "Tribunal de Justiça de São Paulo",
            "tipo": "TRIBUNAL",
            "sigla": "TJSP",
            "grau": 1,
            "grau_formatado": "Primeiro Grau",
        },
    }
    movimentacao.update(overrides)
    return movimentacao


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
