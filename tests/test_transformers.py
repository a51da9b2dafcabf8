"""Tests for the Escavador transformers — pure logic, no I/O."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from models.processo import TipoParte
from processing.transformers import (
    extract_partes,
    map_movimentacao,
    map_movimentacoes,
    normalize_processo,
)
from processing.transformers.base import first_present

from conftest import make_envolvido, make_fonte, make_movimentacao, make_processo


# -------------------------------------------------------------------- #
# extract_partes                                                        #
# -------------------------------------------------------------------- #


class TestExtractPartes:
    def test_roles(self):
        item = make_processo(
            fontes=[
                make_fonte(
                    [
                        make_envolvido("Autor A", polo="ATIVO"),
                        make_envolvido("Réu B", polo="PASSIVO"),
                        make_envolvido("Terceiro C", polo="OUTRO", tipo="TERCEIRO"),
                    ]
                )
            ]
        )
        partes = extract_partes(item)
        assert [(p.nome, p.tipo) for p in partes] == [
            ("Autor A", TipoParte.AUTOR),
            ("Réu B", TipoParte.REU),
            ("Terceiro C", TipoParte.REU),
        ]

    def test_excludes_judges_rapporteurs_and_no_polo(self):
        item = make_processo(
            fontes=[
                make_fonte(
                    [
                        make_envolvido("Juiz X", polo="PASSIVO", tipo="JUIZ"),
                        make_envolvido("Relator Y", polo="ATIVO", tipo="RELATOR"),
                        make_envolvido("Perito Z", polo="NENHUM", tipo="PERITO"),
                        make_envolvido("Sem Polo", polo=None),
                        make_envolvido("Polo Vazio", polo=""),
                        make_envolvido("Parte Válida"),
                    ]
                )
            ]
        )
        assert [p.nome for p in extract_partes(item)] == ["Parte Válida"]

    def test_name_fallbacks(self):
        item = make_processo(
            fontes=[
                make_fonte(
                    [
                        make_envolvido("", nome_normalizado="NOME NORMALIZADO"),
                        make_envolvido(None, nome_normalizado=None, polo="PASSIVO"),
                    ]
                )
            ]
        )
        assert [p.nome for p in extract_partes(item)] == [
            "NOME NORMALIZADO",
            "Nome não informado",
        ]

    def test_documento_cpf_only_by_default(self):
        item = make_processo(
            fontes=[make_fonte([make_envolvido("Empresa", cpf=None, cnpj="12345678000199")])]
        )
        assert extract_partes(item)[0].documento == ""

    def test_documento_cnpj_fallback_for_attorney_search(self):
        item = make_processo(
            fontes=[
                make_fonte(
                    [
                        make_envolvido("Empresa", cpf=None, cnpj="12345678000199"),
                        make_envolvido("Pessoa", polo="PASSIVO", cpf="11122233344", cnpj="999"),
                    ]
                )
            ]
        )
        partes = extract_partes(item, include_cnpj=True)
        assert partes[0].documento == "12345678000199"
        assert partes[1].documento == "11122233344"

    def test_advogados(self):
        item = make_processo(
            fontes=[
                make_fonte(
                    [
                        make_envolvido(
                            advogados=[
                                {
                                    "nome": "Dra. Ana",
                                    "cpf": "55566677788",
                                    "oabs": [
                                        {"numero": "123456", "uf": "SP"},
                                        {"numero": "999", "uf": "RJ"},
                                    ],
                                },
                                {"nome_normalizado": "DR. BRUNO", "oabs": []},
                                {"nome": "Dr. Carlos", "oabs": [{"uf": "MG"}]},
                                {"nome": "Dr. Davi", "cnpj": "12345678000199"},
                            ]
                        )
                    ]
                )
            ]
        )
        advogados = extract_partes(item, include_cnpj=True)[0].advogados
        assert [(a.nome, a.oab, a.documento) for a in advogados] == [
            ("Dra. Ana", "123456/SP", "55566677788"),
            ("DR. BRUNO", "", ""),
            ("Dr. Carlos", "", ""),
            # Attorneys never fall back to a CNPJ.
            ("Dr. Davi", "", ""),
        ]

    def test_deduplicates_by_name_and_role_across_fontes(self):
        primeiro = make_envolvido("Maria", advogados=[{"nome": "Primeiro Advogado"}])
        repetido = make_envolvido("Maria", advogados=[{"nome": "Segundo Advogado"}])
        mesmo_nome_outro_polo = make_envolvido("Maria", polo="PASSIVO")
        item = make_processo(
            fontes=[
                make_fonte([primeiro, make_envolvido("João", polo="PASSIVO")]),
                make_fonte([repetido, mesmo_nome_outro_polo], capa=None),
            ]
        )
        partes = extract_partes(item)
        assert [(p.nome, p.tipo) for p in partes] == [
            ("Maria", TipoParte.AUTOR),
            ("João", TipoParte.REU),
            ("Maria", TipoParte.REU),
        ]
        assert [a.nome for a in partes[0].advogados] == ["Primeiro Advogado"]

    def test_dedup_ignores_documento(self):
        item = make_processo(
            fontes=[make_fonte([make_envolvido("Homônimo", cpf="1"), make_envolvido("Homônimo", cpf="2")])]
        )
        partes = extract_partes(item)
        assert len(partes) == 1
        assert partes[0].documento == "1"

    def test_blank_nome_falls_back(self):
        item = make_processo(
            fontes=[
                make_fonte(
                    [
                        make_envolvido("   ", nome_normalizado="FULANO DE TAL"),
                        make_envolvido(" ", nome_normalizado="  ", polo="PASSIVO"),
                        make_envolvido("\t", nome_normalizado=None, polo="PASSIVO", tipo="TERCEIRO"),
                    ]
                )
            ]
        )
        assert [p.nome for p in extract_partes(item)] == [
            "FULANO DE TAL",
            "Nome não informado",
        ]

    def test_numeric_documents_from_provider(self):
        envolvido = make_envolvido(cpf=12345678901)
        envolvido["nome"] = 98765
        envolvido["advogados"][0]["cpf"] = 11122233344
        item = make_processo(fontes=[make_fonte([envolvido])])

        [parte] = extract_partes(item)
        assert parte.nome == "98765"
        assert parte.documento == "12345678901"
        assert parte.advogados[0].documento == "11122233344"

    def test_no_fontes(self):
        assert extract_partes({"fontes": None}) == []
        assert extract_partes({}) == []


# -------------------------------------------------------------------- #
# map_movimentacoes                                                     #
# -------------------------------------------------------------------- #


class TestMapMovimentacoes:
    def test_full_item(self):
        mov = map_movimentacao(make_movimentacao())
        assert mov.data == datetime(2021, 3, 4, tzinfo=timezone.utc)
        assert mov.descricao == "Juntada de petição"
        assert mov.tipo == "PUBLICACAO"
        assert mov.documentos == []
        assert mov.fonte.id == 1
        assert mov.fonte.sigla == "TJSP"
        assert mov.fonte.grau == 1
        assert mov.fonte.grau_formatado == "Primeiro Grau"

    def test_defaults(self):
        mov = map_movimentacao({"data": "2021-03-04"})
        assert mov.descricao == "Movimentação sem descrição"
        assert mov.tipo == "ANDAMENTO"
        assert mov.fonte.id is None
        assert mov.fonte.nome is None

    def test_empty_conteudo_uses_placeholder(self):
        assert map_movimentacao(make_movimentacao(conteudo="")).descricao == "Movimentação sem descrição"

    def test_partial_fonte(self):
        mov = map_movimentacao(make_movimentacao(fonte={"sigla": "STJ"}))
        assert mov.fonte.sigla == "STJ"
        assert mov.fonte.grau is None

    def test_unparsable_date_is_not_an_error(self):
        assert map_movimentacao(make_movimentacao(data="ontem")).data is None

    def test_order_preserved(self):
        items = [
            make_movimentacao(data="2021-01-01", conteudo="primeira"),
            make_movimentacao(data="2023-01-01", conteudo="segunda"),
            make_movimentacao(data="2022-01-01", conteudo="terceira"),
        ]
        assert [m.descricao for m in map_movimentacoes(items)] == ["primeira", "segunda", "terceira"]


# -------------------------------------------------------------------- #
# normalize_processo                                                    #
# -------------------------------------------------------------------- #


class TestNormalizeProcesso:
    def test_full_item(self):
        processo = normalize_processo(make_processo())
        assert processo.numero == "0001234-56.2020.8.26.0100"
        assert processo.tribunal == "TJSP"
        assert processo.vara == "1ª Vara Cível de São Paulo"
        assert processo.classe == "Procedimento Comum Cível"
        assert processo.assunto == "Indenização por Dano Moral"
        assert processo.data_distribuicao == datetime(2020, 1, 15, tzinfo=timezone.utc)
        assert processo.valor_causa == Decimal("1500.50")
        assert processo.status == "ATIVO"
        assert [p.nome for p in processo.partes] == ["Maria da Silva", "Banco Exemplo S.A."]
        assert processo.movimentacoes == []

    def test_empty_item_defaults(self):
        before = datetime.now(timezone.utc)
        processo = normalize_processo({}, numero="0009999-00.2021.8.26.0100")
        after = datetime.now(timezone.utc)

        assert processo.numero == "0009999-00.2021.8.26.0100"
        assert processo.tribunal == "Desconhecido"
        assert processo.vara == "Desconhecida"
        assert processo.classe == "Sem classe"
        assert processo.assunto == "Sem assunto"
        assert before <= processo.data_distribuicao <= after
        assert processo.valor_causa == Decimal(0)
        assert processo.status == "ATIVO"
        assert processo.partes == []

    def test_numero_from_body_wins(self):
        processo = normalize_processo(make_processo(), numero="outro")
        assert processo.numero == "0001234-56.2020.8.26.0100"

    def test_listing_item_without_numero(self):
        assert normalize_processo(make_processo(numero_cnj=None)).numero == ""

    def test_tribunal_from_estado_origem(self):
        item = make_processo(unidade_origem={"nome": "Vara X"})
        assert normalize_processo(item).tribunal == "SP"

    def test_tribunal_without_unidade(self):
        item = make_processo(unidade_origem=None)
        processo = normalize_processo(item)
        assert processo.tribunal == "SP"
        assert processo.vara == "Desconhecida"

    def test_data_falls_back_to_data_inicio(self):
        fonte = make_fonte(capa={"classe": "X", "data_distribuicao": None})
        processo = normalize_processo(make_processo(fontes=[fonte]))
        assert processo.data_distribuicao == datetime(2019, 12, 1, tzinfo=timezone.utc)

    def test_unparsable_data_falls_through_chain(self):
        fonte = make_fonte(capa={"data_distribuicao": "sem data"})
        processo = normalize_processo(make_processo(fontes=[fonte], data_inicio="2018-07-20"))
        assert processo.data_distribuicao == datetime(2018, 7, 20, tzinfo=timezone.utc)

    def test_no_date_anywhere_is_now(self):
        fonte = make_fonte(capa={})
        processo = normalize_processo(make_processo(fontes=[fonte], data_inicio=None))
        assert datetime.now(timezone.utc) - processo.data_distribuicao < timedelta(minutes=1)

    def test_valor_causa_defaults(self):
        for valor_causa in (None, {}, {"valor": None}, {"valor": "abc"}, {"valor": "-5"}, "n/d"):
            fonte = make_fonte(capa={"valor_causa": valor_causa})
            processo = normalize_processo(make_processo(fontes=[fonte]))
            assert processo.valor_causa == Decimal(0), valor_causa

    def test_cover_only_from_first_fonte(self):
        primeira = make_fonte([make_envolvido("Autor Primeira")])
        segunda = make_fonte(
            [make_envolvido("Réu Segunda", polo="PASSIVO")],
            capa={
                "classe": "Apelação",
                "assunto": "Outro",
                "situacao": "INATIVO",
                "data_distribuicao": "2022-02-02",
                "valor_causa": {"valor": "99"},
            },
        )
        processo = normalize_processo(make_processo(fontes=[primeira, segunda]))

        assert processo.classe == "Procedimento Comum Cível"
        assert processo.assunto == "Indenização por Dano Moral"
        assert processo.status == "ATIVO"
        assert processo.valor_causa == Decimal("1500.50")
        assert processo.data_distribuicao == datetime(2020, 1, 15, tzinfo=timezone.utc)
        assert [p.nome for p in processo.partes] == ["Autor Primeira", "Réu Segunda"]

    def test_first_fonte_without_capa(self):
        primeira = make_fonte(capa=None)
        segunda = make_fonte(capa={"classe": "Apelação"})
        processo = normalize_processo(make_processo(fontes=[primeira, segunda]))
        assert processo.classe == "Sem classe"

    def test_situacao_kept_verbatim(self):
        fonte = make_fonte(capa={"situacao": "Arquivado"})
        assert normalize_processo(make_processo(fontes=[fonte])).status == "Arquivado"

    def test_numeric_cover_fields_and_epoch_date(self):
        fonte = make_fonte(capa={"classe": 7, "assunto": 10433, "data_distribuicao": 1579046400000})
        processo = normalize_processo(make_processo(fontes=[fonte]))
        assert processo.classe == "7"
        assert processo.assunto == "10433"
        assert processo.data_distribuicao == datetime(2020, 1, 15, tzinfo=timezone.utc)


class TestFirstPresent:
    def test_skips_empty_values(self):
        assert first_present(None, "", "b", "c", default="z") == "b"

    def test_default(self):
        assert first_present(None, "", default="z") == "z"

    def test_strips_whitespace_before_choosing(self):
        assert first_present("   ", "\n", " b ", default="z") == "b"
        assert first_present("  ", default="z") == "z"
