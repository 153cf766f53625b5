"""
Testes dos dados de demonstração e do estado da sessão.
"""

from datetime import date

import pytest

from app.exceptions import RegistroNaoEncontradoError
from app.services import dados_iniciais, estado


class TestDadosIniciais:
    def test_quantidades(self):
        assert len(dados_iniciais.gerar_pacientes()) == 150
        assert len(dados_iniciais.gerar_profissionais()) == 80
        assert len(dados_iniciais.gerar_servicos()) == 25
        assert len(dados_iniciais.gerar_tabelas_preco()) == 9

    def test_admin_na_primeira_posicao(self):
        assert dados_iniciais.gerar_profissionais()[0].id == "prof-admin"

    def test_cpf_e_telefone(self):
        for p in dados_iniciais.gerar_pacientes(30):
            assert len(p.cpf) == 11 and p.cpf.isdigit()
            for c in p.contatos:
                assert len(c.telefone) == 11

    def test_orcamentos_respeitam_versao(self, pacientes, tabelas):
        orcamentos = dados_iniciais.gerar_orcamentos(pacientes, tabelas, 30, hoje=date(2024, 6, 1))
        assert len(orcamentos) == 30
        assert all((o.tipo == "original") == (o.versao == 1) for o in orcamentos)
        assert orcamentos[0].criado_em == "2024-06-01"
        ids_tabelas = {t.id for t in tabelas}
        assert all(o.tabela_id in ids_tabelas for o in orcamentos)

    def test_cadeia_por_paciente(self, pacientes, tabelas):
        orcamentos = dados_iniciais.gerar_orcamentos(pacientes, tabelas, 30, hoje=date(2024, 6, 1))
        por_id = {o.id: o for o in orcamentos}
        por_paciente = {}
        for o in orcamentos:
            por_paciente.setdefault(o.paciente_id, []).append(o)
        for cadeia in por_paciente.values():
            cadeia.sort(key=lambda o: o.criado_em)
            assert [o.versao for o in cadeia] == list(range(1, len(cadeia) + 1))
            assert cadeia[0].tipo == "original"
            assert cadeia[0].orcamento_origem_id is None
            for anterior, atual in zip(cadeia, cadeia[1:]):
                assert atual.orcamento_origem_id == anterior.id
                assert atual.tabela_id == anterior.tabela_id
                assert por_id[atual.orcamento_origem_id] is anterior
                servicos_anteriores = [i.servico_id for i in anterior.itens]
                assert [i.servico_id for i in atual.itens][:len(servicos_anteriores)] == servicos_anteriores

    def test_padrao_cem_orcamentos_sem_versao_repetida(self):
        pacientes = dados_iniciais.gerar_pacientes()
        orcamentos = dados_iniciais.gerar_orcamentos(pacientes, dados_iniciais.gerar_tabelas_preco())
        assert len(orcamentos) == 100
        pares = [(o.paciente_id, o.versao) for o in orcamentos]
        assert len(pares) == len(set(pares))
        assert {o.tipo for o in orcamentos} == {"original", "aditivo", "prorrogacao"}

    def test_tabelas_so_com_servicos_ativos(self, servicos, tabelas):
        ativos = {s.id for s in servicos if s.ativo}
        assert all(i.servico_id in ativos for t in tabelas for i in t.itens)


class TestEstado:
    def test_carrega_uma_vez(self):
        sessao = {}
        estado.carregar_dados(sessao)
        pacientes = sessao[estado.CHAVE_PACIENTES]
        estado.carregar_dados(sessao)
        assert sessao[estado.CHAVE_PACIENTES] is pacientes
        assert len(estado.obter(sessao, estado.CHAVE_ORCAMENTOS)) == 100

    def test_buscar(self):
        sessao = {}
        assert estado.buscar_paciente(sessao, "pac-3").id == "pac-3"
        assert estado.buscar_profissional(sessao, "prof-admin").papel == "admin"

    def test_nao_encontrado(self):
        with pytest.raises(RegistroNaoEncontradoError):
            estado.buscar_paciente({}, "pac-999")

    def test_proximo_id(self):
        class R:
            def __init__(self, id):
                self.id = id

        assert estado.proximo_id("not", [R("not-2"), R("not-10"), R("outro")]) == "not-11"
        assert estado.proximo_id("s", [R("s9"), R("s25")], separador="") == "s26"
        assert estado.proximo_id("x", []) == "x-1"
