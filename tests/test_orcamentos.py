"""
Testes do serviço de orçamentos: rascunho, totais, aditivos e gravação.
"""

from datetime import date

import pytest

from app.exceptions import ValidacaoError
from app.models import ItemOrcamento, Orcamento
from app.services.orcamentos import (
    RascunhoOrcamento,
    calcular_totais,
    descricao_log,
    finalizar_rascunho,
    gerar_aditivo,
    orcamentos_do_paciente,
    salvar_orcamento,
)

HOJE = date(2024, 6, 1)


def _rascunho_com_itens(tabelas, paciente="maria DA silva"):
    rascunho = RascunhoOrcamento(paciente_nome=paciente, paciente_id="pac-1")
    rascunho.selecionar_tabela("t1")
    t1 = tabelas[0]
    primeiro = rascunho.adicionar_item(t1.itens[0].servico_id, tabelas)
    rascunho.adicionar_item(t1.itens[1].servico_id, tabelas)
    rascunho.atualizar_quantidade(primeiro.id, 3)
    return rascunho


class TestRascunho:
    """Montagem do orçamento antes de finalizar."""

    def test_item_exige_tabela(self, tabelas):
        with pytest.raises(ValidacaoError):
            RascunhoOrcamento().adicionar_item("s1", tabelas)

    def test_preco_vem_da_tabela(self, tabelas):
        rascunho = RascunhoOrcamento(tabela_id="t2")
        ref = tabelas[1].itens[0]
        item = rascunho.adicionar_item(ref.servico_id, tabelas)
        assert item.preco_unitario == ref.preco_venda
        assert item.quantidade == 1

    def test_servico_fora_da_tabela_custa_zero(self, tabelas):
        rascunho = RascunhoOrcamento(tabela_id="t1")
        item = rascunho.adicionar_item("servico-inexistente", tabelas)
        assert item.preco_unitario == 0
        assert rascunho.total == 0

    def test_quantidade_recalcula_total(self, tabelas):
        rascunho = _rascunho_com_itens(tabelas)
        t1 = tabelas[0]
        esperado = 3 * t1.itens[0].preco_venda + t1.itens[1].preco_venda
        assert rascunho.total == pytest.approx(esperado)

    def test_trocar_tabela_descarta_itens(self, tabelas):
        rascunho = _rascunho_com_itens(tabelas)
        assert rascunho.selecionar_tabela("t2") is True
        assert rascunho.itens == []
        assert rascunho.selecionar_tabela("t2") is False

    def test_remover_item(self, tabelas):
        rascunho = _rascunho_com_itens(tabelas)
        rascunho.remover_item(rascunho.itens[0].id)
        assert len(rascunho.itens) == 1


class TestFinalizar:
    """Rascunho vira orçamento versão 1."""

    def test_gera_original(self, tabelas):
        orc = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)
        assert orc.versao == 1
        assert orc.tipo == "original"
        assert orc.status == "draft"
        assert orc.paciente_nome == "Maria da Silva"
        assert orc.criado_em == "2024-06-01"
        assert orc.valor_total > orc.custo_total > 0

    @pytest.mark.parametrize("ajuste", ["sem_paciente", "sem_tabela"])
    def test_incompleto(self, tabelas, ajuste):
        rascunho = _rascunho_com_itens(tabelas)
        if ajuste == "sem_paciente":
            rascunho.paciente_nome = "   "
        else:
            rascunho.tabela_id = ""
        with pytest.raises(ValidacaoError):
            finalizar_rascunho(rascunho, tabelas, hoje=HOJE)

    def test_sem_itens_gera_orcamento_zerado(self, tabelas):
        rascunho = RascunhoOrcamento(paciente_nome="Maria", tabela_id="t1")
        orc = finalizar_rascunho(rascunho, tabelas, hoje=HOJE)
        assert orc.itens == []
        assert orc.valor_total == 0
        assert orc.custo_total == 0

    def test_servicos_fora_da_tabela(self, tabelas):
        rascunho = RascunhoOrcamento(paciente_nome="Maria", tabela_id="t1")
        rascunho.adicionar_item("servico-inexistente", tabelas)
        orc = finalizar_rascunho(rascunho, tabelas, hoje=HOJE)
        assert orc.valor_total == 0
        assert len(orc.itens) == 1


class TestTotais:
    """Valor e custo a partir da tabela aplicada."""

    def test_custo_pela_tabela(self, tabelas):
        t1 = tabelas[0]
        ref = t1.itens[0]
        itens = [ItemOrcamento(id="i1", servico_id=ref.servico_id, quantidade=2,
                               preco_unitario=ref.preco_venda, total=2 * ref.preco_venda)]
        valor, custo = calcular_totais(itens, t1)
        assert valor == pytest.approx(2 * ref.preco_venda)
        assert custo == pytest.approx(2 * ref.preco_custo)

    def test_sem_tabela(self):
        itens = [ItemOrcamento(id="i1", servico_id="s1", quantidade=1, preco_unitario=10, total=10)]
        assert calcular_totais(itens, None) == (10, 0.0)


class TestAditivo:
    """Nova versão na cadeia do paciente."""

    def test_incrementa_maior_versao(self, tabelas):
        original = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)
        v2 = gerar_aditivo(original, [original], hoje=HOJE)
        # aditivo gerado a partir da v1 quando já existe v2: vira v3
        v3 = gerar_aditivo(original, [v2, original], hoje=HOJE)
        assert (v2.versao, v2.tipo) == (2, "aditivo")
        assert v3.versao == 3
        assert v3.orcamento_origem_id == original.id

    def test_prorrogacao(self, tabelas):
        original = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)
        novo = gerar_aditivo(original, [original], prorrogacao=True, hoje=HOJE)
        assert novo.tipo == "prorrogacao"

    def test_clona_itens_com_novos_ids(self, tabelas):
        original = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)
        novo = gerar_aditivo(original, [original], hoje=HOJE)
        assert [i.servico_id for i in novo.itens] == [i.servico_id for i in original.itens]
        assert not {i.id for i in novo.itens} & {i.id for i in original.itens}
        assert novo.valor_total == original.valor_total

    def test_cadeia_de_outro_paciente_nao_conta(self, tabelas):
        original = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)
        outro = Orcamento.criar(versao=7, id="orc-x", paciente_id="pac-99", paciente_nome="Outro",
                                tabela_id="t1", criado_em="2024-01-01")
        assert gerar_aditivo(original, [outro, original], hoje=HOJE).versao == 2

    def test_cadeia_por_nome_sem_id(self):
        a = Orcamento.criar(versao=1, id="a", paciente_nome="José Souza", tabela_id="t1", criado_em="2024-01-01")
        b = Orcamento.criar(versao=1, id="b", paciente_nome="JOSE  souza", tabela_id="t1", criado_em="2024-01-01")
        assert orcamentos_do_paciente([a, b], "José Souza") == [a, b]


class TestSalvar:
    """Novo orçamento entra no topo e gera auditoria com o usuário da sessão."""

    def test_insere_no_topo_sem_alterar_lista(self, tabelas, usuario, registrador):
        antigos = [
            Orcamento.criar(versao=1, id=f"orc-{i}", paciente_nome="P", tabela_id="t1", criado_em="2024-01-01")
            for i in range(3)
        ]
        copia = list(antigos)
        novo = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)

        lista = salvar_orcamento(antigos, novo, usuario, registrar=registrador)

        assert lista[0] is novo
        assert lista[1:] == copia
        assert antigos == copia

    def test_auditoria(self, tabelas, usuario, registrador):
        novo = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)
        salvar_orcamento([], novo, usuario, registrar=registrador)

        (chamada,) = registrador.chamadas
        assert chamada["usuario"] == usuario
        assert chamada["acao"] == "create"
        assert chamada["entidade"] == "Budget"
        assert chamada["descricao"] == "Gerou novo orçamento (PAD) para: Maria da Silva"
        assert chamada["entidade_id"] == novo.id
        assert chamada["metadados"]["versao"] == 1

    def test_descricao_aditivo(self, tabelas):
        original = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)
        novo = gerar_aditivo(original, [original], hoje=HOJE)
        assert descricao_log(novo) == "Gerou aditivo v2 do orçamento (PAD) para: Maria da Silva"

    def test_grava_no_banco_por_padrao(self, tabelas, usuario):
        from app.services.auditoria import listar_logs

        novo = finalizar_rascunho(_rascunho_com_itens(tabelas), tabelas, hoje=HOJE)
        salvar_orcamento([], novo, usuario)

        (registro,) = listar_logs()
        assert registro.usuario_id == "prof-2"
        assert registro.entidade_id == novo.id
