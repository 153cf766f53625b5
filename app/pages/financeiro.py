# app/pages/financeiro.py
"""Página Financeiro: orçamentos PAD (lista paginada, novo orçamento, aditivos)."""
import streamlit as st

from app.components import metricas_linha
from app.components.acesso import exigir_permissao, pode
from app.components.lista_orcamentos import render_lista_orcamentos
from app.components.novo_orcamento import render_novo_orcamento
from app.exceptions import AppError
from app.formatters import calcular_margem, formatar_moeda
from app.models.financeiro import Orcamento
from app.services import estado
from app.services.orcamentos import gerar_aditivo, salvar_orcamento


def _salvar(novo: Orcamento, usuario) -> None:
    orcamentos = estado.obter(st.session_state, estado.CHAVE_ORCAMENTOS)
    estado.substituir(st.session_state, estado.CHAVE_ORCAMENTOS, salvar_orcamento(orcamentos, novo, usuario))
    st.session_state["financeiro_msg"] = f"✅ Orçamento {novo.id.upper()} (v{novo.versao} - {novo.tipo}) salvo."
    st.rerun()


def render_financeiro():
    st.title("💰 Financeiro")
    usuario = exigir_permissao("view", "finances")
    pode_editar = pode(usuario, "manage", "finances")

    orcamentos = estado.obter(st.session_state, estado.CHAVE_ORCAMENTOS)
    tabelas = estado.obter(st.session_state, estado.CHAVE_TABELAS)
    servicos = estado.obter(st.session_state, estado.CHAVE_SERVICOS)
    pacientes = estado.obter(st.session_state, estado.CHAVE_PACIENTES)

    msg = st.session_state.pop("financeiro_msg", None)
    if msg:
        st.success(msg)

    (tab_orc,) = st.tabs(["🧮 Orçamentos (PAD)"])

    with tab_orc:
        aprovados = [o for o in orcamentos if o.status == "approved"]
        valor_aprovado = sum(o.valor_total for o in aprovados)
        custo_aprovado = sum(o.custo_total for o in aprovados)
        metricas_linha([
            ("Orçamentos", len(orcamentos)),
            ("Aprovados", len(aprovados)),
            ("Valor aprovado", formatar_moeda(valor_aprovado)),
            ("Margem média", f"{calcular_margem(custo_aprovado, valor_aprovado):.1f}%"),
        ])

        if pode_editar:
            with st.expander("➕ Novo Orçamento", expanded=False):
                try:
                    render_novo_orcamento(pacientes, tabelas, servicos, lambda o: _salvar(o, usuario))
                except AppError as e:
                    st.error(f"❌ {e.message}")

        def _aditivo(anterior: Orcamento) -> None:
            try:
                novo = gerar_aditivo(anterior, orcamentos)
            except AppError as e:
                st.error(f"❌ {e.message}")
                return
            _salvar(novo, usuario)

        st.subheader("Orçamentos")
        render_lista_orcamentos(
            orcamentos,
            tabelas,
            on_aditivo=_aditivo if pode_editar else None,
            nomes_servicos=estado.nomes_servicos(servicos),
        )
