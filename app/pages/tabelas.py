# app/pages/tabelas.py
"""Página Tabelas: catálogo de serviços e tabelas de preço (custo, venda e margem por serviço)."""
import pandas as pd
import streamlit as st

from app.components import tabela_tabular
from app.components.acesso import exigir_permissao
from app.components.paginacao import render_paginacao
from app.exceptions import AppError
from app.formatters import calcular_margem, formatar_moeda
from app.models.financeiro import TabelaPreco
from app.services import estado
from app.services.orcamentos import buscar_tabela
from app.services.tabelas_preco import (
    atualizar_preco,
    criar_tabela,
    filtrar_tabelas,
    linhas_editor,
    salvar_tabela,
)
from app.traducoes import ROTULOS_CATEGORIA_SERVICO, ROTULOS_TIPO_TABELA, rotulo
from app.utils import contem_texto

COL_CUSTO = "Custo (R$)"
COL_VENDA = "Venda (R$)"
_CAMPO_DA_COLUNA = {COL_CUSTO: "preco_custo", COL_VENDA: "preco_venda"}
_INDICADOR = {"prejuizo": "🔴 Prejuízo!", "baixa": "🟡 Baixa", "ok": "🟢"}


def _chave_edicao(tabela_id: str) -> str:
    return f"tabela_edicao_{tabela_id}"


def _tabela_em_edicao(tabela: TabelaPreco) -> TabelaPreco:
    return st.session_state.setdefault(_chave_edicao(tabela.id), tabela)


def _limpar_edicao(tabela_id: str) -> None:
    st.session_state.pop(_chave_edicao(tabela_id), None)
    for k in [k for k in st.session_state.keys() if str(k).startswith(f"editor_{tabela_id}_")]:
        del st.session_state[k]


def _aplicar_edicao(tabela_id: str, servico_ids: list, key_editor: str) -> None:
    """Callback do data_editor: leva as células alteradas para a tabela em edição."""
    tabela = st.session_state[_chave_edicao(tabela_id)]
    alteracoes = st.session_state[key_editor].get("edited_rows", {})
    try:
        for linha, colunas in alteracoes.items():
            for coluna, valor in colunas.items():
                if coluna in _CAMPO_DA_COLUNA:
                    tabela = atualizar_preco(tabela, servico_ids[int(linha)], _CAMPO_DA_COLUNA[coluna], valor)
    except AppError as e:
        st.session_state["tabelas_erro"] = e.message
        return
    st.session_state[_chave_edicao(tabela_id)] = tabela


def _tab_servicos() -> None:
    servicos = estado.obter(st.session_state, estado.CHAVE_SERVICOS)
    busca = st.text_input("🔍 Buscar serviço", key="tabelas_busca_servico", placeholder="Nome ou código")
    filtrados = [s for s in servicos if contem_texto(s.nome, busca) or contem_texto(s.codigo, busca)]
    if not filtrados:
        st.info("Nenhum serviço encontrado.")
        return
    pag = render_paginacao("tabelas_servicos", len(filtrados), 15)
    df = pd.DataFrame([
        {
            "Código": s.codigo,
            "Serviço": s.nome,
            "Categoria": rotulo(ROTULOS_CATEGORIA_SERVICO, s.categoria),
            "Preço Base": formatar_moeda(s.preco_base),
            "Status": "Ativo" if s.ativo else "Inativo",
        }
        for s in pag.fatia(filtrados)
    ])
    tabela_tabular(df)


def _nova_tabela(usuario, tabelas) -> None:
    with st.expander("➕ Nova Tabela", expanded=False):
        nome = st.text_input("Nome da tabela", key="nova_tabela_nome", placeholder="Ex: Convênio XYZ 2025")
        tipo = st.selectbox("Tipo", list(ROTULOS_TIPO_TABELA), format_func=lambda t: ROTULOS_TIPO_TABELA[t],
                            key="nova_tabela_tipo")
        if st.button("✅ Criar Tabela", key="btn_nova_tabela", type="primary"):
            try:
                nova = criar_tabela(nome, tipo, tabelas)
            except AppError as e:
                st.error(f"❌ {e.message}")
                return
            estado.substituir(st.session_state, estado.CHAVE_TABELAS, salvar_tabela(tabelas, nova, usuario))
            st.session_state["tabelas_msg"] = f"✅ Tabela {nova.nome} criada."
            st.session_state["tabela_selecionada"] = nova.id
            st.rerun()


def _editor(usuario, tabelas, tabela: TabelaPreco) -> None:
    servicos = estado.obter(st.session_state, estado.CHAVE_SERVICOS)
    em_edicao = _tabela_em_edicao(tabela)
    erro = st.session_state.pop("tabelas_erro", None)
    if erro:
        st.error(f"❌ {erro}")

    pag = render_paginacao(f"precos_{tabela.id}", len(servicos), 15)
    pagina = pag.fatia(servicos)
    linhas = linhas_editor(em_edicao, pagina)
    df = pd.DataFrame([
        {
            "Código": r["codigo"],
            "Serviço": r["servico"],
            "Categoria": rotulo(ROTULOS_CATEGORIA_SERVICO, r["categoria"]),
            COL_CUSTO: r["preco_custo"],
            COL_VENDA: r["preco_venda"],
            "Margem": f"{r['margem']:.1f}%",
            "": _INDICADOR[r["faixa"]],
        }
        for r in linhas
    ])
    key_editor = f"editor_{tabela.id}_{pag.pagina_atual}_{pag.itens_por_pagina}"
    st.data_editor(
        df,
        key=key_editor,
        use_container_width=True,
        hide_index=True,
        disabled=[c for c in df.columns if c not in _CAMPO_DA_COLUNA],
        column_config={
            COL_CUSTO: st.column_config.NumberColumn(COL_CUSTO, min_value=0.0, format="%.2f"),
            COL_VENDA: st.column_config.NumberColumn(COL_VENDA, min_value=0.0, format="%.2f"),
        },
        on_change=_aplicar_edicao,
        args=(tabela.id, [s.id for s in pagina], key_editor),
    )

    custo = sum(i.preco_custo for i in em_edicao.itens)
    venda = sum(i.preco_venda for i in em_edicao.itens)
    st.caption(f"{len(em_edicao.itens)} serviço(s) precificado(s) · Margem geral: {calcular_margem(custo, venda):.1f}%")

    col_salvar, col_descartar = st.columns(2)
    with col_salvar:
        if st.button("💾 Salvar Tabela", key=f"salvar_{tabela.id}", type="primary",
                     disabled=em_edicao == tabela):
            estado.substituir(st.session_state, estado.CHAVE_TABELAS, salvar_tabela(tabelas, em_edicao, usuario))
            _limpar_edicao(tabela.id)
            st.session_state["tabelas_msg"] = f"✅ Preços da tabela {tabela.nome} atualizados."
            st.rerun()
    with col_descartar:
        if st.button("↩️ Descartar alterações", key=f"descartar_{tabela.id}", disabled=em_edicao == tabela):
            _limpar_edicao(tabela.id)
            st.rerun()


def _tab_tabelas(usuario) -> None:
    tabelas = estado.obter(st.session_state, estado.CHAVE_TABELAS)
    _nova_tabela(usuario, tabelas)

    busca = st.text_input("🔍 Buscar tabela", key="tabelas_busca_tabela")
    filtradas = filtrar_tabelas(tabelas, busca)
    df = pd.DataFrame([
        {
            "Tabela": t.nome,
            "Tipo": rotulo(ROTULOS_TIPO_TABELA, t.tipo),
            "Serviços": len(t.itens),
            "Margem": f"{calcular_margem(sum(i.preco_custo for i in t.itens), sum(i.preco_venda for i in t.itens)):.1f}%",
        }
        for t in filtradas
    ])
    tabela_tabular(df, empty_message="Nenhuma tabela encontrada.")
    if not filtradas:
        return

    ids = [t.id for t in filtradas]
    atual = st.session_state.get("tabela_selecionada")
    tabela_id = st.selectbox(
        "Editar preços da tabela",
        ids,
        index=ids.index(atual) if atual in ids else 0,
        format_func=lambda i: buscar_tabela(tabelas, i).nome,
    )
    st.session_state["tabela_selecionada"] = tabela_id
    st.markdown(f"### {buscar_tabela(tabelas, tabela_id).nome}")
    _editor(usuario, tabelas, buscar_tabela(tabelas, tabela_id))


def render_tabelas():
    st.title("💲 Tabelas & Configurações")
    usuario = exigir_permissao("manage", "finances")

    msg = st.session_state.pop("tabelas_msg", None)
    if msg:
        st.success(msg)

    tab_serv, tab_tab = st.tabs(["📋 Catálogo de Serviços", "💲 Tabelas de Preços"])
    with tab_serv:
        _tab_servicos()
    with tab_tab:
        _tab_tabelas(usuario)
