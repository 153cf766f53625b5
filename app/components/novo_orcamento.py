# Componente: montagem de orçamento (paciente, tabela de preço, serviços e quantidades)
from typing import Callable, List, Optional

import streamlit as st

from app.exceptions import ValidacaoError
from app.formatters import formatar_moeda
from app.models.administrativo import Paciente, Servico
from app.models.financeiro import Orcamento, TabelaPreco
from app.services.orcamentos import RascunhoOrcamento, finalizar_rascunho
from app.traducoes import ROTULOS_TIPO_TABELA, rotulo

SEM_TABELA = ""


def obter_rascunho(chave: str) -> RascunhoOrcamento:
    key = f"rascunho_{chave}"
    if key not in st.session_state:
        st.session_state[key] = RascunhoOrcamento()
    return st.session_state[key]


def descartar_rascunho(chave: str) -> None:
    st.session_state.pop(f"rascunho_{chave}", None)


def render_novo_orcamento(
    pacientes: List[Paciente],
    tabelas: List[TabelaPreco],
    servicos: List[Servico],
    on_salvar: Callable[[Orcamento], None],
    chave: str = "novo_orcamento",
) -> None:
    """
    Formulário 'Novo Orçamento'. Trocar a tabela com itens já lançados descarta os itens.
    Ao finalizar, o orçamento (v1, original, rascunho) vai para on_salvar.
    """
    rascunho = obter_rascunho(chave)

    nomes = [p.nome for p in pacientes]
    col_pac, col_tab = st.columns(2)
    with col_pac:
        nome = st.selectbox(
            "Paciente",
            [""] + nomes,
            index=(nomes.index(rascunho.paciente_nome) + 1) if rascunho.paciente_nome in nomes else 0,
            key=f"{chave}_paciente",
            format_func=lambda n: n or "Selecione o paciente...",
        )
        paciente: Optional[Paciente] = next((p for p in pacientes if p.nome == nome), None)
        rascunho.paciente_nome = nome
        rascunho.paciente_id = paciente.id if paciente else None
    with col_tab:
        ids_tabelas = [SEM_TABELA] + [t.id for t in tabelas]
        rotulos = {t.id: f"{t.nome} ({rotulo(ROTULOS_TIPO_TABELA, t.tipo)})" for t in tabelas}
        tabela_id = st.selectbox(
            "Tabela de Preço",
            ids_tabelas,
            index=ids_tabelas.index(rascunho.tabela_id) if rascunho.tabela_id in ids_tabelas else 0,
            key=f"{chave}_tabela",
            format_func=lambda t: rotulos.get(t, "Selecione a tabela..."),
        )
        if rascunho.selecionar_tabela(tabela_id):
            st.warning("Itens removidos: os preços dependem da tabela selecionada.")

    servicos_ativos = [s for s in servicos if s.ativo]
    nomes_servicos = {s.id: f"{s.codigo} - {s.nome}" for s in servicos}
    col_serv, col_add = st.columns([3, 1])
    with col_serv:
        servico_id = st.selectbox(
            "Adicionar serviço",
            [s.id for s in servicos_ativos],
            format_func=lambda s: nomes_servicos.get(s, s),
            key=f"{chave}_servico",
            disabled=not rascunho.tabela_id,
        )
    with col_add:
        st.write("")
        if st.button("➕ Adicionar", key=f"{chave}_add", disabled=not rascunho.tabela_id):
            try:
                rascunho.adicionar_item(servico_id, tabelas)
            except ValidacaoError as e:
                st.error(e.message)

    if not rascunho.itens:
        st.caption("Nenhum serviço adicionado.")
    for item in list(rascunho.itens):
        c1, c2, c3, c4 = st.columns([4, 2, 2, 1])
        with c1:
            st.write(nomes_servicos.get(item.servico_id, item.servico_id))
            st.caption(f"Unitário: {formatar_moeda(item.preco_unitario)}")
        with c2:
            qtd = st.number_input("Qtd.", min_value=1, step=1, value=item.quantidade,
                                  key=f"{chave}_qtd_{item.id}", label_visibility="collapsed")
            if qtd != item.quantidade:
                rascunho.atualizar_quantidade(item.id, int(qtd))
        with c3:
            st.write(formatar_moeda(item.quantidade * item.preco_unitario))
        with c4:
            if st.button("🗑️", key=f"{chave}_del_{item.id}", help="Remover item"):
                rascunho.remover_item(item.id)
                st.rerun()

    st.markdown(f"**Total do orçamento:** {formatar_moeda(rascunho.total)}")

    if st.button("💾 Gerar Orçamento", key=f"{chave}_salvar", type="primary"):
        try:
            orcamento = finalizar_rascunho(rascunho, tabelas)
        except ValidacaoError as e:
            st.error(e.message)
            return
        descartar_rascunho(chave)
        on_salvar(orcamento)
