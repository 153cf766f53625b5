# app/pages/cadastros.py
"""Página Cadastros: notificações, profissionais e serviços."""
import pandas as pd
import streamlit as st

from app.components import tabela_tabular
from app.components.acesso import exigir_permissao, pode
from app.components.formularios import (
    aplicar_alteracao,
    render_formulario_notificacao,
    render_formulario_profissional,
    render_formulario_servico,
)
from app.exceptions import AppError
from app.formatters import formatar_data_hora, formatar_moeda, formatar_telefone
from app.services import estado
from app.services.cadastros import adicionar_registro, montar_notificacao, montar_profissional, montar_servico
from app.traducoes import (
    ROTULOS_CATEGORIA_NOTIFICACAO,
    ROTULOS_CATEGORIA_SERVICO,
    ROTULOS_PAPEL,
    ROTULOS_STATUS,
    ROTULOS_TIPO_NOTIFICACAO,
    rotulo,
)
from app.utils import contem_texto


def _dados_form(chave: str) -> dict:
    return st.session_state.setdefault(f"{chave}_dados", {})


def _on_change(chave: str):
    def _atualizar(campo, valor):
        st.session_state[f"{chave}_dados"] = aplicar_alteracao(_dados_form(chave), campo, valor)
    return _atualizar


def _limpar_form(chave: str) -> None:
    for k in [k for k in st.session_state.keys() if str(k).startswith(f"{chave}_")]:
        del st.session_state[k]


def _salvar(chave_estado: str, chave_form: str, montar, entidade: str, descricao, usuario) -> None:
    registros = estado.obter(st.session_state, chave_estado)
    try:
        novo = montar(_dados_form(chave_form), registros)
    except AppError as e:
        st.error(f"❌ {e.message}" + (f" ({e.details})" if e.details else ""))
        return
    estado.substituir(
        st.session_state,
        chave_estado,
        adicionar_registro(registros, novo, usuario, entidade, descricao(novo)),
    )
    _limpar_form(chave_form)
    st.session_state["cadastros_msg"] = f"✅ {entidade} {novo.id} cadastrado(a) com sucesso!"
    st.rerun()


def _tab_notificacoes(usuario) -> None:
    st.subheader("Notificações")
    if pode(usuario, "manage", "roles"):
        with st.expander("➕ Nova Notificação", expanded=False):
            render_formulario_notificacao(_dados_form("form_notif"), _on_change("form_notif"), chave="form_notif")
            if st.button("📨 Enviar Notificação", type="primary", key="btn_salvar_notif"):
                _salvar(estado.CHAVE_NOTIFICACOES, "form_notif", montar_notificacao, "Notification",
                        lambda n: f"Criou notificação: {n.titulo}", usuario)

    notificacoes = estado.obter(st.session_state, estado.CHAVE_NOTIFICACOES)
    df = pd.DataFrame([
        {
            "Título": n.titulo,
            "Tipo": rotulo(ROTULOS_TIPO_NOTIFICACAO, n.tipo),
            "Categoria": rotulo(ROTULOS_CATEGORIA_NOTIFICACAO, n.categoria),
            "Mensagem": n.mensagem,
            "Criada em": formatar_data_hora(n.criada_em),
            "Lida": "Sim" if n.lida else "Não",
        }
        for n in notificacoes
    ])
    nao_lidas = sum(1 for n in notificacoes if not n.lida)
    tabela_tabular(df, caption=f"Total: {len(notificacoes)} · Não lidas: {nao_lidas}",
                   empty_message="Nenhuma notificação.")


def _tab_profissionais(usuario) -> None:
    st.subheader("Profissionais")
    if pode(usuario, "manage", "professionals"):
        with st.expander("➕ Novo Profissional", expanded=False):
            render_formulario_profissional(_dados_form("form_prof"), _on_change("form_prof"), chave="form_prof")
            if st.button("✅ Cadastrar Profissional", type="primary", key="btn_salvar_prof"):
                _salvar(estado.CHAVE_PROFISSIONAIS, "form_prof", montar_profissional, "Professional",
                        lambda p: f"Cadastrou profissional: {p.nome}", usuario)

    busca = st.text_input("🔍 Buscar profissional", key="busca_prof", placeholder="Nome ou nº do conselho")
    profissionais = [
        p for p in estado.obter(st.session_state, estado.CHAVE_PROFISSIONAIS)
        if contem_texto(p.nome, busca) or contem_texto(p.numero_conselho, busca)
    ]
    df = pd.DataFrame([
        {
            "id": p.id,
            "Nome": p.nome,
            "Categoria": rotulo(ROTULOS_PAPEL, p.papel),
            "Conselho": p.numero_conselho,
            "Telefone": formatar_telefone(p.telefone),
            "Email": p.email,
            "Status": rotulo(ROTULOS_STATUS, p.status),
        }
        for p in profissionais
    ])
    tabela_tabular(df, caption=f"Total: {len(profissionais)} profissional(is)", drop_colunas="id",
                   empty_message="Nenhum profissional encontrado.")


def _tab_servicos(usuario) -> None:
    st.subheader("Serviços")
    if pode(usuario, "manage", "services"):
        with st.expander("➕ Novo Serviço", expanded=False):
            render_formulario_servico(_dados_form("form_serv"), _on_change("form_serv"), chave="form_serv")
            if st.button("✅ Cadastrar Serviço", type="primary", key="btn_salvar_serv"):
                _salvar(estado.CHAVE_SERVICOS, "form_serv", montar_servico, "Service",
                        lambda s: f"Cadastrou serviço: {s.codigo} - {s.nome}", usuario)

    servicos = estado.obter(st.session_state, estado.CHAVE_SERVICOS)
    df = pd.DataFrame([
        {
            "Código": s.codigo,
            "Serviço": s.nome,
            "Categoria": rotulo(ROTULOS_CATEGORIA_SERVICO, s.categoria),
            "Preço Base": formatar_moeda(s.preco_base),
            "Ativo": "✅" if s.ativo else "—",
        }
        for s in servicos
    ])
    tabela_tabular(df, caption=f"Total: {len(servicos)} serviço(s)", empty_message="Nenhum serviço cadastrado.")


def render_cadastros():
    st.title("🏢 Cadastros")
    usuario = exigir_permissao("view", "professionals")

    msg = st.session_state.pop("cadastros_msg", None)
    if msg:
        st.success(msg)

    tab_notif, tab_prof, tab_serv = st.tabs(["🔔 Notificações", "👥 Profissionais", "🛠️ Serviços"])
    with tab_notif:
        _tab_notificacoes(usuario)
    with tab_prof:
        _tab_profissionais(usuario)
    with tab_serv:
        _tab_servicos(usuario)
