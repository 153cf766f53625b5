# Tela: Detalhe do profissional
from typing import Optional

import streamlit as st

from app.components import metricas_linha
from app.components.acesso import exigir_permissao
from app.exceptions import RegistroNaoEncontradoError
from app.formatters import formatar_telefone
from app.models.comum import Profissional
from app.services import estado
from app.services.autorizacao import papel_do_usuario
from app.traducoes import ROTULOS_PAPEL, ROTULOS_STATUS, rotulo


def _selecionar_profissional() -> Optional[str]:
    profissionais = estado.obter(st.session_state, estado.CHAVE_PROFISSIONAIS)
    nomes = {p.id: f"{p.nome} ({rotulo(ROTULOS_PAPEL, p.papel)})" for p in profissionais}
    escolhido = st.selectbox("Profissional", [""] + list(nomes),
                             format_func=lambda i: nomes.get(i, "Selecione o profissional..."),
                             key="detalhe_prof_sel")
    if escolhido:
        st.query_params["id"] = escolhido
    return escolhido or None


def _render_profissional(prof: Profissional) -> None:
    st.subheader(prof.nome)
    st.caption(prof.id)
    papel_acesso = papel_do_usuario(prof.id)
    metricas_linha([
        ("Categoria", rotulo(ROTULOS_PAPEL, prof.papel)),
        ("Status", rotulo(ROTULOS_STATUS, prof.status)),
        ("Perfil de acesso", papel_acesso.nome if papel_acesso else "Sem perfil"),
    ])
    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**Nº Conselho:** {prof.numero_conselho or '—'}")
        st.markdown(f"**Telefone:** {formatar_telefone(prof.telefone) if prof.telefone else '—'}")
    with col2:
        st.markdown(f"**Email:** {prof.email or '—'}")


def render_profissional_detalhe():
    st.title("👤 Profissional")
    exigir_permissao("view", "professionals")

    prof_id = st.query_params.get("id") or _selecionar_profissional()
    if not prof_id:
        st.info("Selecione um profissional para ver os detalhes.")
        return

    try:
        prof = estado.buscar_profissional(st.session_state, prof_id)
    except RegistroNaoEncontradoError as e:
        st.error(f"❌ {e.message}")
        if st.button("Escolher outro profissional"):
            st.query_params.clear()
            st.rerun()
        return

    _render_profissional(prof)
