# Tela: Trilha de auditoria (logs do sistema)
import json

import pandas as pd
import streamlit as st

from app.components import tabela_tabular
from app.components.acesso import exigir_permissao, pode
from app.components.paginacao import render_paginacao
from app.formatters import formatar_data_hora
from app.services.auditoria import entidades_registradas, limpar_logs, listar_logs
from app.traducoes import ROTULOS_ACAO_LOG, ROTULOS_PAPEL, rotulo
from app.utils import contem_texto

TODAS = "Todas"


def render_logs():
    st.title("📜 Logs do Sistema")
    st.caption("Trilha de auditoria: quem fez o quê e quando.")
    usuario = exigir_permissao("view", "logs")

    col_ent, col_busca = st.columns([1, 2])
    with col_ent:
        entidade = st.selectbox("Entidade", [TODAS] + entidades_registradas(), key="logs_entidade")
    with col_busca:
        busca = st.text_input("🔍 Buscar", key="logs_busca", placeholder="Usuário ou descrição")

    logs = listar_logs(entidade=None if entidade == TODAS else entidade)
    logs = [r for r in logs if contem_texto(r.usuario_nome, busca) or contem_texto(r.descricao, busca)]

    if not logs:
        st.info("Nenhum registro de auditoria.")
    else:
        pag = render_paginacao("logs", len(logs), 25)
        df = pd.DataFrame([
            {
                "Data/Hora": formatar_data_hora(r.timestamp),
                "Usuário": r.usuario_nome,
                "Papel": rotulo(ROTULOS_PAPEL, r.usuario_papel),
                "Ação": rotulo(ROTULOS_ACAO_LOG, r.acao),
                "Entidade": r.entidade,
                "ID": r.entidade_id or "—",
                "Descrição": r.descricao,
                "Detalhes": json.dumps(r.metadados, ensure_ascii=False) if r.metadados else "",
            }
            for r in pag.fatia(logs)
        ])
        tabela_tabular(df)

    if pode(usuario, "manage", "roles"):
        st.markdown("---")
        with st.expander("🗑️ Limpar trilha de auditoria"):
            st.warning("⚠️ Esta ação remove todos os registros de auditoria.")
            confirmar = st.checkbox("Confirmo que desejo apagar todos os registros", key="logs_confirmar")
            if st.button("Apagar registros", disabled=not confirmar, key="logs_limpar"):
                n = limpar_logs()
                st.success(f"✅ {n} registro(s) removido(s).")
                st.rerun()
