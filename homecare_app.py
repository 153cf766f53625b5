# Homecare - Sistema de Gestão de Atenção Domiciliar
# Execute com: streamlit run homecare_app.py
import importlib
import logging

import streamlit as st

# ============================================================
# CONFIGURAÇÃO DA PÁGINA E DESIGN (primeiro comando Streamlit)
# ============================================================
st.set_page_config(
    page_title="Homecare - Gestão de Atenção Domiciliar",
    page_icon="🏥",
    layout="wide",
    initial_sidebar_state="expanded",
)

from app.config import CSS_GLOBAL, VERSAO_DEPLOY
from app.exceptions import AppError
from app.menu import get_menu_labels, item_do_menu
from app.services import estado
from app.services.autorizacao import inicializar_autorizacao, papel_do_usuario
from app.services.sessao import CHAVE_SESSAO, UsuarioAtual, obter_usuario_atual
from app.traducoes import ROTULOS_PAPEL, rotulo

logger = logging.getLogger("app.main")

st.markdown(CSS_GLOBAL, unsafe_allow_html=True)

# Banco (auditoria e papéis) e dados da sessão: uma vez por sessão
if not st.session_state.get("_inicializado"):
    try:
        inicializar_autorizacao()
    except AppError as e:
        st.error(f"❌ Falha ao preparar o banco: {e.message}")
        st.stop()
    estado.carregar_dados(st.session_state)
    st.session_state["_inicializado"] = True
    logger.info("Sessão iniciada (deploy %s)", VERSAO_DEPLOY)

# ============================================================================
# SIDEBAR: usuário da sessão e menu principal
# ============================================================================
st.sidebar.markdown("## 🏥 Homecare")
st.sidebar.markdown("*Gestão de Atenção Domiciliar*")
st.sidebar.markdown("---")

usuario = obter_usuario_atual(st.session_state)
profissionais = estado.obter(st.session_state, estado.CHAVE_PROFISSIONAIS)
ids = [p.id for p in profissionais]
nomes = {p.id: f"{p.nome} ({rotulo(ROTULOS_PAPEL, p.papel)})" for p in profissionais}
escolhido = st.sidebar.selectbox(
    "Usuário",
    ids,
    index=ids.index(usuario.id) if usuario.id in ids else 0,
    format_func=lambda i: nomes.get(i, i),
    key="sidebar_usuario",
)
if escolhido != usuario.id:
    prof = next(p for p in profissionais if p.id == escolhido)
    st.session_state[CHAVE_SESSAO] = UsuarioAtual.de_profissional(prof)
    logger.info("Usuário da sessão alterado para %s", escolhido)
    st.rerun()

papel = papel_do_usuario(usuario.id)
st.sidebar.caption(f"Perfil: {papel.nome if papel else 'Sem perfil de acesso'}")
st.sidebar.markdown("---")

menu_principal = st.sidebar.radio(
    "Navegação",
    get_menu_labels(),
    label_visibility="collapsed",
    key="menu_principal",
)
# Trocar de página descarta o id da rota anterior (?id=...)
if st.session_state.get("_menu_anterior") not in (None, menu_principal):
    st.query_params.clear()
st.session_state["_menu_anterior"] = menu_principal

st.sidebar.markdown("---")
st.sidebar.caption(f"Deploy: {VERSAO_DEPLOY}")

# ============================================================================
# DISPATCH: renderiza a página escolhida (menu centralizado em app.menu)
# ============================================================================
destino = item_do_menu(menu_principal)
if destino:
    module_path, function_name = destino
    try:
        mod = importlib.import_module(module_path)
        getattr(mod, function_name)()
    except AppError as e:
        logger.exception("Erro na página %s", menu_principal)
        st.error(f"❌ {e.message}")
        if e.details:
            with st.expander("Detalhes do erro"):
                st.code(e.details, language="text")
