# Componente: bloqueio de página por permissão do usuário da sessão
import streamlit as st

from app.services.autorizacao import tem_permissao
from app.services.sessao import UsuarioAtual, obter_usuario_atual


def exigir_permissao(acao: str, entidade: str) -> UsuarioAtual:
    """Devolve o usuário da sessão; sem permissão mostra o aviso e interrompe a página."""
    usuario = obter_usuario_atual(st.session_state)
    if not tem_permissao(usuario.id, acao, entidade):
        st.error("❌ Acesso Negado")
        st.warning(f"⚠️ {usuario.nome} não tem permissão para acessar este módulo")
        st.info("💡 Contate o administrador se precisar de acesso")
        st.stop()
    return usuario


def pode(usuario: UsuarioAtual, acao: str, entidade: str) -> bool:
    return tem_permissao(usuario.id, acao, entidade)
